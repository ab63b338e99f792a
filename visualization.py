# visualization.py
"""
Handles the window, the input events and the frame pacing using Pygame.

The Visualizer is the thin platform layer around the simulation: it owns
the display surface, turns pointer motion and window resizes into calls
on the Simulation, and waits for the next display refresh.
"""
import logging
import pygame
from typing import Tuple, TYPE_CHECKING

from constants import BACKGROUND_COLOR, FPS, WINDOW_TITLE

# Forward reference for type hinting to avoid circular import
if TYPE_CHECKING:
    from simulation import Simulation


# --- Data Contracts ---
#
# class Visualizer:
#   - __init__(self, width: int, height: int, fullscreen: bool = False):
#     - Side Effects: Initializes Pygame and creates a display surface.
#
#   - poll_events(self, simulation: "Simulation") -> bool:
#     - Outputs: False if the user has quit, True otherwise.
#     - Side Effects: Updates the simulation's pointer state and resets
#       the simulation when the window is resized.
#
#   - clear(self) -> None / present(self) -> None:
#     - Side Effects: Fill the surface with the background color / show
#       the finished frame and wait for the next frame slot.

class Visualizer:
    """
    Owns the Pygame window the simulation is drawn into.
    """
    def __init__(self, width: int, height: int, fullscreen: bool = False):
        """
        Initializes Pygame and the display window.
        """
        pygame.init()

        if fullscreen:
            display_info = pygame.display.Info()
            width, height = display_info.current_w, display_info.current_h
            self.screen = pygame.display.set_mode((width, height), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)

        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        logging.info(f"Visualizer initialized with Pygame display ({width}x{height}).")

    @property
    def size(self) -> Tuple[int, int]:
        """Current dimensions of the drawing surface."""
        return self.screen.get_size()

    def poll_events(self, simulation: "Simulation") -> bool:
        """
        Applies pending window events to the simulation.

        Returns:
            bool: False if the simulation should exit, True otherwise.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logging.info("Quit event received. Shutting down visualizer.")
                return False

            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                logging.info("ESC key pressed. Shutting down visualizer.")
                return False

            if event.type == pygame.MOUSEMOTION:
                simulation.set_pointer(*event.pos)

            elif event.type == pygame.WINDOWLEAVE:
                simulation.clear_pointer()
                logging.debug("Pointer left the window.")

            elif event.type == pygame.VIDEORESIZE:
                # With RESIZABLE the display surface is replaced on resize.
                self.screen = pygame.display.get_surface()
                width, height = self.size
                simulation.resize(width, height)

        return True

    def clear(self) -> None:
        """Wipes the previous frame."""
        self.screen.fill(BACKGROUND_COLOR)

    def present(self) -> None:
        """Shows the finished frame and waits for the next one."""
        pygame.display.flip()
        self.clock.tick(FPS)

    def close(self):
        """Shuts down Pygame."""
        pygame.quit()
