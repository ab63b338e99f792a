# frame_loop.py
"""
Drives the simulation, one display refresh at a time.

Each tick runs to completion before the next one starts: window events
are applied first, then the surface is cleared, the simulation advances
and the new state is drawn. Stopping the loop simply means no further
tick is requested.
"""
import logging
from typing import Optional, TYPE_CHECKING

from renderer import Renderer

if TYPE_CHECKING:
    from simulation import Simulation
    from visualization import Visualizer


class FrameLoop:
    """
    Runs the clear, step, render sequence once per frame.
    """
    def __init__(
        self,
        simulation: "Simulation",
        visualizer: "Visualizer",
        renderer: Renderer,
        log_throttle: int = 100,
        max_frames: Optional[int] = None
    ):
        self.simulation = simulation
        self.visualizer = visualizer
        self.renderer = renderer
        self.log_throttle = max(int(log_throttle), 1)
        self.max_frames = max_frames
        self.frame_count = 0
        self.running = False

    def tick(self) -> bool:
        """
        Runs a single frame.

        Returns:
            bool: False if the visualizer asked to quit, True otherwise.
        """
        # Events land between frames, so the frame below sees a stable
        # pointer, surface size and population.
        if not self.visualizer.poll_events(self.simulation):
            return False

        self.visualizer.clear()
        self.simulation.step()
        self.renderer.render(self.visualizer.screen, self.simulation)
        self.visualizer.present()

        self.frame_count += 1
        if self.frame_count % self.log_throttle == 0:
            logging.info(f"Simulation frame {self.frame_count}")
            logging.debug(
                f"Frame {self.frame_count} | Average Speed: {self.simulation.average_speed():.4f}"
            )
        return True

    def run(self) -> int:
        """
        Ticks until stopped, the window is closed or max_frames is reached.

        Returns:
            int: The number of frames rendered.
        """
        self.running = True
        while self.running:
            if not self.tick():
                self.stop()
            elif self.max_frames is not None and self.frame_count >= self.max_frames:
                logging.info(f"Reached max_steps ({self.max_frames}). Stopping simulation.")
                self.stop()
        return self.frame_count

    def stop(self) -> None:
        """Stops requesting new frames."""
        self.running = False
