# main.py
"""
Main entry point for the Particle Life simulation.

This script orchestrates the entire simulation lifecycle:
1. Loads configuration from `config.json`.
2. Initializes the logging system.
3. Opens the window and creates the particles and the force matrix.
4. Runs the frame loop until the window is closed.
5. Handles clean shutdown.
"""
import logging
from utils import setup_logging, load_config
import cProfile
import pstats
import io


def main():
    """
    The main function to run the simulation.
    """
    # Load configuration from the JSON file first.
    # Logging is not set up yet, so we use a print for this one error.
    try:
        config = load_config('config.json')
    except (OSError, ValueError) as e:
        print(f"FATAL: Could not load config.json. Error: {e}")
        return

    setup_logging(config)

    logging.info("--- Particle Life Simulation Starting ---")

    sim_params = config['simulation_parameters']
    run_params = config['run_control']
    vis_params = config['visualization']

    from constants import NUM_PARTICLES
    from particle import ParticleSystem, ParticleType
    from simulation import Simulation
    from renderer import Renderer
    from visualization import Visualizer
    from frame_loop import FrameLoop

    # --- Component Initialization ---
    # 1. The visualizer opens the window and so determines the surface size.
    visualizer = Visualizer(
        width=vis_params['window_width'],
        height=vis_params['window_height'],
        fullscreen=vis_params['fullscreen']
    )
    sim_width, sim_height = visualizer.size

    # 2. The particles and the force matrix are sized from the live surface.
    particles = ParticleSystem(
        {
            'particle_count': NUM_PARTICLES,
            'particle_types': len(ParticleType),
            'seed': sim_params.get('seed')
        },
        sim_width,
        sim_height
    )
    sim = Simulation(particles, sim_width, sim_height)

    loop = FrameLoop(
        sim,
        visualizer,
        Renderer(),
        log_throttle=run_params['log_throttle_steps'],
        max_frames=run_params['max_steps']
    )

    profiler = cProfile.Profile()
    profiler.enable()
    try:
        frames = loop.run()
    finally:
        profiler.disable()
        visualizer.close()
    logging.info(f"Frame loop finished after {frames} frames.")

    # --- Performance Profile Output ---
    logging.info("--- Performance Profile ---")
    s = io.StringIO()
    # Sort by cumulative time spent in the function
    stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
    stats.print_stats(20) # Print top 20 slowest functions
    logging.info(f"\n{s.getvalue()}")

    logging.info("--- Particle Life Simulation Shutting Down ---")


if __name__ == "__main__":
    main()
