"""Command-line interface for the Life engine."""

import argparse
import logging
import sys
import time
from typing import Dict, List, Optional

from ..core.engine import (
    DEFAULT_DENSITY,
    DEFAULT_FPS,
    DEFAULT_HEIGHT,
    DEFAULT_SCALE,
    DEFAULT_WIDTH,
    LifeEngine,
)
from ..core.grid import ConfigurationError, Grid
from ..core.patterns import PatternLibrary


class CLILife:
    """Command-line host that builds engines and drives them headless."""

    def __init__(self) -> None:
        self.pattern_library = PatternLibrary()

    def build_engine(
        self,
        width: int,
        height: int,
        fps: float,
        density: float,
        toroidal: bool = False,
        seed: Optional[int] = None,
        pattern: Optional[str] = None,
        verbose: bool = False,
    ) -> LifeEngine:
        """Create an engine seeded randomly or with a named pattern.

        Raises:
            ConfigurationError: If the settings are invalid
            KeyError: If the pattern name is unknown
        """
        engine = LifeEngine(
            width,
            height,
            generation_interval=1.0 / fps,
            density=density,
            wrap_edges=toroidal,
            seed=seed,
            populate=pattern is None,
        )

        if pattern:
            loaded_pattern = self.pattern_library.get_pattern(pattern)
            if loaded_pattern is None:
                raise KeyError(pattern)
            engine.load_pattern(loaded_pattern)
            if verbose:
                print(f"Loaded pattern '{pattern}' centered on a {width}x{height} grid")
        elif verbose:
            print(f"Random {width}x{height} grid (density: {density:.2%}, seed: {seed})")

        return engine

    def run_headless(
        self,
        engine: LifeEngine,
        frames: int,
        frame_time: float,
        verbose: bool = False,
        show_grid: bool = False,
    ) -> Dict:
        """Drive an engine for a fixed number of simulated frames.

        Args:
            engine: Engine to drive
            frames: Number of frames to simulate
            frame_time: Simulated seconds per frame
            verbose: Print progress updates
            show_grid: Show initial and final grid states

        Returns:
            Engine statistics plus run timing
        """
        initial_population = engine.population

        if show_grid:
            print("\nInitial grid:")
            print(self._format_grid(engine.grid))

        if verbose:
            print(f"Simulating {frames} frames of {frame_time:.4f}s...")

        start_time = time.time()
        for _ in range(frames):
            engine.update(frame_time)
        duration = time.time() - start_time

        stats = engine.get_statistics()
        stats["initial_population"] = initial_population
        stats["frames"] = frames
        stats["simulated_seconds"] = frames * frame_time
        stats["duration_seconds"] = duration
        stats["generations_per_second"] = engine.generation / duration if duration > 0 else 0

        if show_grid:
            print(f"\nFinal grid (generation {engine.generation}):")
            print(self._format_grid(engine.grid))

        return stats

    def _format_grid(self, grid: Grid, max_size: int = 50) -> str:
        """Format grid for display, truncating if too large.

        Args:
            grid: Grid to format
            max_size: Maximum dimension to display

        Returns:
            Formatted grid string
        """
        if grid.width > max_size or grid.height > max_size:
            return f"Grid too large to display ({grid.width}x{grid.height})"

        return str(grid)

    def list_patterns(self) -> None:
        """Print all available patterns."""
        print("Available patterns:")
        for name in self.pattern_library.list_patterns():
            pattern = self.pattern_library.get_pattern(name)
            width, height = pattern.get_size()
            print(f"  {name:<10} {width}x{height}  {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Conway's Game of Life",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Controls (window mode):
  S      step one generation while paused
  Space  toggle pause
  R      reseed the grid

Examples:
  # Open a 200x200 window at 4 pixels per cell
  lifegrid-cli

  # Smaller, faster, reproducible
  lifegrid-cli -W 80 -H 60 -S 8 --fps 30 --seed 42

  # Run a glider headless for 2 simulated seconds and print the grid
  lifegrid-cli -W 20 -H 20 --pattern Glider --headless --frames 120 --show-grid
        """,
    )

    # Grid configuration
    parser.add_argument("-W", "--width", type=int, default=DEFAULT_WIDTH, help=f"Grid width (default: {DEFAULT_WIDTH})")

    parser.add_argument(
        "-H", "--height", type=int, default=DEFAULT_HEIGHT, help=f"Grid height (default: {DEFAULT_HEIGHT})"
    )

    parser.add_argument(
        "-S",
        "--scale",
        type=int,
        default=DEFAULT_SCALE,
        help=f"Pixels per cell on screen (default: {DEFAULT_SCALE})",
    )

    parser.add_argument(
        "-p",
        "--density",
        type=float,
        default=DEFAULT_DENSITY,
        help=f"Chance each cell starts alive, 0.0-1.0 (default: {DEFAULT_DENSITY})",
    )

    parser.add_argument(
        "-t",
        "--toroidal",
        action="store_true",
        help="Enable toroidal (wraparound) edges",
    )

    parser.add_argument("--seed", type=int, help="Random seed for reproducible grids")

    parser.add_argument("--pattern", type=str, help="Start from a named pattern instead of random cells")

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    # Timing configuration
    parser.add_argument(
        "--fps",
        type=float,
        default=DEFAULT_FPS,
        help=f"Generations per second while running (default: {DEFAULT_FPS})",
    )

    # Headless mode
    parser.add_argument("--headless", action="store_true", help="Run without a window and print results")

    parser.add_argument(
        "--frames",
        type=int,
        default=100,
        help="Frames to simulate in headless mode (default: 100)",
    )

    parser.add_argument(
        "--frame-time",
        type=float,
        default=1.0 / 60,
        help="Simulated seconds per headless frame (default: 1/60)",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    parser.add_argument(
        "-g",
        "--show-grid",
        action="store_true",
        help="Display initial and final grid states (small grids only)",
    )

    return parser


def print_results(stats: dict, verbose: bool) -> None:
    """Print headless run results."""
    if verbose:
        print("\nResults:")
        print(f"  Frames: {stats['frames']} ({stats['simulated_seconds']:.2f}s simulated)")
        print(f"  Generation: {stats['generation']}")
        print(f"  Population: {stats['initial_population']} -> {stats['population']}")
        print(f"  Density: {stats['population_density']:.2%}")
        print(f"  State: {stats['state']}")
        print(f"  Duration: {stats['duration_seconds']:.3f}s ({stats['generations_per_second']:.0f} gen/s)")
    else:
        print(
            "Generation {}, Population: {} -> {}, Duration: {:.3f}s".format(
                stats["generation"], stats["initial_population"], stats["population"], stats["duration_seconds"]
            )
        )


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors: List[str] = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if args.scale <= 0:
        errors.append("Scale must be positive")

    if not 0.0 <= args.density <= 1.0:
        errors.append("Density must be between 0.0 and 1.0")

    if args.fps <= 0:
        errors.append("FPS must be positive")

    if args.frames < 0:
        errors.append("Frames must be non-negative")

    if args.frame_time < 0:
        errors.append("Frame time must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    cli = CLILife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    if args.pattern and cli.pattern_library.get_pattern(args.pattern) is None:
        print(f"Error: Pattern '{args.pattern}' not found")
        print(f"Available patterns: {', '.join(cli.pattern_library.list_patterns())}")
        return 1

    try:
        engine = cli.build_engine(
            width=args.width,
            height=args.height,
            fps=args.fps,
            density=args.density,
            toroidal=args.toroidal,
            seed=args.seed,
            pattern=args.pattern,
            verbose=args.verbose,
        )

        if args.headless:
            stats = cli.run_headless(
                engine,
                frames=args.frames,
                frame_time=args.frame_time,
                verbose=args.verbose,
                show_grid=args.show_grid,
            )
            print_results(stats, args.verbose)
            return 0

        from .tkinter_gui import main as gui_main

        gui_main(engine, scale=args.scale, test_mode=False)
        return 0

    except ConfigurationError as e:
        print(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
