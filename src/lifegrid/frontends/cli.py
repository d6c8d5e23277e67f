"""Command-line interface for Conway's Game of Life."""

import argparse
import sys
import time
from pathlib import Path
from typing import Callable, List, Optional, TextIO, Tuple

from ..core.grid import HEIGHT, WIDTH, Grid
from ..core.game import GameOfLife
from ..core.patterns import Pattern, PatternLibrary, default_seed

FRAME_DELAY = 0.25
MAX_CYCLES = 100

ALIVE_GLYPH = "o"
DEAD_GLYPH = "."


def format_grid(grid: Grid) -> str:
    """Format a grid as text, one glyph per cell.

    Every row is preceded by a newline, so the block starts with an
    empty line.
    """
    lines = []
    for row in grid.cells:
        lines.append("\n" + "".join(ALIVE_GLYPH if cell else DEAD_GLYPH for cell in row))
    return "".join(lines)


def write_frame(header: str, grid: Grid, stream: TextIO) -> None:
    """Write a header line followed by the formatted grid."""
    print(header, file=stream)
    print(format_grid(grid), file=stream)


def run(
    live_cells: List[Tuple[int, int]],
    cycles: int = MAX_CYCLES,
    delay: float = FRAME_DELAY,
    stream: Optional[TextIO] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> GameOfLife:
    """Run the simulation for a fixed number of cycles, printing every frame.

    Args:
        live_cells: Initially living (x, y) coordinates
        cycles: Number of generations to compute
        delay: Pause between frames in seconds
        stream: Output stream (defaults to stdout)
        sleep: Function used to pause between frames

    Returns:
        The game after the final generation
    """
    if stream is None:
        stream = sys.stdout
    game = GameOfLife(Grid(live_cells))

    print("Starting Conway's game of life!", file=stream)
    write_frame("Here is our starting frame: ", game.grid, stream)
    sleep(delay)

    for generation, grid in game.run(cycles):
        write_frame(f"{generation} cycles:", grid, stream)
        sleep(delay)

    return game


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self):
        self.pattern_library = PatternLibrary()

    def resolve_seed(
        self,
        pattern: Optional[str] = None,
        pattern_x: Optional[int] = None,
        pattern_y: Optional[int] = None,
        pattern_file: Optional[str] = None,
        verbose: bool = False,
    ) -> List[Tuple[int, int]]:
        """Work out the starting live cells.

        Args:
            pattern: Optional library pattern name
            pattern_x: X offset for pattern placement, centered when None
            pattern_y: Y offset for pattern placement, centered when None
            pattern_file: Optional path to a plain-text pattern
            verbose: Print placement details

        Returns:
            List of live (x, y) coordinates

        Raises:
            KeyError: If the named pattern is not in the library
            IndexError: If the placed pattern doesn't fit on the board
        """
        if pattern_file:
            path = Path(pattern_file)
            loaded = Pattern.from_text(path.stem, path.read_text())
        elif pattern:
            loaded = self.pattern_library.get_pattern(pattern)
            if loaded is None:
                raise KeyError(pattern)
        else:
            if verbose:
                print("Using default seed: Blinker, Glider and Pulsar")
            return default_seed(self.pattern_library)

        width, height = loaded.get_size()
        if pattern_x is None:
            pattern_x = max(0, (WIDTH - width) // 2)
        if pattern_y is None:
            pattern_y = max(0, (HEIGHT - height) // 2)

        if verbose:
            print(f"Loading pattern '{loaded.name}' at ({pattern_x}, {pattern_y})")
        return loaded.place(pattern_x, pattern_y)

    def list_patterns(self) -> None:
        """List available patterns with their size and description."""
        print("Available patterns:")
        for name in self.pattern_library.list_patterns():
            pattern = self.pattern_library.get_pattern(name)
            width, height = pattern.get_size()
            print(f"  {name}: {width}x{height}, {len(pattern.cells)} cells - {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description=f"Run Conway's Game of Life on a {WIDTH}x{HEIGHT} board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the classic blinker, glider and pulsar start frame
  lifegrid

  # Run a glider for 40 generations without pausing
  lifegrid --pattern Glider --pattern-x 1 --pattern-y 1 --cycles 40 --delay 0

  # Run a pattern from a plain-text file
  lifegrid --pattern-file gosper.txt

  # List available patterns
  lifegrid --list-patterns
        """,
    )

    parser.add_argument(
        "-c",
        "--cycles",
        type=int,
        default=MAX_CYCLES,
        help=f"Number of generations to run (default: {MAX_CYCLES})",
    )

    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=FRAME_DELAY,
        help=f"Pause between frames in seconds (default: {FRAME_DELAY})",
    )

    # Pattern configuration
    parser.add_argument(
        "--pattern",
        type=str,
        help="Start from a library pattern instead of the default seed",
    )

    parser.add_argument(
        "--pattern-x",
        type=int,
        help="X offset for pattern placement (default: centered)",
    )

    parser.add_argument(
        "--pattern-y",
        type=int,
        help="Y offset for pattern placement (default: centered)",
    )

    parser.add_argument(
        "--pattern-file",
        type=str,
        help="Start from a plain-text pattern file ('o' alive, '.' dead)",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print seed details and final statistics",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.cycles < 0:
        errors.append("Cycles must be non-negative")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if args.pattern_x is not None and not (0 <= args.pattern_x < WIDTH):
        errors.append(f"Pattern X offset must be between 0 and {WIDTH - 1}")

    if args.pattern_y is not None and not (0 <= args.pattern_y < HEIGHT):
        errors.append(f"Pattern Y offset must be between 0 and {HEIGHT - 1}")

    if args.pattern and args.pattern_file:
        errors.append("Use either --pattern or --pattern-file, not both")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def print_results(game: GameOfLife) -> None:
    """Print how the run ended."""
    print(f"\nSimulation completed after {game.generation} generations")
    print(f"  Final population: {game.population}")

    # Extinction takes precedence over the period of an empty board
    if game.extinct:
        print("  All cells died")
        return

    print(f"  Bounding box: {game.grid.get_bounding_box()}")
    if game.period is not None:
        print(f"  Settled into a period-{game.period} pattern")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    try:
        live_cells = cli.resolve_seed(
            pattern=args.pattern,
            pattern_x=args.pattern_x,
            pattern_y=args.pattern_y,
            pattern_file=args.pattern_file,
            verbose=args.verbose,
        )
    except KeyError:
        available = cli.pattern_library.list_patterns()
        print(f"Error: Pattern '{args.pattern}' not found")
        print(f"Available patterns: {', '.join(available)}")
        print("Use --list-patterns to see detailed information")
        return 1
    except (OSError, ValueError, IndexError) as e:
        print(f"Error: {e}")
        return 1

    try:
        game = run(live_cells, cycles=args.cycles, delay=args.delay)
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1

    if args.verbose:
        print_results(game)

    return 0


if __name__ == "__main__":
    sys.exit(main())
