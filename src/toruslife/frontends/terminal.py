"""Terminal frontend that animates Conway's Game of Life with ANSI escapes."""

import argparse
import asyncio
import math
import re
import sys
from typing import Optional, TextIO

from ..core.grid import Grid
from ..core.game import GameOfLife
from ..core.patterns import PatternLibrary


CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"
DEFAULT_INTERVAL = 0.1
U32_MAX = 2**32 - 1


class TerminalGameOfLife:
    """Redraws a toroidal Game of Life in the terminal at a fixed cadence."""

    def __init__(
        self,
        width: int,
        height: int,
        div_a: int,
        div_b: int,
        interval: float = DEFAULT_INTERVAL,
        show_stats: bool = False,
        output: Optional[TextIO] = None,
    ) -> None:
        """Initialize the driver and its grid.

        Args:
            width: Grid width
            height: Grid height
            div_a: First divisor of the initial fill
            div_b: Second divisor of the initial fill
            interval: Seconds to wait between generations
            show_stats: Print a status line under every frame
            output: Stream to draw on (defaults to stdout)
        """
        self.grid = Grid(width, height, div_a, div_b)
        self.game = GameOfLife(self.grid)
        self.interval = interval
        self.show_stats = show_stats
        self.output = output or sys.stdout
        self.frames_drawn = 0

    def seed_pattern(self, name: str, library: Optional[PatternLibrary] = None) -> None:
        """Replace the initial fill with a library pattern centered on the grid.

        Raises:
            ValueError: If the pattern is unknown
        """
        library = library or PatternLibrary()
        pattern = library.get_pattern(name)
        if pattern is None:
            raise ValueError(
                f"Pattern '{name}' not found. Available patterns: {', '.join(library.list_patterns())}"
            )

        pattern = pattern.normalize()
        pattern_height, pattern_width = pattern.get_size()
        row_offset = max(0, (self.grid.height - pattern_height) // 2)
        column_offset = max(0, (self.grid.width - pattern_width) // 2)
        pattern.apply_to_grid(self.grid, row_offset, column_offset)
        self.game.reset(clear_grid=False)

    def format_status(self) -> str:
        """Format the status line shown under a frame."""
        status = f"Generation {self.game.generation} | Population {self.game.population}"
        if self.game.cycle_detected:
            status += f" | Cycle length {self.game.cycle_length}"
        return status

    def draw_frame(self) -> None:
        """Write the current generation to the output stream."""
        self.output.write(self.grid.render())
        self.output.write("\n")
        if self.show_stats:
            self.output.write(self.format_status() + "\n")
        self.output.flush()
        self.frames_drawn += 1

    async def play(self, generations: int = 0) -> int:
        """Clear, advance, wait and redraw until the frame limit is reached.

        Args:
            generations: Number of frames to draw (0 runs until cancelled)

        Returns:
            Number of frames drawn
        """
        while generations == 0 or self.frames_drawn < generations:
            self.output.write(CLEAR_SCREEN)
            self.game.step()
            await asyncio.sleep(self.interval)
            self.draw_frame()

        return self.frames_drawn

    def run(self, generations: int = 0) -> int:
        """Run :meth:`play` to completion on a fresh event loop."""
        return asyncio.run(self.play(generations))


def u32(value: str) -> int:
    """Parse an unsigned 32-bit integer argument.

    Only plain decimal digits with an optional leading plus sign are
    accepted; no whitespace, underscores or other numerals.
    """
    if not re.fullmatch(r"\+?[0-9]+", value):
        raise argparse.ArgumentTypeError(f"invalid unsigned 32-bit integer: '{value}'")

    number = int(value)
    if not 0 <= number <= U32_MAX:
        raise argparse.ArgumentTypeError(f"value out of unsigned 32-bit range: {number}")

    return number


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="toruslife",
        description="Animate Conway's Game of Life on a toroidal grid in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Cell i (counted row by row from the top-left) starts alive when
i is a multiple of DIV_A or of DIV_B.

Examples:
  # 40x20 grid seeded with multiples of 3 and 7
  toruslife 40 20 3 7

  # Draw 50 generations, twice as fast, with a status line
  toruslife 40 20 3 7 --generations 50 --interval 0.05 --show-stats

  # Start from a glider instead of the divisor fill
  toruslife 20 20 1 1 --pattern Glider
        """,
    )

    parser.add_argument("width", type=u32, help="Grid width in cells")
    parser.add_argument("height", type=u32, help="Grid height in cells")
    parser.add_argument("div_a", type=u32, help="First integer divider of the initial fill")
    parser.add_argument("div_b", type=u32, help="Second integer divider of the initial fill")

    parser.add_argument(
        "-i",
        "--interval",
        type=float,
        default=DEFAULT_INTERVAL,
        help=f"Seconds between generations (default: {DEFAULT_INTERVAL})",
    )

    parser.add_argument(
        "-g",
        "--generations",
        type=int,
        default=0,
        help="Stop after this many generations (default: 0, run until interrupted)",
    )

    parser.add_argument(
        "--pattern",
        type=str,
        help="Seed a named pattern at the center instead of the divisor fill",
    )

    parser.add_argument(
        "-s",
        "--show-stats",
        action="store_true",
        help="Print generation and population under each frame",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print set-up information before the first frame",
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

    if args.width == 0:
        errors.append("Width must be positive")

    if args.height == 0:
        errors.append("Height must be positive")

    if args.div_a == 0:
        errors.append("First divider must be positive")

    if args.div_b == 0:
        errors.append("Second divider must be positive")

    if not math.isfinite(args.interval):
        errors.append("Interval must be a finite number")
    elif args.interval < 0:
        errors.append("Interval must be non-negative")

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.pattern is not None and PatternLibrary().get_pattern(args.pattern) is None:
        errors.append(f"Pattern '{args.pattern}' not found")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the terminal interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not validate_args(args):
        return 1

    try:
        terminal = TerminalGameOfLife(
            args.width,
            args.height,
            args.div_a,
            args.div_b,
            interval=args.interval,
            show_stats=args.show_stats,
        )

        if args.pattern:
            terminal.seed_pattern(args.pattern)

        if args.verbose:
            print(f"Initializing {args.width}x{args.height} toroidal grid")
            if args.pattern:
                print(f"Seeded pattern '{args.pattern}' at the center")
            else:
                print(f"Cells alive at multiples of {args.div_a} or {args.div_b}")
            print(f"Initial population: {terminal.game.population} cells")
            limit = args.generations or "unlimited"
            print(f"Redrawing every {args.interval}s (generations: {limit})")

        terminal.run(args.generations)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 0
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
