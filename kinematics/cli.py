"""
Command-line interface for the SUVAT solver.

Usage:
    python -m kinematics --u 0 --a 2 --t 3
    python -m kinematics --s 100 --v 0 --a -5 --on-invalid fail
"""

import argparse
import logging
from collections.abc import Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from kinematics.config import ConversionPolicy
from kinematics.solver import FIELD_TYPES, SUVAT, Motion, solve

CONSOLE = Console()

_LABELS = {
    "s": "Distance",
    "u": "Start speed",
    "v": "End speed",
    "a": "Acceleration",
    "t": "Time",
}


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="kinematics",
        description="Solve a constant-acceleration motion from any three of "
                    "distance (s), start speed (u), end speed (v), acceleration (a) and time (t).",
    )
    for name in SUVAT:
        parser.add_argument(
            f"--{name}",
            metavar="VALUE",
            default=None,
            help=f"{_LABELS[name].lower()} in {FIELD_TYPES[name].SYMBOL}",
        )
    parser.add_argument(
        "--on-invalid",
        choices=[policy.value for policy in ConversionPolicy],
        default=ConversionPolicy.DEFAULT_TO_ZERO.value,
        help="what to do with a value that is not a number (default: zero)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="log which formulas were used",
    )
    return parser


def render_motion(motion: Motion) -> Table:
    """Build a table listing all five values of a motion."""
    table = Table(title="SUVAT")
    table.add_column("Quantity")
    table.add_column("Value", justify="right")
    table.add_column("Unit")
    table.add_column("Source")
    for name in SUVAT:
        value = getattr(motion, name)
        source = "given" if name in motion.knowns else "[b]derived[/b]"
        table.add_row(f"{_LABELS[name]} ({name})", f"{float(value):g}", type(value).SYMBOL, source)
    return table


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Run the CLI and return the process exit status."""
    console = console or CONSOLE
    args = create_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
            force=True,
        )

    policy = ConversionPolicy(args.on_invalid)
    try:
        given = {
            name: FIELD_TYPES[name].parse(getattr(args, name), policy)
            for name in SUVAT
            if getattr(args, name) is not None
        }
        motion = solve(**given)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1

    console.print(render_motion(motion))
    return 0
