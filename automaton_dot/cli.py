"""Command line entry point: draw an automaton table as a DOT graph."""

from __future__ import annotations

import enum
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from .service import draw_finite, draw_mealy, draw_moore

PROGRAM = "automaton-dot"


class AutomatonType(enum.Enum):
    """The kinds of automaton the tool understands."""

    MEALY = "mealy"
    MOORE = "moore"
    FINITE = "finite"


@dataclass(frozen=True)
class Args:
    """Parsed command line arguments."""

    automaton_type: AutomatonType
    input_filename: str
    output_filename: str


_DRAWERS = {
    AutomatonType.MEALY: draw_mealy,
    AutomatonType.MOORE: draw_moore,
    AutomatonType.FINITE: draw_finite,
}


def parse_args(argv: Sequence[str]) -> Args:
    """Parse the arguments that follow the program name."""
    if len(argv) != 3:
        raise ValueError(
            f"usage: {PROGRAM} [mealy|moore|finite] [input csv filename] [output dot filename]"
        )
    kind, input_filename, output_filename = argv
    try:
        automaton_type = AutomatonType(kind)
    except ValueError:
        raise ValueError("invalid automaton type, choose 'mealy', 'moore' or 'finite'") from None
    return Args(automaton_type, input_filename, output_filename)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tool; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = parse_args(argv)
        _DRAWERS[args.automaton_type](args.input_filename, args.output_filename)
    except (OSError, ValueError, KeyError, IndexError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())