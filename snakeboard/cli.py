"""Command that advances a board file by one time step."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .snake_utils import Lfsr, deterministic_food
from .state import GameState, load_board

PROG = "snakeboard"


class _UsageError(Exception):
    """Raised when the command line cannot be understood."""


def _parse_args(argv: Sequence[str]) -> dict[str, str]:
    options: dict[str, str] = {}
    args = iter(argv)
    for arg in args:
        if arg in ("-i", "-o"):
            value = next(args, None)
            if value is not None:
                options[arg] = value
                continue
        raise _UsageError(arg)
    return options


def run(in_filename: str, out_filename: str | None = None) -> GameState:
    """Load a board, locate its snakes, advance one step and write the result.

    The board goes to ``out_filename`` when given, otherwise to standard output.
    """
    state = load_board(in_filename).initialize_snakes()
    rng = Lfsr(1)
    state.update(lambda board: deterministic_food(board, rng))
    if out_filename is not None:
        state.save(out_filename)
    else:
        state.print_board(sys.stdout)
    return state


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: ``snakeboard -i INPUT [-o OUTPUT]``."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = _parse_args(argv)
    except _UsageError:
        print(f"Usage: {PROG} [-i filename] [-o filename]", file=sys.stderr)
        return 1

    in_filename = options.get("-i")
    if in_filename is None:
        return -1
    try:
        run(in_filename, options.get("-o"))
    except (OSError, ValueError) as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return -1
    return 0


if __name__ == "__main__":
    sys.exit(main())