"""Command that loads a board, advances it one step and writes the result."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .snake_utils import deterministic_food
from .state import create_default_state, load_board

_USAGE = "Usage: {prog} [-i filename] [-o filename]"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one step of the game; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    options = {"-i": None, "-o": None}

    it = iter(args)
    for arg in it:
        value = next(it, None) if arg in options else None
        if value is None:
            print(_USAGE.format(prog="snake"), file=sys.stderr)
            return 1
        options[arg] = value

    in_filename, out_filename = options["-i"], options["-o"]

    if in_filename is not None:
        try:
            state = load_board(in_filename)
        except OSError:
            print(f"Error: could not open file {in_filename}", file=sys.stderr)
            return -1
        state.initialize_snakes()
    else:
        state = create_default_state()

    state.update_state(deterministic_food)

    if out_filename is not None:
        state.save_board(out_filename)
    else:
        state.print_board(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())