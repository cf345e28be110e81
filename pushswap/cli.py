"""Command-line entry point: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import EmptyArgument, InputError, parse_args
from pushswap.sorting import solve


def _report_error() -> int:
    sys.stderr.write("Error\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program on ``argv`` (the arguments after the program name).

    Prints one move per line on standard output. Invalid input prints
    ``Error`` on standard error. The exit status is always 0.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_args(args)
        moves = solve(values)
    except EmptyArgument:
        return 0
    except InputError:
        return _report_error()
    if moves:
        sys.stdout.write("".join(f"{move}\n" for move in moves))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())