"""Command line entry point: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from .args import ArgumentError, check_args
from .sorting import sort_stacks
from .stacks import Stacks

EXIT_SUCCESS = 0
EXIT_FAILURE = 255


def _error() -> int:
    print(ArgumentError(), file=sys.stderr)
    return EXIT_FAILURE


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the numbers, sort them and print each move on its own line."""
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return EXIT_FAILURE
    try:
        values = check_args(args)
    except ArgumentError as exc:
        print(exc, file=sys.stderr)
        return EXIT_FAILURE
    if len(args) == 1 and args[0]:
        return EXIT_FAILURE
    if not args[0] or (args[0].startswith("-") and len(args) == 1):
        return _error()
    stacks = Stacks(values)
    if stacks.a_sorted():
        return EXIT_SUCCESS
    sort_stacks(stacks)
    return EXIT_SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())