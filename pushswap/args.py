"""Validation and parsing of the numbers given on the command line."""

from __future__ import annotations

from typing import Iterable, List

from .charclass import isdigit
from .strings_basic import strdup
from .strings_build import atoi

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \t\n\v\f\r"


class ArgumentError(ValueError):
    """Raised when the numbers given are not a valid puzzle input."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def atol(text: str) -> int:
    """Parse a leading decimal integer without any range limit.

    Leading whitespace is skipped, one optional sign is read, then digits up
    to the first non-digit. Text with no digits gives 0.
    """
    body = strdup(text).lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("-", "+"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    result = 0
    for ch in body:
        if not isdigit(ch):
            break
        result = result * 10 + int(ch)
    return result * sign


def is_number(text: str) -> bool:
    """True when ``text`` is an optional leading minus followed only by digits.

    The digits may be absent, so ``""`` and ``"-"`` pass.
    """
    body = text[1:] if text.startswith("-") else text
    return all(isdigit(ch) for ch in body)


def _has_inner_minus(text: str) -> bool:
    return "-" in text[1:]


def check_args(args: Iterable[str]) -> List[int]:
    """Validate the arguments and return their integer values.

    Each argument must be a plain decimal integer in the 32-bit signed range,
    and no two may have the same value. Raises ArgumentError otherwise.
    """
    items = list(args)
    for arg in items:
        if _has_inner_minus(arg) or not is_number(arg):
            raise ArgumentError()
        if not INT_MIN <= atol(arg) <= INT_MAX:
            raise ArgumentError()
    values = [atoi(arg) for arg in items]
    if len(set(values)) != len(values):
        raise ArgumentError()
    return values