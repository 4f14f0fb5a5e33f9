"""Number conversion and functions that build new text from existing text.

Text is a Python ``str``, and a NUL character ends it as it would end a
terminated buffer. Integer conversion works with 32-bit signed values:
``atoi`` wraps on overflow and ``itoa`` clamps to the 32-bit range.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from .charclass import isdigit
from .strings_basic import strdup, strlen

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to a 32-bit signed integer, wrapping around."""
    return (value + 2**31) % 2**32 - 2**31


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is read, then digits up
    to the first non-digit. Text with no digits gives 0. A value outside the
    32-bit range wraps around.
    """
    body = strdup(text).lstrip("".join(_WHITESPACE))
    sign = 1
    if body[:1] in ("-", "+"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    result = 0
    for ch in body:
        if not isdigit(ch):
            break
        result = _wrap_int32(result * 10 + int(ch))
    return _wrap_int32(result * sign)


def itoa(n: int) -> str:
    """Return the decimal text of ``n``, clamped to the 32-bit signed range."""
    return str(min(max(int(n), INT_MIN), INT_MAX))


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from position ``start``.

    A start at or past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = strdup(s)
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the two texts joined together."""
    return strdup(s1) + strdup(s2)


def strtrim(s: str, chars: Optional[str]) -> str:
    """Remove characters found in ``chars`` from both ends of ``s``.

    With ``chars`` of None the text is returned unchanged.
    """
    text = strdup(s)
    if chars is None:
        return text
    return text.strip(strdup(chars))


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    if not isinstance(sep, str) or len(sep) != 1:
        raise TypeError(f"expected a single separator character, got {sep!r}")
    text = strdup(s)
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new text made of ``func(position, char)`` for every character."""
    return "".join(func(position, ch) for position, ch in enumerate(strdup(s)))


def striteri(s: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(position, char)`` on every character of ``s``.

    Where ``func`` returns a character it replaces the original one; where it
    returns None the character is kept. The resulting text is returned.
    """
    text = strdup(s)
    pieces = []
    for position, ch in enumerate(text):
        replacement = func(position, ch)
        pieces.append(ch if replacement is None else replacement)
    result = "".join(pieces)
    return result[: strlen(result)]