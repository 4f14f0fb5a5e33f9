"""Length, search, comparison and bounded copy for NUL-terminated text.

Text is a Python ``str``. A NUL character (``"\\0"``) ends the text, as it
would in a terminated buffer, so anything after the first NUL is ignored.
Search functions return a position in the text, or None when nothing is found.
The bounded copy and append functions return the text that results together
with the length the operation tried to produce.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

NUL = "\0"

CharLike = Union[int, str]


def _terminated(s: str) -> str:
    """Return ``s`` up to, but not including, its first NUL."""
    return s.split(NUL, 1)[0]


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the position of the first ``c`` in ``s``, or None.

    Searching for NUL finds the end of the text.
    """
    text = _terminated(s)
    ch = _char(c)
    if ch == NUL:
        return len(text)
    position = text.find(ch)
    return None if position < 0 else position


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the position of the last ``c`` in ``s``, or None.

    Searching for NUL finds the end of the text.
    """
    text = _terminated(s)
    ch = _char(c)
    if ch == NUL:
        return len(text)
    position = text.rfind(ch)
    return None if position < 0 else position


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the character codes at the first mismatch, with
    the end of a text counting as code 0, or 0 when they agree.
    """
    _check_size(n)
    a = _terminated(s1)[:n]
    b = _terminated(s2)[:n]
    for x, y in zip(a.ljust(len(b), NUL), b.ljust(len(a), NUL)):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return where ``little`` starts within the first ``length`` characters of ``big``.

    The whole of ``little`` must lie inside that window. An empty ``little``
    is found at position 0.
    """
    _check_size(length)
    needle = _terminated(little)
    if not needle:
        return 0
    position = _terminated(big)[:length].find(needle)
    return None if position < 0 else position


def strdup(s: str) -> str:
    """Return a copy of the text up to its first NUL."""
    return _terminated(s)


def strlcpy(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the resulting buffer text and the length of ``src``. With a size of
    zero the buffer is left as it was.
    """
    _check_size(size)
    source = _terminated(src)
    if size == 0:
        return dst, len(source)
    return source[: size - 1], len(source)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters, terminator included.

    Returns the resulting buffer text and the length the result tried to have:
    the length of ``dst``, capped at ``size``, plus the length of ``src``.
    """
    _check_size(size)
    dest = _terminated(dst)
    source = _terminated(src)
    room = max(0, size - 1 - len(dest)) if size > 0 else 0
    return dest + source[:room], min(len(dest), size) + len(source)