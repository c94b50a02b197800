"""Small string and character helpers with C-library style semantics.

Characters may be given either as one-character strings or as integer
code points; the classification helpers work on code points and accept
either form.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional, Union

CharLike = Union[str, int]

_WHITESPACE = " \t\n\v\f\r"
_NUL = "\0"


def _code(c: CharLike) -> int:
    """Return the code point for a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _single(ch: str) -> str:
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace; 0 if none."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return result * sign


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if n == 0:
        return "0"
    digits = []
    value = abs(n)
    while value:
        value, digit = divmod(value, 10)
        digits.append(chr(ord("0") + digit))
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces.

    A NUL separator never matches, so any non-empty text is one piece.
    """
    sep = _single(sep)
    if sep == _NUL:
        return [text] if text else []
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, chars: Optional[str]) -> str:
    """Strip any of ``chars`` from both ends; ``None`` returns a copy."""
    if chars is None:
        return text
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly inside the first ``length`` characters.

    Returns the index of the match, 0 for an empty needle, or ``None``.
    """
    if not needle:
        return 0
    index = haystack[:max(length, 0)].find(needle)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the first code difference."""
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strchr(text: str, ch: str) -> Optional[int]:
    """Index of the first ``ch`` in ``text``; NUL finds the end."""
    ch = _single(ch)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, ch: str) -> Optional[int]:
    """Index of the last ``ch`` in ``text``; NUL finds the end."""
    ch = _single(ch)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def isalpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: CharLike) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def toupper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter, keeping the argument's type."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def tolower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter, keeping the argument's type."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code