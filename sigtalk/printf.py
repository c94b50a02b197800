"""A small printf with a fixed set of conversions.

Supported conversions are ``%c``, ``%s``, ``%d``, ``%i``, ``%u``, ``%x``,
``%X``, ``%p`` and ``%%``. An unknown conversion is echoed with its
percent sign, and a lone ``%`` at the very end of the format is dropped.
Integer conversions wrap to 32 bits the way a C ``int`` or
``unsigned int`` argument would.
"""

from __future__ import annotations

import sys
from typing import Iterator, Optional, Union

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"
_UINT_MASK = 0xFFFFFFFF
_INT_SIGN = 0x80000000


def _as_uint32(value: int) -> int:
    return int(value) & _UINT_MASK


def _as_int32(value: int) -> int:
    value = _as_uint32(value)
    return value - (1 << 32) if value & _INT_SIGN else value


def format_number(n: int) -> str:
    """Return ``n`` in decimal, with a leading minus sign when negative."""
    n = int(n)
    sign = "-" if n < 0 else ""
    value = abs(n)
    digits = []
    while True:
        value, digit = divmod(value, 10)
        digits.append(chr(ord("0") + digit))
        if not value:
            break
    return sign + "".join(reversed(digits))


def format_hex(n: int, upper: bool = False) -> str:
    """Return the non-negative integer ``n`` in hexadecimal without a prefix."""
    n = int(n)
    if n < 0:
        raise ValueError("hexadecimal conversion needs a non-negative value")
    alphabet = _UPPER_DIGITS if upper else _LOWER_DIGITS
    digits = []
    while True:
        n, digit = divmod(n, 16)
        digits.append(alphabet[digit])
        if not n:
            break
    return "".join(reversed(digits))


def format_pointer(address: Optional[int]) -> str:
    """Return an address as ``0x`` followed by lower-case hex, or ``(nil)``."""
    if not address:
        return _NULL_POINTER
    return "0x" + format_hex(address)


def _format_char(value: Union[str, int]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, args: Iterator[object]) -> str:
    def take() -> object:
        try:
            return next(args)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None

    if spec == "c":
        return _format_char(take())  # type: ignore[arg-type]
    if spec == "s":
        value = take()
        return _NULL_STRING if value is None else str(value)
    if spec in ("d", "i"):
        return format_number(_as_int32(take()))  # type: ignore[arg-type]
    if spec in ("x", "X"):
        return format_hex(_as_uint32(take()), upper=spec == "X")  # type: ignore[arg-type]
    if spec == "p":
        return format_pointer(take())  # type: ignore[arg-type]
    if spec == "u":
        return format_number(_as_uint32(take()))  # type: ignore[arg-type]
    return "%" + spec


def format_string(fmt: str, *args: object) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text."""
    if fmt is None:
        raise TypeError("format must be a string, not None")
    remaining = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append("%" if spec == "%" else _convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: object) -> int:
    """Write the expanded format to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)