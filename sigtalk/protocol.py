"""Bit-level wire format for sending text one signal at a time.

Each byte of a message is sent as eight signals, most significant bit
first. ``SIGUSR1`` carries a one bit and ``SIGUSR2`` a zero bit.
"""

from __future__ import annotations

import signal
from dataclasses import dataclass
from typing import Iterator, Optional, Union

BITS_PER_BYTE = 8
ONE_SIGNAL = signal.SIGUSR1
ZERO_SIGNAL = signal.SIGUSR2


def _as_bytes(message: Union[str, bytes]) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    return bytes(message)


def encode_bits(message: Union[str, bytes]) -> Iterator[int]:
    """Yield the bits of ``message``, most significant bit of each byte first.

    Text is encoded as UTF-8 before it is split into bits.
    """
    for byte in _as_bytes(message):
        for shift in range(BITS_PER_BYTE - 1, -1, -1):
            yield (byte >> shift) & 1


def signal_for_bit(bit: int) -> signal.Signals:
    """Return the signal that carries ``bit``."""
    if bit == 1:
        return ONE_SIGNAL
    if bit == 0:
        return ZERO_SIGNAL
    raise ValueError(f"a bit must be 0 or 1, got {bit!r}")


def bit_for_signal(signum: int) -> int:
    """Return the bit carried by the signal ``signum``."""
    if signum == ONE_SIGNAL:
        return 1
    if signum == ZERO_SIGNAL:
        return 0
    raise ValueError(f"signal {signum!r} carries no bit")


@dataclass
class BitDecoder:
    """Reassembles bytes from bits, starting afresh when the sender changes."""

    sender: Optional[int] = None
    _value: int = 0
    _count: int = 0

    def feed(self, sender: int, bit: int) -> Optional[int]:
        """Add one bit from ``sender``; return a byte once eight have arrived."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        if sender != self.sender:
            self.reset()
            self.sender = sender
        self._value = ((self._value << 1) | bit) & 0xFF
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        return byte

    def reset(self) -> None:
        """Drop any partly received byte."""
        self._value = 0
        self._count = 0