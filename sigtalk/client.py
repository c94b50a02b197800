"""Send a message to a listening server as a stream of signals."""

from __future__ import annotations

import os
import sys
import time
from typing import Optional, Sequence, Union

from sigtalk.printf import printf
from sigtalk.protocol import encode_bits, signal_for_bit
from sigtalk.text import atoi

MAX_PID = 4194304
DEFAULT_DELAY = 0.0001

_USAGE_ERROR = "error number of arguments is invalid please provide 2 arguments only!!!"
_PID_ERROR = "The provided PID is outside the valid range!"


class InvalidPidError(ValueError):
    """Raised when a process id is outside the accepted range."""


def parse_pid(text: str) -> int:
    """Parse a process id, accepting values from 1 to ``MAX_PID``."""
    pid = atoi(text)
    if pid <= 0 or pid > MAX_PID:
        raise InvalidPidError(_PID_ERROR)
    return pid


def send_message(pid: int, message: Union[str, bytes], delay: float = DEFAULT_DELAY) -> int:
    """Signal ``message`` bit by bit to ``pid`` and return the number of signals.

    An ``OSError`` from delivering a signal is propagated.
    """
    sent = 0
    for bit in encode_bits(message):
        os.kill(pid, signal_for_bit(bit))
        time.sleep(delay)
        sent += 1
    return sent


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``client PID MESSAGE``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        printf("%s", _USAGE_ERROR)
        return 1
    try:
        pid = parse_pid(args[0])
    except InvalidPidError as exc:
        printf("%s", str(exc))
        return 1
    try:
        send_message(pid, args[1])
    except OSError:
        printf("error")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())