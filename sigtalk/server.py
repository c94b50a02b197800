"""Receive messages sent as signals and write them to standard output."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, Optional, Sequence

from sigtalk.printf import format_string
from sigtalk.protocol import ONE_SIGNAL, ZERO_SIGNAL, BitDecoder, bit_for_signal


class Server:
    """Decodes incoming bit signals per sender and writes completed bytes."""

    def __init__(self, stream: Optional[BinaryIO] = None) -> None:
        self.stream = sys.stdout.buffer if stream is None else stream
        self.decoder = BitDecoder()

    def handle(self, signum: int, sender: int) -> Optional[int]:
        """Process one signal from ``sender``; return the byte it completed, if any."""
        byte = self.decoder.feed(sender, bit_for_signal(signum))
        if byte is not None:
            self.stream.write(bytes([byte]))
            self.stream.flush()
        return byte

    def serve(self) -> None:
        """Announce the process id, then handle signals until interrupted."""
        self.stream.write(format_string("Server PID: %d\n", os.getpid()).encode())
        self.stream.flush()
        wanted = {ONE_SIGNAL, ZERO_SIGNAL}
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, wanted)
        try:
            while True:
                info = signal.sigwaitinfo(wanted)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: run the server until interrupted."""
    try:
        Server().serve()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())