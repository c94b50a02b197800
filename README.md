# sigtalk

A small messaging pair for POSIX systems. Text travels from a client process
to a server process using only two signals: `SIGUSR1` carries a 1 bit and
`SIGUSR2` carries a 0 bit. Text is encoded as UTF-8, every byte is sent most
significant bit first, and the server writes each byte to standard output as
soon as all eight of its bits have arrived.

## Installation

```
pip install .
```

There are no runtime dependencies beyond the standard library.

## Usage

Start the server in one terminal. It prints its process id and then waits
until it is interrupted (Ctrl-C):

```
sigtalk-server
Server PID: 12345
```

From another terminal, send it a message:

```
sigtalk-client 12345 "hello there"
```

The server prints `hello there` as the bits arrive.

The client needs exactly two arguments: the server's PID and the message.
The PID is read like C's `atoi` (leading whitespace and a sign are allowed,
parsing stops at the first non-digit). A PID that is zero, negative, or above
4194304 is refused with `The provided PID is outside the valid range!`. If a
signal cannot be delivered the client prints `error`. In every failing case
the client exits with status 1. Between signals it waits 0.1 ms.

The server waits for signals with `signal.sigwaitinfo`, so it runs only where
Python provides that call, such as Linux.

## Library use

The pieces work without running either command:

- `sigtalk.protocol.encode_bits(message)` yields the bits of a `str` or
  `bytes` message; `signal_for_bit` and `bit_for_signal` map between bits
  and signals and raise `ValueError` for anything else.
- `sigtalk.protocol.BitDecoder` rebuilds bytes from bits. Its
  `feed(sender, bit)` returns a byte once eight bits have arrived and
  otherwise `None`; a bit from a different sender discards any partly
  received byte. `reset()` discards it explicitly.
- `sigtalk.client.parse_pid(text)` returns a PID or raises
  `InvalidPidError`; `sigtalk.client.send_message(pid, message, delay)`
  signals the message and returns the number of signals sent, letting an
  `OSError` propagate.
- `sigtalk.server.Server(stream)` writes completed bytes to a binary stream
  (standard output by default). `handle(signum, sender)` processes one
  signal and returns the byte it completed, if any; `serve()` announces the
  PID and handles signals until interrupted.
- `sigtalk.printf` provides `format_string(fmt, *args)` and `printf` for the
  conversions `%c %s %d %i %u %x %X %p %%`, plus `format_number`,
  `format_hex` and `format_pointer`. Integer conversions wrap to 32 bits,
  `%s` of `None` gives `(null)`, `%p` of a null address gives `(nil)`, and
  unknown conversions are echoed unchanged.
- `sigtalk.text` offers C-style string and character helpers: `atoi`,
  `itoa`, `split`, `strtrim`, `substr`, `strnstr`, `strncmp`, `strchr`,
  `strrchr`, `strmapi`, `isalpha`, `isdigit`, `isalnum`, `isascii`,
  `isprint`, `toupper` and `tolower`.

## Limitations

- Delivery is one way: the server sends no acknowledgement, so the client
  relies on its fixed delay between signals. Signals that arrive faster than
  they can be taken may be merged and bits lost.
- There is no message framing; the server writes a stream of bytes and
  does not mark where one message ends.
- The server keeps a single decoder: a signal from a new sender drops
  whatever partial byte the previous sender had sent.

## Running the tests

```
pip install .[test]
pytest
```