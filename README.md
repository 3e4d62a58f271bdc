# brynetkit

Small, dependency-free building blocks for event-driven TCP programs.

## Contents

- `brynetkit.buffer.Buffer` — a fixed-capacity byte buffer with separate read
  and write positions. `write()` appends bytes, moving unread data to the
  front first when that makes room, and raises `BufferError` when the data
  cannot fit. `readable()` returns the unread bytes; `add_read_pos()` and
  `add_write_pos()` advance the positions and raise `ValueError` past the
  capacity. `len(buffer)` is its capacity.
- `brynetkit.timer` — `Timer`, `RepeatTimer` and `TimerManager`. Times are in
  seconds on the monotonic clock. `TimerManager.add_timer()` runs a callback
  once after a timeout and returns the `Timer`, which can be cancelled;
  `add_interval_timer()` runs a callback repeatedly and returns a
  `RepeatTimer` whose `cancel()` stops it. `schedule()` runs every timer that
  is due, earliest first, and `near_left_time()` tells an event loop how long
  it may sleep (0 when there are no timers or one is overdue).
- `brynetkit.sockets` — `TcpSocket` and `ListenSocket`, thin owners of
  standard `socket.socket` objects with helpers for `TCP_NODELAY`,
  non-blocking mode and send/receive buffer sizes. Both close their socket on
  `close()` or when leaving a `with` block. `ListenSocket.accept()` returns a
  server-side `TcpSocket` and raises `EintrError` when interrupted or
  `AcceptError` (carrying `error_code`) on other failures. On Linux and macOS
  it keeps a spare descriptor so that, when descriptors run out, the pending
  connection is accepted and dropped.
- `brynetkit.sha1` — an incremental `SHA1` hasher. Feed it with `update()` or
  `hash_file()`, call `final()`, then read `digest()` (20 bytes) or
  `report_hash()` as spaced hex, compact hex or decimal bytes (`ReportType`).

## What it does not do

There is no event loop, no connection management, no connecting client and
no HTTP or WebSocket layer here. The pieces are meant to be combined by a
program that drives its own loop, for example with `selectors`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from brynetkit.buffer import Buffer
from brynetkit.timer import TimerManager
from brynetkit.sha1 import SHA1, ReportType

buf = Buffer(16)
buf.write(b"hello")
print(buf.readable())          # b'hello'
buf.add_read_pos(5)

timers = TimerManager()
timers.add_timer(0.0, print, "fired")
timers.schedule()              # prints "fired"

h = SHA1()
h.update(b"abc")
h.final()
print(h.report_hash(ReportType.HEX_SHORT))
# A9993E364706816ABA3E25717850C26C9CD0D89D
```