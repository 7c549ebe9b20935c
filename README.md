# threadlab

Small, self-contained tools for exploring thread synchronisation, plus a few
I/O helpers:

- `threadlab.counters` – two threads each increment a shared counter `niters`
  times, with or without a lock, and report whether the total came out right.
- `threadlab.greetings` – threads print `Hello from thread N` in four ways:
  all reading their id from one shared, changing cell (racy), each with its
  own id, one at a time under a mutex, or a few at a time under a counting
  semaphore.
- `threadlab.sbuf` – `SharedBuffer`, a bounded FIFO shared between producer
  and consumer threads.
- `threadlab.rio` – `rio_readn` and `rio_writen` for unbuffered reads and
  writes on file descriptors that retry after signal interruptions, and
  `RioBuffer` for buffered byte and line reads.
- `threadlab.net` – `open_clientfd` and `open_listenfd` for IPv4 TCP sockets,
  with `DnsError` raised when a host name cannot be resolved.

There are no third-party dependencies.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

### threadlab-counter

```
threadlab-counter [--sync] <niters>
```

Starts two threads that each add 1 to a shared counter `niters` times. It
prints `OK cnt=...` when the total equals `2 * niters` and `BOOM! cnt=...`
when updates were lost. Without `--sync` each increment is an unguarded
read-then-write; with `--sync` every increment is made under a lock, so the
result is always right. The count is parsed leniently: leading digits are
used and anything unparsable counts as 0. With the wrong number of arguments
a usage line is printed.

```
threadlab-counter --sync 100000
```

### threadlab-greet

```
threadlab-greet [racy|ids|mutex|semaphore] [--threads N] [--permits N] [--delay SECONDS]
```

The variant defaults to `ids`; `--threads` defaults to 4, `--permits` (used
by `semaphore` only) to 2 and `--delay` (used by `mutex` and `semaphore`) to
1.0 seconds.

- `racy` – ids may repeat and may equal the thread count, because threads
  read a cell the starting loop keeps changing.
- `ids` – each thread prints its own id.
- `mutex` – threads take turns; each sleeps `--delay` seconds before greeting.
- `semaphore` – at most `--permits` threads sleep and greet at the same time.

```
threadlab-greet mutex --delay 0.2
```

## Library use

### Counters and greetings

```python
from threadlab.counters import run_counter, format_result

cnt = run_counter(1000, synchronized=True)
print(format_result(cnt, 1000))   # OK cnt=2000
```

Each greeting function returns the ids in the order they were printed:

```python
from threadlab.greetings import greet_with_ids, greet_with_semaphore

sorted(greet_with_ids(4))                       # [0, 1, 2, 3]
greet_with_semaphore(4, permits=2, delay=0.1)
```

`greet_with_semaphore` raises `ValueError` when `permits` is less than 1.

### SharedBuffer

`insert` blocks while all `n` slots are taken, `remove` blocks while the
buffer is empty, and `len()` gives the number of items held. Creating a
buffer with fewer than one slot raises `ValueError`.

```python
import threading
from threadlab.sbuf import SharedBuffer

buf = SharedBuffer(4)

def produce():
    for item in range(10):
        buf.insert(item)

producer = threading.Thread(target=produce)
producer.start()
items = [buf.remove() for _ in range(10)]
producer.join()
assert items == list(range(10))
```

### Robust I/O

The functions accept either an integer descriptor or an object with a
`fileno()` method. `rio_readn` and `RioBuffer.readnb` return fewer bytes than
asked only at end of file. `RioBuffer.readlineb(maxlen)` returns a line of at
most `maxlen - 1` bytes, newline included, and `b""` at end of file; iterating
over a `RioBuffer` yields lines until end of file. Byte and line reads can be
mixed on the same buffer.

```python
import os
from threadlab.rio import RioBuffer, rio_writen

read_fd, write_fd = os.pipe()
rio_writen(write_fd, b"first line\nsecond line\n")
os.close(write_fd)

reader = RioBuffer(read_fd)
print(reader.readlineb(8192))   # b"first line\n"
print(reader.readnb(100))       # b"second line\n"
os.close(read_fd)
```

### Sockets

```python
from threadlab.net import open_listenfd, open_clientfd

server = open_listenfd(0)                 # any free port, SO_REUSEADDR set
port = server.getsockname()[1]
client = open_clientfd("localhost", port)
conn, _ = server.accept()
```

`open_clientfd` raises `DnsError` (a subclass of `OSError`) for names that
cannot be resolved and `OSError` when the connection fails.

## What it does not do

The socket helpers only open connections; the package ships no server or
client program built on them, and no command that runs a producer/consumer
pipeline over `SharedBuffer`. It also has no wrappers for process control,
signals or memory mapping: use `os`, `signal` and `mmap` directly.