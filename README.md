# fifokit

Small containers with no dependencies beyond the standard library.

- `fifokit.kfifo.Fifo` is a fixed-capacity FIFO of arbitrary elements. Its
  capacity must be a power of two of at least 2. `put` stores as many items as
  fit and returns how many it stored. `get` and `peek` return a list of up to
  `n` items, or all queued items when `n` is omitted. `peek_one` returns the
  next item without removing it. `skip` and `skip_n` drop items. `reset` and
  `reset_out` empty the queue. `Fifo.from_buffer_size(size, esize)` sizes a
  FIFO from a byte count and an element size, rounding the element count down
  to a power of two.
- `fifokit.kfifo.RecordFifo` is a byte FIFO of variable-length records. Each
  record is stored behind a 1- or 2-byte length header (`recsize`).
  - `put` returns `False` when the record does not fit.
  - `get` and `peek` return `None` when the queue is empty.
  - `get(maxlen)` consumes the whole record even when it returns fewer bytes.
  - `avail` gives the largest record that still fits.
- `fifokit.kfifo.max_record_len(length, recsize)` clamps a length to what a
  header of `recsize` bytes can hold.
- `fifokit.kfifo.FifoError` is a `ValueError` raised for invalid sizes, and for
  records too long for their header.
- `fifokit.ringbuf.RingBuffer` is a byte ring buffer of fixed-size items. It is
  sized from a buffer length in bytes, with the item count rounded down to a
  power of two. `put` takes bytes that form a whole number of items.
- `fifokit.linkedlist.ListHead` is a circular doubly linked list with intrusive
  links. Each link holds a reference back to its `owner`. The list supports:
  - adding at the front or tail, moving, replacing and swapping links;
  - splicing lists together, cutting a list in two and rotating it;
  - iterating forwards or backwards, and starting from a given link.
- `fifokit.hlist.HlistHead` and `HlistNode` form a doubly linked list with a
  single-reference head, suited to hash-table buckets.

The FIFOs and the ring buffer use free-running counters. One producer thread
and one consumer thread may share a queue without further locking. Neither
`reset` nor more than one producer or consumer is covered by that.

## Installation

```
pip install .
```

## Examples

```python
from fifokit.kfifo import Fifo, RecordFifo

fifo = Fifo(16)
fifo.put(range(20))     # 16: only 16 slots
fifo.get(4)             # [0, 1, 2, 3]
len(fifo)               # 12

records = RecordFifo(64, recsize=1)
records.put(b"hello")   # True
records.peek_len()      # 5
records.get(16)         # b"hello"
records.get()           # None, the queue is empty
```

```python
from fifokit.ringbuf import RingBuffer

ring = RingBuffer(bufsize=64, item_size=4)
ring.capacity()         # 16 items
ring.put(b"\x01\x00\x00\x00")   # 1
ring.get(1)             # b"\x01\x00\x00\x00"
```

```python
from fifokit.linkedlist import ListHead

class Node:
    def __init__(self, value):
        self.value = value
        self.link = ListHead(self)

head = ListHead(None)
for value in (101, 102, 103):
    Node(value).link.add_tail(head)

[node.value for node in head.entries()]   # [101, 102, 103]
```

```python
from fifokit.hlist import HlistHead, HlistNode

bucket = HlistHead()
for name in ("a", "b"):
    bucket.add_head(HlistNode(name))

list(bucket.entries())  # ["b", "a"]
```

## Demo

The demo starts one writer thread on a 16-slot `Fifo`. The writer puts the
integers 0 to 19 into it and discards the oldest value whenever the FIFO is
full. Two reader threads run one after the other, and each makes eight
attempts to read one value. Every step is printed:

```
fifokit-demo
```

The same run is available as `fifokit.demo.run_demo(out)`, which writes to any
text stream.

## Tests

```
pip install .[test]
pytest
```