"""A byte ring buffer that stores fixed-size items.

The item count is rounded down to a power of two. Free-running ``in`` and
``out`` counters are masked to index the storage. One producer and one
consumer may share a buffer across two threads.
"""

from __future__ import annotations


def _rounddown_pow_of_two(value: int) -> int:
    return 1 << (value.bit_length() - 1) if value > 0 else 0


class RingBuffer:
    """A bounded FIFO of ``item_size``-byte items backed by ``bufsize`` bytes."""

    def __init__(self, bufsize: int, item_size: int = 1) -> None:
        if item_size <= 0:
            raise ValueError(f"item size must be positive, got {item_size}")
        count = _rounddown_pow_of_two(bufsize // item_size)
        if count < 1:
            raise ValueError(
                f"a buffer of {bufsize} bytes cannot hold an item of {item_size} bytes"
            )
        self.item_size = item_size
        self._mask = count - 1
        self._data = bytearray(count * item_size)
        self._in = 0
        self._out = 0

    def __len__(self) -> int:
        """Number of items in the buffer."""
        return self._in - self._out

    def capacity(self) -> int:
        """Largest number of items the buffer can hold."""
        return self._mask + 1

    def avail(self) -> int:
        """Number of items that still fit."""
        return self.capacity() - len(self)

    def is_full(self) -> bool:
        return len(self) > self._mask

    def is_empty(self) -> bool:
        return self._in == self._out

    def _byte_offset(self, counter: int) -> int:
        return (counter & self._mask) * self.item_size

    def _copy_in(self, payload: bytes, counter: int) -> None:
        offset = self._byte_offset(counter)
        size = len(self._data)
        first = min(len(payload), size - offset)
        self._data[offset:offset + first] = payload[:first]
        self._data[:len(payload) - first] = payload[first:]

    def _copy_out(self, nbytes: int, counter: int) -> bytes:
        offset = self._byte_offset(counter)
        size = len(self._data)
        first = min(nbytes, size - offset)
        return bytes(self._data[offset:offset + first] + self._data[:nbytes - first])

    def put(self, data: bytes) -> int:
        """Append as many whole items of ``data`` as fit; return the item count stored."""
        payload = bytes(data)
        if len(payload) % self.item_size:
            raise ValueError(
                f"data of {len(payload)} bytes is not a whole number of "
                f"{self.item_size}-byte items"
            )
        count = min(len(payload) // self.item_size, self.avail())
        self._copy_in(payload[:count * self.item_size], self._in)
        self._in += count
        return count

    def peek(self, item_count: int | None = None) -> bytes:
        """Return up to ``item_count`` items (all when None) without removing them."""
        available = len(self)
        if item_count is None:
            item_count = available
        elif item_count < 0:
            raise ValueError(f"item count must not be negative, got {item_count}")
        count = min(item_count, available)
        return self._copy_out(count * self.item_size, self._out)

    def get(self, item_count: int | None = None) -> bytes:
        """Remove and return up to ``item_count`` items (all when None)."""
        data = self.peek(item_count)
        self._out += len(data) // self.item_size
        return data