"""Power-of-two FIFO queues: an element FIFO and a length-prefixed record FIFO.

Both keep free-running ``in``/``out`` counters and index the storage with
``counter & mask``. A single producer and a single consumer may use one
queue from two threads without further locking.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class FifoError(ValueError):
    """Raised when a FIFO cannot be built with the requested geometry."""


def _is_power_of_two(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


def _rounddown_pow_of_two(value: int) -> int:
    return 1 << (value.bit_length() - 1) if value > 0 else 0


def max_record_len(length: int, recsize: int) -> int:
    """Clamp ``length`` to the largest value a ``recsize``-byte header can hold."""
    limit = (1 << (recsize * 8)) - 1
    return min(length, limit)


class _RingCore:
    """Shared counter and wrap-around copy logic."""

    def __init__(self, size: int, storage: Any) -> None:
        if size < 2 or not _is_power_of_two(size):
            raise FifoError(f"fifo size must be a power of two of at least 2, got {size}")
        self._data = storage
        self._mask = size - 1
        self._in = 0
        self._out = 0

    def __len__(self) -> int:
        """Number of used slots."""
        return self._in - self._out

    def capacity(self) -> int:
        """Total number of slots."""
        return self._mask + 1

    def _unused(self) -> int:
        return self.capacity() - len(self)

    def is_empty(self) -> bool:
        return self._in == self._out

    def is_full(self) -> bool:
        return len(self) > self._mask

    def reset(self) -> None:
        """Drop all content. Only safe while no other thread uses the queue."""
        self._in = self._out = 0

    def reset_out(self) -> None:
        """Discard all content from the reader's side."""
        self._out = self._in

    def _copy_in(self, items: Any, offset: int) -> None:
        offset &= self._mask
        count = len(items)
        first = min(count, self.capacity() - offset)
        self._data[offset:offset + first] = items[:first]
        self._data[:count - first] = items[first:]

    def _copy_out(self, count: int, offset: int) -> Any:
        offset &= self._mask
        first = min(count, self.capacity() - offset)
        return self._data[offset:offset + first] + self._data[:count - first]


class Fifo(_RingCore):
    """A bounded FIFO of arbitrary elements whose size is a power of two."""

    def __init__(self, size: int) -> None:
        super().__init__(size, [None] * size)
        self.esize = 1

    @classmethod
    def from_buffer_size(cls, size: int, esize: int) -> "Fifo":
        """Build a FIFO for a buffer of ``size`` bytes holding ``esize``-byte elements.

        The element count is rounded down to a power of two.
        """
        if esize <= 0:
            raise FifoError(f"element size must be positive, got {esize}")
        count = _rounddown_pow_of_two(size // esize)
        if count < 2:
            raise FifoError(f"a buffer of {size} bytes holds fewer than 2 elements of {esize} bytes")
        fifo = cls(count)
        fifo.esize = esize
        return fifo

    def __len__(self) -> int:
        return super().__len__()

    def capacity(self) -> int:
        return super().capacity()

    def avail(self) -> int:
        """Number of free slots."""
        return self._unused()

    def is_empty(self) -> bool:
        return super().is_empty()

    def is_full(self) -> bool:
        return super().is_full()

    def reset(self) -> None:
        super().reset()

    def reset_out(self) -> None:
        super().reset_out()

    def skip(self) -> None:
        """Drop the next element."""
        if self.is_empty():
            raise IndexError("skip from an empty fifo")
        self._out += 1

    def skip_n(self, n: int) -> None:
        """Drop the next ``n`` elements."""
        if n < 0 or n > len(self):
            raise ValueError(f"cannot skip {n} of {len(self)} elements")
        self._out += n

    def peek_len(self) -> int:
        """Size in bytes of the queued data."""
        return len(self) * self.esize

    def put(self, items: Iterable[Any]) -> int:
        """Append as many of ``items`` as fit; return how many were stored."""
        batch = list(items)
        count = min(len(batch), self._unused())
        self._copy_in(batch[:count], self._in)
        self._in += count
        return count

    def peek(self, n: int | None = None) -> list[Any]:
        """Return up to ``n`` elements (all when ``n`` is None) without removing them."""
        available = len(self)
        if n is None:
            n = available
        elif n < 0:
            raise ValueError(f"element count must not be negative, got {n}")
        return self._copy_out(min(n, available), self._out)

    def get(self, n: int | None = None) -> list[Any]:
        """Remove and return up to ``n`` elements (all when ``n`` is None)."""
        items = self.peek(n)
        self._out += len(items)
        return items

    def peek_one(self) -> Any:
        """Return the next element without removing it."""
        if self.is_empty():
            raise IndexError("peek into an empty fifo")
        return self._data[self._out & self._mask]


class RecordFifo(_RingCore):
    """A byte FIFO of variable-length records, each behind a 1- or 2-byte length header."""

    def __init__(self, size: int, recsize: int) -> None:
        if recsize not in (1, 2):
            raise FifoError(f"record header size must be 1 or 2, got {recsize}")
        super().__init__(size, bytearray(size))
        self.recsize = recsize

    def __len__(self) -> int:
        return super().__len__()

    def capacity(self) -> int:
        return super().capacity()

    def avail(self) -> int:
        """Largest record that still fits."""
        free = self._unused()
        if free <= self.recsize:
            return 0
        return max_record_len(free - self.recsize, self.recsize)

    def is_empty(self) -> bool:
        return super().is_empty()

    def is_full(self) -> bool:
        return super().is_full()

    def reset(self) -> None:
        super().reset()

    def reset_out(self) -> None:
        super().reset_out()

    def _peek_header(self) -> int:
        length = self._data[self._out & self._mask]
        if self.recsize > 1:
            length |= self._data[(self._out + 1) & self._mask] << 8
        return length

    def _poke_header(self, length: int) -> None:
        self._data[self._in & self._mask] = length & 0xFF
        if self.recsize > 1:
            self._data[(self._in + 1) & self._mask] = (length >> 8) & 0xFF

    def skip(self) -> None:
        """Drop the next record."""
        if self.is_empty():
            raise IndexError("skip from an empty fifo")
        self._out += self._peek_header() + self.recsize

    def peek_len(self) -> int:
        """Length of the next record, or 0 when the queue is empty."""
        if self.is_empty():
            return 0
        return self._peek_header()

    def put(self, record: bytes) -> bool:
        """Store one record; return False if it does not fit."""
        payload = bytes(record)
        length = len(payload)
        if max_record_len(length, self.recsize) != length:
            raise FifoError(
                f"record of {length} bytes exceeds a {self.recsize}-byte length header"
            )
        if length + self.recsize > self._unused():
            return False
        self._poke_header(length)
        self._copy_in(payload, self._in + self.recsize)
        self._in += length + self.recsize
        return True

    def _read(self, maxlen: int | None) -> tuple[bytes, int]:
        length = self._peek_header()
        take = length if maxlen is None else min(max(maxlen, 0), length)
        return bytes(self._copy_out(take, self._out + self.recsize)), length

    def peek(self, maxlen: int | None = None) -> bytes | None:
        """Return up to ``maxlen`` bytes of the next record without removing it.

        Returns None when the queue is empty.
        """
        if self.is_empty():
            return None
        return self._read(maxlen)[0]

    def get(self, maxlen: int | None = None) -> bytes | None:
        """Remove the next record and return up to ``maxlen`` bytes of it.

        The whole record is consumed even when it is truncated. Returns None
        when the queue is empty.
        """
        if self.is_empty():
            return None
        data, length = self._read(maxlen)
        self._out += length + self.recsize
        return data