"""A producer/consumer demonstration over a 16-slot element FIFO."""

from __future__ import annotations

import sys
import threading
from typing import TextIO

from fifokit.kfifo import Fifo

_output_lock = threading.Lock()


def _emit(out: TextIO, line: str) -> None:
    with _output_lock:
        out.write(line + "\n")


def write_worker(fifo: Fifo, out: TextIO) -> None:
    """Write 0..19, discarding the oldest element whenever the FIFO is full."""
    for value in range(20):
        if fifo.is_full():
            discarded = fifo.get(1)
            if discarded:
                _emit(out, f"discard {discarded[0]}")
        if fifo.put([value]) == 1:
            _emit(out, f"write {value}")
        else:
            _emit(out, "write fail")
    _emit(out, "write over")


def read_worker(fifo: Fifo, out: TextIO) -> None:
    """Make eight attempts to read one element each."""
    _emit(out, "read...")
    for _ in range(8):
        items = fifo.get(1)
        if len(items) == 1:
            _emit(out, f"read {items[0]}")


def run_demo(out: TextIO | None = None) -> None:
    """Run one writer thread against two reader threads run one after another."""
    if out is None:
        out = sys.stdout
    fifo = Fifo(16)
    _emit(out, f"hello kfifo, avail: {fifo.avail()}")

    writer = threading.Thread(target=write_worker, args=(fifo, out))
    writer.start()
    _emit(out, "..............")
    for _ in range(2):
        reader = threading.Thread(target=read_worker, args=(fifo, out))
        reader.start()
        reader.join()
    writer.join()

    _emit(out, "over")


def main(argv: list[str] | None = None) -> int:
    """Command entry point."""
    run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())