"""FIFOs, record FIFOs, ring buffers, intrusive linked lists and a threaded demo."""

__version__ = "0.1.0"
__all__ = ["kfifo", "ringbuf", "linkedlist", "hlist", "demo"]