"""An intrusive, circular, doubly linked list.

Every ``ListHead`` is a link that can sit in a list. A list is named by a
sentinel ``ListHead`` whose owner is usually ``None``. The other links carry
the object that holds them as ``owner``, so walking a list yields those
objects. A link that is alone points at itself, and that is what an empty
list looks like.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class ListHead:
    """A list link, usable both as a list sentinel and as an entry."""

    __slots__ = ("owner", "next", "prev")

    def __init__(self, owner: Any = None) -> None:
        self.owner = owner
        self.next: ListHead | None = self
        self.prev: ListHead | None = self

    def __repr__(self) -> str:
        return f"ListHead(owner={self.owner!r})"

    def _init(self) -> None:
        self.next = self
        self.prev = self

    @staticmethod
    def _insert(new: ListHead, prev: ListHead, next_: ListHead) -> None:
        next_.prev = new
        new.next = next_
        new.prev = prev
        prev.next = new

    @staticmethod
    def _unlink(prev: ListHead, next_: ListHead) -> None:
        next_.prev = prev
        prev.next = next_

    def _unlink_self(self) -> None:
        self._unlink(self.prev, self.next)

    def add(self, head: ListHead) -> None:
        """Insert this link right after ``head`` (stack order)."""
        self._insert(self, head, head.next)

    def add_tail(self, head: ListHead) -> None:
        """Insert this link right before ``head`` (queue order)."""
        self._insert(self, head.prev, head)

    def remove(self) -> None:
        """Take this link out of its list, leaving it unlinked."""
        self._unlink_self()
        self.next = None
        self.prev = None

    def remove_init(self) -> None:
        """Take this link out of its list and make it an empty list of its own."""
        self._unlink_self()
        self._init()

    def replace(self, new: ListHead) -> None:
        """Put ``new`` where this link is."""
        new.next = self.next
        new.next.prev = new
        new.prev = self.prev
        new.prev.next = new

    def replace_init(self, new: ListHead) -> None:
        """Put ``new`` where this link is and reset this link to empty."""
        self.replace(new)
        self._init()

    def swap(self, other: ListHead) -> None:
        """Exchange the positions of this link and ``other``."""
        pos = other.prev
        other.remove()
        self.replace(other)
        if pos is self:
            pos = other
        self.add(pos)

    def move(self, head: ListHead) -> None:
        """Unlink this link and insert it right after ``head``."""
        self._unlink_self()
        self.add(head)

    def move_tail(self, head: ListHead) -> None:
        """Unlink this link and insert it right before ``head``."""
        self._unlink_self()
        self.add_tail(head)

    def bulk_move_tail(self, first: ListHead, last: ListHead) -> None:
        """Move the run from ``first`` to ``last`` inclusive to the tail of this list.

        All three links must belong to the same list.
        """
        first.prev.next = last.next
        last.next.prev = first.prev

        self.prev.next = first
        first.prev = self.prev

        last.next = self
        self.prev = last

    def is_first(self, head: ListHead) -> bool:
        """True when this link is the first entry of ``head``."""
        return self.prev is head

    def is_last(self, head: ListHead) -> bool:
        """True when this link is the last entry of ``head``."""
        return self.next is head

    def is_empty(self) -> bool:
        """True when the list named by this link has no entries."""
        return self.next is self

    def is_empty_careful(self) -> bool:
        """True when both neighbours of this link are the link itself."""
        next_ = self.next
        return next_ is self and next_ is self.prev

    def rotate_left(self) -> None:
        """Move the first entry to the tail."""
        if not self.is_empty():
            self.next.move_tail(self)

    def rotate_to_front(self, node: ListHead) -> None:
        """Rotate the list so that ``node`` becomes its first entry."""
        self.move_tail(node)

    def is_singular(self) -> bool:
        """True when the list holds exactly one entry."""
        return not self.is_empty() and self.next is self.prev

    def cut_position(self, target: ListHead, entry: ListHead) -> None:
        """Move the entries up to and including ``entry`` into ``target``.

        ``target`` should be empty or disposable. When ``entry`` is this
        head, ``target`` is reset and nothing moves.
        """
        if self.is_empty():
            return
        if self.is_singular() and self.next is not entry and self is not entry:
            return
        if entry is self:
            target._init()
            return
        new_first = entry.next
        target.next = self.next
        target.next.prev = target
        target.prev = entry
        entry.next = target
        self.next = new_first
        new_first.prev = self

    def cut_before(self, target: ListHead, entry: ListHead) -> None:
        """Move the entries before ``entry`` into ``target``.

        When ``entry`` is this head, every entry moves.
        """
        if self.next is entry:
            target._init()
            return
        target.next = self.next
        target.next.prev = target
        target.prev = entry.prev
        target.prev.next = target
        self.next = entry
        entry.prev = self

    @staticmethod
    def _splice(source: ListHead, prev: ListHead, next_: ListHead) -> None:
        first = source.next
        last = source.prev

        first.prev = prev
        prev.next = first

        last.next = next_
        next_.prev = last

    def splice(self, other: ListHead) -> None:
        """Join the entries of ``other`` at the front of this list.

        ``other`` is left pointing at stale links; use ``splice_init`` to
        reuse it.
        """
        if not other.is_empty():
            self._splice(other, self, self.next)

    def splice_tail(self, other: ListHead) -> None:
        """Join the entries of ``other`` at the tail of this list."""
        if not other.is_empty():
            self._splice(other, self.prev, self)

    def splice_init(self, other: ListHead) -> None:
        """Join ``other`` at the front of this list and leave ``other`` empty."""
        if not other.is_empty():
            self._splice(other, self, self.next)
            other._init()

    def splice_tail_init(self, other: ListHead) -> None:
        """Join ``other`` at the tail of this list and leave ``other`` empty."""
        if not other.is_empty():
            self._splice(other, self.prev, self)
            other._init()

    def first_entry(self) -> Any:
        """Owner of the first entry."""
        if self.is_empty():
            raise IndexError("first entry of an empty list")
        return self.next.owner

    def last_entry(self) -> Any:
        """Owner of the last entry."""
        if self.is_empty():
            raise IndexError("last entry of an empty list")
        return self.prev.owner

    def first_entry_or_none(self) -> Any:
        """Owner of the first entry, or None when the list is empty."""
        return None if self.is_empty() else self.next.owner

    def __iter__(self) -> Iterator[ListHead]:
        """Yield the entry links in order; the current one may be removed."""
        pos = self.next
        while pos is not self:
            following = pos.next
            yield pos
            pos = following

    def __reversed__(self) -> Iterator[ListHead]:
        """Yield the entry links backwards; the current one may be removed."""
        pos = self.prev
        while pos is not self:
            preceding = pos.prev
            yield pos
            pos = preceding

    def entries(self) -> Iterator[Any]:
        """Yield the owners of the entries in order."""
        for link in self:
            yield link.owner

    def iter_from(self, node: ListHead) -> Iterator[Any]:
        """Yield owners from ``node`` onwards up to the end of this list."""
        pos = node
        while pos is not self:
            following = pos.next
            yield pos.owner
            pos = following

    def iter_from_reverse(self, node: ListHead) -> Iterator[Any]:
        """Yield owners from ``node`` backwards up to the start of this list."""
        pos = node
        while pos is not self:
            preceding = pos.prev
            yield pos.owner
            pos = preceding