"""A doubly linked list with a single-pointer head, suited to hash buckets.

A ``HlistHead`` holds only a reference to its first node, so the tail cannot
be reached in constant time. Each ``HlistNode`` knows its successor and the
holder of the reference that points at it: the head for the first node,
the preceding node otherwise. Nodes carry the object that owns them as
``owner``.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Union


class HlistHead:
    """The head of an hlist: a single reference to the first node."""

    __slots__ = ("first",)

    def __init__(self) -> None:
        self.first: HlistNode | None = None

    def __repr__(self) -> str:
        return f"HlistHead(first={self.first!r})"

    def _point_to(self, node: HlistNode | None) -> None:
        self.first = node

    def is_empty(self) -> bool:
        """True when the list has no nodes."""
        return self.first is None

    def add_head(self, node: HlistNode) -> None:
        """Insert ``node`` at the front of this list."""
        first = self.first
        node.next = first
        if first is not None:
            first.pprev = node
        self.first = node
        node.pprev = self

    def move_list(self, new: HlistHead) -> None:
        """Hand all nodes of this list over to ``new`` and leave this list empty."""
        new.first = self.first
        if new.first is not None:
            new.first.pprev = new
        self.first = None

    def __iter__(self) -> Iterator[HlistNode]:
        """Yield the nodes in order; the current one may be removed."""
        pos = self.first
        while pos is not None:
            following = pos.next
            yield pos
            pos = following

    def entries(self) -> Iterator[Any]:
        """Yield the owners of the nodes in order."""
        for node in self:
            yield node.owner


_Holder = Union[HlistHead, "HlistNode"]


class HlistNode:
    """A node of an hlist."""

    __slots__ = ("owner", "next", "pprev")

    def __init__(self, owner: Any = None) -> None:
        self.owner = owner
        self.next: HlistNode | None = None
        self.pprev: _Holder | None = None

    def __repr__(self) -> str:
        return f"HlistNode(owner={self.owner!r})"

    def _point_to(self, node: HlistNode | None) -> None:
        self.next = node

    def is_unhashed(self) -> bool:
        """True when this node is not on any list."""
        return self.pprev is None

    def _unlink(self) -> None:
        following = self.next
        holder = self.pprev
        holder._point_to(following)
        if following is not None:
            following.pprev = holder

    def remove(self) -> None:
        """Take this node out of its list."""
        if self.pprev is None:
            raise ValueError("node is not on a list")
        self._unlink()
        self.next = None
        self.pprev = None

    def remove_init(self) -> None:
        """Take this node out of its list if it is on one."""
        if not self.is_unhashed():
            self._unlink()
            self.next = None
            self.pprev = None

    def add_before(self, next_node: HlistNode) -> None:
        """Insert this node right before ``next_node``, which must be on a list."""
        if next_node.pprev is None:
            raise ValueError("node to insert before is not on a list")
        self.pprev = next_node.pprev
        self.next = next_node
        next_node.pprev = self
        self.pprev._point_to(self)

    def add_behind(self, prev_node: HlistNode) -> None:
        """Insert this node right after ``prev_node``."""
        self.next = prev_node.next
        prev_node.next = self
        self.pprev = prev_node
        if self.next is not None:
            self.next.pprev = self

    def add_fake(self) -> None:
        """Make this node look hashed without putting it on any list."""
        self.pprev = self

    def is_fake(self) -> bool:
        """True when this node was marked with ``add_fake``."""
        return self.pprev is self

    def is_singular_node(self, head: HlistHead) -> bool:
        """True when this node is the only node of ``head``."""
        return self.next is None and self.pprev is head

    def iter_from(self) -> Iterator[Any]:
        """Yield owners from this node onwards to the end of its list."""
        pos: HlistNode | None = self
        while pos is not None:
            following = pos.next
            yield pos.owner
            pos = following