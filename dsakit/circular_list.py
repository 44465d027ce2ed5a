"""A circular singly linked list of integers: the last node links back to the first."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class _Node:
    data: int
    next: _Node = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.next = self


class CircularLinkedList:
    """Circular singly linked list holding integers.

    Only the last node is stored; its successor is the head, so both ends
    are reachable in constant time.
    """

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._tail: _Node | None = None
        self._size = 0
        for item in items:
            self.insert_at_end(item)

    def _nodes(self) -> Iterator[_Node]:
        if self._tail is None:
            return
        node = self._tail.next
        while True:
            yield node
            if node is self._tail:
                return
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _node_before(self, index: int) -> _Node:
        """Return the node preceding the 0-based ``index``; index 0 gives the tail."""
        assert self._tail is not None
        node = self._tail
        for _ in range(index):
            node = node.next
        return node

    def _link_after(self, previous: _Node | None, data: int) -> _Node:
        node = _Node(data)
        if previous is None:
            self._tail = node
        else:
            node.next = previous.next
            previous.next = node
        self._size += 1
        return node

    def _unlink_after(self, previous: _Node) -> int:
        removed = previous.next
        if removed is previous:
            self._tail = None
        else:
            previous.next = removed.next
            if removed is self._tail:
                self._tail = previous
        self._size -= 1
        return removed.data

    def insert_at_first(self, data: int) -> None:
        """Make ``data`` the new first element."""
        self._link_after(self._tail, data)

    def insert_at_end(self, data: int) -> None:
        """Append ``data`` after the last element, before the wrap to the first."""
        self._tail = self._link_after(self._tail, data)

    def insert_at_index(self, index: int, data: int) -> None:
        """Insert ``data`` so that it ends up at the 0-based ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} out of range for list of length {self._size}")
        if index == self._size:
            self.insert_at_end(data)
        elif index == 0:
            self.insert_at_first(data)
        else:
            self._link_after(self._node_before(index), data)

    def delete_first(self) -> int:
        """Remove and return the first element."""
        if self._tail is None:
            raise IndexError("List is empty.")
        return self._unlink_after(self._tail)

    def delete_last(self) -> int:
        """Remove and return the last element."""
        if self._tail is None:
            raise IndexError("List is empty.")
        return self._unlink_after(self._node_before(self._size - 1))

    def delete_at_index(self, index: int) -> int:
        """Remove and return the element at the 0-based ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for list of length {self._size}")
        return self._unlink_after(self._node_before(index))

    def delete_key(self, value: int) -> bool:
        """Remove the first element equal to ``value``; tell whether one was found."""
        for index, data in enumerate(self):
            if data == value:
                self.delete_at_index(index)
                return True
        return False