"""A singly linked list of integers with insertion and deletion at either end or any index."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class _Node:
    data: int
    next: _Node | None = None


class LinkedList:
    """Singly linked list holding integers."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for item in items:
            self.insert_at_end(item)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return any(data == value for data in self)

    def __str__(self) -> str:
        return "".join(f"{data} -> " for data in self) + "NULL"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _node_before(self, index: int) -> _Node:
        """Return the node at ``index - 1`` (``index`` at least 1)."""
        node = self._head
        for _ in range(index - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert_at_beginning(self, data: int) -> None:
        """Put ``data`` in front of the first element."""
        self._head = _Node(data, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def insert_at_end(self, data: int) -> None:
        """Append ``data`` after the last element."""
        node = _Node(data)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def insert_at_index(self, index: int, data: int) -> None:
        """Insert ``data`` so that it ends up at the 0-based ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} out of range for list of length {self._size}")
        if index == 0:
            self.insert_at_beginning(data)
            return
        if index == self._size:
            self.insert_at_end(data)
            return
        previous = self._node_before(index)
        previous.next = _Node(data, previous.next)
        self._size += 1

    def add_unique(self, data: int) -> None:
        """Append ``data`` unless it is already present; duplicates raise ValueError."""
        if data in self:
            raise ValueError(
                f"The element {data} already exists in the linked list. "
                "Duplicate values are not allowed."
            )
        self.insert_at_end(data)

    def delete_first(self) -> int:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("List is empty.")
        removed = self._head
        self._head = removed.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return removed.data

    def delete_last(self) -> int:
        """Remove and return the last element."""
        if self._head is None:
            raise IndexError("List is empty.")
        if self._size == 1:
            return self.delete_first()
        previous = self._node_before(self._size - 1)
        removed = previous.next
        assert removed is not None
        previous.next = None
        self._tail = previous
        self._size -= 1
        return removed.data

    def delete_at_index(self, index: int) -> int:
        """Remove and return the element at the 0-based ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for list of length {self._size}")
        if index == 0:
            return self.delete_first()
        previous = self._node_before(index)
        removed = previous.next
        assert removed is not None
        previous.next = removed.next
        if removed is self._tail:
            self._tail = previous
        self._size -= 1
        return removed.data

    def delete_at_position(self, position: int) -> int:
        """Remove and return the element at the 1-based ``position``."""
        if self._head is None:
            raise IndexError("List is empty.")
        if not 1 <= position <= self._size:
            raise IndexError(f"Record not found at position {position}.")
        return self.delete_at_index(position - 1)

    def delete_key(self, value: int) -> bool:
        """Remove the first element equal to ``value``; tell whether one was found."""
        for index, data in enumerate(self):
            if data == value:
                self.delete_at_index(index)
                return True
        return False