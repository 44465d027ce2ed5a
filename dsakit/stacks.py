"""Bounded array-backed and unbounded linked stacks of integers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


class StackOverflowError(OverflowError):
    """Raised when a value is pushed onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when a value is popped from an empty stack."""


class ArrayStack:
    """Stack with room for ``size`` values.

    Iteration and ``peek`` positions run from the top (position 1) down to
    the bottom.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"stack size must not be negative, got {size}")
        self.size = size
        self._items: list[int] = []

    def __iter__(self) -> Iterator[int]:
        return reversed(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, items={list(self)!r})"

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def push(self, value: int) -> None:
        """Put ``value`` on top; raise StackOverflowError when there is no room."""
        if self.is_full():
            raise StackOverflowError(f"stack overflow, can't push {value}")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackUnderflowError("stack underflow, can't pop")
        return self._items.pop()

    def peek(self, position: int) -> int:
        """Return the value at the 1-based ``position`` counted from the top."""
        if not 1 <= position <= len(self._items):
            raise IndexError("invalid position for the stack")
        return self._items[len(self._items) - position]


@dataclass(eq=False)
class _Node:
    data: int
    next: _Node | None = None


class LinkedStack:
    """Unbounded stack built on singly linked nodes; iteration runs top first."""

    def __init__(self) -> None:
        self._top: _Node | None = None

    def __iter__(self) -> Iterator[int]:
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, value: int) -> None:
        """Put ``value`` on top."""
        self._top = _Node(value, self._top)

    def pop(self) -> int:
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        node = self._top
        self._top = node.next
        return node.data

    def peek(self, position: int) -> int:
        """Return the value at the 1-based ``position`` counted from the top."""
        if position < 1:
            raise IndexError("invalid position for the stack")
        for current, value in enumerate(self, start=1):
            if current == position:
                return value
        raise IndexError("invalid position for the stack")