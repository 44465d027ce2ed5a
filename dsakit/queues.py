"""Queues backed by a linear array, a circular array, a linked list and two stacks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


class QueueFullError(OverflowError):
    """Raised when a value is added to a queue with no room left."""


class QueueEmptyError(IndexError):
    """Raised when a value is taken from an empty queue."""


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError(f"queue size must be positive, got {size}")


class ArrayQueue:
    """Linear array queue with ``size`` slots.

    Slot 0 is never used, so at most ``size - 1`` values can ever be
    enqueued; dequeuing does not free slots, so the queue can be empty and
    full at the same time.
    """

    def __init__(self, size: int) -> None:
        _check_size(size)
        self.size = size
        self._slots: list[int] = []
        self._front = 0

    def is_empty(self) -> bool:
        return self._front == len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) == self.size - 1

    def enqueue(self, value: int) -> None:
        if self.is_full():
            raise QueueFullError("This Queue is full")
        self._slots.append(value)

    def dequeue(self) -> int:
        if self.is_empty():
            raise QueueEmptyError("This Queue is empty")
        value = self._slots[self._front]
        self._front += 1
        return value


class CircularQueue:
    """Circular array queue with ``size`` slots, holding up to ``size - 1`` values."""

    def __init__(self, size: int) -> None:
        _check_size(size)
        self.size = size
        self._slots = [0] * size
        self._front = 0
        self._rear = 0

    def is_empty(self) -> bool:
        return self._rear == self._front

    def is_full(self) -> bool:
        return (self._rear + 1) % self.size == self._front

    def enqueue(self, value: int) -> None:
        if self.is_full():
            raise QueueFullError("This Queue is full")
        self._rear = (self._rear + 1) % self.size
        self._slots[self._rear] = value

    def dequeue(self) -> int:
        if self.is_empty():
            raise QueueEmptyError("This Queue is empty")
        self._front = (self._front + 1) % self.size
        return self._slots[self._front]


@dataclass(eq=False)
class _Node:
    data: int
    next: _Node | None = None


class LinkedQueue:
    """Unbounded queue built on singly linked nodes."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None

    def __iter__(self) -> Iterator[int]:
        node = self._front
        while node is not None:
            yield node.data
            node = node.next

    def is_empty(self) -> bool:
        return self._front is None

    def enqueue(self, value: int) -> None:
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node

    def dequeue(self) -> int:
        if self._front is None:
            raise QueueEmptyError("Queue is Empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        return node.data


class StackQueue:
    """Bounded FIFO queue that uses only stack push and pop operations.

    Removing the front reverses the stack onto a second stack, pops the
    oldest value from it and reverses the rest back.
    """

    def __init__(self, size: int) -> None:
        _check_size(size)
        self.size = size
        self._stack: list[int] = []

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._stack))

    def is_empty(self) -> bool:
        return not self._stack

    def push(self, value: int) -> None:
        if len(self._stack) >= self.size:
            raise QueueFullError("Queue overflow")
        self._stack.append(value)

    def pop(self) -> int:
        if not self._stack:
            raise QueueEmptyError("Queue underflow")
        reversed_stack: list[int] = []
        while self._stack:
            reversed_stack.append(self._stack.pop())
        value = reversed_stack.pop()
        while reversed_stack:
            self._stack.append(reversed_stack.pop())
        return value