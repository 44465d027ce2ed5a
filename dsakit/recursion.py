"""Head, tail, tree and nested recursion, with loop equivalents."""

from __future__ import annotations

from collections.abc import Iterator


def _head(n: int) -> Iterator[int]:
    if n > 0:
        yield from _head(n - 1)
        yield n


def _tail(n: int) -> Iterator[int]:
    if n > 0:
        yield n
        yield from _tail(n - 1)


def _tree(n: int) -> Iterator[int]:
    if n > 0:
        yield n
        yield from _tree(n - 1)
        yield from _tree(n - 1)


def head_recursion(n: int) -> list[int]:
    """Values emitted by head recursion: the recursive call comes before the output."""
    return list(_head(n))


def head_loop(n: int) -> list[int]:
    """Loop form of head recursion: counts up from 1 to ``n``."""
    values = []
    i = 1
    while i <= n:
        values.append(i)
        i += 1
    return values


def tail_recursion(n: int) -> list[int]:
    """Values emitted by tail recursion: the output comes before the recursive call."""
    return list(_tail(n))


def tail_loop(n: int) -> list[int]:
    """Loop form of tail recursion: counts down from ``n`` to 1."""
    values = []
    while n > 0:
        values.append(n)
        n -= 1
    return values


def tree_recursion(n: int) -> list[int]:
    """Values emitted when each call prints ``n`` and recurses twice on ``n - 1``."""
    return list(_tree(n))


def nested_recursion(n: int) -> int:
    """The nested recursion f(n) = n - 10 if n > 100 else f(f(n + 11))."""
    if n > 100:
        return n - 10
    return nested_recursion(nested_recursion(n + 11))