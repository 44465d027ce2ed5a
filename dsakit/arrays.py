"""Operations on plain integer arrays: insertion, deletion, searching and merging."""

from __future__ import annotations

from collections.abc import Sequence

DEFAULT_CAPACITY = 100


def delete_at(items: Sequence[int], index: int) -> list[int]:
    """Return a copy of ``items`` with the element at ``index`` removed."""
    if not 0 <= index < len(items):
        raise IndexError(f"index {index} out of range for array of size {len(items)}")
    return [value for position, value in enumerate(items) if position != index]


def insert_at(
    items: Sequence[int], index: int, element: int, capacity: int = DEFAULT_CAPACITY
) -> list[int]:
    """Return a copy of ``items`` with ``element`` inserted at ``index``.

    Raises OverflowError when the array already holds ``capacity`` elements.
    """
    if len(items) >= capacity:
        raise OverflowError("no space for insertion")
    if not 0 <= index <= len(items):
        raise IndexError(f"index {index} out of range for array of size {len(items)}")
    result = list(items)
    result.insert(index, element)
    return result


def find_positions(items: Sequence[int], element: int) -> list[int]:
    """Return every 1-based position at which ``element`` occurs."""
    return [position for position, value in enumerate(items, start=1) if value == element]


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two ascending sequences into one ascending list."""
    merged: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def binary_search(items: Sequence[int], element: int) -> int | None:
    """Return the 0-based index of ``element`` in ascending ``items``, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == element:
            return mid
        if items[mid] < element:
            low = mid + 1
        else:
            high = mid - 1
    return None


def linear_search(items: Sequence[int], element: int) -> int | None:
    """Return the 1-based position of the first ``element`` in ``items``, or None."""
    for position, value in enumerate(items, start=1):
        if value == element:
            return position
    return None


def is_sorted(items: Sequence[int]) -> bool:
    """Tell whether ``items`` is in non-decreasing order."""
    return all(previous <= current for previous, current in zip(items, items[1:]))