"""Classic in-place comparison sorts on mutable integer lists."""

from __future__ import annotations

from collections.abc import MutableSequence


def _swap(items: MutableSequence[int], a: int, b: int) -> None:
    items[a], items[b] = items[b], items[a]


def bubble_sort(items: MutableSequence[int]) -> int:
    """Sort ``items`` in place; return the number of passes made."""
    n = len(items)
    passes = 0
    for done in range(n - 1):
        passes += 1
        for j in range(n - 1 - done):
            if items[j] > items[j + 1]:
                _swap(items, j, j + 1)
    return passes


def bubble_sort_adaptive(items: MutableSequence[int]) -> int:
    """Sort ``items`` in place, stopping after a pass with no swaps.

    Returns the number of passes made.
    """
    n = len(items)
    passes = 0
    for done in range(n - 1):
        passes += 1
        swapped = False
        for j in range(n - 1 - done):
            if items[j] > items[j + 1]:
                _swap(items, j, j + 1)
                swapped = True
        if not swapped:
            break
    return passes


def insertion_sort(items: MutableSequence[int]) -> None:
    """Sort ``items`` in place by insertion."""
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


def selection_sort(items: MutableSequence[int]) -> None:
    """Sort ``items`` in place by repeated selection of the minimum."""
    n = len(items)
    for i in range(n - 1):
        index_of_min = min(range(i, n), key=items.__getitem__)
        _swap(items, i, index_of_min)


def merge(items: MutableSequence[int], low: int, mid: int, high: int) -> None:
    """Merge the ascending runs ``items[low..mid]`` and ``items[mid+1..high]`` in place."""
    left = list(items[low : mid + 1])
    right = list(items[mid + 1 : high + 1])
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    items[low : high + 1] = merged


def merge_sort(items: MutableSequence[int]) -> None:
    """Sort ``items`` in place by top-down merge sort."""

    def sort_range(low: int, high: int) -> None:
        if low < high:
            mid = (low + high) // 2
            sort_range(low, mid)
            sort_range(mid + 1, high)
            merge(items, low, mid, high)

    sort_range(0, len(items) - 1)


def partition(items: MutableSequence[int], low: int, high: int) -> int:
    """Partition ``items[low..high]`` around ``items[low]``; return the pivot's final index.

    Elements left of the pivot are not greater than it, elements right of it are greater.
    """
    pivot = items[low]
    i = low + 1
    j = high
    while True:
        while i <= high and items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < j:
            _swap(items, i, j)
        else:
            break
    _swap(items, low, j)
    return j


def quick_sort(items: MutableSequence[int]) -> None:
    """Sort ``items`` in place by quicksort with the first element as pivot."""

    def sort_range(low: int, high: int) -> None:
        if low < high:
            pivot_index = partition(items, low, high)
            sort_range(low, pivot_index - 1)
            sort_range(pivot_index + 1, high)

    sort_range(0, len(items) - 1)