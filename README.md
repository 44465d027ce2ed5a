# dsakit

Classic data structures and algorithms in plain Python, with no dependencies
outside the standard library: array operations, comparison sorts, string
routines, recursion patterns, singly and circular linked lists, queues,
stacks, graph traversal, binary search trees and AVL trees.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.arrays`

Functions on integer sequences. Those that change an array return a new list.

- `delete_at(items, index)` – copy without the element at `index`; `IndexError` when out of range.
- `insert_at(items, index, element, capacity=100)` – copy with `element` at `index`; `OverflowError` when `items` already holds `capacity` values, `IndexError` for a bad index.
- `find_positions(items, element)` – every 1-based position of `element`.
- `merge_sorted(first, second)` – merge two ascending sequences.
- `binary_search(items, element)` – 0-based index in an ascending sequence, or `None`.
- `linear_search(items, element)` – 1-based position of the first match, or `None`.
- `is_sorted(items)` – `True` when non-decreasing.

### `dsakit.sorting`

In-place sorts of mutable integer sequences.

- `bubble_sort(items)` and `bubble_sort_adaptive(items)` return the number of passes made; the adaptive form stops after a pass without swaps.
- `insertion_sort(items)`, `selection_sort(items)`, `merge_sort(items)`, `quick_sort(items)`.
- `merge(items, low, mid, high)` merges the ascending runs `items[low..mid]` and `items[mid+1..high]`.
- `partition(items, low, high)` partitions around `items[low]` and returns the pivot's final index.

### `dsakit.strings`

`string_length`, `string_copy`, `string_concatenate(first, second)` and
`string_compare(first, second)`. The comparison returns 0 for equal strings,
otherwise the code-point difference at the first mismatch, a missing
character counting as code point 0.

### `dsakit.recursion`

`head_recursion(n)`, `tail_recursion(n)` and `tree_recursion(n)` return the
values each recursion pattern emits, as lists; `head_loop(n)` and
`tail_loop(n)` are their loop forms. `nested_recursion(n)` computes
f(n) = n - 10 if n > 100 else f(f(n + 11)).

### `dsakit.linked_list`

`LinkedList(items=())` – a singly linked list supporting `iter`, `len`, `in`
and `str` (`"1 -> 2 -> NULL"`). Methods: `insert_at_beginning`,
`insert_at_end`, `insert_at_index` (0-based), `add_unique` (raises
`ValueError` on a duplicate), `delete_first`, `delete_last`,
`delete_at_index` (0-based), `delete_at_position` (1-based) and `delete_key`
(returns whether a value was removed). Deleting from an empty list or at a
bad index raises `IndexError`.

### `dsakit.circular_list`

`CircularLinkedList(items=())` – a circular singly linked list with `iter`,
`len`, `insert_at_first`, `insert_at_end`, `insert_at_index`, `delete_first`,
`delete_last`, `delete_at_index` and `delete_key`, with the same index and
error conventions as `LinkedList`.

### `dsakit.graphs`

`depth_first_search(adjacency, start)` and `breadth_first_search(adjacency, start)`
walk a graph given as an adjacency matrix of 0s and 1s and return the visit
order, neighbours taken in ascending order.

### `dsakit.queues`

- `ArrayQueue(size)` – linear array queue holding at most `size - 1` values in its lifetime; dequeued slots are not reused.
- `CircularQueue(size)` – circular array queue holding up to `size - 1` values at a time.
- `LinkedQueue()` – unbounded, iterable front to back.
- `StackQueue(size)` – FIFO queue of up to `size` values built from stack operations, with `push` and `pop`.

Adding to a full queue raises `QueueFullError` (an `OverflowError`); taking
from an empty one raises `QueueEmptyError` (an `IndexError`).

### `dsakit.stacks`

- `ArrayStack(size)` – bounded stack with `push`, `pop`, `peek(position)`, `is_empty`, `is_full`, `len` and iteration from the top.
- `LinkedStack()` – unbounded stack with `push`, `pop`, `peek(position)`, `is_empty` and iteration from the top.

`peek` positions are 1-based from the top; a bad position raises
`IndexError`. A full stack raises `StackOverflowError`, an empty one
`StackUnderflowError`.

### `dsakit.avl`

`AVLNode`, `height`, `balance_factor`, `left_rotate`, `right_rotate`,
`insert(node, key)` (returns the new root; duplicate keys are ignored) and
`preorder(root)`.

### `dsakit.binary_tree`

`Node`, the traversals `preorder`, `inorder` and `postorder`, `is_bst`,
`search` and `search_iterative` (return the node or `None`), `insert(root, key)`
(returns the root; a duplicate raises `ValueError`), `inorder_predecessor`
and `delete(root, value)` (returns the new root).

## Examples

```python
from dsakit.sorting import quick_sort
from dsakit.arrays import binary_search

data = [9, 4, 4, 8, 7, 5, 6]
quick_sort(data)
print(data)                    # [4, 4, 5, 6, 7, 8, 9]
print(binary_search(data, 7))  # 4
```

```python
from dsakit.linked_list import LinkedList

items = LinkedList([7, 14, 44, 67])
items.insert_at_beginning(56)
items.delete_last()
print(items)   # 56 -> 7 -> 14 -> 44 -> NULL
```

```python
from dsakit.stacks import ArrayStack, StackOverflowError

stack = ArrayStack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except StackOverflowError:
    print("full")
```

```python
from dsakit import avl

root = None
for key in (1, 2, 4, 5, 6, 3):
    root = avl.insert(root, key)
print(avl.preorder(root))   # [4, 2, 1, 3, 5, 6]
```

```python
from dsakit.graphs import depth_first_search, breadth_first_search

adjacency = [
    [0, 1, 1],
    [1, 0, 0],
    [1, 0, 0],
]
print(depth_first_search(adjacency, 0))    # [0, 1, 2]
print(breadth_first_search(adjacency, 0))  # [0, 1, 2]
```

## What it does not do

dsakit is a library only. It has no command-line program and does not read
input from the keyboard or print results; every operation is a function or
method call that returns its result or raises an exception.