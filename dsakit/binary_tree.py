"""Binary trees of integers: traversals, BST check, search, insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Node | None = None
    right: Node | None = None


def _preorder(root: Node | None) -> Iterator[int]:
    if root is not None:
        yield root.data
        yield from _preorder(root.left)
        yield from _preorder(root.right)


def _inorder(root: Node | None) -> Iterator[int]:
    if root is not None:
        yield from _inorder(root.left)
        yield root.data
        yield from _inorder(root.right)


def _postorder(root: Node | None) -> Iterator[int]:
    if root is not None:
        yield from _postorder(root.left)
        yield from _postorder(root.right)
        yield root.data


def preorder(root: Node | None) -> list[int]:
    """Values in pre-order: node, left subtree, right subtree."""
    return list(_preorder(root))


def inorder(root: Node | None) -> list[int]:
    """Values in in-order: left subtree, node, right subtree."""
    return list(_inorder(root))


def postorder(root: Node | None) -> list[int]:
    """Values in post-order: left subtree, right subtree, node."""
    return list(_postorder(root))


def is_bst(root: Node | None) -> bool:
    """Tell whether the in-order values are strictly increasing."""
    previous: int | None = None
    for value in _inorder(root):
        if previous is not None and value <= previous:
            return False
        previous = value
    return True


def search(root: Node | None, key: int) -> Node | None:
    """Find the node holding ``key`` by recursive descent, or None."""
    if root is None:
        return None
    if key == root.data:
        return root
    if key < root.data:
        return search(root.left, key)
    return search(root.right, key)


def search_iterative(root: Node | None, key: int) -> Node | None:
    """Find the node holding ``key`` by iterative descent, or None."""
    node = root
    while node is not None:
        if key == node.data:
            return node
        node = node.left if key < node.data else node.right
    return None


def insert(root: Node | None, key: int) -> Node:
    """Insert ``key`` as a new leaf; return the root.

    An empty tree gets a new root. A key already present raises ValueError.
    """
    new = Node(key)
    if root is None:
        return new
    node = root
    while True:
        if key == node.data:
            raise ValueError(f"Cannot insert {key}, already in BST")
        if key < node.data:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right


def inorder_predecessor(node: Node) -> Node:
    """Return the rightmost node of ``node``'s left subtree."""
    current = node.left
    if current is None:
        raise ValueError("node has no left subtree")
    while current.right is not None:
        current = current.right
    return current


def delete(root: Node | None, value: int) -> Node | None:
    """Remove ``value`` from the tree; return the new root.

    A node with a left subtree takes its in-order predecessor's value; one
    without takes its right subtree's place. A missing value leaves the tree
    unchanged.
    """
    if root is None:
        return None
    if value < root.data:
        root.left = delete(root.left, value)
    elif value > root.data:
        root.right = delete(root.right, value)
    elif root.left is None:
        return root.right
    else:
        predecessor = inorder_predecessor(root)
        root.data = predecessor.data
        root.left = delete(root.left, predecessor.data)
    return root