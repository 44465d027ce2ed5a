"""AVL tree insertion with left and right rotations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class AVLNode:
    """A node of an AVL tree; a leaf has height 1."""

    key: int
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 1


def height(node: AVLNode | None) -> int:
    """Height of ``node``; an empty tree has height 0."""
    return 0 if node is None else node.height


def balance_factor(node: AVLNode | None) -> int:
    """Left height minus right height; 0 for an empty tree."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def right_rotate(node: AVLNode) -> AVLNode:
    """Rotate right around ``node``; return the new subtree root."""
    pivot = node.left
    if pivot is None:
        raise ValueError("right rotation needs a left child")
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def left_rotate(node: AVLNode) -> AVLNode:
    """Rotate left around ``node``; return the new subtree root."""
    pivot = node.right
    if pivot is None:
        raise ValueError("left rotation needs a right child")
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def insert(node: AVLNode | None, key: int) -> AVLNode:
    """Insert ``key`` into the tree rooted at ``node``; return the new root.

    Keys already present are ignored.
    """
    if node is None:
        return AVLNode(key)
    if key < node.key:
        node.left = insert(node.left, key)
    elif key > node.key:
        node.right = insert(node.right, key)
    else:
        return node

    _update_height(node)
    balance = balance_factor(node)

    if balance > 1 and node.left is not None:
        if key > node.left.key:
            node.left = left_rotate(node.left)
        return right_rotate(node)
    if balance < -1 and node.right is not None:
        if key < node.right.key:
            node.right = right_rotate(node.right)
        return left_rotate(node)
    return node


def preorder(root: AVLNode | None) -> list[int]:
    """Keys in pre-order: node, left subtree, right subtree."""
    if root is None:
        return []
    return [root.key, *preorder(root.left), *preorder(root.right)]