"""Binary trees: building from value streams, traversals, size, height and a search tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

NULL_MARKER = -1
"""Value that stands for a missing child when building a tree from a stream."""


@dataclass
class Node:
    """A binary tree node."""

    data: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def _take(stream: Iterator[Any]) -> Any:
    try:
        return next(stream)
    except StopIteration:
        raise ValueError("value stream ended before the tree was complete") from None


def build_preorder(values: Iterable[Any]) -> Node | None:
    """Build a tree from values in preorder, with ``NULL_MARKER`` for each missing child.

    A stream that ends before every child has been given raises :class:`ValueError`.
    """
    stream = iter(values)
    root_value = _take(stream)
    if root_value == NULL_MARKER:
        return None
    root = Node(root_value)
    # Each pending entry is a node and which of its children is still to be read.
    pending: list[tuple[Node, str]] = [(root, "right"), (root, "left")]
    while pending:
        parent, side = pending.pop()
        value = _take(stream)
        if value == NULL_MARKER:
            continue
        child = Node(value)
        setattr(parent, side, child)
        pending.append((child, "right"))
        pending.append((child, "left"))
    return root


def build_level_order(values: Iterable[Any]) -> Node | None:
    """Build a tree from values level by level: the root, then each node's left and right.

    ``NULL_MARKER`` stands for a missing child. A stream that ends too early raises
    :class:`ValueError`.
    """
    stream = iter(values)
    root_value = _take(stream)
    if root_value == NULL_MARKER:
        return None
    root = Node(root_value)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            value = _take(stream)
            if value != NULL_MARKER:
                child = Node(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def _iter_inorder(root: Node | None) -> Iterator[Any]:
    path: list[Node] = []
    node = root
    while path or node is not None:
        while node is not None:
            path.append(node)
            node = node.left
        node = path.pop()
        yield node.data
        node = node.right


def inorder(root: Node | None) -> list[Any]:
    """Return the values in left, node, right order."""
    return list(_iter_inorder(root))


def preorder(root: Node | None) -> list[Any]:
    """Return the values in node, left, right order."""
    result: list[Any] = []
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        result.append(node.data)
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)
    return result


def postorder(root: Node | None) -> list[Any]:
    """Return the values in left, right, node order."""
    result: list[Any] = []
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        result.append(node.data)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    result.reverse()
    return result


def levels(root: Node | None) -> list[list[Any]]:
    """Return the values grouped by depth, each level from left to right."""
    result: list[list[Any]] = []
    current = [root] if root is not None else []
    while current:
        result.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return result


def level_order(root: Node | None) -> list[Any]:
    """Return the values breadth first, level by level."""
    return [value for level in levels(root) for value in level]


def count_nodes(root: Node | None) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _iter_inorder(root))


def height(root: Node | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path (0 for no tree)."""
    return len(levels(root))


class BinarySearchTree:
    """A binary search tree that keeps each key once."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: Node | None = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> bool:
        """Insert ``key``; return False if it was already present."""
        if self.root is None:
            self.root = Node(key)
            self._size += 1
            return True
        node = self.root
        while True:
            if key < node.data:
                if node.left is None:
                    node.left = Node(key)
                    break
                node = node.left
            elif key > node.data:
                if node.right is None:
                    node.right = Node(key)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def inorder(self) -> list[Any]:
        """Return the keys in ascending order."""
        return inorder(self.root)

    def __contains__(self, key: Any) -> bool:
        node = self.root
        while node is not None:
            if key < node.data:
                node = node.left
            elif key > node.data:
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return _iter_inorder(self.root)

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()!r})"