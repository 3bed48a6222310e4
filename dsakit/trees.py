"""Binary search trees and level-order binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node."""

    value: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def _inorder_nodes(root: Node | None) -> Iterator[Node]:
    stack: list[Node] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current
        current = current.right


def inorder(root: Node | None) -> list[Any]:
    """Return the values of the tree in in-order (left, node, right)."""
    return [node.value for node in _inorder_nodes(root)]


def level_order(root: Node | None) -> list[Any]:
    """Return the values of the tree level by level, left to right."""
    if root is None:
        return []
    values = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        values.append(node.value)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return values


def level_insert(root: Node | None, value: Any) -> Node:
    """Insert value at the first free child slot in level order; return the root."""
    fresh = Node(value)
    if root is None:
        return fresh
    queue = deque([root])
    while queue:
        current = queue.popleft()
        if current.left is None:
            current.left = fresh
            break
        queue.append(current.left)
        if current.right is None:
            current.right = fresh
            break
        queue.append(current.right)
    return root


def tree_from_level_order(values: Iterable[Any]) -> Node | None:
    """Build a complete binary tree whose level order is the given values."""
    nodes = [Node(value) for value in values]
    for index, node in enumerate(nodes):
        left, right = 2 * index + 1, 2 * index + 2
        if left < len(nodes):
            node.left = nodes[left]
        if right < len(nodes):
            node.right = nodes[right]
    return nodes[0] if nodes else None


class BinarySearchTree:
    """A binary search tree of distinct values; duplicates are ignored."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add value unless it is already present."""
        if self.root is None:
            self.root = Node(value)
            return
        current = self.root
        while True:
            if value > current.value:
                if current.right is None:
                    current.right = Node(value)
                    return
                current = current.right
            elif value < current.value:
                if current.left is None:
                    current.left = Node(value)
                    return
                current = current.left
            else:
                return

    def delete(self, value: Any) -> None:
        """Remove value if present; a node with two children takes its successor's value."""
        parent: Node | None = None
        current = self.root
        while current is not None and current.value != value:
            parent = current
            current = current.left if value < current.value else current.right
        if current is None:
            return
        if current.left is not None and current.right is not None:
            heir_parent = current
            heir = current.right
            while heir.left is not None:
                heir_parent = heir
                heir = heir.left
            current.value = heir.value
            if heir_parent is current:
                heir_parent.right = heir.right
            else:
                heir_parent.left = heir.right
            return
        child = current.left if current.left is not None else current.right
        if parent is None:
            self.root = child
        elif parent.left is current:
            parent.left = child
        else:
            parent.right = child

    def successor(self, value: Any) -> Any | None:
        """Return the smallest stored value greater than value, or None."""
        current = self.root
        found: Node | None = None
        while current is not None:
            if value < current.value:
                found = current
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                if current.right is not None:
                    found = current.right
                    while found.left is not None:
                        found = found.left
                break
        return None if found is None else found.value

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in _inorder_nodes(self.root))

    def __contains__(self, value: Any) -> bool:
        current = self.root
        while current is not None:
            if value == current.value:
                return True
            current = current.left if value < current.value else current.right
        return False

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self)!r})"