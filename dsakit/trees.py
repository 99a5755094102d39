"""Binary trees: building from sentinel-terminated input, BSTs and traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

EMPTY = -1


@dataclass(eq=False, repr=False)
class TreeNode:
    """A binary tree node."""

    data: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def __repr__(self) -> str:
        return f"TreeNode({self.data!r})"


def insert_into_bst(root: Optional[TreeNode], value: Any) -> TreeNode:
    """Insert value into the search tree and return its root.

    Larger values go right; equal and smaller values go left.
    """
    node = TreeNode(value)
    if root is None:
        return node
    current = root
    while True:
        if value > current.data:
            if current.right is None:
                current.right = node
                return root
            current = current.right
        else:
            if current.left is None:
                current.left = node
                return root
            current = current.left


def build_bst(values: Iterable[Any]) -> Optional[TreeNode]:
    """Insert values into a search tree until the -1 sentinel or the end."""
    root: Optional[TreeNode] = None
    for value in values:
        if value == EMPTY:
            break
        root = insert_into_bst(root, value)
    return root


def _take(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("input ended before the tree was complete") from None


def build_tree_preorder(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from values in preorder, with -1 marking a missing child."""
    stream = iter(values)

    def build() -> Optional[TreeNode]:
        value = _take(stream)
        if value == EMPTY:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def build_tree_level_order(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from values in level order, with -1 marking a missing child."""
    stream = iter(values)
    value = _take(stream)
    if value == EMPTY:
        return None
    root = TreeNode(value)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = _take(stream)
        if left != EMPTY:
            node.left = TreeNode(left)
            pending.append(node.left)
        right = _take(stream)
        if right != EMPTY:
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def inorder(root: Optional[TreeNode]) -> list[Any]:
    if root is None:
        return []
    return inorder(root.left) + [root.data] + inorder(root.right)


def preorder(root: Optional[TreeNode]) -> list[Any]:
    if root is None:
        return []
    return [root.data] + preorder(root.left) + preorder(root.right)


def postorder(root: Optional[TreeNode]) -> list[Any]:
    if root is None:
        return []
    return postorder(root.left) + postorder(root.right) + [root.data]


def level_order(root: Optional[TreeNode]) -> list[list[Any]]:
    """Return the values level by level, each level left to right."""
    levels: list[list[Any]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels