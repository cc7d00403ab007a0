"""A self-balancing binary search tree (AVL tree)."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Tuple


class Node:
    """A tree node holding a key, its value, the two subtrees and its height."""

    __slots__ = ("key", "value", "left", "right", "height")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None
        self.height = 0

    def __repr__(self) -> str:
        return f"Node(key={self.key!r}, value={self.value!r})"


def _height(node: Optional[Node]) -> int:
    return -1 if node is None else node.height


def _update_height(node: Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance_factor(node: Node) -> int:
    return _height(node.right) - _height(node.left)


def _rotate_right(node: Node) -> Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rotate_left(node: Node) -> Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rebalance(node: Node) -> Node:
    _update_height(node)
    factor = _balance_factor(node)
    if factor == 2:
        assert node.right is not None
        if _balance_factor(node.right) < 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    if factor == -2:
        assert node.left is not None
        if _balance_factor(node.left) > 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    return node


def _insert(node: Optional[Node], key: Any, value: Any) -> Node:
    if node is None:
        return Node(key, value)
    if key < node.key:
        node.left = _insert(node.left, key, value)
    else:
        node.right = _insert(node.right, key, value)
    return _rebalance(node)


def _find_min(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _remove_min(node: Node) -> Optional[Node]:
    if node.left is None:
        return node.right
    node.left = _remove_min(node.left)
    return _rebalance(node)


def _remove(node: Optional[Node], key: Any) -> Optional[Node]:
    if node is None:
        return None
    if key < node.key:
        node.left = _remove(node.left, key)
    elif node.key < key:
        node.right = _remove(node.right, key)
    else:
        left, right = node.left, node.right
        if right is None:
            return left
        smallest = _find_min(right)
        smallest.right = _remove_min(right)
        smallest.left = left
        return _rebalance(smallest)
    return _rebalance(node)


class AVLTree:
    """Ordered key/value store kept balanced on every insertion and removal.

    Equal keys are allowed; a new entry with an existing key is placed
    after the existing ones.
    """

    def __init__(self) -> None:
        self._root: Optional[Node] = None

    def insert(self, key: Any, value: Any) -> None:
        """Add an entry for ``key``."""
        self._root = _insert(self._root, key, value)

    def remove(self, key: Any) -> bool:
        """Remove one entry for ``key``; return whether one was present."""
        found = self.search(key) is not None
        if found:
            self._root = _remove(self._root, key)
        return found

    def search(self, key: Any) -> Optional[Node]:
        """Return the node holding ``key``, or ``None``."""
        node = self._root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def height(self) -> int:
        """Height of the tree: -1 when empty, 0 for a single node."""
        return _height(self._root)

    @property
    def root(self) -> Optional[Node]:
        return self._root

    def __iter__(self) -> Iterator[Tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in ascending key order."""
        pending: list[Node] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.key, node.value
            node = node.right

    def __repr__(self) -> str:
        return f"AVLTree({list(self)!r})"