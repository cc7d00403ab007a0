"""A string-keyed associative array backed by an AVL tree."""

from __future__ import annotations

from typing import Any, Optional

from dslabs.avltree import AVLTree, Node


class AssociativeArray:
    """Key/value container created with one initial entry."""

    def __init__(self, key: Any, value: Any) -> None:
        self._tree = AVLTree()
        self._tree.insert(key, value)

    def add(self, key: Any, value: Any) -> None:
        """Add an entry for ``key``."""
        self._tree.insert(key, value)

    def remove(self, key: Any) -> bool:
        """Remove the entry for ``key``; return whether it was present."""
        return self._tree.remove(key)

    def search(self, key: Any) -> Optional[Node]:
        """Return the node stored under ``key``, or ``None``."""
        return self._tree.search(key)

    def __repr__(self) -> str:
        return f"AssociativeArray({list(self._tree)!r})"