"""Ordered containers: a binary-search-tree map and a sorted-vector set."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator
from typing import Any, Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class _TreeNode:
    __slots__ = ("key", "value", "left", "right")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.left: Optional[_TreeNode] = None
        self.right: Optional[_TreeNode] = None


class SimpleMap(Generic[K, V]):
    """Unbalanced binary search tree map; iteration yields (key, value) in key order.

    Inserting a key that is already present leaves its value unchanged.
    """

    def __init__(self) -> None:
        self._root: Optional[_TreeNode] = None
        self._size = 0

    def _find_node(self, key: K) -> Optional[_TreeNode]:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
        return None

    def insert(self, key: K, value: V) -> None:
        new = _TreeNode(key, value)
        if self._root is None:
            self._root = new
            self._size += 1
            return
        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = new
                    break
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = new
                    break
                node = node.right
            else:
                return
        self._size += 1

    def find(self, key: K) -> Optional[V]:
        """Return the value stored under key, or None when absent."""
        node = self._find_node(key)
        return node.value if node is not None else None

    def __contains__(self, key: object) -> bool:
        return self._find_node(key) is not None  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[tuple[K, V]]:
        pending: list[_TreeNode] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.key, node.value
            node = node.right

    def __repr__(self) -> str:
        return f"SimpleMap({dict(self)!r})"


class SimpleSet(Generic[K]):
    """Set of unique values kept in sorted order."""

    def __init__(self, items: Iterable[K] = ()) -> None:
        self._data: list[K] = []
        for item in items:
            self.insert(item)

    def insert(self, value: K) -> None:
        index = bisect.bisect_left(self._data, value)
        if index < len(self._data) and self._data[index] == value:
            return
        self._data.insert(index, value)

    def __contains__(self, value: object) -> bool:
        index = bisect.bisect_left(self._data, value)  # type: ignore[arg-type]
        return index < len(self._data) and self._data[index] == value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"SimpleSet({self._data!r})"