"""A set of ordered values stored in a binary search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class _Node(Generic[T]):
    value: T
    left: Optional["_Node[T]"] = None
    right: Optional["_Node[T]"] = None


class BinaryTree(Generic[T]):
    """A set of values kept in an (unbalanced) binary tree.

    A value added more than once is stored only once.
    """

    def __init__(self) -> None:
        self._root: Optional[_Node[T]] = None
        self._size = 0

    def insert(self, value: T) -> None:
        """Add ``value`` to the tree unless an equal value is already there."""
        if self._root is None:
            self._root = _Node(value)
            self._size = 1
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            elif node.value < value:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            else:
                return
        self._size += 1

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif node.value < value:
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return self._size