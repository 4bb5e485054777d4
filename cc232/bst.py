"""Unbalanced binary search tree with bounds queries and rotations."""

from __future__ import annotations

import operator
from typing import Callable, Optional, Sequence, TypeVar

from .binnode import BinNode, stature
from .binary_tree import BinaryTree

T = TypeVar("T")

Less = Callable[[T, T], bool]


class BinarySearchTree(BinaryTree[T]):
    """A BST ordered by a strict 'less' predicate; duplicates are rejected."""

    def __init__(self, less: Optional[Less] = None) -> None:
        super().__init__()
        self.less: Less = less if less is not None else operator.lt

    def find_last(self, value: T) -> Optional[BinNode[T]]:
        """The node holding value, or the last node visited looking for it."""
        w = self._root
        prev = None
        while w is not None:
            prev = w
            if self.less(value, w.data):
                w = w.left
            elif self.less(w.data, value):
                w = w.right
            else:
                return w
        return prev

    def find_eq(self, value: T) -> Optional[BinNode[T]]:
        w = self._root
        while w is not None:
            if self.less(value, w.data):
                w = w.left
            elif self.less(w.data, value):
                w = w.right
            else:
                return w
        return None

    def lower_bound(self, value: T) -> Optional[BinNode[T]]:
        """Node with the smallest key not less than value."""
        w = self._root
        candidate = None
        while w is not None:
            if self.less(value, w.data):
                candidate = w
                w = w.left
            elif self.less(w.data, value):
                w = w.right
            else:
                return w
        return candidate

    def upper_bound(self, value: T) -> Optional[BinNode[T]]:
        """Node with the smallest key strictly greater than value."""
        w = self._root
        candidate = None
        while w is not None:
            if self.less(value, w.data):
                candidate = w
                w = w.left
            else:
                w = w.right
        return candidate

    def find(self, value: T) -> Optional[BinNode[T]]:
        return self.lower_bound(value)

    def min_node(self) -> Optional[BinNode[T]]:
        return None if self._root is None else self._root.leftmost()

    def max_node(self) -> Optional[BinNode[T]]:
        return None if self._root is None else self._root.rightmost()

    def __contains__(self, value: object) -> bool:
        return self.find_eq(value) is not None  # type: ignore[arg-type]

    def add(self, value: T) -> bool:
        """Insert value; False if an equal key is already present."""
        return self.add_node(BinNode(value))

    def add_node(self, node: BinNode[T]) -> bool:
        node.left = None
        node.right = None
        node.height = 0
        return self.add_child(self.find_last(node.data), node)

    def add_child(self, parent: Optional[BinNode[T]], node: BinNode[T]) -> bool:
        if parent is None:
            self._root = node
            node.parent = None
            self._size += 1
            return True
        if self.less(node.data, parent.data):
            if parent.left is not None:
                return False
            parent.left = node
        elif self.less(parent.data, node.data):
            if parent.right is not None:
                return False
            parent.right = node
        else:
            return False
        node.parent = parent
        self._size += 1
        self.update_height_above(parent)
        return True

    def remove(self, value: T) -> bool:
        """Remove value; False if it is not present."""
        node = self.find_eq(value)
        if node is None:
            return False
        self.remove_node(node)
        return True

    def remove_node(self, node: Optional[BinNode[T]]) -> None:
        if node is None:
            return
        if node.left is None or node.right is None:
            self.splice(node)
            return
        w = node.succ()
        node.data = w.data
        self.splice(w)

    def splice(self, node: BinNode[T]) -> None:
        """Unlink a node with at most one child, lifting that child up."""
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if node is self._root:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        if child is not None:
            child.parent = parent
        node.parent = None
        self._size -= 1
        self.update_height_above(parent)

    def _replace_in_parent(self, u: BinNode[T], w: BinNode[T]) -> None:
        w.parent = u.parent
        if u.parent is None:
            self._root = w
        elif u.parent.left is u:
            u.parent.left = w
        else:
            u.parent.right = w

    def rotate_left(self, u: Optional[BinNode[T]]) -> None:
        if u is None or u.right is None:
            return
        w = u.right
        self._replace_in_parent(u, w)
        u.right = w.left
        if u.right is not None:
            u.right.parent = u
        w.left = u
        u.parent = w
        self.update_height(u)
        self.update_height(w)
        self.update_height_above(w.parent)

    def rotate_right(self, u: Optional[BinNode[T]]) -> None:
        if u is None or u.left is None:
            return
        w = u.left
        self._replace_in_parent(u, w)
        u.left = w.right
        if u.left is not None:
            u.left.parent = u
        w.right = u
        u.parent = w
        self.update_height(u)
        self.update_height(w)
        self.update_height_above(w.parent)

    def is_bst(self) -> bool:
        """True if keys are strictly ordered and parent links are sound."""
        return self._ordered(self._root, None, None) and self.check_parent_links()

    def _ordered(self, node: Optional[BinNode[T]], low: Optional[BinNode[T]],
                 high: Optional[BinNode[T]]) -> bool:
        if node is None:
            return True
        if low is not None and not self.less(low.data, node.data):
            return False
        if high is not None and not self.less(node.data, high.data):
            return False
        return self._ordered(node.left, low, node) and self._ordered(node.right, node, high)

    @classmethod
    def build_balanced_from_sorted(cls, values: Sequence[T],
                                   less: Optional[Less] = None) -> "BinarySearchTree[T]":
        """Build a height-balanced tree from already sorted values."""
        values = list(values)

        def build(lo: int, hi: int, parent: Optional[BinNode[T]]) -> Optional[BinNode[T]]:
            if lo >= hi:
                return None
            mid = lo + (hi - lo) // 2
            node = BinNode(values[mid], parent)
            node.left = build(lo, mid, node)
            node.right = build(mid + 1, hi, node)
            node.height = 1 + max(stature(node.left), stature(node.right))
            return node

        tree = cls(less)
        tree._root = build(0, len(values), None)
        tree._size = len(values)
        tree.update_height_above(tree._root)
        return tree