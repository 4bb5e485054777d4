"""Binary tree owning its nodes, with size and height bookkeeping."""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from .binnode import (
    BinNode,
    InorderStrategy,
    Visit,
    inorder_values,
    level_order_values,
    postorder_values,
    postorder_values_iterative,
    preorder_values,
    preorder_values_iterative,
    stature,
)

T = TypeVar("T")


class BinTree(Generic[T]):
    """A rooted binary tree that tracks its node count and node heights."""

    def __init__(self) -> None:
        self._size = 0
        self._root: Optional[BinNode[T]] = None

    def __len__(self) -> int:
        return self._size

    @property
    def root(self) -> Optional[BinNode[T]]:
        return self._root

    def empty(self) -> bool:
        return self._size == 0

    def insert_as_root(self, value: T) -> BinNode[T]:
        """Discard the current contents and start over with one node."""
        self.clear()
        self._root = BinNode(value)
        self._size = 1
        return self._root

    def insert_as_lc(self, parent: Optional[BinNode[T]], value: T) -> BinNode[T]:
        if parent is None:
            raise ValueError("El padre no puede ser null")
        child = parent.insert_as_lc(value)
        self._size += 1
        self.update_height_above(parent)
        return child

    def insert_as_rc(self, parent: Optional[BinNode[T]], value: T) -> BinNode[T]:
        if parent is None:
            raise ValueError("El padre no puede ser null")
        child = parent.insert_as_rc(value)
        self._size += 1
        self.update_height_above(parent)
        return child

    def update_height(self, node: Optional[BinNode[T]]) -> int:
        """Recompute a node's height from its children; -1 for None."""
        if node is None:
            return -1
        node.height = 1 + max(stature(node.left), stature(node.right))
        return node.height

    def update_height_above(self, node: Optional[BinNode[T]]) -> None:
        while node is not None:
            self.update_height(node)
            node = node.parent

    def _attach(self, parent: Optional[BinNode[T]], subtree: "BinTree[T]",
                left: bool) -> Optional[BinNode[T]]:
        if parent is None:
            raise ValueError("El padre no puede ser null")
        if left and parent.left is not None:
            raise ValueError("El padre ya tiene hijo izquierdo")
        if not left and parent.right is not None:
            raise ValueError("El padre ya tiene hijo derecho")
        attached = subtree._root
        if attached is None:
            return None
        if left:
            parent.left = attached
        else:
            parent.right = attached
        attached.parent = parent
        self._size += subtree._size
        self.update_height_above(parent)
        subtree._root = None
        subtree._size = 0
        return attached

    def attach_as_lc(self, parent: Optional[BinNode[T]],
                     subtree: "BinTree[T]") -> Optional[BinNode[T]]:
        """Move all of subtree under parent as its left child."""
        return self._attach(parent, subtree, left=True)

    def attach_as_rc(self, parent: Optional[BinNode[T]],
                     subtree: "BinTree[T]") -> Optional[BinNode[T]]:
        """Move all of subtree under parent as its right child."""
        return self._attach(parent, subtree, left=False)

    def _unlink(self, node: BinNode[T]) -> Optional[BinNode[T]]:
        parent = node.parent
        if parent is None:
            self._root = None
        elif parent.left is node:
            parent.left = None
        else:
            parent.right = None
        node.parent = None
        return parent

    def remove_subtree(self, node: Optional[BinNode[T]]) -> int:
        """Delete the subtree rooted at node; return how many nodes went."""
        if node is None:
            return 0
        removed = node.size()
        parent = self._unlink(node)
        self._size -= removed
        self.update_height_above(parent)
        return removed

    def secede(self, node: Optional[BinNode[T]]) -> "BinTree[T]":
        """Detach the subtree rooted at node and return it as a new tree."""
        out: BinTree[T] = BinTree()
        if node is None:
            return out
        detached = node.size()
        parent = self._unlink(node)
        out._root = node
        out._size = detached
        self._size -= detached
        self.update_height_above(parent)
        return out

    def trav_pre(self, visit: Visit) -> None:
        if self._root is not None:
            self._root.trav_pre(visit)

    def trav_pre_iterative(self, visit: Visit) -> None:
        if self._root is not None:
            self._root.trav_pre_iterative(visit)

    def trav_in(self, visit: Visit,
                strategy: InorderStrategy = InorderStrategy.RECURSIVE) -> None:
        if self._root is not None:
            self._root.trav_in(visit, strategy)

    def trav_post(self, visit: Visit) -> None:
        if self._root is not None:
            self._root.trav_post(visit)

    def trav_post_iterative(self, visit: Visit) -> None:
        if self._root is not None:
            self._root.trav_post_iterative(visit)

    def trav_level(self, visit: Visit) -> None:
        if self._root is not None:
            self._root.trav_level(visit)

    def preorder(self) -> List[T]:
        return preorder_values(self._root)

    def preorder_iterative(self) -> List[T]:
        return preorder_values_iterative(self._root)

    def inorder(self, strategy: InorderStrategy = InorderStrategy.RECURSIVE) -> List[T]:
        return inorder_values(self._root, strategy)

    def postorder(self) -> List[T]:
        return postorder_values(self._root)

    def postorder_iterative(self) -> List[T]:
        return postorder_values_iterative(self._root)

    def level_order(self) -> List[T]:
        return level_order_values(self._root)

    def check_parent_links(self) -> bool:
        """True if every node's parent link matches its actual parent."""
        return self._links_ok(self._root, None)

    @classmethod
    def _links_ok(cls, node: Optional[BinNode[T]], parent: Optional[BinNode[T]]) -> bool:
        if node is None:
            return True
        if node.parent is not parent:
            return False
        return cls._links_ok(node.left, node) and cls._links_ok(node.right, node)

    def clear(self) -> None:
        self._root = None
        self._size = 0