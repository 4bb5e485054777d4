"""Binary tree node with parent links and the classic traversals."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Any, Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")


class InorderStrategy(Enum):
    """Algorithm used for an in-order traversal."""

    RECURSIVE = "recursive"
    ITERATIVE1 = "iterative1"
    ITERATIVE2 = "iterative2"
    ITERATIVE3 = "iterative3"


Visit = Callable[["BinNode[Any]"], Any]


class BinNode(Generic[T]):
    """A node holding data, links to parent and children, and a height."""

    __slots__ = ("data", "parent", "left", "right", "height")

    def __init__(self, data: Optional[T] = None,
                 parent: Optional["BinNode[T]"] = None) -> None:
        self.data = data
        self.parent = parent
        self.left: Optional[BinNode[T]] = None
        self.right: Optional[BinNode[T]] = None
        self.height = 0

    def __repr__(self) -> str:
        return f"BinNode({self.data!r})"

    def insert_as_lc(self, value: T) -> "BinNode[T]":
        """Create the left child; raise ValueError if it already exists."""
        if self.left is not None:
            raise ValueError("El hijo izquierdo ya existe")
        self.left = BinNode(value, self)
        return self.left

    def insert_as_rc(self, value: T) -> "BinNode[T]":
        """Create the right child; raise ValueError if it already exists."""
        if self.right is not None:
            raise ValueError("El hijo derecho ya existe")
        self.right = BinNode(value, self)
        return self.right

    def size(self) -> int:
        """Number of nodes in the subtree rooted here."""
        left = self.left.size() if self.left is not None else 0
        right = self.right.size() if self.right is not None else 0
        return 1 + left + right

    def leftmost(self) -> "BinNode[T]":
        node = self
        while node.left is not None:
            node = node.left
        return node

    def rightmost(self) -> "BinNode[T]":
        node = self
        while node.right is not None:
            node = node.right
        return node

    def succ(self) -> Optional["BinNode[T]"]:
        """In-order successor, or None for the last node."""
        if self.right is not None:
            return self.right.leftmost()
        node = self
        while node.parent is not None and node.parent.right is node:
            node = node.parent
        return node.parent

    def pred(self) -> Optional["BinNode[T]"]:
        """In-order predecessor, or None for the first node."""
        if self.left is not None:
            return self.left.rightmost()
        node = self
        while node.parent is not None and node.parent.left is node:
            node = node.parent
        return node.parent

    def trav_pre(self, visit: Visit) -> None:
        visit(self)
        if self.left is not None:
            self.left.trav_pre(visit)
        if self.right is not None:
            self.right.trav_pre(visit)

    def trav_pre_iterative(self, visit: Visit) -> None:
        stack: List[BinNode[T]] = [self]
        while stack:
            node = stack.pop()
            visit(node)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def trav_in_recursive(self, visit: Visit) -> None:
        if self.left is not None:
            self.left.trav_in_recursive(visit)
        visit(self)
        if self.right is not None:
            self.right.trav_in_recursive(visit)

    def trav_in_iterative1(self, visit: Visit) -> None:
        """In-order with an explicit stack."""
        stack: List[BinNode[T]] = []
        node: Optional[BinNode[T]] = self
        while node is not None or stack:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            visit(node)
            node = node.right

    def trav_in_iterative2(self, visit: Visit) -> None:
        """In-order walk driven by parent links, without a stack."""
        prev: Optional[BinNode[T]] = None
        curr: Optional[BinNode[T]] = self
        while curr is not None:
            if prev is curr.parent:
                if curr.left is not None:
                    nxt = curr.left
                else:
                    visit(curr)
                    nxt = curr.right if curr.right is not None else curr.parent
            elif prev is curr.left:
                visit(curr)
                nxt = curr.right if curr.right is not None else curr.parent
            else:
                nxt = curr.parent
            prev, curr = curr, nxt

    def trav_in_iterative3(self, visit: Visit) -> None:
        """In-order walk by repeated successor steps."""
        end = self.rightmost().succ()
        node: Optional[BinNode[T]] = self.leftmost()
        while node is not end and node is not None:
            visit(node)
            node = node.succ()

    def trav_in(self, visit: Visit,
                strategy: InorderStrategy = InorderStrategy.RECURSIVE) -> None:
        if strategy is InorderStrategy.RECURSIVE:
            self.trav_in_recursive(visit)
        elif strategy is InorderStrategy.ITERATIVE1:
            self.trav_in_iterative1(visit)
        elif strategy is InorderStrategy.ITERATIVE2:
            self.trav_in_iterative2(visit)
        elif strategy is InorderStrategy.ITERATIVE3:
            self.trav_in_iterative3(visit)

    def trav_post(self, visit: Visit) -> None:
        if self.left is not None:
            self.left.trav_post(visit)
        if self.right is not None:
            self.right.trav_post(visit)
        visit(self)

    def trav_post_iterative(self, visit: Visit) -> None:
        """Post-order using two stacks."""
        pending: List[BinNode[T]] = [self]
        output: List[BinNode[T]] = []
        while pending:
            node = pending.pop()
            output.append(node)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        for node in reversed(output):
            visit(node)

    def trav_level(self, visit: Visit) -> None:
        queue = deque([self])
        while queue:
            node = queue.popleft()
            visit(node)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)


def stature(node: Optional[BinNode[Any]]) -> int:
    """Stored height of a node, -1 for an absent one."""
    return -1 if node is None else node.height


def _collect(root: Optional[BinNode[T]], walk: Callable[[BinNode[T], Visit], None]) -> List[T]:
    out: List[T] = []
    if root is not None:
        walk(root, lambda node: out.append(node.data))
    return out


def preorder_values(root: Optional[BinNode[T]]) -> List[T]:
    return _collect(root, BinNode.trav_pre)


def preorder_values_iterative(root: Optional[BinNode[T]]) -> List[T]:
    return _collect(root, BinNode.trav_pre_iterative)


def inorder_values(root: Optional[BinNode[T]],
                   strategy: InorderStrategy = InorderStrategy.RECURSIVE) -> List[T]:
    return _collect(root, lambda node, visit: node.trav_in(visit, strategy))


def postorder_values(root: Optional[BinNode[T]]) -> List[T]:
    return _collect(root, BinNode.trav_post)


def postorder_values_iterative(root: Optional[BinNode[T]]) -> List[T]:
    return _collect(root, BinNode.trav_post_iterative)


def level_order_values(root: Optional[BinNode[T]]) -> List[T]:
    return _collect(root, BinNode.trav_level)