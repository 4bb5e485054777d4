"""Binary tree with in-order navigation, iteration and a text drawing."""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, TypeVar

from .binnode import BinNode, InorderStrategy
from .bintree import BinTree

T = TypeVar("T")

_ROOT: Any = object()


class BinaryTree(BinTree[T]):
    """A BinTree with structural queries and in-order iteration."""

    def depth(self, node: Optional[BinNode[T]]) -> int:
        """Number of ancestors between node and the root."""
        d = 0
        while node is not None and node is not self._root:
            node = node.parent
            d += 1
        return d

    def height(self, node: Any = _ROOT) -> int:
        """Structural height of node (the root by default); -1 for None."""
        if node is _ROOT:
            node = self._root
        if node is None:
            return -1
        return 1 + max(self.height(node.left), self.height(node.right))

    def subtree_size(self, node: Optional[BinNode[T]]) -> int:
        if node is None:
            return 0
        return 1 + self.subtree_size(node.left) + self.subtree_size(node.right)

    def first_node(self) -> Optional[BinNode[T]]:
        return None if self._root is None else self._root.leftmost()

    def last_node(self) -> Optional[BinNode[T]]:
        return None if self._root is None else self._root.rightmost()

    def next_node(self, node: Optional[BinNode[T]]) -> Optional[BinNode[T]]:
        return None if node is None else node.succ()

    def prev_node(self, node: Optional[BinNode[T]]) -> Optional[BinNode[T]]:
        return None if node is None else node.pred()

    def nodes(self) -> Iterator[BinNode[T]]:
        """Yield the nodes in in-order by successor steps."""
        node = self.first_node()
        while node is not None:
            yield node
            node = node.succ()

    def __iter__(self) -> Iterator[T]:
        for node in self.nodes():
            yield node.data

    def traverse_inorder(self, strategy: InorderStrategy = InorderStrategy.RECURSIVE) -> List[T]:
        return self.inorder(strategy)

    def traverse_breadth_first(self) -> List[T]:
        return self.level_order()

    def iterate_by_successor(self) -> List[T]:
        return list(self)

    def iterate_by_predecessor(self) -> List[T]:
        out: List[T] = []
        node = self.last_node()
        while node is not None:
            out.append(node.data)
            node = node.pred()
        return out

    def ascii_art(self) -> str:
        """Sideways drawing: right subtree above, left subtree below."""
        if self._root is None:
            return "(arbol vacio)\n"
        lines: List[str] = []
        self._build_ascii(self._root, "", True, lines)
        return "".join(line + "\n" for line in lines)

    @classmethod
    def _build_ascii(cls, node: BinNode[T], prefix: str, is_tail: bool,
                     lines: List[str]) -> None:
        if node.right is not None:
            cls._build_ascii(node.right, prefix + ("│   " if is_tail else "    "), False, lines)
        lines.append(prefix + ("└── " if is_tail else "┌── ") + str(node.data))
        if node.left is not None:
            cls._build_ascii(node.left, prefix + ("    " if is_tail else "│   "), True, lines)

    def __str__(self) -> str:
        return self.ascii_art()