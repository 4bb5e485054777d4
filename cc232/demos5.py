"""Demonstrations of binary trees, search trees and heaps."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from .binary_heap import BinaryHeap
from .binary_tree import BinaryTree
from .binnode import InorderStrategy
from .bst import BinarySearchTree


def _vector(label: str, values: Iterable[object]) -> str:
    return f"{label}: " + " ".join(str(v) for v in values) + "\n"


def _lines(lines: List[str]) -> str:
    return "".join(line + "\n" for line in lines)


def demo_binary_tree() -> str:
    tree: BinaryTree[int] = BinaryTree()
    root = tree.insert_as_root(7)
    n3 = tree.insert_as_lc(root, 3)
    n10 = tree.insert_as_rc(root, 10)
    tree.insert_as_lc(n3, 1)
    n5 = tree.insert_as_rc(n3, 5)
    tree.insert_as_lc(n10, 8)
    tree.insert_as_rc(n10, 12)
    tree.insert_as_lc(n5, 4)
    tree.insert_as_rc(n5, 6)

    out = ["Arbol:\n", tree.ascii_art()]
    out.append(_vector("Preorden recursivo", tree.preorder()))
    out.append(_vector("Preorden iterativo", tree.preorder_iterative()))
    out.append(_vector("Inorden recursivo", tree.inorder()))
    out.append(_vector("Inorden iterativo #1", tree.inorder(InorderStrategy.ITERATIVE1)))
    out.append(_vector("Inorden iterativo #2", tree.inorder(InorderStrategy.ITERATIVE2)))
    out.append(_vector("Inorden iterativo #3", tree.inorder(InorderStrategy.ITERATIVE3)))
    out.append(_vector("Postorden recursivo", tree.postorder()))
    out.append(_vector("Postorden iterativo", tree.postorder_iterative()))
    out.append(_vector("Niveles", tree.level_order()))
    out.append(_vector("Iteracion por sucesor", tree.iterate_by_successor()))

    lines: List[str] = []
    succ = n5.succ()
    if succ is not None:
        lines.append(f"Sucesor de 5: {succ.data}")
    pred = n5.pred()
    if pred is not None:
        lines.append(f"Predecesor de 5: {pred.data}")
    lines.append(f"Primer nodo inorden: {tree.first_node().data}")
    lines.append(f"Ultimo nodo inorden: {tree.last_node().data}")
    lines.append(f"Altura estructural: {tree.height()}")
    lines.append(f"Profundidad de 5: {tree.depth(n5)}")
    lines.append(f"Parent links OK: {'si' if tree.check_parent_links() else 'no'}")
    out.append(_lines(lines))
    return "".join(out)


def demo_bst() -> str:
    bst: BinarySearchTree[int] = BinarySearchTree()
    for x in (7, 3, 10, 1, 5, 8, 12, 4, 6):
        bst.add(x)

    out = ["BST:\n", bst.ascii_art(), _vector("BST inorden", bst.inorder())]
    queries = [
        ("findEQ(5)", bst.find_eq(5)),
        ("lowerBound(9)", bst.lower_bound(9)),
        ("upperBound(8)", bst.upper_bound(8)),
        ("findLast(9)", bst.find_last(9)),
    ]
    out.extend(f"{label}: {node.data}\n" for label, node in queries if node is not None)

    bst.remove(3)
    out.append(_vector("Tras remove(3)", bst.inorder()))

    root = bst.root
    if root is not None and root.right is not None:
        bst.rotate_left(root)
        out.append("Tras rotateLeft(root):\n" + bst.ascii_art())
        bst.rotate_right(bst.root)

    balanced = BinarySearchTree.build_balanced_from_sorted([1, 2, 3, 4, 5, 6, 7, 8, 9])
    out.append("BST balanceado desde vector ordenado:\n" + balanced.ascii_art())
    out.append(f"isBST: {'si' if balanced.is_bst() else 'no'}\n")
    return "".join(out)


def demo_heap() -> str:
    heap: BinaryHeap[int] = BinaryHeap([7, 3, 10, 1, 5, 8, 2])
    out = [_vector("Heapify", heap.data())]
    out.append(f"isHeap: {'si' if heap.is_heap() else 'no'}\n")
    heap.add(0)
    out.append(_vector("Tras add(0)", heap.data()))
    out.append(f"remove() -> {heap.remove()}\n")
    out.append(_vector("Tras remove()", heap.data()))
    extracted = []
    while not heap.empty():
        extracted.append(heap.remove())
    out.append(_vector("Secuencia ordenada por extraccion", extracted))
    return "".join(out)


def demo_panorama() -> str:
    heap: BinaryHeap[int] = BinaryHeap([9, 4, 7, 1, 3])
    bst: BinarySearchTree[int] = BinarySearchTree()
    for x in (9, 4, 12, 2, 7, 10, 15):
        bst.add(x)
    return "".join([
        "Semana 5 final: BinaryTree, BST, heap, recorridos iterativos y utilidades\n",
        f"Heap minimo actual: {heap.top()}\n",
        f"Raiz BST: {bst.root.data}\n",
        f"Altura BST: {bst.height()}\n",
        "Arbol BST:\n",
        bst.ascii_art(),
        "Recorrido STL-like: " + "".join(f"{x} " for x in bst) + "\n",
    ])


_DEMOS: Dict[str, Callable[[], str]] = {
    "binary_tree": demo_binary_tree,
    "bst": demo_bst,
    "heap": demo_heap,
    "panorama": demo_panorama,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the named demos, or all of them when none is named."""
    parser = argparse.ArgumentParser(description="Demos de arboles binarios y heaps.")
    parser.add_argument("demos", nargs="*", metavar="DEMO",
                        help="one of: " + ", ".join(_DEMOS))
    args = parser.parse_args(argv)
    unknown = [name for name in args.demos if name not in _DEMOS]
    if unknown:
        parser.error(f"demo desconocida: {', '.join(unknown)}")
    for name in args.demos or list(_DEMOS):
        sys.stdout.write(_DEMOS[name]())
    return 0


if __name__ == "__main__":
    sys.exit(main())