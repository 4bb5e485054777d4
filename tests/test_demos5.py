import pytest

from cc232 import demos5


def _lines(text):
    return text.splitlines()


def test_demo_binary_tree_traversals():
    lines = _lines(demos5.demo_binary_tree())
    assert lines[0] == "Arbol:"
    assert "Preorden recursivo: 7 3 1 5 4 6 10 8 12" in lines
    assert "Postorden iterativo: 1 4 6 5 3 8 12 10 7" in lines
    assert "Niveles: 7 3 10 1 5 8 12 4 6" in lines
    inorders = [line.split(": ", 1)[1] for line in lines if line.startswith("Inorden")]
    assert len(inorders) == 4
    assert set(inorders) == {"1 3 4 5 6 7 8 10 12"}
    assert "Sucesor de 5: 6" in lines
    assert "Predecesor de 5: 4" in lines
    assert "Parent links OK: si" in lines


def test_demo_bst():
    lines = _lines(demos5.demo_bst())
    assert "BST inorden: 1 3 4 5 6 7 8 10 12" in lines
    assert "findEQ(5): 5" in lines
    assert "lowerBound(9): 10" in lines
    assert "upperBound(8): 10" in lines
    assert "Tras remove(3): 1 4 5 6 7 8 10 12" in lines
    assert lines[-1] == "isBST: si"


def test_demo_heap():
    lines = _lines(demos5.demo_heap())
    assert "isHeap: si" in lines
    assert "remove() -> 0" in lines
    assert lines[-1] == "Secuencia ordenada por extraccion: 1 2 3 5 7 8 10"
    heapified = [int(v) for v in lines[0].split(": ", 1)[1].split()]
    assert sorted(heapified) == [1, 2, 3, 5, 7, 8, 10]


def test_demo_panorama():
    lines = _lines(demos5.demo_panorama())
    assert "Heap minimo actual: 1" in lines
    assert "Raiz BST: 9" in lines
    walk = [line for line in lines if line.startswith("Recorrido STL-like:")][0]
    values = [int(v) for v in walk.split(":", 1)[1].split()]
    assert values == sorted(values)
    assert set(values) == {9, 4, 12, 2, 7, 10, 15}


def test_main_runs_named_demo(capsys):
    assert demos5.main(["heap"]) == 0
    assert capsys.readouterr().out == demos5.demo_heap()


def test_main_runs_all(capsys):
    assert demos5.main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Arbol:")
    assert out.endswith(demos5.demo_panorama())


def test_main_rejects_unknown():
    with pytest.raises(SystemExit):
        demos5.main(["nope"])