import pytest

from cc232.binnode import (
    BinNode,
    InorderStrategy,
    inorder_values,
    level_order_values,
    postorder_values,
    postorder_values_iterative,
    preorder_values,
    preorder_values_iterative,
    stature,
)

INORDER = [1, 3, 4, 5, 6, 7, 8, 10, 12]


@pytest.fixture
def tree():
    root = BinNode(7)
    left = root.insert_as_lc(3)
    right = root.insert_as_rc(10)
    left.insert_as_lc(1)
    five = left.insert_as_rc(5)
    right.insert_as_lc(8)
    right.insert_as_rc(12)
    five.insert_as_lc(4)
    five.insert_as_rc(6)
    return root, five


def test_preorder(tree):
    root, _ = tree
    expected = [7, 3, 1, 5, 4, 6, 10, 8, 12]
    assert preorder_values(root) == expected
    assert preorder_values_iterative(root) == expected


def test_postorder(tree):
    root, _ = tree
    expected = [1, 4, 6, 5, 3, 8, 12, 10, 7]
    assert postorder_values(root) == expected
    assert postorder_values_iterative(root) == expected


def test_level_order(tree):
    root, _ = tree
    assert level_order_values(root) == [7, 3, 10, 1, 5, 8, 12, 4, 6]


@pytest.mark.parametrize("strategy", list(InorderStrategy))
def test_inorder_strategies(tree, strategy):
    root, _ = tree
    assert inorder_values(root, strategy) == INORDER


def test_inorder_default_is_recursive(tree):
    root, _ = tree
    assert inorder_values(root) == INORDER


def test_succ_and_pred(tree):
    root, five = tree
    assert five.succ().data == 6
    assert five.pred().data == 4
    assert root.rightmost().succ() is None
    assert root.leftmost().pred() is None


def test_extremes_and_size(tree):
    root, five = tree
    assert root.leftmost().data == 1
    assert root.rightmost().data == 12
    assert root.size() == 9
    assert five.size() == 3


def test_parent_links(tree):
    root, five = tree
    assert five.parent.data == 3
    assert five.parent.parent is root
    assert root.parent is None


def test_visit_receives_nodes(tree):
    root, _ = tree
    seen = []
    root.trav_level(seen.append)
    assert all(isinstance(node, BinNode) for node in seen)
    assert [node.data for node in seen][:3] == [7, 3, 10]


def test_insert_existing_child_raises():
    node = BinNode(1)
    node.insert_as_lc(0)
    node.insert_as_rc(2)
    with pytest.raises(ValueError):
        node.insert_as_lc(5)
    with pytest.raises(ValueError):
        node.insert_as_rc(5)


def test_stature():
    node = BinNode(1)
    node.height = 3
    assert stature(None) == -1
    assert stature(node) == 3


def test_empty_root_gives_empty_lists():
    assert preorder_values(None) == []
    assert inorder_values(None, InorderStrategy.ITERATIVE2) == []
    assert postorder_values_iterative(None) == []
    assert level_order_values(None) == []


def test_single_node_traversals():
    node = BinNode("x")
    for strategy in InorderStrategy:
        assert inorder_values(node, strategy) == ["x"]
    assert preorder_values(node) == ["x"]