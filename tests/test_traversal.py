import pytest

import bsptree.traversal as traversal
from bsptree import BSPTree


@pytest.fixture
def tree():
    # [1 | [2 | 3]]
    tree = BSPTree((0, 0, 64, 64))
    for payload in (1, 2, 3):
        tree.insert(payload)
    return tree


def labels(tree, walk):
    return [(tree.nodes[idx].payload, depth)
            for idx, depth in walk(tree.nodes, tree.root)]


def test_orders(tree):
    assert labels(tree, traversal.preorder) == [
        (None, 0), (1, 1), (None, 1), (2, 2), (3, 2)]
    assert labels(tree, traversal.inorder) == [
        (1, 1), (None, 0), (2, 2), (None, 1), (3, 2)]
    assert labels(tree, traversal.postorder) == [
        (1, 1), (2, 2), (3, 2), (None, 1), (None, 0)]


def test_traversal_modes():
    assert traversal.traversal(0) is traversal.preorder
    assert traversal.traversal(1) is traversal.inorder
    assert traversal.traversal(2) is traversal.postorder
    assert traversal.traversal(-3) is traversal.postorder


def test_visitors_on_empty_tree():
    tree = BSPTree((0, 0, 64, 64))
    assert tree.accept(traversal.Walker()) == []
    assert tree.accept(traversal.Printer()) == []
    assert tree.accept(traversal.Stats())["max_depth"] == 0


def test_printer_indent(tree):
    lines = tree.accept(traversal.Printer(traversal.POST_ORDER, indent=1))
    assert lines[0].startswith(" value:1 ")
    assert lines[-1].startswith("value:None ")
