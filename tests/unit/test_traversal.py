"""Unit tests for the traversal paths."""

import pytest

from binary_tree import BinaryTree, InOrderPath, PostOrderPath, PreOrderPath, TraversalPath

PATHS = [InOrderPath(), PreOrderPath(), PostOrderPath()]


@pytest.fixture
def tree():
    """Tree built from 1..7: 1(2(4, 6), 3(5, 7))."""
    return BinaryTree([1, 2, 3, 4, 5, 6, 7])


@pytest.mark.parametrize("variant", ["recursive", "iterative"])
def test_in_order(tree, variant):
    """In-order visits left, self, right."""
    assert getattr(InOrderPath(), variant)(tree) == [4, 2, 6, 1, 5, 3, 7]


@pytest.mark.parametrize("variant", ["recursive", "iterative"])
def test_pre_order(tree, variant):
    """Pre-order visits self, left, right."""
    assert getattr(PreOrderPath(), variant)(tree) == [1, 2, 4, 6, 3, 5, 7]


@pytest.mark.parametrize("variant", ["recursive", "iterative"])
def test_post_order(tree, variant):
    """Post-order visits left, right, self."""
    assert getattr(PostOrderPath(), variant)(tree) == [4, 6, 2, 5, 7, 3, 1]


@pytest.mark.parametrize("path", PATHS)
def test_empty_and_missing_tree_yield_empty_path(path):
    """Empty trees and None both give an empty list."""
    assert path.recursive(BinaryTree()) == []
    assert path.iterative(BinaryTree()) == []
    assert path.recursive(None) == []
    assert path.iterative(None) == []


@pytest.mark.parametrize("path", PATHS)
def test_single_node(path):
    """A single node is the whole path in every order."""
    t = BinaryTree(["only"])
    assert path.recursive(t) == ["only"]
    assert path.iterative(t) == ["only"]


@pytest.mark.parametrize("path", PATHS)
@pytest.mark.parametrize("n", [2, 3, 5, 8, 13, 31])
def test_variants_agree_on_grown_trees(path, n):
    """Recursive and iterative variants match for trees of many sizes."""
    t = BinaryTree(range(n))
    result = path.iterative(t)
    assert result == path.recursive(t)
    assert sorted(result) == list(range(n))


@pytest.mark.parametrize("path", PATHS)
def test_variants_agree_after_mutation(path):
    """Irregular shapes from removal and inversion keep the variants in step."""
    t = BinaryTree(range(20))
    for value in (0, 7, 3, 15, 19):
        t.remove(value)
    t.invert()
    t.add(100)
    assert path.iterative(t) == path.recursive(t)


def test_variants_agree_on_large_tree():
    """Both variants cover every node of a large tree in the same order."""
    t = BinaryTree(range(2000))
    assert InOrderPath().iterative(t) == InOrderPath().recursive(t)
    assert len(PostOrderPath().iterative(t)) == 2000


@pytest.mark.parametrize("path", PATHS)
def test_paths_satisfy_protocol(path):
    """Every path exposes both variants."""
    assert isinstance(path, TraversalPath)
