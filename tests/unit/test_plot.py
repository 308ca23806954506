"""Unit tests for the matplotlib tree figure."""

import pytest
from matplotlib.figure import Figure

from binary_tree import BinaryTree
from binary_tree.components.plot import layout, plot_tree


@pytest.fixture
def tree():
    """Tree built from 1..7: 1(2(4, 6), 3(5, 7))."""
    return BinaryTree([1, 2, 3, 4, 5, 6, 7])


def test_layout_positions(tree):
    """x is the in-order index and y is minus the depth."""
    positions = {node.value: xy for node, xy in layout(tree).values()}
    assert positions == {
        4: (0.0, -2.0),
        2: (1.0, -1.0),
        6: (2.0, -2.0),
        1: (3.0, 0.0),
        5: (4.0, -2.0),
        3: (5.0, -1.0),
        7: (6.0, -2.0),
    }


def test_layout_empty_tree():
    """An empty tree has no positions."""
    assert layout(BinaryTree()) == {}


def test_plot_returns_figure(tree):
    """Without an output path a figure is returned and nothing is written."""
    fig = plot_tree(tree, title="seven")
    assert isinstance(fig, Figure)
    assert fig.axes[0].get_title() == "seven"


def test_plot_saves_png(tree, tmp_path):
    """The figure is written when an output path is given."""
    out = tmp_path / "tree.png"
    tree.plot(out, dpi=50)
    assert out.exists()
    assert out.stat().st_size > 0


def test_plot_empty_tree(tmp_path):
    """An empty tree still produces a figure with a placeholder."""
    out = tmp_path / "empty.png"
    fig = plot_tree(BinaryTree(), output=out)
    texts = [t.get_text() for t in fig.axes[0].texts]
    assert "Empty Tree." in texts
    assert out.exists()
