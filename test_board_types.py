"""Tests for board_types module."""

import pytest

from board_types import (
    Bounds,
    EmptyGridBoundsError,
    Horizontal,
    Vertical,
    edge_bounds,
    min_bound,
    run_bounds,
    union_bounds,
)


class TestEdges:
    """Tests for the edge variants."""

    def test_equality_by_value(self) -> None:
        """Edges with the same tag and coordinates are equal."""
        assert Vertical(1, 2) == Vertical(1, 2)
        assert Horizontal(-3, 4) == Horizontal(-3, 4)

    def test_tag_distinguishes(self) -> None:
        """A vertical and a horizontal edge at the same point differ."""
        assert Vertical(1, 2) != Horizontal(1, 2)
        assert len({Vertical(1, 2), Horizontal(1, 2), Vertical(1, 2)}) == 2

    def test_immutable(self) -> None:
        """Edges cannot be modified after creation."""
        edge = Horizontal(0, 0)
        with pytest.raises(AttributeError):
            edge.x = 5  # type: ignore[misc]


class TestEdgeBounds:
    """Tests for per-edge bounds."""

    def test_horizontal(self) -> None:
        """A horizontal edge spans one unit in x."""
        assert edge_bounds(Horizontal(2, -1)) == Bounds(min_x=2, min_y=-1, max_x=3, max_y=-1)

    def test_vertical(self) -> None:
        """A vertical edge spans one unit in y."""
        assert edge_bounds(Vertical(2, -1)) == Bounds(min_x=2, min_y=-1, max_x=2, max_y=0)

    def test_unknown_edge_type(self) -> None:
        """Anything that is not an edge is rejected."""
        with pytest.raises(ValueError, match="Unknown edge type"):
            edge_bounds((1, 2))  # type: ignore[arg-type]


class TestBoundsArithmetic:
    """Tests for folding rectangles together."""

    def test_union_bounds(self) -> None:
        """Union takes the component-wise min and max."""
        a = Bounds(min_x=-1, min_y=3, max_x=2, max_y=3)
        b = Bounds(min_x=3, min_y=-2, max_x=5, max_y=-2)
        assert union_bounds(a, b) == Bounds(min_x=-1, min_y=-2, max_x=5, max_y=3)

    def test_min_bound(self) -> None:
        """Folding edge bounds gives the enclosing rectangle."""
        edges = [Horizontal(-3, 2), Horizontal(4, 2), Vertical(3, -12), Vertical(3, 18)]
        result = min_bound(edge_bounds(e) for e in edges)
        assert result == Bounds(min_x=-3, min_y=-12, max_x=5, max_y=19)

    def test_min_bound_single(self) -> None:
        """A single rectangle folds to itself."""
        b = Bounds(min_x=1, min_y=7, max_x=2, max_y=7)
        assert min_bound([b]) == b

    def test_min_bound_empty(self) -> None:
        """There is no rectangle for nothing."""
        with pytest.raises(EmptyGridBoundsError, match="empty board"):
            min_bound([])

    def test_width_and_height(self) -> None:
        """Width and height count cells, not lattice points."""
        b = Bounds(min_x=-2, min_y=2, max_x=6, max_y=6)
        assert b.width == 8
        assert b.height == 4

    def test_run_bounds(self) -> None:
        """A run's rectangle spans its endpoints."""
        assert run_bounds(range(-3, 5), 2) == Bounds(min_x=-3, min_y=2, max_x=5, max_y=2)
        assert run_bounds(3, range(-12, 19)) == Bounds(min_x=3, min_y=-12, max_x=3, max_y=19)
