"""
Shared type definitions for the turtle board: edges, bounds and bounds mode.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class BoundsMode(Enum):
    """How a board keeps track of its bounding rectangle."""

    LAZY = "lazy"  # Never cached, recomputed on every request
    STRICT = "strict"  # Folded in on every insertion and cached


class EmptyGridBoundsError(ValueError):
    """Raised when bounds are requested for a board with no edges."""


# =============================================================================
# Edges
# =============================================================================


@dataclass(frozen=True)
class Vertical:
    """Unit segment from lattice point (x, y) to (x, y + 1)."""

    x: int
    y: int


@dataclass(frozen=True)
class Horizontal:
    """Unit segment from lattice point (x, y) to (x + 1, y)."""

    x: int
    y: int


Edge = Vertical | Horizontal


# =============================================================================
# Bounds
# =============================================================================


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle in lattice-point coordinates (inclusive)."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        """Number of horizontal cells per row."""
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        """Number of vertical cells per column."""
        return self.max_y - self.min_y


def edge_bounds(edge: Edge) -> Bounds:
    """Bounds covering both endpoints of a single edge."""
    match edge:
        case Vertical(x=x, y=y):
            return Bounds(min_x=x, min_y=y, max_x=x, max_y=y + 1)
        case Horizontal(x=x, y=y):
            return Bounds(min_x=x, min_y=y, max_x=x + 1, max_y=y)
        case _:
            raise ValueError(f"Unknown edge type: {edge!r}")


def union_bounds(a: Bounds, b: Bounds) -> Bounds:
    """Smallest rectangle enclosing both a and b."""
    return Bounds(
        min_x=min(a.min_x, b.min_x),
        min_y=min(a.min_y, b.min_y),
        max_x=max(a.max_x, b.max_x),
        max_y=max(a.max_y, b.max_y),
    )


def min_bound(bounds: Iterable[Bounds]) -> Bounds:
    """
    Fold a collection of rectangles into the smallest one enclosing them all.

    Raises:
        EmptyGridBoundsError: If there is nothing to fold.
    """
    result: Bounds | None = None
    for b in bounds:
        result = b if result is None else union_bounds(result, b)
    if result is None:
        raise EmptyGridBoundsError("cannot find bounds for empty board")
    return result


def run_bounds(xs: range | int, ys: range | int) -> Bounds:
    """
    Rectangle spanned by the endpoints of a run.

    Exactly one of xs / ys is a range; the other is the fixed coordinate.
    """
    if isinstance(xs, range):
        assert isinstance(ys, int)
        return Bounds(min_x=xs.start, min_y=ys, max_x=xs.stop, max_y=ys)
    assert isinstance(ys, range)
    return Bounds(min_x=xs, min_y=ys.start, max_x=xs, max_y=ys.stop)
