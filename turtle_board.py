"""
Sparse, unbounded board of unit edges on the integer lattice.

Edges are added as horizontal or vertical runs and never removed. The
bounding rectangle is either maintained on every insertion (strict mode) or
recomputed from the full edge set whenever it is asked for (lazy mode).
"""

from __future__ import annotations

import logging
from typing import Iterator

from ascii_render import render_edges
from board_types import (
    Bounds,
    BoundsMode,
    Edge,
    Horizontal,
    Vertical,
    edge_bounds,
    min_bound,
    run_bounds,
    union_bounds,
)

logger = logging.getLogger(__name__)


def _check_run(span: range) -> None:
    if span.step != 1:
        raise ValueError(f"Run must have a step of 1, got {span!r}")


class TurtleBoard:
    """A set of distinct edges plus the bounds-tracking state for it."""

    def __init__(self, mode: BoundsMode = BoundsMode.LAZY) -> None:
        self.edges: set[Edge] = set()
        self.mode = mode
        # Only meaningful in strict mode; lazy mode never reads it.
        self.cached_bounds: Bounds | None = None

    @classmethod
    def new_lazy(cls) -> TurtleBoard:
        return cls(BoundsMode.LAZY)

    @classmethod
    def new_strict(cls) -> TurtleBoard:
        return cls(BoundsMode.STRICT)

    def set_mode(self, mode: BoundsMode) -> None:
        """
        Switch bounds mode.

        Nothing is recomputed here: a strict board keeps whatever cache it had
        (possibly none), and a lazy board ignores it.
        """
        if mode is not self.mode:
            logger.info("Bounds mode %s -> %s", self.mode.value, mode.value)
        self.mode = mode

    # =========================================================================
    # Edge store
    # =========================================================================

    def add_horizontal_line(self, xs: range, y: int) -> None:
        """Insert Horizontal(x, y) for every x in xs."""
        _check_run(xs)
        if not xs:
            return
        self._expand_to_fit(run_bounds(xs, y))
        self.edges.update(Horizontal(x, y) for x in xs)

    def add_vertical_line(self, x: int, ys: range) -> None:
        """Insert Vertical(x, y) for every y in ys."""
        _check_run(ys)
        if not ys:
            return
        self._expand_to_fit(run_bounds(x, ys))
        self.edges.update(Vertical(x, y) for y in ys)

    def contains_horizontal_line(self, xs: range, y: int) -> bool:
        """True if every Horizontal(x, y) for x in xs is present (vacuously for empty xs)."""
        _check_run(xs)
        return all(Horizontal(x, y) in self.edges for x in xs)

    def contains_vertical_line(self, x: int, ys: range) -> bool:
        """True if every Vertical(x, y) for y in ys is present (vacuously for empty ys)."""
        _check_run(ys)
        return all(Vertical(x, y) in self.edges for y in ys)

    def __contains__(self, edge: object) -> bool:
        return edge in self.edges

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    # =========================================================================
    # Bounds tracking
    # =========================================================================

    def _expand_to_fit(self, new_bounds: Bounds) -> None:
        """Fold a run's rectangle into the cache. Must run before the edges are added."""
        match self.mode:
            case BoundsMode.LAZY:
                self.cached_bounds = None
            case BoundsMode.STRICT if not self.edges:
                self.cached_bounds = new_bounds
            case BoundsMode.STRICT:
                self.cached_bounds = union_bounds(self.bounds(), new_bounds)
            case _:
                raise ValueError(f"Unknown bounds mode: {self.mode}")

    def compute_bounds(self) -> Bounds:
        """
        Recompute the bounding rectangle from every edge.

        Raises:
            EmptyGridBoundsError: If the board has no edges.
        """
        result = min_bound(edge_bounds(edge) for edge in self.edges)
        logger.debug("compute_bounds: %d edges -> %s", len(self.edges), result)
        return result

    def bounds(self) -> Bounds:
        """
        Current bounding rectangle.

        Strict mode returns the cache, filling it first if it is empty. Lazy
        mode recomputes every time and does not store the result.
        """
        match self.mode:
            case BoundsMode.LAZY:
                return self.compute_bounds()
            case BoundsMode.STRICT:
                if self.cached_bounds is None:
                    self.cached_bounds = self.compute_bounds()
                return self.cached_bounds
            case _:
                raise ValueError(f"Unknown bounds mode: {self.mode}")

    def bounds_uncached(self) -> Bounds:
        """Like bounds(), but never writes the cache."""
        if self.mode is BoundsMode.STRICT and self.cached_bounds is not None:
            return self.cached_bounds
        return self.compute_bounds()

    # =========================================================================
    # Identity and display
    # =========================================================================

    def copy(self) -> TurtleBoard:
        board = TurtleBoard(self.mode)
        board.edges = set(self.edges)
        board.cached_bounds = self.cached_bounds
        return board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TurtleBoard):
            return NotImplemented
        return self.edges == other.edges

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TurtleBoard(mode={self.mode}, edges={len(self.edges)})"

    def __str__(self) -> str:
        return render_edges(self.edges, self.bounds_uncached())
