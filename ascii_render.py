"""
ASCII rendering for turtle boards.

The visible rectangle is drawn top row first (max_y) down to min_y. Each
lattice row becomes a node line; consecutive node lines are joined by a link
line showing the vertical edges between them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, AbstractSet, Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from board_types import Bounds, Edge, Horizontal, Vertical

if TYPE_CHECKING:
    from turtle_board import TurtleBoard

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Glyphs:
    """
    Strings used to draw a board.

    node, vertical and vertical_blank occupy a lattice point column and must
    share one width; horizontal, horizontal_blank and gap fill the space
    between two points and must share another.
    """

    node: str = "+"
    horizontal: str = "----"
    horizontal_blank: str = "    "
    vertical: str = "|"
    vertical_blank: str = " "
    gap: str = "    "

    def __post_init__(self) -> None:
        point_widths = {len(self.node), len(self.vertical), len(self.vertical_blank)}
        if len(point_widths) != 1:
            raise ValueError(
                f"node/vertical glyphs must share one width, got {sorted(point_widths)}"
            )
        cell_widths = {len(self.horizontal), len(self.horizontal_blank), len(self.gap)}
        if len(cell_widths) != 1:
            raise ValueError(
                f"horizontal/gap glyphs must share one width, got {sorted(cell_widths)}"
            )


DEFAULT_GLYPHS = Glyphs()


def _plain(s: str) -> str:
    return s


def render_node_line(
    edges: AbstractSet[Edge],
    bounds: Bounds,
    y: int,
    glyphs: Glyphs = DEFAULT_GLYPHS,
    colorize: Callable[[str], str] = _plain,
) -> str:
    """Node markers for lattice row y with the horizontal edges between them."""
    parts = [glyphs.node]
    for x in range(bounds.min_x, bounds.max_x):
        if Horizontal(x, y) in edges:
            parts.append(colorize(glyphs.horizontal))
        else:
            parts.append(glyphs.horizontal_blank)
        parts.append(glyphs.node)
    return "".join(parts)


def render_link_line(
    edges: AbstractSet[Edge],
    bounds: Bounds,
    y: int,
    glyphs: Glyphs = DEFAULT_GLYPHS,
    colorize: Callable[[str], str] = _plain,
) -> str:
    """Vertical edges from lattice row y up to row y + 1."""

    def vertical_at(x: int) -> str:
        if Vertical(x, y) in edges:
            return colorize(glyphs.vertical)
        return glyphs.vertical_blank

    parts: list[str] = []
    for x in range(bounds.min_x, bounds.max_x):
        parts.append(vertical_at(x))
        parts.append(glyphs.gap)
    parts.append(vertical_at(bounds.max_x))
    return "".join(parts)


def render_edges(
    edges: AbstractSet[Edge],
    bounds: Bounds,
    glyphs: Glyphs = DEFAULT_GLYPHS,
    colorize: Callable[[str], str] = _plain,
) -> str:
    """
    Render an edge set within the given bounds.

    Args:
        edges: Edges to draw; anything outside bounds is not shown
        bounds: Resolved bounding rectangle
        glyphs: Strings to draw with
        colorize: Applied to present edge glyphs only

    Returns:
        Node and link lines joined by newlines, with no trailing newline
    """
    logger.debug(
        "render_edges: %d node columns, %d node rows", bounds.width + 1, bounds.height + 1
    )
    lines = [render_node_line(edges, bounds, bounds.max_y, glyphs, colorize)]
    for y in range(bounds.max_y - 1, bounds.min_y - 1, -1):
        lines.append(render_link_line(edges, bounds, y, glyphs, colorize))
        lines.append(render_node_line(edges, bounds, y, glyphs, colorize))
    return "\n".join(lines)


def render(board: TurtleBoard, glyphs: Glyphs = DEFAULT_GLYPHS, color: bool = False) -> str:
    """
    Render a whole board.

    Uses the non-caching bounds path, so the board is not modified.

    Args:
        board: Board to render
        glyphs: Strings to draw with (default DEFAULT_GLYPHS)
        color: Highlight present edges with ANSI colors

    Raises:
        EmptyGridBoundsError: If the board has no edges.
    """
    colorize: Callable[[str], str] = chalk.green if color else _plain
    return render_edges(board.edges, board.bounds_uncached(), glyphs, colorize)
