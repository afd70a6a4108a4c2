"""
Demonstration script for the turtle board.
"""

import logging

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ascii_render import render
from turtle_board import TurtleBoard


def demo() -> None:
    """Build a small lazy board and print it."""
    board = TurtleBoard.new_lazy()
    board.add_horizontal_line(range(-2, 7), 3)
    board.add_vertical_line(-1, range(-5, 12))

    bounds = board.bounds()
    title = (
        f"Turtle board ({len(board)} edges, "
        f"x {bounds.min_x}..{bounds.max_x}, y {bounds.min_y}..{bounds.max_y})"
    )
    console = Console()
    console.print(Panel(Text.from_ansi(render(board, color=True)), title=title))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    demo()
