"""Snake body and heading.

The body is an ordered list of cells running from tail to head; the last
element is the head.  Each tick the body advances by appending a new head
and, unless the snake grew, dropping the tail.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from .grid import Cell, wrap

Vector = Tuple[int, int]  # (dx, dy)

INITIAL_LENGTH = 3


class Heading:
    """Lock-guarded ``(dx, dy)`` pair shared between input and game loop.

    The input handler writes the heading from its own thread while the game
    loop reads it once per tick, so both components are always read and
    written together.
    """

    def __init__(self, dx: int = 0, dy: int = 0) -> None:
        self._lock = threading.Lock()
        self._dx = dx
        self._dy = dy

    def set(self, dx: int, dy: int) -> None:
        with self._lock:
            self._dx = dx
            self._dy = dy

    def get(self) -> Vector:
        with self._lock:
            return self._dx, self._dy

    def __repr__(self) -> str:
        dx, dy = self.get()
        return f"Heading(dx={dx}, dy={dy})"


@dataclass
class SnakeBody:
    """Cells occupied by the snake together with its heading."""

    parts: List[Cell] = field(default_factory=list)
    heading: Heading = field(default_factory=Heading)

    @property
    def head(self) -> Cell:
        return self.parts[-1]

    def __len__(self) -> int:
        return len(self.parts)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.parts)

    def __contains__(self, cell: object) -> bool:
        return cell in self.parts

    def change_direction(self, vertical: int, horizontal: int) -> None:
        """Point the snake along ``(horizontal, vertical)``.

        The new heading replaces the old one as-is.  Turning straight back
        onto the neck is allowed and ends the game on the following tick.
        """

        self.heading.set(horizontal, vertical)

    def reset_position(self, width: int, height: int) -> None:
        """Place a fresh three-cell body ending at the grid centre.

        The body lies horizontally with its head at
        ``(width // 2, height // 2)`` and the snake starts moving right.
        Grids narrower than the body get one cell per column.
        """

        if width <= 0 or height <= 0:
            raise ValueError(f"Grid must be non-empty, got {width}x{height}")
        cx, cy = width // 2, height // 2
        self.parts = [
            (wrap(cx, offset, width), cy)
            for offset in range(1 - min(INITIAL_LENGTH, width), 1)
        ]
        self.heading.set(1, 0)

    def updated_head(self, width: int, height: int) -> Cell:
        """Return the cell the head moves into on the next advance."""

        dx, dy = self.heading.get()
        x, y = self.head
        return wrap(x, dx, width), wrap(y, dy, height)

    def advance(self, width: int, height: int, grew: bool) -> Cell:
        """Move the snake one cell, keeping the tail when ``grew`` is set.

        Returns the new head cell.
        """

        new_head = self.updated_head(width, height)
        self.parts.append(new_head)
        if not grew:
            del self.parts[0]
        return new_head
