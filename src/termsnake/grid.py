"""Wrap-around coordinate helpers for the snake playfield."""

from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np
from numpy.typing import NDArray

Cell = Tuple[int, int]  # (x, y)

# The score text is drawn in this strip of the top-left corner, so food must
# never be placed there.
HUD_ROW = 1
HUD_WIDTH = 10

Mask = NDArray[np.bool_]


def wrap(coord: int, speed: int, size: int) -> int:
    """Return ``coord + speed`` wrapped into ``[0, size)``.

    Raises:
        ValueError: If ``size`` is not positive.
    """

    if size <= 0:
        raise ValueError(f"Axis size must be positive, got {size}")
    return (coord + speed) % size


def in_hud(cell: Cell) -> bool:
    """Return ``True`` if ``cell`` lies inside the reserved HUD rectangle."""

    x, y = cell
    return y == HUD_ROW and x < HUD_WIDTH


def free_cell_mask(width: int, height: int, occupied: Iterable[Cell] = ()) -> Mask:
    """Return a ``(height, width)`` mask of cells available for food.

    A cell is available when it is outside the HUD rectangle and not listed
    in ``occupied``.  Occupied cells outside the grid are ignored.
    """

    if width <= 0 or height <= 0:
        raise ValueError(f"Grid must be non-empty, got {width}x{height}")
    mask = np.ones((height, width), dtype=np.bool_)
    if height > HUD_ROW:
        mask[HUD_ROW, : min(HUD_WIDTH, width)] = False

    coordinates = np.asarray(list(occupied), dtype=np.int64).reshape(-1, 2)
    if coordinates.size:
        xs, ys = coordinates.T
        inside = (xs >= 0) & (xs < width) & (ys >= 0) & (ys < height)
        mask[ys[inside], xs[inside]] = False
    return mask
