"""Random food placement."""

from __future__ import annotations

from typing import Collection

import numpy as np

from .grid import Cell, free_cell_mask, in_hud

MAX_ATTEMPTS = 100


def place_food(
    width: int,
    height: int,
    rng: np.random.Generator,
    occupied: Collection[Cell] = (),
    max_attempts: int = MAX_ATTEMPTS,
) -> Cell:
    """Return a random cell for the next piece of food.

    Cells inside the HUD rectangle and cells listed in ``occupied`` are
    rejected.  Sampling is retried up to ``max_attempts`` times; after that a
    cell is picked uniformly from the remaining free cells.  When the snake
    fills every free cell the food goes to any cell outside the HUD, which
    always exists because row 0 is never reserved.

    Raises:
        ValueError: If the grid is empty.
    """

    if width <= 0 or height <= 0:
        raise ValueError(f"Grid must be non-empty, got {width}x{height}")

    for _ in range(max_attempts):
        cell = (int(rng.integers(width)), int(rng.integers(height)))
        if not in_hud(cell) and cell not in occupied:
            return cell

    mask = free_cell_mask(width, height, occupied)
    candidates = np.flatnonzero(mask)
    if candidates.size == 0:
        mask = free_cell_mask(width, height)
        candidates = np.flatnonzero(mask)
    index = int(rng.choice(candidates))
    y, x = divmod(index, width)
    return x, y
