"""Snake on a wrap-around grid, rendered in the terminal."""

from .grid import Cell, HUD_ROW, HUD_WIDTH, free_cell_mask, in_hud, wrap
from .snake_body import Heading, SnakeBody
from .food import place_food
from .game_state import GameState
from .screen import (
    CursesScreen,
    Key,
    KeyEvent,
    ResizeEvent,
    Screen,
    ScreenInitError,
    Style,
    draw_parts,
    draw_text,
)
from .runner import GameRunner

__all__ = [
    "Cell",
    "HUD_ROW",
    "HUD_WIDTH",
    "wrap",
    "in_hud",
    "free_cell_mask",
    "Heading",
    "SnakeBody",
    "place_food",
    "GameState",
    "Screen",
    "CursesScreen",
    "ScreenInitError",
    "Style",
    "Key",
    "KeyEvent",
    "ResizeEvent",
    "draw_parts",
    "draw_text",
    "GameRunner",
]
