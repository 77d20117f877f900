"""Pygame window backend for the snake game.

:class:`PygameScreen` implements the same cell-grid surface as the curses
backend but draws into a resizable window.  Frames published by the game
thread with :meth:`PygameScreen.show` are painted on the thread that polls
for events, since pygame expects all display calls to happen there.
"""

from __future__ import annotations

import threading
from typing import Dict, Optional, Tuple

import pygame

from .grid import Cell
from .screen import (
    DEFAULT_STYLE,
    SNAKE_GLYPH,
    Event,
    Key,
    KeyEvent,
    ResizeEvent,
    ScreenInitError,
    Style,
)

# Size of a single grid cell in pixels
CELL_SIZE = 16
# Milliseconds to wait for an event before repainting
POLL_MS = 10
COLUMNS = 60
ROWS = 30

COLORS = {
    "black": (0, 0, 0),
    "red": (255, 0, 0),
    "green": (0, 255, 0),
    "yellow": (255, 255, 0),
    "blue": (0, 0, 255),
    "magenta": (255, 0, 255),
    "cyan": (0, 255, 255),
    "white": (255, 255, 255),
}

_PYGAME_KEYS = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}

Frame = Dict[Cell, Tuple[str, Style]]


def translate_pygame_key(key: int, unicode: str = "", mod: int = 0) -> KeyEvent:
    """Map a pygame ``KEYDOWN`` onto a :class:`KeyEvent`."""

    if key == pygame.K_c and mod & pygame.KMOD_CTRL:
        return KeyEvent(Key.CTRL_C)
    if key in _PYGAME_KEYS:
        return KeyEvent(_PYGAME_KEYS[key])
    if unicode and unicode.isprintable():
        return KeyEvent(Key.RUNE, unicode)
    return KeyEvent(Key.OTHER)


class PygameScreen:
    """:class:`~termsnake.screen.Screen` drawn into a pygame window."""

    def __init__(self, columns: int = COLUMNS, rows: int = ROWS) -> None:
        self.columns = columns
        self.rows = rows
        self._lock = threading.Lock()
        self._back: Frame = {}
        self._front: Frame = {}
        self._dirty = False
        self._style = DEFAULT_STYLE
        self._surface: Optional[pygame.Surface] = None
        self._font: Optional[pygame.font.Font] = None

    def init(self) -> None:
        try:
            pygame.init()
            self._surface = pygame.display.set_mode(
                (self.columns * CELL_SIZE, self.rows * CELL_SIZE), pygame.RESIZABLE
            )
            pygame.display.set_caption("Snake")
            self._font = pygame.font.SysFont("monospace", CELL_SIZE)
        except pygame.error as exc:
            pygame.quit()
            raise ScreenInitError(f"Couldn't init screen: {exc}") from exc

    def fini(self) -> None:
        if self._surface is None:
            return
        self._surface = None
        pygame.quit()

    def set_style(self, style: Style) -> None:
        self._style = style

    def size(self) -> Tuple[int, int]:
        return self.columns, self.rows

    def set_content(self, x: int, y: int, glyph: str, style: Style) -> None:
        if 0 <= x < self.columns and 0 <= y < self.rows:
            with self._lock:
                self._back[(x, y)] = (glyph, style)

    def clear(self) -> None:
        with self._lock:
            self._back = {}

    def show(self) -> None:
        with self._lock:
            self._front = dict(self._back)
            self._dirty = True

    def sync(self) -> None:
        with self._lock:
            self._dirty = True

    def _paint(self) -> None:
        if self._surface is None or self._font is None:
            return
        with self._lock:
            frame = dict(self._front)
            self._dirty = False
        self._surface.fill(COLORS.get(self._style.background, COLORS["black"]))
        for (x, y), (glyph, style) in frame.items():
            fg = COLORS.get(style.foreground, COLORS["white"])
            rect = pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
            if glyph == SNAKE_GLYPH:
                pygame.draw.rect(self._surface, fg, rect)
                pygame.draw.rect(self._surface, (50, 50, 50), rect, 1)
            else:
                text = self._font.render(glyph, True, fg)
                self._surface.blit(text, rect)
        pygame.display.flip()

    def poll_event(self) -> Optional[Event]:
        """Repaint if a new frame is pending, then wait briefly for input."""

        if self._surface is None:
            return None
        if self._dirty:
            self._paint()
        event = pygame.event.wait(POLL_MS)
        if event.type == pygame.NOEVENT:
            return None
        if event.type == pygame.QUIT:
            return KeyEvent(Key.CTRL_C)
        if event.type == pygame.VIDEORESIZE:
            self.columns = max(1, event.w // CELL_SIZE)
            self.rows = max(1, event.h // CELL_SIZE)
            return ResizeEvent(self.columns, self.rows)
        if event.type == pygame.KEYDOWN:
            return translate_pygame_key(event.key, event.unicode, event.mod)
        return None
