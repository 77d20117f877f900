"""Rendering surface abstraction and the curses terminal backend.

The game only talks to a small cell-grid surface: draw a glyph at a cell,
clear, show the frame, report the size and poll for key or resize events.
:class:`CursesScreen` implements it on top of the standard :mod:`curses`
module; :mod:`termsnake.run_pygame` offers a windowed alternative.
"""

from __future__ import annotations

import curses
import locale
import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional, Protocol, Tuple, Union

from .grid import Cell

SNAKE_GLYPH = "■"
FOOD_GLYPH = "●"

# Seconds to wait between two polls when no input is pending
POLL_INTERVAL = 0.01


class ScreenInitError(RuntimeError):
    """Raised when a rendering backend cannot be created or initialised."""


class Key(str, Enum):
    """Symbolic keys the game reacts to."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    CTRL_C = "ctrl-c"
    RUNE = "rune"
    OTHER = "other"


@dataclass(frozen=True)
class Style:
    """Foreground/background colour pair used when drawing a glyph."""

    foreground: str = "white"
    background: str = "black"


DEFAULT_STYLE = Style()


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    char: str = ""


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


Event = Union[KeyEvent, ResizeEvent]


class Screen(Protocol):
    """Cell-grid surface the game renders to."""

    def init(self) -> None: ...

    def fini(self) -> None: ...

    def set_style(self, style: Style) -> None: ...

    def size(self) -> Tuple[int, int]: ...

    def set_content(self, x: int, y: int, glyph: str, style: Style) -> None: ...

    def clear(self) -> None: ...

    def show(self) -> None: ...

    def sync(self) -> None: ...

    def poll_event(self) -> Optional[Event]: ...


def draw_parts(
    screen: Screen,
    parts: Iterable[Cell],
    style: Style,
    food: Optional[Cell],
    food_style: Style,
) -> None:
    """Draw the food glyph followed by every snake cell."""

    if food is not None:
        screen.set_content(food[0], food[1], FOOD_GLYPH, food_style)
    for x, y in parts:
        screen.set_content(x, y, SNAKE_GLYPH, style)


def draw_text(
    screen: Screen,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    text: str,
    style: Style = DEFAULT_STYLE,
) -> None:
    """Draw ``text`` inside the box ``(x1, y1)``-``(x2, y2)``.

    Characters wrap onto the next row once column ``x2`` is reached and
    anything past row ``y2`` is dropped.
    """

    row, col = y1, x1
    for char in text:
        screen.set_content(col, row, char, style)
        col += 1
        if col >= x2:
            row += 1
            col = x1
        if row > y2:
            break


_CURSES_COLORS = {
    "black": curses.COLOR_BLACK,
    "red": curses.COLOR_RED,
    "green": curses.COLOR_GREEN,
    "yellow": curses.COLOR_YELLOW,
    "blue": curses.COLOR_BLUE,
    "magenta": curses.COLOR_MAGENTA,
    "cyan": curses.COLOR_CYAN,
    "white": curses.COLOR_WHITE,
}

_CURSES_KEYS = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    3: Key.CTRL_C,
}


def translate_curses_key(code: int) -> KeyEvent:
    """Map a ``getch`` code onto a :class:`KeyEvent`."""

    if code in _CURSES_KEYS:
        return KeyEvent(_CURSES_KEYS[code])
    if 32 <= code < 127:
        return KeyEvent(Key.RUNE, chr(code))
    return KeyEvent(Key.OTHER)


class CursesScreen:
    """:class:`Screen` backed by the terminal through :mod:`curses`.

    Curses is not thread-safe, so every call into it is made while holding
    an internal lock.  ``poll_event`` releases the lock between polls so the
    game loop can keep drawing.

    Keys are read from a separate 1x1 window that is never drawn into, as
    ``getch`` refreshes the window it reads from.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._window: Optional["curses.window"] = None
        self._keys: Optional["curses.window"] = None
        self._pairs: Dict[Style, int] = {}
        self._style = DEFAULT_STYLE

    def init(self) -> None:
        locale.setlocale(locale.LC_ALL, "")
        with self._lock:
            try:
                window = curses.initscr()
            except curses.error as exc:
                raise ScreenInitError(f"Couldn't create screen: {exc}") from exc
            self._window = window
            try:
                curses.noecho()
                curses.raw()
                keys = curses.newwin(1, 1, 0, 0)
                keys.keypad(True)
                keys.nodelay(True)
                keys.noutrefresh()
                self._keys = keys
                if curses.has_colors():
                    curses.start_color()
            except curses.error as exc:
                self.fini()
                raise ScreenInitError(f"Couldn't init screen: {exc}") from exc
            try:
                curses.curs_set(0)
            except curses.error:
                # Some terminals cannot hide the cursor
                pass

    def fini(self) -> None:
        with self._lock:
            if self._window is None:
                return
            self._window = None
            if self._keys is not None:
                self._keys.keypad(False)
                self._keys = None
            curses.noraw()
            curses.echo()
            curses.endwin()

    def _attr(self, style: Style) -> int:
        if not curses.has_colors():
            return curses.A_NORMAL
        pair = self._pairs.get(style)
        if pair is None:
            pair = len(self._pairs) + 1
            curses.init_pair(
                pair,
                _CURSES_COLORS.get(style.foreground, curses.COLOR_WHITE),
                _CURSES_COLORS.get(style.background, curses.COLOR_BLACK),
            )
            self._pairs[style] = pair
        return curses.color_pair(pair)

    def set_style(self, style: Style) -> None:
        with self._lock:
            self._style = style
            if self._window is not None:
                self._window.bkgd(" ", self._attr(style))

    def size(self) -> Tuple[int, int]:
        with self._lock:
            if self._window is None:
                return 0, 0
            rows, cols = self._window.getmaxyx()
            return cols, rows

    def set_content(self, x: int, y: int, glyph: str, style: Style) -> None:
        with self._lock:
            if self._window is None:
                return
            try:
                self._window.addstr(y, x, glyph, self._attr(style))
            except curses.error:
                # Off-screen cells and the bottom-right corner are clipped
                pass

    def clear(self) -> None:
        with self._lock:
            if self._window is not None:
                self._window.erase()

    def show(self) -> None:
        with self._lock:
            if self._window is not None:
                self._window.refresh()

    def sync(self) -> None:
        with self._lock:
            if self._window is None:
                return
            curses.update_lines_cols()
            self._window.clearok(True)
            self._window.refresh()

    def poll_event(self) -> Optional[Event]:
        """Return the next pending event or ``None`` if nothing arrived."""

        with self._lock:
            if self._window is None or self._keys is None:
                return None
            code = self._keys.getch()
            if code == curses.KEY_RESIZE:
                rows, cols = self._window.getmaxyx()
                return ResizeEvent(cols, rows)
        if code == -1:
            time.sleep(POLL_INTERVAL)
            return None
        return translate_curses_key(code)
