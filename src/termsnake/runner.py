"""Game loop and input handling.

The game loop advances the :class:`~termsnake.game_state.GameState` and
renders a frame every :data:`FRAME_DELAY_S` seconds on a background thread,
while the input loop polls the screen for events on the calling thread and
turns them into heading changes, restarts or shutdown.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

from .game_state import GameState
from .screen import (
    DEFAULT_STYLE,
    Event,
    Key,
    KeyEvent,
    ResizeEvent,
    Screen,
    Style,
    draw_parts,
    draw_text,
)

LOGGER = logging.getLogger(__name__)

# Seconds between two frames
FRAME_DELAY_S = 0.04

SNAKE_STYLE = Style("white", "black")
FOOD_STYLE = Style("white", "black")

# (vertical, horizontal) heading for each arrow key
DIRECTIONS = {
    Key.UP: (-1, 0),
    Key.DOWN: (1, 0),
    Key.LEFT: (0, -1),
    Key.RIGHT: (0, 1),
}


def score_text(score: int) -> str:
    return f"Score: {score}"


def game_over_text(score: int) -> str:
    return f"Game Over, Score: {score}, Play Again? y/n"


class GameRunner:
    """Drive one :class:`GameState` on a :class:`Screen`.

    ``sleep`` paces the frames and may be replaced for tests.  The runner
    owns the stop flag shared by the game thread and the input loop; once it
    is set no further frame is drawn.
    """

    def __init__(
        self,
        screen: Screen,
        state: Optional[GameState] = None,
        *,
        delay: float = FRAME_DELAY_S,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.screen = screen
        self.state = state or GameState()
        self.delay = delay
        self._sleep = sleep
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self.exit_code: Optional[int] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    # Game loop --------------------------------------------------------
    def new_round(self) -> None:
        """Reset the state for a new round sized to the current screen."""

        self.screen.set_style(DEFAULT_STYLE)
        width, height = self.screen.size()
        self.state.resize(width, height)
        self.state.reset_game()

    def run_frame(self) -> bool:
        """Advance and render a single frame.

        Returns ``False`` once the round is over or the runner was stopped.
        """

        if self.stopped:
            return False
        self.screen.clear()
        if not self.state.tick():
            return False
        draw_parts(
            self.screen, self.state.snake, SNAKE_STYLE, self.state.food, FOOD_STYLE
        )
        text = score_text(self.state.score)
        draw_text(self.screen, 1, 1, 1 + len(text), 1, text)
        self._sleep(self.delay)
        if self.stopped:
            return False
        self.screen.show()
        return True

    def draw_game_over(self) -> None:
        if self.stopped:
            return
        width, height = self.state.width, self.state.height
        text = game_over_text(self.state.score)
        x1 = max(0, width // 2 - len(text) // 2)
        draw_text(self.screen, x1, height // 2, x1 + len(text), height // 2, text)
        self.screen.show()

    def run(self) -> None:
        """Play one round until game over, then draw the restart prompt."""

        self.new_round()
        while self.run_frame():
            pass
        self.draw_game_over()

    def start(self) -> None:
        """Run a round on a background thread."""

        if self.running:
            LOGGER.debug("Round already running")
            return
        self._thread = threading.Thread(target=self.run, name="game-loop", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    # Input ------------------------------------------------------------
    def shutdown(self, exit_code: int = 0) -> None:
        """Stop the game loop and tear the screen down."""

        self.stop()
        self.screen.fini()
        self.exit_code = exit_code
        LOGGER.info("Shutting down with score %d", self.state.score)

    def handle_event(self, event: Event) -> None:
        """React to a single key or resize event."""

        if isinstance(event, ResizeEvent):
            self.screen.sync()
            LOGGER.debug("Terminal resized to %dx%d", event.width, event.height)
            return
        if not isinstance(event, KeyEvent):
            return

        if event.key == Key.CTRL_C:
            self.shutdown(0)
        elif event.key in DIRECTIONS:
            self.state.snake.change_direction(*DIRECTIONS[event.key])
        elif event.key == Key.RUNE and self.state.game_over and not self.running:
            answer = event.char.lower()
            if answer == "y":
                LOGGER.info("Restarting")
                self.start()
            elif answer == "n":
                self.shutdown(0)

    def input_loop(self) -> int:
        """Poll for events until shutdown and return the exit code."""

        while self.exit_code is None:
            event = self.screen.poll_event()
            if event is not None:
                self.handle_event(event)
        return self.exit_code
