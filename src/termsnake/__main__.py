"""Terminal snake.

Run with: `python -m termsnake` (or the ``termsnake`` script).

Arrow keys steer, Ctrl-C quits.  After a game over press ``y`` to play
again or ``n`` to leave.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .game_state import GameState
from .runner import FRAME_DELAY_S, GameRunner
from .screen import CursesScreen, Screen, ScreenInitError

LOGGER = logging.getLogger(__name__)


@dataclass
class RunConfig:
    """Options collected from the command line."""

    backend: str = "curses"
    delay: float = FRAME_DELAY_S
    seed: Optional[int] = None
    log_file: Optional[str] = None
    log_level: str = "INFO"


def parse_args(argv: Optional[Sequence[str]] = None) -> RunConfig:
    parser = argparse.ArgumentParser(prog="termsnake", description=__doc__.splitlines()[0])
    parser.add_argument(
        "--backend",
        choices=("curses", "pygame"),
        default="curses",
        help="Render in the terminal (default) or in a pygame window",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=FRAME_DELAY_S,
        help="Seconds between frames (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write log records to this file while the game owns the terminal",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        help="Level used for --log-file (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("--delay must not be negative")
    return RunConfig(
        backend=args.backend,
        delay=args.delay,
        seed=args.seed,
        log_file=args.log_file,
        log_level=args.log_level,
    )


def configure_logging(config: RunConfig) -> None:
    """Send records to ``config.log_file`` or keep only warnings on stderr."""

    if config.log_file:
        logging.basicConfig(
            filename=config.log_file,
            level=getattr(logging, config.log_level),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")


def create_screen(backend: str) -> Screen:
    if backend == "pygame":
        from .run_pygame import PygameScreen

        return PygameScreen()
    return CursesScreen()


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = parse_args(argv)
    configure_logging(config)

    screen = create_screen(config.backend)
    try:
        screen.init()
    except ScreenInitError as exc:
        LOGGER.critical("%s", exc)
        return 1

    state = GameState(rng=np.random.default_rng(config.seed))
    runner = GameRunner(screen, state, delay=config.delay)
    try:
        runner.start()
        return runner.input_loop()
    except KeyboardInterrupt:
        runner.shutdown(0)
        return 0
    finally:
        runner.stop()
        screen.fini()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    sys.exit(main())
