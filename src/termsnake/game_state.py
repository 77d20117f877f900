"""High level game state container."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .food import place_food
from .grid import Cell
from .snake_body import SnakeBody

LOGGER = logging.getLogger(__name__)


@dataclass
class GameState:
    """Mutable state for a snake game session."""

    width: int = 80
    height: int = 24
    snake: SnakeBody = field(default_factory=SnakeBody)
    food: Optional[Cell] = None
    score: int = 0
    game_over: bool = False
    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    def resize(self, width: int, height: int) -> None:
        """Record new grid dimensions; they apply from the next round."""

        self.width = width
        self.height = height

    def update_food(self) -> Cell:
        """Move the food to a random free cell and return it."""

        self.food = place_food(self.width, self.height, self.rng, self.snake.parts)
        return self.food

    def reset_game(self) -> None:
        """Reset the snake, food and score for a new round."""

        self.snake.reset_position(self.width, self.height)
        self.update_food()
        self.score = 0
        self.game_over = False
        LOGGER.info("New round on a %dx%d grid", self.width, self.height)

    def tick(self) -> bool:
        """Advance the game by one frame.

        The head eats food it is sitting on, then the snake moves and new food
        is placed clear of the moved body.  A move whose new head lands on a
        cell the body still occupies afterwards ends the round instead; the
        snake is left where it was.  Returns
        ``True`` while the round is still running.
        """

        if self.game_over:
            return False

        grew = False
        if self.snake.head == self.food:
            grew = True
            self.score += 1

        new_head = self.snake.updated_head(self.width, self.height)
        remaining = self.snake.parts if grew else self.snake.parts[1:]
        if new_head in remaining:
            self.game_over = True
            LOGGER.info("Game over, score %d", self.score)
            return False

        self.snake.advance(self.width, self.height, grew)
        if grew:
            self.update_food()
            LOGGER.debug("Food eaten, score %d, next food at %s", self.score, self.food)
        return True
