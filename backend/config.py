"""
Game configuration for Retro Snake.

A single immutable GameConfig is built once (from defaults or the
environment) and handed to the Snake, Food and SnakeGame constructors.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_BODY = ((6, 9), (5, 9), (4, 9))
DEFAULT_INITIAL_HEADING = (1, 0)


@dataclass(frozen=True)
class GameConfig:
    """
    Immutable game settings.

    Attributes:
        grid_size: number of cells along each side of the square grid
        cell_size, offset: pixel geometry for renderers (unused by the engine)
        initial_body: starting snake cells, head first
        initial_heading: starting direction vector
        score_per_food: points awarded per food eaten
        min_tick_interval: floor for the score-accelerated tick interval
        food_variants: number of cosmetic food variants to cycle through
        placement_attempts: random draws before food placement falls back
            to enumerating the free cells
    """

    grid_size: int = 29
    cell_size: int = 30
    offset: int = 75
    initial_body: Tuple[Tuple[int, int], ...] = DEFAULT_INITIAL_BODY
    initial_heading: Tuple[int, int] = DEFAULT_INITIAL_HEADING
    score_per_food: int = 10
    min_tick_interval: float = 0.05
    food_variants: int = 4
    placement_attempts: int = 1000

    def __post_init__(self):
        if self.grid_size < 1:
            raise ValueError(f"grid_size must be positive, got {self.grid_size}")
        if not self.initial_body:
            raise ValueError("initial_body must contain at least one cell")
        if len(set(self.initial_body)) != len(self.initial_body):
            raise ValueError("initial_body cells must be distinct")
        for x, y in self.initial_body:
            if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
                raise ValueError(
                    f"initial_body cell {(x, y)} is outside a {self.grid_size}x{self.grid_size} grid"
                )
        if self.initial_heading not in {(1, 0), (-1, 0), (0, 1), (0, -1)}:
            raise ValueError(f"initial_heading must be a unit vector, got {self.initial_heading}")
        if self.food_variants < 1:
            raise ValueError("food_variants must be at least 1")
        if self.placement_attempts < 1:
            raise ValueError("placement_attempts must be at least 1")
        if self.min_tick_interval <= 0:
            raise ValueError("min_tick_interval must be positive")

    @classmethod
    def from_env(cls, grid_size: Optional[int] = None) -> "GameConfig":
        """
        Build a config from SNAKE_* environment variables (a .env file is
        honoured). An explicit grid_size argument wins over the environment.
        """
        load_dotenv()

        values = {}
        env_map = {
            "grid_size": "SNAKE_GRID_SIZE",
            "cell_size": "SNAKE_CELL_SIZE",
            "offset": "SNAKE_OFFSET",
            "food_variants": "SNAKE_FOOD_VARIANTS",
            "placement_attempts": "SNAKE_PLACEMENT_ATTEMPTS",
        }
        for field_name, env_name in env_map.items():
            raw = os.getenv(env_name)
            if raw is None or raw.strip() == "":
                continue
            try:
                values[field_name] = int(raw)
            except ValueError:
                raise ValueError(f"{env_name} must be an integer, got {raw!r}") from None

        if grid_size is not None:
            values["grid_size"] = grid_size

        config = cls(**values)
        logger.debug(f"Loaded game config: {config}")
        return config
