"""
Domain entities for the Retro Snake game engine.

This module contains the core game entities that are independent of
rendering, audio and input concerns.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, DIRECTION_VECTORS,
    SLOW, MEDIUM, FAST, VERY_FAST, DIFFICULTY_ORDER, DIFFICULTY_SETTINGS,
    READY, RUNNING, ENDED, FOOD_EATEN, ROUND_ENDED,
    difficulty_label,
)
from .snake import Snake
from .food import Food, FoodPlacementError
from .leaderboard import Leaderboard, RoundRecord
from .events import EventEmitter
from .clock import TickTimer
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DIRECTION_VECTORS',
    'SLOW', 'MEDIUM', 'FAST', 'VERY_FAST', 'DIFFICULTY_ORDER', 'DIFFICULTY_SETTINGS',
    'READY', 'RUNNING', 'ENDED', 'FOOD_EATEN', 'ROUND_ENDED',
    'difficulty_label',
    'Snake',
    'Food',
    'FoodPlacementError',
    'Leaderboard',
    'RoundRecord',
    'EventEmitter',
    'TickTimer',
    'GameState',
]
