"""
Autopilot players for the headless Retro Snake driver.

This module contains the player abstraction and the implementations
that steer the snake when no human is at the keyboard.
"""

from .base import Player
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'RandomPlayer',
    'GreedyPlayer',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
