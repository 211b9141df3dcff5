"""
Tests for the autopilot players.
"""

import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, RUNNING, SLOW  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from players import (  # noqa: E402
    Player,
    RandomPlayer,
    GreedyPlayer,
    get_player_class,
    list_variants,
    AVAILABLE_VARIANTS,
)


def make_state(body, heading=(1, 0), food=(8, 8), grid_size=10):
    return GameState(
        state=RUNNING,
        snake_positions=body,
        heading=heading,
        food=food,
        food_variant=0,
        score=0,
        difficulty=SLOW,
        grid_size=grid_size,
    )


class TestSafeMoves:

    def test_excludes_reversal_and_walls(self):
        player = Player("p")
        state = make_state([(9, 0), (8, 0), (7, 0)])
        assert set(player.safe_moves(state)) == {DOWN}

    def test_tail_is_free_unless_eating(self):
        player = Player("p")
        body = [(5, 5), (5, 4), (4, 4), (4, 5)]
        state = make_state(body, heading=(0, 1))
        assert LEFT in player.safe_moves(state)

        eating = make_state(body, heading=(0, 1), food=(4, 5))
        assert LEFT not in player.safe_moves(eating)

    def test_base_get_move_not_implemented(self):
        with pytest.raises(NotImplementedError):
            Player("p").get_move(make_state([(5, 5)]))


class TestRandomPlayer:

    def test_only_safe_moves(self):
        player = RandomPlayer("p", rng=random.Random(0))
        state = make_state([(9, 0), (8, 0), (7, 0)])
        for _ in range(20):
            assert player.get_move(state) == DOWN

    def test_trapped_returns_some_move(self):
        player = RandomPlayer("p", rng=random.Random(0))
        # Boxed into the top-left corner by its own body
        state = make_state([(0, 0), (0, 1), (1, 1), (1, 0), (2, 0)], heading=(0, -1))
        assert player.get_move(state) in VALID_MOVES


class TestGreedyPlayer:

    def test_moves_toward_food(self):
        player = GreedyPlayer("p", rng=random.Random(0))
        state = make_state([(5, 5), (4, 5), (3, 5)], food=(5, 1))
        assert player.get_move(state) == UP

    def test_straight_ahead_when_aligned(self):
        player = GreedyPlayer("p", rng=random.Random(0))
        state = make_state([(5, 5), (4, 5), (3, 5)], food=(8, 5))
        assert player.get_move(state) == RIGHT

    def test_avoids_wall_even_if_closer(self):
        player = GreedyPlayer("p", rng=random.Random(0))
        state = make_state([(9, 5), (8, 5), (7, 5)], food=(9, 9))
        assert player.get_move(state) == DOWN


class TestVariantRegistry:

    def test_get_player_class(self):
        assert get_player_class("random") is RandomPlayer
        assert get_player_class("greedy") is GreedyPlayer

    def test_default_variant(self):
        assert get_player_class(None) is GreedyPlayer
        assert get_player_class("  ") is GreedyPlayer

    def test_unknown_variant_raises(self):
        with pytest.raises(ValueError, match="Unknown player variant"):
            get_player_class("psychic")

    def test_list_variants_matches_registry(self):
        assert {v["key"] for v in list_variants()} == set(AVAILABLE_VARIANTS)
