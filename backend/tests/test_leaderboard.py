"""
Tests for the leaderboard.
"""

import os
import sys
import dataclasses

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import SLOW, FAST, VERY_FAST, difficulty_label  # noqa: E402
from domain.leaderboard import Leaderboard, RoundRecord  # noqa: E402


class TestRoundRecord:

    def test_record_is_immutable(self):
        record = RoundRecord(name="Ann", score=30, difficulty=SLOW)
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.score = 40

    def test_display_line(self):
        record = RoundRecord(name="Ann", score=30, difficulty=VERY_FAST)
        assert record.display_line() == "Player: Ann - Score: 30 - Difficulty: Very Fast"

    def test_difficulty_label_unknown(self):
        assert difficulty_label("NOPE") == "Unknown"


class TestLeaderboard:

    def test_sorted_descending_after_each_record(self):
        """After N records the board holds N entries in non-increasing score order."""
        board = Leaderboard()
        scores = [10, 50, 0, 30, 50, 20]
        for i, score in enumerate(scores):
            board.record(RoundRecord(name=f"p{i}", score=score, difficulty=SLOW))
            entries = board.entries
            assert len(entries) == i + 1
            assert all(a.score >= b.score for a, b in zip(entries, entries[1:]))

    def test_ties_keep_recording_order(self):
        board = Leaderboard()
        board.record(RoundRecord(name="first", score=20, difficulty=SLOW))
        board.record(RoundRecord(name="low", score=10, difficulty=SLOW))
        board.record(RoundRecord(name="second", score=20, difficulty=FAST))

        assert [e.name for e in board] == ["first", "second", "low"]

    def test_best_and_len(self):
        board = Leaderboard()
        assert board.best() is None
        assert len(board) == 0

        board.record(RoundRecord(name="a", score=5, difficulty=SLOW))
        board.record(RoundRecord(name="b", score=15, difficulty=SLOW))

        assert board.best().name == "b"
        assert len(board) == 2

    def test_entries_are_a_snapshot(self):
        board = Leaderboard()
        board.record(RoundRecord(name="a", score=5, difficulty=SLOW))
        entries = board.entries
        board.record(RoundRecord(name="b", score=15, difficulty=SLOW))

        assert len(entries) == 1

    def test_display_lines(self):
        board = Leaderboard()
        board.record(RoundRecord(name="a", score=5, difficulty=SLOW))
        board.record(RoundRecord(name="b", score=15, difficulty=FAST))

        assert board.display_lines() == [
            "Player: b - Score: 15 - Difficulty: Fast",
            "Player: a - Score: 5 - Difficulty: Slow",
        ]
