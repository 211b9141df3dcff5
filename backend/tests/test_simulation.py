"""
Tests for the headless driver in main.py.
"""

import json
import os
import sys
from unittest.mock import patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameConfig  # noqa: E402
from domain.constants import FAST  # noqa: E402
from main import run_simulation, main  # noqa: E402


class TestRunSimulation:

    def test_plays_requested_rounds(self):
        result = run_simulation(
            player_name="bot",
            difficulty=FAST,
            player_variant="greedy",
            rounds=2,
            max_ticks=150,
            seed=7,
            config=GameConfig(grid_size=15),
        )

        assert result["player"] == "bot"
        assert result["difficulty"] == FAST
        assert [r["round"] for r in result["rounds"]] == [1, 2]
        for round_result in result["rounds"]:
            assert round_result["reason"] in {"wall", "self", "abort"}
            assert round_result["ticks"] <= 150
            assert round_result["score"] % 10 == 0

        scores = [entry["score"] for entry in result["leaderboard"]]
        assert len(scores) == 2
        assert scores == sorted(scores, reverse=True)
        assert result["best"] == result["leaderboard"][0]

    def test_max_ticks_aborts_round(self):
        result = run_simulation(
            player_name="bot",
            player_variant="random",
            rounds=1,
            max_ticks=3,
            seed=1,
            config=GameConfig(grid_size=15),
        )
        round_result = result["rounds"][0]
        assert round_result["ticks"] <= 3
        assert round_result["reason"] in {"wall", "self", "abort"}

    def test_same_seed_same_result(self):
        kwargs = dict(
            player_name="bot",
            rounds=1,
            max_ticks=100,
            seed=3,
            config=GameConfig(grid_size=15),
        )
        assert run_simulation(**kwargs) == run_simulation(**kwargs)


class TestMain:

    @patch("config.load_dotenv")
    def test_main_prints_summary(self, mock_load_dotenv, capsys, monkeypatch):
        monkeypatch.delenv("SNAKE_GRID_SIZE", raising=False)
        exit_code = main([
            "--name", "cli",
            "--difficulty", "medium",
            "--rounds", "1",
            "--max-ticks", "50",
            "--seed", "5",
            "--grid-size", "12",
        ])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Simulation Result Summary:" in out
        summary = json.loads(out.split("Simulation Result Summary:")[1])
        assert summary["player"] == "cli"
        assert summary["difficulty"] == "MEDIUM"

    def test_help_lists_player_variants(self, capsys):
        with pytest.raises(SystemExit):
            main(["--help"])

        out = " ".join(capsys.readouterr().out.split())
        assert "greedy = Moves toward the food" in out
        assert "random = Random safe move" in out

    @patch("config.load_dotenv")
    def test_main_reports_bad_config(self, mock_load_dotenv, capsys):
        exit_code = main(["--grid-size", "4", "--rounds", "1"])

        assert exit_code == 1
        assert "Error:" in capsys.readouterr().err
