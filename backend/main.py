import random
import json
import argparse
import logging
import sys
from typing import List, Tuple, Dict, Optional, Any

from config import GameConfig
from domain.constants import (
    DIRECTION_VECTORS, VALID_HEADINGS, DIFFICULTY_ORDER, DIFFICULTY_SETTINGS, MESSAGES,
    SLOW, READY, RUNNING, ENDED,
    FOOD_EATEN, ROUND_ENDED,
    END_WALL, END_SELF, END_ABORT, END_FOOD_PLACEMENT,
    validate_difficulty,
)
from domain.geometry import add, in_bounds, is_opposite
from domain.snake import snake_from_config
from domain.food import Food, FoodPlacementError
from domain.leaderboard import Leaderboard, RoundRecord
from domain.events import EventEmitter
from domain.clock import TickTimer
from domain.game_state import GameState
from players import Player, get_player_class, list_variants, AVAILABLE_VARIANTS

logger = logging.getLogger(__name__)

# Simulated frame length for the headless driver
FRAME_TIME = 1.0 / 60


class SnakeGame:
    """
    Round controller. Manages:
      - Snake and Food
      - Score and difficulty (with deferred difficulty changes)
      - Round state: ready -> running -> ended -> running ...
      - Leaderboard recording when a round ends
      - food_eaten / round_ended notifications
    """
    def __init__(
        self,
        config: Optional[GameConfig] = None,
        player_name: str = "Player",
        difficulty: str = SLOW,
        rng: Optional[random.Random] = None,
        events: Optional[EventEmitter] = None,
        leaderboard: Optional[Leaderboard] = None,
        timer: Optional[TickTimer] = None,
    ):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.events = events or EventEmitter()
        self.leaderboard = leaderboard if leaderboard is not None else Leaderboard()
        self.timer = timer or TickTimer()

        self.player_name = player_name
        self.difficulty = validate_difficulty(difficulty)
        self.state = READY
        self.score = 0
        self.round_number = 0
        self.tick_count = 0
        self.message_index = 0
        self.end_reason: Optional[str] = None
        self._pending_difficulty: Optional[str] = None

        self.snake = snake_from_config(self.config)
        self.food = Food(
            self.config.grid_size,
            difficulty=self.difficulty,
            variant_count=self.config.food_variants,
            max_attempts=self.config.placement_attempts,
            rng=self.rng,
        )
        self.food.place(self.snake.positions)

    # ------------------------------------------------------------------
    # Read-only accessors for renderers
    # ------------------------------------------------------------------

    @property
    def snake_body(self) -> List[Tuple[int, int]]:
        return list(self.snake.positions)

    @property
    def food_position(self) -> Optional[Tuple[int, int]]:
        return self.food.position

    @property
    def food_variant(self) -> int:
        return self.food.variant

    @property
    def is_running(self) -> bool:
        return self.state == RUNNING

    @property
    def message(self) -> str:
        return MESSAGES[self.message_index]

    @property
    def pending_difficulty(self) -> Optional[str]:
        return self._pending_difficulty

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            state=self.state,
            snake_positions=self.snake_body,
            heading=self.snake.heading,
            food=self.food.position,
            food_variant=self.food.variant,
            score=self.score,
            difficulty=self.difficulty,
            grid_size=self.config.grid_size,
            message=self.message,
            leaderboard=self.leaderboard.display_lines(),
        )

    # ------------------------------------------------------------------
    # Input surface
    # ------------------------------------------------------------------

    def start_round(self, player_name: Optional[str] = None, difficulty: Optional[str] = None) -> bool:
        """
        Begin a new round. A no-op while a round is already running.

        Without arguments the previous name is reused, and the difficulty is
        the pending change if one was requested, else the current one.
        """
        if self.state == RUNNING:
            logger.debug("start_round ignored: round already running")
            return False

        if player_name is not None:
            self.player_name = player_name
        if difficulty is None:
            difficulty = self._pending_difficulty or self.difficulty
        self.difficulty = validate_difficulty(difficulty)
        self._pending_difficulty = None

        self.snake.reset()
        self.food.set_difficulty(self.difficulty)
        self.food.place(self.snake.positions)
        self.score = 0
        self.tick_count = 0
        self.message_index = 0
        self.end_reason = None
        self.round_number += 1
        self.state = RUNNING
        self.timer.reset()

        logger.info(
            f"Round {self.round_number} started for {self.player_name} "
            f"on {self.difficulty} (food at {self.food.position})"
        )
        return True

    def set_heading(self, heading: Tuple[int, int]) -> bool:
        """
        Steer the snake. Takes effect on the next tick; the last accepted
        request before a tick wins.

        While the round is ended, a non-reversing direction restarts the round
        with the same player and difficulty. Ignored before the first round.
        """
        heading = tuple(heading)
        if heading not in VALID_HEADINGS:
            raise ValueError(f"Invalid heading {heading}")
        if self.state == READY:
            return False
        if self.state == ENDED:
            if is_opposite(heading, self.snake.heading):
                return False
            self.start_round()
        return self.snake.set_heading(heading)

    def handle_direction(self, direction: str) -> bool:
        """Steer by name: 'UP', 'DOWN', 'LEFT' or 'RIGHT'."""
        if direction not in DIRECTION_VECTORS:
            raise ValueError(f"Unknown direction '{direction}'")
        return self.set_heading(DIRECTION_VECTORS[direction])

    def request_difficulty_change(self, level: str):
        """
        Ask for a new difficulty. During a round it is applied at the end of
        the next tick; otherwise it is applied straight away.
        """
        level = validate_difficulty(level)
        if self.state == RUNNING:
            self._pending_difficulty = level
            logger.debug(f"Difficulty change to {level} queued for next tick")
        else:
            self.set_difficulty(level)

    def set_difficulty(self, level: str):
        """Change difficulty now and move the food to respect the new margin."""
        self.difficulty = validate_difficulty(level)
        self._pending_difficulty = None
        self.food.set_difficulty(self.difficulty)
        self.food.place(self.snake.positions)
        logger.info(f"Difficulty set to {self.difficulty}, food moved to {self.food.position}")

    def abort_round(self) -> bool:
        if self.state != RUNNING:
            return False
        self._end_round(END_ABORT)
        return True

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def compute_tick_interval(self) -> float:
        """
        Seconds between ticks: the difficulty's base interval, shortened by
        one millisecond per point scored, never below min_tick_interval.
        """
        base_interval = DIFFICULTY_SETTINGS[self.difficulty]["base_interval"]
        interval = base_interval - (self.score / 1000.0)
        return max(interval, self.config.min_tick_interval)

    def update(self, now: Optional[float] = None) -> bool:
        """
        Tick if the current interval has elapsed since the last tick.
        Returns True when a tick ran.
        """
        if self.state != RUNNING:
            return False
        if not self.timer.due(self.compute_tick_interval(), now):
            return False
        return self.tick()

    def tick(self) -> bool:
        """
        Run one simulation step:
          1) Move the snake (growing if the move lands on food)
          2) Handle eating: score, new food cell, next message, event
          3) Wall collision ends the round
          4) Self collision ends the round
          5) Apply a queued difficulty change
        Returns False if no round is running.
        """
        if self.state != RUNNING:
            return False

        self.tick_count += 1
        eats_food = add(self.snake.head, self.snake.heading) == self.food.position
        if eats_food:
            # Growth lands on this very step so the eaten cell is part of the body
            self.snake.request_growth()
        head = self.snake.step()

        try:
            if eats_food:
                self._eat_food(head)

            if not in_bounds(head, self.config.grid_size):
                self._end_round(END_WALL)
            elif self.snake.body_hit():
                self._end_round(END_SELF)

            # Still applied when the round just ended, so the next round uses it
            if self._pending_difficulty is not None:
                level = self._pending_difficulty
                self._pending_difficulty = None
                self.set_difficulty(level)
        except FoodPlacementError as e:
            logger.error(f"Food placement failed, aborting round {self.round_number}: {e}")
            if self.state == RUNNING:
                self._end_round(END_FOOD_PLACEMENT, relocate_food=False)
            raise

        return True

    def _eat_food(self, head: Tuple[int, int]):
        self.score += self.config.score_per_food
        self.food.advance_variant()
        self.food.place(self.snake.positions)
        self.message_index = (self.message_index + 1) % len(MESSAGES)
        logger.debug(f"Food eaten at {head}, score {self.score}, new food at {self.food.position}")
        self.events.emit(
            FOOD_EATEN,
            position=head,
            score=self.score,
            variant=self.food.variant,
        )

    def _end_round(self, reason: str, relocate_food: bool = True):
        record = RoundRecord(name=self.player_name, score=self.score, difficulty=self.difficulty)
        self.leaderboard.record(record)

        self.snake.reset()
        self.score = 0
        self.state = ENDED
        self.end_reason = reason
        logger.info(
            f"Round {self.round_number} over ({reason}) after {self.tick_count} ticks: "
            f"{record.name} scored {record.score} on {record.difficulty}"
        )

        try:
            if relocate_food:
                self.food.place(self.snake.positions)
        finally:
            self.events.emit(ROUND_ENDED, record=record, reason=reason)


# -------------------------------
# Simulation Function
# -------------------------------

def play_round(game: SnakeGame, player: Player, clock: List[float], max_ticks: int) -> Dict[str, Any]:
    """
    Drive one round frame by frame on a simulated clock.

    The player is asked for a move once per tick; frames in between only
    advance time, so update() is a no-op until the interval has elapsed.
    """
    result: Dict[str, Any] = {}

    def on_round_ended(record: RoundRecord, reason: str):
        result["score"] = record.score
        result["reason"] = reason

    game.events.subscribe(ROUND_ENDED, on_round_ended)
    try:
        game.start_round()
        game.handle_direction(player.get_move(game.get_current_state()))
        while game.is_running:
            clock[0] += FRAME_TIME
            if not game.update(clock[0]):
                continue
            if not game.is_running:
                break
            if game.tick_count >= max_ticks:
                game.abort_round()
                break
            game.handle_direction(player.get_move(game.get_current_state()))
    finally:
        game.events.unsubscribe(ROUND_ENDED, on_round_ended)

    result["ticks"] = game.tick_count
    return result


def run_simulation(
    player_name: str,
    difficulty: str = SLOW,
    player_variant: str = "greedy",
    rounds: int = 1,
    max_ticks: int = 2000,
    seed: Optional[int] = None,
    config: Optional[GameConfig] = None,
) -> Dict[str, Any]:
    """
    Play `rounds` headless rounds with an autopilot player.

    Args:
        player_name: name recorded on the leaderboard
        difficulty: one of SLOW, MEDIUM, FAST, VERY_FAST
        player_variant: autopilot key from the player registry
        rounds: how many rounds to play
        max_ticks: rounds still alive after this many ticks are aborted
        seed: seed for food placement and the player's choices
        config: game settings (defaults from the environment)

    Returns:
        A dictionary summarizing each round and the final leaderboard.
    """
    rng = random.Random(seed)
    clock = [0.0]
    game = SnakeGame(
        config=config or GameConfig.from_env(),
        player_name=player_name,
        difficulty=difficulty,
        rng=rng,
        timer=TickTimer(clock=lambda: clock[0]),
    )
    player = get_player_class(player_variant)(player_name, rng=rng)

    game.events.subscribe(
        FOOD_EATEN,
        lambda position, score, variant: print(f"Food eaten at {position}, score {score}"),
    )

    round_results = []
    for round_index in range(rounds):
        result = play_round(game, player, clock, max_ticks)
        result["round"] = round_index + 1
        round_results.append(result)
        print(f"Finished round {result['round']}: score {result['score']} ({result['reason']}, {result['ticks']} ticks)")

    best = game.leaderboard.best()
    return {
        "player": player_name,
        "difficulty": game.difficulty,
        "player_variant": player_variant,
        "rounds": round_results,
        "best": (
            {"name": best.name, "score": best.score, "difficulty": best.difficulty}
            if best else None
        ),
        "leaderboard": [
            {"name": r.name, "score": r.score, "difficulty": r.difficulty}
            for r in game.leaderboard
        ],
    }


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run headless Retro Snake rounds with an autopilot player."
    )
    parser.add_argument("--name", type=str, default="Player",
                        help="Player name recorded on the leaderboard")
    parser.add_argument("--difficulty", type=str.upper, choices=DIFFICULTY_ORDER, default=SLOW,
                        help="Speed level of the round")
    parser.add_argument("--player", type=str, choices=AVAILABLE_VARIANTS, default="greedy",
                        help="Autopilot that steers the snake: " + "; ".join(
                            f"{v['key']} = {v['description']}" for v in list_variants()
                        ))
    parser.add_argument("--rounds", type=int, default=3,
                        help="Number of rounds to play")
    parser.add_argument("--max-ticks", type=int, default=2000,
                        help="Abort a round after this many ticks")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible runs")
    parser.add_argument("--grid-size", type=int, default=None,
                        help="Override the grid size (default from SNAKE_GRID_SIZE or 29)")
    parser.add_argument("--log-level", type=str.upper, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = GameConfig.from_env(grid_size=args.grid_size)
        result = run_simulation(
            player_name=args.name,
            difficulty=args.difficulty,
            player_variant=args.player,
            rounds=args.rounds,
            max_ticks=args.max_ticks,
            seed=args.seed,
            config=config,
        )
    except (ValueError, FoodPlacementError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
