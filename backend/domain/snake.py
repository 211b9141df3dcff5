"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple

from .constants import VALID_HEADINGS
from .geometry import add, is_opposite


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        heading: direction vector applied on the next step
        pending_growth: keep the tail on the next step
    """

    def __init__(
        self,
        positions: List[Tuple[int, int]],
        heading: Tuple[int, int] = (1, 0),
    ):
        self._initial_positions = list(positions)
        self._initial_heading = heading
        self.positions = deque(positions)
        self.heading = heading
        self.pending_growth = False

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def step(self) -> Tuple[int, int]:
        """
        Advance one cell along the heading and return the new head.

        No bounds or self checks happen here; the round controller looks
        at the new head afterwards.
        """
        new_head = add(self.head, self.heading)
        self.positions.appendleft(new_head)
        if self.pending_growth:
            self.pending_growth = False
        else:
            self.positions.pop()
        return new_head

    def request_growth(self):
        self.pending_growth = True

    def set_heading(self, heading: Tuple[int, int]) -> bool:
        """
        Change direction for the next step.

        Returns False (and leaves the heading alone) when the request is the
        exact opposite of the current heading.
        """
        heading = tuple(heading)
        if heading not in VALID_HEADINGS:
            raise ValueError(f"Invalid heading {heading}")
        if is_opposite(heading, self.heading):
            return False
        self.heading = heading
        return True

    def body_hit(self) -> bool:
        """True if the head sits on any other body cell."""
        head = self.head
        for i in range(1, len(self.positions)):
            if self.positions[i] == head:
                return True
        return False

    def reset(self):
        self.positions = deque(self._initial_positions)
        self.heading = self._initial_heading
        self.pending_growth = False

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self.positions)}, heading={self.heading}>"


def snake_from_config(config) -> Snake:
    """Build a snake in the configured starting position."""
    return Snake(list(config.initial_body), heading=config.initial_heading)

