"""
In-memory leaderboard of finished rounds.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .constants import difficulty_label


@dataclass(frozen=True)
class RoundRecord:
    name: str
    score: int
    difficulty: str

    def display_line(self) -> str:
        return (
            f"Player: {self.name} - Score: {self.score} - "
            f"Difficulty: {difficulty_label(self.difficulty)}"
        )


class Leaderboard:
    """
    Append-only list of RoundRecord, kept sorted by descending score.

    Sorting is stable, so equal scores stay in the order they were recorded.
    Nothing is ever evicted; the board lives as long as the process.
    """

    def __init__(self):
        self._entries: List[RoundRecord] = []

    def record(self, entry: RoundRecord):
        self._entries.append(entry)
        self._entries.sort(key=lambda e: e.score, reverse=True)

    @property
    def entries(self) -> Tuple[RoundRecord, ...]:
        return tuple(self._entries)

    def best(self):
        return self._entries[0] if self._entries else None

    def display_lines(self) -> List[str]:
        return [entry.display_line() for entry in self._entries]

    def __iter__(self) -> Iterator[RoundRecord]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self):
        return f"<Leaderboard entries={len(self._entries)}>"
