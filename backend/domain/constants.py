"""
Game constants for Retro Snake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Screen coordinates: y grows downwards
DIRECTION_VECTORS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}
VALID_HEADINGS = set(DIRECTION_VECTORS.values())

# Difficulty levels
SLOW = "SLOW"
MEDIUM = "MEDIUM"
FAST = "FAST"
VERY_FAST = "VERY_FAST"
DIFFICULTY_ORDER = [SLOW, MEDIUM, FAST, VERY_FAST]

# Single lookup table: level -> display label, base tick interval (seconds),
# minimum food distance from the grid border
DIFFICULTY_SETTINGS = {
    SLOW:      {"label": "Slow",      "base_interval": 0.2,  "food_margin": 4},
    MEDIUM:    {"label": "Medium",    "base_interval": 0.15, "food_margin": 3},
    FAST:      {"label": "Fast",      "base_interval": 0.1,  "food_margin": 2},
    VERY_FAST: {"label": "Very Fast", "base_interval": 0.05, "food_margin": 1},
}

# Round states
READY = "ready"
RUNNING = "running"
ENDED = "ended"

# Event names
FOOD_EATEN = "food_eaten"
ROUND_ENDED = "round_ended"

# End reasons
END_WALL = "wall"
END_SELF = "self"
END_ABORT = "abort"
END_FOOD_PLACEMENT = "food_placement"

# Shown above the board, advanced each time food is eaten
MESSAGES = [
    "Learning Classes and algorithms by Snake",
    "Message after first food",
    "Message after second food",
]


def difficulty_label(level: str) -> str:
    """Return the display name of a difficulty level ("Unknown" if invalid)."""
    settings = DIFFICULTY_SETTINGS.get(level)
    return settings["label"] if settings else "Unknown"


def validate_difficulty(level: str) -> str:
    if level not in DIFFICULTY_SETTINGS:
        available = ", ".join(DIFFICULTY_ORDER)
        raise ValueError(
            f"Unknown difficulty '{level}'. Available difficulties: {available}"
        )
    return level
