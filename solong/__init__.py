"""String, memory, list, line-reading and formatting helpers, and a tile-game data model."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "numbers",
    "memory",
    "linked_list",
    "strings",
    "line_reader",
    "transform",
    "printf",
    "game",
]