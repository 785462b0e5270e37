"""Game state, map entities, key codes and error messages of the tile game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional, Sequence


class Entity(str, Enum):
    """Characters that may appear in a map file."""

    OPEN_SPACE = "0"
    WALL = "1"
    EXIT = "E"
    COLLECTIBLE = "C"
    PLAYER = "P"


class Key(IntEnum):
    """Key codes the game reacts to."""

    W = 119
    A = 97
    S = 115
    D = 100
    UP = 65362
    LEFT = 65361
    DOWN = 65364
    RIGHT = 65363
    ESC = 65307


class ErrorMessage(str, Enum):
    """Messages reported when the game cannot start or continue."""

    MALLOC_ERR = "malloc() failed"
    MLX_INIT_ERR = "Failed to initialize mlx"
    MLX_NEW_WINDOW_ERR = "Failed to open a new window"
    INVALID_NBR_ARGS = "Invalid number of arguments"
    NULL_MAP = "NULL map argument"
    INVALID_ENTITY = "Invalid entity on map's file"
    INVALID_FORMAT = "Invalid map format"
    MAP_NOT_CLOSED = "Map is not closed by walls"
    INVALID_NBR_EXITS = "Invalid number of Exits (E)"
    NO_COLLECTIBLES = "Map doesn't have any Collectible (C)"
    INVALID_NBR_PLAYERS = "Invalid number of Starting Positions (P)"
    UNACHIEVABLE_ENTITIES = "Map has unachievable entities"
    INVALID_MAP_FILE = "Invalid map file extension"
    OPEN_MAP_FILE_ERR = "Failed to open map's file"
    EMPTY_MAP_FILE = "Map file is empty"
    WALL_XPM_ERR = "Failed to open wall image"
    FLOOR_XPM_ERR = "Failed to open floor image"
    PLAYER_XPM_ERR = "Failed to open player image"
    COLLECTIBLE_XPM_ERR = "Failed to open collectible image"
    EXIT_XPM_ERR = "Failed to open exit image"


KEYPRESS_EVENT = 2
DESTROY_NOTIFY_EVENT = 17

WIN_MSG = "You won, that's all folks!\n"

WALL_TILE = "./assets/wall.xpm"
FLOOR_TILE = "./assets/floor.xpm"
PLAYER_TILE = "./assets/player.xpm"
ENEMY_TILE = "./assets/ghost.xpm"
COLLECTIBLE_TILE = "./assets/coin.xpm"
EXIT_TILE = "./assets/exit.xpm"

TILE_SIZE = 64


class GameError(Exception):
    """A fatal game error carrying one of the :class:`ErrorMessage` texts."""

    def __init__(self, message: ErrorMessage | str) -> None:
        self.message = message
        super().__init__(message.value if isinstance(message, ErrorMessage) else message)


@dataclass
class Point:
    """A position on the map grid."""

    x: int = 0
    y: int = 0


@dataclass
class GameMap:
    """The parsed map and the counts of its entities."""

    grid: Optional[List[str]] = None
    rows: int = 0
    columns: int = 0
    collectibles: int = 0
    exit: int = 0
    player: int = 0
    player_pos: Point = field(default_factory=Point)


@dataclass
class Game:
    """Everything the running game holds: map, window handles, tiles and moves."""

    map: GameMap = field(default_factory=GameMap)
    display: Any = None
    window: Any = None
    tiles: Dict[Entity, Any] = field(default_factory=dict)
    moves: int = -1


def new_game() -> Game:
    """Return a fresh game with an empty map and no moves made yet."""
    return Game()


def check_args(argv: Sequence[str]) -> str:
    """Validate the command line (program name first) and return the map path."""
    if len(argv) != 2:
        raise GameError(ErrorMessage.INVALID_NBR_ARGS)
    if not argv[1]:
        raise GameError(ErrorMessage.NULL_MAP)
    return argv[1]