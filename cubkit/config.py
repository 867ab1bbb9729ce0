"""Data model of a parsed scene description: textures, colours, map and player."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

BUFFER_SIZE_PARSING_CUBE = 1024


class ParseState(enum.IntEnum):
    """Outcome of a parsing step."""

    FAILURE = -1
    SUCCESS = 0


@dataclass
class Coord:
    """A cell position on the map grid."""

    x: int = 0
    y: int = 0


@dataclass
class GameMap:
    """The map grid, one string per row."""

    grid: list[str] = field(default_factory=list)

    @property
    def width(self) -> int:
        """Length of the longest row."""
        return max((len(row) for row in self.grid), default=0)

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.grid)


@dataclass
class Textures:
    """Paths of the four wall textures."""

    north: str | None = None
    south: str | None = None
    east: str | None = None
    west: str | None = None


@dataclass
class Player:
    """Start position and facing direction of the player."""

    pos: Coord = field(default_factory=Coord)
    dir: str = ""


@dataclass
class Config:
    """Everything a scene description file holds."""

    textures: Textures = field(default_factory=Textures)
    floor_color: int = 0
    ceiling_color: int = 0
    map: GameMap = field(default_factory=GameMap)
    player: Player = field(default_factory=Player)