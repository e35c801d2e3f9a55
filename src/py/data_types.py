from dataclasses import dataclass
from typing import Dict, Tuple

Position = Tuple[int, int]

# Direction constants
DIR_EAST = 0
DIR_WEST = 1
DIR_SOUTH = 2
DIR_NORTH = 3

# Rotation order: R -> D -> L -> U -> R
ROTATION_ORDER = (DIR_EAST, DIR_SOUTH, DIR_WEST, DIR_NORTH)
NUM_DIRECTIONS = len(ROTATION_ORDER)

# direction -> (dx, dy)
DIR_TO_DELTA: Dict[int, Tuple[int, int]] = {
    DIR_EAST: (1, 0),
    DIR_WEST: (-1, 0),
    DIR_SOUTH: (0, 1),
    DIR_NORTH: (0, -1),
}

DIR_NAMES: Dict[int, str] = {
    DIR_EAST: "R",
    DIR_SOUTH: "D",
    DIR_WEST: "L",
    DIR_NORTH: "U",
}

_NAME_TO_DIR: Dict[str, int] = {
    "r": DIR_EAST,
    "d": DIR_SOUTH,
    "l": DIR_WEST,
    "u": DIR_NORTH,
    "east": DIR_EAST,
    "south": DIR_SOUTH,
    "west": DIR_WEST,
    "north": DIR_NORTH,
}

STOP_BOXED_IN = "boxed_in"
STOP_REVISIT = "revisit"


def increment(direction: int) -> int:
    """Unit step along the direction's axis (x for R/L, y for D/U)."""
    dx, dy = DIR_TO_DELTA[direction]
    return dx if dx != 0 else dy


def rotate(direction: int) -> int:
    idx = ROTATION_ORDER.index(direction)
    return ROTATION_ORDER[(idx + 1) % NUM_DIRECTIONS]


def parse_direction(text: str) -> int:
    key = str(text).strip().lower()
    if key not in _NAME_TO_DIR:
        raise ValueError(f"Unknown heading: {text!r}")
    return _NAME_TO_DIR[key]


@dataclass(frozen=True)
class Pose:
    pos: Position
    facing: int = DIR_EAST

    def advance(self) -> "Pose":
        x, y = self.pos
        d = increment(self.facing)
        if self.facing in (DIR_EAST, DIR_WEST):
            return Pose((x + d, y), self.facing)
        return Pose((x, y + d), self.facing)

    def rotate(self) -> "Pose":
        return Pose(self.pos, rotate(self.facing))


# Cell classification results
@dataclass(frozen=True)
class Empty:
    pos: Position


@dataclass(frozen=True)
class Visited:
    pos: Position


@dataclass(frozen=True)
class Blocked:
    pass


# Robot run states
@dataclass(frozen=True)
class Running:
    pose: Pose


@dataclass(frozen=True)
class Stopped:
    pose: Pose
    reason: str
