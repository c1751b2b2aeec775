"""
Game entity dataclasses
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .config import GOAL_SIZE, PLAYER_SIZE, EnemyKind
from .utils import Box, vec_len


class SteeringMode(Enum):
    WANDER = "wander"
    SEEK = "seek"


@dataclass(frozen=True)
class Player:
    """Player avatar; (x, y) is the top-left corner"""
    x: float
    y: float
    size: float = PLAYER_SIZE

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.size, self.size)

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.size / 2, self.y + self.size / 2


@dataclass(frozen=True)
class Goal:
    """The diamond; (x, y) is its centre"""
    x: float
    y: float
    size: float = GOAL_SIZE

    @property
    def box(self) -> Box:
        # Diamond is drawn rotated but collides as an AABB
        half = self.size / 2
        return Box(self.x - half, self.y - half, self.size, self.size)


@dataclass(frozen=True)
class Enemy:
    """Hostile entity; (x, y) is the top-left corner"""
    x: float
    y: float
    vx: float
    vy: float
    speed: float  # px/s, fixed at spawn
    size: float
    kind: EnemyKind
    color: Tuple[int, int, int]
    detect_radius: float
    can_seek: bool  # fixed at spawn, never re-rolled
    mode: SteeringMode = SteeringMode.WANDER

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.size, self.size)

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.size / 2, self.y + self.size / 2

    @property
    def velocity_magnitude(self) -> float:
        return vec_len(self.vx, self.vy)
