"""
Level generation: a fresh, non-overlapping layout for a level number
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .config import (
    ARENA_HEIGHT,
    ARENA_WIDTH,
    DETECT_RADIUS_BASE,
    DETECT_RADIUS_PER_LEVEL,
    ENEMY_PADDING,
    ENEMY_SIZE_GROWTH,
    ENEMY_SPEED_BASE,
    ENEMY_SPEED_JITTER,
    ENEMY_SPEED_PER_LEVEL,
    GOAL_PADDING,
    PLACEMENT_ATTEMPTS,
    PLAYER_START,
    Theme,
    enemy_count,
    seek_probability,
    theme_for_level,
)
from .entities import Enemy, Goal, Player
from .utils import Box, aabb_overlap, make_rng, random_unit

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class LevelState:
    """Everything spawned at the start of a level"""
    level: int
    player: Player
    goal: Goal
    enemies: Tuple[Enemy, ...]


def find_spawn_point(
    rng: np.random.Generator,
    pad: float,
    existing: Sequence[Box],
    attempts: int = PLACEMENT_ATTEMPTS,
) -> Tuple[float, float]:
    """
    Rejection-sample a point whose pad-sized box is clear of `existing`.

    Points are drawn inside the arena inset by `pad`. When every attempt
    collides the point (pad, pad) is returned, so placement never fails.
    """
    for _ in range(attempts):
        x = float(rng.uniform(pad, ARENA_WIDTH - pad))
        y = float(rng.uniform(pad, ARENA_HEIGHT - pad))
        candidate = Box(x - pad / 2, y - pad / 2, pad, pad)
        if not any(aabb_overlap(box, candidate) for box in existing):
            return x, y
    log.debug("No free spot after %d attempts (pad=%s), using fallback", attempts, pad)
    return pad, pad


def spawn_enemy(
    level: int,
    theme: Theme,
    cx: float,
    cy: float,
    rng: np.random.Generator,
) -> Enemy:
    """Build an enemy centred on (cx, cy) with its per-spawn rolls"""
    speed = (
        ENEMY_SPEED_BASE
        + theme.speed_bonus
        + level * ENEMY_SPEED_PER_LEVEL
        + float(rng.uniform(-ENEMY_SPEED_JITTER, ENEMY_SPEED_JITTER))
    )
    hx, hy = random_unit(rng)
    size = theme.enemy_size * (1.0 + ENEMY_SIZE_GROWTH * (level - 1))
    detect_radius = (DETECT_RADIUS_BASE + level * DETECT_RADIUS_PER_LEVEL) * theme.detect_scale
    can_seek = bool(rng.random() < seek_probability(theme))

    return Enemy(
        x=cx - size / 2,
        y=cy - size / 2,
        vx=hx * speed,
        vy=hy * speed,
        speed=speed,
        size=size,
        kind=theme.enemy_kind,
        color=theme.enemy_color,
        detect_radius=detect_radius,
        can_seek=can_seek,
    )


def generate_level(level: int, rng: Optional[np.random.Generator] = None) -> LevelState:
    """
    Generate the layout of `level`.

    The player starts in the bottom-left corner; the goal and then each enemy
    are placed clear of everything placed before them.
    """
    if level < 1:
        raise ValueError(f"Level must be >= 1, got {level}")
    if rng is None:
        rng = make_rng()

    theme = theme_for_level(level)

    player = Player(x=PLAYER_START[0], y=PLAYER_START[1])
    placed: List[Box] = [player.box]

    gx, gy = find_spawn_point(rng, GOAL_PADDING, placed)
    goal = Goal(x=gx, y=gy)
    placed.append(goal.box)

    enemies = []
    for _ in range(enemy_count(level)):
        cx, cy = find_spawn_point(rng, ENEMY_PADDING, placed)
        enemy = spawn_enemy(level, theme, cx, cy, rng)
        enemies.append(enemy)
        placed.append(enemy.box)

    return LevelState(level=level, player=player, goal=goal, enemies=tuple(enemies))
