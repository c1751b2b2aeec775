"""
Enemy steering: a two-state wander/seek machine evaluated once per tick.

Only enemies flagged `can_seek` at spawn ever leave WANDER. Entering SEEK
happens inside `detect_radius`; leaving it needs the player beyond
`detect_radius * SEEK_EXIT_FACTOR`, so an enemy hovering near the edge of its
range does not flip every frame.

Both modes keep the velocity magnitude at the enemy's fixed speed: seeking
re-aims straight at the player, wandering occasionally nudges the current
heading by a random impulse (a correlated random walk).
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Tuple

import numpy as np

from .config import SEEK_EXIT_FACTOR, WANDER_TURN_CHANCE, WANDER_TURN_STRENGTH
from .entities import Enemy, Player, SteeringMode
from .utils import normalize, random_unit, vec_len


def next_mode(enemy: Enemy, distance: float) -> SteeringMode:
    """Mode after observing the player at `distance`"""
    if not enemy.can_seek:
        return SteeringMode.WANDER
    if enemy.mode is SteeringMode.WANDER and distance < enemy.detect_radius:
        return SteeringMode.SEEK
    if enemy.mode is SteeringMode.SEEK and distance > enemy.detect_radius * SEEK_EXIT_FACTOR:
        return SteeringMode.WANDER
    return enemy.mode


def _heading(enemy: Enemy) -> Tuple[float, float]:
    return normalize(enemy.vx, enemy.vy)


def _seek(enemy: Enemy, dx: float, dy: float) -> Enemy:
    # Coincident centres keep the current heading
    nx, ny = normalize(dx, dy, fallback=_heading(enemy))
    return replace(enemy, mode=SteeringMode.SEEK, vx=nx * enemy.speed, vy=ny * enemy.speed)


def _wander(enemy: Enemy, rng: np.random.Generator) -> Enemy:
    if rng.random() >= WANDER_TURN_CHANCE:
        return replace(enemy, mode=SteeringMode.WANDER)

    ux, uy = random_unit(rng)
    hx, hy = _heading(enemy)
    nx, ny = normalize(
        hx + ux * WANDER_TURN_STRENGTH,
        hy + uy * WANDER_TURN_STRENGTH,
        fallback=(ux, uy),
    )
    return replace(enemy, mode=SteeringMode.WANDER, vx=nx * enemy.speed, vy=ny * enemy.speed)


def steer(enemy: Enemy, player: Player, rng: np.random.Generator) -> Enemy:
    """Update one enemy's mode and velocity for this tick"""
    ex, ey = enemy.center
    px, py = player.center
    dx, dy = px - ex, py - ey

    mode = next_mode(enemy, vec_len(dx, dy))
    if mode is SteeringMode.SEEK:
        return _seek(enemy, dx, dy)
    return _wander(enemy, rng)


def steer_enemies(
    enemies: Iterable[Enemy],
    player: Player,
    rng: np.random.Generator,
) -> Tuple[Enemy, ...]:
    return tuple(steer(e, player, rng) for e in enemies)
