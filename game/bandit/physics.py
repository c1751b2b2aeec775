"""
Position integration with arena clamping and wall reflection
"""

from __future__ import annotations

from dataclasses import replace

from .config import ARENA_HEIGHT, ARENA_WIDTH, PLAYER_SPEED
from .controls import InputSample
from .entities import Enemy, Player
from .utils import clamp, normalize


def move_player(player: Player, sample: InputSample, dt: float) -> Player:
    """Move the player along its normalized intent and keep it inside the arena"""
    dx, dy = sample.direction()
    # normalize diagonal; no intent means no motion
    nx, ny = normalize(dx, dy, fallback=(0.0, 0.0))

    return replace(
        player,
        x=clamp(player.x + nx * PLAYER_SPEED * dt, 0.0, ARENA_WIDTH - player.size),
        y=clamp(player.y + ny * PLAYER_SPEED * dt, 0.0, ARENA_HEIGHT - player.size),
    )


def _reflect(pos: float, vel: float, hi: float):
    # Velocity always ends up pointing back into the arena
    if pos < 0.0:
        return 0.0, abs(vel)
    if pos > hi:
        return hi, -abs(vel)
    return pos, vel


def move_enemy(enemy: Enemy, dt: float) -> Enemy:
    """Integrate one enemy and bounce it off the arena walls, one axis at a time"""
    x, vx = _reflect(enemy.x + enemy.vx * dt, enemy.vx, ARENA_WIDTH - enemy.size)
    y, vy = _reflect(enemy.y + enemy.vy * dt, enemy.vy, ARENA_HEIGHT - enemy.size)
    return replace(enemy, x=x, y=y, vx=vx, vy=vy)
