"""
Collision detection and the level changes it triggers
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Sequence

import numpy as np

from .config import MAX_LEVEL, RESTART_LEVEL
from .entities import Enemy, Goal, Player
from .level import generate_level
from .states import LevelTransition, PlayingState, TickResult, VictoryEvent
from .utils import aabb_overlap

log = logging.getLogger(__name__)


class Contact(Enum):
    NONE = "none"
    ENEMY = "enemy"
    GOAL = "goal"


def first_enemy_hit(player: Player, enemies: Sequence[Enemy]) -> Optional[int]:
    """Index of the first enemy (in iteration order) overlapping the player"""
    box = player.box
    for i, e in enumerate(enemies):
        if aabb_overlap(box, e.box):
            return i
    return None


def detect_contact(player: Player, enemies: Sequence[Enemy], goal: Goal) -> Contact:
    """Enemy contact wins over reaching the goal in the same tick"""
    if first_enemy_hit(player, enemies) is not None:
        return Contact.ENEMY
    if aabb_overlap(player.box, goal.box):
        return Contact.GOAL
    return Contact.NONE


def resolve_contacts(state: PlayingState, rng: np.random.Generator) -> TickResult:
    """
    Turn this tick's contacts into the session's next step.

    An enemy hit restarts at RESTART_LEVEL; the goal advances one level, or
    ends the game past MAX_LEVEL. The new level is generated immediately.
    """
    contact = detect_contact(state.player, state.enemies, state.goal)

    if contact is Contact.ENEMY:
        log.info("Hit on level %d, back to level %d", state.level, RESTART_LEVEL)
        fresh = PlayingState.from_level(generate_level(RESTART_LEVEL, rng))
        return LevelTransition(new_level=RESTART_LEVEL, state=fresh, cause="hit")

    if contact is Contact.GOAL:
        next_level = state.level + 1
        if next_level > MAX_LEVEL:
            log.info("Diamond taken on final level %d", state.level)
            return VictoryEvent(final_level=state.level)
        log.info("Diamond taken, advancing to level %d", next_level)
        fresh = PlayingState.from_level(generate_level(next_level, rng))
        return LevelTransition(new_level=next_level, state=fresh, cause="goal")

    return state
