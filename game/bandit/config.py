"""
Static configuration for Diamond Bandit: arena constants, tuning values and
the per-level theme table
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

# ==============================================================================
# ARENA
# ==============================================================================

ARENA_WIDTH = 900   # 5:3 logical playfield
ARENA_HEIGHT = 540

PLAYER_SIZE = 20.0
PLAYER_SPEED = 280.0  # px/s
PLAYER_START = (40.0, ARENA_HEIGHT - 60.0)

GOAL_SIZE = 24.0

# ==============================================================================
# LEVEL GENERATION
# ==============================================================================

MAX_LEVEL = 5
RESTART_LEVEL = 1  # where an enemy hit sends the player
LEVEL_ENEMIES = (2, 3, 5, 7, 9)

GOAL_PADDING = 120.0
ENEMY_PADDING = 80.0
PLACEMENT_ATTEMPTS = 1000

ENEMY_SPEED_BASE = 110.0      # px/s
ENEMY_SPEED_PER_LEVEL = 18.0
ENEMY_SPEED_JITTER = 10.0
ENEMY_SIZE_GROWTH = 0.05      # fraction of theme size added per level

DETECT_RADIUS_BASE = 120.0
DETECT_RADIUS_PER_LEVEL = 30.0

# ==============================================================================
# STEERING
# ==============================================================================

SEEK_EXIT_FACTOR = 1.25       # leave seek only beyond radius * factor
WANDER_TURN_CHANCE = 0.02     # per tick
WANDER_TURN_STRENGTH = 0.5

# ==============================================================================
# LOOP
# ==============================================================================

MAX_FRAME_DT = 0.033  # seconds


class EnemyKind(Enum):
    SENTRY = "sentry"
    HOUND = "hound"
    DRONE = "drone"
    WRAITH = "wraith"
    GOLEM = "golem"


class EnemyCategory(Enum):
    """Behavioural family a kind belongs to; scales the chance to seek."""
    PATROLLER = "patroller"
    HUNTER = "hunter"


KIND_CATEGORY = {
    EnemyKind.SENTRY: EnemyCategory.PATROLLER,
    EnemyKind.HOUND: EnemyCategory.HUNTER,
    EnemyKind.DRONE: EnemyCategory.PATROLLER,
    EnemyKind.WRAITH: EnemyCategory.HUNTER,
    EnemyKind.GOLEM: EnemyCategory.PATROLLER,
}

CATEGORY_SEEK_WEIGHT = {
    EnemyCategory.PATROLLER: 0.6,
    EnemyCategory.HUNTER: 1.0,
}


@dataclass(frozen=True)
class Theme:
    """Gameplay and visual parameters shared by every enemy of a level"""
    name: str
    enemy_kind: EnemyKind
    enemy_color: Tuple[int, int, int]
    enemy_size: float
    speed_bonus: float
    seek_chance: float
    detect_scale: float = 1.0
    background: Tuple[int, int, int] = (10, 10, 10)


THEMES = (
    Theme("Vault", EnemyKind.SENTRY, (239, 68, 68), 20.0, 0.0, 0.4,
          background=(12, 12, 16)),
    Theme("Kennels", EnemyKind.HOUND, (249, 115, 22), 18.0, 10.0, 0.45,
          background=(20, 14, 10)),
    Theme("Server Room", EnemyKind.DRONE, (168, 85, 247), 16.0, 20.0, 0.7,
          background=(10, 12, 24)),
    Theme("Crypt", EnemyKind.WRAITH, (148, 163, 184), 22.0, 30.0, 0.6,
          background=(16, 16, 20)),
    # hardest theme trades a shorter sight range for raw speed and bulk
    Theme("Foundry", EnemyKind.GOLEM, (234, 179, 8), 26.0, 45.0, 0.9,
          detect_scale=0.75, background=(24, 10, 8)),
)

PLAYER_COLOR = (59, 130, 246)
GOAL_COLOR = (34, 197, 94)
HUD_COLOR = (229, 231, 235)


def _table_index(level: int, length: int) -> int:
    return min(max(level - 1, 0), length - 1)


def theme_for_level(level: int) -> Theme:
    """Theme of a level, clamped to the table's range"""
    return THEMES[_table_index(level, len(THEMES))]


def enemy_count(level: int) -> int:
    """Number of enemies spawned on a level, clamped to the table's range"""
    return LEVEL_ENEMIES[_table_index(level, len(LEVEL_ENEMIES))]


def seek_probability(theme: Theme) -> float:
    return theme.seek_chance * CATEGORY_SEEK_WEIGHT[KIND_CATEGORY[theme.enemy_kind]]
