"""
Session states and the events a tick can produce
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from .entities import Enemy, Goal, Player
from .level import LevelState


class Phase(Enum):
    MENU = "menu"
    PLAYING = "playing"
    VICTORY = "victory"


class AudioCue(Enum):
    START = "start"
    DIAMOND = "diamond"
    LEVEL_UP = "levelUp"
    HIT = "hit"
    VICTORY = "victory"


@dataclass(frozen=True)
class MenuState:
    phase: Phase = Phase.MENU


@dataclass(frozen=True)
class VictoryState:
    phase: Phase = Phase.VICTORY


@dataclass(frozen=True)
class PlayingState:
    level: int
    player: Player
    goal: Goal
    enemies: Tuple[Enemy, ...]
    phase: Phase = Phase.PLAYING

    @classmethod
    def from_level(cls, layout: LevelState) -> "PlayingState":
        return cls(
            level=layout.level,
            player=layout.player,
            goal=layout.goal,
            enemies=layout.enemies,
        )


@dataclass(frozen=True)
class LevelTransition:
    """The session moved to another level; `state` is its fresh layout"""
    new_level: int
    state: PlayingState
    cause: str  # "goal" or "hit"


@dataclass(frozen=True)
class VictoryEvent:
    """The goal of the final level was reached"""
    final_level: int


SessionState = Union[MenuState, PlayingState, VictoryState]
TickResult = Union[PlayingState, LevelTransition, VictoryEvent]
