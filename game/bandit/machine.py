"""
Game phase state machine: Menu -> Playing -> Victory -> Menu.

The transition functions are pure and return new states; GameStateMachine is
the only object that commits them.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

import numpy as np

from .collision import resolve_contacts
from .controls import InputSample
from .level import generate_level
from .physics import move_enemy, move_player
from .states import (
    AudioCue,
    LevelTransition,
    MenuState,
    PlayingState,
    SessionState,
    TickResult,
    VictoryEvent,
    VictoryState,
)
from .steering import steer_enemies
from .utils import make_rng

log = logging.getLogger(__name__)

CueSink = Callable[[AudioCue], None]


# ----------------------------
# Pure transitions
# ----------------------------

def start_game(rng: Optional[np.random.Generator] = None) -> PlayingState:
    return PlayingState.from_level(generate_level(1, rng))


def acknowledge_victory(state: VictoryState = VictoryState()) -> MenuState:
    """Victory -> Menu; acknowledging any other state is a caller error"""
    if not isinstance(state, VictoryState):
        raise ValueError(f"Can only acknowledge a victory, got phase {state.phase.value}")
    return MenuState()


def update(
    state: PlayingState,
    dt: float,
    sample: InputSample,
    rng: np.random.Generator,
) -> TickResult:
    """Advance a playing session by one tick: steer, integrate, resolve contacts"""
    enemies = steer_enemies(state.enemies, state.player, rng)
    player = move_player(state.player, sample, dt)
    enemies = tuple(move_enemy(e, dt) for e in enemies)

    moved = PlayingState(
        level=state.level,
        player=player,
        goal=state.goal,
        enemies=enemies,
    )
    return resolve_contacts(moved, rng)


# ----------------------------
# Committing machine
# ----------------------------

class GameStateMachine:
    """Holds the current session state and applies commands and ticks to it"""

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        on_cue: Optional[CueSink] = None,
    ):
        self.rng = rng if rng is not None else make_rng()
        self.on_cue = on_cue
        self.state: SessionState = MenuState()

    def _cue(self, cue: AudioCue):
        if self.on_cue is not None:
            self.on_cue(cue)

    @property
    def phase(self):
        return self.state.phase

    def start(self) -> bool:
        """Menu -> Playing(level 1). Returns False if not in the menu."""
        if not isinstance(self.state, MenuState):
            log.debug("Ignoring start in phase %s", self.state.phase.value)
            return False
        self.state = start_game(self.rng)
        log.info("Game started")
        self._cue(AudioCue.START)
        return True

    def acknowledge(self) -> bool:
        """Victory -> Menu. Returns False if the game was not won."""
        if not isinstance(self.state, VictoryState):
            log.debug("Ignoring acknowledge in phase %s", self.state.phase.value)
            return False
        self.state = acknowledge_victory(self.state)
        return True

    def confirm(self) -> bool:
        """The single confirm key: starts from the menu, dismisses the victory screen"""
        if isinstance(self.state, MenuState):
            return self.start()
        if isinstance(self.state, VictoryState):
            return self.acknowledge()
        return False

    def tick(self, dt: float, sample: InputSample) -> Optional[TickResult]:
        """Run one simulation step; a no-op outside Playing"""
        if not isinstance(self.state, PlayingState):
            return None

        result = update(self.state, dt, sample, self.rng)

        if isinstance(result, LevelTransition):
            self.state = result.state
            if result.cause == "hit":
                self._cue(AudioCue.HIT)
            else:
                self._cue(AudioCue.DIAMOND)
                self._cue(AudioCue.LEVEL_UP)
        elif isinstance(result, VictoryEvent):
            self.state = VictoryState()
            log.info("Victory after level %d", result.final_level)
            self._cue(AudioCue.DIAMOND)
            self._cue(AudioCue.VICTORY)
        else:
            self.state = result
        return result
