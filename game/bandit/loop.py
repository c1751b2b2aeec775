"""
Frame-driven game loop.

The host owns the tick source (a window's update callback, a test, a script)
and calls `GameLoop.tick(elapsed)` once per frame. Each tick is run to
completion and ends by publishing an immutable Snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from .config import MAX_FRAME_DT
from .controls import InputState
from .machine import CueSink, GameStateMachine
from .states import PlayingState, SessionState
from .utils import clamp, make_rng


@dataclass(frozen=True)
class Snapshot:
    """What a renderer sees between ticks"""
    state: SessionState
    clock: float  # seconds of simulated time, monotonic
    frame: int


class GameLoop:
    """Sequences input sampling, the state machine and publishing each frame"""

    def __init__(
        self,
        machine: Optional[GameStateMachine] = None,
        input_state: Optional[InputState] = None,
        seed: Optional[int] = None,
        on_cue: Optional[CueSink] = None,
        max_dt: float = MAX_FRAME_DT,
    ):
        assert max_dt > 0, "max_dt must be positive"
        if machine is None:
            machine = GameStateMachine(rng=make_rng(seed), on_cue=on_cue)
        elif on_cue is not None:
            assert machine.on_cue is None, "machine already has a cue sink"
            machine.on_cue = on_cue
        self.machine = machine
        self.input = input_state if input_state is not None else InputState()
        self.max_dt = max_dt

        self.clock = 0.0
        self.frame = 0
        self._confirm_held = False
        self._subscribers: List[Callable[[Snapshot], None]] = []
        self._snapshot = Snapshot(state=self.machine.state, clock=0.0, frame=0)

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    def subscribe(self, callback: Callable[[Snapshot], None]):
        self._subscribers.append(callback)

    def tick(self, elapsed: float) -> Snapshot:
        # Long stalls (hidden window, debugger) must not explode the physics
        dt = clamp(elapsed, 0.0, self.max_dt)
        self.clock += dt
        self.frame += 1

        sample = self.input.sample()

        # Confirm acts on the press, not while held
        if sample.confirm and not self._confirm_held:
            self.machine.confirm()
        self._confirm_held = sample.confirm

        if isinstance(self.machine.state, PlayingState):
            self.machine.tick(dt, sample)

        self._snapshot = Snapshot(state=self.machine.state, clock=self.clock, frame=self.frame)
        for callback in self._subscribers:
            callback(self._snapshot)
        return self._snapshot
