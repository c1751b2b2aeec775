"""
Keyboard state shared between the host and the game loop
"""

from dataclasses import dataclass
from typing import Dict, Set, Tuple


@dataclass(frozen=True)
class InputSample:
    """Instantaneous input state, sampled once per tick"""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    confirm: bool = False

    def direction(self) -> Tuple[int, int]:
        """Sum of active directional intents; opposing keys cancel out"""
        dx = int(self.right) - int(self.left)
        dy = int(self.down) - int(self.up)
        return dx, dy


# key name -> InputSample field
KEY_BINDINGS: Dict[str, str] = {
    "w": "up",
    "up": "up",
    "s": "down",
    "down": "down",
    "a": "left",
    "left": "left",
    "d": "right",
    "right": "right",
    "space": "confirm",
    "enter": "confirm",
    "return": "confirm",
}


class InputState:
    """
    Set of currently held actions.

    The host writes key presses/releases between ticks; the loop reads a
    snapshot with `sample()`. Unbound keys are ignored.
    """

    def __init__(self):
        self._held: Set[str] = set()

    def press(self, key: str):
        action = KEY_BINDINGS.get(key.lower())
        if action is not None:
            self._held.add(action)

    def release(self, key: str):
        action = KEY_BINDINGS.get(key.lower())
        if action is not None:
            self._held.discard(action)

    def clear(self):
        self._held.clear()

    def sample(self) -> InputSample:
        return InputSample(**{action: True for action in self._held})
