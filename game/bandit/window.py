"""
Arcade front end: draws session states and hosts the interactive game.

The engine works in a y-down coordinate system; arcade's origin is the
bottom-left corner, so every y is flipped on the way to the screen.
"""

from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional

import arcade

from .config import (
    ARENA_HEIGHT,
    ARENA_WIDTH,
    GOAL_COLOR,
    HUD_COLOR,
    PLAYER_COLOR,
    theme_for_level,
)
from .loop import GameLoop, Snapshot
from .states import AudioCue, MenuState, PlayingState, SessionState, VictoryState
from .utils import Box

MENU_BG = (10, 10, 10)
BORDER_COLOR = (39, 39, 42)

KEY_NAMES = {
    arcade.key.W: "w",
    arcade.key.A: "a",
    arcade.key.S: "s",
    arcade.key.D: "d",
    arcade.key.UP: "up",
    arcade.key.DOWN: "down",
    arcade.key.LEFT: "left",
    arcade.key.RIGHT: "right",
    arcade.key.SPACE: "space",
    arcade.key.ENTER: "enter",
}

CUE_SOUNDS = {
    AudioCue.START: ":resources:sounds/jump1.wav",
    AudioCue.DIAMOND: ":resources:sounds/coin1.wav",
    AudioCue.LEVEL_UP: ":resources:sounds/upgrade1.wav",
    AudioCue.HIT: ":resources:sounds/hurt1.wav",
    AudioCue.VICTORY: ":resources:sounds/secret2.wav",
}


def _draw_box(box: Box, color):
    arcade.draw_lrbt_rectangle_filled(
        box.x, box.x + box.w, ARENA_HEIGHT - (box.y + box.h), ARENA_HEIGHT - box.y, color
    )


def _draw_diamond(cx: float, cy: float, size: float, color):
    h = size / 2
    y = ARENA_HEIGHT - cy
    arcade.draw_polygon_filled([(cx, y + h), (cx + h, y), (cx, y - h), (cx - h, y)], color)


class ArenaWindow(arcade.Window):
    """Window that draws whatever session state it is given"""

    def __init__(self, title: str = "Diamond Bandit"):
        super().__init__(ARENA_WIDTH, ARENA_HEIGHT, title)
        self.state: Optional[SessionState] = MenuState()

    def on_draw(self):
        state = self.state
        if isinstance(state, PlayingState):
            self.clear(color=theme_for_level(state.level).background)
            self._draw_playing(state)
        else:
            self.clear(color=MENU_BG)
            if isinstance(state, VictoryState):
                self._draw_victory()
            else:
                self._draw_title()

        arcade.draw_lrbt_rectangle_outline(1, ARENA_WIDTH - 1, 1, ARENA_HEIGHT - 1, BORDER_COLOR, 2)

    def _draw_playing(self, state: PlayingState):
        theme = theme_for_level(state.level)
        arcade.draw_text(
            f"Diamond Bandit - Level {state.level}: {theme.name}",
            16, ARENA_HEIGHT - 30, HUD_COLOR, 16,
        )

        _draw_diamond(state.goal.x, state.goal.y, state.goal.size, GOAL_COLOR)
        _draw_box(state.player.box, PLAYER_COLOR)
        for e in state.enemies:
            _draw_box(e.box, e.color)

    def _draw_title(self):
        cx, cy = ARENA_WIDTH / 2, ARENA_HEIGHT / 2
        arcade.draw_text("Diamond Bandit", cx, cy + 40, HUD_COLOR, 44, anchor_x="center", bold=True)
        arcade.draw_text(
            "WASD to move. Avoid the guards. Touch the diamond to advance.",
            cx, cy, HUD_COLOR, 18, anchor_x="center",
        )
        arcade.draw_text("Press Space or Enter to start", cx, cy - 36, HUD_COLOR, 18, anchor_x="center")

    def _draw_victory(self):
        cx, cy = ARENA_WIDTH / 2, ARENA_HEIGHT / 2
        arcade.draw_text("You Won!", cx, cy + 24, HUD_COLOR, 44, anchor_x="center", bold=True)
        arcade.draw_text(
            "Press Space or Enter to return to menu", cx, cy - 16, HUD_COLOR, 18, anchor_x="center"
        )


class BanditWindow(ArenaWindow):
    """Interactive game: the window is tick source, keyboard and speaker"""

    def __init__(self, seed: Optional[int] = None, sound: bool = True):
        super().__init__()
        self._sounds: Dict[AudioCue, arcade.Sound] = {}
        if sound:
            self._sounds = {cue: arcade.load_sound(path) for cue, path in CUE_SOUNDS.items()}

        self.loop = GameLoop(seed=seed, on_cue=self.play_cue)
        self.loop.subscribe(self._on_snapshot)
        self.state = self.loop.snapshot.state

    def play_cue(self, cue: AudioCue):
        sound = self._sounds.get(cue)
        if sound is not None:
            arcade.play_sound(sound)

    def _on_snapshot(self, snapshot: Snapshot):
        self.state = snapshot.state

    def on_update(self, delta_time: float):
        self.loop.tick(delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.ESCAPE:
            self.close()
            return
        name = KEY_NAMES.get(symbol)
        if name is not None:
            self.loop.input.press(name)

    def on_key_release(self, symbol: int, modifiers: int):
        name = KEY_NAMES.get(symbol)
        if name is not None:
            self.loop.input.release(name)

    def on_deactivate(self):
        # Keys released while unfocused never reach us
        self.loop.input.clear()


def play(seed: Optional[int] = None, sound: bool = True):
    """Open the game window and run until it is closed"""
    BanditWindow(seed=seed, sound=sound)
    arcade.run()


def main():
    parser = argparse.ArgumentParser(description="Play Diamond Bandit")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for level layouts")
    parser.add_argument("--no-sound", action="store_true", help="Disable sound effects")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    play(seed=args.seed, sound=not args.no_sound)


if __name__ == "__main__":
    main()
