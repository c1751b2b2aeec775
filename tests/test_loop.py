"""
Tests for the frame loop and keyboard state.
"""

import pytest

from game.bandit.config import MAX_FRAME_DT, PLAYER_SPEED
from game.bandit.controls import InputSample, InputState
from game.bandit.entities import Goal, Player
from game.bandit.loop import GameLoop
from game.bandit.machine import GameStateMachine
from game.bandit.states import AudioCue, MenuState, Phase, PlayingState, VictoryState
from game.bandit.utils import make_rng


class TestInputState:

    def test_sample_reflects_held_keys(self):
        keys = InputState()
        keys.press("w")
        keys.press("D")
        assert keys.sample() == InputSample(up=True, right=True)
        keys.release("w")
        assert keys.sample() == InputSample(right=True)

    def test_arrow_and_wasd_share_actions(self):
        keys = InputState()
        keys.press("left")
        keys.press("a")
        keys.release("left")
        assert keys.sample() == InputSample()

    def test_unknown_keys_are_ignored(self):
        keys = InputState()
        keys.press("q")
        keys.press("f12")
        keys.release("z")
        assert keys.sample() == InputSample()

    def test_direction(self):
        assert InputSample(up=True, left=True).direction() == (-1, -1)
        assert InputSample(left=True, right=True).direction() == (0, 0)


class TestGameLoop:

    def test_elapsed_is_clamped(self):
        loop = GameLoop(seed=0)
        loop.tick(5.0)
        assert loop.clock == pytest.approx(MAX_FRAME_DT)
        loop.tick(-1.0)
        assert loop.clock == pytest.approx(MAX_FRAME_DT)
        loop.tick(0.01)
        assert loop.clock == pytest.approx(MAX_FRAME_DT + 0.01)

    def test_menu_ticks_do_nothing(self):
        loop = GameLoop(seed=0)
        for _ in range(10):
            snap = loop.tick(0.016)
        assert snap.state == MenuState()
        assert snap.frame == 10

    def test_confirm_starts_once_per_press(self):
        cues = []
        loop = GameLoop(seed=0, on_cue=cues.append)
        loop.input.press("space")
        loop.tick(0.016)
        assert loop.machine.phase is Phase.PLAYING
        first = loop.machine.state

        # still held: no restart
        loop.tick(0.016)
        assert cues == [AudioCue.START]
        assert loop.machine.state.level == first.level

        loop.input.release("space")
        loop.tick(0.016)
        assert loop.machine.phase is Phase.PLAYING

    def test_victory_acknowledged_by_fresh_press(self):
        loop = GameLoop(seed=0)
        loop.machine.state = VictoryState()
        loop.input.press("enter")
        snap = loop.tick(0.016)
        assert snap.state == MenuState()

        # holding enter does not fall through into a new game
        snap = loop.tick(0.016)
        assert snap.state == MenuState()

    def test_snapshot_is_published(self):
        seen = []
        loop = GameLoop(seed=1)
        loop.subscribe(seen.append)
        loop.input.press("enter")
        loop.tick(0.02)
        loop.input.release("enter")
        loop.input.press("right")
        loop.tick(0.02)

        assert [s.frame for s in seen] == [1, 2]
        assert seen[-1] is loop.snapshot
        assert isinstance(seen[-1].state, PlayingState)
        assert seen[-1].clock == pytest.approx(0.04)

    def test_playing_moves_player(self):
        loop = GameLoop(seed=2)
        player = Player(x=400.0, y=300.0)
        loop.machine.state = PlayingState(level=1, player=player, goal=Goal(x=800.0, y=80.0), enemies=())
        loop.input.press("up")
        after = loop.tick(0.02).state

        assert isinstance(after, PlayingState)
        assert after.level == 1
        assert after.player.x == player.x
        assert after.player.y == pytest.approx(player.y - PLAYER_SPEED * 0.02)

    def test_cue_sink_attaches_to_given_machine(self):
        cues = []
        machine = GameStateMachine(rng=make_rng(0))
        loop = GameLoop(machine=machine, on_cue=cues.append)
        loop.input.press("space")
        loop.tick(0.016)
        assert loop.machine is machine
        assert cues == [AudioCue.START]

    def test_second_cue_sink_is_rejected(self):
        machine = GameStateMachine(rng=make_rng(0), on_cue=lambda cue: None)
        with pytest.raises(AssertionError):
            GameLoop(machine=machine, on_cue=lambda cue: None)
