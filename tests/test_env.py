"""
Tests for the Gymnasium environment wrapper (headless only).
"""

import numpy as np
import pytest

from game.bandit.bandit_env import DiamondBanditEnv
from game.bandit.config import ARENA_HEIGHT, ARENA_WIDTH, MAX_LEVEL
from game.bandit.entities import Goal, Player
from game.bandit.states import PlayingState, VictoryState


@pytest.fixture
def env():
    e = DiamondBanditEnv(max_steps=200)
    yield e
    e.close()


class TestDiamondBanditEnv:

    def test_reset_observation(self, env):
        obs, info = env.reset(seed=0)
        assert obs.shape == env.observation_space.shape
        assert obs.dtype == np.float32
        assert env.observation_space.contains(obs)
        assert info["level"] == 1

    def test_step_contract(self, env):
        env.reset(seed=0)
        obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
        assert env.observation_space.contains(obs)
        assert isinstance(reward, float)
        assert terminated is False
        assert info["step"] == 1

    def test_truncates_at_max_steps(self, env):
        env.reset(seed=0)
        # idle player on an empty board can never win or get hit
        env.state = PlayingState(level=1, player=Player(x=100.0, y=100.0),
                                 goal=Goal(x=800.0, y=80.0), enemies=())
        truncated = terminated = False
        steps = 0
        while not (terminated or truncated):
            _, _, terminated, truncated, _ = env.step(np.array([0, 0]))
            steps += 1
        assert truncated and not terminated
        assert steps == env.max_steps

    def test_victory_is_what_a_window_draws(self, env):
        env.reset(seed=0)
        assert env.view_state() is env.state
        env.state = PlayingState(level=MAX_LEVEL, player=Player(x=100.0, y=300.0),
                                 goal=Goal(x=137.0, y=310.0), enemies=())
        env.step(np.array([2, 0]))
        assert isinstance(env.view_state(), VictoryState)

    def test_hits_reported_in_info(self, env, enemy_factory):
        _, info = env.reset(seed=0)
        assert info["hits"] == 0 and not info["hit"]
        p = Player(x=300.0, y=300.0)
        enemy = enemy_factory(x=p.x, y=p.y, vx=0.0, vy=0.0, speed=0.0, can_seek=False)
        env.state = PlayingState(level=3, player=p, goal=Goal(x=800.0, y=80.0), enemies=(enemy,))
        _, _, _, _, info = env.step(np.array([0, 0]))
        assert info["hit"]
        assert info["hits"] == 1
        assert info["level"] == 1

    def test_seeded_reset_is_repeatable(self, env):
        obs_a, _ = env.reset(seed=21)
        obs_b, _ = env.reset(seed=21)
        np.testing.assert_array_equal(obs_a, obs_b)

    def test_goal_rewards_and_advances(self, env):
        env.reset(seed=0)
        player = Player(x=100.0, y=300.0)
        env.state = PlayingState(level=1, player=player, goal=Goal(x=137.0, y=310.0), enemies=())
        _, reward, terminated, _, info = env.step(np.array([2, 0]))
        assert info["level"] == 2
        assert info["max_level"] == 2
        assert reward == pytest.approx(1.0 - 0.001)
        assert not terminated

    def test_final_goal_terminates(self, env):
        env.reset(seed=0)
        player = Player(x=100.0, y=300.0)
        env.state = PlayingState(level=MAX_LEVEL, player=player, goal=Goal(x=137.0, y=310.0), enemies=())
        _, reward, terminated, _, info = env.step(np.array([2, 0]))
        assert terminated
        assert info["won"]
        assert reward == pytest.approx(1.0 + 5.0 - 0.001)

    def test_reward_config_override(self):
        env = DiamondBanditEnv(reward_config={"name": "x", "R_TIME": 0.5})
        env.reset(seed=0)
        env.state = PlayingState(level=1, player=Player(x=100.0, y=100.0),
                                 goal=Goal(x=800.0, y=80.0), enemies=())
        _, reward, _, _, _ = env.step(np.array([0, 0]))
        assert reward == pytest.approx(-0.5)

    def test_rgb_array(self):
        env = DiamondBanditEnv(render_mode="rgb_array")
        env.reset(seed=0)
        frame = env.render()
        assert frame.shape == (ARENA_HEIGHT, ARENA_WIDTH, 3)
        assert frame.dtype == np.uint8
        # the player square is painted
        p = env.state.player
        assert tuple(frame[int(p.y) + 5, int(p.x) + 5]) == (59, 130, 246)

    def test_bad_render_mode(self):
        with pytest.raises(AssertionError):
            DiamondBanditEnv(render_mode="ascii")
