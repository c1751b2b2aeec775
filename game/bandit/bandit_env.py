"""
DiamondBanditEnv - the Diamond Bandit engine behind the Gymnasium API
--------------------------------------------------------------------
- Pure engine underneath (level generation, steering, physics, collisions)
- 1 agent that steers with two 3-way intents (horizontal, vertical)
- Reward for taking diamonds, penalty for getting hit
- Vector observation: agent + goal + level + top-K nearest enemies
- Episode ends on victory (level 5 diamond) or after max_steps

Install:
    pip install gymnasium arcade numpy

Quick test:
    python -m game.bandit.bandit_env
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import ARENA_HEIGHT, ARENA_WIDTH, GOAL_COLOR, MAX_LEVEL, PLAYER_COLOR, theme_for_level
from .controls import InputSample
from .entities import SteeringMode
from .machine import start_game, update
from .states import LevelTransition, PlayingState, VictoryEvent, VictoryState
from .utils import clamp

DEFAULT_REWARDS = {
    "R_GOAL": 1.0,      # diamond taken
    "R_HIT": 1.0,       # penalty for touching an enemy
    "R_VICTORY": 5.0,   # final diamond
    "R_TIME": 0.001,    # per-step penalty
}


class DiamondBanditEnv(gym.Env):
    """Diamond Bandit as a single-agent Gymnasium environment"""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 30}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        dt: float = 1 / 30,
        max_steps: int = 3600,  # 2 minutes at 30 FPS
        k_enemies: int = 5,
        reward_config: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode: {render_mode}"
        assert dt > 0, "dt must be positive"
        assert k_enemies >= 0, "k_enemies must be non-negative"

        self.render_mode = render_mode
        self.dt = dt
        self.max_steps = max_steps
        self.k_enemies = k_enemies

        self.rewards = dict(DEFAULT_REWARDS)
        if reward_config:
            self.rewards.update({k: v for k, v in reward_config.items() if k in DEFAULT_REWARDS})

        # Action space:
        # horizontal: 0 none, 1 left, 2 right
        # vertical:   0 none, 1 up, 2 down
        self.action_space = spaces.MultiDiscrete([3, 3])

        # Observation space (vector)
        # Agent: pos(2)  Goal: rel pos(2)  Level(1)
        # Each enemy: rel pos(2) vel(2) seeking(1)
        obs_dim = 2 + 2 + 1 + (self.k_enemies * 5)
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None

        self.state: Optional[PlayingState] = None
        self.won = False
        self._step_count = 0
        self._events: Dict[str, float] = {}
        self._max_level_reached = 1
        self._hits = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        self._step_count = 0
        self._events = {}
        self._max_level_reached = 1
        self._hits = 0
        self.won = False
        self.state = start_game(self.np_random)

        obs = self._get_obs()
        info = self._get_info()
        return obs, info

    def step(self, action):
        assert self.state is not None, "Call reset() before step()"
        self._events = {"goal": 0.0, "hit": 0.0, "victory": 0.0}

        result = update(self.state, self.dt, self._action_to_input(action), self.np_random)

        if isinstance(result, LevelTransition):
            self.state = result.state
            self._events[result.cause] += 1.0
            if result.cause == "hit":
                self._hits += 1
            self._max_level_reached = max(self._max_level_reached, result.new_level)
        elif isinstance(result, VictoryEvent):
            # Keep the final layout around for observation/rendering
            self._events["goal"] += 1.0
            self._events["victory"] += 1.0
            self.won = True
        else:
            self.state = result

        reward = self._compute_reward()

        terminated = self.won
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Action / observation / reward / info
    # ----------------------------

    @staticmethod
    def _action_to_input(action) -> InputSample:
        horizontal, vertical = int(action[0]), int(action[1])
        return InputSample(
            left=horizontal == 1,
            right=horizontal == 2,
            up=vertical == 1,
            down=vertical == 2,
        )

    def _get_obs(self) -> np.ndarray:
        s = self.state
        px, py = s.player.center

        obs_parts = [
            (px / ARENA_WIDTH) * 2 - 1,
            (py / ARENA_HEIGHT) * 2 - 1,
            clamp((s.goal.x - px) / ARENA_WIDTH, -1, 1),
            clamp((s.goal.y - py) / ARENA_HEIGHT, -1, 1),
            ((s.level - 1) / max(1, MAX_LEVEL - 1)) * 2 - 1,
        ]

        # Enemies: top-K nearest to the player
        def dist2(e):
            ex, ey = e.center
            return (ex - px) ** 2 + (ey - py) ** 2

        enemies_sorted = sorted(s.enemies, key=dist2)
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                ex, ey = e.center
                top_speed = max(1e-6, e.speed)
                obs_parts += [
                    clamp((ex - px) / ARENA_WIDTH, -1, 1),
                    clamp((ey - py) / ARENA_HEIGHT, -1, 1),
                    clamp(e.vx / top_speed, -1, 1),
                    clamp(e.vy / top_speed, -1, 1),
                    1.0 if e.mode is SteeringMode.SEEK else -1.0,
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self) -> float:
        r = self.rewards
        reward = 0.0
        reward += r["R_GOAL"] * self._events.get("goal", 0.0)
        reward -= r["R_HIT"] * self._events.get("hit", 0.0)
        reward += r["R_VICTORY"] * self._events.get("victory", 0.0)
        reward -= r["R_TIME"]
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "level": self.state.level,
            "max_level": self._max_level_reached,
            "num_enemies": len(self.state.enemies),
            "num_seeking": sum(1 for e in self.state.enemies if e.mode is SteeringMode.SEEK),
            "won": self.won,
            "hit": self._events.get("hit", 0.0) > 0,
            "hits": self._hits,
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering
    # ----------------------------

    def view_state(self):
        """Session state a window should draw: the victory screen once won"""
        return VictoryState() if self.won else self.state

    def render(self):
        if self.render_mode is None:
            return None

        if self.render_mode == "rgb_array":
            return self._render_rgb_array()

        if self._window is None:
            # arcade opens a display on import of a window; keep it lazy
            from .window import ArenaWindow
            self._window = ArenaWindow(title="Diamond Bandit - Env")
        self._window.state = self.view_state()
        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def _render_rgb_array(self) -> np.ndarray:
        """Rasterize the AABBs (goal drawn as its collision box)"""
        s = self.state
        theme = theme_for_level(s.level)
        frame = np.empty((ARENA_HEIGHT, ARENA_WIDTH, 3), dtype=np.uint8)
        frame[:, :] = theme.background

        def fill(box, color):
            x0 = int(clamp(box.x, 0, ARENA_WIDTH))
            y0 = int(clamp(box.y, 0, ARENA_HEIGHT))
            x1 = int(clamp(box.x + box.w, 0, ARENA_WIDTH))
            y1 = int(clamp(box.y + box.h, 0, ARENA_HEIGHT))
            frame[y0:y1, x0:x1] = color

        fill(s.goal.box, GOAL_COLOR)
        for e in s.enemies:
            fill(e.box, e.color)
        fill(s.player.box, PLAYER_COLOR)
        return frame

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: int = 42):
    """Run a random episode for testing"""
    env = DiamondBanditEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.3f}  (max level {info['max_level']}, won={info['won']})")
    env.close()
    return total


if __name__ == "__main__":
    run_random_episode(render=True)
