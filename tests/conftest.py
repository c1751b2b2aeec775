"""Shared fixtures for Diamond Bandit tests."""
import pytest

from game.bandit.config import EnemyKind
from game.bandit.entities import Enemy, Goal, Player, SteeringMode
from game.bandit.utils import make_rng


@pytest.fixture
def rng():
    """Seeded generator so every test run sees the same rolls."""
    return make_rng(1234)


@pytest.fixture
def enemy_factory():
    """Build enemies with sensible defaults; override any field by keyword."""
    def make(x=400.0, y=200.0, vx=100.0, vy=0.0, speed=100.0, size=20.0,
             detect_radius=150.0, can_seek=True, mode=SteeringMode.WANDER,
             kind=EnemyKind.SENTRY):
        return Enemy(
            x=x, y=y, vx=vx, vy=vy, speed=speed, size=size, kind=kind,
            color=(239, 68, 68), detect_radius=detect_radius,
            can_seek=can_seek, mode=mode,
        )
    return make


@pytest.fixture
def player():
    return Player(x=100.0, y=100.0)


@pytest.fixture
def far_goal():
    """A goal well away from the usual test positions."""
    return Goal(x=850.0, y=50.0)
