"""
Tests for position integration, clamping and wall reflection.
"""

import math

import pytest

from game.bandit.config import ARENA_HEIGHT, ARENA_WIDTH, PLAYER_SPEED
from game.bandit.controls import InputSample
from game.bandit.entities import Player
from game.bandit.physics import move_enemy, move_player


class TestPlayerMovement:

    def test_no_intent_no_motion(self, player):
        assert move_player(player, InputSample(), 0.1) == player

    def test_opposing_intents_cancel(self, player):
        sample = InputSample(left=True, right=True, up=True, down=True)
        assert move_player(player, sample, 0.1) == player

    def test_straight_move(self, player):
        moved = move_player(player, InputSample(right=True), 0.1)
        assert moved.x == pytest.approx(player.x + PLAYER_SPEED * 0.1)
        assert moved.y == player.y

    def test_diagonal_is_normalized(self, player):
        moved = move_player(player, InputSample(up=True, right=True), 0.1)
        dist = math.hypot(moved.x - player.x, moved.y - player.y)
        assert dist == pytest.approx(PLAYER_SPEED * 0.1)
        assert moved.x > player.x and moved.y < player.y

    def test_clamped_at_top_left(self):
        corner = Player(x=0.0, y=0.0)
        moved = move_player(corner, InputSample(up=True, left=True), 0.5)
        assert (moved.x, moved.y) == (0.0, 0.0)

    def test_clamped_at_bottom_right(self):
        p = Player(x=ARENA_WIDTH - 25, y=ARENA_HEIGHT - 25)
        moved = move_player(p, InputSample(down=True, right=True), 1.0)
        assert moved.x == ARENA_WIDTH - p.size
        assert moved.y == ARENA_HEIGHT - p.size


class TestEnemyMovement:

    def test_integrates_velocity(self, enemy_factory):
        e = enemy_factory(x=100.0, y=100.0, vx=30.0, vy=-40.0)
        moved = move_enemy(e, 0.5)
        assert (moved.x, moved.y) == pytest.approx((115.0, 80.0))
        assert (moved.vx, moved.vy) == (30.0, -40.0)

    def test_reflects_off_left_wall(self, enemy_factory):
        e = enemy_factory(x=0.0, y=100.0, vx=-50.0, vy=0.0, speed=50.0)
        moved = move_enemy(e, 1 / 30)
        assert moved.vx == 50.0
        assert moved.x == 0.0

    def test_reflects_off_right_wall(self, enemy_factory):
        e = enemy_factory(x=ARENA_WIDTH - 21.0, y=100.0, vx=120.0, vy=0.0, speed=120.0)
        moved = move_enemy(e, 0.1)
        assert moved.vx == -120.0
        assert moved.x == ARENA_WIDTH - e.size

    def test_reflects_off_top_and_bottom(self, enemy_factory):
        top = move_enemy(enemy_factory(y=1.0, vx=0.0, vy=-100.0), 0.1)
        assert (top.y, top.vy) == (0.0, 100.0)

        e = enemy_factory(y=ARENA_HEIGHT - 21.0, vx=0.0, vy=100.0)
        bottom = move_enemy(e, 0.1)
        assert (bottom.y, bottom.vy) == (ARENA_HEIGHT - e.size, -100.0)

    def test_corner_reflects_each_axis(self, enemy_factory):
        e = enemy_factory(x=1.0, y=1.0, vx=-60.0, vy=-80.0)
        moved = move_enemy(e, 0.1)
        assert (moved.x, moved.y) == (0.0, 0.0)
        assert (moved.vx, moved.vy) == (60.0, 80.0)

    def test_reflection_keeps_speed(self, enemy_factory):
        e = enemy_factory(x=0.5, y=300.0, vx=-60.0, vy=80.0)
        moved = move_enemy(e, 0.1)
        assert math.hypot(moved.vx, moved.vy) == pytest.approx(100.0)

    def test_never_leaves_arena(self, enemy_factory):
        e = enemy_factory(x=10.0, y=10.0, vx=-700.0, vy=500.0, speed=math.hypot(700, 500))
        for _ in range(500):
            e = move_enemy(e, 0.033)
            assert 0.0 <= e.x <= ARENA_WIDTH - e.size
            assert 0.0 <= e.y <= ARENA_HEIGHT - e.size
