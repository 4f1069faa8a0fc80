"""Tests for position clamping, collision blocking and facing."""

import pytest

from arcade_brawl.config import FighterState, Side
from arcade_brawl.fighters.hitbox import CollisionBox, collision_box


class TestCollisionBox:

    def test_player_box_starts_at_left_sprite_edge(self):
        box = collision_box(220, Side.PLAYER)
        assert box == CollisionBox(150, 250)
        assert box.width == 100

    def test_cpu_box_ends_at_right_sprite_edge(self):
        box = collision_box(280, Side.CPU)
        assert box == CollisionBox(260, 350)
        assert box.width == 90

    def test_touching_counts_as_overlap(self):
        assert CollisionBox(0, 10).overlaps(CollisionBox(10, 20))
        assert not CollisionBox(0, 10).overlaps(CollisionBox(11, 20))


class TestClamp:

    def test_player_clamped_to_offset_bounds(self, player, resolver):
        # offset bounds for a 500 viewport are [50, 350]
        assert resolver.offset_bounds == (50, 350)
        assert resolver.clamp(player, 0) == 120
        assert resolver.clamp(player, 1000) == 420

    def test_cpu_clamped_in_its_own_offset_space(self, cpu, resolver):
        assert resolver.clamp(cpu, 1000) == 380
        assert resolver.clamp(cpu, 0) == 80

    def test_move_into_wall_is_a_no_op(self, player, cpu, resolver):
        player.x = 120
        assert resolver.try_move(player, cpu, -20) is None
        assert player.x == 120

    def test_partial_move_stops_at_wall(self, player, cpu, resolver):
        player.x = 130
        assert resolver.try_move(player, cpu, -20) == 120
        assert player.position == 50


class TestBlocking:

    def test_walk_into_opponent_is_blocked(self, player, cpu, resolver):
        # player box [150,250] vs cpu box [260,350]; +10 touches
        assert resolver.try_move(player, cpu, 10) is None
        assert player.x == 220

    def test_walk_short_of_opponent_is_allowed(self, player, cpu, resolver):
        assert resolver.try_move(player, cpu, 9) == 229

    def test_cpu_blocked_walking_toward_player(self, player, cpu, resolver):
        assert resolver.step_toward(cpu, player, 15) is None
        assert cpu.x == 280

    def test_airborne_mover_passes_through(self, player, cpu, resolver, scheduler):
        player.request_transition(FighterState.JUMP, scheduler)
        assert resolver.try_move(player, cpu, 50) == 270
        assert player.x == 270

    def test_separating_move_allowed_from_overlap(self, player, cpu, resolver):
        player.x = 270
        assert resolver.try_move(player, cpu, -10) == 260

    def test_deeper_move_blocked_from_overlap(self, player, cpu, resolver):
        player.x = 250
        assert resolver.try_move(player, cpu, 10) is None


class TestFacing:

    def test_crossing_flips_facing(self, player, cpu, resolver, scheduler):
        player.request_transition(FighterState.JUMP, scheduler)
        resolver.try_move(player, cpu, 100)

        assert player.x == 320
        assert player.facing_left
        assert player.is_facing(cpu.x)

    def test_equal_position_keeps_facing(self, player):
        player.face_toward(player.x)
        assert not player.facing_left

    @pytest.mark.parametrize("other_x,expected", [(100, True), (300, False)])
    def test_update_facing(self, player, cpu, resolver, other_x, expected):
        cpu.x = other_x
        resolver.update_facing(player, cpu)
        assert player.facing_left is expected
