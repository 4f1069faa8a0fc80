"""Tests for attack preconditions, damage and the global hit cooldown."""

import pytest

from arcade_brawl.config import AttackKind, FighterState, HitResult, Side
from arcade_brawl.combat.actions import (
    AttackValidator, calculate_damage, round_half_up
)
from arcade_brawl.combat.distance import center_distance, in_reach


class TestPreconditions:
    """AttackValidator.can_hit, checked in order."""

    @pytest.mark.parametrize("kind,distance,expected", [
        (AttackKind.PUNCH, 139, True),
        (AttackKind.PUNCH, 140, False),
        (AttackKind.KICK, 169, True),
        (AttackKind.KICK, 170, False),
        (AttackKind.JUMP_KICK, 169, True),
    ])
    def test_reach_is_strict(self, player, cpu, kind, distance, expected):
        cpu.x = player.x + distance
        assert in_reach(player, cpu, kind) is expected
        assert center_distance(player, cpu) == distance

    def test_out_of_reach_reported_first(self, player, cpu):
        cpu.x = player.x + 200
        player.facing_left = True
        assert AttackValidator.can_hit(player, cpu, AttackKind.PUNCH) == (
            False, "Out of reach")

    def test_must_face_defender(self, player, cpu):
        player.facing_left = True
        assert AttackValidator.can_hit(player, cpu, AttackKind.PUNCH) == (
            False, "Not facing")

    @pytest.mark.parametrize("kind", list(AttackKind))
    def test_airborne_defender_is_never_hit(self, player, cpu, scheduler, kind):
        cpu.request_transition(FighterState.JUMP, scheduler)
        can_hit, reason = AttackValidator.can_hit(player, cpu, kind)
        assert not can_hit
        assert reason == "Defender airborne"

    @pytest.mark.parametrize("kind,expected", [
        (AttackKind.PUNCH, True),
        (AttackKind.KICK, False),
        (AttackKind.JUMP_KICK, True),
    ])
    def test_ducking_defender(self, player, cpu, scheduler, kind, expected):
        cpu.request_transition(FighterState.DUCK, scheduler)
        can_hit, _ = AttackValidator.can_hit(player, cpu, kind)
        assert can_hit is expected


class TestDamage:

    @pytest.mark.parametrize("kind,expected", [
        (AttackKind.PUNCH, 5),
        (AttackKind.KICK, 10),
        (AttackKind.JUMP_KICK, 15),
    ])
    def test_player_base_damage(self, player, cpu, kind, expected):
        assert calculate_damage(player, cpu, kind, difficulty=2.0) == expected

    @pytest.mark.parametrize("kind,difficulty,expected", [
        (AttackKind.PUNCH, 1.0, 5),
        (AttackKind.PUNCH, 1.2, 6),
        (AttackKind.PUNCH, 1.1, 6),      # 5.5 rounds up
        (AttackKind.KICK, 1.2, 12),
        (AttackKind.KICK, 1.4, 14),
        (AttackKind.KICK, 3.0, 30),
    ])
    def test_cpu_damage_scaled(self, player, cpu, kind, difficulty, expected):
        assert calculate_damage(cpu, player, kind, difficulty) == expected

    def test_defending_takes_chip_damage(self, player, cpu, scheduler):
        cpu.request_transition(FighterState.DEFENCE, scheduler)
        assert calculate_damage(player, cpu, AttackKind.KICK) == 1

    @pytest.mark.parametrize("value,expected", [
        (2.5, 3), (3.5, 4), (5.4999, 5), (0.0, 0),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestResolveAttack:
    """CombatEngine.resolve_attack end to end."""

    def test_landed_hit(self, player, cpu, combat, scheduler):
        player.request_transition(FighterState.PUNCH, scheduler)
        outcome = combat.resolve_attack(player, cpu, AttackKind.PUNCH)

        assert outcome.landed
        assert outcome.damage == 5
        assert cpu.health == 95
        assert cpu.is_hit
        assert combat.cooldown.active

    def test_blocked_hit_has_no_flash(self, player, cpu, combat, scheduler):
        cpu.request_transition(FighterState.DEFENCE, scheduler)
        outcome = combat.resolve_attack(player, cpu, AttackKind.KICK)

        assert outcome.result == HitResult.BLOCKED
        assert cpu.health == 99
        assert not cpu.is_hit
        assert cpu.stats.blocks_successful == 1

    def test_miss_does_not_take_cooldown(self, player, cpu, combat):
        player.facing_left = True
        outcome = combat.resolve_attack(player, cpu, AttackKind.PUNCH)

        assert outcome.result == HitResult.NONE
        assert outcome.reason == "Not facing"
        assert not combat.cooldown.active
        assert cpu.health == 100

    def test_cooldown_excludes_second_hit(self, player, cpu, combat, scheduler):
        combat.resolve_attack(player, cpu, AttackKind.PUNCH)
        outcome = combat.resolve_attack(cpu, player, AttackKind.PUNCH)

        assert outcome.reason == "Cooldown"
        assert player.health == 100

        scheduler.advance(499)
        assert combat.resolve_attack(cpu, player, AttackKind.PUNCH).reason == "Cooldown"

        scheduler.advance(1)
        assert combat.resolve_attack(cpu, player, AttackKind.PUNCH).landed
        assert player.health == 95

    def test_knockout_on_post_hit_health(self, player, cpu, combat):
        winners = []
        combat.on_knockout(winners.append)
        cpu.stats.health = 5

        outcome = combat.resolve_attack(player, cpu, AttackKind.KICK)

        assert outcome.damage == 5
        assert cpu.health == 0
        assert winners == [Side.PLAYER]
        assert combat.state.winner == Side.PLAYER

    def test_chip_damage_can_knock_out(self, player, cpu, combat, scheduler):
        winners = []
        combat.on_knockout(winners.append)
        cpu.stats.health = 1
        cpu.request_transition(FighterState.DEFENCE, scheduler)

        assert combat.resolve_attack(player, cpu, AttackKind.PUNCH).blocked
        assert winners == [Side.PLAYER]

    def test_nothing_resolves_after_knockout(self, player, cpu, combat, scheduler):
        cpu.stats.health = 1
        combat.resolve_attack(player, cpu, AttackKind.PUNCH)
        scheduler.advance(500)

        outcome = combat.resolve_attack(cpu, player, AttackKind.KICK)
        assert outcome.result == HitResult.NONE
        assert player.health == 100

    def test_hit_events_recorded(self, player, cpu, combat, scheduler):
        events = []
        combat.on_hit(events.append)

        combat.resolve_attack(cpu, player, AttackKind.KICK, difficulty=1.2)

        assert len(events) == 1
        event = events[0]
        assert event.attacker == Side.CPU
        assert event.damage == 12
        assert event.defender_health == 88
        assert not event.is_blocked
        assert combat.get_stats()['cpu_damage'] == 12
        assert cpu.stats.hits_landed == 1
