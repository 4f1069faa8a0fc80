"""Tests for the player and CPU controllers."""

import pytest

from arcade_brawl.config import FighterState, JumpDirection
from arcade_brawl.core.keys import KeyState, EdgeDetector
from arcade_brawl.core.player_controller import PlayerController
from arcade_brawl.ai.controller import AIController

from tests.helpers import ScriptedRandom


@pytest.fixture
def controller(player, cpu, scheduler, resolver, combat):
    return PlayerController(player, cpu, scheduler, resolver, combat)


def make_ai(cpu, player, scheduler, resolver, combat, values=(), default=None):
    return AIController(cpu, player, scheduler, resolver, combat,
                        difficulty=1.0, rng=ScriptedRandom(values, default))


class TestEdgeDetector:

    def test_press_fires_once(self):
        edges = EdgeDetector()
        edges.update(KeyState(punch=True))
        assert edges.pressed('punch')

        edges.update(KeyState(punch=True))
        assert not edges.pressed('punch')
        assert edges.is_held('punch')

    def test_release_edge(self):
        edges = EdgeDetector()
        edges.update(KeyState(down=True))
        edges.update(KeyState())
        assert edges.released('down')

    def test_held_names(self):
        assert KeyState(left=True, kick=True).held() == frozenset({'left', 'kick'})


class TestPlayerController:

    def test_tap_moves_and_walks(self, controller, player):
        controller.handle_input(KeyState(left=True))
        assert player.x == 200
        assert player.is_walking

    def test_release_stops_walking(self, controller, player):
        controller.handle_input(KeyState(left=True))
        controller.handle_input(KeyState())
        assert not player.is_walking

    def test_hold_tick_moves_ten(self, controller, player):
        controller.handle_input(KeyState(left=True))
        controller.hold_tick()
        controller.hold_tick()
        assert player.x == 180

    def test_tap_into_opponent_is_blocked(self, controller, player):
        controller.handle_input(KeyState(right=True))
        assert player.x == 220

    def test_attack_keys_are_edge_triggered(self, controller, player, cpu, scheduler):
        controller.handle_input(KeyState(punch=True))
        assert player.state == FighterState.PUNCH
        assert cpu.health == 95

        scheduler.advance(300)
        controller.handle_input(KeyState(punch=True))
        assert player.state == FighterState.IDLE

    def test_duck_is_held(self, controller, player, scheduler):
        controller.handle_input(KeyState(down=True))
        scheduler.advance(2000)
        controller.handle_input(KeyState(down=True))
        assert player.state == FighterState.DUCK

        controller.handle_input(KeyState())
        assert player.state == FighterState.IDLE

    def test_hold_tick_reapplies_duck(self, controller, player, scheduler):
        controller.handle_input(KeyState(punch=True))
        controller.handle_input(KeyState(punch=True, down=True))
        assert player.state == FighterState.PUNCH

        scheduler.advance(300)
        controller.hold_tick()
        assert player.state == FighterState.DUCK

    def test_directional_jump(self, controller, player):
        controller.handle_input(KeyState(left=True))
        controller.handle_input(KeyState(left=True, up=True))

        assert player.state == FighterState.JUMP
        assert player.jump_direction == JumpDirection.LEFT
        assert player.x == 150

    def test_jump_and_kick_on_one_sample(self, controller, player, cpu):
        controller.handle_input(KeyState(up=True, kick=True))

        assert player.state == FighterState.JUMP_KICK
        assert cpu.health == 85

    def test_no_walking_while_defending(self, controller, player):
        controller.handle_input(KeyState(defence=True))
        controller.handle_input(KeyState(defence=True, left=True))
        controller.hold_tick()

        assert player.state == FighterState.DEFENCE
        assert player.x == 220


class TestAIController:

    def test_attack_in_range(self, player, cpu, scheduler, resolver, combat):
        ai = make_ai(cpu, player, scheduler, resolver, combat, [0.1])
        ai.movement_tick()

        assert cpu.state == FighterState.PUNCH
        assert player.health == 95
        assert ai.attack_cooldown

    def test_attack_cooldown_outlasts_the_action(self, player, cpu, scheduler,
                                                 resolver, combat):
        ai = make_ai(cpu, player, scheduler, resolver, combat, [0.1])
        ai.movement_tick()

        # punch 300ms + 300ms lockout
        scheduler.advance(599)
        assert ai.attack_cooldown
        scheduler.advance(1)
        assert not ai.attack_cooldown

    def test_guard_roll_also_starts_cooldown(self, player, cpu, scheduler,
                                             resolver, combat):
        ai = make_ai(cpu, player, scheduler, resolver, combat, [0.55])
        ai.movement_tick()

        assert cpu.state == FighterState.DEFENCE
        scheduler.advance(999)
        assert ai.attack_cooldown
        scheduler.advance(1)
        assert not ai.attack_cooldown

    def test_busy_cpu_skips_movement(self, player, cpu, scheduler, resolver, combat):
        ai = make_ai(cpu, player, scheduler, resolver, combat)
        cpu.request_transition(FighterState.KICK, scheduler)
        ai.movement_tick()
        assert ai.decisions_made == 0

    def test_step_when_far(self, player, cpu, scheduler, resolver, combat):
        player.x = 150
        cpu.x = 350
        ai = make_ai(cpu, player, scheduler, resolver, combat, [0.1, 0.9])
        ai.movement_tick()

        assert cpu.x == 335
        assert cpu.is_walking

    def test_forced_step_into_opponent_is_blocked(self, player, cpu, scheduler,
                                                  resolver, combat):
        ai = make_ai(cpu, player, scheduler, resolver, combat, default=0.99)
        for _ in range(4):
            ai.movement_tick()

        assert ai.last_decision.reasoning == "Forced approach"
        assert ai.idle_ticks == 0
        assert cpu.x == 280
        assert not cpu.is_walking

    def test_reaction_waits_for_reaction_time(self, player, cpu, scheduler,
                                              resolver, combat):
        ai = make_ai(cpu, player, scheduler, resolver, combat, [0.1])
        player.request_transition(FighterState.KICK, scheduler)
        ai.reaction_tick()
        assert cpu.state == FighterState.IDLE

        scheduler.advance(500)
        player.request_transition(FighterState.KICK, scheduler)
        ai.reaction_tick()
        assert cpu.state == FighterState.DUCK

    def test_reaction_time_follows_difficulty(self, player, cpu, scheduler,
                                              resolver, combat):
        ai = AIController(cpu, player, scheduler, resolver, combat,
                          difficulty=2.0, rng=ScriptedRandom())
        assert ai.reaction_time == 400
