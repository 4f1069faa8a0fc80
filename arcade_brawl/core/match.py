"""
Match
=====
One fight between the player and the CPU. Owns the scheduler, both
fighters and their controllers, and reports the result when a fighter's
health reaches zero.
"""

import random
from dataclasses import dataclass
from typing import Optional, List, Callable

from arcade_brawl.config import (
    Side, MatchPhase, SCREEN_WIDTH,
    HOLD_TICK_MS, CPU_MOVE_TICK_MS, HANDOFF_DELAY_MS
)
from arcade_brawl.core.keys import KeyState
from arcade_brawl.core.scheduler import Scheduler
from arcade_brawl.core.state_machine import StateMachine
from arcade_brawl.core.player_controller import PlayerController
from arcade_brawl.core.rounds import RoundContext, RoundResult
from arcade_brawl.fighters.fighter import Fighter, FighterSnapshot
from arcade_brawl.fighters.movement import PositionResolver
from arcade_brawl.combat.engine import CombatEngine
from arcade_brawl.ai.controller import AIController


@dataclass(frozen=True)
class MatchSnapshot:
    """Read-only view of a match for rendering"""
    time_ms: int
    player: FighterSnapshot
    cpu: FighterSnapshot
    paused: bool
    game_over: bool
    winner: Optional[Side]
    round_count: int
    difficulty: float


class Match:
    """
    Drives one fight on a simulated millisecond clock.

    Periodic tasks run in a fixed order each time they share an instant:
    player hold movement, CPU movement tick, CPU reaction tick.
    """

    def __init__(self, player_id: str, cpu_id: str,
                 context: Optional[RoundContext] = None,
                 viewport_width: float = SCREEN_WIDTH,
                 rng: Optional[random.Random] = None):
        self.context = context or RoundContext()
        self.scheduler = Scheduler()

        # Phase
        self.phase = StateMachine(MatchPhase.ACTIVE, final_states=(MatchPhase.GAME_OVER,))
        self.phase.register_handlers(
            MatchPhase.PAUSED,
            enter=self.scheduler.pause,
            exit_handler=self.scheduler.resume
        )
        self.phase.register_handlers(
            MatchPhase.GAME_OVER,
            enter=self._enter_game_over
        )

        # Fighters
        self.player = Fighter(player_id, Side.PLAYER, viewport_width)
        self.cpu = Fighter(cpu_id, Side.CPU, viewport_width)

        # Systems
        self.resolver = PositionResolver(viewport_width)
        self.combat = CombatEngine(self.scheduler)
        self.combat.on_knockout(self._on_knockout)

        self.player_controller = PlayerController(
            self.player, self.cpu, self.scheduler, self.resolver, self.combat
        )
        self.ai = AIController(
            self.cpu, self.player, self.scheduler, self.resolver, self.combat,
            difficulty=self.context.difficulty_multiplier,
            rng=rng
        )

        # Registration order is run order
        self.scheduler.add_periodic(
            'player-hold', HOLD_TICK_MS, self.player_controller.hold_tick
        )
        self.scheduler.add_periodic(
            'cpu-move', CPU_MOVE_TICK_MS, self.ai.movement_tick
        )
        self.scheduler.add_periodic(
            'cpu-react', self.ai.reaction_time, self.ai.reaction_tick
        )

        # Result
        self.winner: Optional[Side] = None
        self.result: Optional[RoundResult] = None
        self._handoff_remaining_ms: Optional[int] = None

        # Callbacks
        self._on_end_callbacks: List[Callable[[Side], None]] = []
        self._on_handoff_callbacks: List[Callable[[RoundResult], None]] = []

    # =========================================================================
    # BOUNDARY
    # =========================================================================

    def on_input(self, key_state: KeyState):
        """Feed the current keyboard state"""
        if not self.phase.is_state(MatchPhase.ACTIVE):
            return
        self.player_controller.handle_input(key_state)

    def tick(self, dt_ms: float):
        """Advance match time"""
        if self.phase.is_state(MatchPhase.ACTIVE):
            self.scheduler.advance(dt_ms)
        elif self.phase.is_state(MatchPhase.GAME_OVER):
            self._update_handoff(dt_ms)

    def step(self, key_state: KeyState, dt_ms: float):
        """
        One frame: input first, then time.
        A knockout caused by this input starts the handoff count next frame.
        """
        was_over = self.is_over
        self.on_input(key_state)
        if self.is_over and not was_over:
            return
        self.tick(dt_ms)

    def pause(self) -> bool:
        if not self.phase.is_state(MatchPhase.ACTIVE):
            return False
        return self.phase.transition_to(MatchPhase.PAUSED)

    def resume(self) -> bool:
        if not self.phase.is_state(MatchPhase.PAUSED):
            return False
        return self.phase.transition_to(MatchPhase.ACTIVE)

    def toggle_pause(self) -> bool:
        """Return True if the match is paused afterwards"""
        if self.is_paused:
            self.resume()
        else:
            self.pause()
        return self.is_paused

    def on_match_end(self, callback: Callable[[Side], None]):
        """Called once with the winner"""
        self._on_end_callbacks.append(callback)

    def on_round_handoff(self, callback: Callable[[RoundResult], None]):
        """Called once with the RoundResult, HANDOFF_DELAY_MS after the end"""
        self._on_handoff_callbacks.append(callback)

    # =========================================================================
    # END OF MATCH
    # =========================================================================

    def _on_knockout(self, winner: Side):
        self.winner = winner
        self.phase.transition_to(MatchPhase.GAME_OVER)

    def _enter_game_over(self):
        self.scheduler.stop()
        self.player.is_walking = False
        self.cpu.is_walking = False

        self.result = RoundResult(
            winner=self.winner,
            player_fighter_id=self.player.fighter_id,
            cpu_fighter_id=self.cpu.fighter_id,
            round_count=self.context.round_count,
            difficulty_multiplier=self.context.difficulty_multiplier,
            previous_opponents=self.context.previous_opponents,
            player_stats=self.player.stats.to_dict(),
            cpu_stats=self.cpu.stats.to_dict(),
        )
        self._handoff_remaining_ms = HANDOFF_DELAY_MS

        print(f"[Match] {self.winner.value} wins at t={self.scheduler.now}ms "
              f"(round {self.context.round_count})")

        for callback in self._on_end_callbacks:
            callback(self.winner)

    def _update_handoff(self, dt_ms: float):
        if self._handoff_remaining_ms is None:
            return

        self._handoff_remaining_ms -= dt_ms
        if self._handoff_remaining_ms > 0:
            return

        self._handoff_remaining_ms = None
        for callback in self._on_handoff_callbacks:
            callback(self.result)

    # =========================================================================
    # QUERIES
    # =========================================================================

    @property
    def is_paused(self) -> bool:
        return self.phase.is_state(MatchPhase.PAUSED)

    @property
    def is_over(self) -> bool:
        return self.phase.is_state(MatchPhase.GAME_OVER)

    @property
    def handoff_pending(self) -> bool:
        return self._handoff_remaining_ms is not None

    @property
    def elapsed_ms(self) -> int:
        return self.scheduler.now

    def snapshot(self) -> MatchSnapshot:
        return MatchSnapshot(
            time_ms=self.scheduler.now,
            player=self.player.snapshot(),
            cpu=self.cpu.snapshot(),
            paused=self.is_paused,
            game_over=self.is_over,
            winner=self.winner,
            round_count=self.context.round_count,
            difficulty=self.context.difficulty_multiplier,
        )
