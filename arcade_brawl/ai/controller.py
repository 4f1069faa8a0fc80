"""
AI Controller
=============
Menjalankan CPU policy di atas fighter: membangun observation, menerapkan
decision, dan mengelola attack cooldown serta idle ticks.
"""

import random
from typing import Optional, Dict, Any

from arcade_brawl.config import (
    FighterState, ATTACK_DATA, ATTACK_BY_STATE, STATE_DURATIONS_MS,
    CPU_DEFENCE_COOLDOWN_MS, CPU_STEP, DEBUG_AI_DECISIONS
)
from arcade_brawl.core.scheduler import Scheduler
from arcade_brawl.fighters.fighter import Fighter
from arcade_brawl.fighters.movement import PositionResolver
from arcade_brawl.combat.engine import CombatEngine
from arcade_brawl.combat.distance import center_distance
from arcade_brawl.ai.policy import (
    CpuObservation, CpuDecision, decide_movement, decide_reaction,
    reaction_time_ms
)


class AIController:
    """
    Controller utama untuk CPU fighter.
    """

    def __init__(self, fighter: Fighter, opponent: Fighter,
                 scheduler: Scheduler, resolver: PositionResolver,
                 combat: CombatEngine, difficulty: float = 1.0,
                 rng: Optional[random.Random] = None):
        self.fighter = fighter
        self.opponent = opponent
        self.scheduler = scheduler
        self.resolver = resolver
        self.combat = combat
        self.difficulty = difficulty
        self.rng = rng or random.Random()

        # State
        self.idle_ticks = 0
        self.attack_cooldown = False
        self._last_reaction_ms = 0

        # Stats
        self.decisions_made = 0
        self.last_decision: Optional[CpuDecision] = None

    @property
    def reaction_time(self) -> int:
        return reaction_time_ms(self.difficulty)

    def observe(self) -> CpuObservation:
        """Build observation untuk policy"""
        return CpuObservation(
            cpu_state=self.fighter.state,
            player_last_action=self.opponent.last_action,
            distance=center_distance(self.fighter, self.opponent),
            difficulty=self.difficulty,
            idle_ticks=self.idle_ticks,
            attack_cooldown=self.attack_cooldown,
        )

    # =========================================================================
    # TICKS
    # =========================================================================

    def movement_tick(self):
        """Periodic 200ms: menyerang, mendekat, atau evade acak"""
        if not self.fighter.is_idle:
            return

        self.resolver.update_facing(self.fighter, self.opponent)
        decision = decide_movement(self.observe(), self.rng)
        self._apply(decision)

    def reaction_tick(self):
        """Periodic: bereaksi ke aksi terakhir player"""
        now = self.scheduler.now
        if now - self._last_reaction_ms < self.reaction_time:
            return

        self.resolver.update_facing(self.fighter, self.opponent)
        self._last_reaction_ms = now

        if not self.fighter.is_idle:
            return

        decision = decide_reaction(self.observe(), self.rng)
        self._apply(decision)

    # =========================================================================
    # APPLY
    # =========================================================================

    def _apply(self, decision: CpuDecision):
        self.idle_ticks = decision.idle_ticks
        self.last_decision = decision
        self.decisions_made += 1

        if DEBUG_AI_DECISIONS and (decision.action or decision.step):
            print(f"[AI] t={self.scheduler.now} {decision.reasoning}")

        if decision.step:
            moved = self.resolver.step_toward(self.fighter, self.opponent, CPU_STEP)
            self.fighter.is_walking = moved is not None
        elif decision.action is None:
            self.fighter.is_walking = False

        if decision.action is not None:
            self._perform(decision.action, decision.attack)

    def _perform(self, action: FighterState, attack_roll: bool):
        """Masuk ke state action; serangan langsung di-resolve"""
        if not self.fighter.request_transition(action, self.scheduler):
            return

        kind = ATTACK_BY_STATE.get(action)
        if attack_roll:
            extra = (ATTACK_DATA[kind].cpu_cooldown_ms if kind is not None
                     else CPU_DEFENCE_COOLDOWN_MS)
            self._start_attack_cooldown(STATE_DURATIONS_MS[action] + extra)

        if kind is not None:
            self.combat.resolve_attack(
                self.fighter, self.opponent, kind, self.difficulty
            )

    def _start_attack_cooldown(self, duration_ms: int):
        self.attack_cooldown = True
        self.scheduler.call_later(
            duration_ms, self._clear_attack_cooldown, name="cpu:attack-cooldown"
        )

    def _clear_attack_cooldown(self):
        self.attack_cooldown = False

    def get_stats(self) -> Dict[str, Any]:
        """Get AI statistics"""
        return {
            'decisions_made': self.decisions_made,
            'idle_ticks': self.idle_ticks,
            'attack_cooldown': self.attack_cooldown,
            'reaction_time': self.reaction_time,
        }
