"""
CPU Decision Policy
===================
Rule-based policy untuk CPU fighter, berbasis weighted random.
Semua fungsi di sini pure: hasil hanya bergantung pada observation dan
angka yang ditarik dari rng, jadi bisa di-test dengan random source palsu.
"""

from dataclasses import dataclass
from typing import Optional

from arcade_brawl.config import (
    FighterState,
    CPU_ATTACK_CHANCE, CPU_PUNCH_THRESHOLD, CPU_KICK_THRESHOLD,
    CPU_MAX_IDLE_TICKS, CPU_MOVE_CHANCE, CPU_EVADE_CHANCE,
    CPU_DUCK_VS_KICK_CHANCE, CPU_JUMP_VS_PUNCH_CHANCE, CPU_DEFENCE_CHANCE,
    CPU_REACTION_BASE_MS, CPU_REACTION_STEP_MS, CPU_REACTION_MIN_MS
)
from arcade_brawl.combat.distance import in_cpu_attack_range


@dataclass(frozen=True)
class CpuObservation:
    """Apa yang dilihat CPU pada satu tick"""
    cpu_state: FighterState
    player_last_action: FighterState
    distance: float
    difficulty: float = 1.0
    idle_ticks: int = 0
    attack_cooldown: bool = False


@dataclass(frozen=True)
class CpuDecision:
    """Decision dari policy"""
    action: Optional[FighterState] = None
    step: bool = False
    attack: bool = False     # from the in-range attack roll
    idle_ticks: int = 0
    reasoning: str = ""


def reaction_time_ms(difficulty: float) -> int:
    """Makin tinggi difficulty, makin cepat reaksi (min 200ms)"""
    reaction = CPU_REACTION_BASE_MS - (difficulty - 1) * CPU_REACTION_STEP_MS
    return int(max(reaction, CPU_REACTION_MIN_MS))


def decide_reaction(obs: CpuObservation, rng) -> CpuDecision:
    """
    Reaksi terhadap aksi terakhir player.
    Setiap cabang menarik angka sendiri; cabang pertama yang lolos menang.
    """
    if obs.cpu_state != FighterState.IDLE:
        return CpuDecision(idle_ticks=obs.idle_ticks, reasoning="Busy")

    last = obs.player_last_action

    if last == FighterState.KICK and rng.random() < CPU_DUCK_VS_KICK_CHANCE:
        return CpuDecision(action=FighterState.DUCK, reasoning="Duck under kick")

    if last == FighterState.PUNCH and rng.random() < CPU_JUMP_VS_PUNCH_CHANCE:
        return CpuDecision(action=FighterState.JUMP, reasoning="Jump over punch")

    if (last in (FighterState.PUNCH, FighterState.KICK)
            and rng.random() < CPU_DEFENCE_CHANCE):
        return CpuDecision(action=FighterState.DEFENCE, reasoning="Guard up")

    return CpuDecision(idle_ticks=obs.idle_ticks, reasoning="No reaction")


def decide_movement(obs: CpuObservation, rng) -> CpuDecision:
    """
    Decision untuk tick movement (tiap 200ms).
    Dekat dan tidak cooldown: kemungkinan menyerang. Selain itu mendekat,
    dengan sesekali duck/jump acak.
    """
    if obs.cpu_state != FighterState.IDLE:
        return CpuDecision(idle_ticks=obs.idle_ticks, reasoning="Busy")

    # Attack when close; one roll picks both whether and what
    if in_cpu_attack_range(obs.distance) and not obs.attack_cooldown:
        roll = rng.random()
        if roll < CPU_ATTACK_CHANCE:
            if roll < CPU_PUNCH_THRESHOLD:
                return CpuDecision(action=FighterState.PUNCH, attack=True,
                                   reasoning="Punch in range")
            if roll < CPU_KICK_THRESHOLD:
                return CpuDecision(action=FighterState.KICK, attack=True,
                                   reasoning="Kick in range")
            return CpuDecision(action=FighterState.DEFENCE, attack=True,
                               reasoning="Hold guard")

    idle_ticks = obs.idle_ticks + 1

    # Idle terlalu lama, paksa maju
    if idle_ticks > CPU_MAX_IDLE_TICKS:
        return CpuDecision(step=True, idle_ticks=0, reasoning="Forced approach")

    step = rng.random() < CPU_MOVE_CHANCE
    if step:
        idle_ticks = 0

    evade = None
    if rng.random() < CPU_EVADE_CHANCE:
        evade = FighterState.DUCK if rng.random() < 0.5 else FighterState.JUMP
        idle_ticks = 0

    if evade is not None:
        reasoning = f"Random {evade.value}"
    else:
        reasoning = "Approach" if step else "Wait"

    return CpuDecision(action=evade, step=step, idle_ticks=idle_ticks,
                       reasoning=reasoning)
