"""
Combat Engine
=============
Main engine untuk resolusi serangan: precondition, damage, hit cooldown
global, dan deteksi knockout.
"""

from typing import Optional, Dict, Any, List, Callable
from dataclasses import dataclass, field

from arcade_brawl.config import (
    AttackKind, HitResult, Side, ATTACK_DATA,
    HIT_COOLDOWN_MS, DEBUG_HITS
)
from arcade_brawl.core.scheduler import Scheduler, TimerHandle
from arcade_brawl.fighters.fighter import Fighter
from arcade_brawl.combat.actions import AttackValidator, calculate_damage


@dataclass(frozen=True)
class HitOutcome:
    """Hasil satu resolve_attack"""
    result: HitResult
    damage: int = 0
    reason: str = ""

    @property
    def landed(self) -> bool:
        return self.result == HitResult.LANDED

    @property
    def blocked(self) -> bool:
        return self.result == HitResult.BLOCKED


MISS = HitOutcome(HitResult.NONE)


@dataclass
class HitEvent:
    """Event untuk hit yang terjadi"""
    attacker: Side
    kind: AttackKind
    damage: int
    is_blocked: bool
    defender_health: int
    timestamp: int


class HitCooldown:
    """
    Token global: hanya satu hit yang boleh diterapkan per window.
    Diambil secara sinkron, dilepas oleh event terjadwal.
    """

    def __init__(self, duration_ms: int = HIT_COOLDOWN_MS):
        self.duration_ms = duration_ms
        self._release: Optional[TimerHandle] = None

    @property
    def active(self) -> bool:
        return self._release is not None

    def try_acquire(self, scheduler: Scheduler) -> bool:
        if self.active:
            return False
        self._release = scheduler.call_later(
            self.duration_ms, self._on_release, name="hit-cooldown:release"
        )
        return True

    def _on_release(self):
        self._release = None


@dataclass
class CombatState:
    """State pertarungan saat ini"""
    hit_events: List[HitEvent] = field(default_factory=list)
    winner: Optional[Side] = None


class CombatEngine:
    """
    Engine utama untuk combat system.
    """

    def __init__(self, scheduler: Scheduler):
        self.scheduler = scheduler
        self.cooldown = HitCooldown()
        self.state = CombatState()

        # Callbacks
        self._on_hit_callbacks: List[Callable[[HitEvent], None]] = []
        self._on_knockout_callbacks: List[Callable[[Side], None]] = []

    def on_hit(self, callback: Callable[[HitEvent], None]):
        """Register callback untuk setiap hit yang diterapkan"""
        self._on_hit_callbacks.append(callback)

    def on_knockout(self, callback: Callable[[Side], None]):
        """Register callback untuk knockout (argumen: pemenang)"""
        self._on_knockout_callbacks.append(callback)

    def resolve_attack(self, attacker: Fighter, defender: Fighter,
                       kind: AttackKind, difficulty: float = 1.0) -> HitOutcome:
        """
        Resolve satu serangan yang baru dimulai.
        Serangan yang gagal precondition cukup jadi MISS.
        """
        if self.state.winner is not None:
            return MISS

        if self.cooldown.active:
            return HitOutcome(HitResult.NONE, reason="Cooldown")

        can_hit, reason = AttackValidator.can_hit(attacker, defender, kind)
        if not can_hit:
            return HitOutcome(HitResult.NONE, reason=reason)

        # Precondition lolos: ambil token sebelum mutasi apapun
        self.cooldown.try_acquire(self.scheduler)

        damage = calculate_damage(attacker, defender, kind, difficulty)
        blocked = defender.is_defending

        actual = defender.stats.take_damage(damage, blocked=blocked)
        attacker.stats.record_hit(actual)
        if not blocked:
            defender.flash_hit(self.scheduler)

        event = HitEvent(
            attacker=attacker.side,
            kind=kind,
            damage=actual,
            is_blocked=blocked,
            defender_health=defender.health,
            timestamp=self.scheduler.now
        )
        self.state.hit_events.append(event)

        if DEBUG_HITS:
            tag = "blocked" if blocked else "hit"
            print(f"[Combat] {attacker.side.value} {ATTACK_DATA[kind].name} "
                  f"{tag} for {actual} -> {defender.side.value} hp={defender.health}")

        for callback in self._on_hit_callbacks:
            callback(event)

        # Terminal check pakai health setelah mutasi
        if defender.health <= 0:
            self.state.winner = attacker.side
            for callback in self._on_knockout_callbacks:
                callback(attacker.side)

        result = HitResult.BLOCKED if blocked else HitResult.LANDED
        return HitOutcome(result, damage=actual)

    def get_stats(self) -> Dict[str, Any]:
        """Get combat statistics"""
        events = self.state.hit_events
        player_events = [e for e in events if e.attacker == Side.PLAYER]
        cpu_events = [e for e in events if e.attacker == Side.CPU]

        return {
            'total_hits': len(events),
            'player_hits': len(player_events),
            'cpu_hits': len(cpu_events),
            'player_damage': sum(e.damage for e in player_events),
            'cpu_damage': sum(e.damage for e in cpu_events),
            'blocked': len([e for e in events if e.is_blocked]),
            'time_elapsed': self.scheduler.now
        }
