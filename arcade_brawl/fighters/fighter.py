"""
Fighter Class
=============
Combatant entity: state machine per fighter, health, posisi, dan facing.
"""

from dataclasses import dataclass
from typing import Optional

from arcade_brawl.config import (
    Side, FighterState, JumpDirection, AIRBORNE_STATES,
    STATE_DURATIONS_MS, CPU_DUCK_DURATION_MS, HIT_FLASH_MS,
    START_OFFSET, SCREEN_WIDTH
)
from arcade_brawl.core.scheduler import Scheduler, TimerHandle
from arcade_brawl.fighters.stats import FighterStats
from arcade_brawl.fighters.hitbox import (
    CollisionBox, collision_box, offset_to_center, center_to_offset
)


@dataclass(frozen=True)
class FighterSnapshot:
    """Read-only view untuk renderer, diambil tiap tick"""
    side: Side
    fighter_id: str
    position: float
    center_x: float
    state: FighterState
    facing_left: bool
    health: int
    is_hit: bool
    is_walking: bool
    jump_direction: JumpDirection


class Fighter:
    """
    Main fighter class.
    Tepat satu state aktif; setiap state non-idle punya batas waktu.
    """

    def __init__(self, fighter_id: str, side: Side,
                 viewport_width: float = SCREEN_WIDTH,
                 stats: Optional[FighterStats] = None):
        self.fighter_id = fighter_id
        self.side = side
        self.viewport_width = viewport_width

        # Core systems
        self.stats = stats or FighterStats()

        # Position (world center_x)
        self.x = offset_to_center(START_OFFSET, side, viewport_width)
        self.facing_left = side == Side.CPU  # Face opponent

        # State
        self.state = FighterState.IDLE
        self.state_generation = 0
        self.last_action = FighterState.IDLE
        self.jump_direction = JumpDirection.NONE

        # Visual flags
        self.is_hit = False
        self.is_walking = False
        self._hit_timer: Optional[TimerHandle] = None

        # CPU duck is timed, player duck is held
        self.timed_duck = side == Side.CPU

    # =========================================================================
    # STATE MACHINE
    # =========================================================================

    def request_transition(self, target: FighterState,
                           scheduler: Scheduler) -> bool:
        """
        Minta transisi state.
        Return True jika diterima; transisi yang ditolak diabaikan saja.
        """
        # Kick di udara -> jump kick, ikut timer jump yang sudah jalan
        if target in (FighterState.KICK, FighterState.JUMP_KICK):
            if self.state == FighterState.JUMP:
                self.state = FighterState.JUMP_KICK
                self.last_action = FighterState.JUMP_KICK
                return True
            if target == FighterState.JUMP_KICK:
                return False

        if target == FighterState.IDLE or self.state != FighterState.IDLE:
            return False

        self.state = target
        self.state_generation += 1
        self.last_action = target
        self.is_walking = False

        duration = self._duration_for(target)
        if duration is not None:
            generation = self.state_generation
            scheduler.call_later(
                duration,
                lambda: self._revert(generation),
                name=f"{self.side.value}:{target.value}:revert"
            )

        return True

    def release_duck(self) -> bool:
        """Lepas duck (player, level-triggered)"""
        if self.state != FighterState.DUCK:
            return False
        self._revert(self.state_generation)
        return True

    def _duration_for(self, state: FighterState) -> Optional[int]:
        if state == FighterState.DUCK:
            return CPU_DUCK_DURATION_MS if self.timed_duck else None
        return STATE_DURATIONS_MS.get(state)

    def _revert(self, generation: int):
        """Kembali ke idle, kecuali timer ini sudah basi"""
        if generation != self.state_generation:
            return
        if self.state == FighterState.IDLE:
            return

        self.state = FighterState.IDLE
        self.state_generation += 1
        self.jump_direction = JumpDirection.NONE
        self.last_action = FighterState.IDLE

    # =========================================================================
    # HIT FLAG
    # =========================================================================

    def flash_hit(self, scheduler: Scheduler):
        """Set hit flag, dibersihkan otomatis setelah HIT_FLASH_MS"""
        if self._hit_timer is not None:
            self._hit_timer.cancel()
        self.is_hit = True
        self._hit_timer = scheduler.call_later(
            HIT_FLASH_MS, self._clear_hit, name=f"{self.side.value}:hit-flash"
        )

    def _clear_hit(self):
        self.is_hit = False
        self._hit_timer = None

    # =========================================================================
    # POSITION
    # =========================================================================

    def face_toward(self, other_x: float):
        """Hadapkan fighter ke posisi lawan"""
        if other_x != self.x:
            self.facing_left = other_x < self.x

    def is_facing(self, other_x: float) -> bool:
        """Cek apakah fighter menghadap ke posisi lain"""
        if self.facing_left:
            return other_x < self.x
        return other_x > self.x

    @property
    def center_x(self) -> float:
        return self.x

    @property
    def position(self) -> float:
        """Home-edge offset"""
        return center_to_offset(self.x, self.side, self.viewport_width)

    @property
    def collision_box(self) -> CollisionBox:
        return collision_box(self.x, self.side)

    # Properties
    @property
    def health(self) -> int:
        return self.stats.health

    @property
    def is_airborne(self) -> bool:
        return self.state in AIRBORNE_STATES

    @property
    def is_idle(self) -> bool:
        return self.state == FighterState.IDLE

    @property
    def is_defending(self) -> bool:
        return self.state == FighterState.DEFENCE

    @property
    def is_ducking(self) -> bool:
        return self.state == FighterState.DUCK

    @property
    def is_alive(self) -> bool:
        return self.stats.is_alive

    def snapshot(self) -> FighterSnapshot:
        return FighterSnapshot(
            side=self.side,
            fighter_id=self.fighter_id,
            position=self.position,
            center_x=self.x,
            state=self.state,
            facing_left=self.facing_left,
            health=self.health,
            is_hit=self.is_hit,
            is_walking=self.is_walking,
            jump_direction=self.jump_direction,
        )

    def __repr__(self) -> str:
        return (f"Fighter({self.fighter_id!r}, {self.side.value}, "
                f"x={self.x:.0f}, {self.state.value}, hp={self.health})")
