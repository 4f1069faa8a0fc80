"""
Position Resolver
=================
Mengelola pergerakan fighter: clamping ke batas arena, blocking collision,
dan update facing setelah bergerak.
"""

from typing import Optional, Tuple

from arcade_brawl.config import (
    SCREEN_WIDTH, EDGE_MIN_OFFSET, EDGE_MAX_MARGIN
)
from arcade_brawl.fighters.fighter import Fighter
from arcade_brawl.fighters.hitbox import (
    collision_box, offset_to_center, center_to_offset
)


class PositionResolver:
    """
    Satu-satunya jalan untuk mengubah posisi fighter.
    """

    def __init__(self, viewport_width: float = SCREEN_WIDTH):
        self.viewport_width = viewport_width

    @property
    def offset_bounds(self) -> Tuple[float, float]:
        """Batas home-edge offset [min, max]"""
        return EDGE_MIN_OFFSET, self.viewport_width - EDGE_MAX_MARGIN

    def clamp(self, fighter: Fighter, center_x: float) -> float:
        """Clamp center_x ke batas arena (dihitung di offset space)"""
        min_offset, max_offset = self.offset_bounds
        offset = center_to_offset(center_x, fighter.side, self.viewport_width)
        offset = max(min_offset, min(max_offset, offset))
        return offset_to_center(offset, fighter.side, self.viewport_width)

    def is_blocked(self, mover: Fighter, opponent: Fighter,
                   new_x: float) -> bool:
        """
        Cek apakah posisi baru masuk ke collision box lawan.
        Fighter di udara tidak pernah di-block. Gerakan yang menjauh
        dari lawan selalu boleh, supaya fighter yang mendarat overlap
        bisa keluar lagi.
        """
        if mover.is_airborne:
            return False

        if abs(new_x - opponent.x) > abs(mover.x - opponent.x):
            return False

        new_box = collision_box(new_x, mover.side)
        return new_box.overlaps(opponent.collision_box)

    def try_move(self, mover: Fighter, opponent: Fighter,
                 delta: float) -> Optional[float]:
        """
        Geser mover sejauh delta (world x).
        Return center_x baru, atau None jika gerakan di-block/clamp habis.
        """
        new_x = self.clamp(mover, mover.x + delta)
        if new_x == mover.x:
            return None

        if self.is_blocked(mover, opponent, new_x):
            return None

        mover.x = new_x
        mover.face_toward(opponent.x)
        return new_x

    def step_toward(self, mover: Fighter, opponent: Fighter,
                    step: float) -> Optional[float]:
        """Melangkah sejauh step ke arah lawan"""
        direction = 1 if opponent.x > mover.x else -1
        return self.try_move(mover, opponent, direction * step)

    def update_facing(self, fighter: Fighter, opponent: Fighter):
        fighter.face_toward(opponent.x)
