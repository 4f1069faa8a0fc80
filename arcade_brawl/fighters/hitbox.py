"""
Collision Box & Coordinate System
=================================
Semua posisi disimpan dalam satu ruang koordinat dunia (x naik ke kanan).
Posisi "home-edge offset" (player diukur dari tepi kiri, CPU dari tepi
kanan) hanya dipakai di boundary: clamping dan snapshot untuk renderer.
"""

from dataclasses import dataclass

from arcade_brawl.config import (
    Side, FIGHTER_HALF_WIDTH,
    PLAYER_COLLISION_WIDTH, CPU_COLLISION_WIDTH
)


@dataclass(frozen=True)
class CollisionBox:
    """
    Rentang horizontal [left, right] dalam world coordinates.
    """
    left: float
    right: float

    @property
    def width(self) -> float:
        return self.right - self.left

    def overlaps(self, other: 'CollisionBox') -> bool:
        """Cek overlap; bersentuhan dihitung sebagai collision"""
        return self.left <= other.right and other.left <= self.right


def collision_width(side: Side) -> int:
    """Lebar collision box per sisi"""
    return PLAYER_COLLISION_WIDTH if side == Side.PLAYER else CPU_COLLISION_WIDTH


def offset_to_center(offset: float, side: Side, viewport_width: float) -> float:
    """Home-edge offset -> world center_x"""
    if side == Side.PLAYER:
        return offset + FIGHTER_HALF_WIDTH
    return viewport_width - offset - FIGHTER_HALF_WIDTH


def center_to_offset(center_x: float, side: Side, viewport_width: float) -> float:
    """World center_x -> home-edge offset"""
    if side == Side.PLAYER:
        return center_x - FIGHTER_HALF_WIDTH
    return viewport_width - center_x - FIGHTER_HALF_WIDTH


def collision_box(center_x: float, side: Side) -> CollisionBox:
    """
    Collision box menempel di sisi sprite yang paling dekat ke home edge.
    Player: mulai dari tepi kiri sprite. CPU: berakhir di tepi kanan sprite.
    """
    width = collision_width(side)
    if side == Side.PLAYER:
        left = center_x - FIGHTER_HALF_WIDTH
        return CollisionBox(left, left + width)
    right = center_x + FIGHTER_HALF_WIDTH
    return CollisionBox(right - width, right)
