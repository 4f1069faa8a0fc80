"""
Fighter Statistics System
=========================
Mengelola health dan statistik pertarungan fighter.
"""

from dataclasses import dataclass, field, asdict
from typing import Dict

from arcade_brawl.config import MAX_HEALTH


@dataclass
class FighterStats:
    """
    Health (integer 0..max_health) dan statistik untuk result screen.
    """
    max_health: int = MAX_HEALTH

    # Current values
    health: int = field(default=0, init=False)

    # Combat stats tracking
    total_damage_dealt: int = field(default=0, init=False)
    total_damage_taken: int = field(default=0, init=False)
    hits_landed: int = field(default=0, init=False)
    hits_taken: int = field(default=0, init=False)
    blocks_successful: int = field(default=0, init=False)

    def __post_init__(self):
        """Initialize health to max"""
        self.health = self.max_health

    def take_damage(self, damage: int, blocked: bool = False) -> int:
        """
        Terima damage dan return health yang benar-benar berkurang.
        Health tidak pernah di bawah 0.
        """
        actual_damage = max(0, min(int(damage), self.health))
        self.health -= actual_damage

        # Track stats
        self.total_damage_taken += actual_damage
        self.hits_taken += 1
        if blocked:
            self.blocks_successful += 1

        return actual_damage

    def record_hit(self, damage: int):
        """Record successful hit"""
        self.total_damage_dealt += damage
        self.hits_landed += 1

    @property
    def is_alive(self) -> bool:
        """Cek apakah fighter masih hidup"""
        return self.health > 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)
