"""
Action System
=============
Validasi precondition serangan dan perhitungan damage.
"""

import math
from typing import Tuple

from arcade_brawl.config import (
    AttackKind, ATTACK_DATA, Side, DEFENCE_CHIP_DAMAGE
)
from arcade_brawl.fighters.fighter import Fighter
from arcade_brawl.combat.distance import in_reach, facing_toward


def round_half_up(value: float) -> int:
    """Pembulatan .5 ke atas (bukan banker's rounding)"""
    return int(math.floor(value + 0.5))


class AttackValidator:
    """
    Precondition serangan, dicek berurutan. Cooldown dicek di CombatEngine.
    """

    @staticmethod
    def can_hit(attacker: Fighter, defender: Fighter,
                kind: AttackKind) -> Tuple[bool, str]:
        """
        Cek apakah serangan kena.
        Return (can_hit, reason)
        """
        if not in_reach(attacker, defender, kind):
            return False, "Out of reach"

        if not facing_toward(attacker, defender):
            return False, "Not facing"

        if defender.is_airborne:
            return False, "Defender airborne"

        if defender.is_ducking and not ATTACK_DATA[kind].hits_ducking:
            return False, "Defender ducking"

        return True, "OK"


def calculate_damage(attacker: Fighter, defender: Fighter,
                     kind: AttackKind, difficulty: float = 1.0) -> int:
    """
    Damage yang akan diterapkan.
    Defender yang defence hanya kena chip damage.
    """
    if defender.is_defending:
        return DEFENCE_CHIP_DAMAGE

    damage = ATTACK_DATA[kind].base_damage
    if attacker.side == Side.CPU:
        return round_half_up(damage * difficulty)
    return damage
