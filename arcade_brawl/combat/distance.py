"""
Distance & Range System
======================
Jarak center-to-center dan pengecekan reach serangan.
"""

from arcade_brawl.config import ATTACK_DATA, AttackKind, CPU_ATTACK_RANGE
from arcade_brawl.fighters.fighter import Fighter


def center_distance(a: Fighter, b: Fighter) -> float:
    """Jarak horizontal antar center"""
    return abs(a.x - b.x)


def in_reach(attacker: Fighter, defender: Fighter, kind: AttackKind) -> bool:
    """Reach strict: jarak harus lebih kecil dari reach"""
    return center_distance(attacker, defender) < ATTACK_DATA[kind].reach


def facing_toward(attacker: Fighter, defender: Fighter) -> bool:
    """Cek apakah attacker menghadap defender"""
    return attacker.is_facing(defender.x)


def in_cpu_attack_range(distance: float) -> bool:
    """Zona di mana CPU mempertimbangkan menyerang"""
    return distance < CPU_ATTACK_RANGE
