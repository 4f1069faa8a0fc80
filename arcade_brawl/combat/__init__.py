"""
Combat System Module
"""

from arcade_brawl.combat.engine import (
    CombatEngine, HitCooldown, HitOutcome, HitEvent
)
from arcade_brawl.combat.actions import AttackValidator, calculate_damage
from arcade_brawl.combat.distance import center_distance, in_reach

__all__ = [
    'CombatEngine', 'HitCooldown', 'HitOutcome', 'HitEvent',
    'AttackValidator', 'calculate_damage',
    'center_distance', 'in_reach'
]
