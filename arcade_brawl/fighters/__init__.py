"""
Fighter System Module
"""

from arcade_brawl.fighters.fighter import Fighter, FighterSnapshot
from arcade_brawl.fighters.stats import FighterStats
from arcade_brawl.fighters.hitbox import CollisionBox, collision_box
from arcade_brawl.fighters.movement import PositionResolver
from arcade_brawl.fighters.roster import ROSTER, FighterProfile, pick_opponent

__all__ = [
    'Fighter', 'FighterSnapshot', 'FighterStats',
    'CollisionBox', 'collision_box', 'PositionResolver',
    'ROSTER', 'FighterProfile', 'pick_opponent'
]
