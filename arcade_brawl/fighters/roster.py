"""
Fighter Roster
==============
Identitas fighter yang bisa dipilih. Data murni: simulasi tidak pernah
membaca field di sini selain id.
"""

import random
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple


@dataclass(frozen=True)
class FighterProfile:
    """Identitas satu fighter"""
    id: str
    name: str
    description: str
    special_move: str
    color: Tuple[int, int, int]


ROSTER: Dict[str, FighterProfile] = {
    'iron-vega': FighterProfile(
        id='iron-vega',
        name="Iron Vega",
        description="Former dock worker with fists like anchors",
        special_move="Anchor Drop",
        color=(200, 80, 60),
    ),
    'nadia-storm': FighterProfile(
        id='nadia-storm',
        name="Nadia Storm",
        description="Street racer who never takes the long way round",
        special_move="Redline Rush",
        color=(70, 130, 220),
    ),
    'old-bram': FighterProfile(
        id='old-bram',
        name="Old Bram",
        description="Retired champion, slow to anger and slower to fall",
        special_move="Last Bell",
        color=(150, 120, 80),
    ),
    'kenji-ash': FighterProfile(
        id='kenji-ash',
        name="Kenji Ash",
        description="Quiet, precise, and always one step ahead",
        special_move="Ember Step",
        color=(90, 90, 90),
    ),
    'lucia-thorn': FighterProfile(
        id='lucia-thorn',
        name="Lucia Thorn",
        description="Rose gardener with a surprisingly heavy punch",
        special_move="Briar Hook",
        color=(180, 60, 140),
    ),
    'big-otto': FighterProfile(
        id='big-otto',
        name="Big Otto",
        description="Bouncer with an unbreakable guard",
        special_move="Closing Time",
        color=(60, 160, 90),
    ),
}

DEFAULT_PLAYER_ID = 'iron-vega'


def get_profile(fighter_id: str) -> FighterProfile:
    """Ambil profile; KeyError jika id tidak dikenal"""
    try:
        return ROSTER[fighter_id]
    except KeyError:
        raise KeyError(f"Unknown fighter id: {fighter_id!r}") from None


def list_fighter_ids() -> List[str]:
    return list(ROSTER.keys())


def pick_opponent(player_id: str, previous: Iterable[str] = (),
                  rng: random.Random = None) -> str:
    """
    Pilih lawan acak: bukan player sendiri dan belum pernah dihadapi.
    Jika semua sudah dihadapi, history diabaikan.
    """
    get_profile(player_id)
    rng = rng or random.Random()
    seen = set(previous)

    candidates = [fid for fid in ROSTER if fid != player_id]
    fresh = [fid for fid in candidates if fid not in seen]

    return rng.choice(fresh or candidates)
