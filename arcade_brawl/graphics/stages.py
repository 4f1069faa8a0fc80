"""
Stage Definitions
=================
Background stage untuk pertarungan. Hanya dipakai renderer.
"""

import random
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class Stage:
    """Warna dan nama stage"""
    name: str
    sky_top: Color
    sky_bottom: Color
    floor: Color
    floor_line: Color


STAGES: Dict[str, Stage] = {
    'harbor': Stage(
        name="Night Harbor",
        sky_top=(15, 20, 45),
        sky_bottom=(50, 60, 100),
        floor=(45, 40, 38),
        floor_line=(90, 80, 70),
    ),
    'dojo': Stage(
        name="Old Dojo",
        sky_top=(70, 40, 25),
        sky_bottom=(140, 95, 55),
        floor=(110, 75, 45),
        floor_line=(160, 120, 80),
    ),
    'rooftop': Stage(
        name="Sunset Rooftop",
        sky_top=(120, 50, 90),
        sky_bottom=(240, 140, 80),
        floor=(60, 60, 65),
        floor_line=(110, 110, 120),
    ),
    'market': Stage(
        name="Street Market",
        sky_top=(80, 140, 200),
        sky_bottom=(170, 210, 235),
        floor=(95, 90, 85),
        floor_line=(140, 135, 125),
    ),
}


def pick_stage(rng: Optional[random.Random] = None) -> Stage:
    """Pilih stage acak"""
    rng = rng or random.Random()
    return STAGES[rng.choice(sorted(STAGES))]
