"""
Audio System
============
Sound manager dan procedural sound generation.
"""

from arcade_brawl.audio.sound_manager import SoundManager
from arcade_brawl.audio.generator import SoundGenerator, ProceduralSFX, synthesize

__all__ = [
    'SoundManager',
    'SoundGenerator',
    'ProceduralSFX',
    'synthesize',
]
