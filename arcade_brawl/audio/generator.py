"""
Sound Generator
===============
Procedural sound generation untuk fighting game.
Tidak perlu file audio eksternal.
"""

import pygame
import numpy as np
from typing import Dict, Optional
from dataclasses import dataclass
from enum import Enum

from arcade_brawl.config import AUDIO_SAMPLE_RATE, AUDIO_CHANNELS


class WaveType(Enum):
    """Jenis gelombang untuk sound synthesis"""
    SINE = "sine"
    SQUARE = "square"
    SAWTOOTH = "sawtooth"
    TRIANGLE = "triangle"
    NOISE = "noise"


@dataclass(frozen=True)
class SoundParams:
    """Parameter untuk sound generation"""
    frequency: float = 440.0
    duration: float = 0.2
    volume: float = 0.5
    wave_type: WaveType = WaveType.SINE

    # Envelope (ADSR)
    attack: float = 0.01
    decay: float = 0.05
    sustain: float = 0.7
    release: float = 0.1

    # Effects
    pitch_bend: float = 0.0  # Semitones per second
    vibrato_freq: float = 0.0
    vibrato_depth: float = 0.0
    noise_mix: float = 0.0


def generate_wave(phase: np.ndarray, wave_type: WaveType,
                  rng: np.random.Generator) -> np.ndarray:
    """Generate waveform"""
    if wave_type == WaveType.SINE:
        return np.sin(phase)

    elif wave_type == WaveType.SQUARE:
        return np.sign(np.sin(phase))

    elif wave_type == WaveType.SAWTOOTH:
        return 2 * (phase / (2 * np.pi) % 1) - 1

    elif wave_type == WaveType.TRIANGLE:
        return 2 * np.abs(2 * (phase / (2 * np.pi) % 1) - 1) - 1

    elif wave_type == WaveType.NOISE:
        return rng.uniform(-1, 1, len(phase)).astype(np.float32)

    return np.zeros_like(phase)


def generate_envelope(params: SoundParams, num_samples: int,
                      sample_rate: int = AUDIO_SAMPLE_RATE) -> np.ndarray:
    """Generate ADSR envelope"""
    envelope = np.zeros(num_samples, dtype=np.float32)

    attack_samples = int(params.attack * sample_rate)
    decay_samples = int(params.decay * sample_rate)
    release_samples = int(params.release * sample_rate)
    sustain_samples = num_samples - attack_samples - decay_samples - release_samples

    if sustain_samples < 0:
        # Adjust jika duration terlalu pendek
        total = attack_samples + decay_samples + release_samples
        ratio = num_samples / total if total > 0 else 1
        attack_samples = int(attack_samples * ratio)
        decay_samples = int(decay_samples * ratio)
        release_samples = num_samples - attack_samples - decay_samples
        sustain_samples = 0

    idx = 0

    # Attack
    if attack_samples > 0:
        envelope[idx:idx+attack_samples] = np.linspace(0, 1, attack_samples)
        idx += attack_samples

    # Decay
    if decay_samples > 0:
        envelope[idx:idx+decay_samples] = np.linspace(1, params.sustain, decay_samples)
        idx += decay_samples

    # Sustain
    if sustain_samples > 0:
        envelope[idx:idx+sustain_samples] = params.sustain
        idx += sustain_samples

    # Release
    if release_samples > 0 and idx < num_samples:
        start_val = envelope[idx-1] if idx > 0 else params.sustain
        envelope[idx:] = np.linspace(start_val, 0, num_samples - idx)

    return envelope


def synthesize(params: SoundParams, sample_rate: int = AUDIO_SAMPLE_RATE,
               rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Render params ke sample 16-bit mono.
    Tidak menyentuh mixer, jadi bisa dipakai tanpa audio device.
    """
    rng = rng or np.random.default_rng()

    num_samples = int(params.duration * sample_rate)
    t = np.linspace(0, params.duration, num_samples, dtype=np.float32)

    # Frequency with pitch bend
    freq = params.frequency
    if params.pitch_bend != 0:
        freq = freq * np.power(2, params.pitch_bend * t / 12)

    # Vibrato
    if params.vibrato_freq > 0 and params.vibrato_depth > 0:
        vibrato = params.vibrato_depth * np.sin(2 * np.pi * params.vibrato_freq * t)
        freq = freq * np.power(2, vibrato / 12)

    if isinstance(freq, np.ndarray):
        phase = np.cumsum(freq / sample_rate) * 2 * np.pi
    else:
        phase = 2 * np.pi * freq * t

    samples = generate_wave(phase, params.wave_type, rng)

    # Add noise
    if params.noise_mix > 0:
        noise = rng.uniform(-1, 1, num_samples).astype(np.float32)
        samples = samples * (1 - params.noise_mix) + noise * params.noise_mix

    samples = samples * generate_envelope(params, num_samples, sample_rate)
    samples = np.clip(samples * params.volume, -1, 1)

    return (samples * 32767).astype(np.int16)


class SoundGenerator:
    """
    Generator untuk procedural sound effects.
    """

    def __init__(self, sample_rate: int = AUDIO_SAMPLE_RATE):
        self.sample_rate = sample_rate
        self._cache: Dict[SoundParams, pygame.mixer.Sound] = {}

    def generate(self, params: SoundParams) -> pygame.mixer.Sound:
        """Generate sound dari parameters"""
        if params in self._cache:
            return self._cache[params]

        samples = synthesize(params, self.sample_rate)

        if AUDIO_CHANNELS == 2:
            stereo = np.ascontiguousarray(np.column_stack((samples, samples)))
            sound = pygame.sndarray.make_sound(stereo)
        else:
            sound = pygame.sndarray.make_sound(samples)

        self._cache[params] = sound
        return sound

    def clear_cache(self):
        """Clear sound cache"""
        self._cache.clear()


# Sound recipes
SFX_PARAMS: Dict[str, SoundParams] = {
    # Punch - quick, snappy
    'punch': SoundParams(
        frequency=200, duration=0.08, volume=0.4, wave_type=WaveType.NOISE,
        attack=0.001, decay=0.02, sustain=0.3, release=0.05, pitch_bend=-50
    ),
    # Kick - sharper, longer
    'kick': SoundParams(
        frequency=180, duration=0.14, volume=0.5, wave_type=WaveType.NOISE,
        attack=0.001, decay=0.04, sustain=0.4, release=0.09, pitch_bend=-50
    ),
    # Jump kick - thunderous
    'jump_kick': SoundParams(
        frequency=120, duration=0.2, volume=0.65, wave_type=WaveType.NOISE,
        attack=0.001, decay=0.05, sustain=0.5, release=0.13, pitch_bend=-40,
        noise_mix=0.4
    ),
    # Block - metallic clang
    'block': SoundParams(
        frequency=400, duration=0.1, volume=0.45, wave_type=WaveType.SQUARE,
        attack=0.001, decay=0.02, sustain=0.2, release=0.07, pitch_bend=-80
    ),
    # KO - falling tone
    'ko': SoundParams(
        frequency=220, duration=0.8, volume=0.6, wave_type=WaveType.SAWTOOTH,
        attack=0.01, decay=0.1, sustain=0.6, release=0.4, pitch_bend=-12,
        vibrato_freq=6, vibrato_depth=1
    ),
    'pause': SoundParams(
        frequency=660, duration=0.08, volume=0.3, wave_type=WaveType.TRIANGLE,
        attack=0.005, decay=0.02, sustain=0.5, release=0.04
    ),
}

# AttackKind value -> impact sound
ACTION_SOUNDS: Dict[str, str] = {
    'punch': 'punch',
    'kick': 'kick',
    'jumpKick': 'jump_kick',
}


class ProceduralSFX:
    """
    Pre-defined sound effects untuk fighting game.
    """

    def __init__(self):
        self.generator = SoundGenerator()
        self._sounds = {
            name: self.generator.generate(params)
            for name, params in SFX_PARAMS.items()
        }

    def get(self, name: str) -> Optional[pygame.mixer.Sound]:
        """Get sound by name"""
        return self._sounds.get(name)
