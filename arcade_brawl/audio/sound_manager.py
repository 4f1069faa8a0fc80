"""
Sound Manager
=============
Mengelola semua audio dalam game.
"""

import pygame
from typing import Dict, Optional, List
from enum import Enum

from arcade_brawl.config import (
    AUDIO_ENABLED, AUDIO_SAMPLE_RATE, AUDIO_CHANNELS,
    AUDIO_BUFFER_SIZE, MASTER_VOLUME, SFX_VOLUME
)
from arcade_brawl.audio.generator import ProceduralSFX, ACTION_SOUNDS
from arcade_brawl.combat.engine import HitEvent


class SoundChannel(Enum):
    """Channel untuk different sound types"""
    MASTER = "master"
    SFX = "sfx"
    UI = "ui"


class SoundManager:
    """
    Manager untuk semua audio dalam game.
    Menggunakan procedural sound generation.
    """

    def __init__(self, enabled: bool = AUDIO_ENABLED):
        self.enabled = enabled
        self.initialized = False

        # Volume settings
        self.volumes: Dict[SoundChannel, float] = {
            SoundChannel.MASTER: MASTER_VOLUME,
            SoundChannel.SFX: SFX_VOLUME,
            SoundChannel.UI: 0.7,
        }
        self.muted: Dict[SoundChannel, bool] = {
            channel: False for channel in SoundChannel
        }

        # Pygame channels
        self._channels: Dict[SoundChannel, List[pygame.mixer.Channel]] = {}
        self._channel_index: Dict[SoundChannel, int] = {}

        # Sound effects
        self._sfx: Optional[ProceduralSFX] = None

        if self.enabled:
            self._init_audio()

    def _init_audio(self):
        """Initialize pygame audio"""
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.pre_init(
                    frequency=AUDIO_SAMPLE_RATE,
                    size=-16,
                    channels=AUDIO_CHANNELS,
                    buffer=AUDIO_BUFFER_SIZE
                )
                pygame.mixer.init()

            pygame.mixer.set_num_channels(10)
            channel_allocation = {
                SoundChannel.SFX: 8,
                SoundChannel.UI: 2,
            }

            idx = 0
            for channel_type, count in channel_allocation.items():
                self._channels[channel_type] = []
                self._channel_index[channel_type] = 0
                for _ in range(count):
                    self._channels[channel_type].append(pygame.mixer.Channel(idx))
                    idx += 1

            self._sfx = ProceduralSFX()

            self.initialized = True
            print("[Audio] Sound manager initialized")

        except pygame.error as e:
            print(f"[Audio] Failed to initialize: {e}")
            self.enabled = False
            self.initialized = False

    def play(self, sound_name: str,
             channel_type: SoundChannel = SoundChannel.SFX,
             volume: float = 1.0) -> Optional[pygame.mixer.Channel]:
        """
        Play a sound effect.

        Args:
            sound_name: Nama sound dari ProceduralSFX
            channel_type: Tipe channel
            volume: Volume multiplier (0.0 - 1.0)

        Returns:
            Channel yang digunakan atau None
        """
        if not self.enabled or not self.initialized:
            return None

        if self._is_muted(channel_type):
            return None

        sound = self._sfx.get(sound_name)
        if not sound:
            return None

        channel = self._get_channel(channel_type)
        if not channel:
            return None

        sound.set_volume(self._calculate_volume(channel_type, volume))
        channel.play(sound)
        return channel

    def play_hit_event(self, event: HitEvent) -> Optional[pygame.mixer.Channel]:
        """Play sound untuk hit dari CombatEngine"""
        if event.is_blocked:
            return self.play_block()
        # Heavier hits play louder; jump kick (15) is full volume
        volume = 0.6 + 0.4 * min(event.damage / 15, 1.0)
        return self.play_hit(event.kind.value, volume)

    def play_hit(self, action_name: str,
                 volume: float = 0.8) -> Optional[pygame.mixer.Channel]:
        """Play impact sound untuk attack"""
        sound_name = ACTION_SOUNDS.get(action_name)
        if sound_name:
            return self.play(sound_name, SoundChannel.SFX, volume)
        return None

    def play_block(self) -> Optional[pygame.mixer.Channel]:
        """Play block sound"""
        return self.play('block', SoundChannel.SFX, 0.8)

    def play_ko(self) -> Optional[pygame.mixer.Channel]:
        """Play KO sound"""
        return self.play('ko', SoundChannel.SFX, 1.0)

    def play_ui(self, sound_name: str) -> Optional[pygame.mixer.Channel]:
        """Play UI sound"""
        return self.play(sound_name, SoundChannel.UI, 1.0)

    def pause(self):
        if self.initialized:
            pygame.mixer.pause()

    def unpause(self):
        if self.initialized:
            pygame.mixer.unpause()

    def toggle_mute(self) -> bool:
        """Toggle master mute, return new state"""
        self.muted[SoundChannel.MASTER] = not self.muted[SoundChannel.MASTER]
        return self.muted[SoundChannel.MASTER]

    def _get_channel(self, channel_type: SoundChannel) -> Optional[pygame.mixer.Channel]:
        """Get next available channel (round-robin)"""
        channels = self._channels.get(channel_type, [])
        if not channels:
            return None

        idx = self._channel_index.get(channel_type, 0)
        channel = channels[idx % len(channels)]
        self._channel_index[channel_type] = idx + 1
        return channel

    def _calculate_volume(self, channel_type: SoundChannel, volume: float) -> float:
        """Calculate final volume dengan master"""
        master = self.volumes.get(SoundChannel.MASTER, 1.0)
        channel_vol = self.volumes.get(channel_type, 1.0)
        return master * channel_vol * volume

    def _is_muted(self, channel_type: SoundChannel) -> bool:
        """Check if channel is muted"""
        if self.muted.get(SoundChannel.MASTER, False):
            return True
        return self.muted.get(channel_type, False)

    def cleanup(self):
        """Cleanup audio resources"""
        if self.initialized:
            pygame.mixer.stop()
            pygame.mixer.quit()
            self.initialized = False
            print("[Audio] Sound manager cleaned up")
