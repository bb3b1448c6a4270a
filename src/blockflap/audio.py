"""
audio.py: Synthesized fire-and-forget sound effects.
"""

import array
import logging
import math
from typing import Dict, Optional

import pygame

from .constants import SAMPLE_RATE, SOUND_FLAP, SOUND_HIT

logger = logging.getLogger(__name__)


def square(t: float, freq: float) -> float:
    """Square wave oscillator."""
    return 1 if (t * freq) % 1 < 0.5 else -1


def flap_samples(sample_rate: int = SAMPLE_RATE) -> array.array:
    """Short rising chirp."""
    samples = array.array('h')
    for i in range(int(sample_rate * 0.08)):
        t = i / sample_rate
        freq = 440 + t * 4000
        env = max(0.0, 1 - t * 12)
        samples.append(int(square(t, freq) * env * 32767 * 0.3))
    return samples


def hit_samples(sample_rate: int = SAMPLE_RATE) -> array.array:
    """Descending thud."""
    samples = array.array('h')
    for i in range(int(sample_rate * 0.25)):
        t = i / sample_rate
        freq = 220 - t * 400
        env = max(0.0, 1 - t * 4)
        val = square(t, freq) * 0.3 + math.sin(2 * math.pi * 60 * t) * 0.3
        samples.append(int(val * env * 32767 * 0.6))
    return samples


class SoundBoard:
    """
    Plays named sounds without tracking them. The same sound may overlap
    itself; nothing is queued.
    """

    def __init__(self):
        self._initialized = False
        self._sounds: Dict[str, pygame.mixer.Sound] = {}

    @property
    def enabled(self) -> bool:
        return self._initialized

    def init(self, channels: int = 1) -> bool:
        """
        Initialize the mixer and synthesize the sounds.
        pygame.init() may already have opened the mixer with its defaults,
        so it is reopened with our settings.
        """
        try:
            pygame.mixer.quit()
            pygame.mixer.pre_init(SAMPLE_RATE, -16, channels, 512)
            pygame.mixer.init()
        except pygame.error as e:
            logger.warning("Audio disabled: %s", e)
            return False

        # Synthesize at whatever rate the device actually granted.
        rate = pygame.mixer.get_init()[0]
        self._sounds[SOUND_FLAP] = self._create_sound(flap_samples(rate))
        self._sounds[SOUND_HIT] = self._create_sound(hit_samples(rate))
        self._initialized = True
        logger.info("Audio initialized")
        return True

    def _create_sound(self, samples: array.array) -> pygame.mixer.Sound:
        """Wraps mono samples, duplicated per channel if the mixer opened in stereo."""
        channels = pygame.mixer.get_init()[2]
        if channels == 1:
            return pygame.mixer.Sound(buffer=samples)
        frames = array.array('h')
        for s in samples:
            frames.extend([s] * channels)
        return pygame.mixer.Sound(buffer=frames)

    def trigger(self, sound_id: str) -> Optional[pygame.mixer.Channel]:
        """Starts a sound and forgets it. Returns the channel it landed on, if any."""
        if not self._initialized:
            return None
        sound = self._sounds.get(sound_id)
        if sound is None:
            logger.warning("Sound not found: %s", sound_id)
            return None
        return sound.play()
