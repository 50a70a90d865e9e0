#!/usr/bin/env python3

"""
PyGame Audio Plugin

The emulated machine only has a buzzer with an 'on' or 'off' status.  This
plays a looped 440Hz square wave through PyGame / SDL while the buzzer is on.
"""

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .a_null import Audio as AudioBase

PLAYBACK_FREQUENCY = 44100
TONE_FREQUENCY = 440
DEFAULT_VOLUME = 0.1


def square_wave(playback_frequency=PLAYBACK_FREQUENCY, tone_frequency=TONE_FREQUENCY):
    # One cycle of an unsigned 8-bit wave, high for the first half and low for the second
    period = max(2, playback_frequency // tone_frequency)
    high_samples = period // 2
    return bytes([0xFF] * high_samples + [0x00] * (period - high_samples))


class Audio(AudioBase):
    def __init__(self):
        super().__init__()
        pygame.mixer.pre_init(PLAYBACK_FREQUENCY, size=8, channels=1, allowedchanges=0)
        pygame.mixer.init()
        self.sound = pygame.mixer.Sound(buffer=square_wave())
        self.sound.set_volume(DEFAULT_VOLUME)

    def enable_buzzer(self, enabled):
        # If the buzzer is already in the requested state, leave the sample alone so it isn't restarted
        if enabled and not self.buzzer_enabled:
            self.sound.play(-1)
        elif not enabled and self.buzzer_enabled:
            self.sound.stop()

        super().enable_buzzer(enabled)

    def shutdown(self):
        self.sound.stop()
        pygame.mixer.quit()
        super().shutdown()
