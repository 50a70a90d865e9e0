#!/usr/bin/env python3

"""
Delay and Sound Timers

Both count down by one on every tick until they reach zero, where they stay.
The host calls tick() at a fixed rate (normally 60Hz), independent of how fast
instructions are executed.
"""

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"


class Timers:
    def __init__(self):
        self.dt = 0  # Delay timer
        self.st = 0  # Sound timer

    def reset(self):
        self.dt = 0
        self.st = 0

    def tick(self):
        if self.dt > 0:
            self.dt -= 1

        if self.st > 0:
            self.st -= 1

    def is_sound_active(self):
        return self.st > 0
