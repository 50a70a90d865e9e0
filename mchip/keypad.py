#!/usr/bin/env python3

"""
Hex Keypad Latch

Holds the pressed state of the 16 logical keys.  Only the input plugins write
here, and only the CPU reads from here.
"""

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"

from .constants import NUM_KEYS


class KeypadError(Exception):
    pass


class Keypad:
    def __init__(self):
        self.keys = [False] * NUM_KEYS

    def _check_key(self, key):
        if not 0 <= key < NUM_KEYS:
            raise KeypadError("Key 0x{:x} is outside the 16-key keypad".format(key))

    def set_key(self, key, pressed):
        self._check_key(key)
        self.keys[key] = bool(pressed)

    def is_down(self, key):
        self._check_key(key)
        return self.keys[key]

    def any_down(self):
        # Lowest-numbered key wins if several are held
        for key, pressed in enumerate(self.keys):
            if pressed:
                return key

        return None

    def reset(self):
        self.keys = [False] * NUM_KEYS
