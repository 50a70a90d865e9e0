#!/usr/bin/env python3

"""
Null Input Plugin

Serves as a base class for other Input plugins.  Can be used on its own if zero
input functionality is required.

Input plugins own the translation from host keys to the 16 logical keys, and
report every change to the Keypad.  The keymap is either a named layout
('qwerty' or 'colemak'), or 16 comma-separated key codes for keys 0-F.
"""

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"

from ..constants import KEYMAPS, NUM_KEYS


class InputsError(Exception):
    pass


def parse_keymap(keymap, force_lowercase=False):
    keymap_dict = {}
    keymap_split = KEYMAPS.get(keymap.lower(), keymap).split(",")

    if len(keymap_split) != NUM_KEYS:
        raise InputsError("Incorrect number of keys defined -- 16 required.  Use commas to split numbers")

    for key_num, key_defined in enumerate(keymap_split):
        try:
            key_defined_ord = int(key_defined)
        except ValueError:
            raise InputsError("Defined keys are not all integer values") from None

        if force_lowercase:
            # If we are working with characters rather than keyscan codes, we should convert to lowercase
            key_defined_ord = ord(chr(key_defined_ord).lower())

        if key_defined_ord in keymap_dict:
            raise InputsError("Duplicate keys defined")

        keymap_dict[key_defined_ord] = key_num

    return keymap_dict


class Inputs:
    def __init__(self, keymap, keypad, renderer, force_lowercase=False):
        self.keymap_dict = parse_keymap(keymap, force_lowercase)
        self.keypad = keypad
        self.renderer = renderer

    def process_messages(self):
        return False  # Don't exit the program

    def shutdown(self):
        pass
