#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "MiniChip Emulator"
APP_VERSION = "1.0.0"
APP_COPYRIGHT = "Copyright (C) 2026 MiniChip Authors, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Memory layout
MEM_SIZE = 0x1000
ADDR_MASK = 0xFFF
PROGRAM_START = 0x200
MAX_PROGRAM_SIZE = MEM_SIZE - PROGRAM_START
FONT_START = 0x50
FONT_DIGIT_SIZE = 5

# Call stack depth
STACK_DEPTH = 16

# Display
VID_WIDTH = 64
VID_HEIGHT = 32

# Number of logical keys on the hex keypad
NUM_KEYS = 0x10

# Default host rates
DEFAULT_CLOCK_SPEED = 700  # Instructions per second
TIMER_FREQ = 60.0          # Delay/sound timer ticks per second
DISPLAY_FREQ = 60.0        # Display refreshes (and input polls) per second

# CPU states
STATE_RUNNING = 0
STATE_WAITING_FOR_KEY = 1
STATE_HALTED = 2

# Built-in hexadecimal font, 5 bytes for each of the digits 0-F
SYSTEM_FONT = bytes((
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80   # F
))

# Mappings for keys 0-F.  The PyGame keyscans and ASCII characters for these are the same code, so each layout works
# in both PyGame and Curses.
KEYMAPS = {
    "qwerty":  "120,49,50,51,113,119,101,97,115,100,122,99,52,114,102,118",  # x123 qwe asd zc 4rfv
    "colemak": "120,49,50,51,113,119,102,97,114,115,122,99,52,112,116,118"   # x123 qwf ars zc 4ptv
}
DEFAULT_KEYMAP = "qwerty"
