#!/usr/bin/env python3

"""
Register File

Sixteen 8-bit general purpose registers (V0 to Vf), the 12-bit index register
(I), the program counter (PC), and the call stack.

Vf is both a general purpose register and the flag register written by
arithmetic, shift, and draw instructions.
"""

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"

from .constants import ADDR_MASK, PROGRAM_START
from .stack import Stack


class Registers:
    def __init__(self, stack=None):
        # Bytearrays are mutable, and writing a value over 0xFF raises rather than silently truncating
        self.v = memoryview(bytearray(16))
        self.stack = Stack() if stack is None else stack
        self.i = 0
        self.pc = PROGRAM_START

    def reset(self):
        self.v[:] = bytes(16)
        self.stack.clear()
        self.i = 0
        self.pc = PROGRAM_START

    def set_v(self, reg, value):
        self.v[reg] = value & 0xFF

    def set_i(self, value):
        self.i = value & ADDR_MASK

    def set_pc(self, value):
        self.pc = value & ADDR_MASK

    def push(self, addr):
        self.stack.push(addr)

    def pop(self):
        return self.stack.pop()
