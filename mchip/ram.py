#!/usr/bin/env python3

"""
RAM Emulator

A flat 4KB bank addressed from 0x000 to 0xFFF.  The low 512 bytes are reserved
for the interpreter, and only hold the built-in font.  Programs are copied in
from 0x200 upwards.

Every access is bounds-checked.  The CPU masks all of its addresses to 12 bits,
so an out-of-range access here means the emulator itself has gone wrong rather
than the running program.
"""

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"

from .constants import MEM_SIZE, PROGRAM_START, MAX_PROGRAM_SIZE, FONT_START


class RAMError(Exception):
    pass


class MemoryOutOfRange(RAMError):
    def __init__(self, location):
        self.location = location
        super().__init__("Memory access out of range at 0x{:x}".format(location))


class ProgramTooLarge(RAMError):
    def __init__(self, size):
        self.size = size
        super().__init__(
            "Program is {} bytes, but only {} bytes are available from 0x{:03x}".format(
                size, MAX_PROGRAM_SIZE, PROGRAM_START
            )
        )


class RAM:
    def __init__(self, mem_size=MEM_SIZE):
        self.mem = memoryview(bytearray(mem_size))
        self.mem_top = mem_size - 1
        self.mem_size = mem_size

    def read(self, location):
        self.check_range(location)
        return self.mem[location]

    def read_block(self, location, size=1):
        self.check_range(location)
        self.check_range(location + size - 1)
        return self.mem[location:location + size]

    def write(self, location, byte):
        self.check_range(location)
        self.mem[location] = byte

    def write_block(self, location, block):
        block_top = location + len(block)
        self.check_range(location)
        self.check_range(block_top - 1)
        self.mem[location:block_top] = block

    def check_range(self, location):
        if location < 0 or location > self.mem_top:
            raise MemoryOutOfRange(location)

    def load_program(self, data):
        # Reject before writing anything, so a failed load leaves memory as it was
        if len(data) > MAX_PROGRAM_SIZE:
            raise ProgramTooLarge(len(data))

        if data:
            self.write_block(PROGRAM_START, data)

    def load_font(self, font):
        self.write_block(FONT_START, font)

    def clear(self):
        self.mem[:] = bytes(self.mem_size)
