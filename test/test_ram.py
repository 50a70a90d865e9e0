#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from mchip.constants import SYSTEM_FONT
from mchip.ram import RAM, RAMError, MemoryOutOfRange, ProgramTooLarge


class TestRAM(unittest.TestCase):
    def setUp(self):
        self.ram = RAM()

    def test_ram_init(self):
        self.assertEqual(0x1000, self.ram.mem_size)
        self.assertEqual(bytes(0x1000), self.ram.mem.tobytes())

    def test_ram_small(self):
        ram = RAM(5)
        self.assertEqual("0000000000", ram.mem.hex())

    def test_ram_write(self):
        ram = RAM(5)
        ram.write(1, 255)
        self.assertEqual("00ff000000", ram.mem.hex())
        self.assertEqual(255, ram.read(1))

    def test_ram_write_block(self):
        ram = RAM(5)
        ram.write_block(1, bytearray(b"\xFD\xFE"))
        ram.write_block(4, bytearray(b"\xFF"))
        self.assertEqual("00fdfe00ff", ram.mem.hex())
        self.assertEqual(b"\xFD\xFE", ram.read_block(1, 2).tobytes())

    def test_ram_byte_overflow(self):
        self.assertRaises(MemoryOutOfRange, self.ram.write, 0x1000, 255)
        self.assertRaises(MemoryOutOfRange, self.ram.read, 0x1000)
        self.assertRaises(MemoryOutOfRange, self.ram.read, -1)

    def test_ram_block_overflow(self):
        self.assertRaises(RAMError, self.ram.write_block, 0xFFF, bytearray(b"\xFE\xFF"))
        self.assertRaises(RAMError, self.ram.read_block, 0xFFF, 2)

    def test_ram_out_of_range_reports_location(self):
        with self.assertRaises(MemoryOutOfRange) as ctx:
            self.ram.read(0x1234)

        self.assertEqual(0x1234, ctx.exception.location)

    def test_ram_load_program_max_size(self):
        self.ram.load_program(b"\xAB" * 3584)
        self.assertEqual(0xAB, self.ram.read(0x200))
        self.assertEqual(0xAB, self.ram.read(0xFFF))

    def test_ram_load_program_too_large(self):
        with self.assertRaises(ProgramTooLarge) as ctx:
            self.ram.load_program(b"\xAB" * 3585)

        self.assertEqual(3585, ctx.exception.size)
        # Nothing should have been written
        self.assertEqual(0, self.ram.read(0x200))

    def test_ram_load_empty_program(self):
        self.ram.load_program(b"")
        self.assertEqual(bytes(0x1000), self.ram.mem.tobytes())

    def test_ram_load_font(self):
        self.ram.load_font(SYSTEM_FONT)
        self.assertEqual(SYSTEM_FONT, self.ram.read_block(0x50, 80).tobytes())
        self.assertEqual(0, self.ram.read(0x4F))
        self.assertEqual(0, self.ram.read(0xA0))

    def test_ram_clear(self):
        self.ram.write_block(1, bytearray(b"\xFD\xFE"))
        self.ram.clear()
        self.assertEqual(bytes(0x1000), self.ram.mem.tobytes())
