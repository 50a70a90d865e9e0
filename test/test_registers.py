#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from mchip.registers import Registers
from mchip.stack import Stack, StackOverflow


class TestRegisters(unittest.TestCase):
    def setUp(self):
        self.registers = Registers()

    def test_registers_init(self):
        self.assertEqual(bytes(16), self.registers.v.tobytes())
        self.assertEqual(0, self.registers.i)
        self.assertEqual(0x200, self.registers.pc)
        self.assertEqual(0, self.registers.stack.depth())

    def test_registers_set_v_wraps(self):
        self.registers.set_v(0x3, 0x1FF)
        self.assertEqual(0xFF, self.registers.v[0x3])
        self.registers.set_v(0x3, 0x100)
        self.assertEqual(0x00, self.registers.v[0x3])

    def test_registers_set_i_pc_mask(self):
        self.registers.set_i(0x1234)
        self.assertEqual(0x234, self.registers.i)
        self.registers.set_pc(0x1000)
        self.assertEqual(0x000, self.registers.pc)

    def test_registers_push_pop(self):
        self.registers.push(0x202)
        self.registers.push(0x304)
        self.assertEqual(0x304, self.registers.pop())
        self.assertEqual(0x202, self.registers.pop())

    def test_registers_shared_stack(self):
        registers = Registers(Stack(1))
        registers.push(0x202)
        self.assertRaises(StackOverflow, registers.push, 0x204)

    def test_registers_reset(self):
        self.registers.set_v(0xF, 1)
        self.registers.set_i(0x123)
        self.registers.set_pc(0x456)
        self.registers.push(0x202)
        self.registers.reset()
        self.assertEqual(bytes(16), self.registers.v.tobytes())
        self.assertEqual(0, self.registers.i)
        self.assertEqual(0x200, self.registers.pc)
        self.assertEqual(0, self.registers.stack.depth())
