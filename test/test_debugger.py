#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"

import io
import unittest
from contextlib import redirect_stdout
from mchip import build_machine
from mchip.debugger import Debugger


class TestDebugger(unittest.TestCase):
    def setUp(self):
        self.debugger = Debugger()
        self.cpu = build_machine(self.debugger)

    def test_debugger_live_flag(self):
        self.assertFalse(self.debugger.is_live())
        self.debugger.set_live(True)
        self.assertTrue(self.debugger.is_live())

    def test_debugger_line(self):
        self.cpu.registers.v[0xF] = 0xAB
        self.cpu.registers.v[0x0] = 0x01
        self.cpu.registers.i = 0x123
        line = self.debugger.debug(self.cpu, "CLS")
        self.assertTrue(line.startswith("V: 0xab"))
        self.assertIn("01 I: 0x123", line)
        self.assertIn("PC: 0x200", line)
        self.assertTrue(line.endswith("IN: CLS"))
        self.assertNotIn("Stack", line)

    def test_debugger_verbose(self):
        self.cpu.registers.push(0x20A)
        report = self.debugger.debug(self.cpu, "???", verbose=True)
        self.assertIn("State: Running", report)
        self.assertIn("Stack: 0x20a", report)

    def test_debugger_verbose_waiting(self):
        self.cpu.ram.load_program(b"\xF5\x0A")
        self.cpu.step()
        report = self.debugger.debug(self.cpu, "???", verbose=True)
        self.assertIn("State: Waiting for key (V5)", report)
        self.assertIn("Stack: (Empty)", report)

    def test_debugger_live_trace(self):
        self.debugger.set_live(True)
        self.cpu.ram.load_program(b"\x63\x0A\x00\xE0")
        output = io.StringIO()

        with redirect_stdout(output):
            self.cpu.step()
            self.cpu.step()

        lines = output.getvalue().splitlines()
        self.assertEqual(2, len(lines))
        self.assertTrue(lines[0].endswith("OP: 0x630a IN: LD V3, 0x0a"))
        self.assertTrue(lines[1].endswith("IN: CLS"))
