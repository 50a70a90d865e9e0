#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from mchip.keypad import Keypad, KeypadError


class TestKeypad(unittest.TestCase):
    def setUp(self):
        self.keypad = Keypad()

    def test_keypad_init(self):
        for key in range(0x10):
            self.assertFalse(self.keypad.is_down(key))

        self.assertIsNone(self.keypad.any_down())

    def test_keypad_set_key(self):
        self.keypad.set_key(0xA, True)
        self.assertTrue(self.keypad.is_down(0xA))
        self.assertEqual(0xA, self.keypad.any_down())
        self.keypad.set_key(0xA, False)
        self.assertFalse(self.keypad.is_down(0xA))
        self.assertIsNone(self.keypad.any_down())

    def test_keypad_any_down_lowest(self):
        self.keypad.set_key(0xF, True)
        self.keypad.set_key(0x3, True)
        self.assertEqual(0x3, self.keypad.any_down())

    def test_keypad_out_of_range(self):
        self.assertRaises(KeypadError, self.keypad.set_key, 0x10, True)
        self.assertRaises(KeypadError, self.keypad.is_down, -1)

    def test_keypad_reset(self):
        self.keypad.set_key(0x0, True)
        self.keypad.reset()
        self.assertIsNone(self.keypad.any_down())
