#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from mchip import build_machine
from mchip.audio.a_null import Audio
from mchip.cpu import InvalidOpcode
from mchip.host import Host, HostError
from mchip.inputs.i_null import Inputs
from mchip.renderers.r_null import Renderer


class CountingRenderer(Renderer):
    def __init__(self):
        self.renders = 0
        self.title = None
        super().__init__()

    def render(self, framebuffer):
        self.renders += 1
        self.lit = framebuffer.pixel_at(0, 0)

    def set_title(self, title):
        self.title = title


class QuittingInputs(Inputs):
    # Quits on the given poll, pressing a key on the poll before
    def __init__(self, keypad, renderer, quit_after, press_key=None):
        super().__init__("qwerty", keypad, renderer)
        self.polls = 0
        self.quit_after = quit_after
        self.press_key = press_key

    def process_messages(self):
        self.polls += 1

        if self.press_key is not None and self.polls == self.quit_after - 1:
            self.keypad.set_key(self.press_key, True)

        return self.polls >= self.quit_after


class RecordingAudio(Audio):
    def __init__(self):
        super().__init__()
        self.history = []

    def enable_buzzer(self, enabled):
        self.history.append(enabled)
        super().enable_buzzer(enabled)


class TestHost(unittest.TestCase):
    def setUp(self):
        self.cpu = build_machine()
        self.renderer = CountingRenderer()
        self.audio = RecordingAudio()

    def _host(self, inputs, clock_speed=0):
        return Host(self.cpu, self.renderer, inputs, self.audio, clock_speed=clock_speed)

    def test_host_quit(self):
        self.cpu.ram.load_program(b"\x12\x00")
        inputs = QuittingInputs(self.cpu.keypad, self.renderer, 1)
        self._host(inputs).run()
        self.assertEqual(1, inputs.polls)
        self.assertEqual(0x200, self.cpu.registers.pc)
        self.assertEqual((64, 32), (self.renderer.width, self.renderer.height))
        self.assertTrue(self.renderer.title.startswith("MiniChip Emulator"))

    def test_host_runs_program_and_timers(self):
        # LD V0, 5 / LD DT, V0 / LD ST, V0 / JP self
        self.cpu.ram.load_program(b"\x60\x05\xF0\x15\xF0\x18\x12\x06")
        inputs = QuittingInputs(self.cpu.keypad, self.renderer, 4)
        self._host(inputs, clock_speed=None).run()
        self.assertEqual(0x206, self.cpu.registers.pc)
        self.assertLess(self.cpu.timers.dt, 5)
        self.assertIn(True, self.audio.history)
        self.assertFalse(self.audio.buzzer_enabled)  # Always silenced on exit

    def test_host_renders_changes(self):
        # Draw the top row of the '0' glyph, then loop
        self.cpu.ram.load_program(b"\xA0\x50\xD0\x01\x12\x04")
        inputs = QuittingInputs(self.cpu.keypad, self.renderer, 3)
        self._host(inputs).run()
        self.assertTrue(self.renderer.lit)
        self.assertFalse(self.cpu.framebuffer.changed)

    def test_host_key_wait(self):
        # LD V1, K / JP self
        self.cpu.ram.load_program(b"\xF1\x0A\x12\x02")
        inputs = QuittingInputs(self.cpu.keypad, self.renderer, 4, press_key=0xC)
        self._host(inputs).run()
        self.assertEqual(0xC, self.cpu.registers.v[1])
        self.assertEqual(0x202, self.cpu.registers.pc)

    def test_host_halt_raises(self):
        self.cpu.ram.load_program(b"\xFF\xFF")
        inputs = QuittingInputs(self.cpu.keypad, self.renderer, 1000)
        self.assertRaises(InvalidOpcode, self._host(inputs).run)
        self.assertTrue(self.cpu.is_halted())

    def test_host_timer_speed(self):
        inputs = QuittingInputs(self.cpu.keypad, self.renderer, 1)
        host = Host(self.cpu, self.renderer, inputs, self.audio, clock_speed=0, timer_speed=None)
        self.assertAlmostEqual(1.0 / 60, host.timer_interval)
        host = Host(self.cpu, self.renderer, inputs, self.audio, clock_speed=0, timer_speed=120)
        self.assertAlmostEqual(1.0 / 120, host.timer_interval)

    def test_host_rejects_non_positive_timer_speed(self):
        inputs = QuittingInputs(self.cpu.keypad, self.renderer, 1)

        for timer_speed in (0, -60, -0.5):
            self.assertRaises(
                HostError, Host, self.cpu, self.renderer, inputs, self.audio, clock_speed=0, timer_speed=timer_speed
            )
