#!/usr/bin/env python3

"""
CPU Emulator (original CHIP-8)

Like a real computer, this is where most of the processing happens.  Each call
to step() runs exactly one instruction, and each call to tick_timers() counts
the delay and sound timers down once.  The host decides how often to call
each of them, so nothing in here sleeps or looks at the clock.

The CPU is always in one of three states:
    * Running         - fetch, decode and execute on every step
    * Waiting for key - Fx0A is blocking, and the program counter stays put
                        until the keypad reports a key down
    * Halted          - a fatal error occurred.  Steps do nothing from now on
"""

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"

import logging
from random import randint
from .constants import (
    ADDR_MASK, FONT_START, FONT_DIGIT_SIZE, SYSTEM_FONT, STATE_RUNNING, STATE_WAITING_FOR_KEY, STATE_HALTED
)
from .decoder import DecodeError, decode, disassemble, disassemble_opcode
from .debugger import Debugger
from .ram import RAMError
from .stack import StackError

CPU_ENDIAN = "big"  # CHIP-8 is big-endian

logger = logging.getLogger(__name__)


class CPUError(Exception):
    pass


class InvalidOpcode(CPUError):
    def __init__(self, opcode, pc):
        self.opcode = opcode
        self.pc = pc
        super().__init__("Opcode 0x{:04x} at address 0x{:03x} is not a CHIP-8 instruction".format(opcode, pc))


class CPU:
    def __init__(self, ram, registers, framebuffer, keypad, timers, debugger=None):
        self.ram = ram
        self.registers = registers
        self.framebuffer = framebuffer
        self.keypad = keypad
        self.timers = timers
        self.debugger = Debugger() if debugger is None else debugger

        self.instructions = {
            "00E0": self._00E0,
            "00EE": self._00EE,
            "1nnn": self._1nnn,
            "2nnn": self._2nnn,
            "3xkk": self._3xkk,
            "4xkk": self._4xkk,
            "5xy0": self._5xy0,
            "6xkk": self._6xkk,
            "7xkk": self._7xkk,
            "8xy0": self._8xy0,
            "8xy1": self._8xy1,
            "8xy2": self._8xy2,
            "8xy3": self._8xy3,
            "8xy4": self._8xy4,
            "8xy5": self._8xy5,
            "8xy6": self._8xy6,
            "8xy7": self._8xy7,
            "8xyE": self._8xyE,
            "9xy0": self._9xy0,
            "Annn": self._Annn,
            "Bnnn": self._Bnnn,
            "Cxkk": self._Cxkk,
            "Dxyn": self._Dxyn,
            "Ex9E": self._Ex9E,
            "ExA1": self._ExA1,
            "Fx07": self._Fx07,
            "Fx0A": self._Fx0A,
            "Fx15": self._Fx15,
            "Fx18": self._Fx18,
            "Fx1E": self._Fx1E,
            "Fx29": self._Fx29,
            "Fx33": self._Fx33,
            "Fx55": self._Fx55,
            "Fx65": self._Fx65
        }

        self.reset()

    def reset(self):
        # Power-on state: zeroed memory with the font loaded, zeroed registers and timers, no keys, and a blank screen
        self.ram.clear()
        self.ram.load_font(SYSTEM_FONT)
        self.registers.reset()
        self.timers.reset()
        self.framebuffer.clear()
        self.keypad.reset()
        self.state = STATE_RUNNING
        self.key_register = None
        self.halt_reason = None
        self.opcode = 0
        self.debug_pc = self.registers.pc

    def step(self):
        if self.state == STATE_HALTED:
            return

        if self.state == STATE_WAITING_FOR_KEY:
            self._check_keypress()
            return

        # Keep track of the program counter before altering it in any way for debugging purposes
        self.debug_pc = self.registers.pc

        try:
            self.opcode = self.fetch()
            self.inc_pc()  # Program counter updates after fetch, but before execute
            self.decode_exec()
        except (CPUError, StackError, RAMError) as err:
            self.halt(err)
            raise

    def tick_timers(self):
        self.timers.tick()

    def halt(self, reason):
        self.state = STATE_HALTED
        self.halt_reason = reason
        logger.info("CPU halted at 0x%03x: %s", self.debug_pc, reason)

    def is_halted(self):
        return self.state == STATE_HALTED

    def fetch(self):
        pc = self.registers.pc
        return int.from_bytes(bytes((self.ram.read(pc), self.ram.read(pc + 1))), CPU_ENDIAN, signed=False)

    def decode_exec(self):
        try:
            instruction = decode(self.opcode)
        except DecodeError:
            raise InvalidOpcode(self.opcode, self.debug_pc) from None

        if self.debugger.is_live():
            self.debugger.output(self, disassemble(instruction))

        self.instructions[instruction.pattern](instruction)

    def inc_pc(self):
        self.registers.set_pc(self.registers.pc + 2)

    def dec_pc(self):
        # Only used to re-run an instruction (the keypress wait)
        self.registers.set_pc(self.registers.pc - 2)

    def crash_report(self):
        return self.debugger.debug(self, disassemble_opcode(self.opcode), verbose=True)

    def _check_keypress(self):
        key = self.keypad.any_down()

        if key is None:
            return

        logger.debug("Key 0x%x pressed while waiting, storing in V%01x", key, self.key_register)
        self.registers.set_v(self.key_register, key)
        self.key_register = None
        self.state = STATE_RUNNING
        self.inc_pc()

    def _skip(self):
        self.inc_pc()

    def _00E0(self, ins):  # CLS
        self.framebuffer.clear()

    def _00EE(self, ins):  # RET
        self.registers.set_pc(self.registers.pop())

    def _1nnn(self, ins):  # JP addr
        self.registers.set_pc(ins.nnn)

    def _2nnn(self, ins):  # CALL addr
        self.registers.push(self.registers.pc)
        self.registers.set_pc(ins.nnn)

    def _3xkk(self, ins):  # SE Vx, byte
        if self.registers.v[ins.x] == ins.kk:
            self._skip()

    def _4xkk(self, ins):  # SNE Vx, byte
        if self.registers.v[ins.x] != ins.kk:
            self._skip()

    def _5xy0(self, ins):  # SE Vx, Vy
        v = self.registers.v

        if v[ins.x] == v[ins.y]:
            self._skip()

    def _6xkk(self, ins):  # LD Vx, byte
        self.registers.v[ins.x] = ins.kk

    def _7xkk(self, ins):  # ADD Vx, byte
        # No carry flag for this one
        self.registers.set_v(ins.x, self.registers.v[ins.x] + ins.kk)

    def _8xy0(self, ins):  # LD Vx, Vy
        v = self.registers.v
        v[ins.x] = v[ins.y]

    def _8xy1(self, ins):  # OR Vx, Vy
        v = self.registers.v
        v[ins.x] |= v[ins.y]

    def _8xy2(self, ins):  # AND Vx, Vy
        v = self.registers.v
        v[ins.x] &= v[ins.y]

    def _8xy3(self, ins):  # XOR Vx, Vy
        v = self.registers.v
        v[ins.x] ^= v[ins.y]

    # Vf must be written last in the flag-setting instructions below.  Either operand may be Vf itself, so the result
    # is worked out from both operands first, then Vx is set, and the flag then overwrites Vf.

    def _8xy4(self, ins):  # ADD Vx, Vy
        v = self.registers.v
        val = v[ins.x] + v[ins.y]
        v[ins.x] = val & 0xFF
        v[0xF] = int(val > 0xFF)  # Vf is set when carrying

    def _post_8xy5_8xy7(self, ins, val):  # Post-SUB/SUBN
        v = self.registers.v
        v[ins.x] = val & 0xFF
        v[0xF] = int(val >= 0)  # Vf is set when NOT borrowing

    def _8xy5(self, ins):  # SUB Vx, Vy
        v = self.registers.v
        self._post_8xy5_8xy7(ins, v[ins.x] - v[ins.y])

    def _8xy6(self, ins):  # SHR Vx
        v = self.registers.v
        val = v[ins.x]
        v[ins.x] = val >> 1
        v[0xF] = val & 1

    def _8xy7(self, ins):  # SUBN Vx, Vy
        v = self.registers.v
        self._post_8xy5_8xy7(ins, v[ins.y] - v[ins.x])

    def _8xyE(self, ins):  # SHL Vx
        v = self.registers.v
        val = v[ins.x]
        v[ins.x] = (val << 1) & 0xFF
        v[0xF] = val >> 7

    def _9xy0(self, ins):  # SNE Vx, Vy
        v = self.registers.v

        if v[ins.x] != v[ins.y]:
            self._skip()

    def _Annn(self, ins):  # LD I, addr
        self.registers.set_i(ins.nnn)

    def _Bnnn(self, ins):  # JP V0, addr
        self.registers.set_pc(self.registers.v[0] + ins.nnn)

    def _Cxkk(self, ins):  # RND Vx, byte
        # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
        self.registers.v[ins.x] = randint(0, 0xFF) & ins.kk

    def _Dxyn(self, ins):  # DRW Vx, Vy, nibble
        regs = self.registers
        i = regs.i
        sprite = bytes(self.ram.read((i + row) & ADDR_MASK) for row in range(ins.n))
        collided = self.framebuffer.draw_sprite(regs.v[ins.x], regs.v[ins.y], sprite)
        regs.v[0xF] = int(collided)

    def _Ex9E(self, ins):  # SKP Vx
        if self.keypad.is_down(self.registers.v[ins.x] & 0xF):
            self._skip()

    def _ExA1(self, ins):  # SKNP Vx
        if not self.keypad.is_down(self.registers.v[ins.x] & 0xF):
            self._skip()

    def _Fx07(self, ins):  # LD Vx, DT
        self.registers.v[ins.x] = self.timers.dt

    def _Fx0A(self, ins):  # LD Vx, K
        # The timers and display still have to keep going while waiting, so rather than blocking here, wind the program
        # counter back onto this instruction and let step() poll the keypad until something is pressed.
        self.dec_pc()
        self.key_register = ins.x
        self.state = STATE_WAITING_FOR_KEY

    def _Fx15(self, ins):  # LD DT, Vx
        self.timers.dt = self.registers.v[ins.x]

    def _Fx18(self, ins):  # LD ST, Vx
        self.timers.st = self.registers.v[ins.x]

    def _Fx1E(self, ins):  # ADD I, Vx
        # Vf is left alone on overflow, as on the COSMAC VIP
        regs = self.registers
        regs.set_i(regs.i + regs.v[ins.x])

    def _Fx29(self, ins):  # LD F, Vx
        self.registers.set_i(FONT_START + FONT_DIGIT_SIZE * (self.registers.v[ins.x] & 0xF))

    def _Fx33(self, ins):  # LD B, Vx
        val = self.registers.v[ins.x]
        i = self.registers.i
        self.ram.write(i, val // 100)                           # Most-significant digit
        self.ram.write((i + 1) & ADDR_MASK, (val // 10) % 10)   # Middle digit
        self.ram.write((i + 2) & ADDR_MASK, val % 10)           # Least-significant digit

    def _post_Fx55_Fx65(self, ins):
        # I is left pointing just past the last register transferred
        self.registers.set_i(self.registers.i + ins.x + 1)

    def _Fx55(self, ins):  # LD [I], Vx
        regs = self.registers
        i = regs.i

        for reg in range(ins.x + 1):
            self.ram.write((i + reg) & ADDR_MASK, regs.v[reg])

        self._post_Fx55_Fx65(ins)

    def _Fx65(self, ins):  # LD Vx, [I]
        regs = self.registers
        i = regs.i

        for reg in range(ins.x + 1):
            regs.v[reg] = self.ram.read((i + reg) & ADDR_MASK)

        self._post_Fx55_Fx65(ins)
