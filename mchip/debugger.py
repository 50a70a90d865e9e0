#!/usr/bin/env python3

"""
CPU Debugger

If enabled, this will output information before each instruction executed:
    * All 16 of the [V] registers, starting with most significant (Vf) and
      reducing to least significant (V0)
    * I  - Index register
    * DT - Delay timer
    * ST - Sound timer
    * PC - Program counter
    * OP - OpCode number
    * IN - Decoded instruction

If a crash occurs, all of the above will be outputted, with the addition of:
    * State - Running, waiting for a key, or halted
    * Stack - Stack contents
"""

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"

from .constants import STATE_RUNNING, STATE_WAITING_FOR_KEY, STATE_HALTED

STATE_NAMES = {
    STATE_RUNNING: "Running",
    STATE_WAITING_FOR_KEY: "Waiting for key",
    STATE_HALTED: "Halted"
}


class Debugger:
    def __init__(self):
        self.live = False

    def debug(self, cpu, instruction, verbose=False):
        regs = cpu.registers
        debug_str = (
            "V: 0x" + ("{:02x}" * 16) + " I: 0x{:03x} DT: 0x{:02x} ST: 0x{:02x} PC: 0x{:03x} OP: 0x{:04x} IN: {}"
        ).format(
            *[regs.v[reg_num] for reg_num in range(15, -1, -1)] +
            [regs.i, cpu.timers.dt, cpu.timers.st, cpu.debug_pc, cpu.opcode, instruction]
        )

        if verbose:
            state_str = STATE_NAMES[cpu.state]

            if cpu.state == STATE_WAITING_FOR_KEY:
                state_str += " (V{:01x})".format(cpu.key_register)

            debug_str += "\nState: {}".format(state_str)
            stack_items = regs.stack.get_items()
            stack_str = (" 0x{:03x}" * len(stack_items)).format(*stack_items)
            debug_str += ("\nStack:{}").format(stack_str or " (Empty)")

        return debug_str

    def set_live(self, enabled):
        self.live = enabled

    def is_live(self):
        return self.live

    def output(self, cpu, instruction):
        print(self.debug(cpu, instruction))
