#!/usr/bin/env python3

"""
Instruction Decoder

Splits a raw 16-bit opcode into an Instruction record before anything is
executed.  The first nibble picks a bitmask, and the masked opcode is then
looked up in a single table.  Most families only need the first nibble, but
0x0 must match exactly, 0x5/0x8/0x9 also depend on the last nibble, and
0xE/0xF depend on the low byte.

The same table drives disassembly for the debugger.
"""

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple

# n = Nibble
# kk = Byte
# nnn = address
# x/y = register (0-15)
Instruction = namedtuple("Instruction", ["pattern", "opcode", "x", "y", "n", "kk", "nnn"])

FAMILY_MASKS = {
    0x0: 0xFFFF,
    0x5: 0xF00F,
    0x8: 0xF00F,
    0x9: 0xF00F,
    0xE: 0xF0FF,
    0xF: 0xF0FF
}
DEFAULT_MASK = 0xF000

# Masked opcode: (pattern, assembly format)
OPCODES = {
    0x00E0: ("00E0", "CLS"),
    0x00EE: ("00EE", "RET"),
    0x1000: ("1nnn", "JP 0x{nnn:03x}"),
    0x2000: ("2nnn", "CALL 0x{nnn:03x}"),
    0x3000: ("3xkk", "SE V{x:01x}, 0x{kk:02x}"),
    0x4000: ("4xkk", "SNE V{x:01x}, 0x{kk:02x}"),
    0x5000: ("5xy0", "SE V{x:01x}, V{y:01x}"),
    0x6000: ("6xkk", "LD V{x:01x}, 0x{kk:02x}"),
    0x7000: ("7xkk", "ADD V{x:01x}, 0x{kk:02x}"),
    0x8000: ("8xy0", "LD V{x:01x}, V{y:01x}"),
    0x8001: ("8xy1", "OR V{x:01x}, V{y:01x}"),
    0x8002: ("8xy2", "AND V{x:01x}, V{y:01x}"),
    0x8003: ("8xy3", "XOR V{x:01x}, V{y:01x}"),
    0x8004: ("8xy4", "ADD V{x:01x}, V{y:01x}"),
    0x8005: ("8xy5", "SUB V{x:01x}, V{y:01x}"),
    0x8006: ("8xy6", "SHR V{x:01x}"),
    0x8007: ("8xy7", "SUBN V{x:01x}, V{y:01x}"),
    0x800E: ("8xyE", "SHL V{x:01x}"),
    0x9000: ("9xy0", "SNE V{x:01x}, V{y:01x}"),
    0xA000: ("Annn", "LD I, 0x{nnn:03x}"),
    0xB000: ("Bnnn", "JP V0, 0x{nnn:03x}"),
    0xC000: ("Cxkk", "RND V{x:01x}, 0x{kk:02x}"),
    0xD000: ("Dxyn", "DRW V{x:01x}, V{y:01x}, 0x{n:01x}"),
    0xE09E: ("Ex9E", "SKP V{x:01x}"),
    0xE0A1: ("ExA1", "SKNP V{x:01x}"),
    0xF007: ("Fx07", "LD V{x:01x}, DT"),
    0xF00A: ("Fx0A", "LD V{x:01x}, K"),
    0xF015: ("Fx15", "LD DT, V{x:01x}"),
    0xF018: ("Fx18", "LD ST, V{x:01x}"),
    0xF01E: ("Fx1E", "ADD I, V{x:01x}"),
    0xF029: ("Fx29", "LD F, V{x:01x}"),
    0xF033: ("Fx33", "LD B, V{x:01x}"),
    0xF055: ("Fx55", "LD [I], V{x:01x}"),
    0xF065: ("Fx65", "LD V{x:01x}, [I]")
}

# Pattern: assembly format, for disassembling already-decoded instructions
FORMATS = {pattern: fmt for pattern, fmt in OPCODES.values()}


class DecodeError(Exception):
    pass


def decode(opcode):
    """
    Decode a 16-bit opcode into an Instruction, or raise DecodeError if it is not
    part of the original CHIP-8 instruction set.
    """
    masked_opcode = opcode & FAMILY_MASKS.get(opcode >> 12, DEFAULT_MASK)
    entry = OPCODES.get(masked_opcode)

    if entry is None:
        raise DecodeError("Opcode 0x{:04x} is not a CHIP-8 instruction".format(opcode))

    return Instruction(
        pattern=entry[0],
        opcode=opcode,
        x=(opcode & 0xF00) >> 8,
        y=(opcode & 0xF0) >> 4,
        n=opcode & 0xF,
        kk=opcode & 0xFF,
        nnn=opcode & 0xFFF
    )


def disassemble(instruction):
    return FORMATS[instruction.pattern].format(**instruction._asdict())


def disassemble_opcode(opcode):
    # Unknown opcodes are shown as data, as most assemblers would
    try:
        return disassemble(decode(opcode))
    except DecodeError:
        return "DW 0x{:04x}".format(opcode)
