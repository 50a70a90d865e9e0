#!/usr/bin/env python3

"""
Stack Emulator

The call stack has no specified location in RAM, and there is no stack pointer
exposed to the running program, so a bounded list is all that is needed.

Overflowing or underflowing the stack can only happen with a broken (or
hostile) binary, and both are fatal.
"""

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"

from .constants import STACK_DEPTH


class StackError(Exception):
    def __init__(self, message, depth):
        self.depth = depth
        super().__init__("{} (depth {})".format(message, depth))


class StackOverflow(StackError):
    def __init__(self, depth):
        super().__init__("Stack overflow", depth)


class StackUnderflow(StackError):
    def __init__(self, depth=0):
        super().__init__("Stack underflow", depth)


class Stack:
    def __init__(self, size=STACK_DEPTH):
        self.items = []
        self.size = size

    def push(self, item):
        if len(self.items) >= self.size:
            raise StackOverflow(len(self.items))

        self.items.append(item)

    def pop(self):
        try:
            return self.items.pop()
        except IndexError:
            raise StackUnderflow() from None

    def depth(self):
        return len(self.items)

    def clear(self):
        self.items.clear()

    def get_items(self):
        # For debugging
        return self.items
