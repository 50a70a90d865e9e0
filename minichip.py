#!/usr/bin/env python3

__author__ = "MiniChip Authors"
__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "1.0.0"

import sys
from argparse import ArgumentParser
from mchip import main, StartupError
from mchip.constants import DEFAULT_KEYMAP, DEFAULT_CLOCK_SPEED, KEYMAPS


def parse_args():
    parser = ArgumentParser(description="A CHIP-8 interpreter for the original instruction set")
    parser.add_argument("filename", help="ROM to execute (normally ending in .ch8 or .c8)")
    parser.add_argument(
        "-c", "--clock_speed", type=int,
        help="set the CPU speed in operations/second (default {}, 0 = uncapped)".format(DEFAULT_CLOCK_SPEED)
    )
    parser.add_argument(
        "-t", "--timer_speed", type=float,
        help="set the delay and sound timer rate in Hz (default 60, must be above 0)"
    )
    parser.add_argument(
        "-r", "--renderer", choices=["pygame", "curses", "null"],
        help="set the rendering, input, and audio systems (pygame by default if available, otherwise curses)"
    )
    parser.add_argument(
        "-s", "--scale", type=int,
        help="set the window width in PyGame mode (default 512), and scale in Curses mode (default 2)"
    )
    parser.add_argument(
        "-m", "--mute", type=int, choices=[0, 1],
        help="mute the emulated audio.  0 = unmuted (default for PyGame), 1 = muted (default for Curses)"
    )
    parser.add_argument(
        "-k", "--keymap", default=DEFAULT_KEYMAP,
        help=" ".join((
            "choose a keyboard layout ({}), or redefine the 16 keyscan codes (PyGame) or character numbers".format(
                ", ".join(KEYMAPS)
            ),
            "(Curses).  Separate each decimal with a comma"
        ))
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", default=False,
        help="enable live instruction trace output.  Slows CPU execution"
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="log more about what the emulator is doing (repeat for more detail)"
    )
    return parser.parse_args()  # Can call sys.exit(2) if args are incorrect


def run():
    args = vars(parse_args())

    # It is possible to start the emulator from a GUI by calling main with a dictionary
    try:
        sys.exit(main(args))
    except StartupError as err:
        sys.exit(str(err))


if __name__ == "__main__":
    run()
