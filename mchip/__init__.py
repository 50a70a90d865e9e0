#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the emulator, replacing args with a dictionary
of options.  This can be done via the Terminal or GUI.

All options must be supplied.  Defaults can be specified with a 'None'.
"""

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"

import logging
from .constants import APP_INTRO, APP_COPYRIGHT, STATE_HALTED
from .cpu import CPU, CPUError
from .debugger import Debugger
from .framebuffer import Framebuffer
from .host import Host, HostError
from .hostio import Loader
from .inputs.i_null import InputsError
from .keypad import Keypad
from .ram import RAM, RAMError
from .registers import Registers
from .stack import Stack, StackError
from .timers import Timers

LOG_FORMAT = "%(levelname)5s: %(message)s"
LOG_LEVELS = [logging.ERROR, logging.INFO, logging.DEBUG]

logger = logging.getLogger(__name__)


class StartupError(Exception):
    pass


def configure_logging(verbosity=0):
    level = LOG_LEVELS[min(verbosity or 0, len(LOG_LEVELS) - 1)]
    logging.basicConfig(format=LOG_FORMAT, level=level)


def build_machine(debugger=None):
    # Create a new CPU and plug it into the rest of the system.  The CPU resets everything to the power-on state.
    return CPU(RAM(), Registers(Stack()), Framebuffer(), Keypad(), Timers(), debugger)


def select_backends(opt_renderer, mute_audio):
    # Returns the Renderer, Inputs and Audio classes to use.  If necessary, try PyGame first, then Curses.
    auto_select_renderer = opt_renderer is None

    # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
    if auto_select_renderer or opt_renderer == "pygame":
        try:
            import pygame  # noqa: F401
        except ImportError:
            if auto_select_renderer:
                opt_renderer = "curses"
            else:
                raise StartupError("PyGame does not appear to be installed.")
        else:
            from .inputs.i_pygame import Inputs
            from .renderers.r_pygame import Renderer

            if mute_audio:
                from .audio.a_null import Audio
            else:
                from .audio.a_pygame import Audio

            opt_renderer = "pygame"

    if opt_renderer == "curses":
        try:
            import curses  # noqa: F401
        except ImportError:
            if auto_select_renderer:
                raise StartupError("Neither PyGame nor Curses (or Windows-Curses) appear to be installed.")

            raise StartupError("Curses (or Windows-Curses) does not appear to be installed.")
        else:
            from .inputs.i_curses import Inputs
            from .renderers.r_curses import Renderer

            # Terminals can only ring the bell, so stay quiet unless asked
            if mute_audio or mute_audio is None:
                from .audio.a_null import Audio
            else:
                from .audio.a_curses import Audio

    if opt_renderer == "null":
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer
        from .audio.a_null import Audio

    logger.info("Using the %s renderer", opt_renderer)
    return Renderer, Inputs, Audio


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))
    configure_logging(args["verbose"])

    # Read ROM binary first, so a bad file is reported before any window opens
    debugger = Debugger()
    debugger.set_live(args["debug"])
    cpu = build_machine(debugger)

    try:
        cpu.ram.load_program(Loader().load_binary(args["filename"]))
    except (OSError, RAMError) as err:
        raise StartupError("Unable to load {}: {}".format(args["filename"], err)) from err

    Renderer, Inputs, Audio = select_backends(args["renderer"], args["mute"])
    renderer = Renderer(scale=args["scale"])
    inputs = None
    audio = None

    try:
        # Set up host inputs, and link to the chosen rendering module in case it provides inputs too
        inputs = Inputs(args["keymap"], cpu.keypad, renderer)
        audio = Audio()
        host = Host(cpu, renderer, inputs, audio, clock_speed=args["clock_speed"], timer_speed=args["timer_speed"])
        host.run()
    except (InputsError, HostError) as err:
        raise StartupError(str(err)) from err
    except (CPUError, StackError, RAMError):
        if cpu.state != STATE_HALTED:
            raise
    finally:
        # The CPU has quit, so shut down the rendering framework.  __del__ cannot be relied upon when using PyPy
        if audio is not None:
            audio.shutdown()

        if inputs is not None:
            inputs.shutdown()

        renderer.shutdown()

    if cpu.state == STATE_HALTED:
        # Report after the renderer has shut down, otherwise Curses would swallow the output
        logger.error("Emulation halted: %s", cpu.halt_reason)
        print("\n".join((
            "Emulation halted.",
            "",
            "{}Debug info:".format(APP_INTRO),
            cpu.crash_report(),
            "",
            str(cpu.halt_reason),
            "",
            "Screen:",
            str(cpu.framebuffer)
        )))
        return 1

    return 0
