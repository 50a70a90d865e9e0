#!/usr/bin/env python3

"""
Curses Renderer Plugin

Draws the framebuffer in a standard Linux-style TTY Terminal, the Windows
Command Prompt, or PowerShell, using inverted spaces for each lit pixel.  The
top line of the pad is kept for the title and performance figures.
"""

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"

import curses
from .r_null import Renderer as RendererBase


class Renderer(RendererBase):
    def __init__(self, scale=None, **kwargs):
        if scale is None:
            scale = 2  # Default horizontal stretch if not supplied, or set to default

        self.pixel_char = " " * scale
        self.pad = None
        self.refresh_needed = False
        self.last_screen_height = -1
        self.last_screen_width = -1
        self.screen = curses.initscr()
        curses.curs_set(0)
        curses.noecho()
        curses.cbreak()
        super().__init__(scale)

    def set_resolution(self, width, height):
        # Allow one extra row for the title, and one extra column, otherwise we can't write the furthest bottom-right
        # pixel.
        self.pad = curses.newpad(height + 1, width * self.scale + 1)
        super().set_resolution(width, height)

    def render(self, framebuffer):
        pixel_char = self.pixel_char
        scale = self.scale

        for y in range(self.height):
            for x in range(self.width):
                attr = curses.A_REVERSE if framebuffer.pixel_at(x, y) else curses.A_NORMAL
                self.pad.addstr(y + 1, x * scale, pixel_char, attr)

        self.refresh_needed = True
        self._refresh_pad()

    def _refresh_pad(self):
        screen_height, screen_width = self.screen.getmaxyx()

        if screen_height != self.last_screen_height or screen_width != self.last_screen_width:
            # Terminal resized, so redraw everything
            self.screen.clear()

            if hasattr(curses, "resizeterm"):
                # This doesn't work on Windows
                curses.resizeterm(screen_height, screen_width)

            self.screen.refresh()
            self.last_screen_height = screen_height
            self.last_screen_width = screen_width

        if self.refresh_needed:
            self.pad.refresh(0, 0, 0, 0, screen_height - 1, screen_width - 1)
            self.refresh_needed = False

    def set_title(self, title):
        if self.pad:
            line_width = self.width * self.scale

            if line_width > len(title):
                self.pad.addstr(0, 0, title.ljust(line_width), curses.A_REVERSE)
                self.refresh_needed = True

        super().set_title(title)

    def shutdown(self):
        curses.nocbreak()
        curses.echo()

        try:
            curses.curs_set(1)
        except curses.error:
            pass

        curses.endwin()
        super().shutdown()

    # No Superclass for this Curses-specific method

    def get_curses_screen(self):
        return self.screen
