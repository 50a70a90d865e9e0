#!/usr/bin/env python3

"""
Framebuffer Emulator

Programs cannot write directly into video RAM.  Instead, sprites are drawn to
the screen by XORing their bits onto a 64x32 monochrome plane.  Sprite
positions and every pixel within them wrap around the screen edges, so nothing
is ever clipped.

A collision is reported when any pixel that was set becomes unset by the XOR.

Renderers never see the plane directly.  They read pixels with pixel_at(), and
the host only asks them to redraw when the 'changed' flag has been raised.
"""

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"

from .constants import VID_WIDTH, VID_HEIGHT
from .ram import RAM


class Framebuffer:
    def __init__(self, vid_width=VID_WIDTH, vid_height=VID_HEIGHT):
        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = vid_width * vid_height
        self.plane = RAM(self.vid_size)
        self.changed = True

    def clear(self):
        self.plane.clear()
        self.changed = True

    def xor_pixel(self, x, y):
        # Returns flagging any collision
        x %= self.vid_width
        y %= self.vid_height
        vram_loc = y * self.vid_width + x
        pixel = self.plane.read(vram_loc)
        self.plane.write(vram_loc, pixel ^ 0xFF)
        self.changed = True

        return pixel != 0

    def draw_sprite(self, x, y, sprite):
        # The start position wraps first, then every pixel wraps individually as it is plotted
        x %= self.vid_width
        y %= self.vid_height
        collided = False

        for row, spr_data in enumerate(sprite):
            for col in range(8):
                if spr_data & (0x80 >> col):
                    # Don't stop drawing on a collision.  Keep the flag set for the rest of the sprite.
                    if self.xor_pixel(x + col, y + row):
                        collided = True

        return collided

    def pixel_at(self, x, y):
        return self.plane.read((y % self.vid_height) * self.vid_width + (x % self.vid_width)) != 0

    def get_vid_size(self):
        return self.vid_width, self.vid_height

    def __str__(self):
        # Two pixel rows per line of text using half-block characters.  Handy for crash reports and headless runs.
        lines = []

        for y in range(0, self.vid_height, 2):
            line = []

            for x in range(self.vid_width):
                top = self.pixel_at(x, y)
                bottom = (y + 1 < self.vid_height) and self.pixel_at(x, y + 1)

                if top and bottom:
                    line.append("█")
                elif top:
                    line.append("▀")
                elif bottom:
                    line.append("▄")
                else:
                    line.append(" ")

            lines.append("".join(line).rstrip())

        return "\n".join(lines)
