#!/usr/bin/env python3

"""
PyGame Renderer Plugin

Draws the framebuffer onto an SDL window surface via PyGame.  The surface is
allocated at the emulated 64x32 resolution, and its contents are then
stretched (in the correct aspect ratio using 'Nearest Neighbour' translation)
to fit the window itself.  This means we don't have to draw the same pixel
multiple times.
"""

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .r_null import Renderer as RendererBase
from ..constants import APP_NAME

BACKGROUND_RGB = (0x22, 0x22, 0x22)
FOREGROUND_RGB = (0xDD, 0xDD, 0xDD)


class Renderer(RendererBase):
    def __init__(self, scale=None, **kwargs):
        if scale is None:
            scale = 512  # Default window width if not supplied, or set to default

        pygame.display.init()
        self.set_title(APP_NAME)
        self.rgb_buffer = None
        self.scaled_size = (scale, scale // 2)
        self.display_surface = pygame.display.set_mode(self.scaled_size)
        self.rgb_map = [bytes(BACKGROUND_RGB), bytes(FOREGROUND_RGB)]
        super().__init__(scale)

    def set_resolution(self, width, height):
        self.rgb_buffer = memoryview(bytearray(width * height * 3))  # 24-bit
        super().set_resolution(width, height)

    def render(self, framebuffer):
        if not self.rgb_buffer:
            return

        # Update the RGB buffer in-place to minimise allocations and PyGame calls
        rgb_buffer = self.rgb_buffer
        rgb_map = self.rgb_map
        width = self.width
        rgb_location = 0

        for y in range(self.height):
            for x in range(width):
                rgb_buffer[rgb_location:rgb_location + 3] = rgb_map[framebuffer.pixel_at(x, y)]
                rgb_location += 3

        # Blitting the bytearray straight to the surface is much quicker than frequent PixelArray updates
        render_surface = pygame.image.frombuffer(rgb_buffer, (width, self.height), "RGB")
        scaled_win = pygame.transform.scale(render_surface, self.scaled_size)
        self.display_surface.blit(scaled_win, (0, 0))
        pygame.display.flip()

    def set_title(self, title):
        pygame.display.set_caption(title)

    def shutdown(self):
        # PyGame currently segfaults if display.quit is called via __del__
        pygame.display.quit()
        super().shutdown()
