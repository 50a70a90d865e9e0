#!/usr/bin/env python3

"""
Null Renderer Plugin

This serves as a base class for other rendering plugins.

This module can be used on its own as a Renderer plugin if you only want to see
debug output.  Without a renderer, performance data will also not be shown.
"""

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"


class Renderer:
    def __init__(self, scale=None, **kwargs):  # pylint: disable=unused-argument
        self.scale = 1 if scale is None else scale
        self.set_resolution(0, 0)

    def set_resolution(self, width, height):
        self.width = width
        self.height = height

    def render(self, framebuffer):  # pylint: disable=unused-argument
        # Redraw the whole screen by reading framebuffer.pixel_at()
        pass

    def set_title(self, title):
        pass

    def shutdown(self):
        pass
