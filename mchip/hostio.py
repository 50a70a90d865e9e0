#!/usr/bin/env python3

"""
Host I/O Functionality

Handles loading ROM binaries for later writing into RAM.  Machine state is not
saved between runs, so there is nothing to write back.
"""

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"

import logging

logger = logging.getLogger(__name__)


class Loader:
    def load_binary(self, filename):
        with open(filename, "rb") as f:
            data = f.read()

        logger.info("Read %d bytes from %s", len(data), filename)
        return data
