#!/usr/bin/env python3

"""
Host Scheduling Loop

Drives the CPU at its own instruction rate, and the timers at a separate fixed
rate (normally 60Hz).  The display is redrawn and the inputs are polled at
60Hz too, regardless of how fast the CPU runs.  Keeping these apart means the
CPU can be sped up or slowed down without games running at the wrong speed.

The CPU itself never sleeps, so all pacing happens here.  Busy-waiting on
perf_counter() is far more precise than sleeping at these intervals.
"""

__copyright__ = "Copyright (C) 2026 MiniChip Authors"
__license__ = "GNU Affero General Public License v3.0"

import logging
from time import perf_counter
from .constants import APP_NAME, DEFAULT_CLOCK_SPEED, TIMER_FREQ, DISPLAY_FREQ

DISPLAY_INTERVAL = 1.0 / DISPLAY_FREQ
MAX_TIMER_LAG = 1.0  # Seconds behind before timers give up catching up

logger = logging.getLogger(__name__)


class HostError(Exception):
    pass


class Host:
    def __init__(self, cpu, renderer, inputs, audio, clock_speed=None, timer_speed=None):
        self.cpu = cpu
        self.framebuffer = cpu.framebuffer
        self.renderer = renderer
        self.inputs = inputs
        self.audio = audio

        if clock_speed is None:
            clock_speed = DEFAULT_CLOCK_SPEED

        # User can specify 0 (or less) for uncapped
        self.core_interval = None if clock_speed <= 0 else 1.0 / clock_speed

        if timer_speed is None:
            timer_speed = TIMER_FREQ
        elif timer_speed <= 0:
            raise HostError("Timer speed must be above 0Hz, not {}".format(timer_speed))

        self.timer_interval = 1.0 / timer_speed

        self.renderer.set_resolution(*self.framebuffer.get_vid_size())
        self.report_perf()

        # Performance-related vars
        self.next_display_update_time = 0
        self.next_timer_time = 0
        self.perf_counter_fps = 0
        self.perf_counter_ops = 0
        self.next_perf_report_time = 0

    def run(self):
        # Returns when the user quits.  Errors which halt the CPU are raised out of here.
        logger.info(
            "Starting at %s ops/s with timers at %.1fHz",
            "uncapped" if self.core_interval is None else round(1.0 / self.core_interval),
            1.0 / self.timer_interval
        )
        self.next_timer_time = perf_counter() + self.timer_interval

        try:
            while True:
                this_time = perf_counter()  # Do this first for maximum precision

                # Performance counters
                if this_time >= self.next_perf_report_time:
                    self.next_perf_report_time = int(this_time) + 1.0
                    self.report_perf(self.perf_counter_fps, self.perf_counter_ops)
                    self.perf_counter_ops = 0
                    self.perf_counter_fps = 0

                # Prevent unnecessary display rendering in excess of host frame rate
                if this_time >= self.next_display_update_time:
                    if self.inputs.process_messages():  # Process inputs at 60Hz too, to avoid slowdown
                        logger.info("Quit requested")
                        return

                    self.next_display_update_time = this_time + DISPLAY_INTERVAL
                    self.refresh_display()
                    self.perf_counter_fps += 1

                self._update_timers(this_time)
                self.cpu.step()

                if self.core_interval is not None:
                    # Wait for next CPU instruction.  Do this last for maximum precision (takes into account time spent
                    # on this instruction)
                    next_time = this_time + self.core_interval

                    while perf_counter() < next_time:
                        pass

                self.perf_counter_ops += 1
        finally:
            # Show whatever was drawn last, and make sure the buzzer doesn't carry on after the CPU stops
            self.refresh_display()
            self.audio.enable_buzzer(False)

    def _update_timers(self, this_time):
        # Tick once for every timer interval that has passed since the last tick
        if this_time - self.next_timer_time > MAX_TIMER_LAG:
            logger.debug("Timers lagging by %.2fs, resynchronising", this_time - self.next_timer_time)
            self.next_timer_time = this_time

        while this_time >= self.next_timer_time:
            self.cpu.tick_timers()
            self.next_timer_time += self.timer_interval

        self.audio.enable_buzzer(self.cpu.timers.is_sound_active())

    def refresh_display(self):
        if self.framebuffer.changed:
            self.renderer.render(self.framebuffer)
            self.framebuffer.changed = False

    def report_perf(self, fps=0, ops=0):
        self.renderer.set_title("{} - {} FPS, {} OPS".format(APP_NAME, fps, ops))
