"""Fixed-rate driver for instruction execution and timer decay"""

import logging
import math
from typing import Callable, Optional

from .constants import DEFAULT_CLOCK_HZ, MAX_CLOCK_HZ, TIME_EPSILON, TIMER_HZ
from .errors import Chip8Error

logger = logging.getLogger(__name__)


def validate_rate(rate: int) -> int:
    """Instruction rates must lie in (0, 65535]"""
    if isinstance(rate, bool) or not isinstance(rate, int):
        raise ValueError(f"Instruction rate must be an integer, got {rate!r}")
    if not 0 < rate <= MAX_CLOCK_HZ:
        raise ValueError(f"Instruction rate {rate} outside (0, {MAX_CLOCK_HZ}]")
    return rate


class Scheduler:
    """Turns host frame times into a whole number of machine steps

    Two independent accumulators are kept: one drains in 1/60 s steps and
    decays the timers, the other drains in ``1 / rate`` steps and executes
    instructions. A long frame therefore catches up with many steps, a short
    one may run none.
    """

    def __init__(self, rate: int = DEFAULT_CLOCK_HZ):
        self._rate = validate_rate(rate)
        self._instruction_time = 1.0 / rate
        self._timer_time = 1.0 / TIMER_HZ
        self.instruction_accumulator = 0.0
        self.timer_accumulator = 0.0

    @property
    def rate(self) -> int:
        return self._rate

    @rate.setter
    def rate(self, value: int):
        self._rate = validate_rate(value)
        self._instruction_time = 1.0 / value
        logger.info("Instruction rate set to %d Hz", value)

    def reset(self):
        self.instruction_accumulator = 0.0
        self.timer_accumulator = 0.0

    def advance(self, dt: float,
                step: Callable[[], Optional[Chip8Error]],
                decay: Callable[[], None]) -> Optional[Chip8Error]:
        """Account for ``dt`` seconds of host time

        Returns the first error produced by ``step``; the instruction drain
        stops there and the remaining time is discarded.
        """
        if not math.isfinite(dt) or dt < 0:
            raise ValueError(f"Elapsed time must be finite and non-negative: {dt}")

        # ─── Timers: fixed 60Hz ───
        self.timer_accumulator += dt
        while self.timer_accumulator + TIME_EPSILON >= self._timer_time:
            decay()
            self.timer_accumulator -= self._timer_time
        self.timer_accumulator = max(self.timer_accumulator, 0.0)

        # ─── Instructions: configurable rate ───
        self.instruction_accumulator += dt
        while self.instruction_accumulator + TIME_EPSILON >= self._instruction_time:
            self.instruction_accumulator -= self._instruction_time
            error = step()
            if error is not None:
                self.instruction_accumulator = 0.0
                return error
        self.instruction_accumulator = max(self.instruction_accumulator, 0.0)
        return None
