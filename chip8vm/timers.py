"""Delay and sound countdown timers"""


class TimerPair:
    """Two 8-bit counters that count down to zero at 60Hz

    Only the value of the sound timer is tracked; nothing is played.
    """

    def __init__(self):
        self._delay = 0
        self._sound = 0

    @property
    def delay(self) -> int:
        return self._delay

    @delay.setter
    def delay(self, value: int):
        self._delay = value & 0xFF

    @property
    def sound(self) -> int:
        return self._sound

    @sound.setter
    def sound(self, value: int):
        self._sound = value & 0xFF

    def decrement(self):
        """Decrement timers (call at 60Hz)"""
        if self._delay > 0:
            self._delay -= 1

        if self._sound > 0:
            self._sound -= 1

    def reset(self):
        self._delay = 0
        self._sound = 0
