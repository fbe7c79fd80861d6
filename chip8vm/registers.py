"""V0-VF, the index register and the program counter"""

from .constants import NUM_REGISTERS, PROGRAM_START
from .errors import OutOfRange


class RegisterFile:
    """Plain register storage; arithmetic and flag rules live in the interpreter"""

    def __init__(self):
        self._v = bytearray(NUM_REGISTERS)  # V0-VF
        self._I = 0                         # Index register (16-bit)
        self._PC = PROGRAM_START            # Program counter

    def __getitem__(self, index: int) -> int:
        if not 0 <= index < NUM_REGISTERS:
            raise OutOfRange("Register", index, NUM_REGISTERS)
        return self._v[index]

    def __setitem__(self, index: int, value: int):
        if not 0 <= index < NUM_REGISTERS:
            raise OutOfRange("Register", index, NUM_REGISTERS)
        self._v[index] = value & 0xFF

    def dump(self, count: int) -> bytes:
        """V0 through V(count-1)"""
        return bytes(self._v[:count])

    def fill(self, values: bytes):
        """Overwrite V0 onwards with ``values``"""
        if len(values) > NUM_REGISTERS:
            raise OutOfRange("Register", len(values) - 1, NUM_REGISTERS)
        self._v[:len(values)] = values

    @property
    def I(self) -> int:
        return self._I

    @I.setter
    def I(self, value: int):
        self._I = value & 0xFFFF

    @property
    def PC(self) -> int:
        return self._PC

    @PC.setter
    def PC(self, value: int):
        self._PC = value & 0xFFFF

    def reset(self):
        self._v[:] = bytes(NUM_REGISTERS)
        self._I = 0
        self._PC = PROGRAM_START
