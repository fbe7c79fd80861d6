"""Flat 4KB address space with the font table and the program region"""

import logging
from typing import Sequence

from .constants import FONT_START, FONTSET, MAX_PROGRAM_SIZE, MEMORY_SIZE, PROGRAM_START
from .errors import OutOfRange, ProgramTooLarge

logger = logging.getLogger(__name__)


class MemoryBank:
    """Bounds-checked CHIP-8 RAM

    The font table is copied in once at construction. Every access outside
    ``[0, MEMORY_SIZE)`` raises :class:`OutOfRange` instead of wrapping.
    """

    def __init__(self):
        self._data = bytearray(MEMORY_SIZE)
        self._load_fontset()

    def _load_fontset(self):
        """Load built-in font sprites to memory"""
        self._data[FONT_START:FONT_START + len(FONTSET)] = FONTSET

    def _check(self, address: int, length: int = 1):
        if address < 0 or address + length > MEMORY_SIZE:
            bad = address if address < 0 or address >= MEMORY_SIZE else MEMORY_SIZE
            raise OutOfRange("Memory", bad, MEMORY_SIZE)

    def read(self, address: int) -> int:
        self._check(address)
        return self._data[address]

    def write(self, address: int, value: int):
        self._check(address)
        self._data[address] = value & 0xFF

    def read_word(self, address: int) -> int:
        """Big-endian 16-bit read of ``address`` and ``address + 1``"""
        self._check(address, 2)
        return (self._data[address] << 8) | self._data[address + 1]

    def read_block(self, address: int, length: int) -> bytes:
        self._check(address, length)
        return bytes(self._data[address:address + length])

    def write_block(self, address: int, values: Sequence[int]):
        """Write all of ``values`` or nothing"""
        self._check(address, len(values))
        for offset, value in enumerate(values):
            self._data[address + offset] = value & 0xFF

    def load(self, program: bytes):
        """Copy a program into the ROM region at 0x200

        Raises :class:`ProgramTooLarge` without touching memory if the
        program does not fit.
        """
        if len(program) > MAX_PROGRAM_SIZE:
            raise ProgramTooLarge(len(program), MAX_PROGRAM_SIZE)
        self._data[PROGRAM_START:PROGRAM_START + len(program)] = program
        logger.info("Loaded %d byte program at $%03X", len(program), PROGRAM_START)

    def clear(self):
        """Zero everything and restore the font"""
        self._data[:] = bytes(MEMORY_SIZE)
        self._load_fontset()

    def snapshot(self) -> bytes:
        return bytes(self._data)
