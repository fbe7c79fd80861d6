import pytest

from chip8vm.constants import FONTSET, MAX_PROGRAM_SIZE, MEMORY_SIZE, PROGRAM_START
from chip8vm.errors import OutOfRange, ProgramTooLarge
from chip8vm.memory import MemoryBank


def test_font_is_loaded_at_zero():
    mem = MemoryBank()
    assert mem.read_block(0, 80) == FONTSET
    # Glyph for "F"
    assert mem.read_block(0xF * 5, 5) == bytes([0xF0, 0x80, 0xF0, 0x80, 0x80])
    assert mem.read(0x50) == 0


def test_load_places_program_at_0x200():
    mem = MemoryBank()
    mem.load(b"\x6A\x02\x12\x00")
    assert mem.read_word(PROGRAM_START) == 0x6A02
    assert mem.read_word(PROGRAM_START + 2) == 0x1200


def test_load_accepts_exactly_max_size():
    mem = MemoryBank()
    mem.load(bytes([0xAB]) * MAX_PROGRAM_SIZE)
    assert mem.read(MEMORY_SIZE - 1) == 0xAB


def test_oversized_program_is_rejected_without_writing():
    mem = MemoryBank()
    before = mem.snapshot()
    with pytest.raises(ProgramTooLarge) as info:
        mem.load(bytes([0xFF]) * (MAX_PROGRAM_SIZE + 1))
    assert info.value.size == MAX_PROGRAM_SIZE + 1
    assert mem.snapshot() == before


@pytest.mark.parametrize("address", [-1, MEMORY_SIZE, MEMORY_SIZE + 100])
def test_single_byte_access_is_bounds_checked(address):
    mem = MemoryBank()
    with pytest.raises(OutOfRange):
        mem.read(address)
    with pytest.raises(OutOfRange):
        mem.write(address, 1)


def test_word_read_across_the_end_fails():
    mem = MemoryBank()
    with pytest.raises(OutOfRange):
        mem.read_word(MEMORY_SIZE - 1)


def test_block_write_is_all_or_nothing():
    mem = MemoryBank()
    with pytest.raises(OutOfRange):
        mem.write_block(MEMORY_SIZE - 2, [1, 2, 3])
    assert mem.read(MEMORY_SIZE - 2) == 0
    assert mem.read(MEMORY_SIZE - 1) == 0


def test_clear_restores_font():
    mem = MemoryBank()
    mem.write(0, 0)
    mem.write(0x300, 7)
    mem.clear()
    assert mem.read(0) == FONTSET[0]
    assert mem.read(0x300) == 0
