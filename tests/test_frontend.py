import numpy as np
import pygame

from chip8vm.frontend import (
    KEY_MAP,
    Chip8Window,
    adjust_rate,
    frame_to_surface_array,
    keys_from_pressed,
    rate_caption,
)
from chip8vm.interpreter import Interpreter


def test_keymap_layout():
    assert KEY_MAP[pygame.K_x] == 0x0
    assert KEY_MAP[pygame.K_1] == 0x1
    assert KEY_MAP[pygame.K_y] == 0xA
    assert KEY_MAP[pygame.K_4] == 0xC
    assert KEY_MAP[pygame.K_v] == 0xF
    assert sorted(KEY_MAP.values()) == list(range(16))


def test_keys_from_pressed():
    pressed = {key: False for key in KEY_MAP}
    pressed[pygame.K_q] = True
    pressed[pygame.K_f] = True
    keys = keys_from_pressed(pressed)
    assert [i for i, down in enumerate(keys) if down] == [0x4, 0xE]


def test_adjust_rate_clamps():
    assert adjust_rate(500, True, False) == 501
    assert adjust_rate(500, False, True) == 499
    assert adjust_rate(65535, True, False) == 65535
    assert adjust_rate(1, False, True) == 1


def test_frame_is_transposed_for_surfarray():
    cpu = Interpreter()
    cpu.display.toggle_pixel(5, 2)
    arr = frame_to_surface_array(cpu.pixels)
    assert arr.shape == (64, 32, 3)
    assert tuple(arr[5, 2]) == (0xFF, 0xBB, 0x00)
    assert arr.flags.c_contiguous
    assert np.count_nonzero(arr.any(axis=-1)) == 1


def test_rate_change_keeps_window_title(monkeypatch):
    cpu = Interpreter()
    cpu.load_program(bytes([0x12, 0x00]))
    window = Chip8Window(cpu, scale=1, title="CHIP-8 - pong")
    try:
        pressed = {key: False for key in KEY_MAP}
        pressed[pygame.K_PAGEUP] = True
        pressed[pygame.K_PAGEDOWN] = False
        monkeypatch.setattr(pygame.key, "get_pressed", lambda: pressed)

        assert window.update(0.0) is None
        assert cpu.instruction_rate == 501
        assert pygame.display.get_caption()[0] == rate_caption("CHIP-8 - pong", 501)
        assert rate_caption("CHIP-8 - pong", 501) == "CHIP-8 - pong (501 Hz)"
    finally:
        pygame.quit()
