"""64x32 monochrome frame and its RGB presentation buffer"""

import numpy as np

from .constants import DISPLAY_H, DISPLAY_W, PIXEL_OFF, PIXEL_ON


class Display:
    """Boolean pixel grid mirrored 1:1 into an RGB buffer

    Both arrays are indexed ``[y, x]``. The RGB buffer is rewritten whenever
    the grid changes, so the two always agree between instructions.
    """

    def __init__(self):
        self.grid = np.zeros((DISPLAY_H, DISPLAY_W), dtype=bool)
        self._rgb = np.zeros((DISPLAY_H, DISPLAY_W, 3), dtype=np.uint8)
        self._on = np.array(PIXEL_ON, dtype=np.uint8)
        self._off = np.array(PIXEL_OFF, dtype=np.uint8)
        self.clear()

    def clear(self):
        self.grid.fill(False)
        self._rgb[:, :] = self._off

    def is_on(self, x: int, y: int) -> bool:
        return bool(self.grid[y % DISPLAY_H, x % DISPLAY_W])

    def toggle_pixel(self, x: int, y: int) -> bool:
        """XOR one pixel (coordinates wrap); returns True if it was on before"""
        x %= DISPLAY_W
        y %= DISPLAY_H

        was_on = bool(self.grid[y, x])
        self.grid[y, x] = not was_on
        self._rgb[y, x] = self._off if was_on else self._on
        return was_on

    @property
    def pixels(self) -> np.ndarray:
        """Read-only (height, width, 3) uint8 view for the renderer"""
        view = self._rgb.view()
        view.flags.writeable = False
        return view
