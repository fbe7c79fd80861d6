"""Level-triggered snapshot of the 16-key hex keypad"""

from typing import Iterable, List, Optional

from .constants import NUM_KEYS
from .errors import OutOfRange


class Keypad:
    def __init__(self):
        self._keys: List[bool] = [False] * NUM_KEYS

    def update(self, pressed: Iterable[bool]):
        """Replace the whole snapshot; exactly 16 entries, index 0x0-0xF"""
        keys = [bool(k) for k in pressed]
        if len(keys) != NUM_KEYS:
            raise ValueError(f"Expected {NUM_KEYS} key states, got {len(keys)}")
        self._keys = keys

    def is_pressed(self, key: int) -> bool:
        if not 0 <= key < NUM_KEYS:
            raise OutOfRange("Key", key, NUM_KEYS)
        return self._keys[key]

    def first_pressed(self) -> Optional[int]:
        """Lowest-numbered key currently down, or None"""
        for i, pressed in enumerate(self._keys):
            if pressed:
                return i
        return None

    def reset(self):
        self._keys = [False] * NUM_KEYS
