"""Subroutine return-address stack"""

from typing import List, Optional

from .constants import STACK_SIZE
from .errors import StackOverflow, StackUnderflow


class CallStack:
    """LIFO of 16-bit return addresses

    ``limit`` caps the depth (the classic 16 levels by default); ``None``
    leaves it unbounded.
    """

    def __init__(self, limit: Optional[int] = STACK_SIZE):
        self.limit = limit
        self._frames: List[int] = []

    def __len__(self) -> int:
        return len(self._frames)

    def push(self, address: int):
        if self.limit is not None and len(self._frames) >= self.limit:
            raise StackOverflow(self.limit)
        self._frames.append(address & 0xFFFF)

    def pop(self) -> int:
        if not self._frames:
            raise StackUnderflow()
        return self._frames.pop()

    def clear(self):
        self._frames.clear()
