"""pygame host: window, keyboard and frame presentation"""

import logging
import time
from typing import List, Optional, Sequence

import numpy as np
import pygame

from .constants import DISPLAY_H, DISPLAY_W, MAX_CLOCK_HZ, NUM_KEYS
from .errors import Chip8Error
from .interpreter import Interpreter

logger = logging.getLogger(__name__)

FRAME_RATE = 60
BORDER_COLOR = (0, 0, 64)

# Keyboard mapping (QWERTY -> CHIP-8 hex keypad), listed in keypad order
# 0 1 2 3 4 5 6 7 8 9 A B C D E F
# X 1 2 3 Q W E A S D Y C 4 R F V
KEY_ORDER = (
    pygame.K_x, pygame.K_1, pygame.K_2, pygame.K_3,
    pygame.K_q, pygame.K_w, pygame.K_e, pygame.K_a,
    pygame.K_s, pygame.K_d, pygame.K_y, pygame.K_c,
    pygame.K_4, pygame.K_r, pygame.K_f, pygame.K_v,
)
KEY_MAP = {key: index for index, key in enumerate(KEY_ORDER)}


def keys_from_pressed(pressed: Sequence[bool]) -> List[bool]:
    """Map a ``pygame.key.get_pressed()`` result onto the 16 keypad slots"""
    return [bool(pressed[KEY_ORDER[i]]) for i in range(NUM_KEYS)]


def adjust_rate(rate: int, faster: bool, slower: bool) -> int:
    """PAGE UP / PAGE DOWN nudge, clamped to [1, 65535]"""
    if faster and rate < MAX_CLOCK_HZ:
        rate += 1
    if slower and rate > 1:
        rate -= 1
    return rate


def rate_caption(title: str, rate: int) -> str:
    return f"{title} ({rate} Hz)"


def frame_to_surface_array(pixels: np.ndarray) -> np.ndarray:
    """(h, w, 3) frame -> (w, h, 3) array as surfarray expects"""
    return np.ascontiguousarray(pixels.transpose(1, 0, 2))


class Chip8Window:
    """Main emulator window driving one :class:`Interpreter`"""

    def __init__(self, interpreter: Interpreter, scale: int, title: str = "CHIP-8"):
        pygame.init()
        pygame.display.set_caption(title)

        self.interpreter = interpreter
        self.title = title
        self.scale = scale
        self.screen = pygame.display.set_mode((DISPLAY_W * scale, DISPLAY_H * scale))
        self.clock = pygame.time.Clock()
        self.running = True

    def handle_events(self):
        """Process window events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

    def update(self, dt: float) -> Optional[Chip8Error]:
        """Feed input and elapsed time to the interpreter"""
        pressed = pygame.key.get_pressed()

        rate = self.interpreter.instruction_rate
        new_rate = adjust_rate(rate, pressed[pygame.K_PAGEUP], pressed[pygame.K_PAGEDOWN])
        if new_rate != rate:
            self.interpreter.set_instruction_rate(new_rate)
            pygame.display.set_caption(rate_caption(self.title, new_rate))

        return self.interpreter.tick(dt, keys_from_pressed(pressed))

    def render(self):
        """Render display"""
        self.screen.fill(BORDER_COLOR)
        surf = pygame.surfarray.make_surface(frame_to_surface_array(self.interpreter.pixels))
        surf = pygame.transform.scale(surf, self.screen.get_size())
        self.screen.blit(surf, (0, 0))
        pygame.display.flip()

    def run(self) -> Optional[Chip8Error]:
        """Main loop; returns the fatal error that ended the session, if any"""
        last = time.perf_counter()
        try:
            while self.running:
                self.handle_events()

                now = time.perf_counter()
                error = self.update(now - last)
                last = now
                if error is not None:
                    return error

                self.render()
                self.clock.tick(FRAME_RATE)
        finally:
            pygame.quit()
        return None
