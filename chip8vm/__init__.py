"""
╔═══════════════════════════════════════════════════════════════════════════════╗
║                    chip8vm - CHIP-8 interpreter core                          ║
╚═══════════════════════════════════════════════════════════════════════════════╝

Memory, registers, call stack, timers, keypad and display, a fetch/decode/
execute loop and a fixed-rate scheduler. The pygame window in
:mod:`chip8vm.frontend` is one possible host; anything that calls
:meth:`Interpreter.tick` and reads :attr:`Interpreter.pixels` will do.
"""

from .config import EmulatorConfig
from .decoder import Instruction, Op, decode
from .display import Display
from .errors import (
    Chip8Error,
    ErrorKind,
    FileUnreadable,
    InvalidOpcode,
    OutOfRange,
    ProgramTooLarge,
    StackOverflow,
    StackUnderflow,
)
from .interpreter import Interpreter
from .scheduler import Scheduler

__version__ = "0.1.0"
