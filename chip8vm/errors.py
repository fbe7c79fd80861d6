"""Fatal conditions raised by the CHIP-8 core"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    PROGRAM_TOO_LARGE = "program too large"
    FILE_UNREADABLE = "file unreadable"
    INVALID_OPCODE = "invalid opcode"
    STACK_UNDERFLOW = "stack underflow"
    STACK_OVERFLOW = "stack overflow"
    OUT_OF_RANGE = "out of range"


class Chip8Error(Exception):
    """Base class for every fatal interpreter condition"""

    kind: ErrorKind


class ProgramTooLarge(Chip8Error):
    kind = ErrorKind.PROGRAM_TOO_LARGE

    def __init__(self, size: int, limit: int):
        super().__init__(f"Program is {size} bytes, the limit is {limit} bytes")
        self.size = size
        self.limit = limit


class FileUnreadable(Chip8Error):
    kind = ErrorKind.FILE_UNREADABLE

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not read ROM {path}: {reason}")
        self.path = path


class InvalidOpcode(Chip8Error):
    kind = ErrorKind.INVALID_OPCODE

    def __init__(self, opcode: int, address: Optional[int] = None):
        where = f" at ${address:03X}" if address is not None else ""
        super().__init__(f"Invalid opcode ${opcode:04X}{where}")
        self.opcode = opcode
        self.address = address


class StackUnderflow(Chip8Error):
    kind = ErrorKind.STACK_UNDERFLOW

    def __init__(self):
        super().__init__("Return with an empty call stack")


class StackOverflow(Chip8Error):
    kind = ErrorKind.STACK_OVERFLOW

    def __init__(self, limit: int):
        super().__init__(f"Call stack exceeded {limit} levels")
        self.limit = limit


class OutOfRange(Chip8Error):
    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, what: str, index: int, size: int):
        super().__init__(f"{what} index ${index:X} outside [0, ${size:X})")
        self.what = what
        self.index = index
        self.size = size
