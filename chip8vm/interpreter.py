"""CHIP-8 fetch/decode/execute core"""

import logging
import random
from typing import Iterable, Optional

import numpy as np

from .constants import DEFAULT_CLOCK_HZ, GLYPH_SIZE, FONT_START, STACK_SIZE
from .decoder import Instruction, Op, decode
from .display import Display
from .errors import Chip8Error, InvalidOpcode
from .keypad import Keypad
from .memory import MemoryBank
from .registers import RegisterFile
from .scheduler import Scheduler
from .stack import CallStack
from .timers import TimerPair

logger = logging.getLogger(__name__)


class Interpreter:
    """Complete CHIP-8 machine

    Owns memory, registers, call stack, timers, keypad and display, and a
    :class:`Scheduler` that turns host frame times into instruction steps and
    60Hz timer ticks.

    Fatal conditions are returned, not raised: :meth:`load_program`,
    :meth:`step` and :meth:`tick` hand back the :class:`Chip8Error` that
    stopped the machine (or ``None``). After a fault the interpreter executes
    nothing further until :meth:`reset`.

    Args:
        rate: instructions per second, in (0, 65535]
        rng: random source for CXNN; a seeded ``random.Random`` gives
            reproducible runs
        stack_limit: maximum call depth, ``None`` for unbounded
    """

    def __init__(self, rate: int = DEFAULT_CLOCK_HZ,
                 rng: Optional[random.Random] = None,
                 stack_limit: Optional[int] = STACK_SIZE):
        self.memory = MemoryBank()
        self.registers = RegisterFile()
        self.stack = CallStack(stack_limit)
        self.timers = TimerPair()
        self.keypad = Keypad()
        self.display = Display()
        self.scheduler = Scheduler(rate)
        self.rng = rng if rng is not None else random.Random()

        # Wait for key state
        self._waiting_for_key = False
        self._key_register = 0

        self.fault: Optional[Chip8Error] = None

    # ─── Host-facing API ───

    def reset(self):
        """Restore the power-on state; the loaded program is discarded"""
        self.memory.clear()
        self.registers.reset()
        self.stack.clear()
        self.timers.reset()
        self.keypad.reset()
        self.display.clear()
        self.scheduler.reset()
        self._waiting_for_key = False
        self._key_register = 0
        self.fault = None

    def load_program(self, data: bytes) -> Optional[Chip8Error]:
        """Copy ROM bytes to 0x200; returns ProgramTooLarge if they don't fit"""
        try:
            self.memory.load(bytes(data))
        except Chip8Error as e:
            logger.error("%s", e)
            return e
        return None

    @property
    def instruction_rate(self) -> int:
        return self.scheduler.rate

    def set_instruction_rate(self, rate: int):
        self.scheduler.rate = rate

    @property
    def awaiting_key(self) -> bool:
        return self._waiting_for_key

    @property
    def pixels(self) -> np.ndarray:
        """Read-only (32, 64, 3) RGB frame"""
        return self.display.pixels

    def tick(self, dt: float, keys: Optional[Iterable[bool]] = None) -> Optional[Chip8Error]:
        """Advance the machine by ``dt`` seconds of host time

        ``keys`` replaces the keypad snapshot before any instruction of this
        tick runs. Returns the first fatal error, if one occurred.
        """
        if self.fault is not None:
            return self.fault
        if keys is not None:
            self.keypad.update(keys)
        return self.scheduler.advance(dt, self.step, self.timers.decrement)

    def step(self) -> Optional[Chip8Error]:
        """Execute one CPU cycle"""
        if self.fault is not None:
            return self.fault

        try:
            # Handle key wait
            if self._waiting_for_key:
                self._poll_key()
                return None

            # Fetch and execute
            instruction = self.fetch()
            self.execute(instruction)
        except Chip8Error as e:
            self.fault = e
            logger.error("Halted at $%03X: %s", self.registers.PC, e)
            return e
        return None

    # ─── CPU core ───

    def fetch(self) -> Instruction:
        """Fetch and decode the opcode at PC, then advance PC by 2

        An undecodable word raises before PC moves.
        """
        pc = self.registers.PC
        opcode = self.memory.read_word(pc)
        try:
            instruction = decode(opcode)
        except InvalidOpcode:
            raise InvalidOpcode(opcode, pc) from None
        self.registers.PC = pc + 2
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("$%03X  %04X  %s", pc, opcode, instruction.mnemonic())
        return instruction

    def execute(self, ins: Instruction):
        """Execute a decoded instruction; PC already points past it"""
        op = ins.op
        x, y = ins.x, ins.y
        regs = self.registers

        # ─── 00E0 / 00EE ───
        if op is Op.CLS:
            self.display.clear()

        elif op is Op.RET:
            regs.PC = self.stack.pop()

        # ─── Flow control ───
        elif op is Op.JP:
            regs.PC = ins.nnn

        elif op is Op.CALL:
            self.stack.push(regs.PC)
            regs.PC = ins.nnn

        elif op is Op.JP_V0:
            regs.PC = ins.nnn + regs[0]

        # ─── Conditional skips ───
        elif op is Op.SE_BYTE:
            if regs[x] == ins.nn:
                self._skip()

        elif op is Op.SNE_BYTE:
            if regs[x] != ins.nn:
                self._skip()

        elif op is Op.SE_REG:
            if regs[x] == regs[y]:
                self._skip()

        elif op is Op.SNE_REG:
            if regs[x] != regs[y]:
                self._skip()

        elif op is Op.SKP:
            if self.keypad.is_pressed(regs[x]):
                self._skip()

        elif op is Op.SKNP:
            if not self.keypad.is_pressed(regs[x]):
                self._skip()

        # ─── Immediate loads ───
        elif op is Op.LD_BYTE:
            regs[x] = ins.nn

        elif op is Op.ADD_BYTE:
            regs[x] = (regs[x] + ins.nn) & 0xFF

        elif op is Op.LD_I:
            regs.I = ins.nnn

        elif op is Op.RND:
            regs[x] = self.rng.randint(0, 255) & ins.nn

        # ─── 8XYZ: ALU operations ───
        elif op is Op.LD_REG:
            regs[x] = regs[y]

        elif op is Op.OR:
            regs[x] = regs[x] | regs[y]

        elif op is Op.AND:
            regs[x] = regs[x] & regs[y]

        elif op is Op.XOR:
            regs[x] = regs[x] ^ regs[y]

        elif op is Op.ADD_REG:
            # VF = carry; written after Vx so VF wins when x == F
            result = regs[x] + regs[y]
            regs[x] = result & 0xFF
            regs[0xF] = 1 if result > 0xFF else 0

        elif op is Op.SUB:
            # VF = NOT borrow
            a, b = regs[x], regs[y]
            regs[x] = (a - b) & 0xFF
            regs[0xF] = 1 if a >= b else 0

        elif op is Op.SUBN:
            a, b = regs[x], regs[y]
            regs[x] = (b - a) & 0xFF
            regs[0xF] = 1 if b >= a else 0

        elif op is Op.SHR:
            value = regs[x]
            regs[x] = value >> 1
            regs[0xF] = value & 0x1

        elif op is Op.SHL:
            value = regs[x]
            regs[x] = (value << 1) & 0xFF
            regs[0xF] = (value >> 7) & 0x1

        # ─── DXYN: DRW Vx, Vy, nibble ───
        elif op is Op.DRW:
            self._draw_sprite(regs[x], regs[y], ins.n)

        # ─── FX07-FX65: Misc operations ───
        elif op is Op.LD_VX_DT:
            regs[x] = self.timers.delay

        elif op is Op.LD_VX_K:
            self._waiting_for_key = True
            self._key_register = x
            # Keep PC on this instruction until a key is seen
            regs.PC = regs.PC - 2
            self._poll_key()

        elif op is Op.LD_DT_VX:
            self.timers.delay = regs[x]

        elif op is Op.LD_ST_VX:
            self.timers.sound = regs[x]

        elif op is Op.ADD_I_VX:
            regs.I = regs.I + regs[x]

        elif op is Op.LD_F_VX:
            regs.I = FONT_START + regs[x] * GLYPH_SIZE

        elif op is Op.LD_B_VX:
            value = regs[x]
            self.memory.write_block(regs.I, (value // 100, (value // 10) % 10, value % 10))

        elif op is Op.LD_MEM_VX:
            self.memory.write_block(regs.I, regs.dump(x + 1))

        elif op is Op.LD_VX_MEM:
            regs.fill(self.memory.read_block(regs.I, x + 1))

        else:
            raise InvalidOpcode(ins.opcode)

    def _skip(self):
        self.registers.PC = self.registers.PC + 2

    def _poll_key(self):
        """Finish a pending FX0A if any key is down"""
        key = self.keypad.first_pressed()
        if key is None:
            return
        self.registers[self._key_register] = key
        self._waiting_for_key = False
        self.registers.PC = self.registers.PC + 2

    def _draw_sprite(self, x: int, y: int, height: int):
        """XOR an 8-pixel-wide sprite from memory[I] at (x, y); VF = collision"""
        rows = self.memory.read_block(self.registers.I, height)
        self.registers[0xF] = 0  # Reset collision flag

        for row, sprite_byte in enumerate(rows):
            for col in range(8):
                if sprite_byte & (0x80 >> col):
                    if self.display.toggle_pixel(x + col, y + row):
                        self.registers[0xF] = 1  # Collision!
