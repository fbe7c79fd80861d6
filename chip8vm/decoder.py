"""Opcode decoding into tagged instruction values

A raw 16-bit word is turned into an :class:`Instruction` before anything is
executed, so an unknown opcode is rejected before it can touch machine state.
"""

from dataclasses import dataclass
from enum import Enum, auto

from .errors import InvalidOpcode


class Op(Enum):
    CLS = auto()        # 00E0
    RET = auto()        # 00EE
    JP = auto()         # 1NNN
    CALL = auto()       # 2NNN
    SE_BYTE = auto()    # 3XNN
    SNE_BYTE = auto()   # 4XNN
    SE_REG = auto()     # 5XY0
    LD_BYTE = auto()    # 6XNN
    ADD_BYTE = auto()   # 7XNN
    LD_REG = auto()     # 8XY0
    OR = auto()         # 8XY1
    AND = auto()        # 8XY2
    XOR = auto()        # 8XY3
    ADD_REG = auto()    # 8XY4
    SUB = auto()        # 8XY5
    SHR = auto()        # 8XY6
    SUBN = auto()       # 8XY7
    SHL = auto()        # 8XYE
    SNE_REG = auto()    # 9XY0
    LD_I = auto()       # ANNN
    JP_V0 = auto()      # BNNN
    RND = auto()        # CXNN
    DRW = auto()        # DXYN
    SKP = auto()        # EX9E
    SKNP = auto()       # EXA1
    LD_VX_DT = auto()   # FX07
    LD_VX_K = auto()    # FX0A
    LD_DT_VX = auto()   # FX15
    LD_ST_VX = auto()   # FX18
    ADD_I_VX = auto()   # FX1E
    LD_F_VX = auto()    # FX29
    LD_B_VX = auto()    # FX33
    LD_MEM_VX = auto()  # FX55
    LD_VX_MEM = auto()  # FX65


_ALU_OPS = {
    0x0: Op.LD_REG, 0x1: Op.OR, 0x2: Op.AND, 0x3: Op.XOR, 0x4: Op.ADD_REG,
    0x5: Op.SUB, 0x6: Op.SHR, 0x7: Op.SUBN, 0xE: Op.SHL,
}

_KEY_OPS = {0x9E: Op.SKP, 0xA1: Op.SKNP}

_MISC_OPS = {
    0x07: Op.LD_VX_DT, 0x0A: Op.LD_VX_K, 0x15: Op.LD_DT_VX, 0x18: Op.LD_ST_VX,
    0x1E: Op.ADD_I_VX, 0x29: Op.LD_F_VX, 0x33: Op.LD_B_VX, 0x55: Op.LD_MEM_VX,
    0x65: Op.LD_VX_MEM,
}

# Families selected by the top nibble alone
_SIMPLE_OPS = {
    0x1: Op.JP, 0x2: Op.CALL, 0x3: Op.SE_BYTE, 0x4: Op.SNE_BYTE,
    0x5: Op.SE_REG, 0x6: Op.LD_BYTE, 0x7: Op.ADD_BYTE, 0x9: Op.SNE_REG,
    0xA: Op.LD_I, 0xB: Op.JP_V0, 0xC: Op.RND, 0xD: Op.DRW,
}

_MNEMONICS = {
    Op.CLS: "CLS",
    Op.RET: "RET",
    Op.JP: "JP ${nnn:03X}",
    Op.CALL: "CALL ${nnn:03X}",
    Op.SE_BYTE: "SE V{x:X}, ${nn:02X}",
    Op.SNE_BYTE: "SNE V{x:X}, ${nn:02X}",
    Op.SE_REG: "SE V{x:X}, V{y:X}",
    Op.LD_BYTE: "LD V{x:X}, ${nn:02X}",
    Op.ADD_BYTE: "ADD V{x:X}, ${nn:02X}",
    Op.LD_REG: "LD V{x:X}, V{y:X}",
    Op.OR: "OR V{x:X}, V{y:X}",
    Op.AND: "AND V{x:X}, V{y:X}",
    Op.XOR: "XOR V{x:X}, V{y:X}",
    Op.ADD_REG: "ADD V{x:X}, V{y:X}",
    Op.SUB: "SUB V{x:X}, V{y:X}",
    Op.SHR: "SHR V{x:X}",
    Op.SUBN: "SUBN V{x:X}, V{y:X}",
    Op.SHL: "SHL V{x:X}",
    Op.SNE_REG: "SNE V{x:X}, V{y:X}",
    Op.LD_I: "LD I, ${nnn:03X}",
    Op.JP_V0: "JP V0, ${nnn:03X}",
    Op.RND: "RND V{x:X}, ${nn:02X}",
    Op.DRW: "DRW V{x:X}, V{y:X}, {n}",
    Op.SKP: "SKP V{x:X}",
    Op.SKNP: "SKNP V{x:X}",
    Op.LD_VX_DT: "LD V{x:X}, DT",
    Op.LD_VX_K: "LD V{x:X}, K",
    Op.LD_DT_VX: "LD DT, V{x:X}",
    Op.LD_ST_VX: "LD ST, V{x:X}",
    Op.ADD_I_VX: "ADD I, V{x:X}",
    Op.LD_F_VX: "LD F, V{x:X}",
    Op.LD_B_VX: "LD B, V{x:X}",
    Op.LD_MEM_VX: "LD [I], V{x:X}",
    Op.LD_VX_MEM: "LD V{x:X}, [I]",
}


@dataclass(frozen=True)
class Instruction:
    """One decoded opcode; operand fields are sliced from the raw word"""
    op: Op
    opcode: int

    @property
    def nnn(self) -> int:
        return self.opcode & 0x0FFF     # 12-bit address

    @property
    def nn(self) -> int:
        return self.opcode & 0x00FF     # 8-bit constant

    @property
    def n(self) -> int:
        return self.opcode & 0x000F     # 4-bit constant

    @property
    def x(self) -> int:
        return (self.opcode >> 8) & 0x0F

    @property
    def y(self) -> int:
        return (self.opcode >> 4) & 0x0F

    def mnemonic(self) -> str:
        """Disassemble to human-readable text"""
        return _MNEMONICS[self.op].format(
            x=self.x, y=self.y, n=self.n, nn=self.nn, nnn=self.nnn)

    def __str__(self):
        return self.mnemonic()


def decode(opcode: int) -> Instruction:
    """Decode a 16-bit word, raising :class:`InvalidOpcode` if unknown"""
    opcode &= 0xFFFF
    family = (opcode >> 12) & 0xF

    if family == 0x0:
        if opcode == 0x00E0:
            op = Op.CLS
        elif opcode == 0x00EE:
            op = Op.RET
        else:
            op = None
    elif family == 0x8:
        op = _ALU_OPS.get(opcode & 0x000F)
    elif family == 0xE:
        op = _KEY_OPS.get(opcode & 0x00FF)
    elif family == 0xF:
        op = _MISC_OPS.get(opcode & 0x00FF)
    else:
        op = _SIMPLE_OPS[family]

    if op is None:
        raise InvalidOpcode(opcode)
    return Instruction(op, opcode)
