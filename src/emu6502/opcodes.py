"""Opcode table mapping raw instruction bytes to instruction descriptors."""

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from emu6502.addressing import AddressingMode


class Mnemonic(enum.Enum):
    """Symbolic name of an instruction."""

    ADC = enum.auto()
    BRK = enum.auto()
    INX = enum.auto()
    LDA = enum.auto()
    STA = enum.auto()
    TAX = enum.auto()

    @property
    def needs_operand(self) -> bool:
        """Whether the instruction reads or writes a memory operand."""
        return self in (Mnemonic.ADC, Mnemonic.LDA, Mnemonic.STA)


@dataclass(frozen=True, slots=True)
class OpCode:
    """Descriptor of a single opcode byte."""

    code: int
    """Raw opcode byte."""

    mnemonic: Mnemonic
    """Instruction the opcode decodes to."""

    length: int
    """Instruction length in bytes, including the opcode byte."""

    cycles: int
    """Base cycle count, without page crossing penalties."""

    mode: AddressingMode
    """Rule for computing the operand address."""

    def __str__(self) -> str:
        return f"{self.mnemonic.name} (0x{self.code:02x}, {self.mode.name.lower()})"


def build_opcode_table(opcodes: Iterable[OpCode]) -> Mapping[int, OpCode]:
    """Return a read-only map between opcode byte and its descriptor.

    Raises:
        ValueError: If an opcode byte is registered twice, does not fit into a byte, its addressing mode does not
            suit the instruction, or its length disagrees with the number of operand bytes of its addressing mode.

    """
    opcode_table: dict[int, OpCode] = {}
    for op in opcodes:
        if not (0 <= op.code <= 0xff):  # noqa: PLR2004
            msg = f"Opcode {op.code:#x} does not fit into a byte."
            raise ValueError(msg)
        if op.code in opcode_table:
            msg = f"Opcode 0x{op.code:02x} has already been registered."
            raise ValueError(msg)
        if op.mnemonic.needs_operand == (op.mode is AddressingMode.NONE_ADDRESSING):
            msg = f"Opcode 0x{op.code:02x}: {op.mnemonic.name} cannot use {op.mode.name}."
            raise ValueError(msg)
        expected_length = 1 + op.mode.operand_length
        if op.length != expected_length:
            msg = f"Opcode 0x{op.code:02x} has length {op.length}, but {op.mode.name} requires {expected_length}."
            raise ValueError(msg)
        opcode_table[op.code] = op
    return MappingProxyType(opcode_table)


OPCODES: tuple[OpCode, ...] = (
    OpCode(0x00, Mnemonic.BRK, 1, 7, AddressingMode.NONE_ADDRESSING),
    OpCode(0xaa, Mnemonic.TAX, 1, 2, AddressingMode.NONE_ADDRESSING),
    OpCode(0xe8, Mnemonic.INX, 1, 2, AddressingMode.NONE_ADDRESSING),

    OpCode(0xa9, Mnemonic.LDA, 2, 2, AddressingMode.IMMEDIATE),
    OpCode(0xa5, Mnemonic.LDA, 2, 3, AddressingMode.ZERO_PAGE),
    OpCode(0xb5, Mnemonic.LDA, 2, 4, AddressingMode.ZERO_PAGE_X),
    OpCode(0xad, Mnemonic.LDA, 3, 4, AddressingMode.ABSOLUTE),
    OpCode(0xbd, Mnemonic.LDA, 3, 4, AddressingMode.ABSOLUTE_X),
    OpCode(0xb9, Mnemonic.LDA, 3, 4, AddressingMode.ABSOLUTE_Y),
    OpCode(0xa1, Mnemonic.LDA, 2, 6, AddressingMode.INDIRECT_X),
    OpCode(0xb1, Mnemonic.LDA, 2, 5, AddressingMode.INDIRECT_Y),

    OpCode(0x85, Mnemonic.STA, 2, 3, AddressingMode.ZERO_PAGE),
    OpCode(0x95, Mnemonic.STA, 2, 4, AddressingMode.ZERO_PAGE_X),
    OpCode(0x8d, Mnemonic.STA, 3, 4, AddressingMode.ABSOLUTE),
    OpCode(0x9d, Mnemonic.STA, 3, 5, AddressingMode.ABSOLUTE_X),
    OpCode(0x99, Mnemonic.STA, 3, 5, AddressingMode.ABSOLUTE_Y),
    OpCode(0x81, Mnemonic.STA, 2, 6, AddressingMode.INDIRECT_X),
    OpCode(0x91, Mnemonic.STA, 2, 6, AddressingMode.INDIRECT_Y),

    OpCode(0x69, Mnemonic.ADC, 2, 2, AddressingMode.IMMEDIATE),
    OpCode(0x65, Mnemonic.ADC, 2, 3, AddressingMode.ZERO_PAGE),
    OpCode(0x75, Mnemonic.ADC, 2, 4, AddressingMode.ZERO_PAGE_X),
    OpCode(0x6d, Mnemonic.ADC, 3, 4, AddressingMode.ABSOLUTE),
    OpCode(0x7d, Mnemonic.ADC, 3, 4, AddressingMode.ABSOLUTE_X),
    OpCode(0x79, Mnemonic.ADC, 3, 4, AddressingMode.ABSOLUTE_Y),
    OpCode(0x61, Mnemonic.ADC, 2, 6, AddressingMode.INDIRECT_X),
    OpCode(0x71, Mnemonic.ADC, 2, 5, AddressingMode.INDIRECT_Y),
)

OPCODE_TABLE: Mapping[int, OpCode] = build_opcode_table(OPCODES)


def lookup(code: int) -> OpCode | None:
    """Return the descriptor for an opcode byte or None if the byte is unassigned."""
    return OPCODE_TABLE.get(code)
