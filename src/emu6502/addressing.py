"""Addressing modes and effective address resolution."""

import enum

from emu6502.errors import InvalidAddressingModeError
from emu6502.memory import Memory
from emu6502.utils import assert_never


class AddressingMode(enum.Enum):
    """Addressing mode of a 6502 instruction."""

    IMMEDIATE = enum.auto()
    ZERO_PAGE = enum.auto()
    ZERO_PAGE_X = enum.auto()
    ZERO_PAGE_Y = enum.auto()
    ABSOLUTE = enum.auto()
    ABSOLUTE_X = enum.auto()
    ABSOLUTE_Y = enum.auto()
    INDIRECT_X = enum.auto()
    INDIRECT_Y = enum.auto()
    NONE_ADDRESSING = enum.auto()

    @property
    def operand_length(self) -> int:
        """Number of operand bytes following the opcode byte."""
        match self:
            case AddressingMode.NONE_ADDRESSING:
                return 0
            case AddressingMode.ABSOLUTE | AddressingMode.ABSOLUTE_X | AddressingMode.ABSOLUTE_Y:
                return 2
            case _:
                return 1


def _read_zero_page_pointer(memory: Memory, pointer: int) -> int:
    """Read a little-endian word from page zero, wrapping the high byte fetch within the page."""
    lo = memory.read(pointer)
    hi = memory.read((pointer + 1) & 0xff)
    return (hi << 8) | lo


def resolve_address(
    mode: AddressingMode,
    program_counter: int,
    register_x: int,
    register_y: int,
    memory: Memory,
) -> int:
    """Resolve the effective address for a given addressing mode.

    Resolution has no side effects. Advancing the program counter past the operand bytes is up to the caller.

    Args:
        mode: The addressing mode to resolve.
        program_counter: Address of the first operand byte, i.e., the byte following the opcode.
        register_x: Current value of the X index register.
        register_y: Current value of the Y index register.
        memory: Memory holding the operand bytes and any zero page pointers.

    Returns:
        addr: The effective memory address.

    Raises:
        InvalidAddressingModeError: If `mode` is `NONE_ADDRESSING`.

    """
    addr: int
    match mode:
        case AddressingMode.IMMEDIATE:
            addr = program_counter
        case AddressingMode.ZERO_PAGE:
            addr = memory.read(program_counter)
        case AddressingMode.ZERO_PAGE_X:
            addr = (memory.read(program_counter) + register_x) & 0xff
        case AddressingMode.ZERO_PAGE_Y:
            addr = (memory.read(program_counter) + register_y) & 0xff
        case AddressingMode.ABSOLUTE:
            addr = memory.read_u16(program_counter)
        case AddressingMode.ABSOLUTE_X:
            addr = (memory.read_u16(program_counter) + register_x) & 0xffff
        case AddressingMode.ABSOLUTE_Y:
            addr = (memory.read_u16(program_counter) + register_y) & 0xffff
        case AddressingMode.INDIRECT_X:
            # index first, then dereference
            pointer = (memory.read(program_counter) + register_x) & 0xff
            addr = _read_zero_page_pointer(memory, pointer)
        case AddressingMode.INDIRECT_Y:
            # dereference first, then index
            addr_base = _read_zero_page_pointer(memory, memory.read(program_counter))
            addr = (addr_base + register_y) & 0xffff
        case AddressingMode.NONE_ADDRESSING:
            msg = f"{mode.name} does not reference a memory operand."
            raise InvalidAddressingModeError(msg)
        case _:
            assert_never(mode)

    return addr
