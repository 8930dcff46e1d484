"""Behavioral emulator for a subset of the MOS6502 instruction set."""

from emu6502.addressing import AddressingMode, resolve_address
from emu6502.cpu import CPU, ExecutionState
from emu6502.errors import DecodeError, EmulatorError, InvalidAddressingModeError, StepLimitExceededError
from emu6502.memory import Memory, MemoryBlock
from emu6502.opcodes import OPCODE_TABLE, Mnemonic, OpCode
from emu6502.status import Flag, StatusRegister

__all__ = [
    "CPU",
    "OPCODE_TABLE",
    "AddressingMode",
    "DecodeError",
    "EmulatorError",
    "ExecutionState",
    "Flag",
    "InvalidAddressingModeError",
    "Memory",
    "MemoryBlock",
    "Mnemonic",
    "OpCode",
    "StatusRegister",
    "StepLimitExceededError",
    "resolve_address",
]
