"""CPU Logic."""

import enum
import logging
from collections.abc import Iterable
from typing import ClassVar

from emu6502.addressing import AddressingMode, resolve_address
from emu6502.errors import DecodeError, StepLimitExceededError
from emu6502.memory import Memory, MemoryBlock
from emu6502.opcodes import Mnemonic, OpCode, lookup
from emu6502.status import Flag, StatusRegister
from emu6502.utils import assert_never

logger = logging.getLogger(__name__)


class ExecutionState(enum.Enum):
    """State of the fetch/decode/execute loop."""

    RUNNING = enum.auto()
    HALTED = enum.auto()


class CPU:
    """A behavioral model of a subset of the MOS6502."""

    PROGRAM_START: ClassVar[int] = 0x8000
    RESET_VECTOR: ClassVar[int] = 0xfffc

    def __init__(self, memory: Memory | None = None) -> None:
        """Initialize a CPU with zeroed registers.

        Args:
            memory: Memory the CPU operates on. Defaults to a zeroed block covering the whole address space.

        """
        # Registers
        self.register_a: int = 0
        self.register_x: int = 0
        self.register_y: int = 0
        self.status = StatusRegister()
        self.program_counter: int = 0

        self.cycles: int = 0
        self.state = ExecutionState.HALTED
        self.memory = memory if memory is not None else MemoryBlock()

    def __repr__(self) -> str:
        return (
            f"CPU(a=0x{self.register_a:02x}, x=0x{self.register_x:02x}, y=0x{self.register_y:02x}, "
            f"pc=${self.program_counter:04x}, status={self.status!r}, state={self.state.name})"
        )

    # Memory access

    def mem_read(self, address: int) -> int:
        """Return the byte at `address`."""
        return self.memory.read(address)

    def mem_write(self, address: int, value: int) -> None:
        """Write a byte to `address`."""
        self.memory.write(address, value)

    def mem_read_u16(self, address: int) -> int:
        """Return the little-endian word at `address`."""
        return self.memory.read_u16(address)

    def mem_write_u16(self, address: int, value: int) -> None:
        """Write a little-endian word to `address`."""
        self.memory.write_u16(address, value)

    # Control surface

    def load(self, program: Iterable[int]) -> None:
        """Copy a program into memory at `PROGRAM_START` and point the reset vector at it.

        Args:
            program: Raw instruction bytes.

        Raises:
            IndexError: If the program does not fit between `PROGRAM_START` and the end of memory, or the memory
                does not reach the reset vector. Memory is left untouched in both cases.

        """
        program = bytes(program)
        if self.RESET_VECTOR + 1 >= len(self.memory):
            msg = f"Memory of {len(self.memory)} bytes does not hold the reset vector at ${self.RESET_VECTOR:04x}."
            raise IndexError(msg)
        if self.PROGRAM_START + len(program) > len(self.memory):
            msg = f"Program of {len(program)} bytes does not fit into memory at ${self.PROGRAM_START:04x}."
            raise IndexError(msg)
        for offset, byte in enumerate(program):
            self.memory.write(self.PROGRAM_START + offset, byte)
        self.mem_write_u16(self.RESET_VECTOR, self.PROGRAM_START)
        logger.debug(f"Loaded {len(program)} bytes at ${self.PROGRAM_START:04x}")

    def reset(self) -> None:
        """Zero all registers and the status byte and jump to the address held by the reset vector."""
        self.register_a = 0
        self.register_x = 0
        self.register_y = 0
        self.status.clear()
        self.cycles = 0
        self.program_counter = self.mem_read_u16(self.RESET_VECTOR)
        self.state = ExecutionState.RUNNING
        logger.debug(f"Reset, starting execution at ${self.program_counter:04x}")

    def run(self, max_steps: int | None = None) -> int:
        """Let the CPU run its program until it halts.

        Args:
            max_steps: Maximum number of instructions to execute. If set to None there is no limit on number of
                instructions.

        Returns:
            steps: Number of instructions executed, including the halting one.

        Raises:
            DecodeError: When an opcode byte without instruction is encountered.
            StepLimitExceededError: When maximum number of steps is reached.

        """
        self.state = ExecutionState.RUNNING
        steps = 0
        while self.state is ExecutionState.RUNNING:
            if max_steps is not None and steps >= max_steps:
                msg = f"CPU did not halt within {max_steps} steps."
                raise StepLimitExceededError(msg)
            self.step()
            steps += 1
        return steps

    def load_and_run(self, program: Iterable[int], max_steps: int | None = None) -> int:
        """Load a program, reset the CPU and run until it halts."""
        self.load(program)
        self.reset()
        return self.run(max_steps)

    # Execution engine

    def decode(self, address: int) -> OpCode:
        """Return the descriptor of the instruction at `address`.

        Raises:
            DecodeError: If the byte at `address` is not an assigned opcode.

        """
        code = self.mem_read(address)
        op = lookup(code)
        if op is None:
            error = DecodeError(code, address)
            logger.error(str(error))
            raise error
        return op

    def step(self) -> ExecutionState:
        """Fetch, decode and execute the instruction at the program counter.

        Returns:
            state: State of the CPU after the instruction.

        Raises:
            DecodeError: If the byte at the program counter is not an assigned opcode. The CPU state is left as it
                was before the step.

        """
        op = self.decode(self.program_counter)
        logger.debug(f"${self.program_counter:04x}: {op}")
        self.program_counter = (self.program_counter + 1) & 0xffff

        addr: int | None = None
        if op.mode is not AddressingMode.NONE_ADDRESSING:
            addr = resolve_address(op.mode, self.program_counter, self.register_x, self.register_y, self.memory)

        self.execute(op.mnemonic, addr)

        self.program_counter = (self.program_counter + op.length - 1) & 0xffff
        self.cycles += op.cycles
        return self.state

    def execute(self, mnemonic: Mnemonic, addr: int | None) -> None:
        """Run the handler of `mnemonic` against an already resolved effective address."""
        match mnemonic:
            case Mnemonic.ADC:
                self.adc(self._operand_address(mnemonic, addr))
            case Mnemonic.BRK:
                self.brk()
            case Mnemonic.INX:
                self.inx()
            case Mnemonic.LDA:
                self.lda(self._operand_address(mnemonic, addr))
            case Mnemonic.STA:
                self.sta(self._operand_address(mnemonic, addr))
            case Mnemonic.TAX:
                self.tax()
            case _:
                assert_never(mnemonic)

    @staticmethod
    def _operand_address(mnemonic: Mnemonic, addr: int | None) -> int:
        if addr is None:
            msg = f"{mnemonic.name} requires a memory operand."
            raise ValueError(msg)
        return addr

    # System instructions

    def brk(self) -> None:
        """Execute the BReaK (BRK) instruction by halting the CPU."""
        self.state = ExecutionState.HALTED
        logger.info(f"Halted by BRK, program counter at ${self.program_counter:04x}")

    # Register loading and storing

    def lda(self, addr: int) -> None:
        """Execute the LoaD Accumulator (LDA) instruction."""
        self.register_a = self.mem_read(addr)
        self.status.update_zero_and_negative(self.register_a)

    def sta(self, addr: int) -> None:
        """Execute the STore Accumulator (STA) instruction."""
        self.mem_write(addr, self.register_a)

    # Register transfer

    def tax(self) -> None:
        """Execute the Transfer Accumulator to X (TAX) instruction."""
        self.register_x = self.register_a
        self.status.update_zero_and_negative(self.register_x)

    # Unary arithmetic

    def inx(self) -> None:
        """Execute the INcrement X (INX) instruction."""
        self.register_x = (self.register_x + 1) & 0xff
        self.status.update_zero_and_negative(self.register_x)

    # Binary arithmetic

    def adc(self, addr: int) -> None:
        """Execute the ADd with Carry (ADC) instruction."""
        operand = self.mem_read(addr)

        a_initial = self.register_a
        carry_in = int(self.status.get(Flag.CARRY))
        intermediate_sum = a_initial + operand + carry_in
        result = intermediate_sum & 0xff

        self.register_a = result
        self.status.update_carry(intermediate_sum)
        self.status.update_overflow(a_initial, operand, result)
        self.status.update_zero_and_negative(result)
