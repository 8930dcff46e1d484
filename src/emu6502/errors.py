"""Exceptions raised by the emulator."""


class EmulatorError(Exception):
    """Base class for all errors raised while emulating the CPU."""


class DecodeError(EmulatorError):
    """The byte at the program counter does not decode to a known instruction."""

    def __init__(self, opcode: int, address: int) -> None:
        """Initialize with the offending opcode byte and the address it was fetched from."""
        self.opcode = opcode
        self.address = address
        super().__init__(f"Unknown opcode 0x{opcode:02x} at ${address:04x}")


class InvalidAddressingModeError(EmulatorError):
    """An addressing mode without a memory operand was asked for an effective address."""


class StepLimitExceededError(EmulatorError):
    """The CPU did not halt within the given number of steps."""
