"""Processor status register."""

import enum


class Flag(enum.IntEnum):
    """Bit index of a flag within the status register."""

    CARRY = 0
    ZERO = 1
    OVERFLOW = 6
    NEGATIVE = 7


class StatusRegister:
    """Eight bit status register of the CPU.

    Only the flags in `Flag` carry meaning; the remaining bits are kept as written.
    """

    def __init__(self, value: int = 0) -> None:
        """Initialize the register with a raw status byte."""
        self.value = value & 0xff

    def __int__(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StatusRegister):
            return self.value == other.value
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        flags = "".join(
            letter if self.get(flag) else "-"
            for letter, flag in (("N", Flag.NEGATIVE), ("V", Flag.OVERFLOW), ("Z", Flag.ZERO), ("C", Flag.CARRY))
        )
        return f"StatusRegister(0x{self.value:02x} {flags})"

    def get(self, flag: Flag) -> bool:
        """Return True if `flag` is set."""
        return (self.value >> flag) & 1 == 1

    def set(self, flag: Flag, on: bool) -> None:  # noqa: FBT001
        """Set or clear a single flag, leaving all other bits untouched."""
        self.value &= ~(1 << flag) & 0xff
        self.value |= int(on) << flag

    def clear(self) -> None:
        """Clear every bit of the register."""
        self.value = 0

    def update_zero_and_negative(self, result: int) -> None:
        """Update the zero (Z) and negative (N) flags based on the result of an operation.

        Args:
            result: Byte resulting from an operation that updates the status register.

        """
        self.set(Flag.ZERO, result & 0xff == 0)
        self.set(Flag.NEGATIVE, (result >> 7) & 1 == 1)

    def update_carry(self, intermediate_sum: int) -> None:
        """Set the carry (C) flag if an unmasked sum does not fit into eight bits."""
        self.set(Flag.CARRY, intermediate_sum > 0xff)  # noqa: PLR2004

    def update_overflow(self, a_initial: int, operand: int, result: int) -> None:
        """Update the overflow (V) flag based on the result of a signed addition.

        Args:
            a_initial: Accumulator value before operation.
            operand: Operand of potentially overflowing operation.
            result: Accumulator value after operation.

        """
        inputs_same_sign = ~(a_initial ^ operand) & 0x80
        result_sign_different_from_inputs = (a_initial ^ result) & 0x80
        self.set(Flag.OVERFLOW, inputs_same_sign & result_sign_different_from_inputs != 0)
