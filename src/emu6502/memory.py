"""Memory for running the CPU."""

import logging
from abc import ABC, abstractmethod
from typing import override

logger = logging.getLogger(__name__)

ADDRESS_SPACE_SIZE = 0x10000
"""Number of bytes addressable with a 16 bit address."""


class Memory(ABC):
    """Abstract interface for computer memory."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of bytes in the memory object."""

    @abstractmethod
    def read(self, address: int) -> int:
        """Return the byte at the given memory location.

        Args:
            address: Memory location to read byte from.

        Returns:
            value: Value of byte read from memory.

        Raises:
            IndexError: If address is outside of memory.

        """

    @abstractmethod
    def write(self, address: int, value: int) -> None:
        """Write a value to a memory location.

        Args:
            address: Memory location to write the byte to.
            value: Value of the byte. Anything above the eight least significant bits is discarded by a bit mask.

        Raises:
            IndexError: If address is outside of memory.

        """

    def read_u16(self, address: int) -> int:
        """Return the little-endian word whose low byte is at `address`.

        The high byte is read from the following address, wrapping around at the end of the 16 bit address space.
        """
        lo = self.read(address)
        hi = self.read((address + 1) & 0xffff)
        return (hi << 8) | lo

    def write_u16(self, address: int, value: int) -> None:
        """Write `value` as a little-endian word, low byte at `address`."""
        self.write(address, value & 0xff)
        self.write((address + 1) & 0xffff, (value >> 8) & 0xff)


class MemoryBlock(Memory):
    """Simple block of contiguous memory of configurable size."""

    def __init__(self, size: int = ADDRESS_SPACE_SIZE) -> None:
        """Initialize empty memory of given size.

        Args:
            size: Number of bytes in the memory. Defaults to the full 16 bit address space.

        Raises:
            ValueError: If size is not positive or larger than the address space.

        """
        super().__init__()
        if not (0 < size <= ADDRESS_SPACE_SIZE):
            msg = f"Memory size must be between 1 and {ADDRESS_SPACE_SIZE} bytes, got {size}."
            raise ValueError(msg)
        self.mem = bytearray(size)

    def _check_address_bounds(self, address: int) -> None:
        """Check if memory address is within the bound of this memory."""
        if not (0 <= address < len(self.mem)):
            msg = f"Address {address:04x} out of memory range."
            raise IndexError(msg)

    @override
    def __len__(self) -> int:
        return len(self.mem)

    @override
    def read(self, address: int) -> int:
        self._check_address_bounds(address)
        return self.mem[address]

    @override
    def write(self, address: int, value: int) -> None:
        self._check_address_bounds(address)
        self.mem[address] = value & 0xff

    def write_bytes(self, start_address: int, sequence: bytes) -> None:
        """Write a sequence of bytes to a memory region.

        Args:
            start_address: First memory address to be overwritten by `sequence`.
            sequence: Sequence of bytes to write to memory region.

        Raises:
            IndexError: If sequence at specified location exceeds the bounds of the memory.

        """
        self._check_address_bounds(start_address)
        if sequence:
            self._check_address_bounds(start_address + len(sequence) - 1)
        self.mem[start_address:start_address + len(sequence)] = sequence
        logger.debug(f"Wrote {len(sequence)} bytes starting at ${start_address:04x}")

    def write_bytes_hex(self, start_address: int, sequence: str) -> None:
        """Write a sequence of bytes written as a string of hexadecimal digits to a memory region.

        Args:
            start_address: First memory address to be overwritten by `sequence`.
            sequence: Sequence of bytes written as hexadecimal digits, optionally separated by whitespace.

        Raises:
            IndexError: If sequence at specified location exceeds the bounds of the memory.

        """
        self.write_bytes(start_address, bytes.fromhex(sequence))
