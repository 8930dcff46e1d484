"""Fixtures for testing."""

import pytest

from emu6502.cpu import CPU
from emu6502.memory import MemoryBlock


@pytest.fixture
def memory() -> MemoryBlock:
    """Return 1K of RAM initialized to zero."""
    return MemoryBlock(1024)


@pytest.fixture
def cpu(memory: MemoryBlock) -> CPU:
    """Return a CPU with 1K of RAM initialized to zero."""
    return CPU(memory)
