"""Test instructions for storing registers in memory, i.e., STA."""

import pytest

from emu6502.cpu import CPU
from emu6502.status import Flag
from tests.unit.cpu import (
    ABSOLUTE_LOCATION,
    INDEX,
    INDIRECT_DATA_LOCATION,
    TEST_VALUE,
    ZERO_PAGE_LOCATION,
    ZERO_PAGE_POINTER_LOCATION,
)


def test_sta(cpu: CPU):  # noqa: D103
    cpu.register_a = TEST_VALUE
    cpu.sta(ZERO_PAGE_LOCATION)

    assert cpu.memory.read(ZERO_PAGE_LOCATION) == TEST_VALUE


def test_sta_does_not_touch_flags(cpu: CPU):  # noqa: D103
    cpu.status.value = 0b0100_0001
    cpu.register_a = 0x00
    cpu.sta(ZERO_PAGE_LOCATION)

    assert cpu.status.value == 0b0100_0001


@pytest.mark.parametrize(
    ("program", "effective_address", "cycles"),
    [
        (bytes([0x85, ZERO_PAGE_LOCATION]), ZERO_PAGE_LOCATION, 3),
        (bytes([0x95, ZERO_PAGE_LOCATION]), ZERO_PAGE_LOCATION + INDEX, 4),
        (bytes([0x8d, *ABSOLUTE_LOCATION.to_bytes(2, "little")]), ABSOLUTE_LOCATION, 4),
        (bytes([0x9d, *ABSOLUTE_LOCATION.to_bytes(2, "little")]), ABSOLUTE_LOCATION + INDEX, 5),
        (bytes([0x99, *ABSOLUTE_LOCATION.to_bytes(2, "little")]), ABSOLUTE_LOCATION + INDEX, 5),
        (bytes([0x91, ZERO_PAGE_POINTER_LOCATION]), INDIRECT_DATA_LOCATION + INDEX, 6),
    ],
    ids=["zero page", "zero page,x", "absolute", "absolute,x", "absolute,y", "(indirect),y"],
)
def test_sta_addressing(cpu: CPU, program: bytes, effective_address: int, cycles: int):  # noqa: D103
    cpu.memory.write_bytes(0x0200, program)
    cpu.memory.write_u16(ZERO_PAGE_POINTER_LOCATION, INDIRECT_DATA_LOCATION)
    cpu.program_counter = 0x0200
    cpu.register_a = TEST_VALUE
    cpu.register_x = INDEX
    cpu.register_y = INDEX
    cpu.step()

    assert cpu.memory.read(effective_address) == TEST_VALUE
    assert cpu.program_counter == 0x0200 + len(program)
    assert cpu.cycles == cycles


def test_sta_indirect_x(cpu: CPU):  # noqa: D103
    cpu.memory.write_bytes_hex(0x0200, "81 03")  # STA ($03,X)
    cpu.memory.write_u16(0x03 + INDEX, INDIRECT_DATA_LOCATION)
    cpu.program_counter = 0x0200
    cpu.register_a = TEST_VALUE
    cpu.register_x = INDEX
    cpu.step()

    assert cpu.memory.read(INDIRECT_DATA_LOCATION) == TEST_VALUE
    assert cpu.program_counter == 0x0202  # noqa: PLR2004
    assert cpu.cycles == 6  # noqa: PLR2004


def test_store_then_load_round_trip(cpu: CPU):  # noqa: D103
    cpu.memory.write_bytes_hex(0x0200,
        "a9 5a"     # LDA #$5a
        "8d 00 03"  # STA $0300
        "a9 00"     # LDA #$00
        "ad 00 03", # LDA $0300
    )
    cpu.program_counter = 0x0200
    for _ in range(4):
        cpu.step()

    assert cpu.register_a == 0x5a  # noqa: PLR2004
    assert cpu.memory.read(0x0300) == 0x5a  # noqa: PLR2004
    assert not cpu.status.get(Flag.ZERO)
