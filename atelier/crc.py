"""Bitwise and table-driven CRC computation for the CCITT, CRC-16 and CRC-32 standards."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

__all__ = [
    "CrcStandard",
    "Crc",
    "CRC_CCITT",
    "CRC16",
    "CRC32",
    "STANDARDS",
    "reflect",
    "main",
]

CHECK_MESSAGE = b"123456789"


@dataclass(frozen=True)
class CrcStandard:
    """Parameters that define one CRC standard."""

    name: str
    width: int
    polynomial: int
    initial_remainder: int
    final_xor_value: int
    reflect_data: bool
    reflect_remainder: bool
    check_value: int

    def __post_init__(self) -> None:
        if self.width < 8:
            raise ValueError("CRC width must be at least 8 bits")


CRC_CCITT = CrcStandard(
    name="CRC-CCITT",
    width=16,
    polynomial=0x1021,
    initial_remainder=0xFFFF,
    final_xor_value=0x0000,
    reflect_data=False,
    reflect_remainder=False,
    check_value=0x29B1,
)

CRC16 = CrcStandard(
    name="CRC-16",
    width=16,
    polynomial=0x8005,
    initial_remainder=0x0000,
    final_xor_value=0x0000,
    reflect_data=True,
    reflect_remainder=True,
    check_value=0xBB3D,
)

CRC32 = CrcStandard(
    name="CRC-32",
    width=32,
    polynomial=0x04C11DB7,
    initial_remainder=0xFFFFFFFF,
    final_xor_value=0xFFFFFFFF,
    reflect_data=True,
    reflect_remainder=True,
    check_value=0xCBF43926,
)

STANDARDS: dict[str, CrcStandard] = {s.name: s for s in (CRC_CCITT, CRC16, CRC32)}


def reflect(data: int, n_bits: int) -> int:
    """Reverse the order of the lowest ``n_bits`` bits of ``data``."""
    reflection = 0
    for _ in range(n_bits):
        reflection = (reflection << 1) | (data & 1)
        data >>= 1
    return reflection


def _as_bytes(message: bytes | bytearray | memoryview) -> bytes:
    if isinstance(message, (str, int)):
        raise TypeError("message must be a bytes-like object")
    return bytes(message)


class Crc:
    """CRC calculator for one standard, with a precomputed lookup table."""

    def __init__(self, standard: CrcStandard = CRC_CCITT) -> None:
        self.standard = standard
        self._shift = standard.width - 8
        self._mask = (1 << standard.width) - 1
        self._top_bit = 1 << (standard.width - 1)
        self._table = tuple(self._divide(dividend << self._shift) for dividend in range(256))

    def _divide(self, remainder: int) -> int:
        """Modulo-2 division of ``remainder`` by the polynomial, eight bits at a time."""
        for _ in range(8):
            if remainder & self._top_bit:
                remainder = ((remainder << 1) ^ self.standard.polynomial) & self._mask
            else:
                remainder = (remainder << 1) & self._mask
        return remainder

    def _input(self, byte: int) -> int:
        return reflect(byte, 8) if self.standard.reflect_data else byte

    def _finish(self, remainder: int) -> int:
        if self.standard.reflect_remainder:
            remainder = reflect(remainder, self.standard.width)
        return remainder ^ self.standard.final_xor_value

    def slow(self, message: bytes | bytearray | memoryview) -> int:
        """CRC of ``message`` computed bit by bit."""
        remainder = self.standard.initial_remainder
        for byte in _as_bytes(message):
            remainder ^= self._input(byte) << self._shift
            remainder = self._divide(remainder)
        return self._finish(remainder)

    def fast(self, message: bytes | bytearray | memoryview) -> int:
        """CRC of ``message`` computed a byte at a time from the lookup table."""
        remainder = self.standard.initial_remainder
        for byte in _as_bytes(message):
            index = self._input(byte) ^ (remainder >> self._shift)
            remainder = self._table[index] ^ ((remainder << 8) & self._mask)
        return self._finish(remainder)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compute the check value of a CRC standard.")
    parser.add_argument(
        "--standard", choices=sorted(STANDARDS), default=CRC_CCITT.name, help="CRC standard"
    )
    args = parser.parse_args(argv)

    standard = STANDARDS[args.standard]
    crc = Crc(standard)
    text = CHECK_MESSAGE.decode()
    print(f"The check value for the {standard.name} standard is 0x{standard.check_value:X}")
    print(f'The crcSlow() of "{text}" is 0x{crc.slow(CHECK_MESSAGE):X}')
    print(f'The crcFast() of "{text}" is 0x{crc.fast(CHECK_MESSAGE):X}')
    return 0


if __name__ == "__main__":
    raise SystemExit(main())