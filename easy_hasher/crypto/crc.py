# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Easy Hasher Authors

"""
CRC checksum backends.

All checksums are returned as big-endian bytes of the register width.

Parameters (check value is the CRC of b"123456789"):

    CRC8      poly 0x07 (configurable), init 0x00 (configurable),
              not reflected, no final XOR                     check 0xF4
    CRC16     CRC-16/ARC: poly 0x8005, reflected, init 0      check 0xBB3D
    CRC32     CRC-32/IEEE (zlib)                              check 0xCBF43926
    CRC64     CRC-64/XZ: ECMA-182 poly, reflected, init and
              final XOR all ones                              check 0x995DC9BBDF1939FA
"""

import zlib
from functools import lru_cache
from typing import Callable

import crcmod

CRC8_DEFAULT_POLY = 0x07
CRC8_DEFAULT_INIT = 0x00

# crcmod takes the polynomial with its leading x^n term set
_crc16_arc = crcmod.mkCrcFun(0x18005, initCrc=0x0000, rev=True, xorOut=0x0000)
# With a final XOR, crcmod's initCrc is the register start XORed with xorOut
_crc64_xz = crcmod.mkCrcFun(
    0x142F0E1EBA9EA3693, initCrc=0, rev=True, xorOut=0xFFFFFFFFFFFFFFFF
)


@lru_cache(maxsize=64)
def _crc8_function(poly: int, init: int) -> Callable[[bytes], int]:
    return crcmod.mkCrcFun(0x100 | poly, initCrc=init, rev=False, xorOut=0x00)


def _check_byte(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"CRC8 {name} must be an int, got {type(value).__name__}")
    if not (0 <= value <= 0xFF):
        raise ValueError(f"CRC8 {name} {value:#x} out of range [0x00, 0xff]")
    return value


def crc8_param(
    data: bytes, poly: int = CRC8_DEFAULT_POLY, init: int = CRC8_DEFAULT_INIT
) -> bytes:
    """
    CRC8 with an explicit polynomial and initial register value.

    Args:
        data: Bytes to checksum
        poly: Generator polynomial without the x^8 term (0x00-0xff)
        init: Initial register value (0x00-0xff)

    Returns:
        1 byte checksum

    Example:
        >>> crc8_param(b"123456789").hex()
        'f4'
    """
    poly = _check_byte("polynomial", poly)
    init = _check_byte("initial value", init)
    return _crc8_function(poly, init)(data).to_bytes(1, "big")


def crc8(data: bytes) -> bytes:
    """CRC8 with poly 0x07 and init 0x00."""
    return crc8_param(data, CRC8_DEFAULT_POLY, CRC8_DEFAULT_INIT)


def crc16(data: bytes) -> bytes:
    """CRC-16/ARC."""
    return _crc16_arc(data).to_bytes(2, "big")


def crc32(data: bytes) -> bytes:
    """CRC-32/IEEE."""
    return (zlib.crc32(data) & 0xFFFFFFFF).to_bytes(4, "big")


def crc64(data: bytes) -> bytes:
    """CRC-64/XZ."""
    return _crc64_xz(data).to_bytes(8, "big")
