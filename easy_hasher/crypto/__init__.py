# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Easy Hasher Authors

"""
Easy Hasher - Digest Backends

Each backend takes bytes and returns the fixed-size digest bytes. All
digest implementations are centralized here so the rest of the package
only ever goes through the dispatch table.

Modules:
    crc: CRC8/16/32/64 checksums (crcmod, zlib)
    digests: MD2/MD4 (pycryptodome), MD5/SHA-1/SHA-2/SHA-3 (cryptography)
    backends: Algorithm -> backend dispatch table
"""

from .backends import BACKENDS, Backend, get_backend
from .crc import CRC8_DEFAULT_INIT, CRC8_DEFAULT_POLY, crc8_param

__all__ = [
    "BACKENDS",
    "Backend",
    "get_backend",
    "crc8_param",
    "CRC8_DEFAULT_POLY",
    "CRC8_DEFAULT_INIT",
]
