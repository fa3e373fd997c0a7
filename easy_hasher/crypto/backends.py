# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Easy Hasher Authors

"""Dispatch table from Algorithm to the backend that computes it."""

from types import MappingProxyType
from typing import Callable, Mapping

from ..types.algorithm import Algorithm
from . import crc, digests

Backend = Callable[[bytes], bytes]

BACKENDS: Mapping[Algorithm, Backend] = MappingProxyType({
    Algorithm.CRC8: crc.crc8,
    Algorithm.CRC16: crc.crc16,
    Algorithm.CRC32: crc.crc32,
    Algorithm.CRC64: crc.crc64,
    Algorithm.MD2: digests.md2,
    Algorithm.MD4: digests.md4,
    Algorithm.MD5: digests.md5,
    Algorithm.SHA1: digests.sha1,
    Algorithm.SHA224: digests.sha224,
    Algorithm.SHA256: digests.sha256,
    Algorithm.SHA384: digests.sha384,
    Algorithm.SHA512: digests.sha512,
    Algorithm.SHA3_224: digests.sha3_224,
    Algorithm.SHA3_256: digests.sha3_256,
    Algorithm.SHA3_384: digests.sha3_384,
    Algorithm.SHA3_512: digests.sha3_512,
})


def get_backend(algorithm: Algorithm) -> Backend:
    """Look up the backend for an algorithm."""
    return BACKENDS[Algorithm.from_name(algorithm)]
