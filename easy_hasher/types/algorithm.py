# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Easy Hasher Authors

"""
Supported digest and checksum algorithms.

Each member's value doubles as the name of its raw-bytes entry point in
easy_hasher.api (e.g. Algorithm.SHA3_256 -> easy_hasher.sha3_256).
"""

from enum import Enum

from ..errors import UnsupportedAlgorithmError


class Algorithm(str, Enum):
    """Digest/checksum algorithm identifier."""

    CRC8 = "crc8"
    CRC16 = "crc16"
    CRC32 = "crc32"
    CRC64 = "crc64"
    MD2 = "md2"
    MD4 = "md4"
    MD5 = "md5"
    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    SHA3_224 = "sha3_224"
    SHA3_256 = "sha3_256"
    SHA3_384 = "sha3_384"
    SHA3_512 = "sha3_512"

    @property
    def digest_size(self) -> int:
        """Fixed output size in bytes."""
        return DIGEST_SIZES[self]

    @property
    def is_checksum(self) -> bool:
        """True for the CRC family."""
        return self in (Algorithm.CRC8, Algorithm.CRC16, Algorithm.CRC32, Algorithm.CRC64)

    @classmethod
    def from_name(cls, name: str) -> "Algorithm":
        """
        Resolve an algorithm from a user supplied name.

        Matching ignores case and any "-" or "_" separators, so "SHA3-256",
        "sha3_256" and "Sha3_256" all resolve to Algorithm.SHA3_256, and
        "SHA-256" or "sha256" to Algorithm.SHA256.

        Raises:
            UnsupportedAlgorithmError: If nothing matches
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise UnsupportedAlgorithmError(repr(name))

        algorithm = _NAME_INDEX.get(_name_key(name))
        if algorithm is None:
            raise UnsupportedAlgorithmError(name)
        return algorithm

    def __str__(self) -> str:
        return self.value


DIGEST_SIZES = {
    Algorithm.CRC8: 1,
    Algorithm.CRC16: 2,
    Algorithm.CRC32: 4,
    Algorithm.CRC64: 8,
    Algorithm.MD2: 16,
    Algorithm.MD4: 16,
    Algorithm.MD5: 16,
    Algorithm.SHA1: 20,
    Algorithm.SHA224: 28,
    Algorithm.SHA256: 32,
    Algorithm.SHA384: 48,
    Algorithm.SHA512: 64,
    Algorithm.SHA3_224: 28,
    Algorithm.SHA3_256: 32,
    Algorithm.SHA3_384: 48,
    Algorithm.SHA3_512: 64,
}


def _name_key(name: str) -> str:
    return name.strip().lower().replace("-", "").replace("_", "")


# Separator-free keys stay unique ("sha3224" vs "sha224")
_NAME_INDEX = {_name_key(member.value): member for member in Algorithm}
