# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Easy Hasher Authors

"""
Digest result wrapper and hex rendering.

Every hashing entry point returns a Hash. It is plain immutable data: the
raw digest bytes plus the algorithm that produced them.
"""

import re
from dataclasses import dataclass
from typing import Optional

from .algorithm import Algorithm

_HEX_RE = re.compile(r"(?:[0-9a-f]{2})*")


def hex_string(data: bytes) -> str:
    """
    Render bytes as lowercase hex, two digits per byte, no separators.

    Args:
        data: Bytes to render (may be empty)

    Returns:
        String of length 2 * len(data)

    Example:
        >>> hex_string(b"\\x00\\xff\\x10")
        '00ff10'
        >>> hex_string(b"")
        ''
    """
    return bytes(data).hex()


def verify_hex_format(value: str, algorithm: Optional[Algorithm] = None) -> bool:
    """
    Verify that a string looks like a rendered digest.

    Args:
        value: String to validate
        algorithm: If given, also require the length of that algorithm's digest

    Returns:
        True if value is lowercase hex of even length (and the right size)

    Example:
        >>> verify_hex_format("d41d8cd98f00b204e9800998ecf8427e", Algorithm.MD5)
        True
        >>> verify_hex_format("not a hash")
        False
    """
    if not isinstance(value, str):
        return False
    if not _HEX_RE.fullmatch(value):
        return False
    if algorithm is not None and len(value) != 2 * algorithm.digest_size:
        return False
    return True


@dataclass(frozen=True)
class Hash:
    """
    Result of a digest computation.

    Attributes:
        digest: Raw digest bytes
        algorithm: Algorithm that produced the digest (None if built by hand)

    Example:
        >>> h = Hash(bytes.fromhex("cbf43926"), Algorithm.CRC32)
        >>> h.to_hex_string()
        'cbf43926'
        >>> len(h)
        4
    """

    digest: bytes
    algorithm: Optional[Algorithm] = None

    def __post_init__(self) -> None:
        """Normalize the payload to immutable bytes."""
        if isinstance(self.digest, (bytearray, memoryview)):
            object.__setattr__(self, "digest", bytes(self.digest))
        elif not isinstance(self.digest, bytes):
            raise TypeError(
                f"Hash digest must be bytes, got {type(self.digest).__name__}"
            )

    @property
    def length(self) -> int:
        """Digest length in bytes."""
        return len(self.digest)

    def __len__(self) -> int:
        return len(self.digest)

    def __str__(self) -> str:
        return self.to_hex_string()

    def to_hex_string(self) -> str:
        """Express the digest as a lowercase hex string."""
        return hex_string(self.digest)

    def to_bytes(self) -> bytes:
        """Get the digest as raw bytes."""
        return self.digest

    # Alias
    to_vec = to_bytes

    def to_int(self) -> int:
        """Interpret the digest as a big-endian unsigned integer."""
        return int.from_bytes(self.digest, "big")
