# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Easy Hasher Authors

"""
Message digest backends.

MD5, SHA-1, SHA-2 and SHA-3 come from the cryptography package. MD2 and
MD4 are not offered there (nor reliably by OpenSSL 3 through hashlib), so
they come from pycryptodome.
"""

from Crypto.Hash import MD2, MD4
from cryptography.hazmat.primitives import hashes


def _finalize(algorithm: hashes.HashAlgorithm, data: bytes) -> bytes:
    """Run a one-shot cryptography digest."""
    digest = hashes.Hash(algorithm)
    digest.update(data)
    return digest.finalize()


def md2(data: bytes) -> bytes:
    """MD2 (RFC 1319)."""
    return MD2.new(data).digest()


def md4(data: bytes) -> bytes:
    """MD4 (RFC 1320)."""
    return MD4.new(data).digest()


def md5(data: bytes) -> bytes:
    return _finalize(hashes.MD5(), data)


def sha1(data: bytes) -> bytes:
    return _finalize(hashes.SHA1(), data)


def sha224(data: bytes) -> bytes:
    return _finalize(hashes.SHA224(), data)


def sha256(data: bytes) -> bytes:
    return _finalize(hashes.SHA256(), data)


def sha384(data: bytes) -> bytes:
    return _finalize(hashes.SHA384(), data)


def sha512(data: bytes) -> bytes:
    return _finalize(hashes.SHA512(), data)


def sha3_224(data: bytes) -> bytes:
    return _finalize(hashes.SHA3_224(), data)


def sha3_256(data: bytes) -> bytes:
    return _finalize(hashes.SHA3_256(), data)


def sha3_384(data: bytes) -> bytes:
    return _finalize(hashes.SHA3_384(), data)


def sha3_512(data: bytes) -> bytes:
    return _finalize(hashes.SHA3_512(), data)
