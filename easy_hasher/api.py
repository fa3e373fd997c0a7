# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Easy Hasher Authors

"""
Named per-algorithm entry points.

Naming convention:
    {algorithm}(data: bytes)        raw bytes, never fails
    string_{algorithm}(text: str)   UTF-8 text, never fails
    file_{algorithm}(path)          whole file, raises FileError on I/O failure

Every function here is generated from the same three routines in
easy_hasher.hasher, so they differ only in the algorithm they fix.

Example:
    >>> from easy_hasher import sha256, string_md5, file_crc32
    >>> string_md5("").to_hex_string()
    'd41d8cd98f00b204e9800998ecf8427e'
"""

from pathlib import Path
from typing import Callable, Union

from .hasher import compute, hash_file, hash_string
from .types.algorithm import Algorithm
from .types.digest import Hash, hex_string

_LABELS = {
    Algorithm.CRC8: "CRC8 (poly 0x07, init 0x00)",
    Algorithm.CRC16: "CRC16/ARC",
    Algorithm.CRC32: "CRC32",
    Algorithm.CRC64: "CRC64",
    Algorithm.MD2: "MD2",
    Algorithm.MD4: "MD4",
    Algorithm.MD5: "MD5",
    Algorithm.SHA1: "SHA1",
    Algorithm.SHA224: "SHA-224",
    Algorithm.SHA256: "SHA-256",
    Algorithm.SHA384: "SHA-384",
    Algorithm.SHA512: "SHA-512",
    Algorithm.SHA3_224: "SHA3-224",
    Algorithm.SHA3_256: "SHA3-256",
    Algorithm.SHA3_384: "SHA3-384",
    Algorithm.SHA3_512: "SHA3-512",
}


_FILE_DOC = """{label} file hashing function

The whole file is read into memory before hashing.

Raises:
    FileError: The file could not be read
"""


def _named(func: Callable, name: str, doc: str) -> Callable:
    func.__name__ = name
    func.__qualname__ = name
    func.__doc__ = doc
    return func


def _bytes_entry(algorithm: Algorithm) -> Callable[[bytes], Hash]:
    def entry(data: bytes) -> Hash:
        return compute(algorithm, data)

    return _named(entry, algorithm.value, f"{_LABELS[algorithm]} raw data hashing function")


def _string_entry(algorithm: Algorithm) -> Callable[[str], Hash]:
    def entry(text: str) -> Hash:
        return hash_string(algorithm, text)

    return _named(
        entry, f"string_{algorithm.value}", f"{_LABELS[algorithm]} string hashing function"
    )


def _file_entry(algorithm: Algorithm) -> Callable[[Union[str, Path]], Hash]:
    def entry(path: Union[str, Path]) -> Hash:
        return hash_file(algorithm, path)

    return _named(
        entry, f"file_{algorithm.value}", _FILE_DOC.format(label=_LABELS[algorithm])
    )


# CRC8 with explicit parameters

def param_crc8(data: bytes, poly: int, init: int) -> Hash:
    """CRC8 raw data hashing function, based on polynomial and initial value."""
    return compute(Algorithm.CRC8, data, poly=poly, init=init)


def string_param_crc8(text: str, poly: int, init: int) -> Hash:
    """CRC8 string hashing function, based on polynomial and initial value."""
    return hash_string(Algorithm.CRC8, text, poly=poly, init=init)


def file_param_crc8(path: Union[str, Path], poly: int, init: int) -> Hash:
    """CRC8 file hashing function, based on polynomial and initial value."""
    return hash_file(Algorithm.CRC8, path, poly=poly, init=init)


# Raw data hashing functions

crc8 = _bytes_entry(Algorithm.CRC8)
crc16 = _bytes_entry(Algorithm.CRC16)
crc32 = _bytes_entry(Algorithm.CRC32)
crc64 = _bytes_entry(Algorithm.CRC64)
md2 = _bytes_entry(Algorithm.MD2)
md4 = _bytes_entry(Algorithm.MD4)
md5 = _bytes_entry(Algorithm.MD5)
sha1 = _bytes_entry(Algorithm.SHA1)
sha224 = _bytes_entry(Algorithm.SHA224)
sha256 = _bytes_entry(Algorithm.SHA256)
sha384 = _bytes_entry(Algorithm.SHA384)
sha512 = _bytes_entry(Algorithm.SHA512)
sha3_224 = _bytes_entry(Algorithm.SHA3_224)
sha3_256 = _bytes_entry(Algorithm.SHA3_256)
sha3_384 = _bytes_entry(Algorithm.SHA3_384)
sha3_512 = _bytes_entry(Algorithm.SHA3_512)

# String hashing functions

string_crc8 = _string_entry(Algorithm.CRC8)
string_crc16 = _string_entry(Algorithm.CRC16)
string_crc32 = _string_entry(Algorithm.CRC32)
string_crc64 = _string_entry(Algorithm.CRC64)
string_md2 = _string_entry(Algorithm.MD2)
string_md4 = _string_entry(Algorithm.MD4)
string_md5 = _string_entry(Algorithm.MD5)
string_sha1 = _string_entry(Algorithm.SHA1)
string_sha224 = _string_entry(Algorithm.SHA224)
string_sha256 = _string_entry(Algorithm.SHA256)
string_sha384 = _string_entry(Algorithm.SHA384)
string_sha512 = _string_entry(Algorithm.SHA512)
string_sha3_224 = _string_entry(Algorithm.SHA3_224)
string_sha3_256 = _string_entry(Algorithm.SHA3_256)
string_sha3_384 = _string_entry(Algorithm.SHA3_384)
string_sha3_512 = _string_entry(Algorithm.SHA3_512)

# File hashing functions

file_crc8 = _file_entry(Algorithm.CRC8)
file_crc16 = _file_entry(Algorithm.CRC16)
file_crc32 = _file_entry(Algorithm.CRC32)
file_crc64 = _file_entry(Algorithm.CRC64)
file_md2 = _file_entry(Algorithm.MD2)
file_md4 = _file_entry(Algorithm.MD4)
file_md5 = _file_entry(Algorithm.MD5)
file_sha1 = _file_entry(Algorithm.SHA1)
file_sha224 = _file_entry(Algorithm.SHA224)
file_sha256 = _file_entry(Algorithm.SHA256)
file_sha384 = _file_entry(Algorithm.SHA384)
file_sha512 = _file_entry(Algorithm.SHA512)
file_sha3_224 = _file_entry(Algorithm.SHA3_224)
file_sha3_256 = _file_entry(Algorithm.SHA3_256)
file_sha3_384 = _file_entry(Algorithm.SHA3_384)
file_sha3_512 = _file_entry(Algorithm.SHA3_512)

__all__ = (
    ["hex_string", "param_crc8", "string_param_crc8", "file_param_crc8"]
    + [a.value for a in Algorithm]
    + [f"string_{a.value}" for a in Algorithm]
    + [f"file_{a.value}" for a in Algorithm]
)
