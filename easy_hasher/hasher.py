# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Easy Hasher Authors

"""
Generic hashing routines.

Every hash goes through the same three steps: normalize the input to bytes,
run the backend for the algorithm, wrap the digest in a Hash. The named
entry points in easy_hasher.api are thin aliases over these functions.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .crypto.backends import get_backend
from .crypto.crc import CRC8_DEFAULT_INIT, CRC8_DEFAULT_POLY, crc8_param
from .types.algorithm import Algorithm
from .types.digest import Hash
from .types.source import FileInput, InputSource, TextInput, as_source

logger = logging.getLogger(__name__)

AlgorithmLike = Union[Algorithm, str]


def compute(
    algorithm: AlgorithmLike,
    data: bytes,
    *,
    poly: Optional[int] = None,
    init: Optional[int] = None,
) -> Hash:
    """
    Compute a digest over raw bytes.

    Args:
        algorithm: Algorithm member or name (e.g. "sha3-256")
        data: Bytes to hash
        poly: CRC8 polynomial (CRC8 only, default 0x07)
        init: CRC8 initial value (CRC8 only, default 0x00)

    Returns:
        Hash of exactly algorithm.digest_size bytes

    Raises:
        UnsupportedAlgorithmError: Unknown algorithm name
        ValueError: poly/init given for a non-CRC8 algorithm, or out of range
        TypeError: data is not bytes-like (e.g. an int or str)

    Example:
        >>> compute("md5", b"").to_hex_string()
        'd41d8cd98f00b204e9800998ecf8427e'
    """
    algo = Algorithm.from_name(algorithm)
    # Bytes-like only; int and str raise TypeError
    payload = memoryview(data).tobytes()

    if algo is Algorithm.CRC8:
        digest = crc8_param(
            payload,
            CRC8_DEFAULT_POLY if poly is None else poly,
            CRC8_DEFAULT_INIT if init is None else init,
        )
    elif poly is not None or init is not None:
        raise ValueError(f"poly/init parameters only apply to CRC8, not {algo}")
    else:
        digest = get_backend(algo)(payload)

    return Hash(digest, algo)


def hash_bytes(algorithm: AlgorithmLike, data: bytes, **crc_params) -> Hash:
    """Hash raw bytes."""
    return compute(algorithm, data, **crc_params)


def hash_string(algorithm: AlgorithmLike, text: str, **crc_params) -> Hash:
    """Hash the UTF-8 encoding of a string."""
    return compute(algorithm, TextInput(text).load(), **crc_params)


def hash_file(algorithm: AlgorithmLike, path: Union[str, Path], **crc_params) -> Hash:
    """
    Hash the full contents of a file.

    The file is read into memory in one pass before hashing.

    Raises:
        FileError: The file could not be read (see easy_hasher.errors)
    """
    algo = Algorithm.from_name(algorithm)
    data = FileInput(path).load()
    logger.debug(f"Hashing {len(data)} bytes from {path} with {algo}")
    return compute(algo, data, **crc_params)


def hash_source(algorithm: AlgorithmLike, source: InputSource, **crc_params) -> Hash:
    """
    Hash any supported input shape.

    Args:
        algorithm: Algorithm member or name
        source: RawInput/TextInput/FileInput, bytes, str (text) or os.PathLike (file)

    Raises:
        FileError: Only for file sources that cannot be read
        TypeError: If the source has no matching input shape
    """
    resolved = as_source(source)
    if isinstance(resolved, FileInput):
        return hash_file(algorithm, resolved.path, **crc_params)
    return compute(algorithm, resolved.load(), **crc_params)
