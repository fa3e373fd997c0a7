# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Easy Hasher Authors

"""
Easy Hasher - Checksum and Digest Facade

One call per algorithm and input shape, one result type for all of them.

Algorithms:
    CRC8 (configurable), CRC16/ARC, CRC32, CRC64
    MD2, MD4, MD5, SHA-1
    SHA-224, SHA-256, SHA-384, SHA-512
    SHA3-224, SHA3-256, SHA3-384, SHA3-512

Modules:
    api: Named entry points (md5, string_md5, file_md5, ...)
    hasher: Generic compute/hash_bytes/hash_string/hash_file routines
    types: Algorithm, Hash and input source types
    crypto: Digest backends and the dispatch table
    io: Whole-file loader
    errors: Exception hierarchy
    config: Environment driven settings

Example Usage:
    >>> from easy_hasher import sha256, string_sha256, file_sha256
    >>>
    >>> sha256(b"").to_hex_string()
    'e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855'
    >>> string_sha256("") == sha256(b"")
    True
    >>> file_sha256("empty.bin").length
    32
"""

__version__ = "0.1.0"
__author__ = "The Easy Hasher Authors"

from . import api
from .api import *  # noqa: F401,F403

from .config import Settings, configure_logging, get_settings, settings
from .errors import (
    FileError,
    FileMetadataError,
    FileNotFoundHashError,
    FileOpenError,
    FilePermissionError,
    FileReadError,
    HashError,
    IncompleteReadError,
    UnsupportedAlgorithmError,
)
from .hasher import compute, hash_bytes, hash_file, hash_source, hash_string
from .types import (
    Algorithm,
    FileInput,
    Hash,
    InputSource,
    RawInput,
    TextInput,
    verify_hex_format,
)

# Define public API
__all__ = list(api.__all__) + [
    # Types
    "Algorithm",
    "Hash",
    "InputSource",
    "RawInput",
    "TextInput",
    "FileInput",
    "verify_hex_format",
    # Generic routines
    "compute",
    "hash_bytes",
    "hash_string",
    "hash_file",
    "hash_source",
    # Errors
    "HashError",
    "UnsupportedAlgorithmError",
    "FileError",
    "FileOpenError",
    "FileNotFoundHashError",
    "FilePermissionError",
    "FileMetadataError",
    "FileReadError",
    "IncompleteReadError",
    # Configuration
    "Settings",
    "settings",
    "get_settings",
    "configure_logging",
]
