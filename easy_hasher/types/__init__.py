# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Easy Hasher Authors

"""
Easy Hasher - Core Data Types

Modules:
    algorithm: Algorithm identifiers and fixed digest sizes
    digest: Hash result wrapper and hex rendering
    source: Input shapes (raw bytes, text, file path)

Example Usage:
    >>> from easy_hasher.types import Algorithm, Hash
    >>>
    >>> Algorithm.from_name("SHA3-256").digest_size
    32
    >>> Hash(b"\\xca\\xfe").to_hex_string()
    'cafe'
"""

from .algorithm import Algorithm, DIGEST_SIZES
from .digest import Hash, hex_string, verify_hex_format
from .source import FileInput, InputSource, RawInput, TextInput, as_source

__all__ = [
    # Algorithms
    "Algorithm",
    "DIGEST_SIZES",
    # Results
    "Hash",
    "hex_string",
    "verify_hex_format",
    # Inputs
    "InputSource",
    "RawInput",
    "TextInput",
    "FileInput",
    "as_source",
]
