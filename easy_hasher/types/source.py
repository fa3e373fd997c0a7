# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Easy Hasher Authors

"""
Input sources accepted by the hasher.

An InputSource is one of three shapes, each knowing how to turn itself
into the byte sequence that gets hashed:

- RawInput: bytes, passed through unchanged
- TextInput: str, encoded as UTF-8
- FileInput: path, whole file read into memory
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ..io.file_loader import read_file


@dataclass(frozen=True)
class RawInput:
    """Raw byte input."""

    data: bytes

    def load(self) -> bytes:
        return memoryview(self.data).tobytes()


@dataclass(frozen=True)
class TextInput:
    """Text input, hashed as its UTF-8 encoding."""

    text: str

    def load(self) -> bytes:
        return self.text.encode("utf-8")


@dataclass(frozen=True)
class FileInput:
    """
    File path input.

    load() reads the whole file eagerly and raises FileError on failure.
    """

    path: Union[str, Path]

    def load(self) -> bytes:
        return read_file(self.path)


InputSource = Union[RawInput, TextInput, FileInput]


def as_source(value) -> InputSource:
    """
    Coerce a caller value into an InputSource.

    A plain str is always treated as text. Wrap it in FileInput (or pass a
    pathlib.Path) to hash a file.

    Raises:
        TypeError: If the value has no matching input shape
    """
    if isinstance(value, (RawInput, TextInput, FileInput)):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return RawInput(bytes(value))
    if isinstance(value, str):
        return TextInput(value)
    if isinstance(value, os.PathLike):
        return FileInput(Path(value))
    raise TypeError(f"Cannot hash value of type {type(value).__name__}")
