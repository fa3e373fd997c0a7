# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Easy Hasher Authors

"""
Exception types raised by Easy Hasher.

Digest computation over bytes or text never fails. Only reading a file
(and looking up an algorithm by name) can raise.
"""

from pathlib import Path
from typing import Optional, Union


class HashError(Exception):
    """Base class for all Easy Hasher errors."""


class UnsupportedAlgorithmError(HashError, ValueError):
    """Raised when an algorithm name does not match any supported digest."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unsupported hash algorithm: {name!r}")

    def __reduce__(self):
        return (type(self), (self.name,))


class FileError(HashError):
    """
    A file could not be loaded for hashing.

    Attributes:
        path: Path that was requested
        reason: Human readable description of the underlying failure
    """

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"

    def __reduce__(self):
        return (type(self), (self.path, self.reason))


class FileOpenError(FileError):
    """
    The file could not be opened.

    Attributes:
        errno: errno of the failed open() call, if known
        filename: Filename reported by the failed open() call, if known
    """

    def __init__(
        self,
        path: Union[str, Path],
        reason: str,
        errno: Optional[int] = None,
        filename: Optional[Union[str, Path]] = None,
    ):
        super().__init__(path, reason)
        self.errno = errno
        self.filename = filename

    def __reduce__(self):
        return (type(self), (self.path, self.reason, self.errno, self.filename))


class FileNotFoundHashError(FileOpenError, FileNotFoundError):
    """The file does not exist."""


class FilePermissionError(FileOpenError, PermissionError):
    """Access to the file was denied."""


class FileMetadataError(FileError):
    """The file size could not be queried."""


class FileReadError(FileError):
    """The read itself failed after the file was opened."""


class IncompleteReadError(FileError):
    """
    Fewer (or more) bytes were read than the file size reported.

    Attributes:
        expected: Size reported by filesystem metadata
        actual: Number of bytes actually read
    """

    def __init__(self, path: Union[str, Path], expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            path, f"incomplete read: expected {expected} bytes, got {actual}"
        )

    def __reduce__(self):
        return (type(self), (self.path, self.expected, self.actual))


def describe_os_error(exc: OSError) -> str:
    """Render an OSError as 'strerror' or fall back to str(exc)."""
    strerror: Optional[str] = exc.strerror
    return strerror if strerror else str(exc)
