# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Easy Hasher Authors

"""
Whole-file loading for file hashing.

Files are read eagerly: the size is taken from filesystem metadata and
exactly that many bytes are read in one pass. Memory use is therefore
proportional to the file size; large files are flagged in the log but
still read in full.
"""

import errno
import logging
import os
from pathlib import Path
from typing import Union

from ..config import get_settings
from ..errors import (
    FileMetadataError,
    FileNotFoundHashError,
    FileOpenError,
    FilePermissionError,
    FileReadError,
    IncompleteReadError,
    describe_os_error,
)

logger = logging.getLogger(__name__)


def _open_error(path: Path, exc: OSError) -> FileOpenError:
    """Classify an error raised by open()."""
    reason = describe_os_error(exc)
    if isinstance(exc, FileNotFoundError) or exc.errno == errno.ENOENT:
        cls = FileNotFoundHashError
    elif isinstance(exc, PermissionError) or exc.errno in (errno.EACCES, errno.EPERM):
        cls = FilePermissionError
    else:
        cls = FileOpenError
    return cls(path, reason, errno=exc.errno, filename=exc.filename)


def read_file(path: Union[str, Path]) -> bytes:
    """
    Read an entire file into memory.

    Args:
        path: File to read

    Returns:
        The file's exact byte contents

    Raises:
        FileNotFoundHashError: The path does not exist
        FilePermissionError: Access was denied
        FileOpenError: Any other failure to open (e.g. path is a directory)
        FileMetadataError: The file size could not be queried
        FileReadError: The read failed part way
        IncompleteReadError: Bytes read differ from the reported size

    Example:
        >>> data = read_file("photo.jpg")
        >>> len(data) == os.path.getsize("photo.jpg")
        True
    """
    file_path = Path(path)

    try:
        f = open(file_path, "rb")
    except OSError as e:
        raise _open_error(file_path, e) from e

    with f:
        try:
            size = os.fstat(f.fileno()).st_size
        except OSError as e:
            raise FileMetadataError(file_path, describe_os_error(e)) from e

        threshold = get_settings().large_file_warning_bytes
        if size > threshold:
            logger.warning(
                f"Loading {size} bytes from {file_path} into memory "
                f"(above {threshold} byte threshold)"
            )
        else:
            logger.debug(f"Loading {size} bytes from {file_path}")

        try:
            data = f.read(size)
        except OSError as e:
            raise FileReadError(file_path, describe_os_error(e)) from e

    if len(data) != size:
        raise IncompleteReadError(file_path, expected=size, actual=len(data))

    return data
