# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Easy Hasher Authors

"""File input helpers."""

from .file_loader import read_file

__all__ = ["read_file"]
