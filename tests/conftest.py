# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Easy Hasher Authors

"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from easy_hasher import Algorithm

# Digests of the empty input
EMPTY_VECTORS = {
    Algorithm.CRC8: "00",
    Algorithm.CRC16: "0000",
    Algorithm.CRC32: "00000000",
    Algorithm.CRC64: "0000000000000000",
    Algorithm.MD2: "8350e5a3e24c153df2275c9f80692773",
    Algorithm.MD4: "31d6cfe0d16ae931b73c59d7e0c089c0",
    Algorithm.MD5: "d41d8cd98f00b204e9800998ecf8427e",
    Algorithm.SHA1: "da39a3ee5e6b4b0d3255bfef95601890afd80709",
    Algorithm.SHA224: "d14a028c2a3a2bc9476102bb288234c415a2b01f828ea62ac5b3e42f",
    Algorithm.SHA256: "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
    Algorithm.SHA3_256: "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a",
}

# CRC check values over b"123456789"
CRC_CHECK_VALUES = {
    Algorithm.CRC8: 0xF4,
    Algorithm.CRC16: 0xBB3D,
    Algorithm.CRC32: 0xCBF43926,
    Algorithm.CRC64: 0x995DC9BBDF1939FA,
}


@pytest.fixture
def sample_bytes() -> bytes:
    """Binary payload with every byte value."""
    return bytes(range(256)) * 4


@pytest.fixture
def sample_file(tmp_path: Path, sample_bytes: bytes) -> Path:
    """File holding sample_bytes."""
    path = tmp_path / "sample.bin"
    path.write_bytes(sample_bytes)
    return path


@pytest.fixture
def empty_file(tmp_path: Path) -> Path:
    """Zero-length file."""
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    return path
