# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Easy Hasher Authors

"""
Tests for digest backends and the dispatch table.

Check values come from the published CRC catalogue parameters and the
standard empty-message digests.
"""

import pytest

from easy_hasher import Algorithm
from easy_hasher.crypto import BACKENDS, crc8_param, get_backend
from easy_hasher.crypto import crc

from conftest import CRC_CHECK_VALUES, EMPTY_VECTORS

CHECK_INPUT = b"123456789"


class TestDispatchTable:
    """Test the Algorithm -> backend mapping."""

    def test_covers_every_algorithm(self):
        """Every algorithm has exactly one backend."""
        assert set(BACKENDS) == set(Algorithm)

    def test_read_only(self):
        """The table cannot be modified at runtime."""
        with pytest.raises(TypeError):
            BACKENDS[Algorithm.MD5] = lambda data: b""

    def test_get_backend_by_name(self):
        """Lookup accepts algorithm names."""
        assert get_backend("sha-1") is BACKENDS[Algorithm.SHA1]

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_fixed_size_on_empty_input(self, algorithm):
        """Empty input still yields a full-size digest."""
        assert len(BACKENDS[algorithm](b"")) == algorithm.digest_size

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_fixed_size_on_large_input(self, algorithm):
        """Output size does not depend on input size."""
        assert len(BACKENDS[algorithm](b"\x5a" * 100_000)) == algorithm.digest_size

    @pytest.mark.parametrize("algorithm,expected", list(EMPTY_VECTORS.items()))
    def test_empty_vectors(self, algorithm, expected):
        """Known digests of the empty message."""
        assert BACKENDS[algorithm](b"").hex() == expected


class TestCrc:
    """Test CRC parameterization."""

    @pytest.mark.parametrize("algorithm,check", list(CRC_CHECK_VALUES.items()))
    def test_check_values(self, algorithm, check):
        """CRC of '123456789' matches the catalogue check value."""
        digest = BACKENDS[algorithm](CHECK_INPUT)
        assert int.from_bytes(digest, "big") == check

    def test_crc32_is_big_endian(self):
        """CRC32 bytes are most significant first."""
        assert crc.crc32(CHECK_INPUT) == bytes.fromhex("cbf43926")

    def test_crc8_default_parameters(self):
        """crc8 is crc8_param with poly 0x07, init 0x00."""
        for data in (b"", b"\x00", CHECK_INPUT, bytes(range(256))):
            assert crc.crc8(data) == crc8_param(data, 0x07, 0x00)

    def test_crc8_dvb_s2(self):
        """CRC-8/DVB-S2: poly 0xD5, init 0x00."""
        assert crc8_param(CHECK_INPUT, 0xD5, 0x00) == b"\xbc"

    def test_crc8_cdma2000(self):
        """CRC-8/CDMA2000: poly 0x9B, init 0xFF."""
        assert crc8_param(CHECK_INPUT, 0x9B, 0xFF) == b"\xda"

    def test_crc8_init_only_affects_start(self):
        """With init set, empty input returns the init value."""
        assert crc8_param(b"", 0x07, 0x5A) == b"\x5a"

    @pytest.mark.parametrize("poly,init", [(0x100, 0x00), (0x07, -1), (0x07, 0x1FF)])
    def test_crc8_out_of_range(self, poly, init):
        """Parameters must fit in one byte."""
        with pytest.raises(ValueError):
            crc8_param(CHECK_INPUT, poly, init)

    def test_crc8_rejects_non_int(self):
        """Parameters must be integers."""
        with pytest.raises(TypeError):
            crc8_param(CHECK_INPUT, "7", 0)
