"""
Cid Value Unit Tests
Tests for anys_cid/schemas/cid.py
"""
import io

import pytest
from pydantic import ValidationError

from fixtures.common import make_cid

from anys_cid.crypto.hashing import ZERO_HASH
from anys_cid.merkle.builder import CidBuilder
from anys_cid.schemas.cid import Cid, CidSummary
from anys_cid.schemas.versioning import BLOCK_SIZE, MAX_CID_SIZE, VERSION_RAW


class TestCidValidation:
    def test_valid(self):
        cid = Cid(VERSION_RAW, 10, b"\x01" * 32)

        assert cid.version == 0x41
        assert cid.size == 10
        assert cid.hash == b"\x01" * 32

    def test_raw_version_constant(self):
        assert Cid.VERSION_RAW == ord("A") == VERSION_RAW

    @pytest.mark.parametrize("version", [-1, 256])
    def test_version_out_of_range(self, version):
        with pytest.raises(ValueError, match="one byte"):
            Cid(version, 0, ZERO_HASH)

    @pytest.mark.parametrize("size", [-1, MAX_CID_SIZE + 1])
    def test_size_out_of_range(self, size):
        with pytest.raises(ValueError, match="64 bits"):
            Cid(VERSION_RAW, size, ZERO_HASH)

    @pytest.mark.parametrize("length", [0, 31, 33])
    def test_hash_wrong_length(self, length):
        with pytest.raises(ValueError, match="32 bytes"):
            Cid(VERSION_RAW, 0, b"\x00" * length)

    def test_hash_wrong_type(self):
        with pytest.raises(TypeError):
            Cid(VERSION_RAW, 0, "0" * 32)

    def test_bytearray_hash_normalized(self):
        cid = Cid(VERSION_RAW, 0, bytearray(32))

        assert type(cid.hash) is bytes
        assert cid == Cid(VERSION_RAW, 0, ZERO_HASH)

    def test_frozen(self, sample_cid):
        with pytest.raises(AttributeError):
            sample_cid.size = 11


class TestCidEquality:
    def test_equal_fields_equal_cids(self):
        assert make_cid() == make_cid()
        assert hash(make_cid()) == hash(make_cid())

    def test_any_field_differs(self):
        base = make_cid()

        assert base != make_cid(version=0x42)
        assert base != make_cid(size=11)
        assert base != make_cid(hash_byte=2)

    def test_usable_as_dict_key(self):
        seen = {make_cid(): "a"}
        assert seen[make_cid()] == "a"


class TestCidShortcuts:
    def test_builder(self):
        builder = Cid.builder()

        assert isinstance(builder, CidBuilder)
        assert builder.version == VERSION_RAW

    def test_from_reader(self):
        assert Cid.from_reader(VERSION_RAW, io.BytesIO(b"abc")) == Cid.from_data(VERSION_RAW, b"abc")

    def test_from_reader_chunk_size(self):
        data = bytes(range(256)) * 100

        assert Cid.from_reader(VERSION_RAW, io.BytesIO(data), chunk_size=7) == Cid.from_data(VERSION_RAW, data)

    def test_from_reader_rejects_bad_chunk_size(self):
        with pytest.raises(ValueError, match="chunk_size"):
            Cid.from_reader(VERSION_RAW, io.BytesIO(b"abc"), chunk_size=0)

    def test_from_file_chunk_size(self, temp_file_factory):
        data = bytes(range(256)) * 100
        path = temp_file_factory(data)

        with open(path, "rb") as f:
            cid, _ = Cid.from_file(VERSION_RAW, f, chunk_size=1000)

        assert cid == Cid.from_data(VERSION_RAW, data)

    def test_from_bytes_and_to_bytes(self, sample_cid):
        assert Cid.from_bytes(sample_cid.to_bytes()) == sample_cid

    def test_from_string_and_str(self, sample_cid):
        assert Cid.from_string(str(sample_cid)) == sample_cid

    def test_repr_shows_hex_hash(self, sample_cid):
        assert repr(sample_cid) == f"Cid(version=65, size=10, hash={'01' * 32!r})"


class TestDerivedProperties:
    @pytest.mark.parametrize(
        "size, blocks",
        [(0, 0), (1, 1), (BLOCK_SIZE, 1), (BLOCK_SIZE + 1, 2), (BLOCK_SIZE * 5, 5)],
    )
    def test_num_blocks(self, size, blocks):
        assert Cid(VERSION_RAW, size, ZERO_HASH).num_blocks == blocks

    def test_is_raw(self):
        assert make_cid().is_raw
        assert not make_cid(version=0x42).is_raw

    def test_hash_hex(self, sample_cid):
        assert sample_cid.hash_hex == "01" * 32


class TestSummary:
    def test_summary_fields(self, sample_cid):
        summary = sample_cid.summary()

        assert isinstance(summary, CidSummary)
        assert summary.cid == str(sample_cid)
        assert summary.version == "A"
        assert summary.size == 10
        assert summary.hash == "01" * 32
        assert summary.num_blocks == 1
        assert summary.is_raw

    def test_summary_is_frozen(self, sample_cid):
        summary = sample_cid.summary()

        with pytest.raises(ValidationError):
            summary.size = 0

    def test_summary_rejects_extra_fields(self):
        with pytest.raises(ValidationError):
            CidSummary(
                cid="A1",
                version="A",
                size=0,
                hash="00" * 32,
                num_blocks=0,
                is_raw=True,
                extra="nope",
            )

    def test_summary_json(self, sample_cid):
        data = sample_cid.summary().model_dump()
        assert set(data) == {"cid", "version", "size", "hash", "num_blocks", "is_raw"}
