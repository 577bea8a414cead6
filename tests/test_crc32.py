import random
import string
import zlib

from pngchunks.chunk import ChunkType, PngChunk
from pngchunks.crc32 import (
    CRC_TABLE,
    calculate_crc32,
    checksum_of,
    make_crc_table,
    update_crc32,
)


class TestCRCTable:
    def test_size(self) -> None:
        assert len(CRC_TABLE) == 256

    def test_known_entries(self) -> None:
        assert CRC_TABLE[0] == 0x00000000
        assert CRC_TABLE[1] == 0x77073096
        assert CRC_TABLE[128] == 0xEDB88320
        assert CRC_TABLE[255] == 0x2D02EF8D

    def test_deterministic(self) -> None:
        assert make_crc_table() == make_crc_table() == CRC_TABLE

    def test_32bit(self) -> None:
        assert all(0 <= entry <= 0xFFFFFFFF for entry in CRC_TABLE)


class TestCRC32:
    def test_IEND(self) -> None:
        data = "IEND".encode("utf-8")
        assert calculate_crc32(data) == 0xAE426082
        assert zlib.crc32(data) == calculate_crc32(data)

    def test_empty(self) -> None:
        data = b""
        assert calculate_crc32(data) == 0
        assert zlib.crc32(data) == calculate_crc32(data)

    def test_123456789(self) -> None:
        data = b"123456789"
        assert calculate_crc32(data) == 0xCBF43926
        assert zlib.crc32(data) == calculate_crc32(data)

    def test_16bytes(self) -> None:
        data = b"\x00\x01\x02\x03\x04\x05\x06\x07\x08\x09\x0a\x0b\x0c\x0d\x0e\x0f"
        assert zlib.crc32(data) == calculate_crc32(data)

    def test_utf8(self) -> None:
        data = "こんにちは世界".encode("utf-8")
        assert zlib.crc32(data) == calculate_crc32(data)

    def test_1MB(self) -> None:
        data = b"a" * 10**6
        assert zlib.crc32(data) == calculate_crc32(data)

    def test_random(self) -> None:
        data = "".join(
            random.choices(string.ascii_letters + string.digits, k=100)
        ).encode("utf-8")
        assert zlib.crc32(data) == calculate_crc32(data)

    def test_memoryview(self) -> None:
        data = b"Hello, world!"
        assert zlib.crc32(data) == calculate_crc32(memoryview(data))

    def test_update_in_parts(self) -> None:
        data = b"Hello, world!"
        crc = update_crc32(0xFFFFFFFF, data[:5])
        crc = update_crc32(crc, data[5:])
        assert crc ^ 0xFFFFFFFF == zlib.crc32(data)


class TestChecksumOf:
    def test_IEND(self) -> None:
        chunk = PngChunk(0, ChunkType(b"IEND"), memoryview(b""), 0xAE426082)
        assert checksum_of(chunk) == 0xAE426082
        assert chunk.actual_crc() == chunk.declared_crc

    def test_type_and_data(self) -> None:
        data = b"Comment\x00hello"
        chunk = PngChunk(len(data), ChunkType(b"tEXt"), memoryview(data), 0)
        assert checksum_of(chunk) == zlib.crc32(b"tEXt" + data)

    def test_ignores_length_and_declared_crc(self) -> None:
        data = memoryview(b"\x00\x01\x02")
        a = PngChunk(3, ChunkType(b"abCD"), data, 0x12345678)
        b = PngChunk(999, ChunkType(b"abCD"), data, 0)
        assert checksum_of(a) == checksum_of(b)

    def test_idempotent(self) -> None:
        chunk = PngChunk(4, ChunkType(b"gAMA"), memoryview(b"\x00\x00\xb1\x8f"), 0)
        assert checksum_of(chunk) == checksum_of(chunk)
