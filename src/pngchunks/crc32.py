from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .chunk import PngChunk

# https://www.w3.org/TR/png-3/#5CRC-algorithm
# The CRC polynomial employed is x32 + x26 + x23 + x22 + x16 + x12 + x11 + x10 + x8 + x7 + x5 + x4 + x2 + x + 1,
# which is represented in hexadecimal as 0x04C11DB7.
# The reversed version 0xEDB88320 is used because each byte is processed from LSB to MSB.
POLYNOMIAL = 0xEDB88320

# The 32-bit CRC register is initialized to all 1's and inverted after all bytes have been processed.
CRC_MASK = 0xFFFFFFFF


def make_crc_table() -> tuple[int, ...]:
    table = []
    for n in range(256):
        c = n
        for _ in range(8):
            if c & 1:
                c = POLYNOMIAL ^ (c >> 1)
            else:
                c >>= 1
        table.append(c)
    return tuple(table)


CRC_TABLE = make_crc_table()


def update_crc32(crc: int, data: Iterable[int]) -> int:
    # Byte-at-a-time: the low byte of the register selects the table entry.
    for byte in data:
        crc = CRC_TABLE[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc


def calculate_crc32(data: Iterable[int]) -> int:
    return update_crc32(CRC_MASK, data) ^ CRC_MASK


def checksum_of(chunk: PngChunk) -> int:
    """CRC32 of a PNG chunk, calculated from the chunk type and chunk data (not the length)."""
    crc = update_crc32(CRC_MASK, chunk.chunk_type.raw)
    crc = update_crc32(crc, chunk.chunk_data)
    return crc ^ CRC_MASK
