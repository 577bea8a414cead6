from loguru import logger

from .chunk import ChunkType, PngChunk
from .crc32 import CRC_TABLE, calculate_crc32, checksum_of, make_crc_table, update_crc32
from .iterator import PngChunkIter, from_bytes
from .log import set_logging
from .signature import PNG_SIGNATURE, drop_png_signature

# Silent until an application opts in through set_logging
logger.disable(__name__)

__all__ = [
    "CRC_TABLE",
    "ChunkType",
    "PNG_SIGNATURE",
    "PngChunk",
    "PngChunkIter",
    "calculate_crc32",
    "checksum_of",
    "drop_png_signature",
    "from_bytes",
    "make_crc_table",
    "set_logging",
    "update_crc32",
]
