from typing import Self

from loguru import logger

from .chunk import ChunkType, PngChunk
from .signature import drop_png_signature

# Length (4 bytes) + chunk type (4 bytes) + CRC (4 bytes); the chunk data may be empty.
CHUNK_HEADER_SIZE = 8
CHUNK_CRC_SIZE = 4
MIN_CHUNK_SIZE = CHUNK_HEADER_SIZE + CHUNK_CRC_SIZE


class PngChunkIter:
    """Yields the chunks of an in-memory PNG image in file order.

    Running out of bytes in the middle of a chunk ends the iteration just like
    a cleanly consumed buffer does. Check `remaining` afterwards to tell the two
    cases apart.
    """

    def __init__(self, data: memoryview) -> None:
        self._bytes = data

    @classmethod
    def from_png_bytes(cls, data: bytes | bytearray | memoryview) -> Self | None:
        chunks = drop_png_signature(data)
        if chunks is None:
            return None
        return cls(chunks)

    @property
    def remaining(self) -> memoryview:
        return self._bytes

    def __iter__(self) -> Self:
        return self

    # https://www.w3.org/TR/png-3/#5Chunk-layout
    def __next__(self) -> PngChunk:
        if len(self._bytes) < MIN_CHUNK_SIZE:
            if len(self._bytes) > 0:
                logger.debug(f"{len(self._bytes)} trailing bytes are too short for a chunk")
            raise StopIteration

        # Big endian
        length = int.from_bytes(self._bytes[0:4], "big")
        chunk_type = ChunkType(self._bytes[4:8].tobytes())

        data_end = CHUNK_HEADER_SIZE + length
        if len(self._bytes) - CHUNK_HEADER_SIZE < length + CHUNK_CRC_SIZE:
            logger.debug(
                f'Chunk "{chunk_type}" declares {length} bytes of data, but only {len(self._bytes) - MIN_CHUNK_SIZE} bytes remain'
            )
            raise StopIteration

        chunk_data = self._bytes[CHUNK_HEADER_SIZE:data_end]
        declared_crc = int.from_bytes(self._bytes[data_end : data_end + CHUNK_CRC_SIZE], "big")
        self._bytes = self._bytes[data_end + CHUNK_CRC_SIZE :]

        return PngChunk(length, chunk_type, chunk_data, declared_crc)


def from_bytes(data: bytes | bytearray | memoryview) -> PngChunkIter | None:
    return PngChunkIter.from_png_bytes(data)
