from dataclasses import dataclass

from . import crc32

# The property bit of each byte of a chunk type is bit 5 (value 32), i.e. lowercase letter.
# https://www.w3.org/TR/png-3/#5Chunk-naming-conventions
PROPERTY_BIT = 0x20


@dataclass(frozen=True)
class ChunkType:
    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != 4:
            raise ValueError(f"Chunk type must be 4 bytes, but got {len(self.raw)}")
        object.__setattr__(self, "raw", bytes(self.raw))

    # Ancillary bit: 0 (uppercase) = critical, 1 (lowercase) = ancillary
    def is_ancillary(self) -> bool:
        return self.raw[0] & PROPERTY_BIT != 0

    # Private bit: 0 (uppercase) = public, 1 (lowercase) = private
    def is_private(self) -> bool:
        return self.raw[1] & PROPERTY_BIT != 0

    # Reserved bit: must be 0 (uppercase) in files conforming to the current version of PNG
    def is_reserved(self) -> bool:
        return self.raw[2] & PROPERTY_BIT != 0

    # Safe-to-copy bit: 0 (uppercase) = unsafe to copy, 1 (lowercase) = safe to copy
    def is_safe_to_copy(self) -> bool:
        return self.raw[3] & PROPERTY_BIT != 0

    def __str__(self) -> str:
        return "".join(chr(b) for b in self.raw)

    def __repr__(self) -> str:
        return f"ChunkType({str(self)!r})"


# https://www.w3.org/TR/png-3/#5Chunk-layout
@dataclass(frozen=True)
class PngChunk:
    length: int
    chunk_type: ChunkType
    # A view into the buffer the chunk was read from, not a copy
    chunk_data: memoryview
    declared_crc: int

    def actual_crc(self) -> int:
        return crc32.checksum_of(self)

    def __str__(self) -> str:
        return f"{self.chunk_type} ({self.length} bytes, crc: {hex(self.declared_crc)})"
