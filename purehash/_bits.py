"""Word-level helpers shared by the compression engines."""
from typing import List, Sequence


MASK32: int = 0xFFFFFFFF
MASK64: int = 0xFFFFFFFFFFFFFFFF


# Rotate left on a 32-bit word
def rotl32(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & MASK32


def rotr32(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & MASK32


# Rotate left on a 64-bit word
# We mask to 64 bits so Python's unbounded ints don't grow beyond 64 bits.
def rotl64(x: int, n: int) -> int:
    return ((x << n) | (x >> (64 - n))) & MASK64


def rotr64(x: int, n: int) -> int:
    return ((x >> n) | (x << (64 - n))) & MASK64


def words_from_bytes(data: bytes, width: int, byteorder: str) -> List[int]:
    """Split ``data`` into ``width``-byte unsigned words."""
    return [int.from_bytes(data[i:i + width], byteorder) for i in range(0, len(data), width)]


def words_to_bytes(words: Sequence[int], width: int, byteorder: str) -> bytes:
    return b"".join(w.to_bytes(width, byteorder) for w in words)
