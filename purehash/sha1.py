"""SHA-1 (FIPS 180-4). Big-endian words, 80 steps per 64-byte block."""
from typing import List

from ._bits import MASK32, rotl32, words_from_bytes, words_to_bytes
from .buffer import BlockBuffer
from .core import FixedOutputCore
from .wrapper import CoreWrapper


_IV: List[int] = [0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0]

_K: List[int] = [0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6]


def _compress(state: List[int], block: bytes) -> None:
    w = words_from_bytes(block, 4, "big")
    for t in range(16, 80):
        w.append(rotl32(w[t - 3] ^ w[t - 8] ^ w[t - 14] ^ w[t - 16], 1))
    a, b, c, d, e = state
    for t in range(80):
        if t < 20:
            f = (b & c) | (~b & d)
        elif t < 40 or t >= 60:
            f = b ^ c ^ d
        else:
            f = (b & c) | (b & d) | (c & d)
        tmp = (rotl32(a, 5) + f + e + _K[t // 20] + w[t]) & MASK32
        a, b, c, d, e = tmp, a, rotl32(b, 30), c, d
    for i, v in enumerate((a, b, c, d, e)):
        state[i] = (state[i] + v) & MASK32


class Sha1Core(FixedOutputCore):
    name = "sha1"
    block_size = 64
    output_size = 20

    def __init__(self) -> None:
        self._state: List[int] = list(_IV)
        self._block_len: int = 0

    def compress(self, block: bytes) -> None:
        self._block_len += 1
        _compress(self._state, block)

    def finalize_fixed(self, buffer: BlockBuffer) -> bytes:
        bit_len = 8 * (self._block_len * self.block_size + buffer.get_pos())
        buffer.len64_padding_be(bit_len, lambda block: _compress(self._state, block))
        return words_to_bytes(self._state, 4, "big")


class Sha1(CoreWrapper):
    core_class = Sha1Core
