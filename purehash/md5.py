"""
MD5 (RFC 1321).

Four registers, 64 steps per 64-byte block in four rounds of sixteen, each
step mixing one message word, one sine-derived constant and one rotation.
Words, length field and digest are little-endian.
"""
import math
from typing import List

from ._bits import MASK32, rotl32, words_from_bytes, words_to_bytes
from .buffer import BlockBuffer
from .core import FixedOutputCore
from .wrapper import CoreWrapper


# left-rotation amounts, one row of four per round
_SHIFT: List[List[int]] = [[7, 12, 17, 22], [5, 9, 14, 20], [4, 11, 16, 23], [6, 10, 15, 21]]

# floor(2^32 * |sin(i + 1)|)
_K: List[int] = [int(abs(math.sin(i + 1)) * 2 ** 32) & MASK32 for i in range(64)]

_IV: List[int] = [0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476]


def _compress(state: List[int], block: bytes) -> None:
    x = words_from_bytes(block, 4, "little")
    a, b, c, d = state
    for i in range(64):
        r = i >> 4
        if r == 0:
            f = (b & c) | (~b & d)
            g = i
        elif r == 1:
            f = (d & b) | (~d & c)
            g = (5 * i + 1) & 15
        elif r == 2:
            f = b ^ c ^ d
            g = (3 * i + 5) & 15
        else:
            f = c ^ (b | (~d & MASK32))
            g = (7 * i) & 15
        f = (f + a + _K[i] + x[g]) & MASK32
        a, d, c = d, c, b
        b = (b + rotl32(f, _SHIFT[r][i & 3])) & MASK32
    for i, v in enumerate((a, b, c, d)):
        state[i] = (state[i] + v) & MASK32


class Md5Core(FixedOutputCore):
    name = "md5"
    block_size = 64
    output_size = 16

    def __init__(self) -> None:
        self._state: List[int] = list(_IV)
        self._block_len: int = 0

    def compress(self, block: bytes) -> None:
        self._block_len += 1
        _compress(self._state, block)

    def finalize_fixed(self, buffer: BlockBuffer) -> bytes:
        bit_len = 8 * (self._block_len * self.block_size + buffer.get_pos())
        buffer.len64_padding_le(bit_len, lambda block: _compress(self._state, block))
        return words_to_bytes(self._state, 4, "little")


class Md5(CoreWrapper):
    core_class = Md5Core
