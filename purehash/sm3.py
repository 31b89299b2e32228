"""
SM3 (GB/T 32905-2016).

Eight 32-bit big-endian words, 64 rounds per 64-byte block over a 68-word
expanded schedule plus its 64 XOR-derived companions. Unlike SHA-2 the
feed-forward is an XOR.
"""
from typing import List

from ._bits import MASK32, rotl32, words_from_bytes, words_to_bytes
from .buffer import BlockBuffer
from .core import FixedOutputCore
from .wrapper import CoreWrapper


_IV: List[int] = [0x7380166F, 0x4914B2B9, 0x172442D7, 0xDA8A0600,
                  0xA96F30BC, 0x163138AA, 0xE38DEE4D, 0xB0FB0E4E]

# round constants, pre-rotated by the round index
_T: List[int] = [rotl32(0x79CC4519 if j < 16 else 0x7A879D8A, j % 32) for j in range(64)]


def _p0(x: int) -> int:
    return x ^ rotl32(x, 9) ^ rotl32(x, 17)


def _p1(x: int) -> int:
    return x ^ rotl32(x, 15) ^ rotl32(x, 23)


def _compress(state: List[int], block: bytes) -> None:
    w = words_from_bytes(block, 4, "big")
    for j in range(16, 68):
        w.append(_p1(w[j - 16] ^ w[j - 9] ^ rotl32(w[j - 3], 15)) ^ rotl32(w[j - 13], 7) ^ w[j - 6])
    a, b, c, d, e, f, g, h = state
    for j in range(64):
        a12 = rotl32(a, 12)
        ss1 = rotl32((a12 + e + _T[j]) & MASK32, 7)
        ss2 = ss1 ^ a12
        if j < 16:
            ff = a ^ b ^ c
            gg = e ^ f ^ g
        else:
            ff = (a & b) | (a & c) | (b & c)
            gg = (e & f) | (~e & g)
        tt1 = (ff + d + ss2 + (w[j] ^ w[j + 4])) & MASK32
        tt2 = (gg + h + ss1 + w[j]) & MASK32
        a, b, c, d = tt1, a, rotl32(b, 9), c
        e, f, g, h = _p0(tt2), e, rotl32(f, 19), g
    for i, v in enumerate((a, b, c, d, e, f, g, h)):
        state[i] ^= v


class Sm3Core(FixedOutputCore):
    name = "sm3"
    block_size = 64
    output_size = 32

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


class Sm3(CoreWrapper):
    core_class = Sm3Core
