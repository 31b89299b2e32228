"""
RIPEMD-160, RIPEMD-256 and RIPEMD-320.

Two parallel lines of rounds run over each 64-byte block with different
message orders, rotations and round functions. RIPEMD-160 mixes the two
lines at the end of the block; the double-width variants instead keep both
lines as separate halves of the state and exchange one register after every
round. Little-endian words and length field.
"""
from typing import Callable, List

from ._bits import MASK32, rotl32, words_from_bytes, words_to_bytes
from .buffer import BlockBuffer
from .core import FixedOutputCore
from .wrapper import CoreWrapper


_R: List[int] = [
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15,
    7, 4, 13, 1, 10, 6, 15, 3, 12, 0, 9, 5, 2, 14, 11, 8,
    3, 10, 14, 4, 9, 15, 8, 1, 2, 7, 0, 6, 13, 11, 5, 12,
    1, 9, 11, 10, 0, 8, 12, 4, 13, 3, 7, 15, 14, 5, 6, 2,
    4, 0, 5, 9, 7, 12, 2, 10, 14, 1, 3, 8, 11, 6, 15, 13,
]
_RP: List[int] = [
    5, 14, 7, 0, 9, 2, 11, 4, 13, 6, 15, 8, 1, 10, 3, 12,
    6, 11, 3, 7, 0, 13, 5, 10, 14, 15, 8, 12, 4, 9, 1, 2,
    15, 5, 1, 3, 7, 14, 6, 9, 11, 8, 12, 2, 10, 0, 4, 13,
    8, 6, 4, 1, 3, 11, 15, 0, 5, 12, 2, 13, 9, 7, 10, 14,
    12, 15, 10, 4, 1, 5, 8, 7, 6, 2, 13, 14, 0, 3, 9, 11,
]
_S: List[int] = [
    11, 14, 15, 12, 5, 8, 7, 9, 11, 13, 14, 15, 6, 7, 9, 8,
    7, 6, 8, 13, 11, 9, 7, 15, 7, 12, 15, 9, 11, 7, 13, 12,
    11, 13, 6, 7, 14, 9, 13, 15, 14, 8, 13, 6, 5, 12, 7, 5,
    11, 12, 14, 15, 14, 15, 9, 8, 9, 14, 5, 6, 8, 6, 5, 12,
    9, 15, 5, 11, 6, 8, 13, 12, 5, 12, 13, 14, 11, 8, 5, 6,
]
_SP: List[int] = [
    8, 9, 9, 11, 13, 15, 15, 5, 7, 7, 8, 11, 14, 14, 12, 6,
    9, 13, 15, 7, 12, 8, 9, 11, 7, 7, 12, 7, 6, 15, 13, 11,
    9, 7, 15, 11, 8, 6, 6, 14, 12, 13, 5, 14, 13, 13, 7, 5,
    15, 5, 8, 11, 14, 14, 6, 14, 6, 9, 12, 9, 12, 5, 15, 8,
    8, 5, 12, 9, 12, 5, 14, 6, 8, 13, 6, 5, 15, 13, 11, 11,
]

# per-round additive constants, left and right line
_KL: List[int] = [0x00000000, 0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xA953FD4E]
_KR5: List[int] = [0x50A28BE6, 0x5C4DD124, 0x6D703EF3, 0x7A6D76E9, 0x00000000]
_KR4: List[int] = [0x50A28BE6, 0x5C4DD124, 0x6D703EF3, 0x00000000]

_IV160: List[int] = [0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0]
_IV320: List[int] = _IV160 + [0x76543210, 0xFEDCBA98, 0x89ABCDEF, 0x01234567, 0x3C2D1E0F]
_IV256: List[int] = _IV160[:4] + _IV320[5:9]

# register exchanged between the lines after each round
_SWAP256: List[int] = [0, 1, 2, 3]
_SWAP320: List[int] = [1, 3, 0, 2, 4]


def _f1(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


def _f2(x: int, y: int, z: int) -> int:
    return (x & y) | (~x & z)


def _f3(x: int, y: int, z: int) -> int:
    return (x | (~y & MASK32)) ^ z


def _f4(x: int, y: int, z: int) -> int:
    return (x & z) | (y & ~z)


def _f5(x: int, y: int, z: int) -> int:
    return x ^ (y | (~z & MASK32))


_F: List[Callable[[int, int, int], int]] = [_f1, _f2, _f3, _f4, _f5]


def _step5(v: List[int], f: Callable, k: int, x: int, s: int) -> List[int]:
    a, b, c, d, e = v
    t = (rotl32((a + f(b, c, d) + x + k) & MASK32, s) + e) & MASK32
    return [e, t, b, rotl32(c, 10), d]


def _step4(v: List[int], f: Callable, k: int, x: int, s: int) -> List[int]:
    a, b, c, d = v
    t = rotl32((a + f(b, c, d) + x + k) & MASK32, s)
    return [d, t, b, c]


def _compress160(h: List[int], block: bytes) -> None:
    x = words_from_bytes(block, 4, "little")
    left = list(h)
    right = list(h)
    for rnd in range(5):
        for j in range(16 * rnd, 16 * rnd + 16):
            left = _step5(left, _F[rnd], _KL[rnd], x[_R[j]], _S[j])
            right = _step5(right, _F[4 - rnd], _KR5[rnd], x[_RP[j]], _SP[j])
    t = (h[1] + left[2] + right[3]) & MASK32
    h[1] = (h[2] + left[3] + right[4]) & MASK32
    h[2] = (h[3] + left[4] + right[0]) & MASK32
    h[3] = (h[4] + left[0] + right[1]) & MASK32
    h[4] = (h[0] + left[1] + right[2]) & MASK32
    h[0] = t


def _compress_wide(h: List[int], block: bytes, rounds: int) -> None:
    # RIPEMD-256 (4 rounds) and RIPEMD-320 (5 rounds)
    x = words_from_bytes(block, 4, "little")
    half = len(h) // 2
    left = h[:half]
    right = h[half:]
    if rounds == 4:
        step, kr, swap = _step4, _KR4, _SWAP256
    else:
        step, kr, swap = _step5, _KR5, _SWAP320
    for rnd in range(rounds):
        for j in range(16 * rnd, 16 * rnd + 16):
            left = step(left, _F[rnd], _KL[rnd], x[_R[j]], _S[j])
            right = step(right, _F[rounds - 1 - rnd], kr[rnd], x[_RP[j]], _SP[j])
        i = swap[rnd]
        left[i], right[i] = right[i], left[i]
    for i, v in enumerate(left + right):
        h[i] = (h[i] + v) & MASK32


class _RipemdCore(FixedOutputCore):
    block_size = 64
    iv: List[int] = _IV160

    def __init__(self) -> None:
        self._h: List[int] = list(self.iv)
        self._block_len: int = 0

    def _compress(self, block: bytes) -> None:
        raise NotImplementedError

    def compress(self, block: bytes) -> None:
        self._block_len += 1
        self._compress(block)

    def finalize_fixed(self, buffer: BlockBuffer) -> bytes:
        bit_len = 8 * (self._block_len * self.block_size + buffer.get_pos())
        buffer.len64_padding_le(bit_len, self._compress)
        return words_to_bytes(self._h, 4, "little")


class Ripemd160Core(_RipemdCore):
    name = "ripemd160"
    output_size = 20
    iv = _IV160

    def _compress(self, block: bytes) -> None:
        _compress160(self._h, block)


class Ripemd256Core(_RipemdCore):
    name = "ripemd256"
    output_size = 32
    iv = _IV256

    def _compress(self, block: bytes) -> None:
        _compress_wide(self._h, block, 4)


class Ripemd320Core(_RipemdCore):
    name = "ripemd320"
    output_size = 40
    iv = _IV320

    def _compress(self, block: bytes) -> None:
        _compress_wide(self._h, block, 5)


class Ripemd160(CoreWrapper):
    core_class = Ripemd160Core


class Ripemd256(CoreWrapper):
    core_class = Ripemd256Core


class Ripemd320(CoreWrapper):
    core_class = Ripemd320Core
