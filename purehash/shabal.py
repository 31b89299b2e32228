"""
Shabal.

The state is three word arrays A (12 words), B and C (16 words each) plus a
64-bit block counter W. Every 64-byte block is added into B, run through a
keyed permutation, subtracted from C, and B and C swap places. There is no
length field: the counter is mixed in at every block, the last block gets
the ISO/IEC 7816-4 padding and three extra permutation rounds.

All output sizes share one algorithm. Each one starts from the state reached
by absorbing two prefix blocks holding the output size in bits, so the
initial values are computed here instead of shipped as tables.
"""
from typing import List, Tuple

from ._bits import MASK32, MASK64, rotl32, words_from_bytes, words_to_bytes
from .buffer import BlockBuffer
from .core import FixedOutputCore
from .padding import iso7816
from .wrapper import CoreWrapper


class _Engine:
    __slots__ = ("a", "b", "c", "w")

    def __init__(self, a: List[int], b: List[int], c: List[int], w: int) -> None:
        self.a = a
        self.b = b
        self.c = c
        self.w = w

    def _xor_w(self) -> None:
        self.a[0] ^= self.w & MASK32
        self.a[1] ^= self.w >> 32

    def _perm(self, m: List[int]) -> None:
        a, b, c = self.a, self.b, self.c
        for i in range(16):
            b[i] = rotl32(b[i], 17)
        for i in range(48):
            xa0 = i % 12
            xb0 = i % 16
            t = (a[xa0] ^ ((rotl32(a[(i + 11) % 12], 15) * 5) & MASK32) ^ c[(8 - i) % 16]) * 3
            a[xa0] = (t & MASK32) ^ b[(i + 13) % 16] ^ (b[(i + 9) % 16] & ~b[(i + 6) % 16]) ^ m[xb0]
            b[xb0] = ~(rotl32(b[xb0], 1) ^ a[xa0]) & MASK32
        for j in range(12):
            a[j] = (a[j] + c[(j + 11) % 16] + c[(j + 15) % 16] + c[(j + 3) % 16]) & MASK32

    def _add_m(self, m: List[int]) -> None:
        self.b = [(x + y) & MASK32 for x, y in zip(self.b, m)]

    def compress(self, m: List[int]) -> None:
        self._add_m(m)
        self._xor_w()
        self._perm(m)
        c = [(x - y) & MASK32 for x, y in zip(self.c, m)]
        self.b, self.c = c, self.b
        self.w = (self.w + 1) & MASK64

    def compress_final(self, m: List[int]) -> None:
        self._add_m(m)
        self._xor_w()
        self._perm(m)
        for _ in range(3):
            self.b, self.c = self.c, self.b
            self._xor_w()
            self._perm(m)


def _initial_state(output_bits: int) -> Tuple[List[int], List[int], List[int]]:
    """State after the prefix blocks (o..o+15) and (o+16..o+31), o = output bits."""
    engine = _Engine([0] * 12, [0] * 16, [0] * 16, MASK64)
    for start in (output_bits, output_bits + 16):
        engine.compress([start + i for i in range(16)])
    return engine.a, engine.b, engine.c


class _ShabalCore(FixedOutputCore):
    block_size = 64
    iv: Tuple[List[int], List[int], List[int]]

    def __init__(self) -> None:
        a, b, c = self.iv
        # the prefix blocks leave the counter at 1
        self._engine = _Engine(list(a), list(b), list(c), 1)

    def compress(self, block: bytes) -> None:
        self._engine.compress(words_from_bytes(block, 4, "little"))

    def finalize_fixed(self, buffer: BlockBuffer) -> bytes:
        self._engine.compress_final(words_from_bytes(buffer.pad_with(iso7816), 4, "little"))
        return words_to_bytes(self._engine.b[16 - self.output_size // 4:], 4, "little")


class Shabal192Core(_ShabalCore):
    name = "shabal192"
    output_size = 24
    iv = _initial_state(192)


class Shabal224Core(_ShabalCore):
    name = "shabal224"
    output_size = 28
    iv = _initial_state(224)


class Shabal256Core(_ShabalCore):
    name = "shabal256"
    output_size = 32
    iv = _initial_state(256)


class Shabal384Core(_ShabalCore):
    name = "shabal384"
    output_size = 48
    iv = _initial_state(384)


class Shabal512Core(_ShabalCore):
    name = "shabal512"
    output_size = 64
    iv = _initial_state(512)


class Shabal192(CoreWrapper):
    core_class = Shabal192Core


class Shabal224(CoreWrapper):
    core_class = Shabal224Core


class Shabal256(CoreWrapper):
    core_class = Shabal256Core


class Shabal384(CoreWrapper):
    core_class = Shabal384Core


class Shabal512(CoreWrapper):
    core_class = Shabal512Core
