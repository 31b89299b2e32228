"""
SHA-2 family (FIPS 180-4).

One engine covers both widths. SHA-224/256 run 64 rounds over 32-bit words
with a 64-byte block and a 64-bit length field; SHA-384/512 and the
truncated SHA-512/224, SHA-512/256 run 80 rounds over 64-bit words with a
128-byte block and a 128-bit length field. Everything is big-endian.

Round constants and initial values are derived at import the way the
standard defines them: fractional parts of the cube and square roots of the
first primes, and for SHA-512/t a SHA-512 run over the string "SHA-512/t".
"""
import math
from typing import Callable, List, NamedTuple

from ._bits import MASK32, MASK64, rotr32, rotr64, words_from_bytes, words_to_bytes
from .buffer import BlockBuffer
from .core import FixedOutputCore
from .wrapper import CoreWrapper


def _primes(n: int) -> List[int]:
    found: List[int] = []
    candidate = 2
    while len(found) < n:
        if all(candidate % p for p in found if p * p <= candidate):
            found.append(candidate)
        candidate += 1
    return found


def _icbrt(n: int) -> int:
    # integer Newton iteration from above, converges to floor(n ** (1/3))
    x = 1 << ((n.bit_length() + 2) // 3)
    while True:
        y = (2 * x + n // (x * x)) // 3
        if y >= x:
            return x
        x = y


_PRIMES: List[int] = _primes(80)

# first 64 bits of the fractional parts of the cube roots of the first 80 primes
_K512: List[int] = [_icbrt(p << 192) & MASK64 for p in _PRIMES]
# SHA-256 uses the first 32 bits of the first 64 of them
_K256: List[int] = [k >> 32 for k in _K512[:64]]

# fractional parts of the square roots of the first 8 primes, then primes 9..16
_IV512: List[int] = [math.isqrt(p << 128) & MASK64 for p in _PRIMES[:8]]
_IV384: List[int] = [math.isqrt(p << 128) & MASK64 for p in _PRIMES[8:16]]
_IV256: List[int] = [v >> 32 for v in _IV512]
# second 32 bits of the SHA-384 values
_IV224: List[int] = [v & MASK32 for v in _IV384]


class _Width(NamedTuple):
    bits: int
    mask: int
    rounds: int
    k: List[int]
    # Sigma0, Sigma1 rotations; sigma0, sigma1 rotations and shift
    big0: tuple
    big1: tuple
    small0: tuple
    small1: tuple
    rotr: Callable[[int, int], int]


_W32 = _Width(32, MASK32, 64, _K256, (2, 13, 22), (6, 11, 25), (7, 18, 3), (17, 19, 10), rotr32)
_W64 = _Width(64, MASK64, 80, _K512, (28, 34, 39), (14, 18, 41), (1, 8, 7), (19, 61, 6), rotr64)


def _compress(state: List[int], block: bytes, p: _Width) -> None:
    bits, mask, rotr = p.bits, p.mask, p.rotr

    def big(x: int, r: tuple) -> int:
        return rotr(x, r[0]) ^ rotr(x, r[1]) ^ rotr(x, r[2])

    def small(x: int, r: tuple) -> int:
        return rotr(x, r[0]) ^ rotr(x, r[1]) ^ (x >> r[2])

    w = words_from_bytes(block, bits // 8, "big")
    for t in range(16, p.rounds):
        w.append((small(w[t - 2], p.small1) + w[t - 7] + small(w[t - 15], p.small0) + w[t - 16]) & mask)

    a, b, c, d, e, f, g, h = state
    for t in range(p.rounds):
        ch = (e & f) ^ (~e & g)
        maj = (a & b) ^ (a & c) ^ (b & c)
        t1 = (h + big(e, p.big1) + ch + p.k[t] + w[t]) & mask
        t2 = (big(a, p.big0) + maj) & mask
        h, g, f, e, d, c, b, a = g, f, e, (d + t1) & mask, c, b, a, (t1 + t2) & mask
    for i, v in enumerate((a, b, c, d, e, f, g, h)):
        state[i] = (state[i] + v) & mask


class _Sha2Core(FixedOutputCore):
    width: _Width = _W32
    iv: List[int] = _IV256

    def __init__(self) -> None:
        self._state: List[int] = list(self.iv)
        self._block_len: int = 0

    def compress(self, block: bytes) -> None:
        self._block_len += 1
        _compress(self._state, block, self.width)

    def _compress_final(self, block: bytes) -> None:
        _compress(self._state, block, self.width)

    def finalize_fixed(self, buffer: BlockBuffer) -> bytes:
        bit_len = 8 * (self._block_len * self.block_size + buffer.get_pos())
        if self.width.bits == 32:
            buffer.len64_padding_be(bit_len, self._compress_final)
        else:
            buffer.len128_padding_be(bit_len, self._compress_final)
        return words_to_bytes(self._state, self.width.bits // 8, "big")[:self.output_size]


class Sha224Core(_Sha2Core):
    name = "sha224"
    block_size = 64
    output_size = 28
    iv = _IV224


class Sha256Core(_Sha2Core):
    name = "sha256"
    block_size = 64
    output_size = 32
    iv = _IV256


class Sha384Core(_Sha2Core):
    name = "sha384"
    block_size = 128
    output_size = 48
    width = _W64
    iv = _IV384


class Sha512Core(_Sha2Core):
    name = "sha512"
    block_size = 128
    output_size = 64
    width = _W64
    iv = _IV512


def _sha512_t_iv(t: int) -> List[int]:
    """SHA-512/t initial value: SHA-512 of "SHA-512/t" from a modified IV."""
    core = Sha512Core()
    core._state = [v ^ 0xA5A5A5A5A5A5A5A5 for v in _IV512]
    buffer = BlockBuffer(core.block_size)
    buffer.absorb(f"SHA-512/{t}".encode("ascii"), core.update_blocks)
    return words_from_bytes(core.finalize_fixed(buffer), 8, "big")


class Sha512_224Core(_Sha2Core):
    name = "sha512_224"
    block_size = 128
    output_size = 28
    width = _W64
    iv = _sha512_t_iv(224)


class Sha512_256Core(_Sha2Core):
    name = "sha512_256"
    block_size = 128
    output_size = 32
    width = _W64
    iv = _sha512_t_iv(256)


class Sha224(CoreWrapper):
    core_class = Sha224Core


class Sha256(CoreWrapper):
    core_class = Sha256Core


class Sha384(CoreWrapper):
    core_class = Sha384Core


class Sha512(CoreWrapper):
    core_class = Sha512Core


class Sha512_224(CoreWrapper):
    core_class = Sha512_224Core


class Sha512_256(CoreWrapper):
    core_class = Sha512_256Core
