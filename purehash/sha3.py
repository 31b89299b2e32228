"""
Keccak sponge family: SHA-3, Keccak and SHAKE.

This module implements the Keccak-f[1600] permutation as specified in
FIPS 202 using only Python built-ins, and the sponge cores built on it:

- SHA3-224/256/384/512 (domain byte 0x06)
- Keccak-224/256/384/512, the pre-standard padding (0x01) used by Ethereum
- Keccak-256-Full, Keccak-256 padding with the whole 200-byte state as output
- SHAKE128/SHAKE256 extendable output (0x1F)

The goal is clarity over speed. For production workloads, prefer hashlib's
sha3_* and shake_* which are implemented in optimized C.
"""
from typing import List

from ._bits import MASK64, rotl64
from .buffer import BlockBuffer
from .core import ExtendableOutputCore, FixedOutputCore, XofReaderCore
from .padding import sponge
from .wrapper import CoreWrapper, XofWrapper


# Round constants for Keccak-f[1600]
_RC: List[int] = [0x0000000000000001, 0x0000000000008082, 0x800000000000808A, 0x8000000080008000, 0x000000000000808B,
                  0x0000000080000001, 0x8000000080008081, 0x8000000000008009, 0x000000000000008A, 0x0000000000000088,
                  0x0000000080008009, 0x000000008000000A, 0x000000008000808B, 0x800000000000008B, 0x8000000000008089,
                  0x8000000000008003, 0x8000000000008002, 0x8000000000000080, 0x000000000000800A, 0x800000008000000A,
                  0x8000000080008081, 0x8000000000008080, 0x0000000080000001, 0x8000000080008008]

# Rotation offsets r[x][y]
_RO: List[List[int]] = [
    [0, 36, 3, 41, 18],
    [1, 44, 10, 45, 2],
    [62, 6, 43, 15, 61],
    [28, 55, 25, 21, 56],
    [27, 20, 39, 8, 14]
]

# Domain separation bytes
_KECCAK: int = 0x01
_SHA3: int = 0x06
_SHAKE: int = 0x1F


def _keccak_f(s: List[int]) -> List[int]:
    """Apply the Keccak-f[1600] permutation to the 5x5 state array.

    The state is represented as a flat list of 25 unsigned 64-bit words
    in "lane order": index = x + 5*y for coordinates (x, y) with x,y in 0..4.

    Steps per round in simple terms:
    - Theta: mix each column so every bit depends on neighbors.
    - Rho+Pi: rotate each 64-bit lane, then move it to a new position.
    - Chi: apply a small non-linear rule row-wise (uses AND and NOT).
    - Iota: xor a round constant to break symmetry.
    """
    for rc in _RC:
        # Theta
        c = [s[x] ^ s[x + 5] ^ s[x + 10] ^ s[x + 15] ^ s[x + 20] for x in range(5)]
        d = [c[(x - 1) % 5] ^ rotl64(c[(x + 1) % 5], 1) for x in range(5)]
        for i in range(25):
            s[i] ^= d[i % 5]
        # Rho and Pi
        b = [0] * 25
        for y in range(5):
            for x in range(5):
                # (x, y) -> (y, (2x+3y) mod 5)
                b[y + 5 * ((2 * x + 3 * y) % 5)] = rotl64(s[x + 5 * y], _RO[x][y])
        # Chi
        for y in range(5):
            t = b[5 * y:5 * y + 5]
            for x in range(5):
                s[x + 5 * y] = (t[x] ^ ((~t[(x + 1) % 5]) & t[(x + 2) % 5])) & MASK64
        # Iota
        s[0] ^= rc
    return s


def _absorb(s: List[int], block: bytes) -> None:
    # XOR the block into the first rate/8 lanes (little-endian), then permute
    for j in range(len(block) // 8):
        s[j] ^= int.from_bytes(block[8 * j:8 * j + 8], "little")
    _keccak_f(s)


def _lanes_to_bytes(s: List[int], n: int) -> bytes:
    return b"".join(lane.to_bytes(8, "little") for lane in s)[:n]


class _SpongeCore(FixedOutputCore):
    # rate in bytes; the capacity is 200 - rate
    block_size: int = 136
    domain: int = _SHA3

    def __init__(self) -> None:
        self._s: List[int] = [0] * 25

    def compress(self, block: bytes) -> None:
        _absorb(self._s, block)

    def finalize_fixed(self, buffer: BlockBuffer) -> bytes:
        # output never exceeds one state, so a single squeeze is enough
        _absorb(self._s, buffer.pad_with(sponge(self.domain)))
        return _lanes_to_bytes(self._s, self.output_size)


class Sha3_224Core(_SpongeCore):
    name = "sha3_224"
    block_size = 144
    output_size = 28


class Sha3_256Core(_SpongeCore):
    name = "sha3_256"
    block_size = 136
    output_size = 32


class Sha3_384Core(_SpongeCore):
    name = "sha3_384"
    block_size = 104
    output_size = 48


class Sha3_512Core(_SpongeCore):
    name = "sha3_512"
    block_size = 72
    output_size = 64


class Keccak224Core(_SpongeCore):
    name = "keccak224"
    block_size = 144
    output_size = 28
    domain = _KECCAK


class Keccak256Core(_SpongeCore):
    name = "keccak256"
    block_size = 136
    output_size = 32
    domain = _KECCAK


class Keccak384Core(_SpongeCore):
    name = "keccak384"
    block_size = 104
    output_size = 48
    domain = _KECCAK


class Keccak512Core(_SpongeCore):
    name = "keccak512"
    block_size = 72
    output_size = 64
    domain = _KECCAK


class Keccak256FullCore(_SpongeCore):
    """Keccak-256 returning the whole permuted state (CryptoNight)."""

    name = "keccak256full"
    block_size = 136
    output_size = 200
    domain = _KECCAK


class _ShakeReaderCore(XofReaderCore):
    def __init__(self, s: List[int], rate: int) -> None:
        self._s = s
        self._rate = rate

    def read_block(self) -> bytes:
        out = _lanes_to_bytes(self._s, self._rate)
        _keccak_f(self._s)
        return out


class _ShakeCore(ExtendableOutputCore):
    def __init__(self) -> None:
        self._s: List[int] = [0] * 25

    def compress(self, block: bytes) -> None:
        _absorb(self._s, block)

    def finalize_xof(self, buffer: BlockBuffer) -> XofReaderCore:
        _absorb(self._s, buffer.pad_with(sponge(_SHAKE)))
        # the reader gets its own state
        return _ShakeReaderCore(list(self._s), self.block_size)


class Shake128Core(_ShakeCore):
    name = "shake_128"
    block_size = 168


class Shake256Core(_ShakeCore):
    name = "shake_256"
    block_size = 136


class Sha3_224(CoreWrapper):
    core_class = Sha3_224Core


class Sha3_256(CoreWrapper):
    core_class = Sha3_256Core


class Sha3_384(CoreWrapper):
    core_class = Sha3_384Core


class Sha3_512(CoreWrapper):
    core_class = Sha3_512Core


class Keccak224(CoreWrapper):
    core_class = Keccak224Core


class Keccak256(CoreWrapper):
    core_class = Keccak256Core


class Keccak384(CoreWrapper):
    core_class = Keccak384Core


class Keccak512(CoreWrapper):
    core_class = Keccak512Core


class Keccak256Full(CoreWrapper):
    core_class = Keccak256FullCore


class Shake128(XofWrapper):
    """Streaming SHAKE128.

    Simple usage:
      reader = Shake128().update(b"hello").update(b" world").finalize_xof()
      out = reader.read(64)
    """

    core_class = Shake128Core


class Shake256(XofWrapper):
    """Streaming SHAKE256, see ``Shake128``."""

    core_class = Shake256Core


def shake128(data: bytes, outlen: int) -> bytes:
    """One-shot SHAKE128: absorb data and return outlen bytes."""
    return Shake128(data).finalize_xof().read(outlen)


def shake256(data: bytes, outlen: int) -> bytes:
    """One-shot SHAKE256: absorb data and return outlen bytes."""
    return Shake256(data).finalize_xof().read(outlen)
