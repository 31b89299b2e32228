"""
BLAKE2b and BLAKE2s (RFC 7693).

Both are variable-output cores: the requested digest length, the key length,
and the optional salt and personalization go into a parameter block that is
XORed into the initial value. A 16-word work vector runs ChaCha-style G
rounds (12 for BLAKE2b over 64-bit words, 10 for BLAKE2s over 32-bit words).

The last block is compressed with a finalization flag, so the block buffer
is lazy: a full block is only compressed once more input shows up. A key is
zero-padded to a full block and absorbed before any message bytes.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ._bits import rotr32, rotr64, words_from_bytes, words_to_bytes
from .buffer import BlockBuffer
from .core import FixedVariableCore, VariableOutputCore
from .errors import ConstructionError
from .padding import zeros
from .wrapper import CoreWrapper, RtVariableWrapper


logger = logging.getLogger(__name__)


_IV_B: List[int] = [0x6A09E667F3BCC908, 0xBB67AE8584CAA73B, 0x3C6EF372FE94F82B, 0xA54FF53A5F1D36F1,
                    0x510E527FADE682D1, 0x9B05688C2B3E6C1F, 0x1F83D9ABFB41BD6B, 0x5BE0CD19137E2179]
_IV_S: List[int] = [0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
                    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19]

_SIGMA: List[List[int]] = [
    [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15],
    [14, 10, 4, 8, 9, 15, 13, 6, 1, 12, 0, 2, 11, 7, 5, 3],
    [11, 8, 12, 0, 5, 2, 15, 13, 10, 14, 3, 6, 7, 1, 9, 4],
    [7, 9, 3, 1, 13, 12, 11, 14, 2, 6, 5, 10, 4, 0, 15, 8],
    [9, 0, 5, 7, 2, 4, 10, 15, 14, 1, 11, 12, 6, 8, 3, 13],
    [2, 12, 6, 10, 0, 11, 8, 3, 4, 13, 7, 5, 15, 14, 1, 9],
    [12, 5, 1, 15, 14, 13, 4, 10, 0, 7, 6, 3, 9, 2, 8, 11],
    [13, 11, 7, 14, 12, 1, 3, 9, 5, 0, 15, 4, 8, 6, 2, 10],
    [6, 15, 14, 9, 11, 3, 0, 8, 12, 2, 13, 7, 1, 4, 10, 5],
    [10, 2, 8, 4, 7, 6, 1, 5, 15, 11, 9, 14, 3, 12, 13, 0],
]

# (a, b, c, d) work vector indices of the eight G calls in a round
_G_INDICES: List[Tuple[int, int, int, int]] = [
    (0, 4, 8, 12), (1, 5, 9, 13), (2, 6, 10, 14), (3, 7, 11, 15),
    (0, 5, 10, 15), (1, 6, 11, 12), (2, 7, 8, 13), (3, 4, 9, 14),
]


@dataclass(frozen=True)
class Blake2Params:
    """Construction parameters mixed into the initial state."""

    output_size: int
    key: bytes = b""
    salt: bytes = b""
    persona: bytes = b""


class _Blake2Core(VariableOutputCore):
    lazy_buffer = True
    word_bits: int = 64
    rounds: int = 12
    rotations: Tuple[int, int, int, int] = (32, 24, 16, 63)
    rotr = staticmethod(rotr64)
    iv: List[int] = _IV_B

    def __init__(self, output_size: int, salt: bytes = b"", persona: bytes = b"", key: bytes = b"") -> None:
        super().__init__(output_size)
        self.params = Blake2Params(output_size, bytes(key), bytes(salt), bytes(persona))
        wbytes = self.word_bits // 8
        slot = 2 * wbytes
        for label, value, limit in (("salt", self.params.salt, slot),
                                    ("persona", self.params.persona, slot),
                                    ("key", self.params.key, self.max_output_size)):
            if len(value) > limit:
                logger.error("%s: %s is %d bytes, at most %d allowed", self.name, label, len(value), limit)
                raise ConstructionError(f"{self.name} {label} must be at most {limit} bytes")

        p = [0] * 8
        p[0] = 0x01010000 ^ (len(self.params.key) << 8) ^ output_size
        p[4:6] = words_from_bytes(self.params.salt.ljust(slot, b"\x00"), wbytes, "little")
        p[6:8] = words_from_bytes(self.params.persona.ljust(slot, b"\x00"), wbytes, "little")
        self._h: List[int] = [v ^ w for v, w in zip(self.iv, p)]
        # byte counter, 2 * word_bits wide
        self._t: int = 0

    def initial_input(self) -> bytes:
        key = self.params.key
        return key.ljust(self.block_size, b"\x00") if key else b""

    def _compress(self, block: bytes, last: bool) -> None:
        bits = self.word_bits
        mask = (1 << bits) - 1
        r1, r2, r3, r4 = self.rotations
        rotr = self.rotr

        m = words_from_bytes(block, bits // 8, "little")
        v = self._h + self.iv
        v[12] ^= self._t & mask
        v[13] ^= (self._t >> bits) & mask
        if last:
            v[14] ^= mask

        for rnd in range(self.rounds):
            s = _SIGMA[rnd % 10]
            for i, (a, b, c, d) in enumerate(_G_INDICES):
                x, y = m[s[2 * i]], m[s[2 * i + 1]]
                v[a] = (v[a] + v[b] + x) & mask
                v[d] = rotr(v[d] ^ v[a], r1)
                v[c] = (v[c] + v[d]) & mask
                v[b] = rotr(v[b] ^ v[c], r2)
                v[a] = (v[a] + v[b] + y) & mask
                v[d] = rotr(v[d] ^ v[a], r3)
                v[c] = (v[c] + v[d]) & mask
                v[b] = rotr(v[b] ^ v[c], r4)

        for i in range(8):
            self._h[i] ^= v[i] ^ v[i + 8]

    def compress(self, block: bytes) -> None:
        self._t = (self._t + self.block_size) & ((1 << (2 * self.word_bits)) - 1)
        self._compress(block, False)

    def finalize_variable(self, buffer: BlockBuffer) -> bytes:
        self._t = (self._t + buffer.get_pos()) & ((1 << (2 * self.word_bits)) - 1)
        self._compress(buffer.pad_with(zeros), True)
        return words_to_bytes(self._h, self.word_bits // 8, "little")[:self.output_size]


class Blake2bVarCore(_Blake2Core):
    name = "blake2b"
    block_size = 128
    max_output_size = 64


class Blake2sVarCore(_Blake2Core):
    name = "blake2s"
    block_size = 64
    max_output_size = 32
    word_bits = 32
    rounds = 10
    rotations = (16, 12, 8, 7)
    rotr = staticmethod(rotr32)
    iv = _IV_S


class Blake2bCore(FixedVariableCore):
    name = "blake2b"
    inner_class = Blake2bVarCore
    output_size = 64


class Blake2sCore(FixedVariableCore):
    name = "blake2s"
    inner_class = Blake2sVarCore
    output_size = 32


class Blake2b512Core(Blake2bCore):
    name = "blake2b512"


class Blake2s256Core(Blake2sCore):
    name = "blake2s256"


class Blake2bVar(RtVariableWrapper):
    """BLAKE2b with the output size (1..64) picked at construction."""

    core_class = Blake2bVarCore


class Blake2sVar(RtVariableWrapper):
    """BLAKE2s with the output size (1..32) picked at construction."""

    core_class = Blake2sVarCore


class Blake2b512(CoreWrapper):
    core_class = Blake2b512Core


class Blake2s256(CoreWrapper):
    core_class = Blake2s256Core


class _Blake2Fixed(CoreWrapper):
    def __init__(self, data: bytes = b"", *, digest_size: Optional[int] = None, key: bytes = b"",
                 salt: bytes = b"", persona: bytes = b"") -> None:
        self._digest_size = self.core_class.output_size if digest_size is None else digest_size
        self._params = dict(key=key, salt=salt, persona=persona)
        super().__init__(data)

    def _new_core(self) -> FixedVariableCore:
        return self.core_class(self._digest_size, **self._params)


class Blake2b(_Blake2Fixed):
    """hashlib-style BLAKE2b: ``Blake2b(data, digest_size=64, key=..., salt=..., persona=...)``.

    Unlike ``Blake2bVar`` it keeps its parameters across ``reset``.
    """

    core_class = Blake2bCore


class Blake2s(_Blake2Fixed):
    """hashlib-style BLAKE2s, see ``Blake2b``."""

    core_class = Blake2sCore
