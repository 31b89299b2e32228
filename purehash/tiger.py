"""
Tiger and Tiger2.

Three 64-bit registers, three passes of eight rounds per 64-byte block with
a key schedule between passes, and a mixed xor/sub/add feed-forward. Tiger
pads with a 0x01 terminator, Tiger2 with the usual 0x80; both append a
little-endian 64-bit bit length and emit little-endian words.

The four 256-entry S-boxes are not shipped as literals: they are rebuilt at
import with the generation procedure published alongside the algorithm,
which runs the compression function itself over a fixed 64-byte string.
"""
from typing import List, Tuple

from ._bits import MASK64, words_from_bytes, words_to_bytes
from .buffer import BlockBuffer
from .core import FixedOutputCore
from .wrapper import CoreWrapper


_IV: List[int] = [0x0123456789ABCDEF, 0xFEDCBA9876543210, 0xF096A5B4C3B2E187]

_SBOX_SEED: bytes = b"Tiger - A Fast New Hash Function, by Ross Anderson and Eli Biham"
_SBOX_PASSES: int = 5


def _round(a: int, b: int, c: int, x: int, mul: int, t: List[int]) -> Tuple[int, int, int]:
    c ^= x
    a = (a - (t[c & 0xFF] ^ t[256 + ((c >> 16) & 0xFF)]
              ^ t[512 + ((c >> 32) & 0xFF)] ^ t[768 + ((c >> 48) & 0xFF)])) & MASK64
    b = (b + (t[768 + ((c >> 8) & 0xFF)] ^ t[512 + ((c >> 24) & 0xFF)]
              ^ t[256 + ((c >> 40) & 0xFF)] ^ t[c >> 56])) & MASK64
    b = (b * mul) & MASK64
    return a, b, c


def _pass(a: int, b: int, c: int, x: List[int], mul: int, t: List[int]) -> Tuple[int, int, int]:
    a, b, c = _round(a, b, c, x[0], mul, t)
    b, c, a = _round(b, c, a, x[1], mul, t)
    c, a, b = _round(c, a, b, x[2], mul, t)
    a, b, c = _round(a, b, c, x[3], mul, t)
    b, c, a = _round(b, c, a, x[4], mul, t)
    c, a, b = _round(c, a, b, x[5], mul, t)
    a, b, c = _round(a, b, c, x[6], mul, t)
    b, c, a = _round(b, c, a, x[7], mul, t)
    return a, b, c


def _key_schedule(x: List[int]) -> None:
    x[0] = (x[0] - (x[7] ^ 0xA5A5A5A5A5A5A5A5)) & MASK64
    x[1] ^= x[0]
    x[2] = (x[2] + x[1]) & MASK64
    x[3] = (x[3] - (x[2] ^ ((~x[1] << 19) & MASK64))) & MASK64
    x[4] ^= x[3]
    x[5] = (x[5] + x[4]) & MASK64
    x[6] = (x[6] - (x[5] ^ ((~x[4] & MASK64) >> 23))) & MASK64
    x[7] ^= x[6]
    x[0] = (x[0] + x[7]) & MASK64
    x[1] = (x[1] - (x[0] ^ ((~x[7] << 19) & MASK64))) & MASK64
    x[2] ^= x[1]
    x[3] = (x[3] + x[2]) & MASK64
    x[4] = (x[4] - (x[3] ^ ((~x[2] & MASK64) >> 23))) & MASK64
    x[5] ^= x[4]
    x[6] = (x[6] + x[5]) & MASK64
    x[7] = (x[7] - (x[6] ^ 0x0123456789ABCDEF)) & MASK64


def _compress(state: List[int], block: bytes, t: List[int]) -> None:
    x = words_from_bytes(block, 8, "little")
    a, b, c = state
    a, b, c = _pass(a, b, c, x, 5, t)
    _key_schedule(x)
    c, a, b = _pass(c, a, b, x, 7, t)
    _key_schedule(x)
    b, c, a = _pass(b, c, a, x, 9, t)
    state[0] ^= a
    state[1] = (b - state[1]) & MASK64
    state[2] = (c + state[2]) & MASK64


def _generate_sboxes() -> List[int]:
    """Build S-boxes t1..t4 as one flat list of 1024 words.

    Every byte column of every box starts as the identity and is shuffled by
    byte swaps driven by the state of a Tiger compression chain, which uses
    the boxes as they stand at that point.
    """
    t = [(i & 0xFF) * 0x0101010101010101 for i in range(1024)]
    state = list(_IV)
    abc = 2
    for _ in range(_SBOX_PASSES):
        for i in range(256):
            for sb in range(0, 1024, 256):
                abc += 1
                if abc == 3:
                    abc = 0
                    _compress(state, _SBOX_SEED, t)
                s = state[abc]
                for col in range(8):
                    shift = 8 * col
                    j = sb + ((s >> shift) & 0xFF)
                    # swap byte `col` of entries sb+i and j
                    diff = (t[sb + i] ^ t[j]) & (0xFF << shift)
                    t[sb + i] ^= diff
                    t[j] ^= diff
    return t


_T: List[int] = _generate_sboxes()


class _TigerCore(FixedOutputCore):
    block_size = 64
    output_size = 24
    terminator: int = 0x01

    def __init__(self) -> None:
        self._state: List[int] = list(_IV)
        self._block_len: int = 0

    def compress(self, block: bytes) -> None:
        self._block_len += 1
        _compress(self._state, block, _T)

    def finalize_fixed(self, buffer: BlockBuffer) -> bytes:
        bit_len = 8 * (self._block_len * self.block_size + buffer.get_pos())
        suffix = (bit_len & MASK64).to_bytes(8, "little")
        buffer.digest_pad(self.terminator, suffix, lambda block: _compress(self._state, block, _T))
        return words_to_bytes(self._state, 8, "little")


class TigerCore(_TigerCore):
    name = "tiger"
    terminator = 0x01


class Tiger2Core(_TigerCore):
    name = "tiger2"
    terminator = 0x80


class Tiger(CoreWrapper):
    core_class = TigerCore


class Tiger2(CoreWrapper):
    core_class = Tiger2Core
