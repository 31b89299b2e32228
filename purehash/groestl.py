"""
Groestl.

Two AES-like permutations P and Q act on an 8-row byte matrix: 8 columns
and 10 rounds for the short variant (output up to 32 bytes), 16 columns and
14 rounds for the long one (up to 64 bytes). Bytes are stored column by
column, so the byte at ``row`` of column ``col`` sits at ``8 * col + row``.

    compression:  h = P(h ^ m) ^ Q(m) ^ h
    output:       last output_size bytes of P(h) ^ h

The output size is written into the last bytes of the initial state, and the
final length field counts blocks, not bits.
"""
from typing import List

from .buffer import BlockBuffer
from .core import FixedVariableCore, VariableOutputCore
from .wrapper import CoreWrapper, RtVariableWrapper


def _gf_mul(a: int, b: int) -> int:
    # multiplication in GF(2^8) modulo x^8 + x^4 + x^3 + x + 1
    p = 0
    while b:
        if b & 1:
            p ^= a
        a = ((a << 1) ^ (0x1B if a & 0x80 else 0)) & 0xFF
        b >>= 1
    return p


def _aes_sbox() -> List[int]:
    exp = [0] * 255
    log = [0] * 256
    x = 1
    for i in range(255):
        exp[i] = x
        log[x] = i
        x = _gf_mul(x, 3)
    sbox = []
    for i in range(256):
        inv = exp[(255 - log[i]) % 255] if i else 0
        s = inv
        for k in range(1, 5):
            s ^= ((inv << k) | (inv >> (8 - k))) & 0xFF
        sbox.append(s ^ 0x63)
    return sbox


_SBOX: List[int] = _aes_sbox()

# first row of the circulant MixBytes matrix
_B: List[int] = [2, 2, 3, 4, 5, 3, 5, 7]
_MUL = {c: [_gf_mul(c, x) for x in range(256)] for c in set(_B)}
# _MIX[i][k]: multiplication table of matrix entry (i, k)
_MIX: List[List[List[int]]] = [[_MUL[_B[(k - i) % 8]] for k in range(8)] for i in range(8)]


def _perm(state: List[int], cols: int, rounds: int, shifts: List[int], q: bool) -> List[int]:
    st = list(state)
    for r in range(rounds):
        # AddRoundConstant
        if q:
            st = [b ^ 0xFF for b in st]
            for j in range(cols):
                st[8 * j + 7] ^= (j << 4) ^ r
        else:
            for j in range(cols):
                st[8 * j] ^= (j << 4) ^ r
        # SubBytes and ShiftBytes
        t = [_SBOX[st[((j + shifts[i]) % cols) * 8 + i]] for j in range(cols) for i in range(8)]
        # MixBytes
        st = []
        for j in range(cols):
            col = t[8 * j:8 * j + 8]
            for row in _MIX:
                acc = 0
                for k in range(8):
                    acc ^= row[k][col[k]]
                st.append(acc)
    return st


class _GroestlVarCore(VariableOutputCore):
    cols: int = 8
    rounds: int = 10
    shifts_p: List[int] = [0, 1, 2, 3, 4, 5, 6, 7]
    shifts_q: List[int] = [1, 3, 5, 7, 0, 2, 4, 6]

    def __init__(self, output_size: int) -> None:
        super().__init__(output_size)
        self._h: List[int] = [0] * self.block_size
        bits = 8 * output_size
        self._h[-2] = bits >> 8
        self._h[-1] = bits & 0xFF
        self._blocks_len: int = 0

    def _compress(self, block: bytes) -> None:
        h = self._h
        p = _perm([a ^ b for a, b in zip(h, block)], self.cols, self.rounds, self.shifts_p, False)
        q = _perm(list(block), self.cols, self.rounds, self.shifts_q, True)
        self._h = [a ^ b ^ c for a, b, c in zip(h, p, q)]

    def compress(self, block: bytes) -> None:
        self._blocks_len += 1
        self._compress(block)

    def finalize_variable(self, buffer: BlockBuffer) -> bytes:
        # the padding adds one block, or two when the length field does not fit
        blocks_len = self._blocks_len + (2 if buffer.remaining() <= 8 else 1)
        buffer.len64_padding_be(blocks_len, self._compress)
        p = _perm(self._h, self.cols, self.rounds, self.shifts_p, False)
        return bytes(a ^ b for a, b in zip(p, self._h))[-self.output_size:]


class GroestlShortVarCore(_GroestlVarCore):
    name = "groestl_short"
    block_size = 64
    max_output_size = 32


class GroestlLongVarCore(_GroestlVarCore):
    name = "groestl_long"
    block_size = 128
    max_output_size = 64
    cols = 16
    rounds = 14
    shifts_p = [0, 1, 2, 3, 4, 5, 6, 11]
    shifts_q = [1, 3, 5, 11, 0, 2, 4, 6]


class Groestl224Core(FixedVariableCore):
    name = "groestl224"
    inner_class = GroestlShortVarCore
    output_size = 28


class Groestl256Core(FixedVariableCore):
    name = "groestl256"
    inner_class = GroestlShortVarCore
    output_size = 32


class Groestl384Core(FixedVariableCore):
    name = "groestl384"
    inner_class = GroestlLongVarCore
    output_size = 48


class Groestl512Core(FixedVariableCore):
    name = "groestl512"
    inner_class = GroestlLongVarCore
    output_size = 64


class GroestlShortVar(RtVariableWrapper):
    """Short Groestl with the output size (1..32) picked at construction."""

    core_class = GroestlShortVarCore


class GroestlLongVar(RtVariableWrapper):
    """Long Groestl with the output size (1..64) picked at construction."""

    core_class = GroestlLongVarCore


class Groestl224(CoreWrapper):
    core_class = Groestl224Core


class Groestl256(CoreWrapper):
    core_class = Groestl256Core


class Groestl384(CoreWrapper):
    core_class = Groestl384Core


class Groestl512(CoreWrapper):
    core_class = Groestl512Core
