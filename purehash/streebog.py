"""
Streebog (GOST R 34.11-2012), 256 and 512 bit.

A 512-bit chaining value, a 512-bit message length counter N and a 512-bit
checksum Sigma of all blocks. Every block goes through the compression
function g, an AES-like cipher over 64 bytes (substitution, transposition
and a linear map, fused into one LPS step) keyed from the chaining value
and N. Blocks are read as little-endian numbers. Finalization pads the tail
with a single 0x01 byte and zero fill, then folds in N and Sigma with two
more applications of g.

LPS runs on eight 64-bit words through eight 256-entry lookup tables built
at import from the substitution and the linear map matrix.
"""
from typing import List

from ._bits import words_from_bytes, words_to_bytes
from .buffer import BlockBuffer
from .core import FixedOutputCore
from .padding import bit_terminated
from .wrapper import CoreWrapper


_MASK512: int = (1 << 512) - 1

# substitution
_PI: bytes = bytes((
    252, 238, 221, 17, 207, 110, 49, 22, 251, 196, 250,
    218, 35, 197, 4, 77, 233, 119, 240, 219, 147, 46,
    153, 186, 23, 54, 241, 187, 20, 205, 95, 193, 249,
    24, 101, 90, 226, 92, 239, 33, 129, 28, 60, 66,
    139, 1, 142, 79, 5, 132, 2, 174, 227, 106, 143,
    160, 6, 11, 237, 152, 127, 212, 211, 31, 235, 52,
    44, 81, 234, 200, 72, 171, 242, 42, 104, 162, 253,
    58, 206, 204, 181, 112, 14, 86, 8, 12, 118, 18,
    191, 114, 19, 71, 156, 183, 93, 135, 21, 161, 150,
    41, 16, 123, 154, 199, 243, 145, 120, 111, 157, 158,
    178, 177, 50, 117, 25, 61, 255, 53, 138, 126, 109,
    84, 198, 128, 195, 189, 13, 87, 223, 245, 36, 169,
    62, 168, 67, 201, 215, 121, 214, 246, 124, 34, 185,
    3, 224, 15, 236, 222, 122, 148, 176, 188, 220, 232,
    40, 80, 78, 51, 10, 74, 167, 151, 96, 115, 30,
    0, 98, 68, 26, 184, 56, 130, 100, 159, 38, 65,
    173, 69, 70, 146, 39, 94, 85, 47, 140, 163, 165,
    125, 105, 213, 149, 59, 7, 88, 179, 64, 134, 172,
    29, 247, 48, 55, 107, 228, 136, 217, 231, 137, 225,
    27, 131, 73, 76, 63, 248, 254, 141, 83, 170, 144,
    202, 216, 133, 97, 32, 113, 103, 164, 45, 43, 9,
    91, 203, 155, 37, 208, 190, 229, 108, 82, 89, 166,
    116, 210, 230, 244, 180, 192, 209, 102, 175, 194, 57,
    75, 99, 182,
))

# linear map matrix, row j is applied for bit 63 - j
_A: List[int] = [int(s, 16) for s in (
    "8e20faa72ba0b470", "47107ddd9b505a38", "ad08b0e0c3282d1c", "d8045870ef14980e",
    "6c022c38f90a4c07", "3601161cf205268d", "1b8e0b0e798c13c8", "83478b07b2468764",
    "a011d380818e8f40", "5086e740ce47c920", "2843fd2067adea10", "14aff010bdd87508",
    "0ad97808d06cb404", "05e23c0468365a02", "8c711e02341b2d01", "46b60f011a83988e",
    "90dab52a387ae76f", "486dd4151c3dfdb9", "24b86a840e90f0d2", "125c354207487869",
    "092e94218d243cba", "8a174a9ec8121e5d", "4585254f64090fa0", "accc9ca9328a8950",
    "9d4df05d5f661451", "c0a878a0a1330aa6", "60543c50de970553", "302a1e286fc58ca7",
    "18150f14b9ec46dd", "0c84890ad27623e0", "0642ca05693b9f70", "0321658cba93c138",
    "86275df09ce8aaa8", "439da0784e745554", "afc0503c273aa42a", "d960281e9d1d5215",
    "e230140fc0802984", "71180a8960409a42", "b60c05ca30204d21", "5b068c651810a89e",
    "456c34887a3805b9", "ac361a443d1c8cd2", "561b0d22900e4669", "2b838811480723ba",
    "9bcf4486248d9f5d", "c3e9224312c8c1a0", "effa11af0964ee50", "f97d86d98a327728",
    "e4fa2054a80b329c", "727d102a548b194e", "39b008152acb8227", "9258048415eb419d",
    "492c024284fbaec0", "aa16012142f35760", "550b8e9e21f7a530", "a48b474f9ef5dc18",
    "70a6a56e2440598e", "3853dc371220a247", "1ca76e95091051ad", "0edd37c48a08a6d8",
    "07e095624504536c", "8d70c431ac02a736", "c83862965601dd1b", "641c314b2b8ee083",
)]

# round constants, stored big-endian
_C: List[List[int]] = [words_from_bytes(bytes.fromhex("".join(s))[::-1], 8, "little") for s in (
    (
        "b1085bda1ecadae9ebcb2f81c0657c1f",
        "2f6a76432e45d016714eb88d7585c4fc",
        "4b7ce09192676901a2422a08a460d315",
        "05767436cc744d23dd806559f2a64507",
    ),
    (
        "6fa3b58aa99d2f1a4fe39d460f70b5d7",
        "f3feea720a232b9861d55e0f16b50131",
        "9ab5176b12d699585cb561c2db0aa7ca",
        "55dda21bd7cbcd56e679047021b19bb7",
    ),
    (
        "f574dcac2bce2fc70a39fc286a3d8435",
        "06f15e5f529c1f8bf2ea7514b1297b7b",
        "d3e20fe490359eb1c1c93a376062db09",
        "c2b6f443867adb31991e96f50aba0ab2",
    ),
    (
        "ef1fdfb3e81566d2f948e1a05d71e4dd",
        "488e857e335c3c7d9d721cad685e353f",
        "a9d72c82ed03d675d8b71333935203be",
        "3453eaa193e837f1220cbebc84e3d12e",
    ),
    (
        "4bea6bacad4747999a3f410c6ca92363",
        "7f151c1f1686104a359e35d7800fffbd",
        "bfcd1747253af5a3dfff00b723271a16",
        "7a56a27ea9ea63f5601758fd7c6cfe57",
    ),
    (
        "ae4faeae1d3ad3d96fa4c33b7a3039c0",
        "2d66c4f95142a46c187f9ab49af08ec6",
        "cffaa6b71c9ab7b40af21f66c2bec6b6",
        "bf71c57236904f35fa68407a46647d6e",
    ),
    (
        "f4c70e16eeaac5ec51ac86febf240954",
        "399ec6c7e6bf87c9d3473e33197a93c9",
        "0992abc52d822c3706476983284a0504",
        "3517454ca23c4af38886564d3a14d493",
    ),
    (
        "9b1f5b424d93c9a703e7aa020c6e4141",
        "4eb7f8719c36de1e89b4443b4ddbc49a",
        "f4892bcb929b069069d18d2bd1a5c42f",
        "36acc2355951a8d9a47f0dd4bf02e71e",
    ),
    (
        "378f5a541631229b944c9ad8ec165fde",
        "3a7d3a1b258942243cd955b7e00d0984",
        "800a440bdbb2ceb17b2b8a9aa6079c54",
        "0e38dc92cb1f2a607261445183235adb",
    ),
    (
        "abbedea680056f52382ae548b2e4f3f3",
        "8941e71cff8a78db1fffe18a1b336103",
        "9fe76702af69334b7a1e6c303b7652f4",
        "3698fad1153bb6c374b4c7fb98459ced",
    ),
    (
        "7bcd9ed0efc889fb3002c6cd635afe94",
        "d8fa6bbbebab07612001802114846679",
        "8a1d71efea48b9caefbacd1d7d476e98",
        "dea2594ac06fd85d6bcaa4cd81f32d1b",
    ),
    (
        "378ee767f11631bad21380b00449b17a",
        "cda43c32bcdf1d77f82012d430219f9b",
        "5d80ef9d1891cc86e71da4aa88e12852",
        "faf417d5d9b21b9948bc924af11bd720",
    ),
)]


def _lps_tables() -> List[List[int]]:
    tables = []
    for k in range(8):
        table = []
        for v in range(256):
            p = _PI[v]
            acc = 0
            for t in range(8):
                if p >> t & 1:
                    acc ^= _A[63 - 8 * k - t]
            table.append(acc)
        tables.append(table)
    return tables


_LT: List[List[int]] = _lps_tables()


def _lps(x: List[int]) -> List[int]:
    t0, t1, t2, t3, t4, t5, t6, t7 = _LT
    out = []
    for i in range(8):
        s = 8 * i
        out.append(t0[(x[0] >> s) & 0xFF] ^ t1[(x[1] >> s) & 0xFF] ^ t2[(x[2] >> s) & 0xFF]
                   ^ t3[(x[3] >> s) & 0xFF] ^ t4[(x[4] >> s) & 0xFF] ^ t5[(x[5] >> s) & 0xFF]
                   ^ t6[(x[6] >> s) & 0xFF] ^ t7[(x[7] >> s) & 0xFF])
    return out


def _xor(a: List[int], b: List[int]) -> List[int]:
    return [x ^ y for x, y in zip(a, b)]


def _g(n: List[int], h: List[int], m: List[int]) -> List[int]:
    k = _lps(_xor(h, n))
    block = m
    for c in _C:
        block = _lps(_xor(block, k))
        k = _lps(_xor(k, c))
    return [a ^ b ^ c ^ d for a, b, c, d in zip(k, block, h, m)]


def _words(value: int) -> List[int]:
    return words_from_bytes(value.to_bytes(64, "little"), 8, "little")


_ZERO: List[int] = [0] * 8


class _StreebogCore(FixedOutputCore):
    block_size = 64
    iv_word: int = 0

    def __init__(self) -> None:
        self._h: List[int] = [self.iv_word] * 8
        # bit length and checksum, both mod 2^512
        self._n: int = 0
        self._sigma: int = 0

    def _absorb(self, block: bytes, bits: int) -> None:
        self._h = _g(_words(self._n), self._h, words_from_bytes(block, 8, "little"))
        self._n = (self._n + bits) & _MASK512
        self._sigma = (self._sigma + int.from_bytes(block, "little")) & _MASK512

    def compress(self, block: bytes) -> None:
        self._absorb(block, 512)

    def finalize_fixed(self, buffer: BlockBuffer) -> bytes:
        bits = 8 * buffer.get_pos()
        self._absorb(buffer.pad_with(bit_terminated(0x01)), bits)
        self._h = _g(_ZERO, self._h, _words(self._n))
        self._h = _g(_ZERO, self._h, _words(self._sigma))
        return words_to_bytes(self._h, 8, "little")[64 - self.output_size:]


class Streebog256Core(_StreebogCore):
    name = "streebog256"
    output_size = 32
    iv_word = 0x0101010101010101


class Streebog512Core(_StreebogCore):
    name = "streebog512"
    output_size = 64
    iv_word = 0


class Streebog256(CoreWrapper):
    core_class = Streebog256Core


class Streebog512(CoreWrapper):
    core_class = Streebog512Core
