"""
MD2 (RFC 1319).

A 48-byte state and a 16-byte running checksum. Each 16-byte block takes 18
substitution passes over the state through a byte permutation built from
the digits of pi. Finalization pads with PKCS#7 and then compresses the
checksum as one more block.
"""
from typing import List

from .buffer import BlockBuffer
from .core import FixedOutputCore
from .padding import pkcs7
from .wrapper import CoreWrapper


_S: List[int] = [
    41, 46, 67, 201, 162, 216, 124, 1, 61, 54, 84, 161, 236, 240, 6,
    19, 98, 167, 5, 243, 192, 199, 115, 140, 152, 147, 43, 217, 188,
    76, 130, 202, 30, 155, 87, 60, 253, 212, 224, 22, 103, 66, 111, 24,
    138, 23, 229, 18, 190, 78, 196, 214, 218, 158, 222, 73, 160, 251,
    245, 142, 187, 47, 238, 122, 169, 104, 121, 145, 21, 178, 7, 63,
    148, 194, 16, 137, 11, 34, 95, 33, 128, 127, 93, 154, 90, 144, 50,
    39, 53, 62, 204, 231, 191, 247, 151, 3, 255, 25, 48, 179, 72, 165,
    181, 209, 215, 94, 146, 42, 172, 86, 170, 198, 79, 184, 56, 210,
    150, 164, 125, 182, 118, 252, 107, 226, 156, 116, 4, 241, 69, 157,
    112, 89, 100, 113, 135, 32, 134, 91, 207, 101, 230, 45, 168, 2, 27,
    96, 37, 173, 174, 176, 185, 246, 28, 70, 97, 105, 52, 64, 126, 15,
    85, 71, 163, 35, 221, 81, 175, 58, 195, 92, 249, 206, 186, 197,
    234, 38, 44, 83, 13, 110, 133, 40, 132, 9, 211, 223, 205, 244, 65,
    129, 77, 82, 106, 220, 55, 200, 108, 193, 171, 250, 36, 225, 123,
    8, 12, 189, 177, 74, 120, 136, 149, 139, 227, 99, 232, 109, 233,
    203, 213, 254, 59, 0, 29, 57, 242, 239, 183, 14, 102, 88, 208, 228,
    166, 119, 114, 248, 235, 117, 75, 10, 49, 68, 80, 180, 143, 237,
    31, 26, 219, 153, 141, 51, 159, 17, 131, 20,
]


class Md2Core(FixedOutputCore):
    name = "md2"
    block_size = 16
    output_size = 16

    def __init__(self) -> None:
        self._x: bytearray = bytearray(48)
        self._checksum: bytearray = bytearray(16)

    def compress(self, block: bytes) -> None:
        x = self._x
        for j in range(16):
            x[16 + j] = block[j]
            x[32 + j] = block[j] ^ x[j]

        t = 0
        for j in range(18):
            for k in range(48):
                x[k] ^= _S[t]
                t = x[k]
            t = (t + j) & 0xFF

        checksum = self._checksum
        last = checksum[15]
        for j in range(16):
            checksum[j] ^= _S[block[j] ^ last]
            last = checksum[j]

    def finalize_fixed(self, buffer: BlockBuffer) -> bytes:
        self.compress(buffer.pad_with(pkcs7))
        self.compress(bytes(self._checksum))
        return bytes(self._x[:16])


class Md2(CoreWrapper):
    core_class = Md2Core
