"""
Padding policies.

A padding policy completes the bytes left in a block buffer when a hash is
finalized. Every policy is a plain function

    policy(tail, block_size) -> list of full blocks

and the caller compresses the returned blocks in order. Policies never see
the hashing state: anything that depends on it (a bit length, a block
counter) is baked in when the policy is built, e.g. ``length_suffix(...)``.

Eager buffers guarantee ``len(tail) < block_size``. Only ``zeros`` is used
with lazy buffers, which may hand it a full block.
"""
from typing import Callable, List


Policy = Callable[[bytes, int], List[bytes]]


def _start_block(tail: bytes, block_size: int) -> bytearray:
    block = bytearray(block_size)
    block[:len(tail)] = tail
    return block


def length_suffix(suffix: bytes, terminator: int = 0x80) -> Policy:
    """Terminator byte, zero fill, and ``suffix`` in the last bytes.

    This is the Merkle-Damgard strengthening used by MD5, SHA-1, SHA-2,
    SM3, RIPEMD, Tiger and Groestl. If the terminator leaves fewer than
    ``len(suffix)`` free bytes, the zero-filled block goes out first and the
    suffix lands at the end of a second, otherwise empty, block.
    """
    def pad(tail: bytes, block_size: int) -> List[bytes]:
        block = _start_block(tail, block_size)
        block[len(tail)] = terminator
        blocks = []
        if block_size - len(tail) - 1 < len(suffix):
            blocks.append(bytes(block))
            block = bytearray(block_size)
        block[block_size - len(suffix):] = suffix
        blocks.append(bytes(block))
        return blocks

    return pad


def sponge(domain: int) -> Policy:
    """Multi-rate sponge padding with a domain separation byte.

    The domain byte is XORed at the first free position and 0x80 into the
    last byte of the rate block. When both land on the same byte they
    combine (e.g. 0x86 for SHA-3). SHA-3 uses 0x06, Keccak 0x01, SHAKE 0x1F.
    """
    def pad(tail: bytes, block_size: int) -> List[bytes]:
        block = _start_block(tail, block_size)
        block[len(tail)] ^= domain
        block[block_size - 1] ^= 0x80
        return [bytes(block)]

    return pad


def bit_terminated(terminator: int) -> Policy:
    """A single terminator byte and zero fill, no length field."""
    def pad(tail: bytes, block_size: int) -> List[bytes]:
        block = _start_block(tail, block_size)
        block[len(tail)] = terminator
        return [bytes(block)]

    return pad


# ISO/IEC 7816-4: 0x80 then zeros (Shabal)
iso7816: Policy = bit_terminated(0x80)


def pkcs7(tail: bytes, block_size: int) -> List[bytes]:
    """Fill the ``k`` free bytes with the value ``k`` (MD2).

    A block-aligned message therefore gets a whole block of ``block_size``.
    """
    k = block_size - len(tail)
    return [bytes(tail) + bytes([k]) * k]


def zeros(tail: bytes, block_size: int) -> List[bytes]:
    """Zero fill only; the core marks the last block itself (BLAKE2)."""
    return [bytes(_start_block(tail, block_size))]
