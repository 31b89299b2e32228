"""
Block buffer shared by every hasher.

The buffer collects arbitrarily chunked input and hands it to a compression
function in whole blocks, in order. The pending window is a single
``bytearray(block_size)`` allocated once; only the position cursor moves.

Two flavours exist:

- eager (the default): a block is compressed as soon as it is complete, so
  ``0 <= pos < block_size`` holds between calls.
- lazy: the last complete block is held back until more input shows up, so
  ``0 <= pos <= block_size``. BLAKE2 needs this because its final block is
  compressed with a flag, and an aligned message must not lose that block
  to an earlier ``update``.

In both cases ``bytes absorbed == blocks handed out * block_size + pos``.
"""
from typing import Callable, List

from ._bits import MASK64
from .padding import Policy, length_suffix


_MASK128: int = (1 << 128) - 1

BlocksFn = Callable[[List[bytes]], None]
BlockFn = Callable[[bytes], None]


class BlockBuffer:
    """Fixed-capacity accumulator of pending bytes."""

    __slots__ = ("block_size", "lazy", "_block", "_pos")

    def __init__(self, block_size: int, lazy: bool = False) -> None:
        self.block_size: int = block_size
        self.lazy: bool = lazy
        self._block: bytearray = bytearray(block_size)
        self._pos: int = 0

    def get_pos(self) -> int:
        """Number of pending bytes."""
        return self._pos

    def remaining(self) -> int:
        """Free space left in the pending block."""
        return self.block_size - self._pos

    def tail(self) -> bytes:
        return bytes(self._block[:self._pos])

    def absorb(self, data: bytes, compress_blocks: BlocksFn) -> None:
        """Split ``data`` into full blocks plus a retained remainder.

        Full blocks are passed to ``compress_blocks`` as one list, in input
        order. Nothing is called when no block completes.
        """
        view = memoryview(data).cast("B")
        n = len(view)
        bs = self.block_size
        pos = self._pos
        free = bs - pos
        if n < free or (self.lazy and n == free):
            self._block[pos:pos + n] = view
            self._pos = pos + n
            return

        blocks: List[bytes] = []
        if pos:
            self._block[pos:] = view[:free]
            blocks.append(bytes(self._block))
            view = view[free:]
            n = len(view)

        full = n // bs
        if self.lazy and full and n % bs == 0:
            # keep the last block back, it may be the final one
            full -= 1
        for i in range(full):
            blocks.append(bytes(view[i * bs:(i + 1) * bs]))

        rest = view[full * bs:]
        self._block[:len(rest)] = rest
        self._pos = len(rest)
        if blocks:
            compress_blocks(blocks)

    def pad_and_drain(self, policy: Policy, compress: BlockFn) -> None:
        """Pad the pending bytes and compress every block the policy yields.

        Usually one block; two when a length field does not fit after the
        terminator. The buffer is empty afterwards.
        """
        for block in policy(self.tail(), self.block_size):
            compress(block)
        self.reset()

    def pad_with(self, policy: Policy) -> bytes:
        """Pad the pending bytes into exactly one block and return it."""
        (block,) = policy(self.tail(), self.block_size)
        self.reset()
        return block

    def digest_pad(self, terminator: int, suffix: bytes, compress: BlockFn) -> None:
        self.pad_and_drain(length_suffix(suffix, terminator), compress)

    def len64_padding_be(self, length: int, compress: BlockFn) -> None:
        """0x80, zero fill, then ``length`` as a big-endian 64-bit field."""
        self.digest_pad(0x80, (length & MASK64).to_bytes(8, "big"), compress)

    def len64_padding_le(self, bit_len: int, compress: BlockFn) -> None:
        self.digest_pad(0x80, (bit_len & MASK64).to_bytes(8, "little"), compress)

    def len128_padding_be(self, bit_len: int, compress: BlockFn) -> None:
        self.digest_pad(0x80, (bit_len & _MASK128).to_bytes(16, "big"), compress)

    def reset(self) -> None:
        self._block[:] = bytes(self.block_size)
        self._pos = 0

    def __repr__(self) -> str:
        return "BlockBuffer { ... }"
