"""
Core capability set.

A core owns the compression state of one algorithm and nothing else: it
never buffers bytes itself. The streaming wrappers in ``wrapper.py`` feed it
whole blocks through ``update_blocks`` and hand it the block buffer at
finalization so it can apply its own padding.

Capabilities:

- ``HashCore``: block compression (every core).
- ``FixedOutputCore``: one output size per class.
- ``VariableOutputCore``: output size picked at construction, up to
  ``max_output_size``, and mixed into the initial state.
- ``ExtendableOutputCore``: finalization yields an ``XofReaderCore``.
- ``FixedVariableCore``: a variable core pinned to one output size, so the
  variant can be used like any fixed-output hash.
"""
import logging
from typing import List, Optional, Type

from .buffer import BlockBuffer
from .errors import ConstructionError


logger = logging.getLogger(__name__)


class HashCore:
    block_size: int = 0
    # hold back the last full block until finalization
    lazy_buffer: bool = False
    name: str = ""

    def compress(self, block: bytes) -> None:
        raise NotImplementedError

    def update_blocks(self, blocks: List[bytes]) -> None:
        """Compress ``blocks`` in order."""
        for block in blocks:
            self.compress(block)

    def initial_input(self) -> bytes:
        """Bytes absorbed right after construction (a keyed BLAKE2 block)."""
        return b""

    def __repr__(self) -> str:
        return f"{type(self).__name__} {{ ... }}"


class FixedOutputCore(HashCore):
    output_size: int = 0

    def finalize_fixed(self, buffer: BlockBuffer) -> bytes:
        raise NotImplementedError


class VariableOutputCore(HashCore):
    max_output_size: int = 0

    def __init__(self, output_size: int) -> None:
        if not 0 < output_size <= self.max_output_size:
            logger.error("%s: invalid output size %d (expected 1..%d)",
                         self.name, output_size, self.max_output_size)
            raise ConstructionError(
                f"invalid output size {output_size} for {self.name}, expected 1..{self.max_output_size}")
        self.output_size: int = output_size
        logger.debug("%s core created with output size %d", self.name, output_size)

    def finalize_variable(self, buffer: BlockBuffer) -> bytes:
        """Return exactly ``output_size`` bytes."""
        raise NotImplementedError


class XofReaderCore:
    def read_block(self) -> bytes:
        """Return the next output block and advance the state."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__} {{ ... }}"


class ExtendableOutputCore(HashCore):
    def finalize_xof(self, buffer: BlockBuffer) -> XofReaderCore:
        raise NotImplementedError


class FixedVariableCore(FixedOutputCore):
    """Fixed-output view over a variable-output core.

    Subclasses set ``inner_class`` and ``output_size``; block size and
    buffering mode are taken from the inner core. Extra keyword arguments go
    to the inner constructor, and ``output_size`` may be overridden per
    instance (hashlib-style ``digest_size``).
    """

    inner_class: Type[VariableOutputCore]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        inner = cls.__dict__.get("inner_class")
        if inner is not None:
            cls.block_size = inner.block_size
            cls.lazy_buffer = inner.lazy_buffer

    def __init__(self, output_size: Optional[int] = None, **params) -> None:
        if output_size is not None:
            self.output_size = output_size
        self.inner: VariableOutputCore = self.inner_class(self.output_size, **params)

    def compress(self, block: bytes) -> None:
        self.inner.compress(block)

    def update_blocks(self, blocks: List[bytes]) -> None:
        self.inner.update_blocks(blocks)

    def initial_input(self) -> bytes:
        return self.inner.initial_input()

    def finalize_fixed(self, buffer: BlockBuffer) -> bytes:
        return self.inner.finalize_variable(buffer)
