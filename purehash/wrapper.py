"""
Streaming wrappers.

A wrapper pairs one core with one block buffer and gives it the familiar
hashlib shape: ``update`` returns the hasher so calls chain, ``digest`` and
``hexdigest`` work on a copy and leave the hasher usable, and
``finalize*`` consume it.

    h = Sha256().update(b"hello").update(b" world")
    out = h.finalize()      # terminal, h.update(...) now raises ValueError

Three disciplines share the same absorb path:

- ``CoreWrapper``: fixed output size, resettable.
- ``RtVariableWrapper``: output size chosen at construction, no reset.
- ``XofWrapper``: extendable output through an ``XofReader``.
"""
import copy
import logging
from typing import Optional, Type

from .buffer import BlockBuffer
from .core import (ExtendableOutputCore, FixedOutputCore, HashCore,
                   VariableOutputCore, XofReaderCore)


logger = logging.getLogger(__name__)


class _Streaming:
    core_class: Type[HashCore]

    def _new_core(self) -> HashCore:
        return self.core_class()

    def _start(self) -> None:
        self._core = self._new_core()
        self._buffer = BlockBuffer(self._core.block_size, self._core.lazy_buffer)
        self._absorbed: int = 0
        self._finalized: bool = False
        prefix = self._core.initial_input()
        if prefix:
            self._buffer.absorb(prefix, self._core.update_blocks)

    def _check_open(self) -> None:
        if self._finalized:
            raise ValueError("already finalized")

    def _finish(self) -> None:
        self._finalized = True
        logger.debug("%s finalized after %d bytes", self.name, self._absorbed)

    def update(self, data: bytes) -> "_Streaming":
        """Absorb more input. Returns self so calls can be chained."""
        if isinstance(data, str):
            raise TypeError("Strings must be encoded before hashing")
        self._check_open()
        view = memoryview(data)
        self._buffer.absorb(view, self._core.update_blocks)
        self._absorbed += view.nbytes
        return self

    @property
    def name(self) -> str:
        return self._core.name

    @property
    def block_size(self) -> int:
        return self._core.block_size

    def copy(self) -> "_Streaming":
        """Independent copy of the hasher, state and pending bytes included."""
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {{ ... }}>"


class CoreWrapper(_Streaming):
    """Fixed-output hasher over a ``FixedOutputCore``."""

    core_class: Type[FixedOutputCore]

    def __init__(self, data: bytes = b"") -> None:
        self._start()
        self.update(data)

    @property
    def digest_size(self) -> int:
        return self._core.output_size

    def finalize(self) -> bytes:
        self._check_open()
        out = self._core.finalize_fixed(self._buffer)
        self._finish()
        return out

    def finalize_reset(self) -> bytes:
        out = self.finalize()
        self.reset()
        return out

    def reset(self) -> None:
        """Start over from the initial state."""
        self._start()

    def digest(self) -> bytes:
        return self.copy().finalize()

    def hexdigest(self) -> str:
        return self.digest().hex()


class RtVariableWrapper(_Streaming):
    """Hasher whose output size is chosen at construction.

    The size is mixed into the initial state, so two instances with
    different sizes are unrelated functions. There is no ``reset``; build a
    new instance instead.
    """

    core_class: Type[VariableOutputCore]

    def __init__(self, output_size: int, data: bytes = b"", **params) -> None:
        self._output_size = output_size
        self._params = params
        self._start()
        self.update(data)

    def _new_core(self) -> VariableOutputCore:
        return self.core_class(self._output_size, **self._params)

    @property
    def output_size(self) -> int:
        return self._core.output_size

    digest_size = output_size

    def finalize_variable(self, out: Optional[bytearray] = None) -> bytes:
        """Return ``output_size`` bytes, also writing them into ``out`` if given."""
        self._check_open()
        if out is not None and memoryview(out).nbytes != self.output_size:
            raise ValueError(f"output buffer must be {self.output_size} bytes")
        result = self._core.finalize_variable(self._buffer)
        self._finish()
        if out is not None:
            memoryview(out).cast("B")[:] = result
        return result

    finalize = finalize_variable

    def digest(self) -> bytes:
        return self.copy().finalize_variable()

    def hexdigest(self) -> str:
        return self.digest().hex()


class XofReader:
    """Reads a continuous output stream, whatever the request sizes are."""

    def __init__(self, core: XofReaderCore) -> None:
        self._core = core
        # current output block and the offset already handed out
        self._block: bytes = b""
        self._off: int = 0

    def read(self, n: int) -> bytes:
        out = bytearray()
        while n > 0:
            if self._off == len(self._block):
                self._block = self._core.read_block()
                self._off = 0
            take = min(n, len(self._block) - self._off)
            out += self._block[self._off:self._off + take]
            self._off += take
            n -= take
        return bytes(out)

    def read_into(self, buf: bytearray) -> int:
        """Fill ``buf`` completely and return the number of bytes written."""
        view = memoryview(buf).cast("B")
        view[:] = self.read(len(view))
        return len(view)

    def __repr__(self) -> str:
        return "<XofReader { ... }>"


class XofWrapper(_Streaming):
    """Extendable-output hasher (SHAKE)."""

    core_class: Type[ExtendableOutputCore]
    digest_size: int = 0

    def __init__(self, data: bytes = b"") -> None:
        self._start()
        self.update(data)

    def finalize_xof(self) -> XofReader:
        self._check_open()
        reader = XofReader(self._core.finalize_xof(self._buffer))
        self._finish()
        return reader

    def finalize_xof_reset(self) -> XofReader:
        reader = self.finalize_xof()
        self.reset()
        return reader

    def reset(self) -> None:
        self._start()

    def digest(self, length: int) -> bytes:
        """First ``length`` output bytes, like hashlib's ``shake_*.digest``."""
        return self.copy().finalize_xof().read(length)

    def hexdigest(self, length: int) -> str:
        return self.digest(length).hex()
