"""
purehash: cryptographic hash functions in pure Python.

Every algorithm is a small core (compression state plus finalization) under
one of three streaming wrappers: fixed output, output size chosen at
runtime, or extendable output. The wrappers share one block buffer and one
set of padding rules.

    >>> import purehash
    >>> purehash.Sha256(b"abc").hexdigest()[:16]
    'ba7816bf8f01cfea'
    >>> purehash.new("blake2b", b"abc", digest_size=32).digest_size
    32
    >>> purehash.shake128(b"abc", 10).hex()
    '5881092dd818bf5cf8a3'

The goal is clarity over speed. For production workloads, prefer hashlib,
which is implemented in optimized C.
"""
import logging
from typing import Dict, FrozenSet, Type

from .blake2 import (Blake2b, Blake2b512, Blake2bVar, Blake2Params, Blake2s,
                     Blake2s256, Blake2sVar)
from .buffer import BlockBuffer
from .core import (ExtendableOutputCore, FixedOutputCore, FixedVariableCore,
                   HashCore, VariableOutputCore, XofReaderCore)
from .errors import ConstructionError
from .groestl import (Groestl224, Groestl256, Groestl384, Groestl512,
                      GroestlLongVar, GroestlShortVar)
from .md2 import Md2
from .md5 import Md5
from .ripemd import Ripemd160, Ripemd256, Ripemd320
from .sha1 import Sha1
from .sha2 import Sha224, Sha256, Sha384, Sha512, Sha512_224, Sha512_256
from .sha3 import (Keccak224, Keccak256, Keccak256Full, Keccak384, Keccak512,
                   Sha3_224, Sha3_256, Sha3_384, Sha3_512, Shake128, Shake256,
                   shake128, shake256)
from .shabal import Shabal192, Shabal224, Shabal256, Shabal384, Shabal512
from .sm3 import Sm3
from .streebog import Streebog256, Streebog512
from .tiger import Tiger, Tiger2
from .wrapper import CoreWrapper, RtVariableWrapper, XofReader, XofWrapper


logger = logging.getLogger(__name__)

__version__ = "0.1.0"

_REGISTRY: Dict[str, Type] = {
    "md2": Md2,
    "md5": Md5,
    "sha1": Sha1,
    "sha224": Sha224,
    "sha256": Sha256,
    "sha384": Sha384,
    "sha512": Sha512,
    "sha512_224": Sha512_224,
    "sha512_256": Sha512_256,
    "sm3": Sm3,
    "ripemd160": Ripemd160,
    "ripemd256": Ripemd256,
    "ripemd320": Ripemd320,
    "tiger": Tiger,
    "tiger2": Tiger2,
    "sha3_224": Sha3_224,
    "sha3_256": Sha3_256,
    "sha3_384": Sha3_384,
    "sha3_512": Sha3_512,
    "keccak224": Keccak224,
    "keccak256": Keccak256,
    "keccak384": Keccak384,
    "keccak512": Keccak512,
    "keccak256full": Keccak256Full,
    "shake_128": Shake128,
    "shake_256": Shake256,
    "blake2b": Blake2b,
    "blake2s": Blake2s,
    "blake2b512": Blake2b512,
    "blake2s256": Blake2s256,
    "groestl224": Groestl224,
    "groestl256": Groestl256,
    "groestl384": Groestl384,
    "groestl512": Groestl512,
    "shabal192": Shabal192,
    "shabal224": Shabal224,
    "shabal256": Shabal256,
    "shabal384": Shabal384,
    "shabal512": Shabal512,
    "streebog256": Streebog256,
    "streebog512": Streebog512,
}

algorithms_available: FrozenSet[str] = frozenset(_REGISTRY)


def new(name: str, data: bytes = b"", **params):
    """Build a hasher by name, like ``hashlib.new``.

    Names are case-insensitive and ``-`` may stand for ``_``
    (``"SHA3-256"`` works). Extra keyword arguments go to the hasher, e.g.
    ``digest_size``, ``key``, ``salt`` and ``persona`` for BLAKE2.
    """
    key = name.lower().replace("-", "_")
    try:
        cls = _REGISTRY[key]
    except KeyError:
        raise ValueError(f"unsupported hash type {name}") from None
    logger.debug("new %s hasher", key)
    return cls(data, **params)


__all__ = [
    "algorithms_available", "new", "shake128", "shake256",
    "ConstructionError", "BlockBuffer",
    "HashCore", "FixedOutputCore", "VariableOutputCore", "ExtendableOutputCore",
    "XofReaderCore", "FixedVariableCore",
    "CoreWrapper", "RtVariableWrapper", "XofWrapper", "XofReader",
    "Md2", "Md5", "Sha1", "Sha224", "Sha256", "Sha384", "Sha512", "Sha512_224", "Sha512_256",
    "Sm3", "Ripemd160", "Ripemd256", "Ripemd320", "Tiger", "Tiger2",
    "Sha3_224", "Sha3_256", "Sha3_384", "Sha3_512",
    "Keccak224", "Keccak256", "Keccak384", "Keccak512", "Keccak256Full",
    "Shake128", "Shake256",
    "Blake2b", "Blake2s", "Blake2b512", "Blake2s256", "Blake2bVar", "Blake2sVar", "Blake2Params",
    "Groestl224", "Groestl256", "Groestl384", "Groestl512", "GroestlShortVar", "GroestlLongVar",
    "Shabal192", "Shabal224", "Shabal256", "Shabal384", "Shabal512",
    "Streebog256", "Streebog512",
]
