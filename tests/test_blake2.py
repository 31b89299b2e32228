"""
Pytest tests for BLAKE2b and BLAKE2s.
hashlib's blake2b/blake2s take the same parameters (digest size, key, salt,
personalization) and serve as the reference.
"""
import hashlib
import os

import pytest
from cryptography.hazmat.primitives import hashes

from purehash import (Blake2b, Blake2b512, Blake2bVar, Blake2s, Blake2s256, Blake2sVar,
                      ConstructionError)


def test_known_answers():
    assert Blake2b512(b"hello world").hexdigest() == (
        "021ced8799296ceca557832ab941a50b4a11f83478cf141f51f933f653ab9fbc"
        "c05a037cddbed06e309bf334942c4e58cdf1a46e237911ccd7fcf9787cbc7fd0")
    assert Blake2s256(b"hello world").hexdigest() == (
        "9aec6806794561107e594b1f6a8a6b0c92a0cba9acf5e5e93cca06f781813b0b")
    assert Blake2bVar(10, b"my_input").hexdigest() == "2cc55c84e416924e6400"


@pytest.mark.parametrize("ours,ref,block", [(Blake2b, hashlib.blake2b, 128), (Blake2s, hashlib.blake2s, 64)])
@pytest.mark.parametrize("size_blocks", [0, 0.5, 1, 1.5, 2, 3])
def test_unkeyed_matches_hashlib(ours, ref, block, size_blocks):
    msg = os.urandom(int(size_blocks * block))
    assert ours(msg).digest() == ref(msg).digest()


@pytest.mark.parametrize("ours,ref", [(Blake2b, hashlib.blake2b), (Blake2s, hashlib.blake2s)])
@pytest.mark.parametrize("msg", [b"", b"abc", b"z" * 64, b"z" * 128, b"z" * 129])
def test_keyed_salted_personalized_matches_hashlib(ours, ref, msg):
    key = b"secret key"
    salt = b"saltsalt"
    persona = b"app-v1"
    h = ours(msg, digest_size=20, key=key, salt=salt, persona=persona)
    assert h.digest() == ref(msg, digest_size=20, key=key, salt=salt, person=persona).digest()


@pytest.mark.parametrize("ours,ref,max_size", [(Blake2b, hashlib.blake2b, 64), (Blake2s, hashlib.blake2s, 32)])
def test_full_length_key(ours, ref, max_size):
    key = bytes(range(max_size))
    assert ours(b"", key=key).digest() == ref(b"", key=key).digest()
    assert ours(b"data", key=key).digest() == ref(b"data", key=key).digest()


@pytest.mark.parametrize("size", [1, 16, 20, 32, 63, 64])
def test_var_matches_hashlib_digest_size(size):
    msg = b"The quick brown fox jumps over the lazy dog"
    assert Blake2bVar(size, msg).digest() == hashlib.blake2b(msg, digest_size=size).digest()


def test_output_size_is_mixed_into_state():
    # a shorter output is not a prefix of a longer one
    long = Blake2bVar(64, b"abc").digest()
    short = Blake2bVar(32, b"abc").digest()
    assert long[:32] != short


def test_finalize_variable_into_buffer():
    h = Blake2sVar(16, b"abc")
    out = bytearray(16)
    result = h.finalize_variable(out)
    assert bytes(out) == result == hashlib.blake2s(b"abc", digest_size=16).digest()


def test_finalize_variable_rejects_wrong_buffer_size():
    h = Blake2sVar(16, b"abc")
    with pytest.raises(ValueError):
        h.finalize_variable(bytearray(15))
    # the failed call does not consume the hasher
    assert h.finalize_variable() == hashlib.blake2s(b"abc", digest_size=16).digest()


@pytest.mark.parametrize("cls,size", [(Blake2bVar, 0), (Blake2bVar, 65), (Blake2sVar, 0), (Blake2sVar, 33)])
def test_output_size_out_of_range(cls, size):
    with pytest.raises(ConstructionError):
        cls(size)


@pytest.mark.parametrize("kwargs", [
    dict(salt=b"s" * 17),
    dict(persona=b"p" * 17),
    dict(key=b"k" * 65),
    dict(digest_size=0),
    dict(digest_size=65),
])
def test_blake2b_rejects_oversized_parameters(kwargs):
    with pytest.raises(ConstructionError):
        Blake2b(b"", **kwargs)


def test_blake2s_parameter_limits():
    with pytest.raises(ConstructionError):
        Blake2s(salt=b"s" * 9)
    with pytest.raises(ConstructionError):
        Blake2s(persona=b"p" * 9)
    with pytest.raises(ConstructionError):
        Blake2s(key=b"k" * 33)


def test_construction_error_is_value_error():
    with pytest.raises(ValueError):
        Blake2sVar(100)


def test_reset_keeps_parameters():
    h = Blake2b(b"abc", digest_size=24, key=b"k")
    first = h.finalize_reset()
    h.update(b"abc")
    assert h.digest() == first == hashlib.blake2b(b"abc", digest_size=24, key=b"k").digest()
    assert h.digest_size == 24


@pytest.mark.parametrize("chunks", [[128], [64, 64], [127, 1], [1, 127, 128], [128, 0, 128]])
def test_block_aligned_chunks(chunks):
    msg = os.urandom(sum(chunks))
    h = Blake2b()
    off = 0
    for n in chunks:
        h.update(msg[off:off + n])
        off += n
    assert h.digest() == hashlib.blake2b(msg).digest()


@pytest.mark.parametrize("cls,pairs", [
    (Blake2bVar, [(16, 32), (32, 64)]),
    (Blake2sVar, [(8, 16), (16, 32)]),
])
def test_sizes_are_unrelated(cls, pairs):
    for small, large in pairs:
        a = cls(small, b"abc").digest()
        b = cls(large, b"abc").digest()
        assert not b.startswith(a)
        assert not b.endswith(a)


def test_matches_cryptography(crypto_digest):
    msg = b"The quick brown fox jumps over the lazy dog"
    assert Blake2b512(msg).digest() == crypto_digest(hashes.BLAKE2b(64), msg)
    assert Blake2s256(msg).digest() == crypto_digest(hashes.BLAKE2s(32), msg)
