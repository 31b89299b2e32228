"""
Pytest tests for the streaming wrappers and the name registry.
Every registered algorithm goes through the same behavioural checks.
"""
import pytest

import purehash
from purehash import Blake2bVar, Sha256, Shake128, algorithms_available


ALGORITHMS = sorted(algorithms_available)
MSG = bytes(range(256)) * 2


def _out(h):
    # XOF hashers need an explicit length
    if isinstance(h, purehash.XofWrapper):
        return h.digest(32)
    return h.digest()


@pytest.mark.parametrize("name", ALGORITHMS)
def test_chunking_does_not_change_digest(name):
    one = _out(purehash.new(name, MSG))
    h = purehash.new(name)
    pos = 0
    for size in (1, 7, 64, 1, 127, 128, 0):
        h.update(MSG[pos:pos + size])
        pos += size
    h.update(MSG[pos:])
    assert _out(h) == one


@pytest.mark.parametrize("name", ALGORITHMS)
def test_deterministic_and_input_sensitive(name):
    a = _out(purehash.new(name, b"abc"))
    assert a == _out(purehash.new(name, b"abc"))
    assert a != _out(purehash.new(name, b"abd"))


@pytest.mark.parametrize("name", ALGORITHMS)
def test_digest_size_and_name(name):
    h = purehash.new(name)
    assert h.name == name
    if not isinstance(h, purehash.XofWrapper):
        assert len(h.digest()) == h.digest_size


@pytest.mark.parametrize("name", ALGORITHMS)
def test_copy_is_independent(name):
    h = purehash.new(name, b"prefix")
    c = h.copy()
    c.update(b"more")
    assert _out(h) == _out(purehash.new(name, b"prefix"))
    assert _out(c) == _out(purehash.new(name, b"prefixmore"))


@pytest.mark.parametrize("name", ALGORITHMS)
def test_reset_matches_fresh_instance(name):
    h = purehash.new(name, b"garbage")
    h.reset()
    h.update(b"abc")
    assert _out(h) == _out(purehash.new(name, b"abc"))


def test_finalize_is_terminal():
    h = Sha256(b"abc")
    h.finalize()
    with pytest.raises(ValueError, match="already finalized"):
        h.update(b"x")
    with pytest.raises(ValueError):
        h.finalize()


def test_finalize_reset_leaves_hasher_usable():
    h = Sha256(b"abc")
    first = h.finalize_reset()
    assert first == Sha256(b"abc").digest()
    assert h.update(b"abc").finalize() == first


def test_variable_wrapper_is_terminal():
    h = Blake2bVar(16, b"abc")
    h.finalize_variable()
    with pytest.raises(ValueError):
        h.update(b"x")
    assert not hasattr(h, "reset")


def test_digest_does_not_finalize():
    h = Sha256(b"ab")
    h.digest()
    h.update(b"c")
    assert h.hexdigest() == Sha256(b"abc").hexdigest()


def test_update_returns_self():
    h = Sha256()
    assert h.update(b"a") is h


def test_str_input_rejected():
    with pytest.raises(TypeError):
        Sha256().update("abc")


def test_repr_hides_state():
    h = Shake128(b"secret")
    assert repr(h) == "<Shake128 { ... }>"
    assert "secret" not in repr(h.finalize_xof())


@pytest.mark.parametrize("alias,name", [("SHA3-256", "sha3_256"), ("Shake-128", "shake_128"), ("MD5", "md5")])
def test_new_normalizes_names(alias, name):
    assert purehash.new(alias, b"abc").name == name


def test_new_passes_parameters():
    h = purehash.new("blake2s", b"abc", digest_size=16, key=b"k")
    assert h.digest_size == 16


def test_new_rejects_unknown_name():
    with pytest.raises(ValueError, match="unsupported hash type"):
        purehash.new("sha0")


def test_registry_covers_families():
    expected = {"md2", "md5", "sha1", "sha256", "sha512_256", "sm3", "ripemd160", "tiger2",
                "sha3_512", "keccak256full", "shake_256", "blake2b", "groestl512", "shabal192",
                "streebog256"}
    assert expected <= algorithms_available
