"""Pytest tests for SM3 (GB/T 32905-2016)."""
import pytest
from cryptography.hazmat.primitives import hashes

from purehash import Sm3


@pytest.mark.parametrize("msg,expected", [
    (b"abc", "66c7f0f462eeedd9d1f2d46bdc10e4e24167c4875cf2f7a2297da02b8f4ba8e0"),
    (b"abcd" * 16, "debe9ff92275b8a138604889c18e5a4d6fdb70e5387e5765293dcba39c0c5732"),
    (b"hello world", "44f0061e69fa6fdfc290c494654a05dc0c053da7e5c52b84ef93a9d67d3fff88"),
])
def test_known_answers(msg, expected):
    assert Sm3(msg).hexdigest() == expected


@pytest.mark.parametrize("msg", [b"", b"a" * 55, b"a" * 56, b"b" * 64, b"c" * 300])
def test_matches_cryptography(crypto_digest, msg):
    assert Sm3(msg).digest() == crypto_digest(hashes.SM3(), msg)


def test_million_a():
    h = Sm3()
    for _ in range(1000):
        h.update(b"a" * 1000)
    assert h.hexdigest() == "c8aaf89429554029e231941a2acc0ad61ff2a5acd8fadd25847a3a732b3b02c3"
