"""Pytest tests for Groestl."""
import pytest

from purehash import (ConstructionError, Groestl224, Groestl256, Groestl384, Groestl512,
                      GroestlLongVar, GroestlShortVar)


FOX = b"The quick brown fox jumps over the lazy dog"


@pytest.mark.parametrize("cls,msg,expected", [
    (Groestl224, b"", "f2e180fb5947be964cd584e22e496242c6a329c577fc4ce8c36d34c3"),
    (Groestl256, b"", "1a52d11d550039be16107f9c58db9ebcc417f16f736adb2502567119f0083467"),
    (Groestl256, FOX, "8c7ad62eb26a21297bc39c2d7293b4bd4d3399fa8afab29e970471739e28b301"),
    (Groestl256, b"my message", "dc0283ca481efa76b7c19dd5a0b763dff0e867451bd9488a9c59f6c8b8047a86"),
    (Groestl512, b"", "6d3ad29d279110eef3adbd66de2a0345a77baede1557f5d099fce0c03d6dc2ba"
                      "8e6d4a6633dfbd66053c20faa87d1a11f39a7fbe4a6c2f009801370308fc4ad8"),
])
def test_known_answers(cls, msg, expected):
    assert cls(msg).hexdigest() == expected


def test_fixed_sizes_are_pinned_variable_cores():
    assert GroestlShortVar(32, FOX).digest() == Groestl256(FOX).digest()
    assert GroestlShortVar(28, FOX).digest() == Groestl224(FOX).digest()
    assert GroestlLongVar(48, FOX).digest() == Groestl384(FOX).digest()
    assert GroestlLongVar(64, FOX).digest() == Groestl512(FOX).digest()


def test_block_sizes():
    assert Groestl256().block_size == 64
    assert Groestl384().block_size == 128


@pytest.mark.parametrize("size", [55, 56, 57, 63, 64])
def test_two_block_padding_is_consistent(size):
    msg = bytes(range(size))
    h = Groestl256()
    for i in range(size):
        h.update(msg[i:i + 1])
    assert h.digest() == Groestl256(msg).digest()


def test_size_bounds():
    with pytest.raises(ConstructionError):
        GroestlShortVar(33)
    with pytest.raises(ConstructionError):
        GroestlLongVar(0)


@pytest.mark.parametrize("cls,pairs", [
    (GroestlShortVar, [(16, 32), (20, 28)]),
    (GroestlLongVar, [(33, 64), (48, 64)]),
])
def test_sizes_are_unrelated(cls, pairs):
    for small, large in pairs:
        a = cls(small, FOX).digest()
        b = cls(large, FOX).digest()
        assert not b.startswith(a)
        assert not b.endswith(a)


# Messages 0, 1, 2, ... mod 256 around the one/two padding block boundary ------
@pytest.mark.parametrize("cls,size,expected", [
    (Groestl256, 55, "a2bbd209981d8e092deb8909433a9fc40c63738e1a5ba2d80f30d691205d422e"),
    (Groestl256, 56, "373a1ecc579afc93bf0fe2140f57dab5aa57bd43a265b5c3c615732cd420dbf5"),
    (Groestl256, 63, "03843d92c44a2b28c27105e6c3597cd5e9a1aebbda2001a0e25ad85a4b392ecf"),
    (Groestl256, 64, "aa3f0b70ae7e022644ed5bd29af4f66e2e9ebd10ef98bf50cd4680ac5ef1aaf4"),
    (Groestl512, 111, "74c38fd7e6ab3254277d3bd7367fc5cbdef35cdba14ef1de5fc0fa26ce97f283"
                      "aa17b2c79bd776464eaa2f8754c1b3153d50eac9ca931fe0453e62fb76349773"),
    (Groestl512, 112, "529b1189ad74ec37596754cab0424b7299d7dd51c639b72d05a485204ab9263d"
                      "96bec062bf7bd4664f4ed82052684aa3e46adab55a4bbc4fac30ffead1e7123e"),
    (Groestl512, 127, "f61cea93f8dcb9f48a78f14c990cf4690735495d1e6685acc86ab4f56f39f808"
                      "b3b2266120cd897a933e758aa40c81fef2d895eff52fe235b2025f4a7c910241"),
    (Groestl512, 128, "70b56b15a86cd65b19f4afe78f7b408b72287947cc0d28ba4189573fbe033cf9"
                      "a3298127b460778feecca5794407539acc267b27732e4fbc21bc96fcf9f2f17a"),
])
def test_padding_boundary_known_answers(cls, size, expected):
    msg = bytes(i & 0xFF for i in range(size))
    assert cls(msg).hexdigest() == expected
