"""
Pytest tests for the block buffer and the padding policies.
The buffer is driven directly with a recording callback instead of a core.
"""
import pytest

from purehash.buffer import BlockBuffer
from purehash.padding import bit_terminated, iso7816, length_suffix, pkcs7, sponge, zeros


# Helpers ---------------------------------------------------------------------
class Recorder:
    def __init__(self):
        self.calls = []
        self.blocks = []

    def __call__(self, blocks):
        self.calls.append(len(blocks))
        self.blocks.extend(blocks)


def feed(buf, chunks):
    rec = Recorder()
    for c in chunks:
        buf.absorb(c, rec)
    return rec


# Absorb ----------------------------------------------------------------------
@pytest.mark.parametrize("chunks", [
    [b"x" * 10],
    [b"x" * 16],
    [b"x" * 15, b"x"],
    [b"x" * 7, b"x" * 9, b"x" * 40],
    [b"", b"x" * 33, b""],
])
def test_eager_accounting(chunks):
    buf = BlockBuffer(16)
    rec = feed(buf, chunks)
    total = sum(len(c) for c in chunks)
    assert len(rec.blocks) * 16 + buf.get_pos() == total
    assert 0 <= buf.get_pos() < 16
    assert all(len(b) == 16 for b in rec.blocks)
    assert b"".join(rec.blocks) + buf.tail() == b"".join(chunks)


@pytest.mark.parametrize("chunks", [
    [b"x" * 16],
    [b"x" * 32],
    [b"x" * 8, b"x" * 8],
    [b"x" * 16, b"y" * 16],
    [b"x" * 17],
])
def test_lazy_holds_back_last_full_block(chunks):
    buf = BlockBuffer(16, lazy=True)
    rec = feed(buf, chunks)
    total = sum(len(c) for c in chunks)
    assert len(rec.blocks) * 16 + buf.get_pos() == total
    assert 0 < buf.get_pos() <= 16
    assert b"".join(rec.blocks) + buf.tail() == b"".join(chunks)


def test_lazy_releases_held_block_on_more_input():
    buf = BlockBuffer(16, lazy=True)
    rec = feed(buf, [b"a" * 16])
    assert rec.blocks == [] and buf.get_pos() == 16
    rec = feed(buf, [b"b"])
    assert rec.blocks == [b"a" * 16]
    assert buf.tail() == b"b"


def test_blocks_go_out_in_one_call_per_absorb():
    buf = BlockBuffer(8)
    rec = feed(buf, [b"abc", bytes(range(40))])
    assert rec.calls == [5]
    assert rec.blocks[0] == b"abc" + bytes(range(5))


def test_no_callback_when_nothing_completes():
    buf = BlockBuffer(8)
    rec = feed(buf, [b"abc", b"de"])
    assert rec.calls == []
    assert buf.remaining() == 3


def test_accepts_memoryview_and_bytearray():
    buf = BlockBuffer(4)
    rec = feed(buf, [bytearray(b"ab"), memoryview(b"cdef")])
    assert rec.blocks == [b"abcd"]
    assert buf.tail() == b"ef"


# Padding ---------------------------------------------------------------------
@pytest.mark.parametrize("pending,n_blocks", [(0, 1), (55, 1), (56, 2), (63, 2)])
def test_len64_padding_block_count(pending, n_blocks):
    buf = BlockBuffer(64)
    feed(buf, [b"m" * pending])
    out = []
    buf.len64_padding_be(8 * pending, out.append)
    assert len(out) == n_blocks
    assert out[-1][-8:] == (8 * pending).to_bytes(8, "big")
    assert out[0][pending] == 0x80
    assert buf.get_pos() == 0


@pytest.mark.parametrize("pending,n_blocks", [(111, 1), (112, 2)])
def test_len128_padding_block_count(pending, n_blocks):
    buf = BlockBuffer(128)
    feed(buf, [b"m" * pending])
    out = []
    buf.len128_padding_be(8 * pending, out.append)
    assert len(out) == n_blocks
    assert out[-1][-16:] == (8 * pending).to_bytes(16, "big")


def test_len64_padding_le():
    buf = BlockBuffer(64)
    feed(buf, [b"abc"])
    out = []
    buf.len64_padding_le(24, out.append)
    assert out == [b"abc\x80" + bytes(52) + (24).to_bytes(8, "little")]


def test_length_suffix_custom_terminator():
    (block,) = length_suffix(b"\xff\xff", terminator=0x01)(b"ab", 8)
    assert block == b"ab\x01\x00\x00\x00\xff\xff"


def test_sponge_domain_and_final_bit_combine():
    (block,) = sponge(0x06)(b"x" * 7, 8)
    assert block == b"x" * 7 + b"\x86"
    (block,) = sponge(0x1F)(b"", 4)
    assert block == b"\x1f\x00\x00\x80"


def test_bit_terminated_and_iso7816():
    assert bit_terminated(0x01)(b"ab", 4) == [b"ab\x01\x00"]
    assert iso7816(b"", 4) == [b"\x80\x00\x00\x00"]


def test_pkcs7():
    assert pkcs7(b"abc", 5) == [b"abc\x02\x02"]
    assert pkcs7(b"", 4) == [b"\x04" * 4]


def test_zeros_accepts_full_block():
    assert zeros(b"abcd", 4) == [b"abcd"]
    assert zeros(b"a", 4) == [b"a\x00\x00\x00"]


def test_pad_with_resets_buffer():
    buf = BlockBuffer(8)
    feed(buf, [b"abc"])
    assert buf.pad_with(iso7816) == b"abc\x80" + bytes(4)
    assert buf.get_pos() == 0
    assert buf.tail() == b""


def test_repr_is_opaque():
    buf = BlockBuffer(8)
    feed(buf, [b"secret"])
    assert "secret" not in repr(buf)
    assert repr(buf) == "BlockBuffer { ... }"
