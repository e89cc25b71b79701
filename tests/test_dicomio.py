import io
import sys
import zlib

import pytest

from dicomtk.dicomio import (
    LIMIT_READ_UNTIL_EOF,
    ByteOrder,
    InsufficientBytesError,
    Reader,
    Writer,
)


def _reader(data: bytes, order=ByteOrder.LITTLE, limit=None) -> Reader:
    if limit is None:
        limit = len(data)
    return Reader(io.BytesIO(data), order, limit)


@pytest.mark.parametrize("order", [ByteOrder.LITTLE, ByteOrder.BIG])
def test_round_trip_all_types(order):
    out = io.BytesIO()
    w = Writer(out, order, False)
    w.write_byte(7)
    w.write_uint16(513)
    w.write_uint32(70000)
    w.write_float32(1.5)
    w.write_float64(-2.25)
    w.write_string("AB")
    w.write_zeros(3)
    w.write_bytes(b"xy")
    r = _reader(out.getvalue(), order)
    assert r.read_uint8() == 7
    assert r.read_uint16() == 513
    assert r.read_uint32() == 70000
    assert r.read_float32() == 1.5
    assert r.read_float64() == -2.25
    assert r.read_string(2) == "AB"
    assert r.read(3) == bytes(3)
    assert r.read(2) == b"xy"
    assert r.is_limit_exhausted()


def test_signed_values_round_trip():
    out = io.BytesIO()
    w = Writer(out)
    w.write_uint16(0xFFFF)
    w.write_uint32(0xFFFFFFFF)
    r = _reader(out.getvalue())
    assert r.read_int16() == -1
    assert r.read_int32() == -1


def test_wire_byte_order():
    out = io.BytesIO()
    w = Writer(out, ByteOrder.LITTLE)
    w.write_uint16(0x0102)
    w.set_transfer_syntax(ByteOrder.BIG, True)
    w.write_uint16(0x0102)
    assert out.getvalue() == b"\x02\x01\x01\x02"
    assert w.transfer_syntax == (ByteOrder.BIG, True)


def test_write_out_of_range_raises():
    w = Writer(io.BytesIO())
    with pytest.raises(ValueError):
        w.write_uint16(0x10000)


def test_read_stops_at_limit():
    r = _reader(b"abcdef", limit=4)
    assert r.read(10) == b"abcd"
    assert r.read(1) == b""
    assert r.bytes_left() == 0


def test_read_value_past_limit_raises_eof():
    r = _reader(b"\x01\x02\x03\x04", limit=2)
    with pytest.raises(EOFError):
        r.read_uint32()


def test_unlimited_bytes_left():
    r = Reader(io.BytesIO(b"ab"), ByteOrder.LITTLE, LIMIT_READ_UNTIL_EOF)
    assert r.bytes_left() == sys.maxsize
    assert not r.is_limit_exhausted()
    assert r.read(5) == b"ab"
    assert not r.is_limit_exhausted()


def test_skip_and_insufficient():
    r = _reader(b"abcdef")
    r.skip(2)
    assert r.read(1) == b"c"
    with pytest.raises(InsufficientBytesError):
        r.skip(10)


def test_push_limit_beyond_current_raises():
    r = _reader(b"abcd")
    with pytest.raises(ValueError):
        r.push_limit(5)


def test_push_pop_limit_skips_rest():
    r = _reader(b"abcdef")
    r.push_limit(3)
    assert r.read(1) == b"a"
    assert r.read(5) == b"bc"
    assert r.is_limit_exhausted()
    r.pop_limit()
    assert r.bytes_left() == 3
    r.push_limit(2)
    r.pop_limit()
    assert r.read(1) == b"f"


def test_pop_without_push_raises():
    r = _reader(b"ab")
    with pytest.raises(IndexError):
        r.pop_limit()


def test_peek_does_not_advance():
    r = _reader(b"abcd")
    assert r.peek(2) == b"ab"
    assert r.bytes_read == 0
    assert r.read(3) == b"abc"
    with pytest.raises(EOFError):
        r.peek(2)


def test_read_string_with_encoding():
    text = "Müller"
    data = text.encode("latin-1")
    r = _reader(data)
    r.set_coding_system("latin-1")
    assert r.read_string(len(data)) == text


def test_unknown_encoding_rejected():
    r = _reader(b"")
    with pytest.raises(LookupError):
        r.set_coding_system("no-such-codec")


def test_read_string_empty():
    r = _reader(b"")
    assert r.read_string(0) == ""


def test_set_transfer_syntax():
    r = _reader(b"\x01\x02")
    r.set_transfer_syntax(ByteOrder.BIG, True)
    assert r.implicit is True
    assert r.read_uint16() == 0x0102


def test_set_deflate_after_peek():
    payload = b"hello deflated world" * 10
    comp = zlib.compressobj(wbits=-zlib.MAX_WBITS)
    compressed = comp.compress(payload) + comp.flush()
    r = _reader(b"HD" + compressed, limit=2)
    assert r.read(2) == b"HD"
    r.peek(3)
    r.set_deflate()
    assert r.limit == LIMIT_READ_UNTIL_EOF
    assert r.read(len(payload) + 10) == payload
    assert r.read(1) == b""
    assert r.bytes_read == 2 + len(payload)