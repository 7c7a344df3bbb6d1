import pytest

from cub3d.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix():
    buf = bytearray(b"hello world")
    result = memset(buf, ord("x"), 5)
    assert result is buf
    assert buf == bytearray(b"xxxxx world")


def test_memset_uses_low_byte():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert buf == bytearray(b"AAA")


def test_memset_none():
    assert memset(None, 1, 3) is None


def test_memset_too_long():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_memset_negative():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, -1)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf == bytearray(b"\0\0\0def")


def test_bzero_zero_length_keeps_buffer():
    buf = bytearray(b"abc")
    bzero(buf, 0)
    assert buf == bytearray(b"abc")


def test_calloc_is_zeroed():
    buf = calloc(4, 3)
    assert len(buf) == 12
    assert all(byte == 0 for byte in buf)


def test_calloc_empty():
    assert calloc(0, 8) == bytearray()


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first():
    data = b"banana"
    index = memchr(data, ord("n"), len(data))
    assert data[index] == ord("n")
    assert index == data.find(b"n")


def test_memchr_respects_limit():
    assert memchr(b"banana", ord("n"), 2) is None


def test_memchr_missing_and_none():
    assert memchr(b"abc", ord("z"), 3) is None
    assert memchr(None, ord("a"), 0) is None


def test_memchr_matches_zero_byte():
    assert memchr(b"ab\0c", 0, 4) == 2


def test_memcmp_equal():
    assert memcmp(b"same", b"same", 4) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_limit_ignores_tail():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_none():
    assert memcmp(None, b"a", 1) == 0


def test_memcpy_copies():
    dest = bytearray(b"........")
    result = memcpy(dest, b"data", 4)
    assert result is dest
    assert dest == bytearray(b"data....")


def test_memcpy_none():
    assert memcpy(None, b"a", 1) is None
    assert memcpy(bytearray(1), None, 1) is None


def test_memcpy_same_buffer():
    buf = bytearray(b"abc")
    assert memcpy(buf, buf, 3) is buf
    assert buf == bytearray(b"abc")


def test_memcpy_too_long_keeps_length():
    dest = bytearray(2)
    with pytest.raises(IndexError):
        memcpy(dest, b"abc", 3)
    assert len(dest) == 2


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_memmove_preserves_length():
    buf = bytearray(b"0123456789")
    memmove(buf, 3, 1, 5)
    assert len(buf) == 10
    assert buf[3:8] == bytearray(b"12345")


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memmove_none():
    assert memmove(None, 0, 0, 0) is None