import pytest

from stdplus.strbuf import DEFAULT_INLINE_SIZE, StrBuf


def test_empty_buffer():
    buf = StrBuf()
    assert len(buf) == 0
    assert str(buf) == ""
    assert not buf.is_dynamic()
    assert buf.capacity() == DEFAULT_INLINE_SIZE


def test_append_concatenates():
    buf = StrBuf("ab")
    buf.append("cd")
    buf.push("e")
    assert buf == "ab" + "cd" + "e"
    assert len(buf) == len("abcde")


def test_stays_inline_up_to_inline_size():
    buf = StrBuf("abcd", inline_size=4)
    assert not buf.is_dynamic()
    assert buf.capacity() == 4


def test_growth_past_inline():
    buf = StrBuf("abcd", inline_size=4)
    buf.push("e")
    assert buf.is_dynamic()
    assert buf.capacity() == 7
    assert buf == "abcde"


def test_dynamic_growth_when_capacity_exceeded():
    buf = StrBuf("abcde", inline_size=4)
    capacity = buf.capacity()
    buf.append("f" * (capacity - len(buf)))
    assert buf.capacity() == capacity
    buf.push("g")
    assert buf.capacity() == 12


def test_capacity_never_below_length():
    buf = StrBuf(inline_size=3)
    previous = buf.capacity()
    for ch in "the quick brown fox jumps over the lazy dog":
        buf.push(ch)
        assert buf.capacity() >= len(buf)
        assert buf.capacity() >= previous
        previous = buf.capacity()
    assert buf == "the quick brown fox jumps over the lazy dog"


def test_shrink():
    text = "hello"
    buf = StrBuf(text)
    buf.shrink(2)
    assert str(buf) == text[:-2]
    buf.shrink(0)
    assert str(buf) == text[:-2]


@pytest.mark.parametrize("amount", [-1, 6])
def test_shrink_out_of_range(amount):
    buf = StrBuf("hello")
    with pytest.raises(ValueError):
        buf.shrink(amount)
    assert buf == "hello"


def test_clear_keeps_storage():
    buf = StrBuf("abcdefgh", inline_size=4)
    capacity = buf.capacity()
    buf.clear()
    assert len(buf) == 0
    assert buf == ""
    assert buf.is_dynamic()
    assert buf.capacity() == capacity


def test_push_rejects_multiple_characters():
    buf = StrBuf()
    with pytest.raises(ValueError):
        buf.push("ab")
    with pytest.raises(ValueError):
        buf.push("")
    assert len(buf) == 0


def test_append_rejects_non_str():
    buf = StrBuf()
    with pytest.raises(TypeError):
        buf.append(b"abc")


def test_append_another_buffer():
    buf = StrBuf("x")
    buf.append(StrBuf("yz"))
    assert buf == "x" + "yz"


def test_equality_ignores_storage():
    small = StrBuf("abcdef", inline_size=2)
    large = StrBuf("abcdef")
    assert small.is_dynamic() and not large.is_dynamic()
    assert small == large


def test_negative_inline_size():
    with pytest.raises(ValueError):
        StrBuf(inline_size=-1)


def test_unhashable():
    with pytest.raises(TypeError):
        hash(StrBuf("a"))