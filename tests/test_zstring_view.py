import pytest

from stdplus.zstring_view import NPOS, ZStringView


def test_construct_rejects_embedded_nul():
    with pytest.raises(ValueError):
        ZStringView("a\0")


def test_construct_basic():
    assert ZStringView("c") == "c"
    zs = ZStringView("d")
    assert "d" == zs
    assert ZStringView(zs) == "d"


def test_construct_rejects_non_text():
    with pytest.raises(TypeError):
        ZStringView(b"abc")


def test_format():
    zs = ZStringView("d")
    assert f"d{zs}" == "dd"
    assert "d{}".format(ZStringView("c")) == "dc"


def test_passed_as_argument():
    def from_str(cs):
        return ZStringView(cs)

    assert from_str("ac") == "ac"


def test_no_type_coercion():
    zs = ZStringView("")
    assert zs == ""
    assert "" == zs
    assert zs != "\0"
    assert "\0" != zs
    assert zs < "\0"
    assert "\0" > zs


@pytest.mark.parametrize(
    "other, relation",
    [("ac", 0), ("a", 1), ("acb", -1), ("ad", -1), ("ab", 1)],
)
def test_comparison(other, relation):
    zs = ZStringView("ac")
    for rhs in (other, ZStringView(other)):
        assert zs.compare(rhs) == relation
        assert (zs == rhs) == (relation == 0)
        assert (rhs == zs) == (relation == 0)
        assert (zs < rhs) == (relation < 0)
        assert (rhs > zs) == (relation < 0)
        assert (zs > rhs) == (relation > 0)
        assert (rhs < zs) == (relation > 0)


def test_c_str_and_len():
    zs = ZStringView("abc")
    assert zs.c_str() == "abc\0"
    assert len(zs) == 3
    assert str(zs) == "abc"


def test_at():
    zs = ZStringView("abc")
    assert zs.at(1) == "b"
    with pytest.raises(IndexError):
        zs.at(3)


def test_substr():
    zs = ZStringView("hello")
    assert zs.substr() == "hello"
    assert zs.substr(1, 3) == "ell"
    assert zs.substr(5) == ""
    with pytest.raises(IndexError):
        zs.substr(6)


def test_suffix():
    zs = ZStringView("hello")
    assert zs.suffix(2) == "llo"
    assert zs.suffix(5) == ""
    assert isinstance(zs.suffix(1), ZStringView) and zs.suffix(1) == "ello"
    with pytest.raises(IndexError):
        zs.suffix(6)


def test_starts_ends_with():
    zs = ZStringView("hello")
    assert zs.starts_with("he")
    assert not zs.starts_with("lo")
    assert zs.ends_with(ZStringView("lo"))
    assert not zs.ends_with("he")


def test_find_and_rfind():
    zs = ZStringView("abcabc")
    assert zs.find("bc") == 1
    assert zs.find("bc", 2) == 4
    assert zs.find("x") == NPOS
    assert zs.rfind("bc") == 4
    assert zs.rfind("bc", 3) == 1
    assert zs.rfind("x") == NPOS


def test_find_of_family():
    zs = ZStringView("abcabc")
    assert zs.find_first_of("cb") == 1
    assert zs.find_first_of("a", 1) == 3
    assert zs.find_first_of("xyz") == NPOS
    assert zs.find_last_of("ab") == 4
    assert zs.find_last_of("c", 4) == 2
    assert zs.find_first_not_of("ab") == 2
    assert zs.find_first_not_of("abc") == NPOS
    assert zs.find_last_not_of("c") == 4
    assert zs.find_last_not_of("abc", 3) == NPOS


def test_hash_matches_str():
    assert hash(ZStringView("ac")) == hash("ac")
    assert {ZStringView("ac"): 1}["ac"] == 1