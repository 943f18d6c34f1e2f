import io

import pytest

from stdplus.printing import fprint, fprintln, prints


def test_prints_text_stream():
    buf = io.StringIO()
    prints(buf, "hello")
    assert buf.getvalue() == "hello"


def test_prints_binary_stream_encodes_utf8():
    buf = io.BytesIO()
    prints(buf, "hé")
    assert buf.getvalue() == "hé".encode("utf-8")


def test_prints_closed_stream_raises():
    buf = io.StringIO()
    buf.close()
    with pytest.raises(ValueError):
        prints(buf, "x")


def test_fprint_formats_positional():
    buf = io.StringIO()
    fprint("{}+{}", 1, 2, file=buf)
    assert buf.getvalue() == "1+2"


def test_fprintln_adds_newline():
    a = io.StringIO()
    b = io.StringIO()
    fprint("{} and {}", "x", 3, file=a)
    fprintln("{} and {}", "x", 3, file=b)
    assert b.getvalue() == a.getvalue() + "\n"


def test_fprintln_keyword_arguments():
    buf = io.StringIO()
    fprintln("{name}", name="value", file=buf)
    assert buf.getvalue() == "value\n"


def test_default_stream_is_stdout(capsys):
    fprint("abc")
    fprintln("def")
    assert capsys.readouterr().out == "abc" + "def\n"


def test_format_error_writes_nothing():
    buf = io.StringIO()
    with pytest.raises(IndexError):
        fprint("{} {}", 1, file=buf)
    assert buf.getvalue() == ""


def test_consecutive_prints_concatenate():
    buf = io.BytesIO()
    fprint("{}", "ab", file=buf)
    fprintln("{}", "cd", file=buf)
    assert buf.getvalue().decode("utf-8") == "ab" + "cd\n"