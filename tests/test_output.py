import io

import pytest

from pushswap.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    buf = io.StringIO()
    put_char("x", buf)
    put_char("y", buf)
    assert buf.getvalue() == "xy"


def test_put_char_rejects_longer_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    buf = io.StringIO()
    put_str("hello", buf)
    assert buf.getvalue() == "hello"


def test_put_str_none_writes_nothing():
    buf = io.StringIO()
    put_str(None, buf)
    assert buf.getvalue() == ""


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("Just Numbers", buf)
    assert buf.getvalue() == "Just Numbers\n"


def test_put_endl_none_writes_nothing():
    buf = io.StringIO()
    put_endl(None, buf)
    assert buf.getvalue() == ""


@pytest.mark.parametrize("n", [0, 7, 10, -10, 2147483647, -2147483648])
def test_put_nbr_round_trip(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert int(buf.getvalue()) == n


def test_put_nbr_int_min_text():
    buf = io.StringIO()
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_put_nbr_rejects_float():
    with pytest.raises(TypeError):
        put_nbr(1.5, io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("abc")
    put_nbr(42)
    assert capsys.readouterr().out == "abc42"