import io

import py
import pytest

from cowbigint import streamio
from cowbigint.rbigint import rbigint
from cowbigint.rstring import ParseStringError


def test_read_token():
    f = io.StringIO("  12\t-3\n\n+4")
    assert streamio.read_token(f) == "12"
    assert streamio.read_token(f) == "-3"
    assert streamio.read_token(f) == "+4"
    assert streamio.read_token(f) == ""

def test_read_token_consumes_one_separator():
    f = io.StringIO("12 x")
    streamio.read_token(f)
    assert f.read() == "x"

def test_read_bigint():
    f = io.StringIO("123456789012345678901234567890 -2\n")
    a = streamio.read_bigint(f)
    b = streamio.read_bigint(f)
    assert a.mul(b) == rbigint.fromdecimalstr(
        "-246913578024691357802469135780")
    pytest.raises(EOFError, streamio.read_bigint, f)

def test_read_bigint_empty_input():
    pytest.raises(EOFError, streamio.read_bigint, io.StringIO(""))
    pytest.raises(EOFError, streamio.read_bigint, io.StringIO(" \n\t "))

def test_read_bigints():
    f = io.StringIO("1 2\n3\n 18446744073709551616 ")
    values = [x.tolong() for x in streamio.read_bigints(f)]
    assert values == [1, 2, 3, 2 ** 64]

def test_bad_token_is_logged_and_raised():
    msgs = []
    state = py.log._getstate()
    py.log.setconsumer("cowbigint streamio", msgs.append)
    try:
        f = io.StringIO("7 1x2 9")
        assert streamio.read_bigint(f) == 7
        with pytest.raises(ParseStringError):
            streamio.read_bigint(f)
        # the reader is positioned after the bad token
        assert streamio.read_bigint(f) == 9
    finally:
        py.log._setstate(state)
    assert len(msgs) == 1
    assert msgs[0].keywords == ('cowbigint', 'streamio', 'WARNING')
    assert msgs[0].content() == (
        "rejected token '1x2': invalid literal for rbigint() with base 10: "
        "'1x2'")

def test_write_bigint():
    f = io.StringIO()
    streamio.write_bigint(f, rbigint.fromlong(-(2 ** 70)))
    streamio.write_bigint(f, rbigint(), end='\n')
    assert f.getvalue() == "-1180591620717411303424" "0\n"

def test_write_then_read():
    values = [0, -1, 10 ** 50, -(2 ** 100) + 3]
    f = io.StringIO()
    for x in values:
        streamio.write_bigint(f, rbigint.fromlong(x), end=' ')
    f.seek(0)
    assert [x.tolong() for x in streamio.read_bigints(f)] == values
