import pytest

from cowbigint.rstring import DecimalStringParser, ParseStringError


def digits(parser):
    result = []
    while True:
        d = parser.next_digit()
        if d < 0:
            return result
        result.append(d)

def test_digits_and_sign():
    p = DecimalStringParser("-0907")
    assert p.sign == -1
    assert digits(p) == [0, 9, 0, 7]
    assert p.next_digit() == -1
    p.rewind()
    assert digits(p) == [0, 9, 0, 7]

def test_plus_sign():
    p = DecimalStringParser("+5")
    assert p.sign == 1
    assert digits(p) == [5]

@pytest.mark.parametrize('s', ["", "-", "+", "1-", "12 ", "\t1", "+ 1",
                               "1,000", "１"])
def test_invalid(s):
    with pytest.raises(ParseStringError) as excinfo:
        DecimalStringParser(s)
    assert "with base 10" in excinfo.value.msg

def test_function_name_in_message():
    e = pytest.raises(ParseStringError, DecimalStringParser, "x", "read_bigint")
    assert e.value.msg == "invalid literal for read_bigint() with base 10: 'x'"
    assert str(e.value) == e.value.msg

def test_not_a_string():
    pytest.raises(TypeError, DecimalStringParser, None)
    pytest.raises(TypeError, DecimalStringParser, 5)
