import struct
import sys

import pytest

from cowbigint.rarithmetic import *


def test_long_bit_matches_the_interpreter():
    assert LONG_BIT == struct.calcsize('P') * 8
    assert LONG_MAX == sys.maxsize == 2 ** (LONG_BIT - 1) - 1
    assert LONG_MIN == -2 ** (LONG_BIT - 1)

def test_limbmask():
    assert limbmask(-1) == MASK
    assert limbmask(BASE + 3) == 3

def test_bits_in_limb():
    assert bits_in_limb(0) == 0
    assert bits_in_limb(1) == 1
    assert bits_in_limb(MASK) == SHIFT

def test_check_limb():
    assert check_limb(MASK) == MASK
    pytest.raises(OverflowError, check_limb, BASE)
    pytest.raises(OverflowError, check_limb, -1)

def test_ovfcheck_range():
    assert ovfcheck_range(5, 0, 5, "x") == 5
    with pytest.raises(OverflowError) as excinfo:
        ovfcheck_range(6, 0, 5, "uint3")
    assert str(excinfo.value) == "uint3 out of range: 6"
