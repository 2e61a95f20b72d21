"""
This file defines the limb arithmetic used by the storage and bigint
layers:

SHIFT       number of bits in one limb
BASE        2 ** SHIFT
MASK        BASE - 1, the largest limb value
limbmask    truncate a Python int to an unsigned limb
check_limb  reject a value that is not already a limb

Limbs are always plain non-negative Python ints in range(BASE).
"""

import sys

SHIFT = 32
BASE = 1 << SHIFT
MASK = BASE - 1

# whatever size a machine word has, make it big enough for a pointer
LONG_BIT = sys.maxsize.bit_length() + 1
LONG_MAX = sys.maxsize
LONG_MIN = -sys.maxsize - 1

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
UINT32_MAX = MASK
UINT64_MAX = (1 << 64) - 1

HASH_MODULUS = sys.hash_info.modulus


def limbmask(x):
    return x & MASK

def bits_in_limb(d):
    # number of significant bits in a single limb
    return d.bit_length()

def check_limb(x):
    if not 0 <= x <= MASK:
        raise OverflowError("limb out of range: %r" % (x,))
    return x

def ovfcheck_range(x, lo, hi, what):
    """Return x unchanged, or raise OverflowError if it is outside
    [lo, hi]."""
    if not lo <= x <= hi:
        raise OverflowError("%s out of range: %d" % (what, x))
    return x
