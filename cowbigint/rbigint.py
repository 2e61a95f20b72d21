import operator

from cowbigint.rarithmetic import SHIFT, MASK, LONG_MIN, LONG_MAX, HASH_MODULUS
from cowbigint.rarithmetic import INT32_MIN, INT32_MAX, UINT32_MAX, UINT64_MAX
from cowbigint.rarithmetic import bits_in_limb, ovfcheck_range
from cowbigint.rstorage import Storage
from cowbigint.rstring import DecimalStringParser

# note about limb sizes:
# limbs are unsigned 32-bit values.  The algorithms below accumulate
# into plain Python ints, which must be able to hold two limbs plus a
# sign bit; on CPython they always can.

NULLDIGIT = 0
ONEDIGIT = 1


class rbigint(object):
    """A signed arbitrary-precision integer: a sign and a Storage of
    limbs.

    The value is never changed once an operation has returned it; every
    operation builds a fresh rbigint.  Copies share the limb buffer of
    the original until one of them is written to.

    '/' and '%' truncate toward zero, like C.  '//' and divmod() round
    toward negative infinity, like Python ints.
    """

    __slots__ = ('_digits', 'sign')

    def __init__(self, digits=None, sign=0):
        if digits is None:
            digits = Storage(1)
        elif not isinstance(digits, Storage):
            digits = Storage.fromlist(digits)
        assert digits.size() > 0
        assert sign in (-1, 0, 1)
        self._digits = digits
        self.sign = sign

    def digit(self, x):
        """Return the x'th digit, as an int."""
        return self._digits.read(x)

    def setdigit(self, x, val):
        self._digits.write(x, val)

    def numdigits(self):
        return self._digits.size()

    def copy(self):
        return rbigint(self._digits.copy(), self.sign)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    # ____________________________________________________________
    # construction

    @staticmethod
    def fromint32(intval):
        ovfcheck_range(intval, INT32_MIN, INT32_MAX, "int32")
        if intval < 0:
            return rbigint(Storage.fromlist([-intval]), -1)
        elif intval > 0:
            return rbigint(Storage.fromlist([intval]), 1)
        return rbigint()

    @staticmethod
    def fromuint32(intval):
        ovfcheck_range(intval, 0, UINT32_MAX, "uint32")
        if intval == 0:
            return rbigint()
        return rbigint(Storage.fromlist([intval]), 1)

    @staticmethod
    def fromuint64(intval):
        ovfcheck_range(intval, 0, UINT64_MAX, "uint64")
        z = rbigint(Storage.fromlist([intval & MASK, intval >> SHIFT]), 1)
        z._normalize()
        return z

    @staticmethod
    def fromint(intval):
        """Build from a Python int that fits a signed machine word."""
        ovfcheck_range(intval, LONG_MIN, LONG_MAX, "int")
        if INT32_MIN <= intval <= INT32_MAX:
            return rbigint.fromint32(intval)
        return rbigint.fromlong(intval)

    @staticmethod
    def frombool(b):
        if b:
            return rbigint(Storage.fromlist([ONEDIGIT]), 1)
        return rbigint()

    @staticmethod
    def fromlong(l):
        return rbigint(*args_from_long(l))

    @staticmethod
    def fromdecimalstr(s):
        """Parse an optional sign followed by decimal digits.  Raises
        ParseStringError for anything else, including whitespace."""
        return parse_digit_string(DecimalStringParser(s))

    # ____________________________________________________________
    # conversion

    def tolong(self):
        l = 0
        i = self.numdigits() - 1
        while i >= 0:
            l = (l << SHIFT) | self.digit(i)
            i -= 1
        return l * self.sign

    def toint(self):
        l = self.tolong()
        if not LONG_MIN <= l <= LONG_MAX:
            raise OverflowError("rbigint too large to convert to int")
        return l

    def tobool(self):
        return self.sign != 0

    def is_negative(self):
        return self.sign < 0

    def str(self):
        return _format_decimal(self)

    def hash(self):
        return _hash(self)

    def bit_length(self):
        i = self.numdigits()
        if i == 1 and self.digit(0) == NULLDIGIT:
            return 0
        return (i - 1) * SHIFT + bits_in_limb(self.digit(i - 1))

    # ____________________________________________________________
    # comparison

    def eq(self, other):
        if (self.sign != other.sign or
            self.numdigits() != other.numdigits()):
            return False

        i = 0
        ld = self.numdigits()
        while i < ld:
            if self.digit(i) != other.digit(i):
                return False
            i += 1
        return True

    def ne(self, other):
        return not self.eq(other)

    def lt(self, other):
        if self.sign > other.sign:
            return False
        if self.sign < other.sign:
            return True
        ld1 = self.numdigits()
        ld2 = other.numdigits()
        if ld1 > ld2:
            if other.sign > 0:
                return False
            else:
                return True
        elif ld1 < ld2:
            if other.sign > 0:
                return True
            else:
                return False
        i = ld1 - 1
        while i >= 0:
            d1 = self.digit(i)
            d2 = other.digit(i)
            if d1 < d2:
                if other.sign > 0:
                    return True
                else:
                    return False
            elif d1 > d2:
                if other.sign > 0:
                    return False
                else:
                    return True
            i -= 1
        return False

    def le(self, other):
        return not other.lt(self)

    def gt(self, other):
        return other.lt(self)

    def ge(self, other):
        return not self.lt(other)

    # ____________________________________________________________
    # arithmetic

    def add(self, other):
        if self.sign == 0:
            return other.copy()
        if other.sign == 0:
            return self.copy()
        if self.sign == other.sign:
            result = _x_add(self, other)
        else:
            result = _x_sub(other, self)
        result.sign *= other.sign
        return result

    def sub(self, other):
        if other.sign == 0:
            return self.copy()
        elif self.sign == 0:
            return other.neg()
        elif self.sign == other.sign:
            result = _x_sub(self, other)
        else:
            result = _x_add(self, other)
        result.sign *= self.sign
        return result

    def mul(self, b):
        a = self
        if a.sign == 0 or b.sign == 0:
            return rbigint()

        if a.numdigits() > b.numdigits():
            a, b = b, a

        if a.numdigits() == 1:
            if a.digit(0) == ONEDIGIT:
                return rbigint(b._digits.copy(), a.sign * b.sign)
            result = _muladd1(b, a.digit(0))
        else:
            result = _x_mul(a, b)
        result.sign = a.sign * b.sign
        return result

    def div(self, other):
        """Quotient rounded toward zero."""
        div, mod = _divrem(self, other)
        return div

    def mod(self, other):
        """Remainder of div(): zero or with the sign of self."""
        div, mod = _divrem(self, other)
        return mod

    def truncdivmod(self, other):
        return _divrem(self, other)

    def floordiv(self, other):
        div, mod = self.divmod(other)
        return div

    def floormod(self, other):
        div, mod = self.divmod(other)
        return mod

    def divmod(v, w):
        """
        The expression a mod b has the value a - b*floor(a/b).
        The _divrem function gives the remainder after division of
        |a| by |b|, with the sign of a.  This is also expressed
        as a - b*trunc(a/b), if trunc truncates towards zero.
        Some examples:
          a   b   a rem b     a mod b
          13  10   3           3
         -13  10  -3           7
          13 -10   3          -7
         -13 -10  -3          -3
        So, to get from rem to mod, we have to add b if a and b
        have different signs.  We then subtract one from the 'div'
        part of the outcome to keep the invariant intact.
        """
        div, mod = _divrem(v, w)
        if mod.sign * w.sign == -1:
            mod = mod.add(w)
            div = div.sub(ONERBIGINT)
        return div, mod

    def neg(self):
        return rbigint(self._digits.copy(), -self.sign)

    def pos(self):
        return self.copy()

    def abs(self):
        return rbigint(self._digits.copy(), abs(self.sign))

    def incr(self):
        return self.add(ONERBIGINT)

    def decr(self):
        return self.sub(ONERBIGINT)

    def invert(self): #Implement ~x as -(x + 1)
        if self.sign == 0:
            return ONENEGATIVERBIGINT.copy()

        ret = self.incr()
        ret.sign = -ret.sign
        return ret

    # ____________________________________________________________
    # shifts

    def lshift(self, int_other):
        if int_other < 0:
            raise ValueError("negative shift count")
        if self.sign == 0:
            return rbigint()

        wordshift = int_other // SHIFT
        remshift = int_other - wordshift * SHIFT

        # the copy shares our limbs; the first write makes them private
        z = self.copy()
        digits = z._digits
        if remshift:
            carry = 0
            i = 0
            size = digits.size()
            while i < size:
                accum = (digits.read(i) << remshift) | carry
                digits.write(i, accum)
                carry = accum >> SHIFT
                i += 1
            if carry:
                digits.push_back(carry)
        if wordshift:
            digits.insert(wordshift)
        return z

    def rshift(self, int_other):
        if int_other < 0:
            raise ValueError("negative shift count")
        if self.sign == -1:
            # rounds toward negative infinity: -1 >> n == -1
            a = self.invert().rshift(int_other)
            return a.invert()

        wordshift = int_other // SHIFT
        if wordshift >= self.numdigits():
            return rbigint()

        loshift = int_other - wordshift * SHIFT
        hishift = SHIFT - loshift
        z = self.copy()
        digits = z._digits
        if wordshift:
            digits.erase(wordshift)
        if loshift:
            carry = 0
            i = digits.size() - 1
            while i >= 0:
                d = digits.read(i)
                digits.write(i, (d >> loshift) | carry)
                carry = d << hishift
                i -= 1
        z._normalize()
        return z

    # ____________________________________________________________
    # bitwise

    def and_(self, other):
        return _bitwise(self, '&', other)

    def xor(self, other):
        return _bitwise(self, '^', other)

    def or_(self, other):
        return _bitwise(self, '|', other)

    # ____________________________________________________________

    def _normalize(self):
        digits = self._digits
        i = digits.size()

        while i > 1 and digits.read(i - 1) == NULLDIGIT:
            i -= 1
        if i == 0:
            digits.push_back(NULLDIGIT)
            i = 1

        if i != digits.size():
            digits.resize(i)
        if i == 1 and digits.read(0) == NULLDIGIT:
            self.sign = 0

    def __repr__(self):
        kind = 'inline' if self._digits.is_inline() else 'shared'
        return "<rbigint digits=%s, sign=%s, size=%d, %s, %s>" % (
            self._digits.tolist(), self.sign, self.numdigits(), kind,
            self.str())

    # ____________________________________________________________
    # Python protocol

    __str__ = str
    __hash__ = hash

    def __bool__(self):
        return self.tobool()

    def __int__(self):
        return self.tolong()

    __index__ = __int__

    def __neg__(self):
        return self.neg()

    def __pos__(self):
        return self.pos()

    def __abs__(self):
        return self.abs()

    def __invert__(self):
        return self.invert()

    def __lshift__(self, other):
        count = _shift_count(other)
        if count is None:
            return NotImplemented
        return self.lshift(count)

    def __rshift__(self, other):
        count = _shift_count(other)
        if count is None:
            return NotImplemented
        return self.rshift(count)

    def __rlshift__(self, other):
        other = _convert(other)
        if other is None:
            return NotImplemented
        return other.lshift(self.tolong())

    def __rrshift__(self, other):
        other = _convert(other)
        if other is None:
            return NotImplemented
        return other.rshift(self.tolong())


def _convert(x):
    if isinstance(x, rbigint):
        return x
    if isinstance(x, int):
        return rbigint.fromlong(x)
    return None

def _shift_count(x):
    if isinstance(x, rbigint):
        return x.tolong()
    if isinstance(x, int):
        return x
    return None

def _make_binary(methname):
    def binary(self, other):
        other = _convert(other)
        if other is None:
            return NotImplemented
        return getattr(self, methname)(other)
    def reflected(self, other):
        other = _convert(other)
        if other is None:
            return NotImplemented
        return getattr(other, methname)(self)
    return binary, reflected

for _name, _methname in [('add', 'add'), ('sub', 'sub'), ('mul', 'mul'),
                         ('truediv', 'div'), ('mod', 'mod'),
                         ('floordiv', 'floordiv'), ('divmod', 'divmod'),
                         ('and', 'and_'), ('or', 'or_'), ('xor', 'xor')]:
    _binary, _reflected = _make_binary(_methname)
    _binary.__name__ = '__%s__' % _name
    _reflected.__name__ = '__r%s__' % _name
    setattr(rbigint, _binary.__name__, _binary)
    setattr(rbigint, _reflected.__name__, _reflected)

def _make_compare(methname):
    def compare(self, other):
        other = _convert(other)
        if other is None:
            return NotImplemented
        return getattr(self, methname)(other)
    compare.__name__ = '__%s__' % methname
    return compare

for _methname in ['eq', 'ne', 'lt', 'le', 'gt', 'ge']:
    setattr(rbigint, '__%s__' % _methname, _make_compare(_methname))

del _name, _methname, _binary, _reflected

ONERBIGINT = rbigint([ONEDIGIT], 1)
ONENEGATIVERBIGINT = rbigint([ONEDIGIT], -1)
NULLRBIGINT = rbigint()

#_________________________________________________________________

# Helper Functions

def digits_from_nonneg_long(l):
    digits = []
    while True:
        digits.append(l & MASK)
        l = l >> SHIFT
        if not l:
            return digits

def args_from_long(x):
    if x >= 0:
        if x == 0:
            return [NULLDIGIT], 0
        else:
            return digits_from_nonneg_long(x), 1
    else:
        return digits_from_nonneg_long(-x), -1

def _x_add(a, b):
    """ Add the absolute values of two bigint integers. """
    size_a = a.numdigits()
    size_b = b.numdigits()

    # Ensure a is the larger of the two:
    if size_a < size_b:
        a, b = b, a
        size_a, size_b = size_b, size_a
    z = rbigint(Storage(size_a + 1), 1)
    i = 0
    carry = 0
    while i < size_b:
        carry += a.digit(i) + b.digit(i)
        z.setdigit(i, carry)
        carry >>= SHIFT
        i += 1
    while i < size_a:
        carry += a.digit(i)
        z.setdigit(i, carry)
        carry >>= SHIFT
        i += 1
    z.setdigit(i, carry)
    z._normalize()
    return z

def _x_sub(a, b):
    """ Subtract the absolute values of two integers. """

    size_a = a.numdigits()
    size_b = b.numdigits()
    sign = 1

    # Ensure a is the larger of the two:
    if size_a < size_b:
        sign = -1
        a, b = b, a
        size_a, size_b = size_b, size_a
    elif size_a == size_b:
        # Find highest digit where a and b differ:
        i = size_a - 1
        while i >= 0 and a.digit(i) == b.digit(i):
            i -= 1
        if i < 0:
            return rbigint()
        if a.digit(i) < b.digit(i):
            sign = -1
            a, b = b, a
        size_a = size_b = i + 1

    z = rbigint(Storage(size_a), sign)
    borrow = 0
    i = 0
    while i < size_b:
        borrow = a.digit(i) - b.digit(i) - borrow
        z.setdigit(i, borrow)
        borrow = (borrow >> SHIFT) & 1   # keep only one sign bit
        i += 1
    while i < size_a:
        borrow = a.digit(i) - borrow
        z.setdigit(i, borrow)
        borrow = (borrow >> SHIFT) & 1
        i += 1

    assert borrow == 0
    z._normalize()
    return z

def _x_mul(a, b):
    """
    Grade school multiplication, ignoring the signs.
    Returns the absolute value of the product.
    """

    size_a = a.numdigits()
    size_b = b.numdigits()

    z = rbigint(Storage(size_a + size_b), 1)
    i = 0
    while i < size_a:
        f = a.digit(i)
        carry = 0
        pz = i
        j = 0
        while j < size_b:
            carry += z.digit(pz) + b.digit(j) * f
            z.setdigit(pz, carry)
            pz += 1
            carry >>= SHIFT
            j += 1
        while carry:
            carry += z.digit(pz)
            z.setdigit(pz, carry)
            pz += 1
            carry >>= SHIFT
        i += 1
    z._normalize()
    return z

def _muladd1(a, n, extra=0):
    """Multiply by a single digit and add a single digit, ignoring the sign.
    """

    size_a = a.numdigits()
    z = rbigint(Storage(size_a + 1), 1)
    assert extra & MASK == extra
    carry = extra
    i = 0
    while i < size_a:
        carry += a.digit(i) * n
        z.setdigit(i, carry)
        carry >>= SHIFT
        i += 1
    z.setdigit(i, carry)
    z._normalize()
    return z

def _inplace_divrem1(pout, pin, n, size=0):
    """
    Divide bigint pin by non-zero digit n, storing quotient
    in pout, and returning the remainder. It's OK for pin == pout on entry.
    """
    rem = 0
    assert n > 0 and n <= MASK
    if not size:
        size = pin.numdigits()
    size -= 1
    while size >= 0:
        rem = (rem << SHIFT) | pin.digit(size)
        hi = rem // n
        pout.setdigit(size, hi)
        rem -= hi * n
        size -= 1
    return rem

def _divrem1(a, n):
    """
    Divide a bigint integer by a digit, returning both the quotient
    and the remainder as a tuple.
    The sign of a is ignored; n should not be zero.
    """
    assert n > 0 and n <= MASK

    size = a.numdigits()
    z = rbigint(Storage(size), 1)
    rem = _inplace_divrem1(z, a, n)
    z._normalize()
    return z, rem

def _v_lshift(z, a, m, d):
    """ Shift digit vector a[0:m] d bits left, with 0 <= d < SHIFT. Put
        * result in z[0:m], and return the d bits shifted out of the top.
    """

    carry = 0
    assert 0 <= d and d < SHIFT
    i = 0
    while i < m:
        acc = a.digit(i) << d | carry
        z.setdigit(i, acc)
        carry = acc >> SHIFT
        i += 1

    return carry

def _v_rshift(z, a, m, d):
    """ Shift digit vector a[0:m] d bits right, with 0 <= d < SHIFT. Put
        * result in z[0:m], and return the d bits shifted out of the bottom.
    """

    carry = 0
    mask = (1 << d) - 1

    assert 0 <= d and d < SHIFT
    i = m - 1
    while i >= 0:
        acc = (carry << SHIFT) | a.digit(i)
        carry = acc & mask
        z.setdigit(i, acc >> d)
        i -= 1

    return carry

def _x_divrem(v1, w1):
    """ Unsigned bigint division with remainder -- the algorithm """
    size_v = v1.numdigits()
    size_w = w1.numdigits()
    assert size_v >= size_w and size_w > 1

    v = rbigint(Storage(size_v + 1), 1)
    w = rbigint(Storage(size_w), 1)

    # normalize: shift w1 left so that its top digit is >= BASE/2.
    # shift v1 left by the same amount. Results go into w and v.
    d = SHIFT - bits_in_limb(w1.digit(size_w - 1))
    carry = _v_lshift(w, w1, size_w, d)
    assert carry == 0
    carry = _v_lshift(v, v1, size_v, d)
    if carry != 0 or v.digit(size_v - 1) >= w.digit(size_w - 1):
        v.setdigit(size_v, carry)
        size_v += 1

    # Now v[size_v-1] < w[size_w-1], so the quotient has at most
    # (and usually exactly) k = size_v - size_w digits.
    k = size_v - size_w
    if k == 0:
        # the remainder is v1 itself
        carry = _v_rshift(w, v, size_w, d)
        assert carry == 0
        w._normalize()
        return rbigint(), w

    assert k > 0
    a = rbigint(Storage(k), 1)

    wm1 = w.digit(size_w - 1)
    wm2 = w.digit(size_w - 2)

    j = size_v - 1
    k -= 1
    while k >= 0:
        assert j >= 0
        # inner loop: divide vk[0:size_w+1] by w[0:size_w], giving
        # single-digit quotient q, remainder in vk[0:size_w].

        # estimate quotient digit q from the three top digits of the
        # window and the two top digits of w; may overestimate by 1 (rare)
        vtop = v.digit(j)
        assert vtop <= wm1
        vv = (vtop << SHIFT) | v.digit(j - 1)
        q = vv // wm1
        r = vv - wm1 * q
        while wm2 * q > ((r << SHIFT) | v.digit(j - 2)):
            q -= 1
            r += wm1

        # subtract q*w[0:size_w] from vk[0:size_w+1]
        zhi = 0
        i = 0
        while i < size_w:
            z = v.digit(k + i) + zhi - q * w.digit(i)
            v.setdigit(k + i, z)
            zhi = z >> SHIFT
            i += 1

        # add w back if q was too large (this branch taken rarely)
        if vtop + zhi < 0:
            carry = 0
            i = 0
            while i < size_w:
                carry += v.digit(k + i) + w.digit(i)
                v.setdigit(k + i, carry)
                carry >>= SHIFT
                i += 1
            q -= 1

        # store quotient digit
        assert 0 <= q <= MASK
        a.setdigit(k, q)
        k -= 1
        j -= 1

    carry = _v_rshift(w, v, size_w, d)
    assert carry == 0

    a._normalize()
    w._normalize()

    return a, w

def _divrem(a, b):
    """ Long division with remainder, top-level routine """
    size_a = a.numdigits()
    size_b = b.numdigits()

    if b.sign == 0:
        raise ZeroDivisionError("long division or modulo by zero")

    if (size_a < size_b or
        (size_a == size_b and
         a.digit(size_a - 1) < b.digit(size_b - 1))):
        # |a| < |b|
        return rbigint(), a.copy()
    if size_b == 1:
        z, urem = _divrem1(a, b.digit(0))
        rem = rbigint([urem], int(urem != 0))
    else:
        z, rem = _x_divrem(a, b)
    # Set the signs.
    # The quotient z has the sign of a*b;
    # the remainder r has the sign of a,
    # so a = b*z + r.
    if a.sign != b.sign:
        z.sign = - z.sign
    if a.sign < 0 and rem.sign != 0:
        rem.sign = - rem.sign
    return z, rem

def _hash(v):
    # The same value as hash() of the equal Python int: the magnitude
    # modulo HASH_MODULUS, negated for negative numbers, and -1 is
    # reserved for errors.
    i = v.numdigits() - 1
    x = 0
    while i >= 0:
        x = ((x << SHIFT) | v.digit(i)) % HASH_MODULUS
        i -= 1
    x *= v.sign
    if x == -1:
        x = -2
    return x

#_________________________________________________________________

# two's complement

def _to_twos_complement(a, size):
    """Return the limbs of 'a' in two's complement over 'size' limbs:
    non-negative values are zero-extended; a negative value becomes the
    complement of |a| - 1, extended with all-ones limbs."""
    assert size > a.numdigits()
    if a.sign >= 0:
        digits = a._digits.copy()
        digits.resize(size, 0)
        return digits
    digits = _x_sub(a, ONERBIGINT)._digits
    i = 0
    ld = digits.size()
    while i < ld:
        digits.write(i, ~digits.read(i))
        i += 1
    digits.resize(size, MASK)
    return digits

_BITWISE_OPS = {'&': operator.and_, '|': operator.or_, '^': operator.xor}

def _bitwise(a, op, b): # '&', '|', '^'
    """ Bitwise and/or/xor operations """

    try:
        opfunc = _BITWISE_OPS[op]
    except KeyError:
        raise ValueError("unknown bitwise operation %r" % (op,))

    size_z = max(a.numdigits(), b.numdigits()) + 1
    da = _to_twos_complement(a, size_z)
    db = _to_twos_complement(b, size_z)
    nega = a.sign < 0
    negb = b.sign < 0

    # the sign bit of the result is the same operation on the sign bits
    negz = bool(opfunc(nega, negb))

    z = rbigint(Storage(size_z), 1)
    i = 0
    while i < size_z:
        z.setdigit(i, opfunc(da.read(i), db.read(i)))
        i += 1

    if not negz:
        z._normalize()
        return z

    # back from two's complement: complement, then add one
    i = 0
    while i < size_z:
        z.setdigit(i, ~z.digit(i))
        i += 1
    z._normalize()
    z = _x_add(z, ONERBIGINT)
    z.sign = -1
    return z

#_________________________________________________________________

# decimal conversion

def digits_max_for_base(base):
    dec_per_digit = 1
    while base ** dec_per_digit < MASK:
        dec_per_digit += 1
    dec_per_digit -= 1
    return base ** dec_per_digit

DEC_MAX = digits_max_for_base(10)
DEC_PER_DIGIT = len(str(DEC_MAX)) - 1

def parse_digit_string(parser):
    # helper for fromdecimalstr: value = value * 10 + digit, folded
    # DEC_PER_DIGIT digits at a time
    a = rbigint()
    tens, dig = 1, 0
    while True:
        digit = parser.next_digit()
        if tens == DEC_MAX or digit < 0:
            a = _muladd1(a, tens, dig)
            if digit < 0:
                break
            dig = digit
            tens = 10
        else:
            dig = dig * 10 + digit
            tens *= 10
    a.sign *= parser.sign
    return a

def _format_decimal(a):
    if a.sign == 0:
        return "0"

    # divide a copy of |a| in place; it shares the limbs of 'a' until
    # the first division writes to it
    scratch = a.abs()
    pieces = []
    while True:
        rem = _inplace_divrem1(scratch, scratch, DEC_MAX)
        scratch._normalize()
        if scratch.sign == 0:
            pieces.append(str(rem))
            break
        pieces.append(str(rem).zfill(DEC_PER_DIGIT))
    if a.sign < 0:
        pieces.append('-')
    pieces.reverse()
    return ''.join(pieces)
