
class ParseStringError(ValueError):
    def __init__(self, msg):
        ValueError.__init__(self, msg)
        self.msg = msg


# iterator-like class
class DecimalStringParser(object):
    """Checks that 's' is an optional '+' or '-' followed by one or more
    ASCII digits, then hands out the digits one by one."""

    def error(self):
        raise ParseStringError("invalid literal for %s() with base 10: %r" %
                               (self.fname, self.literal))

    def __init__(self, s, fname='rbigint'):
        if not isinstance(s, str):
            raise TypeError("expected a str, got %s" % (type(s).__name__,))
        self.fname = fname
        self.literal = s
        sign = 1
        if s.startswith('-'):
            sign = -1
            s = s[1:]
        elif s.startswith('+'):
            s = s[1:]
        self.sign = sign
        if not s:
            self.error()
        for c in s:
            if not '0' <= c <= '9':
                self.error()
        self.s = s
        self.n = len(s)
        self.i = 0

    def rewind(self):
        self.i = 0

    def next_digit(self): # -1 => exhausted
        if self.i < self.n:
            digit = ord(self.s[self.i]) - ord('0')
            self.i += 1
            return digit
        else:
            return -1
