"""Reading and writing rbigints as whitespace-separated decimal text.

'stream' is any object with the read(n) / write(s) methods of a text
file.  read_bigint() consumes one token and the single whitespace
character that ends it, if any.
"""

import py

from cowbigint.rbigint import rbigint
from cowbigint.rstring import ParseStringError

log = py.log.Producer("cowbigint streamio")

WHITESPACE = ' \t\n\r\f\v'


def read_token(stream):
    """Skip leading whitespace and return the next whitespace-delimited
    token, or '' at the end of the input."""
    c = stream.read(1)
    while c and c in WHITESPACE:
        c = stream.read(1)
    chars = []
    while c and c not in WHITESPACE:
        chars.append(c)
        c = stream.read(1)
    return ''.join(chars)

def _parse_token(token):
    try:
        return rbigint.fromdecimalstr(token)
    except ParseStringError as e:
        log.WARNING("rejected token %r: %s" % (token, e.msg))
        raise

def read_bigint(stream):
    token = read_token(stream)
    if not token:
        raise EOFError("no integer left in the input")
    return _parse_token(token)

def read_bigints(stream):
    while True:
        token = read_token(stream)
        if not token:
            return
        yield _parse_token(token)

def write_bigint(stream, value, end=''):
    stream.write(value.str())
    if end:
        stream.write(end)
