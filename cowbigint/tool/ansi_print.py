"""
A color print consumer for py.log producers.
"""

import sys

import py
from py.io import ansi_print


class AnsiLog:

    KW_TO_COLOR = {
        # color supress
        'red': ((31,), True),
        'bold': ((1,), True),
        'WARNING': ((31,), False),
        'event': ((1,), True),
        'ERROR': ((1, 31), False),
        'info': ((35,), False),
        'debug': ((34,), False),
    }

    def __init__(self, kw_to_color={}, file=None):
        self.kw_to_color = self.KW_TO_COLOR.copy()
        self.kw_to_color.update(kw_to_color)
        self.file = file
        self.isatty = getattr(sys.stderr, 'isatty', lambda: False)

    def __call__(self, msg):
        keywords = []
        esc = []
        for kw in msg.keywords:
            color, supress = self.kw_to_color.get(kw, (None, False))
            if color:
                esc.extend(color)
            if not supress:
                keywords.append(kw)
        if not self.isatty():
            esc = []
        esc = tuple(esc)
        for line in msg.content().splitlines():
            ansi_print("[%s] %s" % (":".join(keywords), line), esc,
                       file=self.file)

ansi_log = AnsiLog()

# ____________________________________________________________
# Log levels

LOG_LEVELS = ('quiet', 'info', 'debug')

def set_log_level(level, keywords="cowbigint", consumer=None):
    """Route the messages of every producer below 'keywords'.

    'quiet' drops everything, 'info' shows all but the 'debug' messages,
    'debug' shows everything.
    """
    if level not in LOG_LEVELS:
        raise ValueError("unknown log level %r" % (level,))
    if consumer is None:
        consumer = ansi_log
    if level == 'quiet':
        consumer = None
    py.log.setconsumer(keywords, consumer)
    for producer in _DEBUG_PRODUCERS:
        if level == 'debug':
            py.log.setconsumer(producer, consumer)
        else:
            py.log.setconsumer(producer, None)

_DEBUG_PRODUCERS = []

def debug_producer(log):
    """Register the '.debug' child of a producer so that set_log_level()
    can silence it separately; returns the child."""
    child = log.debug
    _DEBUG_PRODUCERS.append(child._keywords)
    return child

# quiet until configured
py.log.setconsumer("cowbigint", None)
