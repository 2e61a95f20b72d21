"""
Track live limb buffers between start_tracking_allocations() and
stop_tracking_allocations().  Used by conftest.py to check that every
test leaves the reference counts balanced: a buffer that is still alive
once the test's values are gone was never released.
"""

import gc
import sys
import traceback


class MallocMismatch(Exception):
    def __str__(self):
        dict = self.args[0]
        dict2 = {}
        for obj, stack in dict.items():
            lines = ''.join(stack.format()).splitlines()
            if len(lines) > 8:
                lines = ['    ...'] + lines[-6:]
            text = '\n'.join(lines)
            dict2.setdefault(text, [])
            dict2[text].append(obj)
        lines = ['{']
        for text, objs in dict2.items():
            lines.append('')
            for obj in objs:
                lines.append('%r:' % (obj,))
            lines.append(text)
        lines.append('}')
        return '\n'.join(lines)


TRACK_ALLOCATIONS = False
ALLOCATED = {}

def start_tracking_allocations():
    global TRACK_ALLOCATIONS
    if TRACK_ALLOCATIONS:
        result = ALLOCATED.copy()   # nested start
    else:
        result = None
    TRACK_ALLOCATIONS = True
    ALLOCATED.clear()
    return result

def stop_tracking_allocations(check, prev=None):
    global TRACK_ALLOCATIONS
    assert TRACK_ALLOCATIONS
    # buffers held by reference cycles (e.g. a traceback kept by
    # pytest.raises) are only released by the cycle collector
    for i in range(3):
        if not ALLOCATED:
            break
        gc.collect()
    result = ALLOCATED.copy()
    ALLOCATED.clear()
    if prev is None:
        TRACK_ALLOCATIONS = False
    else:
        ALLOCATED.update(prev)
    if check and result:
        raise MallocMismatch(result)
    return result

# ____________________________________________________________

def remember_malloc(obj, framedepth=1):
    if TRACK_ALLOCATIONS:
        frame = sys._getframe(framedepth)
        stack = traceback.StackSummary.extract(
            traceback.walk_stack(frame), limit=10, lookup_lines=False)
        stack.reverse()     # outermost first, like a traceback
        ALLOCATED[obj] = stack

def remember_free(obj):
    if TRACK_ALLOCATIONS:
        # buffers allocated before tracking started are not in ALLOCATED
        ALLOCATED.pop(obj, None)
