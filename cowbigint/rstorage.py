"""
Limb storage for rbigint: an ordered sequence of unsigned 32-bit limbs,
least significant first.

A Storage is a tagged variant with two cases:

  Inline   up to 'inline_capacity' limbs (2 by default) kept in a tuple
           of the Storage itself; copying it copies the limbs, nothing
           is shared and nothing needs releasing.

  Shared   a handle to a LimbBuffer, a growable list of limbs with a
           reference count.  Several Storage handles may point to the
           same buffer.  The count is always the number of live handles;
           the buffer is freed when the last of them is released.

Reads never allocate.  Every write first makes the limbs private: an
Inline storage that would grow past its capacity is promoted to a fresh
buffer, and a Shared storage whose buffer has other handles takes a
private copy of it (copy-on-write).  None of this is observable through
the read/write methods: a Storage behaves exactly like an unshared list.

With the 'eager_promotion' option, Inline storages are promoted on
every write, copy and assignment, whatever their size.
"""

import py

from cowbigint.rarithmetic import check_limb, limbmask
from cowbigint.tool import leakfinder
from cowbigint.tool.ansi_print import debug_producer, set_log_level

log = py.log.Producer("cowbigint storage")
log_debug = debug_producer(log)

# changed by configure()
_inline_capacity = 2
_eager_promotion = False
_track_stats = True
_config = None


class StorageStats(object):
    """Counters of what the storage layer did since the last reset()."""

    def __init__(self):
        self.reset()

    def reset(self):
        self.allocations = 0    # buffers created
        self.promotions = 0     # Inline -> Shared transitions
        self.cow_copies = 0     # private copies taken before a write
        self.shares = 0         # handles added to an existing buffer
        self.frees = 0          # buffers released for good

    def as_dict(self):
        return {'allocations': self.allocations,
                'promotions': self.promotions,
                'cow_copies': self.cow_copies,
                'shares': self.shares,
                'frees': self.frees}

    def dump(self):
        items = sorted(self.as_dict().items())
        log.info(", ".join(["%s=%d" % item for item in items]))

stats = StorageStats()


class LimbBuffer(object):
    """Heap buffer shared by one or more Shared storages."""
    __slots__ = ('limbs', 'refcount')

    def __init__(self, limbs):
        self.limbs = limbs
        self.refcount = 1
        if _track_stats:
            stats.allocations += 1
        leakfinder.remember_malloc(self, 2)

    def unique(self):
        return self.refcount == 1

    def add_ref(self):
        assert self.refcount > 0, "buffer already freed"
        self.refcount += 1
        if _track_stats:
            stats.shares += 1

    def rem_ref(self):
        assert self.refcount > 1
        self.refcount -= 1

    def free(self):
        assert self.refcount == 1
        self.refcount = 0
        self.limbs = None
        if _track_stats:
            stats.frees += 1
        leakfinder.remember_free(self)

    def extract_unique(self):
        """Drop one reference to this buffer and return a private copy
        of it for the caller."""
        self.rem_ref()
        if _track_stats:
            stats.cow_copies += 1
        log_debug("copy-on-write of %d limbs, %d handle(s) left" %
                  (len(self.limbs), self.refcount))
        return LimbBuffer(self.limbs[:])

    def __repr__(self):
        return '<LimbBuffer refcount=%d %r>' % (self.refcount, self.limbs)


class Storage(object):
    __slots__ = ('_small', '_buf')

    def __init__(self, size=0, fill=0):
        self._small = ()
        self._buf = None
        if size < 0:
            raise ValueError("negative storage size")
        check_limb(fill)
        if size <= _inline_capacity and not _eager_promotion:
            self._small = (fill,) * size
        else:
            self._small = None
            self._buf = LimbBuffer([fill] * size)
            if size <= _inline_capacity and _track_stats:
                stats.promotions += 1

    @staticmethod
    def _from_parts(small, buf):
        result = Storage.__new__(Storage)
        result._small = small
        result._buf = buf
        return result

    @staticmethod
    def fromlist(limbs):
        limbs = [check_limb(limb) for limb in limbs]
        if len(limbs) <= _inline_capacity and not _eager_promotion:
            return Storage._from_parts(tuple(limbs), None)
        if len(limbs) <= _inline_capacity and _track_stats:
            stats.promotions += 1
        return Storage._from_parts(None, LimbBuffer(limbs))

    def __del__(self):
        self.release()

    # ____________________________________________________________
    # read accessors

    def is_inline(self):
        return self._buf is None

    def is_shared(self):
        return self._buf is not None

    def refcount(self):
        """Number of handles on the buffer, or 0 for an Inline storage."""
        if self._buf is None:
            return 0
        return self._buf.refcount

    def shares_buffer_with(self, other):
        return self._buf is not None and self._buf is other._buf

    def _view(self):
        if self._buf is None:
            return self._small
        return self._buf.limbs

    def size(self):
        return len(self._view())

    __len__ = size

    def read(self, i):
        limbs = self._view()
        if not 0 <= i < len(limbs):
            raise IndexError("limb index out of range")
        return limbs[i]

    __getitem__ = read

    def back(self):
        limbs = self._view()
        if not limbs:
            raise IndexError("back() on empty storage")
        return limbs[-1]

    def tolist(self):
        return list(self._view())

    def __eq__(self, other):
        if not isinstance(other, Storage):
            return NotImplemented
        return self.tolist() == other.tolist()

    def __ne__(self, other):
        if not isinstance(other, Storage):
            return NotImplemented
        return not self == other

    __hash__ = None

    def __repr__(self):
        if self._buf is None:
            return '<Storage inline %r>' % (list(self._small),)
        return '<Storage shared refcount=%d %r>' % (self._buf.refcount,
                                                    self._buf.limbs)

    # ____________________________________________________________
    # ownership

    def _desmall(self):
        self._buf = LimbBuffer(list(self._small))
        self._small = None
        if _track_stats:
            stats.promotions += 1

    def _uniquify(self):
        if not self._buf.unique():
            self._buf = self._buf.extract_unique()

    def _prepare_write(self, newsize):
        """Make the limbs private before a write that leaves 'newsize'
        limbs.  Returns the list to modify in place, or None if the
        storage stays Inline and the caller must rebuild the tuple."""
        if self._buf is None:
            if newsize <= _inline_capacity and not _eager_promotion:
                return None
            self._desmall()
        else:
            self._uniquify()
        return self._buf.limbs

    def copy(self):
        if self._buf is not None:
            self._buf.add_ref()
            return Storage._from_parts(None, self._buf)
        if _eager_promotion:
            if _track_stats:
                stats.promotions += 1
            return Storage._from_parts(None, LimbBuffer(list(self._small)))
        return Storage._from_parts(self._small, None)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def assign(self, other):
        """Make self hold the same limbs as 'other', with the rules of
        copy(): share its buffer if it has one, else copy the inline limbs
        (into a fresh buffer under eager promotion)."""
        if other is self:
            return
        source = other.copy()
        self.release()
        self._small = source._small
        self._buf = source._buf
        # the reference now belongs to self
        source._small = ()
        source._buf = None

    def release(self):
        buf = self._buf
        if buf is not None:
            self._buf = None
            if buf.unique():
                buf.free()
            else:
                buf.rem_ref()
        self._small = ()

    # ____________________________________________________________
    # mutating accessors

    def write(self, i, value):
        """Store 'value' truncated to a limb at index i."""
        size = self.size()
        if not 0 <= i < size:
            raise IndexError("limb index out of range")
        value = limbmask(value)
        limbs = self._prepare_write(size)
        if limbs is None:
            small = list(self._small)
            small[i] = value
            self._small = tuple(small)
        else:
            limbs[i] = value

    __setitem__ = write

    def push_back(self, value):
        value = limbmask(value)
        limbs = self._prepare_write(self.size() + 1)
        if limbs is None:
            self._small = self._small + (value,)
        else:
            limbs.append(value)

    def pop_back(self):
        size = self.size()
        if size == 0:
            raise IndexError("pop_back() on empty storage")
        limbs = self._prepare_write(size - 1)
        if limbs is None:
            value = self._small[-1]
            self._small = self._small[:-1]
            return value
        return limbs.pop()

    def resize(self, size, fill=0):
        if size < 0:
            raise ValueError("negative storage size")
        check_limb(fill)
        oldsize = self.size()
        if size == oldsize and self._buf is None and not _eager_promotion:
            return
        limbs = self._prepare_write(size)
        if limbs is None:
            if size < oldsize:
                self._small = self._small[:size]
            else:
                self._small = self._small + (fill,) * (size - oldsize)
        elif size < oldsize:
            del limbs[size:]
        else:
            limbs.extend([fill] * (size - oldsize))

    def insert(self, count):
        """Prepend 'count' zero limbs (multiply by BASE ** count)."""
        if count < 0:
            raise ValueError("negative limb count")
        limbs = self._prepare_write(self.size() + count)
        if limbs is None:
            self._small = (0,) * count + self._small
        else:
            limbs[0:0] = [0] * count

    def erase(self, count):
        """Drop the 'count' lowest limbs."""
        if count < 0:
            raise ValueError("negative limb count")
        size = self.size()
        if count > size:
            raise IndexError("cannot erase %d limbs out of %d" % (count, size))
        limbs = self._prepare_write(size - count)
        if limbs is None:
            self._small = self._small[count:]
        else:
            del limbs[:count]

    def reverse(self):
        limbs = self._prepare_write(self.size())
        if limbs is None:
            self._small = self._small[::-1]
        else:
            limbs.reverse()

# ____________________________________________________________

def configure(config):
    """Apply a config built by cowbigint.config.bigintoption to the
    storage layer and the log output."""
    global _inline_capacity, _eager_promotion, _track_stats, _config
    _inline_capacity = config.storage.inline_capacity
    _eager_promotion = config.storage.eager_promotion
    _track_stats = config.storage.track_stats
    _config = config
    set_log_level(config.log)
    log.info(describe())

def get_config():
    if _config is None:
        from cowbigint.config.bigintoption import get_bigint_config
        return get_bigint_config()
    return _config

def describe():
    return "inline capacity %d, eager promotion %s" % (_inline_capacity,
                                                      _eager_promotion)
