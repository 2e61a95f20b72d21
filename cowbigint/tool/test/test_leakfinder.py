import pytest

from cowbigint.rstorage import LimbBuffer, Storage
from cowbigint.tool import leakfinder


def test_no_leak():
    prev = leakfinder.start_tracking_allocations()
    s = Storage.fromlist([1, 2, 3, 4])
    t = s.copy()
    t.write(0, 5)
    del s, t
    assert leakfinder.stop_tracking_allocations(True, prev) == {}

def test_leak_is_reported():
    prev = leakfinder.start_tracking_allocations()
    buf = LimbBuffer([1, 2, 3])
    result = leakfinder.stop_tracking_allocations(False, prev)
    assert list(result) == [buf]
    buf.free()

def test_malloc_mismatch():
    prev = leakfinder.start_tracking_allocations()
    buf = LimbBuffer([1, 2, 3])
    with pytest.raises(leakfinder.MallocMismatch) as excinfo:
        leakfinder.stop_tracking_allocations(True, prev)
    text = str(excinfo.value)
    assert '<LimbBuffer refcount=1 [1, 2, 3]>:' in text
    assert 'test_malloc_mismatch' in text
    buf.free()

def test_buffers_from_before_are_ignored():
    buf = LimbBuffer([1])
    prev = leakfinder.start_tracking_allocations()
    assert leakfinder.stop_tracking_allocations(True, prev) == {}
    buf.free()

def test_untracked_functions_are_skipped():
    # a buffer kept alive on purpose, outside of any Storage
    test_untracked_functions_are_skipped.buf = LimbBuffer([9])
test_untracked_functions_are_skipped.dont_track_allocations = True
