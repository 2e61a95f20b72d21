import pytest

from cowbigint import rstorage
from cowbigint.config.bigintoption import get_bigint_config
from cowbigint.tool import leakfinder

option = None


def pytest_addoption(parser):
    group = parser.getgroup("cowbigint options")
    group.addoption('--eager-promotion', action="store_true",
           dest="eager_promotion", default=False,
           help="promote inline limbs to shared buffers on every write "
                "and copy, whatever their size")
    group.addoption('--inline-capacity', action="store", type=int,
           dest="inline_capacity", default=2,
           help="number of limbs a storage keeps inline")
    group.addoption('--bigint-log', action="store", dest="bigint_log",
           default="quiet", choices=['quiet', 'info', 'debug'],
           help="show the cowbigint log on stderr")


def pytest_configure(config):
    global option
    option = config.option
    rstorage.configure(get_bigint_config(**{
        'storage.eager_promotion': config.option.eager_promotion,
        'storage.inline_capacity': config.option.inline_capacity,
        'log': config.option.bigint_log}))
    config.pluginmanager.register(LeakFinder(), 'cowbigint-leakfinder')


def pytest_report_header():
    return "cowbigint storage: %s" % (rstorage.describe(),)


@pytest.fixture
def storage_config():
    """Reconfigure the storage layer for one test:
    storage_config(**{'storage.eager_promotion': True}).  The previous
    configuration is restored afterwards."""
    saved = rstorage.get_config()
    def apply(**overrides):
        config = get_bigint_config(**overrides)
        rstorage.configure(config)
        return config
    yield apply
    rstorage.configure(saved)


class LeakFinder:
    """Track limb buffer allocations during test execution.

    A test that passes but leaves live buffers behind fails in its
    teardown.  Opt out with a 'dont_track_allocations = True' attribute
    on the test function.
    """
    @pytest.hookimpl(wrapper=True)
    def pytest_runtest_setup(self, item):
        result = yield
        if not isinstance(item, pytest.Function):
            return result
        if not getattr(item.obj, 'dont_track_allocations', False):
            leakfinder.start_tracking_allocations()
        return result

    @pytest.hookimpl(wrapper=True)
    def pytest_runtest_call(self, item):
        result = yield
        item._success = True
        return result

    @pytest.hookimpl(wrapper=True)
    def pytest_runtest_teardown(self, item, nextitem):
        try:
            result = yield
        finally:
            if (isinstance(item, pytest.Function)
                and not getattr(item.obj, 'dont_track_allocations', False)
                and leakfinder.TRACK_ALLOCATIONS):
                item._cowbigint_leaks = leakfinder.stop_tracking_allocations(
                    False)
            else:
                item._cowbigint_leaks = None

        # check for leaks, but only if the test passed so far
        if getattr(item, '_success', False) and item._cowbigint_leaks:
            raise leakfinder.MallocMismatch(item._cowbigint_leaks)
        return result
