import pytest

from cowbigint.config.bigintoption import get_bigint_config


def test_defaults():
    config = get_bigint_config()
    assert config.storage.inline_capacity == 2
    assert config.storage.eager_promotion is False
    assert config.storage.track_stats is True
    assert config.log == 'quiet'

def test_overrides():
    config = get_bigint_config(**{'storage.inline_capacity': 5,
                                  'storage.eager_promotion': True,
                                  'log': 'debug'})
    assert config.storage.inline_capacity == 5
    assert config.storage.eager_promotion is True
    assert config.log == 'debug'

def test_invalid_values():
    pytest.raises(ValueError, get_bigint_config,
                  **{'storage.inline_capacity': -1})
    pytest.raises(ValueError, get_bigint_config,
                  **{'storage.eager_promotion': 'yes'})
    pytest.raises(ValueError, get_bigint_config, log='loud')
    pytest.raises(ValueError, get_bigint_config, nosuchoption=1)

def test_configs_are_independent():
    c1 = get_bigint_config()
    c2 = get_bigint_config()
    c1.storage.inline_capacity = 4
    assert c2.storage.inline_capacity == 2
