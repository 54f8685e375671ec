from pathlib import Path

import pytest
from unittest.mock import patch

from spellbank.config import DEFAULT_DATA_DIR, get_settings
from spellbank.registry import build_source
from spellbank.sources import HttpWordSource, JsonDirectorySource


@pytest.mark.unit
def test_defaults():
    with patch.dict('os.environ', {}, clear=True):
        settings = get_settings()
    assert settings.data_dir == DEFAULT_DATA_DIR
    assert settings.source_url is None
    assert settings.eager_tiers == (1, 2)
    assert settings.default_dialect == 'en-US'
    assert settings.hard_mode_fraction == 0.3
    assert settings.max_generation_attempts == 60
    assert settings.enable_cloudwatch is False


@pytest.mark.unit
def test_environment_overrides():
    with patch.dict('os.environ', {
        'WORD_DATA_DIR': '/srv/words',
        'EAGER_TIERS': '1, 2, 3',
        'DEFAULT_DIALECT': 'en-GB',
        'HARD_MODE_FRACTION': '0.5',
        'ENABLE_CLOUDWATCH': 'yes',
    }):
        settings = get_settings()
    assert settings.data_dir == Path('/srv/words')
    assert settings.eager_tiers == (1, 2, 3)
    assert settings.default_dialect == 'en-GB'
    assert settings.hard_mode_fraction == 0.5
    assert settings.enable_cloudwatch is True


@pytest.mark.unit
def test_invalid_numbers_fall_back():
    with patch.dict('os.environ', {
        'EAGER_TIERS': '1,two',
        'HARD_MODE_FRACTION': 'lots',
        'MAX_GENERATION_ATTEMPTS': '',
    }):
        settings = get_settings()
    assert settings.eager_tiers == (1, 2)
    assert settings.hard_mode_fraction == 0.3
    assert settings.max_generation_attempts == 60


@pytest.mark.unit
def test_build_source():
    with patch.dict('os.environ', {'WORD_SOURCE_URL': ''}):
        assert isinstance(build_source(get_settings()), JsonDirectorySource)
    with patch.dict('os.environ', {'WORD_SOURCE_URL': 'https://cdn.example.com/words'}):
        source = build_source(get_settings())
    assert isinstance(source, HttpWordSource)
    assert source.base_url == 'https://cdn.example.com/words'
