import pytest

from spellbank.cache import LazyCache


@pytest.mark.unit
def test_builds_once_until_invalidated():
    source = {'value': 1}
    cache = LazyCache(lambda: dict(source))

    assert cache.get() == {'value': 1}
    source['value'] = 2
    assert cache.get() == {'value': 1}
    assert cache.builds == 1

    cache.invalidate()
    assert cache.get() == {'value': 2}
    assert cache.builds == 2


@pytest.mark.unit
def test_build_overtaken_by_invalidation_is_not_kept():
    state = {'value': 1, 'swap': True}

    def builder():
        built = {'value': state['value']}
        if state['swap']:
            # a load lands while this build is running
            state['swap'] = False
            state['value'] = 2
            cache.invalidate()
        return built

    cache = LazyCache(builder)

    assert cache.get() == {'value': 1}
    assert cache.valid is False
    assert cache.get() == {'value': 2}
    assert cache.valid is True
    assert cache.get() == {'value': 2}
    assert cache.builds == 2
