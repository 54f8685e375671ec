import random

import pytest

from spellbank.models import WordRecord
from spellbank.picker import pick_distractors, runtime_fallback_distractors


@pytest.mark.unit
def test_hard_mode_prefers_same_length():
    record = WordRecord(word='separate', distractors=['seperate', 'separete', 'seprate'])
    for seed in range(20):
        picked = pick_distractors(record, random.Random(seed), hard_mode=True)
        assert sorted(picked) == ['separete', 'seperate']


@pytest.mark.unit
def test_hard_mode_without_enough_same_length_uses_all():
    record = WordRecord(word='separate', distractors=['seperate', 'seprate', 'sepparate'])
    seen = set()
    for seed in range(30):
        picked = pick_distractors(record, random.Random(seed), hard_mode=True)
        assert len(picked) == 2
        seen.update(picked)
    assert seen == {'seperate', 'seprate', 'sepparate'}


@pytest.mark.unit
def test_normal_mode_picks_two_baked():
    record = WordRecord(word='cat', distractors=['kat', 'catt', 'cet'])
    picked = pick_distractors(record, random.Random(3))
    assert len(picked) == 2
    assert set(picked) <= {'kat', 'catt', 'cet'}


@pytest.mark.unit
@pytest.mark.parametrize("distractors", [None, [], ['kat']])
def test_falls_back_when_under_two_baked(distractors):
    record = WordRecord(word='cat', distractors=distractors)
    picked = pick_distractors(record, random.Random(1))
    assert len(picked) == 2
    assert 'cat' not in picked
    assert len(set(picked)) == 2


@pytest.mark.unit
def test_runtime_fallback_vowel_then_silent_e():
    # one vowel position: one substitution plus the trailing-e toggle
    assert sorted(runtime_fallback_distractors('cat', random.Random(0))) == ['cate', 'cet']
    assert sorted(runtime_fallback_distractors('make', random.Random(0))) == ['maka', 'meke']


@pytest.mark.unit
def test_runtime_fallback_consonant_confusion():
    # no vowels and ends in a consonant: trailing e, then b/d swap
    assert sorted(runtime_fallback_distractors('bzz', random.Random(0))) == ['bzze', 'dzz']
