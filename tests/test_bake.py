import json

import pytest
from unittest.mock import patch

from spellbank.bake import bake_data_dir, bake_record, bake_records, main


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / 'tier1.json').write_text(json.dumps([
        {'word': 'cat', 'difficulty': 1, 'distractors': ['cat']},
        {'word': 'separate', 'difficulty': 4},
    ]), encoding='utf-8')
    (tmp_path / 'pack-scripps.json').write_text(json.dumps([
        {'word': 'logorrhea', 'difficulty': 9, 'source': 'scripps'},
    ]), encoding='utf-8')
    (tmp_path / 'overrides-en-GB.json').write_text(json.dumps({
        'harbor': {'word': 'harbour', 'distractors': ['harbur']},
    }), encoding='utf-8')
    return tmp_path


@pytest.mark.unit
def test_bake_record_replaces_distractors():
    baked, ok = bake_record({'word': 'cat', 'difficulty': 1, 'distractors': ['cat']})
    assert ok
    assert baked['word'] == 'cat'
    assert 'cat' not in baked['distractors']
    assert 2 <= len(baked['distractors']) <= 3


@pytest.mark.unit
def test_bake_record_is_deterministic():
    assert bake_record({'word': 'necessary'}) == bake_record({'word': 'necessary'})


@pytest.mark.unit
def test_bake_records_counts_warnings():
    with patch('spellbank.bake.make_misspellings', return_value=['x']):
        baked, warnings = bake_records([{'word': 'cat'}, {'word': 'dog'}])
    assert warnings == 2
    assert all(r['distractors'] == ['x'] for r in baked)


@pytest.mark.unit
def test_bake_data_dir_rewrites_tiers_and_packs(data_dir):
    total, warnings = bake_data_dir(data_dir)

    assert total == 3
    assert warnings == 0
    tier = json.loads((data_dir / 'tier1.json').read_text(encoding='utf-8'))
    assert [r['word'] for r in tier] == ['cat', 'separate']
    assert all(len(r['distractors']) == 3 for r in tier)
    pack = json.loads((data_dir / 'pack-scripps.json').read_text(encoding='utf-8'))
    assert pack[0]['source'] == 'scripps'
    # overrides are curated by hand and left alone
    overrides = json.loads((data_dir / 'overrides-en-GB.json').read_text(encoding='utf-8'))
    assert overrides['harbor']['distractors'] == ['harbur']


@pytest.mark.unit
def test_dry_run_leaves_files(data_dir):
    before = (data_dir / 'tier1.json').read_text(encoding='utf-8')
    total, _ = bake_data_dir(data_dir, dry_run=True)
    assert total == 3
    assert (data_dir / 'tier1.json').read_text(encoding='utf-8') == before


@pytest.mark.unit
def test_warnings_reported_to_monitor(data_dir):
    with patch('spellbank.bake.make_misspellings', return_value=[]), \
         patch('spellbank.bake.get_monitor') as mock_monitor:
        _, warnings = bake_data_dir(data_dir, dry_run=True)
    assert warnings == 3
    mock_monitor.return_value.track_bake_warnings.assert_called_once_with(3)


@pytest.mark.unit
def test_main(data_dir, capsys):
    assert main(['--data-dir', str(data_dir), '--dry-run']) == 0
    assert '3 words processed' in capsys.readouterr().out


@pytest.mark.unit
def test_main_missing_dir(tmp_path):
    assert main(['--data-dir', str(tmp_path / 'nope')]) == 1
