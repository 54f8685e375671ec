"""
Offline distractor baking.

Regenerates the ``distractors`` field of every record in the tier and pack
JSON files using the per-word seeded generator, so the same data directory
always bakes to the same output.

Usage:
    python -m spellbank.bake [--data-dir DIR] [--dry-run]
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

from spellbank.config import get_settings
from spellbank.distractors import make_misspellings, seeded_rng
from spellbank.monitoring import get_monitor

logger = logging.getLogger(__name__)

MIN_DISTRACTORS = 2
BAKE_GLOBS = ('tier*.json', 'pack-*.json')


def bake_record(record: Dict[str, Any], max_attempts: int = 60) -> Tuple[Dict[str, Any], bool]:
    """
    Return a copy of ``record`` with freshly generated distractors.

    The second element is False when the word produced fewer than two.
    """
    word = record['word']
    distractors = make_misspellings(word, seeded_rng(word), max_attempts=max_attempts)
    baked = dict(record)
    baked['distractors'] = distractors
    ok = len(distractors) >= MIN_DISTRACTORS
    if not ok:
        logger.warning(f"[BAKE] '{word}' only produced {len(distractors)} distractors")
    return baked, ok


def bake_records(records: List[Dict[str, Any]], max_attempts: int = 60) -> Tuple[List[Dict[str, Any]], int]:
    baked: List[Dict[str, Any]] = []
    warnings = 0
    for record in records:
        new_record, ok = bake_record(record, max_attempts)
        baked.append(new_record)
        if not ok:
            warnings += 1
    return baked, warnings


def _bake_files(data_dir: Path) -> List[Path]:
    files: List[Path] = []
    for pattern in BAKE_GLOBS:
        files.extend(sorted(data_dir.glob(pattern)))
    return files


def bake_data_dir(data_dir: Path, dry_run: bool = False, max_attempts: int = 60) -> Tuple[int, int]:
    """
    Bake every tier and pack file in ``data_dir`` in place.

    Returns:
        (total words processed, words with fewer than two distractors)
    """
    data_dir = Path(data_dir)
    total = 0
    warnings = 0
    for path in _bake_files(data_dir):
        with open(path, 'r', encoding='utf-8') as f:
            records = json.load(f)
        baked, file_warnings = bake_records(records, max_attempts)
        total += len(baked)
        warnings += file_warnings
        if not dry_run:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(baked, f, indent=2, ensure_ascii=False)
                f.write('\n')
        logger.info(f"[BAKE] {path.name}: processed {len(baked)} words, {file_warnings} warnings")

    if warnings:
        get_monitor().track_bake_warnings(warnings)
    return total, warnings


def parse_args(argv=None):
    settings = get_settings()
    parser = argparse.ArgumentParser(description='Bake distractors into the word data files')
    parser.add_argument('--data-dir', type=Path, default=settings.data_dir,
                        help='Directory holding tier*.json and pack-*.json')
    parser.add_argument('--dry-run', action='store_true',
                        help='Generate and report without writing files')
    parser.add_argument('--max-attempts', type=int, default=settings.max_generation_attempts,
                        help='Strategy attempts per word before falling back')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    if not args.data_dir.is_dir():
        logger.error(f"Data directory not found: {args.data_dir}")
        return 1
    total, warnings = bake_data_dir(args.data_dir, dry_run=args.dry_run, max_attempts=args.max_attempts)
    print(f"Done! {total} words processed, {warnings} warnings.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
