"""
Runtime distractor selection for a single quiz item.

Baked distractors are preferred. Records that carry fewer than two get a
quick inline fallback; it does not apply the pronounceability filter the
offline generator uses.
"""

import logging
import random
from typing import List

from spellbank.distractors import CONSONANT_CONFUSIONS, VOWELS
from spellbank.models import WordRecord

logger = logging.getLogger(__name__)

OPTIONS_PER_ITEM = 2


def _shuffled(items: List[str], rng: random.Random) -> List[str]:
    items = list(items)
    rng.shuffle(items)
    return items


def pick_distractors(record: WordRecord, rng: random.Random, hard_mode: bool = False) -> List[str]:
    """Two distractors for ``record``; hard mode prefers ones the same length as the word."""
    correct = record.word
    baked = record.distractors or []

    if len(baked) >= OPTIONS_PER_ITEM:
        if hard_mode:
            same_length = [d for d in baked if len(d) == len(correct)]
            if len(same_length) >= OPTIONS_PER_ITEM:
                return _shuffled(same_length, rng)[:OPTIONS_PER_ITEM]
        return _shuffled(baked, rng)[:OPTIONS_PER_ITEM]

    logger.debug(f"[PICKER] '{correct}' has {len(baked)} baked distractors; using runtime fallback")
    return runtime_fallback_distractors(correct, rng)


def runtime_fallback_distractors(correct: str, rng: random.Random) -> List[str]:
    result: List[str] = []

    # one vowel substitution per vowel position
    for i, ch in enumerate(correct):
        if len(result) >= OPTIONS_PER_ITEM:
            break
        if ch not in VOWELS:
            continue
        for v in VOWELS:
            if v == ch:
                continue
            candidate = correct[:i] + v + correct[i + 1:]
            if candidate not in result:
                result.append(candidate)
                break

    if len(result) < OPTIONS_PER_ITEM:
        if correct.endswith('e') and len(correct) > 2:
            candidate = correct[:-1]
        else:
            candidate = correct + 'e'
        if candidate != correct and candidate not in result:
            result.append(candidate)

    if len(result) < OPTIONS_PER_ITEM:
        for i, ch in enumerate(correct):
            if len(result) >= OPTIONS_PER_ITEM:
                break
            if ch in VOWELS or not ch.isalpha():
                continue
            for a, b in CONSONANT_CONFUSIONS:
                if ch not in (a, b):
                    continue
                candidate = correct[:i] + (b if ch == a else a) + correct[i + 1:]
                if candidate != correct and candidate not in result:
                    result.append(candidate)
                    break

    return _shuffled(result, rng)[:OPTIONS_PER_ITEM]
