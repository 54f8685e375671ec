import logging
import random
import time
from typing import Any, Dict, List, Optional

from spellbank.categories import TIER_RANGES, difficulty_range
from spellbank.exceptions import SpellbankError
from spellbank.models import QuizItem, WordRecord
from spellbank.picker import pick_distractors
from spellbank.pool import select_pool
from spellbank.registry import WordRegistry

logger = logging.getLogger(__name__)

HARD_MODE_LEVEL = 5


def assemble_item(record: WordRecord, distractors: List[str], rng: random.Random,
                  category: str, hard_mode: bool = False) -> QuizItem:
    """Shuffle the correct spelling in among the distractors and attach word metadata."""
    correct = record.word
    options = [correct, *distractors]
    rng.shuffle(options)

    meta: Dict[str, Any] = {
        'word': correct,
        'category': category,
        'hard_mode': hard_mode,
        'definition': record.definition,
        'example_sentence': record.example_sentence,
        'pronunciation': record.pronunciation,
        'part_of_speech': record.part_of_speech,
        'pattern': record.pattern,
        'difficulty': record.difficulty,
    }
    if record.etymology:
        meta['etymology'] = record.etymology

    timestamp_ms = int(time.time() * 1000)
    return QuizItem(
        id=f"{category}-{correct}-{timestamp_ms}-{rng.randrange(10 ** 6)}",
        answer=correct,
        options=options,
        correct_index=options.index(correct),
        meta=meta,
    )


def generate_item(difficulty: int, category: str, hard_mode: bool = False,
                  rng: Optional[random.Random] = None,
                  registry: Optional[WordRegistry] = None) -> QuizItem:
    """
    Build one multiple-choice spelling item.

    Tier categories use their fixed difficulty range; every other category
    maps the adaptive level (or the top level in hard mode) to a range.

    Raises:
        SpellbankError: If the registry has no words loaded
    """
    rng = rng or random.Random()

    if category in TIER_RANGES:
        min_difficulty, max_difficulty = TIER_RANGES[category]
    else:
        min_difficulty, max_difficulty = difficulty_range(HARD_MODE_LEVEL if hard_mode else difficulty)

    pool = select_pool(category, min_difficulty, max_difficulty, hard_mode, registry)
    if not pool:
        raise SpellbankError("No words loaded; cannot generate an item")

    record = pool[rng.randrange(len(pool))]
    distractors = pick_distractors(record, rng, hard_mode)
    item = assemble_item(record, distractors, rng, category, hard_mode)
    logger.debug(f"[ITEM] {item.id} options={item.options}")
    return item
