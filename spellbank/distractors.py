"""
Misspelling generator used to bake distractors into the word data.

Each strategy imitates a real spelling mistake (vowel confusion, a dropped
double letter, a swapped suffix, ...). Candidates must pass the
pronounceability filter. When the strategies cannot produce three distinct
misspellings, progressively blunter fallbacks fill the gap.

All randomness comes from the ``random.Random`` passed in; use
``seeded_rng(word)`` for reproducible output.
"""

import logging
import random
from typing import Callable, List, Optional, Tuple

from spellbank.pronounce import looks_pronounceable

logger = logging.getLogger(__name__)

VOWELS = 'aeiou'

VOWEL_SWAPS: List[Tuple[str, str]] = [
    ('a', 'e'), ('e', 'i'), ('i', 'o'), ('o', 'u'), ('a', 'u'),
]

CONSONANT_CONFUSIONS: List[Tuple[str, str]] = [
    ('b', 'd'), ('p', 'b'), ('m', 'n'), ('s', 'z'), ('f', 'v'),
    ('t', 'd'), ('g', 'k'), ('c', 'k'),
]

DIGRAPH_CONFUSIONS: List[Tuple[str, str]] = [
    ('sh', 'ch'), ('th', 'f'), ('wh', 'w'), ('ck', 'k'), ('ph', 'f'),
]

SUFFIX_CONFUSIONS: List[Tuple[str, str]] = [
    ('ible', 'able'), ('ance', 'ence'), ('ant', 'ent'), ('ary', 'ery'),
    ('tion', 'sion'), ('cious', 'tious'), ('eous', 'ious'), ('ise', 'ize'),
    ('ful', 'full'), ('ment', 'mant'), ('ous', 'us'), ('al', 'el'),
    ('er', 'or'), ('ar', 'er'), ('ie', 'ei'),
]

SILENT_LETTER_SPOTS: List[Tuple[str, str]] = [
    ('kn', 'n'), ('wr', 'r'), ('gn', 'n'), ('mb', 'm'),
    ('mn', 'n'), ('ps', 's'), ('pn', 'n'),
]

MAX_DISTRACTORS = 3
MAX_ATTEMPTS = 60

Strategy = Callable[[str, random.Random], Optional[str]]


def word_seed(word: str) -> int:
    """Stable per-word seed: sum of char codes weighted by position."""
    return sum(ord(ch) * (i + 1) * 31 for i, ch in enumerate(word))


def seeded_rng(word: str) -> random.Random:
    return random.Random(word_seed(word))


def _is_consonant(ch: str) -> bool:
    return ch.isalpha() and ch not in VOWELS


def _replace_at(word: str, index: int, old: str, new: str) -> str:
    return word[:index] + new + word[index + len(old):]


# ── strategies ───────────────────────────────────────────────────────────

def transpose_same_class(word: str, rng: random.Random) -> Optional[str]:
    """Swap two adjacent letters that are both vowels or both consonants."""
    if len(word) < 4:
        return None
    candidates = []
    for i in range(1, len(word) - 1):
        a, b = word[i], word[i + 1]
        if a == b:
            continue
        if (a in VOWELS) == (b in VOWELS):
            candidates.append(i)
    if not candidates:
        return None
    i = rng.choice(candidates)
    return word[:i] + word[i + 1] + word[i] + word[i + 2:]


def confuse_vowel(word: str, rng: random.Random) -> Optional[str]:
    positions = [i for i, ch in enumerate(word) if ch in VOWELS]
    if not positions:
        return None
    i = rng.choice(positions)
    ch = word[i]
    swaps = [pair for pair in VOWEL_SWAPS if ch in pair]
    a, b = rng.choice(swaps)
    return word[:i] + (b if ch == a else a) + word[i + 1:]


def toggle_double_consonant(word: str, rng: random.Random) -> Optional[str]:
    """Drop an existing double consonant, or double an interior one."""
    for i in range(len(word) - 1):
        if word[i] == word[i + 1] and _is_consonant(word[i]):
            return word[:i] + word[i + 1:]
    interior = [i for i in range(1, len(word) - 1) if _is_consonant(word[i])]
    if not interior:
        return None
    i = rng.choice(interior)
    ch = word[i]
    if word[i - 1] != ch and word[i + 1] != ch:
        return word[:i] + ch + word[i:]
    return None


def confuse_consonant(word: str, rng: random.Random) -> Optional[str]:
    pairs = list(CONSONANT_CONFUSIONS)
    rng.shuffle(pairs)
    for a, b in pairs:
        idx = word.find(a)
        if idx >= 0 and rng.random() > 0.5:
            return _replace_at(word, idx, a, b)
        idx = word.find(b)
        if idx >= 0:
            return _replace_at(word, idx, b, a)
    return None


def confuse_digraph(word: str, rng: random.Random) -> Optional[str]:
    pairs = list(DIGRAPH_CONFUSIONS)
    rng.shuffle(pairs)
    for a, b in pairs:
        idx = word.find(a)
        if idx >= 0:
            return _replace_at(word, idx, a, b)
    return None


def toggle_silent_e(word: str, rng: random.Random) -> Optional[str]:
    if word.endswith('e'):
        return word[:-1]
    if _is_consonant(word[-1]):
        return word + 'e'
    return None


def confuse_suffix(word: str, rng: random.Random) -> Optional[str]:
    for a, b in SUFFIX_CONFUSIONS:
        if word.endswith(a):
            return word[:-len(a)] + b
        if word.endswith(b):
            return word[:-len(b)] + a
    return None


def reduce_silent_letters(word: str, rng: random.Random) -> Optional[str]:
    for full, reduced in SILENT_LETTER_SPOTS:
        idx = word.find(full)
        if idx >= 0:
            return _replace_at(word, idx, full, reduced)
    return None


STRATEGIES: List[Strategy] = [
    transpose_same_class,
    confuse_vowel,
    toggle_double_consonant,
    confuse_consonant,
    confuse_digraph,
    toggle_silent_e,
    confuse_suffix,
    reduce_silent_letters,
]


# ── pipeline ─────────────────────────────────────────────────────────────

def generate_misspelling(word: str, rng: random.Random) -> Optional[str]:
    """Try the strategies in a shuffled order; return the first usable result."""
    if not word:
        return None
    strategies = list(STRATEGIES)
    rng.shuffle(strategies)
    for strategy in strategies:
        result = strategy(word, rng)
        if result and result != word and looks_pronounceable(result):
            return result
    return None


def _vowel_scan(word: str, found: List[str], limit: int, filtered: bool) -> None:
    for i, ch in enumerate(word):
        if len(found) >= limit:
            return
        if ch not in VOWELS:
            continue
        for v in VOWELS:
            if v == ch:
                continue
            candidate = word[:i] + v + word[i + 1:]
            if candidate in found:
                continue
            if filtered and not looks_pronounceable(candidate):
                continue
            found.append(candidate)
            if len(found) >= limit or not filtered:
                break


def _consonant_scan(word: str, found: List[str], limit: int) -> None:
    for i, ch in enumerate(word):
        if len(found) >= limit:
            return
        if not _is_consonant(ch):
            continue
        for a, b in CONSONANT_CONFUSIONS:
            if ch not in (a, b):
                continue
            candidate = word[:i] + (b if ch == a else a) + word[i + 1:]
            if candidate != word and candidate not in found and looks_pronounceable(candidate):
                found.append(candidate)
                break


def make_misspellings(word: str, rng: random.Random, limit: int = MAX_DISTRACTORS,
                      max_attempts: int = MAX_ATTEMPTS) -> List[str]:
    """
    Produce up to ``limit`` distinct plausible misspellings of ``word``.

    Never returns the word itself or duplicates, and never raises. Degenerate
    inputs (very short words, no vowels) may yield fewer than ``limit``.
    """
    found: List[str] = []
    if not word:
        return found

    attempts = 0
    while len(found) < limit and attempts < max_attempts:
        candidate = generate_misspelling(word, rng)
        if candidate and candidate not in found:
            found.append(candidate)
        attempts += 1

    if len(found) < limit:
        _vowel_scan(word, found, limit, filtered=True)
    if len(found) < limit:
        _consonant_scan(word, found, limit)
    if len(found) < limit:
        _vowel_scan(word, found, limit, filtered=False)
    if len(found) < limit:
        if not word.endswith('e'):
            candidate = word + 'e'
            if candidate not in found:
                found.append(candidate)
        elif len(word) > 2 and word[:-1] not in found:
            found.append(word[:-1])

    if len(found) < limit:
        logger.debug(f"[DISTRACTORS] '{word}' produced only {len(found)} misspellings")
    return found[:limit]


def generate_distractors(word: str, rng: Optional[random.Random] = None) -> List[str]:
    """Distractors for one word, seeded from the word itself unless an RNG is given."""
    return make_misspellings(word, rng if rng is not None else seeded_rng(word))
