"""
Heuristic pronounceability check for generated misspellings.

Rejects strings no English speaker would write by mistake: no vowels, long
consonant runs, or word-initial/word-final clusters that English never uses.
'y' counts as vowel-like throughout.
"""

import re

VOWEL_LIKE = 'aeiouy'

LEGAL_ONSETS = frozenset([
    'b', 'c', 'd', 'f', 'g', 'h', 'j', 'k', 'l', 'm', 'n', 'p', 'q', 'r', 's', 't', 'v', 'w', 'x', 'y', 'z',
    'bl', 'br', 'ch', 'cl', 'cr', 'dr', 'dw', 'fl', 'fr', 'gh', 'gl', 'gn', 'gr',
    'kn', 'ph', 'pl', 'pr', 'ps', 'qu', 'sc', 'sh', 'sk', 'sl', 'sm', 'sn', 'sp',
    'spl', 'spr', 'sq', 'squ', 'st', 'str', 'sw', 'th', 'tr', 'tw', 'wh', 'wr',
    'scr', 'sch', 'shr', 'thr',
])

LEGAL_CODAS = frozenset([
    'b', 'c', 'd', 'f', 'g', 'k', 'l', 'm', 'n', 'p', 'r', 's', 't', 'v', 'x', 'z',
    'ch', 'ck', 'ct', 'ff', 'ft', 'gh', 'lb', 'lch', 'ld', 'lf', 'lk', 'll', 'lm',
    'ln', 'lp', 'ls', 'lt', 'lth', 'ltz', 'lve', 'mb', 'mp', 'mph', 'mps', 'ms',
    'nd', 'ng', 'nk', 'ns', 'nt', 'nth', 'nts', 'nz', 'ph', 'pt', 'rb', 'rc',
    'rch', 'rd', 'rf', 'rg', 'rk', 'rl', 'rm', 'rn', 'rp', 'rs', 'rse', 'rst',
    'rt', 'rth', 'rv', 'rve', 'sh', 'sk', 'sm', 'sp', 'ss', 'st', 'sts', 'th',
    'ts', 'tch', 'tz', 'wl', 'wn', 'ws', 'xt',
    'dge', 'nce', 'nge', 'nse', 'nze', 'rce', 'rge', 'rze',
])

MAX_ONSET = 3
MAX_CODA = 4
MAX_INTERNAL_CLUSTER = 3

_HAS_VOWEL = re.compile(f"[{VOWEL_LIKE}]")
_CONSONANT_RUN = re.compile(f"[^{VOWEL_LIKE}]{{4,}}")
_ONSET = re.compile(f"^[^{VOWEL_LIKE}]*")
_CODA = re.compile(f"[^{VOWEL_LIKE}]*$")
_INTERNAL = re.compile(f"(?<=[{VOWEL_LIKE}])[^{VOWEL_LIKE}]+(?=[{VOWEL_LIKE}])")


def looks_pronounceable(candidate: str) -> bool:
    """True if the string could pass as an attempted English spelling."""
    if len(candidate) < 2:
        return True
    if not _HAS_VOWEL.search(candidate):
        return False
    if _CONSONANT_RUN.search(candidate):
        return False

    onset = _ONSET.match(candidate).group(0)
    if len(onset) > MAX_ONSET:
        return False
    if len(onset) >= 2 and onset not in LEGAL_ONSETS:
        return False

    coda = _CODA.search(candidate).group(0)
    if len(coda) > MAX_CODA:
        return False
    if len(coda) >= 2 and coda not in LEGAL_CODAS:
        return False

    for cluster in _INTERNAL.findall(candidate):
        if len(cluster) > MAX_INTERNAL_CLUSTER:
            return False

    return True
