"""
Game categories and how each one maps onto a registry dimension.
A category resolves to at most one of: origin, theme or phonics pattern.
"""

from typing import Dict, Optional, Tuple

PHONICS_PATTERNS = (
    'cvc', 'blends', 'digraphs', 'silent-e', 'vowel-teams',
    'r-controlled', 'diphthongs', 'prefixes', 'suffixes',
    'compound', 'multisyllable', 'irregular',
    'latin-roots', 'greek-roots', 'french-origin',
)

SEMANTIC_THEMES = (
    'actions', 'people', 'mind', 'home', 'character',
    'feelings', 'sensory', 'academic', 'animals', 'food',
    'body', 'language', 'art', 'communication', 'plants',
    'time', 'health', 'earth', 'society', 'quantity',
    'money', 'clothing', 'nature', 'travel', 'everyday',
    'weather', 'water',
)

CATEGORY_TO_PATTERN: Dict[str, str] = {pattern: pattern for pattern in PHONICS_PATTERNS}

CATEGORY_TO_THEME: Dict[str, str] = {f"theme-{theme}": theme for theme in SEMANTIC_THEMES}

CATEGORY_TO_ORIGIN: Dict[str, str] = {
    'origin-latin': 'Latin',
    'origin-greek': 'Greek',
    'origin-french': 'French',
    'origin-german': 'German',
    'origin-other': 'Other',
}

# Fixed difficulty ranges for tier and Words of the Champions categories
TIER_RANGES: Dict[str, Tuple[int, int]] = {
    'tier-1': (1, 2),
    'tier-2': (3, 4),
    'tier-3': (5, 6),
    'tier-4': (7, 8),
    'tier-5': (9, 10),
    'wotc-one': (1, 2),
    'wotc-two': (3, 6),
    'wotc-three': (7, 10),
}

LEVEL_RANGES: Dict[int, Tuple[int, int]] = {
    1: (1, 2),
    2: (1, 4),
    3: (3, 6),
    4: (5, 8),
    5: (7, 10),
}


def category_to_pattern(category: Optional[str]) -> Optional[str]:
    return CATEGORY_TO_PATTERN.get(category) if category else None


def category_to_theme(category: Optional[str]) -> Optional[str]:
    return CATEGORY_TO_THEME.get(category) if category else None


def category_to_origin(category: Optional[str]) -> Optional[str]:
    return CATEGORY_TO_ORIGIN.get(category) if category else None


def difficulty_range(level: int) -> Tuple[int, int]:
    """Adaptive level (1-5) to an inclusive word difficulty range."""
    return LEVEL_RANGES.get(level, (1, 4))
