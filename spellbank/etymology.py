from typing import Optional

ORIGINS = ('Latin', 'Greek', 'French', 'German', 'Italian', 'Spanish', 'English', 'Other')

# Variant language labels found in etymology strings
LANGUAGE_MAP = {
    'latin': 'Latin',
    'medieval latin': 'Latin',
    'new latin': 'Latin',
    'late latin': 'Latin',
    'vulgar latin': 'Latin',
    'greek': 'Greek',
    'ancient greek': 'Greek',
    'old greek': 'Greek',
    'french': 'French',
    'old french': 'French',
    'middle french': 'French',
    'anglo-french': 'French',
    'norman french': 'French',
    'german': 'German',
    'old high german': 'German',
    'middle high german': 'German',
    'italian': 'Italian',
    'spanish': 'Spanish',
    'old spanish': 'Spanish',
    'english': 'English',
    'old english': 'English',
    'middle english': 'English',
    'anglo-saxon': 'English',
}


def extract_language(etymology: Optional[str]) -> str:
    """Language of origin named before the first colon, e.g. "Latin: separare (to pull apart)"."""
    if not etymology:
        return 'Other'
    prefix, sep, _ = etymology.partition(':')
    if not sep:
        return 'Other'
    return LANGUAGE_MAP.get(prefix.strip().lower(), 'Other')
