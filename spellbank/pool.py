import logging
import math
from typing import List, Optional

from spellbank.categories import category_to_origin, category_to_pattern, category_to_theme
from spellbank.config import get_settings
from spellbank.models import WordRecord
from spellbank.registry import WordRegistry, get_registry

logger = logging.getLogger(__name__)


def _in_range(words: List[WordRecord], min_difficulty: int, max_difficulty: int) -> List[WordRecord]:
    return [w for w in words if min_difficulty <= w.difficulty <= max_difficulty]


def hard_mode_cut(pool: List[WordRecord], fraction: float = 0.3) -> List[WordRecord]:
    """Keep the hardest, longest slice of the pool (at least 3 words)."""
    if len(pool) <= 3:
        return pool
    ranked = sorted(pool, key=lambda w: (w.difficulty, len(w.word)), reverse=True)
    cutoff = max(3, math.ceil(len(ranked) * fraction))
    return ranked[:cutoff]


def select_pool(category: Optional[str], min_difficulty: int, max_difficulty: int,
                hard_mode: bool = False, registry: Optional[WordRegistry] = None) -> List[WordRecord]:
    """
    Build the candidate pool for a category and difficulty range.

    The category selects one dimension (origin, theme or pattern). When the
    dimension and range together match nothing, the pool broadens to the
    dimension alone, then to the range alone, then to the whole registry,
    so the result is never empty while the registry has words.

    Args:
        category: Game category id, or None for no dimension
        min_difficulty: Lowest difficulty (inclusive)
        max_difficulty: Highest difficulty (inclusive)
        hard_mode: Bias the pool toward the hardest, longest words
        registry: Registry to read; defaults to the process registry

    Returns:
        Candidate records; the caller picks one with its own RNG
    """
    if registry is None:
        registry = get_registry()

    origin = category_to_origin(category)
    theme = category_to_theme(category)
    pattern = category_to_pattern(category)

    if origin:
        by_dimension = registry.get_by_origin(origin)
    elif theme:
        by_dimension = registry.get_by_theme(theme)
    elif pattern:
        by_dimension = registry.get_by_pattern(pattern)
    else:
        by_dimension = None

    if by_dimension is not None:
        pool = _in_range(by_dimension, min_difficulty, max_difficulty)
        if not pool:
            logger.debug(f"[POOL] '{category}' has no words in [{min_difficulty}, {max_difficulty}]; ignoring difficulty")
            pool = list(by_dimension)
        if not pool:
            logger.debug(f"[POOL] '{category}' has no words at all; using difficulty only")
            pool = registry.words_by_difficulty(min_difficulty, max_difficulty)
    else:
        pool = registry.words_by_difficulty(min_difficulty, max_difficulty)

    if not pool:
        logger.info(f"[POOL] Nothing matched category='{category}' range=[{min_difficulty}, {max_difficulty}]; using full registry")
        pool = list(registry.all_words())

    if hard_mode:
        pool = hard_mode_cut(pool, get_settings().hard_mode_fraction)

    return pool
