"""
Competition word list definitions and per-word tagging.
A word can belong to several lists; tags are keyed by the canonical
(en-US) word and applied whenever the registry rebuilds its active view.
"""

from typing import Dict, List

COMPETITION_LISTS: List[Dict[str, str]] = [
    {
        "id": "school-bee-study",
        "name": "School Bee Study List",
        "description": "Words for classroom and school-level spelling bees",
        "difficulty": "intermediate",
    },
    {
        "id": "school-bee-championship",
        "name": "School Bee Championship",
        "description": "Advanced words for school-level championship rounds",
        "difficulty": "advanced",
    },
    {
        "id": "state-bee",
        "name": "State Bee",
        "description": "Words for state-level spelling bee competitions",
        "difficulty": "championship",
    },
    {
        "id": "one-bee",
        "name": "One Bee (WOTC)",
        "description": "Words of the Champions, easiest tier (grades 1-3)",
        "difficulty": "beginner",
    },
    {
        "id": "two-bee",
        "name": "Two Bee (WOTC)",
        "description": "Words of the Champions, middle tier (grades 4-6)",
        "difficulty": "intermediate",
    },
    {
        "id": "three-bee",
        "name": "Three Bee (WOTC)",
        "description": "Words of the Champions, hardest tier (grades 7+)",
        "difficulty": "advanced",
    },
    {
        "id": "scripps-historical",
        "name": "Scripps Historical Winners",
        "description": "Winning and notable words from past national bees",
        "difficulty": "championship",
    },
]

WORD_LIST_TAGS: Dict[str, List[str]] = {
    # One Bee: grades 1-3
    "cat": ["one-bee"],
    "dog": ["one-bee"],
    "bed": ["one-bee"],
    "hat": ["one-bee"],
    "run": ["one-bee"],
    "sun": ["one-bee"],
    "map": ["one-bee"],
    "pen": ["one-bee"],
    "cup": ["one-bee"],
    "hop": ["one-bee"],
    "stop": ["one-bee"],
    "trip": ["one-bee"],
    "plan": ["one-bee"],
    "drum": ["one-bee"],
    "clap": ["one-bee"],
    "swim": ["one-bee"],
    "ship": ["one-bee"],
    "thin": ["one-bee"],
    "chat": ["one-bee"],
    "much": ["one-bee"],
    "cake": ["one-bee"],
    "make": ["one-bee"],
    "ride": ["one-bee"],
    "home": ["one-bee"],
    "name": ["one-bee"],
    "rain": ["one-bee"],
    # Two Bee: grades 4-6
    "separate": ["two-bee", "school-bee-study"],
    "because": ["two-bee"],
    "friend": ["two-bee"],
    "knight": ["two-bee"],
    "answer": ["two-bee"],
    "castle": ["two-bee"],
    "thunder": ["two-bee"],
    "autumn": ["two-bee", "school-bee-study"],
    "necessary": ["school-bee-study"],
    "library": ["school-bee-study"],
    "calendar": ["school-bee-study"],
    "recommend": ["school-bee-study"],
    # Three Bee: grades 7+
    "accommodate": ["three-bee", "school-bee-championship"],
    "conscience": ["three-bee"],
    "rhythm": ["three-bee", "school-bee-championship"],
    "embarrass": ["three-bee"],
    "millennium": ["three-bee"],
    "privilege": ["three-bee"],
    "occurrence": ["three-bee", "school-bee-championship"],
    "mischievous": ["school-bee-championship"],
    "silhouette": ["school-bee-championship"],
    "connoisseur": ["state-bee"],
    "bureaucracy": ["state-bee"],
    "sacrilegious": ["state-bee"],
    "fuchsia": ["state-bee"],
    # Past national bee winners
    "knaidel": ["scripps-historical"],
    "logorrhea": ["scripps-historical"],
    "appoggiatura": ["scripps-historical"],
    "succedaneum": ["scripps-historical"],
    "serrefine": ["scripps-historical"],
}


def list_tags_for(canonical_word: str) -> List[str]:
    return WORD_LIST_TAGS.get(canonical_word, [])


def get_competition_list(list_id: str) -> Dict[str, str]:
    """Metadata for one list; empty dict when the id is unknown."""
    for entry in COMPETITION_LISTS:
        if entry["id"] == list_id:
            return entry
    return {}
