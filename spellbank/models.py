from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

PartOfSpeech = Literal[
    'noun', 'verb', 'adjective', 'adverb',
    'preposition', 'conjunction', 'pronoun', 'interjection',
]

DEFAULT_DIALECT = 'en-US'
DIALECTS = ('en-US', 'en-GB')


class WordRecord(BaseModel):
    """A single curated spelling word.

    Stored statically in tier files and treated as immutable once loaded.
    Dialect views are produced with ``model_copy`` rather than mutation.
    """

    model_config = ConfigDict(frozen=True)

    word: str
    definition: str = ""
    example_sentence: str = ""
    part_of_speech: PartOfSpeech = 'noun'
    # 1 = kindergarten CVC, 10 = national bee
    difficulty: int = 1
    pattern: str = 'cvc'
    pronunciation: str = ""
    secondary_patterns: List[str] = Field(default_factory=list)
    theme: Optional[str] = None
    lists: Optional[List[str]] = None
    etymology: Optional[str] = None
    distractors: Optional[List[str]] = None
    source: str = 'core'


class DialectOverride(BaseModel):
    """Regional spelling of a canonical word."""

    model_config = ConfigDict(frozen=True)

    word: str
    pronunciation: Optional[str] = None
    distractors: List[str] = Field(default_factory=list)


class QuizItem(BaseModel):
    """One multiple-choice spelling question handed to the game layer."""

    id: str
    prompt: str = "Which spelling is correct?"
    answer: str
    options: List[str]
    correct_index: int
    meta: Dict[str, Any] = Field(default_factory=dict)


class PoolResponse(BaseModel):
    count: int
    words: List[WordRecord]


class DialectRequest(BaseModel):
    dialect: str


class RegistryState(BaseModel):
    version: int
    dialect: str
    loaded_tiers: List[int]
    loaded_packs: List[str]
    word_count: int


class CompetitionListResponse(BaseModel):
    id: str
    name: str
    description: str
    difficulty: str
    count: int
    words: List[str]
