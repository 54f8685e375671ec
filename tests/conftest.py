import asyncio
from typing import Any, Dict, List, Optional

import pytest

from spellbank import registry as registry_module
from spellbank.exceptions import SourceUnavailableError
from spellbank.registry import WordRegistry


def make_word(word: str, difficulty: int = 1, pattern: str = 'cvc', **extra) -> Dict[str, Any]:
    record = {
        'word': word,
        'definition': f"definition of {word}",
        'example_sentence': f"An example with {word}.",
        'part_of_speech': 'noun',
        'difficulty': difficulty,
        'pattern': pattern,
        'pronunciation': word.upper(),
    }
    record.update(extra)
    return record


def run(coro):
    """Drive a coroutine on a private loop, leaving the current loop alone."""
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


class FakeSource:
    """In-memory WordSource; anything not configured is unavailable."""

    def __init__(self, tiers: Optional[Dict[int, List[dict]]] = None,
                 packs: Optional[Dict[str, List[dict]]] = None,
                 overrides: Optional[Dict[str, Dict[str, dict]]] = None,
                 delay: float = 0.0):
        self.tiers = tiers or {}
        self.packs = packs or {}
        self.overrides = overrides or {}
        self.delay = delay
        self.calls: List[str] = []

    async def load_tier(self, tier: int) -> List[dict]:
        self.calls.append(f"tier:{tier}")
        if self.delay:
            await asyncio.sleep(self.delay)
        if tier not in self.tiers:
            raise SourceUnavailableError(f"tier{tier}.json", "missing")
        return self.tiers[tier]

    async def load_pack(self, pack_id: str) -> List[dict]:
        self.calls.append(f"pack:{pack_id}")
        if pack_id not in self.packs:
            raise SourceUnavailableError(f"pack-{pack_id}.json", "missing")
        return self.packs[pack_id]

    async def load_dialect_overrides(self, dialect: str) -> Dict[str, dict]:
        self.calls.append(f"dialect:{dialect}")
        if dialect not in self.overrides:
            raise SourceUnavailableError(f"overrides-{dialect}.json", "missing")
        return self.overrides[dialect]


@pytest.fixture
def sample_tiers():
    return {
        1: [
            make_word('cat', 1, 'cvc', distractors=['kat', 'catt', 'cet']),
            make_word('ship', 2, 'digraphs', distractors=['chip', 'shipp', 'shep']),
        ],
        2: [
            make_word('separate', 4, 'multisyllable', theme='actions',
                      etymology='Latin: separare (to pull apart)',
                      distractors=['seperate', 'separete', 'saparate']),
            make_word('harbor', 3, 'r-controlled', theme='travel',
                      distractors=['harber', 'harbur', 'harbar']),
        ],
        3: [
            make_word('knowledge', 5, 'irregular', secondary_patterns=['silent-e'],
                      etymology='Old English: cnawlece (acknowledgment)',
                      distractors=['nowledge', 'knowlege', 'knowledje']),
        ],
    }


@pytest.fixture
def sample_overrides():
    return {
        'en-GB': {
            'harbor': {
                'word': 'harbour',
                'pronunciation': 'HAR-bur',
                'distractors': ['harbur', 'harber', 'harboir'],
            },
        },
    }


@pytest.fixture
def fake_source(sample_tiers, sample_overrides):
    return FakeSource(tiers=sample_tiers, overrides=sample_overrides)


@pytest.fixture
def registry(fake_source):
    return WordRegistry(fake_source)


@pytest.fixture
def loaded_registry(registry):
    run(registry.ensure_all_tiers())
    return registry


@pytest.fixture(autouse=True)
def reset_process_registry():
    registry_module.reset_registry()
    yield
    registry_module.reset_registry()
