"""
Word registry: owns the in-memory word bank.

Tiers 1-5 and the optional competition packs are fetched from a WordSource
on demand and merged by canonical (en-US) word. The active view may carry a
dialect overlay; canonical records are never changed. Every merge or dialect
switch bumps ``version`` and invalidates the derived indices, which are
rebuilt lazily on the next read.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Dict, Iterable, List, Optional, Set

from spellbank.cache import LazyCache
from spellbank.competition_lists import list_tags_for
from spellbank.config import Settings, get_settings
from spellbank.etymology import extract_language
from spellbank.exceptions import SourceUnavailableError
from spellbank.models import DEFAULT_DIALECT, DIALECTS, DialectOverride, WordRecord
from spellbank.monitoring import get_monitor
from spellbank.sources import HttpWordSource, JsonDirectorySource, WordSource

logger = logging.getLogger(__name__)

ALL_TIERS = (1, 2, 3, 4, 5)
KNOWN_PACKS = ('scripps', 'state-bee')

# Adaptive bands and the tiers each one needs
TIER_BANDS: Dict[str, tuple] = {
    'starter': (1, 2),
    'rising': (1, 2, 3, 4),
    'sigma': (1, 2, 3, 4, 5),
}


def _group(words: Iterable[WordRecord], keys: Callable[[WordRecord], Iterable[str]]) -> Dict[str, List[WordRecord]]:
    index: Dict[str, List[WordRecord]] = {}
    for w in words:
        for key in keys(w):
            index.setdefault(key, []).append(w)
    return index


class WordRegistry:
    def __init__(self, source: WordSource):
        self._source = source
        # Canonical records in load order; only ever appended to
        self._base_words: List[WordRecord] = []
        self._canonical_keys: Set[str] = set()
        # Active view (dialect overlay + list tags applied)
        self._loaded_words: List[WordRecord] = []
        self._loaded_tiers: Set[int] = set()
        self._loaded_packs: Set[str] = set()
        self._version = 0

        self._dialect = DEFAULT_DIALECT
        self._overrides: Dict[str, Dict[str, DialectOverride]] = {}
        # alternate spelling -> canonical key, per dialect
        self._reverse_keys: Dict[str, Dict[str, str]] = {}

        self._inflight: Dict[str, asyncio.Future] = {}

        self._word_map: LazyCache[Dict[str, WordRecord]] = LazyCache(
            lambda: {w.word: w for w in self._loaded_words}
        )
        self._by_pattern: LazyCache[Dict[str, List[WordRecord]]] = LazyCache(
            lambda: _group(self._loaded_words, lambda w: [w.pattern, *w.secondary_patterns])
        )
        self._by_theme: LazyCache[Dict[str, List[WordRecord]]] = LazyCache(
            lambda: _group(self._loaded_words, lambda w: [w.theme] if w.theme else [])
        )
        self._by_list: LazyCache[Dict[str, List[WordRecord]]] = LazyCache(
            lambda: _group(self._loaded_words, lambda w: w.lists or [])
        )
        self._by_origin: LazyCache[Dict[str, List[WordRecord]]] = LazyCache(
            lambda: _group(self._loaded_words, lambda w: [extract_language(w.etymology)])
        )

    # ── state ────────────────────────────────────────────────────────────

    @property
    def version(self) -> int:
        """Increments on every merge that adds words and on every dialect switch."""
        return self._version

    @property
    def dialect(self) -> str:
        return self._dialect

    @property
    def loaded_tiers(self) -> frozenset:
        return frozenset(self._loaded_tiers)

    @property
    def loaded_packs(self) -> frozenset:
        return frozenset(self._loaded_packs)

    def __len__(self) -> int:
        return len(self._loaded_words)

    def all_words(self) -> List[WordRecord]:
        """Every loaded word in the active dialect view."""
        return list(self._loaded_words)

    def words_by_difficulty(self, min_difficulty: int, max_difficulty: int) -> List[WordRecord]:
        return [w for w in self._loaded_words if min_difficulty <= w.difficulty <= max_difficulty]

    # ── indexed lookups ──────────────────────────────────────────────────

    def get_by_word(self, word: str) -> Optional[WordRecord]:
        return self._word_map.get().get(word)

    def get_by_pattern(self, pattern: str) -> List[WordRecord]:
        return list(self._by_pattern.get().get(pattern, []))

    def get_by_theme(self, theme: str) -> List[WordRecord]:
        return list(self._by_theme.get().get(theme, []))

    def get_by_list(self, list_id: str) -> List[WordRecord]:
        return list(self._by_list.get().get(list_id, []))

    def get_by_origin(self, origin: str) -> List[WordRecord]:
        return list(self._by_origin.get().get(origin, []))

    def resolve_canonical_key(self, word: str) -> str:
        """Map a regional spelling back to its canonical key; other words pass through."""
        lowered = word.lower()
        for reverse in self._reverse_keys.values():
            if lowered in reverse:
                return reverse[lowered]
        return word

    # ── loading ──────────────────────────────────────────────────────────

    async def _single_flight(self, key: str, factory: Callable[[], Awaitable[None]]) -> None:
        pending = self._inflight.get(key)
        if pending is not None:
            await pending
            return
        task = asyncio.ensure_future(factory())
        self._inflight[key] = task
        try:
            await task
        finally:
            self._inflight.pop(key, None)

    async def load_tier(self, tier: int) -> None:
        """Fetch and merge one tier. No-op if already loaded or unavailable."""
        if tier in self._loaded_tiers:
            return
        await self._single_flight(f"tier:{tier}", lambda: self._load_tier(tier))

    async def _load_tier(self, tier: int) -> None:
        if tier in self._loaded_tiers:
            return
        try:
            raw = await self._source.load_tier(tier)
        except SourceUnavailableError as e:
            logger.warning(f"[REGISTRY] Tier {tier} not loaded: {e}")
            get_monitor().track_load_failure('tier', str(tier))
            return
        added = self._merge(raw)
        self._loaded_tiers.add(tier)
        logger.info(f"[REGISTRY] Tier {tier} loaded: {added} new words, {len(self._base_words)} total")
        get_monitor().track_load('tier', str(tier), added)

    async def load_pack(self, pack_id: str) -> None:
        """Fetch and merge an optional word pack. Silently no-ops if the pack is missing."""
        if pack_id in self._loaded_packs:
            return
        await self._single_flight(f"pack:{pack_id}", lambda: self._load_pack(pack_id))

    async def _load_pack(self, pack_id: str) -> None:
        if pack_id in self._loaded_packs:
            return
        try:
            raw = await self._source.load_pack(pack_id)
        except SourceUnavailableError as e:
            logger.info(f"[REGISTRY] Pack '{pack_id}' unavailable: {e}")
            get_monitor().track_load_failure('pack', pack_id)
            return
        if not raw:
            logger.info(f"[REGISTRY] Pack '{pack_id}' is empty; leaving it unloaded")
            return
        added = self._merge(raw)
        self._loaded_packs.add(pack_id)
        logger.info(f"[REGISTRY] Pack '{pack_id}' loaded: {added} new words")
        get_monitor().track_load('pack', pack_id, added)

    async def ensure_all_tiers(self) -> None:
        """Load every missing tier concurrently."""
        missing = [t for t in ALL_TIERS if t not in self._loaded_tiers]
        if missing:
            await asyncio.gather(*(self.load_tier(t) for t in missing))

    async def ensure_tiers_for_band(self, band: str) -> None:
        tiers = TIER_BANDS.get(band)
        if tiers is None:
            logger.warning(f"[REGISTRY] Unknown band '{band}'")
            return
        missing = [t for t in tiers if t not in self._loaded_tiers]
        if missing:
            await asyncio.gather(*(self.load_tier(t) for t in missing))

    def _merge(self, raw: List[dict]) -> int:
        """Append records whose canonical word is new. Returns how many were added.

        The whole batch is validated before any key is committed, so a bad
        record leaves the registry untouched.
        """
        records = [item if isinstance(item, WordRecord) else WordRecord(**item) for item in raw]
        unique: List[WordRecord] = []
        seen: Set[str] = set()
        for record in records:
            if record.word in self._canonical_keys or record.word in seen:
                continue
            seen.add(record.word)
            unique.append(record)
        if unique:
            self._canonical_keys.update(seen)
            self._base_words.extend(unique)
            self._rebuild()
            self._version += 1
        return len(unique)

    # ── dialect ──────────────────────────────────────────────────────────

    async def set_dialect(self, dialect: str) -> None:
        """Switch the active spelling view. Overrides are fetched on first use."""
        if dialect == self._dialect:
            return
        if dialect not in DIALECTS:
            logger.warning(f"[REGISTRY] Unsupported dialect '{dialect}'; staying on {self._dialect}")
            return
        if dialect != DEFAULT_DIALECT and dialect not in self._overrides:
            try:
                raw = await self._source.load_dialect_overrides(dialect)
            except SourceUnavailableError as e:
                logger.warning(f"[REGISTRY] Overrides for {dialect} unavailable, staying on {self._dialect}: {e}")
                get_monitor().track_load_failure('dialect', dialect)
                return
            overrides = {key: DialectOverride(**value) for key, value in raw.items()}
            self._overrides[dialect] = overrides
            self._reverse_keys[dialect] = {o.word.lower(): key for key, o in overrides.items()}
            logger.info(f"[REGISTRY] Loaded {len(overrides)} {dialect} overrides")
        self._dialect = dialect
        self._rebuild()
        self._version += 1
        logger.info(f"[REGISTRY] Dialect set to {dialect} (version {self._version})")

    def _view(self, record: WordRecord, overrides: Optional[Dict[str, DialectOverride]]) -> WordRecord:
        update = {}
        tags = list_tags_for(record.word)
        if tags:
            merged = list(dict.fromkeys([*(record.lists or []), *tags]))
            if merged != record.lists:
                update['lists'] = merged
        override = overrides.get(record.word) if overrides else None
        if override is not None:
            update['word'] = override.word
            update['pronunciation'] = override.pronunciation or record.pronunciation
            update['distractors'] = list(override.distractors)
        if not update:
            return record
        return record.model_copy(update=update)

    def _rebuild(self) -> None:
        overrides = None
        if self._dialect != DEFAULT_DIALECT:
            overrides = self._overrides.get(self._dialect)
        self._loaded_words = [self._view(w, overrides) for w in self._base_words]
        self._invalidate_caches()

    def _invalidate_caches(self) -> None:
        for cache in (self._word_map, self._by_pattern, self._by_theme, self._by_list, self._by_origin):
            cache.invalidate()


# ── process-wide registry ────────────────────────────────────────────────

_registry: Optional[WordRegistry] = None


def build_source(settings: Settings) -> WordSource:
    if settings.source_url:
        return HttpWordSource(settings.source_url, timeout=settings.http_timeout)
    return JsonDirectorySource(settings.data_dir)


def get_registry() -> WordRegistry:
    """The registry for this process. Created on first call and never torn down."""
    global _registry
    if _registry is None:
        settings = get_settings()
        _registry = WordRegistry(build_source(settings))
        logger.debug(f"[REGISTRY] Created with {settings}")
    return _registry


async def init_registry() -> WordRegistry:
    """Create the registry and load the eager tiers and default dialect."""
    settings = get_settings()
    registry = get_registry()
    for tier in settings.eager_tiers:
        await registry.load_tier(tier)
    if settings.default_dialect != registry.dialect:
        await registry.set_dialect(settings.default_dialect)
    return registry


def reset_registry() -> None:
    """Drop the process registry (tests only)."""
    global _registry
    _registry = None
