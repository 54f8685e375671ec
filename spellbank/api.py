import logging
import random
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from spellbank.competition_lists import get_competition_list
from spellbank.exceptions import SpellbankError
from spellbank.items import generate_item
from spellbank.models import (
    DIALECTS, CompetitionListResponse, DialectRequest, PoolResponse, QuizItem, RegistryState,
)
from spellbank.pool import select_pool
from spellbank.registry import ALL_TIERS, KNOWN_PACKS, WordRegistry, get_registry, init_registry

logger = logging.getLogger(__name__)

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 10


@asynccontextmanager
async def lifespan(app: FastAPI):
    registry = await init_registry()
    logger.info(f"[API] Ready: {len(registry)} words, tiers={sorted(registry.loaded_tiers)}")
    yield


app = FastAPI(title="SpellBank Word API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)


def _state(registry: WordRegistry) -> RegistryState:
    return RegistryState(
        version=registry.version,
        dialect=registry.dialect,
        loaded_tiers=sorted(registry.loaded_tiers),
        loaded_packs=sorted(registry.loaded_packs),
        word_count=len(registry),
    )


def _check_range(min_difficulty: int, max_difficulty: int) -> None:
    if not (MIN_DIFFICULTY <= min_difficulty <= MAX_DIFFICULTY and MIN_DIFFICULTY <= max_difficulty <= MAX_DIFFICULTY):
        raise HTTPException(status_code=400, detail=f"Difficulty must be between {MIN_DIFFICULTY} and {MAX_DIFFICULTY}.")
    if min_difficulty > max_difficulty:
        raise HTTPException(status_code=400, detail="min_difficulty must not exceed max_difficulty.")


@app.get("/registry", response_model=RegistryState)
async def registry_state():
    """Version, dialect and what has been loaded so far."""
    return _state(get_registry())


@app.get("/pool", response_model=PoolResponse)
async def pool(category: Optional[str] = None, min_difficulty: int = 1, max_difficulty: int = 10,
               hard_mode: bool = False):
    _check_range(min_difficulty, max_difficulty)
    words = select_pool(category, min_difficulty, max_difficulty, hard_mode, get_registry())
    return PoolResponse(count=len(words), words=words)


@app.get("/item", response_model=QuizItem)
async def item(category: str, difficulty: int = 1, hard_mode: bool = False, seed: Optional[int] = None):
    if not 1 <= difficulty <= 5:
        raise HTTPException(status_code=400, detail="difficulty must be a level between 1 and 5.")
    rng = random.Random(seed) if seed is not None else random.Random()
    try:
        return generate_item(difficulty, category, hard_mode, rng, get_registry())
    except SpellbankError as e:
        raise HTTPException(status_code=503, detail=str(e))


@app.get("/lists/{list_id}", response_model=CompetitionListResponse)
async def competition_list(list_id: str):
    """A competition list and the loaded words tagged with it."""
    entry = get_competition_list(list_id)
    if not entry:
        raise HTTPException(status_code=404, detail=f"Unknown list '{list_id}'.")
    words = [w.word for w in get_registry().get_by_list(list_id)]
    return CompetitionListResponse(**entry, count=len(words), words=words)


@app.post("/dialect", response_model=RegistryState)
async def dialect(req: DialectRequest):
    if req.dialect not in DIALECTS:
        raise HTTPException(status_code=400, detail=f"Unsupported dialect. Use one of: {', '.join(DIALECTS)}.")
    registry = get_registry()
    await registry.set_dialect(req.dialect)
    return _state(registry)


@app.post("/tiers/{tier}", response_model=RegistryState)
async def load_tier(tier: int):
    if tier not in ALL_TIERS:
        raise HTTPException(status_code=400, detail=f"Unknown tier {tier}.")
    registry = get_registry()
    await registry.load_tier(tier)
    return _state(registry)


@app.post("/packs/{pack_id}", response_model=RegistryState)
async def load_pack(pack_id: str):
    if pack_id not in KNOWN_PACKS:
        raise HTTPException(status_code=400, detail=f"Unknown pack '{pack_id}'.")
    registry = get_registry()
    await registry.load_pack(pack_id)
    return _state(registry)
