"""
Word sources feed raw tier, pack and dialect-override data to the registry.
The registry depends only on the WordSource interface; records are trusted
as well-formed and are not schema-checked here.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

import httpx

from spellbank.exceptions import SourceUnavailableError

logger = logging.getLogger(__name__)


def tier_filename(tier: int) -> str:
    return f"tier{tier}.json"


def pack_filename(pack_id: str) -> str:
    return f"pack-{pack_id}.json"


def overrides_filename(dialect: str) -> str:
    return f"overrides-{dialect}.json"


class WordSource(Protocol):
    async def load_tier(self, tier: int) -> List[Dict[str, Any]]:
        ...

    async def load_pack(self, pack_id: str) -> List[Dict[str, Any]]:
        ...

    async def load_dialect_overrides(self, dialect: str) -> Dict[str, Dict[str, Any]]:
        ...


class JsonDirectorySource:
    """Reads word data from JSON files in a local directory."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def _read(self, filename: str) -> Any:
        path = self.data_dir / filename
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except FileNotFoundError:
            raise SourceUnavailableError(filename, f"{path} not found")
        except (OSError, json.JSONDecodeError) as e:
            raise SourceUnavailableError(filename, str(e))

    async def load_tier(self, tier: int) -> List[Dict[str, Any]]:
        return self._read(tier_filename(tier))

    async def load_pack(self, pack_id: str) -> List[Dict[str, Any]]:
        return self._read(pack_filename(pack_id))

    async def load_dialect_overrides(self, dialect: str) -> Dict[str, Dict[str, Any]]:
        return self._read(overrides_filename(dialect))


class HttpWordSource:
    """Fetches the same JSON files from a static HTTP host."""

    def __init__(self, base_url: str, timeout: float = 10.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._transport = transport

    async def _fetch(self, filename: str) -> Any:
        url = f"{self.base_url}/{filename}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                r = await client.get(url)
                r.raise_for_status()
                return r.json()
        except httpx.HTTPError as e:
            logger.warning(f"[SOURCE] GET {url} failed: {e}")
            raise SourceUnavailableError(filename, str(e))
        except ValueError as e:
            raise SourceUnavailableError(filename, f"invalid JSON: {e}")

    async def load_tier(self, tier: int) -> List[Dict[str, Any]]:
        return await self._fetch(tier_filename(tier))

    async def load_pack(self, pack_id: str) -> List[Dict[str, Any]]:
        return await self._fetch(pack_filename(pack_id))

    async def load_dialect_overrides(self, dialect: str) -> Dict[str, Dict[str, Any]]:
        return await self._fetch(overrides_filename(dialect))
