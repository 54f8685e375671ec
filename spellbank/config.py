import os
from pathlib import Path
from typing import List, Optional, Tuple

from dotenv import load_dotenv, find_dotenv

# Load shared .env (prefer project root) without overriding existing env
_ENV_PATH = find_dotenv(usecwd=True)
if _ENV_PATH:
    load_dotenv(_ENV_PATH, override=False)

DEFAULT_DATA_DIR = Path(__file__).parent / 'data'


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except Exception:
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except Exception:
        return default


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return str(raw).strip().lower() in ('1', 'true', 'yes', 'on')


def _env_tiers(name: str, default: Tuple[int, ...]) -> Tuple[int, ...]:
    raw = os.getenv(name)
    if not raw:
        return default
    tiers: List[int] = []
    for part in raw.split(','):
        part = part.strip()
        if not part:
            continue
        try:
            tiers.append(int(part))
        except ValueError:
            return default
    return tuple(tiers) or default


class Settings:
    """Runtime knobs read from the environment (.env supported)."""

    def __init__(self):
        data_dir = os.getenv('WORD_DATA_DIR')
        self.data_dir: Path = Path(data_dir) if data_dir else DEFAULT_DATA_DIR
        self.source_url: Optional[str] = os.getenv('WORD_SOURCE_URL') or None
        self.eager_tiers: Tuple[int, ...] = _env_tiers('EAGER_TIERS', (1, 2))
        self.default_dialect: str = os.getenv('DEFAULT_DIALECT', 'en-US')
        self.hard_mode_fraction: float = _env_float('HARD_MODE_FRACTION', 0.3)
        self.max_generation_attempts: int = _env_int('MAX_GENERATION_ATTEMPTS', 60)
        self.http_timeout: float = _env_float('HTTP_TIMEOUT', 10.0)
        self.log_level: str = os.getenv('LOG_LEVEL', 'INFO').strip().upper()
        self.log_dir: Path = Path(os.getenv('LOG_DIR', str(Path.cwd() / 'logs')))
        self.enable_cloudwatch: bool = _env_bool('ENABLE_CLOUDWATCH', False)
        self.environment: str = os.getenv('ENVIRONMENT', 'Development')

    def __repr__(self) -> str:
        return (
            f"Settings(data_dir={self.data_dir}, source_url={self.source_url}, "
            f"eager_tiers={self.eager_tiers}, default_dialect={self.default_dialect})"
        )


def get_settings() -> Settings:
    """Read settings fresh from the environment."""
    return Settings()
