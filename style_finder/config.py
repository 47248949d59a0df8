"""
Capture settings and their environment overrides.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .cache import DEFAULT_CACHE_TTL

DEFAULT_VIEWPORT = {"width": 1920, "height": 1080}

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

DEFAULT_TIMEOUT_MS = 60000
DEFAULT_SETTLE_MS = 2000
LOAD_STATE_TIMEOUT_MS = 15000

ENV_PREFIX = "STYLE_FINDER_"


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class ScrapeConfig:
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    settle_ms: int = DEFAULT_SETTLE_MS
    viewport: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_VIEWPORT))
    user_agent: str = DEFAULT_USER_AGENT
    headless: bool = True
    block_resources: bool = True
    cache_ttl: float = DEFAULT_CACHE_TTL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ScrapeConfig":
        env = os.environ if environ is None else environ
        return cls(
            timeout_ms=_env_int(env, "TIMEOUT", DEFAULT_TIMEOUT_MS),
            settle_ms=_env_int(env, "SETTLE", DEFAULT_SETTLE_MS),
            headless=_env_bool(env, "HEADLESS", True),
            block_resources=_env_bool(env, "BLOCK_RESOURCES", True),
            cache_ttl=_env_float(env, "CACHE_TTL", DEFAULT_CACHE_TTL),
        )
