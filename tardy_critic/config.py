from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


DEFAULT_FEED_URL = "https://letterboxd.com/tardycritic/rss/"
DEFAULT_TMDB_BASE_URL = "https://api.themoviedb.org/3"
DEFAULT_TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"


def _get_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from e


def _get_float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{key} must be a number, got {raw!r}") from e


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration, read once at startup and passed down explicitly.

    Nothing below the entrypoint reads the process environment.
    """
    feed_url: str = DEFAULT_FEED_URL
    tmdb_api_key: Optional[str] = None
    tmdb_base_url: str = DEFAULT_TMDB_BASE_URL
    tmdb_image_base_url: str = DEFAULT_TMDB_IMAGE_BASE_URL
    tmdb_region: str = "US"
    min_vote_count: int = 2000
    upcoming_limit: int = 5
    window_pad_months: int = 2
    timeout_sec: float = 10.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        return cls(
            feed_url=env.get("LETTERBOXD_RSS_URL") or DEFAULT_FEED_URL,
            tmdb_api_key=env.get("TMDB_API_KEY") or None,
            tmdb_base_url=(env.get("TMDB_API_BASE_URL") or DEFAULT_TMDB_BASE_URL).rstrip("/"),
            tmdb_image_base_url=(env.get("TMDB_IMAGE_BASE_URL") or DEFAULT_TMDB_IMAGE_BASE_URL).rstrip("/"),
            tmdb_region=env.get("TMDB_REGION") or "US",
            min_vote_count=_get_int(env, "ANNIVERSARY_MIN_VOTES", 2000),
            upcoming_limit=_get_int(env, "ANNIVERSARY_UPCOMING_LIMIT", 5),
            window_pad_months=_get_int(env, "ANNIVERSARY_WINDOW_PAD_MONTHS", 2),
            timeout_sec=_get_float(env, "HTTP_TIMEOUT_SEC", 10.0),
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )
