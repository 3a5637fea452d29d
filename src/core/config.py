# core/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.spotify.com/v1"
DEFAULT_USER_AGENT = "tracksearch/0.1"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer), using %d", name, raw, default)
        return default


@dataclass(frozen=True)
class AppConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = 15.0
    user_agent: str = DEFAULT_USER_AGENT

    # Desktop player we drive: AppleScript application name on macOS,
    # MPRIS bus name suffix (lowercased) on Linux.
    media_app: str = "Spotify"

    # Caller-side query gating
    min_query_length: int = 2
    debounce_ms: int = 300

    @property
    def mpris_bus_name(self) -> str:
        return f"org.mpris.MediaPlayer2.{self.media_app.lower()}"

    @classmethod
    def from_env(cls) -> "AppConfig":
        return cls(
            base_url=os.getenv("TRACKSEARCH_BASE_URL") or DEFAULT_BASE_URL,
            timeout_s=float(_env_int("TRACKSEARCH_TIMEOUT", 15)),
            user_agent=os.getenv("TRACKSEARCH_USER_AGENT") or DEFAULT_USER_AGENT,
            media_app=os.getenv("TRACKSEARCH_MEDIA_APP") or "Spotify",
            min_query_length=_env_int("TRACKSEARCH_MIN_QUERY", 2),
            debounce_ms=_env_int("TRACKSEARCH_DEBOUNCE_MS", 300),
        )
