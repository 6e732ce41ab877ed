from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from hikaru.version import __version__

DEFAULT_API_BASE_URL = "https://api.chess.com/pub"
DEFAULT_USER_AGENT = f"hikaru/{__version__}"
DEFAULT_INDEX_TIMEOUT_S = 15
DEFAULT_ARCHIVE_TIMEOUT_S = 20
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(slots=True)
class Settings:
    """Configuration for Chess.com archive downloads.

    Attributes:
        api_base_url: Root of the Published-Data API, without a trailing slash.
        user_agent: Value sent in the ``User-Agent`` header.
        index_timeout_s: Timeout in seconds for archive index requests.
        archive_timeout_s: Timeout in seconds for monthly archive requests.
        log_level: Level name applied to the package logger.
    """

    api_base_url: str = DEFAULT_API_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    index_timeout_s: float = DEFAULT_INDEX_TIMEOUT_S
    archive_timeout_s: float = DEFAULT_ARCHIVE_TIMEOUT_S
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        self.api_base_url = self.api_base_url.rstrip("/")
        self.log_level = self.log_level.upper()

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for ``log_level``, falling back to INFO."""
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.INFO


def _read_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {value!r}") from exc


def get_settings() -> Settings:
    """Return a Settings instance with ``.env`` and environment overrides applied."""
    load_dotenv()
    return Settings(
        api_base_url=os.getenv("HIKARU_API_BASE_URL", DEFAULT_API_BASE_URL),
        user_agent=os.getenv("HIKARU_USER_AGENT", DEFAULT_USER_AGENT),
        index_timeout_s=_read_float("HIKARU_INDEX_TIMEOUT_S", DEFAULT_INDEX_TIMEOUT_S),
        archive_timeout_s=_read_float("HIKARU_ARCHIVE_TIMEOUT_S", DEFAULT_ARCHIVE_TIMEOUT_S),
        log_level=os.getenv("HIKARU_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
