"""
Settings
========

Runtime knobs for the CLI, read from the environment (a local `.env` file is
loaded first when present):

- EPITRACK_FEED       default feed file to load at start-up
- EPITRACK_LOG_LEVEL  logging level name (default INFO)
- EPITRACK_TOP_N      rows shown by `top` without an argument (default 10)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import os

from dotenv import find_dotenv, load_dotenv


@dataclass(frozen=True)
class Settings:
    feed_path: Optional[str] = None
    log_level: str = "INFO"
    top_n: int = 10


def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    top_n = os.getenv("EPITRACK_TOP_N", "10")
    try:
        n = int(top_n)
    except ValueError:
        raise ValueError(f"EPITRACK_TOP_N must be an integer, got {top_n!r}") from None
    return Settings(
        feed_path=os.getenv("EPITRACK_FEED") or None,
        log_level=os.getenv("EPITRACK_LOG_LEVEL", "INFO").upper(),
        top_n=n,
    )
