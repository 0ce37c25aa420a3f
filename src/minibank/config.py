"""Runtime settings for minibank, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

LOG_PATH_VAR = "MINIBANK_LOG_PATH"
CURRENCY_SYMBOL_VAR = "MINIBANK_CURRENCY_SYMBOL"


@dataclass(frozen=True)
class Settings:
    """Settings shared by the demo driver and the bank registry.

    ``log_path`` is where the structured logger appends JSON lines; when it
    is ``None`` events are only kept in memory. ``currency_symbol`` prefixes
    amounts in printed statements.
    """

    log_path: Optional[Path] = None
    currency_symbol: str = ""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (``os.environ`` after loading the nearest ``.env``)."""

        if environ is None:
            load_dotenv(find_dotenv(usecwd=True))
            environ = os.environ
        raw_path = environ.get(LOG_PATH_VAR, "").strip()
        return cls(
            log_path=Path(raw_path) if raw_path else None,
            currency_symbol=environ.get(CURRENCY_SYMBOL_VAR, ""),
        )


__all__ = ["CURRENCY_SYMBOL_VAR", "LOG_PATH_VAR", "Settings"]
