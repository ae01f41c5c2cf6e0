"""Environment-driven settings for translation loading."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Union

from dotenv import load_dotenv


def _sheet_from_env(raw: Optional[str]) -> Union[int, str]:
    if raw is None or not raw.strip():
        return 0
    raw = raw.strip()
    return int(raw) if raw.isdigit() else raw


@dataclass(frozen=True)
class Settings:
    encoding: str = "utf-8-sig"
    temp_dir: Optional[str] = None
    sheet_name: Union[int, str] = 0
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    @classmethod
    def from_env(cls) -> Settings:
        """Read settings from the environment (and a local .env file)."""
        load_dotenv()
        return cls(
            encoding=os.getenv("TRANSLATIONS_ENCODING") or "utf-8-sig",
            temp_dir=os.getenv("TRANSLATIONS_TEMP_DIR") or None,
            sheet_name=_sheet_from_env(os.getenv("TRANSLATIONS_SHEET")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_dir=os.getenv("TRANSLATIONS_LOG_DIR") or None,
        )
