from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from platformdirs import user_log_dir

load_dotenv()

APP_NAME = "Sinc Assistant"
APP_AUTHOR = "Sinc"
HUGGING_FACE_ROUTER_URL = "https://router.huggingface.co/v1"


@dataclass(frozen=True)
class LlmSettings:
    api_key: Optional[str]
    model: str
    base_url: str
    timeout_seconds: float

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.model)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.api_key:
            missing.append("HUGGING_FACE_TOKEN")
        if not self.model:
            missing.append("SINC_LLM_MODEL")
        return missing


@dataclass(frozen=True)
class SupabaseSettings:
    url: Optional[str]
    anon_key: Optional[str]

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.anon_key)


@dataclass(frozen=True)
class StorageSettings:
    events_table: str
    group_members_table: str


@dataclass(frozen=True)
class AssistantSettings:
    analysis_window_days: int = 30
    slot_window_days: int = 14
    suggestion_limit: int = 5
    free_day_preview: int = 5
    busy_day_preview: int = 3


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Path


@dataclass(frozen=True)
class AppSettings:
    llm: LlmSettings
    supabase: SupabaseSettings
    storage: StorageSettings
    assistant: AssistantSettings
    logging: LoggingSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    llm = LlmSettings(
        api_key=os.getenv("HUGGING_FACE_TOKEN"),
        model=os.getenv("SINC_LLM_MODEL", "meta-llama/Llama-3.1-8B-Instruct"),
        base_url=os.getenv("SINC_LLM_BASE_URL", HUGGING_FACE_ROUTER_URL),
        timeout_seconds=_float_from_env("SINC_LLM_TIMEOUT_SECONDS", 15.0),
    )

    supabase = SupabaseSettings(
        url=os.getenv("SUPABASE_URL"),
        anon_key=os.getenv("SUPABASE_ANON_KEY"),
    )

    storage = StorageSettings(
        events_table=os.getenv("SINC_EVENTS_TABLE", "events"),
        group_members_table=os.getenv("SINC_GROUP_MEMBERS_TABLE", "group_members"),
    )

    assistant = AssistantSettings(
        analysis_window_days=_int_from_env("SINC_ANALYSIS_WINDOW_DAYS", 30),
        slot_window_days=_int_from_env("SINC_SLOT_WINDOW_DAYS", 14),
        suggestion_limit=_int_from_env("SINC_SUGGESTION_LIMIT", 5),
        free_day_preview=_int_from_env("SINC_FREE_DAY_PREVIEW", 5),
        busy_day_preview=_int_from_env("SINC_BUSY_DAY_PREVIEW", 3),
    )

    logging = LoggingSettings(
        level=os.getenv("SINC_LOG_LEVEL", "INFO"),
        directory=Path(os.getenv("SINC_LOG_DIR") or user_log_dir(APP_NAME, APP_AUTHOR)),
    )

    return AppSettings(llm=llm, supabase=supabase, storage=storage, assistant=assistant, logging=logging)
