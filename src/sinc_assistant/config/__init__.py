"""Configuration models and helpers."""

from __future__ import annotations

from .settings import (
    AppSettings,
    AssistantSettings,
    LlmSettings,
    LoggingSettings,
    StorageSettings,
    SupabaseSettings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "AssistantSettings",
    "LlmSettings",
    "LoggingSettings",
    "StorageSettings",
    "SupabaseSettings",
    "get_settings",
]
