"""
Pytest fixtures for the Sinc assistant.

Provides:
- A fixed reference date (Wednesday 2024-01-10)
- Event record and domain event factories
- Application settings with the language model disabled
"""

from datetime import date
from pathlib import Path

import pytest

from sinc_assistant.config import (
    AppSettings,
    AssistantSettings,
    LlmSettings,
    LoggingSettings,
    StorageSettings,
    SupabaseSettings,
    get_settings,
)
from sinc_assistant.domain import CalendarEvent


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep the environment from enabling the remote model or writing logs outside tmp."""
    monkeypatch.delenv("HUGGING_FACE_TOKEN", raising=False)
    monkeypatch.setenv("SINC_LOG_DIR", str(tmp_path / "logs"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def today():
    """Wednesday, 10 January 2024."""
    return date(2024, 1, 10)


@pytest.fixture
def make_event():
    """Build a CalendarEvent from store-style fields."""

    def _make(day, time=None, end_time=None, title="Událost", group_id="1"):
        return CalendarEvent.from_record(
            {"date": day, "time": time, "end_time": end_time, "title": title, "group_id": group_id}
        )

    return _make


@pytest.fixture
def llm_settings_factory():
    def _make(api_key=None):
        return LlmSettings(
            api_key=api_key,
            model="test-model",
            base_url="https://example.invalid/v1",
            timeout_seconds=1.0,
        )

    return _make


@pytest.fixture
def app_settings(llm_settings_factory, tmp_path):
    """Settings with no model token and no Supabase credentials."""
    return AppSettings(
        llm=llm_settings_factory(),
        supabase=SupabaseSettings(url=None, anon_key=None),
        storage=StorageSettings(events_table="events", group_members_table="group_members"),
        assistant=AssistantSettings(),
        logging=LoggingSettings(level="DEBUG", directory=Path(tmp_path) / "logs"),
    )
