"""Optional language-model layer wrapped around the rule-based assistant."""

from __future__ import annotations

from .orchestrator import AssistantOrchestrator

__all__ = ["AssistantOrchestrator"]
