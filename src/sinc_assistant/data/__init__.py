"""Data access layer."""

from __future__ import annotations

from .supabase import EventStoreError, SupabaseGateway, SupabaseNotInitializedError

__all__ = ["EventStoreError", "SupabaseGateway", "SupabaseNotInitializedError"]
