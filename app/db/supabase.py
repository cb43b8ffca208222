"""Supabase client singleton.

All project reads and writes go through the client returned by
``get_supabase()``; it is created lazily on first use from ``settings``
so importing the app never opens a connection.
"""

from supabase import Client, create_client

from app.core.config import settings

_client: Client | None = None


def get_supabase() -> Client:
    """Return the process-wide Supabase client, creating it on first call."""
    global _client
    if _client is None:
        _client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    return _client


def reset_supabase() -> None:
    """Drop the cached client so the next call rebuilds it from settings."""
    global _client
    _client = None
