"""FastAPI dependency injection for shared app state."""

from __future__ import annotations

from fastapi import Request

from notediagram.config import Settings


def get_settings(request: Request) -> Settings:
    """Settings stored on app.state at startup (fresh defaults otherwise)."""
    settings = getattr(request.app.state, "settings", None)
    if isinstance(settings, Settings):
        return settings
    return Settings()
