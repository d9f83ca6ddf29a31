"""
Celidone configuration.

Usage in settings.py:
    CELIDONE = {
        "NOTIFIER_BACKEND": "celidone.adapters.notifiers.SignalNotifier",
        "PAGE_SIZE": 20,
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class CelidoneSettings:
    """Celidone configuration settings."""

    # Dotted path to the Notifier used by the default registry
    NOTIFIER_BACKEND: str = "celidone.adapters.notifiers.SignalNotifier"

    # Listing
    PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    # "Recent customers" default size
    RECENT_LIMIT: int = 10

    # Maximum rows returned by a search
    SEARCH_LIMIT: int = 50


def get_celidone_settings() -> CelidoneSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "CELIDONE", {})
    return CelidoneSettings(**user_settings)


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_celidone_settings(), name)


celidone_settings = _LazySettings()
