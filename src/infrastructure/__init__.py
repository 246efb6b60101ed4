"""Infrastructure: browser, settings and logging."""

from .browser import BrowserFetcher
from .interfaces import RenderedPageFetcherProtocol
from .logging_setup import configure_logging
from .settings import Settings, get_settings

__all__ = [
    "BrowserFetcher",
    "RenderedPageFetcherProtocol",
    "Settings",
    "configure_logging",
    "get_settings",
]
