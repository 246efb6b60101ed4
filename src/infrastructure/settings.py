"""Application settings loaded from the environment."""

import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str) -> list[str]:
    value = os.getenv(name, "")
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    """Runtime configuration."""

    codeforces_base_url: str = "https://codeforces.com"
    browser_headless: bool = True
    browser_user_agent: str = DEFAULT_USER_AGENT
    page_load_timeout_ms: int = 30000
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3001
    cors_allow_origins: list[str] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables (and a .env file if present)."""
        load_dotenv()

        return cls(
            codeforces_base_url=os.getenv("CODEFORCES_BASE_URL", cls.codeforces_base_url),
            browser_headless=_env_bool("BROWSER_HEADLESS", cls.browser_headless),
            browser_user_agent=os.getenv("BROWSER_USER_AGENT", DEFAULT_USER_AGENT),
            page_load_timeout_ms=int(
                os.getenv("PAGE_LOAD_TIMEOUT_MS", str(cls.page_load_timeout_ms))
            ),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", str(cls.port))),
            cors_allow_origins=_env_list("CORS_ALLOW_ORIGINS"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return process-wide settings, loaded once."""
    return Settings.from_env()
