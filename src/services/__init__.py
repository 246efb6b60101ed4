from typing import Optional

from infrastructure.settings import Settings, get_settings
from services.problem import ProblemService


def create_problem_service(settings: Optional[Settings] = None) -> ProblemService:
    """Factory function to create problem service with all dependencies."""
    from infrastructure.browser import BrowserFetcher

    settings = settings or get_settings()

    return ProblemService(
        fetcher=BrowserFetcher(settings),
        base_url=settings.codeforces_base_url,
    )


__all__ = ["ProblemService", "create_problem_service"]
