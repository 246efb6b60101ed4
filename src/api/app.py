"""Litestar application factory."""

from litestar import Litestar
from litestar.config.cors import CORSConfig
from litestar.datastructures import State
from litestar.di import Provide

from api.dependencies import provide_problem_service
from api.routes import ProblemController
from infrastructure.logging_setup import configure_logging
from infrastructure.settings import Settings, get_settings


def create_app(settings: Settings | None = None) -> Litestar:
    """Build the HTTP application."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    return Litestar(
        route_handlers=[ProblemController],
        dependencies={
            "problem_service": Provide(provide_problem_service, sync_to_thread=False)
        },
        cors_config=CORSConfig(allow_origins=settings.cors_allow_origins),
        state=State({"settings": settings}),
    )
