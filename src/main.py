"""Run the problem scraper API."""

import uvicorn
from loguru import logger

from api.app import create_app
from infrastructure.settings import get_settings

app = create_app()


def main() -> None:
    settings = get_settings()
    logger.info(f"Listening on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
