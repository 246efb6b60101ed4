"""Service for scraping a single Codeforces problem."""

from typing import Optional

from loguru import logger

from domain.exceptions import StructuralError
from domain.models import (
    ExtractionFailure,
    Failure,
    ProblemIdentifier,
    ScrapeOutcome,
    Success,
)
from domain.parsers.problem_page import ProblemPageParser
from domain.parsers.url_parser import URLParser
from infrastructure.interfaces import RenderedPageFetcherProtocol


class ProblemService:
    """Fetches a problem page and turns it into a success or failure outcome."""

    def __init__(
        self,
        *,
        fetcher: RenderedPageFetcherProtocol,
        page_parser: Optional[ProblemPageParser] = None,
        url_parser: type[URLParser] = URLParser,
        base_url: Optional[str] = None,
    ):
        """Initialize service with dependencies."""
        self.fetcher = fetcher
        self.page_parser = page_parser or ProblemPageParser()
        self.url_parser = url_parser
        self.base_url = base_url

    async def scrape(self, raw_id: str, ongoing: bool) -> ScrapeOutcome:
        """
        Scrape the problem identified by raw_id (e.g. "1850A").

        Never raises: markup problems become 404 failures and anything else
        becomes a 500 failure carrying the error text.
        """
        logger.info(f"Scraping problem {raw_id} (ongoing={ongoing})")

        try:
            identifier = ProblemIdentifier.from_raw(raw_id)
            url = self.url_parser.resolve(identifier, ongoing, self.base_url)

            html = await self.fetcher.get_rendered_html(url)
            record = self.page_parser.parse(html)

        except StructuralError as e:
            logger.warning(f"Cannot extract problem {raw_id}: {e}")
            return Failure(ExtractionFailure(error=str(e), status=e.status_code))

        except Exception as e:
            logger.exception(f"Failed to scrape problem {raw_id}")
            return Failure(ExtractionFailure(error=str(e) or type(e).__name__, status=500))

        logger.info(f"Successfully scraped problem {raw_id} with {len(record.tests)} test(s)")
        return Success(record)
