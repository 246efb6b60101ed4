"""Parser for Codeforces problem pages."""

import copy
from typing import Optional

from bs4 import BeautifulSoup, Tag
from loguru import logger

from domain.exceptions import StatementNotFoundError
from domain.models import ProblemRecord
from domain.models import problem as fields
from domain.parsers.math_normalizer import normalize_math
from domain.parsers.sample_tests import SampleTestPairer

# Length of the "time limit per test" / "memory limit per test" labels
TIME_LIMIT_LABEL_LENGTH = 19
MEMORY_LIMIT_LABEL_LENGTH = 21


class ProblemPageParser:
    """Parser for extracting data from a rendered Codeforces problem page."""

    def __init__(self, sample_test_pairer: Optional[SampleTestPairer] = None):
        """
        Initialize parser.

        Args:
            sample_test_pairer: Extractor for the sample tests block
        """
        self.sample_test_pairer = sample_test_pairer or SampleTestPairer()

    def parse(self, html: str) -> ProblemRecord:
        """
        Parse rendered page HTML into a problem record.

        Raises:
            StatementNotFoundError: If the page has no problem statement
            DeprecatedSampleLayoutError: If sample tests use the old layout
        """
        soup = BeautifulSoup(html, "lxml")

        statement = soup.select_one(".problem-statement")
        if statement is None:
            logger.warning("Problem statement block not found")
            raise StatementNotFoundError()

        tests = self.sample_test_pairer.extract(soup)

        record = ProblemRecord(
            title=self._extract_title(statement),
            time_limit=self._extract_limit(
                statement, ".header .time-limit", TIME_LIMIT_LABEL_LENGTH
            )
            or fields.TIME_LIMIT_NOT_FOUND,
            memory_limit=self._extract_limit(
                statement, ".header .memory-limit", MEMORY_LIMIT_LABEL_LENGTH
            )
            or fields.MEMORY_LIMIT_NOT_FOUND,
            description=self._inner_html(self._description_region(statement))
            or fields.DESCRIPTION_NOT_FOUND,
            input_description=self._inner_html(statement.select_one(".input-specification"))
            or fields.INPUT_DESCRIPTION_NOT_FOUND,
            output_description=self._inner_html(statement.select_one(".output-specification"))
            or fields.OUTPUT_DESCRIPTION_NOT_FOUND,
            tests=tests,
        )

        logger.debug(f"Parsed problem: {record.title}")
        return record

    def _extract_title(self, statement: Tag) -> str:
        title = statement.select_one(".title")
        if title is None:
            return fields.TITLE_NOT_FOUND
        return title.get_text().strip() or fields.TITLE_NOT_FOUND

    def _extract_limit(self, statement: Tag, selector: str, label_length: int) -> Optional[str]:
        """Extract a limit value, e.g. "2 seconds" from "time limit per test2 seconds"."""
        element = statement.select_one(selector)
        if element is None:
            return None
        return element.get_text()[label_length:].strip() or None

    def _description_region(self, statement: Tag) -> Optional[Tag]:
        """
        Return the legend block of the statement.

        It has no class of its own; it is always the second child element of
        the statement, right after the header.
        """
        children = [child for child in statement.children if isinstance(child, Tag)]
        if len(children) < 2:
            return None
        return children[1]

    def _inner_html(self, element: Optional[Tag]) -> Optional[str]:
        """Inner HTML of element with math normalized, leaving the page tree untouched."""
        if element is None:
            return None
        return normalize_math(copy.copy(element)).decode_contents() or None
