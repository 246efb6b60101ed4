"""Builds Codeforces problem URLs."""

from loguru import logger

from domain.models import ProblemIdentifier

DEFAULT_BASE_URL = "https://codeforces.com"


class URLParser:
    """Resolves problem identifiers to problemset or contest URLs."""

    base_url = DEFAULT_BASE_URL

    @classmethod
    def build_problem_url(cls, identifier: ProblemIdentifier, base_url: str | None = None) -> str:
        """
        Build archived problemset URL from identifier.
        """
        base = (base_url or cls.base_url).rstrip("/")
        url = f"{base}/problemset/problem/{identifier.contest_id}/{identifier.problem_id}"

        logger.debug(f"Built problem URL: {url}")
        return url

    @classmethod
    def build_contest_problem_url(
        cls, identifier: ProblemIdentifier, base_url: str | None = None
    ) -> str:
        """
        Build live contest URL from identifier.
        """
        base = (base_url or cls.base_url).rstrip("/")
        url = f"{base}/contest/{identifier.contest_id}/problem/{identifier.problem_id}"

        logger.debug(f"Built contest problem URL: {url}")
        return url

    @classmethod
    def resolve(
        cls, identifier: ProblemIdentifier, ongoing: bool, base_url: str | None = None
    ) -> str:
        """
        Pick the URL shape for the problem.

        Problems of a running contest are only reachable through the contest
        path; once archived they live under the problemset.
        """
        if ongoing:
            return cls.build_contest_problem_url(identifier, base_url)
        return cls.build_problem_url(identifier, base_url)
