"""Domain exceptions."""


class ProblemScraperError(Exception):
    """Base error for the problem scraper."""

    pass


class StructuralError(ProblemScraperError):
    """The page loaded but its markup cannot be extracted."""

    status_code = 404


class StatementNotFoundError(StructuralError):
    """No problem-statement region on the page."""

    def __init__(self, message: str = "Problem statement not found"):
        super().__init__(message)


class DeprecatedSampleLayoutError(StructuralError):
    """Sample tests use the old layout that is not supported."""

    def __init__(self, message: str = "Depricated/Not Found"):
        super().__init__(message)


class FetchError(ProblemScraperError):
    """The browser failed to load the page."""

    pass
