"""Domain models package."""

from .identifiers import ProblemIdentifier
from .outcome import ExtractionFailure, Failure, ScrapeOutcome, Success
from .problem import ProblemRecord, SampleTest

__all__ = [
    "ExtractionFailure",
    "Failure",
    "ProblemIdentifier",
    "ProblemRecord",
    "SampleTest",
    "ScrapeOutcome",
    "Success",
]
