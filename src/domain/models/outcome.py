"""Outcome of a single scrape request."""

from dataclasses import dataclass
from typing import Union

from .problem import ProblemRecord


@dataclass(frozen=True)
class ExtractionFailure:
    """Error payload returned instead of a problem record."""

    error: str
    status: int


@dataclass(frozen=True)
class Success:
    record: ProblemRecord

    @property
    def status(self) -> int:
        return self.record.status


@dataclass(frozen=True)
class Failure:
    failure: ExtractionFailure

    @property
    def status(self) -> int:
        return self.failure.status


ScrapeOutcome = Union[Success, Failure]
