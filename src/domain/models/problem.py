"""Domain models for scraped Codeforces problems."""

from dataclasses import dataclass, field
from typing import Any

TITLE_NOT_FOUND = "Title not found"
TIME_LIMIT_NOT_FOUND = "Time limit not found"
MEMORY_LIMIT_NOT_FOUND = "Memory limit not found"
DESCRIPTION_NOT_FOUND = "Description not found"
INPUT_DESCRIPTION_NOT_FOUND = "Input description not found"
OUTPUT_DESCRIPTION_NOT_FOUND = "Output description not found"
OUTPUT_NOT_FOUND = "Output not found"


@dataclass(frozen=True)
class SampleTest:
    """One sample input paired with its expected output."""

    input: str
    output: str


@dataclass
class ProblemRecord:
    """Everything extracted from a problem page."""

    title: str = TITLE_NOT_FOUND
    time_limit: str = TIME_LIMIT_NOT_FOUND
    memory_limit: str = MEMORY_LIMIT_NOT_FOUND
    description: str = DESCRIPTION_NOT_FOUND
    input_description: str = INPUT_DESCRIPTION_NOT_FOUND
    output_description: str = OUTPUT_DESCRIPTION_NOT_FOUND
    tests: list[SampleTest] = field(default_factory=list)
    status: int = 200

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "time_limit": self.time_limit,
            "memory_limit": self.memory_limit,
            "description": self.description,
            "input_description": self.input_description,
            "output_description": self.output_description,
            "tests": [{"input": t.input, "output": t.output} for t in self.tests],
        }
