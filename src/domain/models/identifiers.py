"""Value objects for problem identification."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProblemIdentifier:
    """Identifies a specific Codeforces problem."""

    contest_id: str
    problem_id: str

    @classmethod
    def from_raw(cls, raw: str) -> "ProblemIdentifier":
        """
        Split a raw id such as "1850a" into contest number and problem label.

        The last character is the label (uppercased), everything before it is
        the contest number. No validation is done: a bad id produces a URL
        that simply has no problem statement.
        """
        return cls(contest_id=raw[:-1], problem_id=raw[-1:].upper())

    def __str__(self) -> str:
        """String representation."""
        return f"{self.contest_id}/{self.problem_id}"
