"""
Job code value object.
"""

import re
from dataclasses import dataclass

DEFAULT_PREFIX = "RT"
SEQUENCE_WIDTH = 6

JOB_CODE_PATTERN = re.compile(r"^(?P<prefix>[A-Z0-9]+)-(?P<year>\d{4})-(?P<sequence>\d{6,})$")


@dataclass(frozen=True)
class JobCode:
    """Human-readable, year-scoped job identifier, e.g. ``RT-2025-000123``."""

    year: int
    sequence: int
    prefix: str = DEFAULT_PREFIX

    def __post_init__(self):
        """Validate code parts."""
        if not self.prefix or not self.prefix.strip():
            raise ValueError("Job code prefix is required")
        if self.sequence < 1:
            raise ValueError("Job code sequence must be positive")
        if not 1000 <= self.year <= 9999:
            raise ValueError("Job code year must have four digits")

    def __str__(self) -> str:
        return f"{self.prefix}-{self.year}-{self.sequence:0{SEQUENCE_WIDTH}d}"

    @classmethod
    def parse(cls, value: str) -> "JobCode":
        """Parse a formatted job code."""
        match = JOB_CODE_PATTERN.match(value or "")
        if not match:
            raise ValueError(f"Invalid job code: {value!r}")
        return cls(
            year=int(match.group("year")),
            sequence=int(match.group("sequence")),
            prefix=match.group("prefix"),
        )
