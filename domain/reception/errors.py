"""Reception Bounded Context - Error Hierarchy.

Only malformed input files are errors here. Gaps in the data (a pair with no
report, an unknown receiver) are expected and handled by skipping.
"""

from __future__ import annotations

from shared.errors import ReceptionMapsError


class ReceptionDataError(ReceptionMapsError):
    """Base error for operator and report data."""


class InvalidRecordError(ReceptionDataError):
    """A CSV record cannot be parsed.

    Attributes:
        source: File name the record came from
        line: 1-based line number of the record
    """

    def __init__(self, source: str, line: int, reason: str) -> None:
        self.source = source
        self.line = line
        super().__init__(f"{source}:{line}: {reason}")
