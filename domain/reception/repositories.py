"""Domain Port(s) for Reception Data I/O.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete I/O here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .value_objects import Operator, ReceptionReport


class OperatorRepository(Protocol):
    """Port for obtaining operator station data.

    Implementations live in infrastructure (e.g., CSV adapter).
    """

    def load_operators(self, file_path: Path | str) -> list[Operator]:
        """Load operators; returned operators are not yet placed on a map."""
        ...


class ReportRepository(Protocol):
    """Port for obtaining reception reports."""

    def load_reports(self, file_path: Path | str) -> list[ReceptionReport]:
        """Load every reception report in file order."""
        ...
