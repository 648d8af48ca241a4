"""Reception Bounded Context - Value Objects.

Immutable data structures for operators and the reception reports between
them. All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.geo.value_objects import GeoCoordinate, PixelPoint

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
# Numeric "value not supplied" marker used by the operator spreadsheet export
UNKNOWN_VALUE = -100.0


def normalize_callsign(callsign: str) -> str:
    """Uppercase a call sign and strip every whitespace character."""
    return "".join(callsign.split()).upper()


# ---------------------------------------------------------------------------
# MapMode
# ---------------------------------------------------------------------------
class MapMode(str, Enum):
    """Direction of a run.

    TRANSMIT maps show who can hear the subject station; RECEIVE maps show who
    the subject station can hear.
    """

    TRANSMIT = "transmit"
    RECEIVE = "receive"

    @classmethod
    def from_flag(cls, receive: bool) -> "MapMode":
        return cls.RECEIVE if receive else cls.TRANSMIT

    def title(self, callsign: str) -> str:
        if self is MapMode.RECEIVE:
            return f"Receive Map (who can I hear) for {callsign}"
        return f"Transmission Map (who can hear me) for {callsign}"

    @property
    def file_suffix(self) -> str:
        return "-rcvr-map" if self is MapMode.RECEIVE else "-xmit-map"


# ---------------------------------------------------------------------------
# Operator
# ---------------------------------------------------------------------------
class Operator(BaseModel):
    """Station data for one operator (Value Object).

    Numeric attributes equal to UNKNOWN_VALUE and an empty antenna type mean
    the value was not supplied. ``pixel`` is filled in once the operator has
    been placed on the map (see ``place_operators``).
    """

    callsign: str = Field(min_length=1)
    location: GeoCoordinate
    transmit_power_w: float = UNKNOWN_VALUE
    antenna_type: str = ""
    antenna_gain_dbi: float = UNKNOWN_VALUE
    antenna_height_ft: float = UNKNOWN_VALUE
    pixel: PixelPoint | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("callsign", mode="before")
    @classmethod
    def _normalize_callsign(cls, value: object) -> object:
        if isinstance(value, str):
            return normalize_callsign(value)
        return value

    @field_validator("antenna_type", mode="before")
    @classmethod
    def _strip_antenna_type(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @property
    def has_power(self) -> bool:
        return self.transmit_power_w != UNKNOWN_VALUE

    @property
    def has_antenna_type(self) -> bool:
        return self.antenna_type != ""

    @property
    def has_antenna_gain(self) -> bool:
        return self.antenna_gain_dbi != UNKNOWN_VALUE

    @property
    def has_antenna_height(self) -> bool:
        return self.antenna_height_ft != UNKNOWN_VALUE


# ---------------------------------------------------------------------------
# ReceptionReport
# ---------------------------------------------------------------------------
class ReceptionReport(BaseModel):
    """One reception report record (Value Object).

    ``receiver`` is the station that reported, ``transmitter`` the station it
    heard, and ``category`` the reception quality (which doubles as the icon
    name).
    """

    receiver: str = Field(min_length=1)
    transmitter: str = Field(min_length=1)
    category: str

    model_config = ConfigDict(frozen=True)

    @field_validator("receiver", "transmitter", mode="before")
    @classmethod
    def _normalize_callsigns(cls, value: object) -> object:
        if isinstance(value, str):
            return normalize_callsign(value)
        return value

    @field_validator("category", mode="before")
    @classmethod
    def _strip_category(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value


# ---------------------------------------------------------------------------
# ReportMatrix
# ---------------------------------------------------------------------------
class ReportMatrix(BaseModel):
    """Map subject -> other station -> category label (Value Object).

    The "transmitter" key is always the station a map is drawn for. In
    RECEIVE mode the report roles are swapped while building, so the subject
    becomes the reporting station. Not symmetric; a missing entry means "no
    report".
    """

    entries: dict[str, dict[str, str]] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_reports(
        cls, reports: Iterable[ReceptionReport], mode: MapMode
    ) -> "ReportMatrix":
        entries: dict[str, dict[str, str]] = {}
        for report in reports:
            if mode is MapMode.RECEIVE:
                transmitter, receiver = report.receiver, report.transmitter
            else:
                transmitter, receiver = report.transmitter, report.receiver
            entries.setdefault(transmitter, {})[receiver] = report.category
        return cls(entries=entries)

    def category(self, transmitter: str, receiver: str) -> str | None:
        """Return the category reported for a pair, or None when there is none."""
        return self.entries.get(transmitter, {}).get(receiver) or None

    @property
    def transmitters(self) -> tuple[str, ...]:
        return tuple(sorted(self.entries))

    @property
    def receivers(self) -> tuple[str, ...]:
        found: set[str] = set()
        for heard in self.entries.values():
            found.update(heard)
        return tuple(sorted(found))
