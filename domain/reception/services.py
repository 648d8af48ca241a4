"""Reception Bounded Context - Domain Services.

Pure domain logic over operators and reports. NO I/O operations; records are
loaded by infrastructure adapters via the ports in ``repositories.py``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from domain.geo.services import CoordinateProjector
from domain.reception.value_objects import (
    Operator,
    ReportMatrix,
    normalize_callsign,
)

logger = logging.getLogger(__name__)

ALL_CALLSIGNS = "ALL"


# ---------------------------------------------------------------------------
# Operator placement
# ---------------------------------------------------------------------------
def place_operators(
    operators: Iterable[Operator], projector: CoordinateProjector
) -> "OperatorDirectory":
    """Compute each operator's pixel position and index them by call sign.

    Every operator goes through the same projector, so all positions share one
    set of scale factors. A later record for the same call sign replaces an
    earlier one.

    Raises:
        ProjectionError: If any operator's location cannot be projected.
    """
    placed: dict[str, Operator] = {}
    for operator in operators:
        pixel = projector.project(operator.location)
        if operator.callsign in placed:
            logger.info("Duplicate operator %s: using the later record", operator.callsign)
        placed[operator.callsign] = operator.model_copy(update={"pixel": pixel})
    return OperatorDirectory(placed)


# ---------------------------------------------------------------------------
# Operator lookup
# ---------------------------------------------------------------------------
class OperatorDirectory(Mapping[str, Operator]):
    """Read-only index of placed operators.

    ``lookup`` tries the exact call sign first and then, for call signs with a
    hyphenated suffix (``K6ABC-1``, ``K6ABC-MOBILE``), the part before the
    first hyphen. Plain mapping access is always exact.
    """

    def __init__(self, operators: Mapping[str, Operator]) -> None:
        self._operators = dict(operators)

    def __getitem__(self, callsign: str) -> Operator:
        return self._operators[callsign]

    def __iter__(self) -> Iterator[str]:
        return iter(self._operators)

    def __len__(self) -> int:
        return len(self._operators)

    def lookup(self, callsign: str) -> Operator | None:
        callsign = normalize_callsign(callsign)
        operator = self._operators.get(callsign)
        if operator is None and "-" in callsign:
            base = callsign.split("-", 1)[0]
            operator = self._operators.get(base)
            if operator is not None:
                logger.debug("Matched %s to operator %s", callsign, base)
        return operator


# ---------------------------------------------------------------------------
# Transmitter selection
# ---------------------------------------------------------------------------
def select_transmitters(matrix: ReportMatrix, call_signs: str) -> list[str]:
    """Return the transmitters to draw maps for, in a stable order.

    Args:
        matrix: Reports for the run's mode
        call_signs: ``"all"`` (any case) or a comma-separated list of call signs

    Asked-for call signs without any reports are skipped with an informational
    log line; they are not an error.
    """
    if normalize_callsign(call_signs) == ALL_CALLSIGNS:
        return list(matrix.transmitters)

    known = set(matrix.transmitters)
    selected: list[str] = []
    for call in normalize_callsign(call_signs).split(","):
        if not call or call in selected:
            continue
        if call in known:
            selected.append(call)
        else:
            logger.info("Skipping %s: no reports", call)
    return selected
