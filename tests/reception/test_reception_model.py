"""Tests for reception value objects and domain services."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from domain.geo.value_objects import PixelPoint
from domain.reception.services import (
    OperatorDirectory,
    place_operators,
    select_transmitters,
)
from domain.reception.value_objects import (
    MapMode,
    ReceptionReport,
    ReportMatrix,
    normalize_callsign,
)
from tests.conftest_utils import NW_CORNER, make_operator


def build_matrix(mode: MapMode = MapMode.TRANSMIT) -> ReportMatrix:
    # receiver, transmitter (heard), category
    reports = [
        ReceptionReport(receiver="BRAVO", transmitter="ALFA", category="good"),
        ReceptionReport(receiver="CHARLIE", transmitter="ALFA", category="poor"),
        ReceptionReport(receiver="ALFA", transmitter="BRAVO", category="fair"),
    ]
    return ReportMatrix.from_reports(reports, mode)


# ===========================================================================
# Call signs
# ===========================================================================
@pytest.mark.parametrize(
    "raw, expected",
    [("k6abc", "K6ABC"), (" K6 ABC\t", "K6ABC"), ("w1aw/p", "W1AW/P"), ("ALL", "ALL")],
)
def test_normalize_callsign(raw, expected):
    assert normalize_callsign(raw) == expected


def test_operator_callsign_normalized():
    operator = make_operator(" kj6 brv ")

    assert operator.callsign == "KJ6BRV"


def test_operator_requires_callsign():
    with pytest.raises(ValidationError):
        make_operator("   ")


# ===========================================================================
# Unknown attributes
# ===========================================================================
def test_operator_unknown_sentinels():
    operator = make_operator("ALFA")

    assert not operator.has_power
    assert not operator.has_antenna_type
    assert not operator.has_antenna_gain
    assert not operator.has_antenna_height


def test_operator_known_attributes():
    operator = make_operator("ALFA", power=50, antenna_type=" J-pole ", gain=0, height=25)

    assert operator.has_power
    assert operator.antenna_type == "J-pole"
    assert operator.has_antenna_gain  # 0 dBi is a real value
    assert operator.has_antenna_height


# ===========================================================================
# ReportMatrix
# ===========================================================================
def test_report_matrix_transmit_mode():
    matrix = build_matrix(MapMode.TRANSMIT)

    assert matrix.category("ALFA", "BRAVO") == "good"
    assert matrix.category("ALFA", "CHARLIE") == "poor"
    assert matrix.category("BRAVO", "ALFA") == "fair"
    assert matrix.transmitters == ("ALFA", "BRAVO")
    assert matrix.receivers == ("ALFA", "BRAVO", "CHARLIE")


def test_report_matrix_receive_mode_swaps_roles():
    matrix = build_matrix(MapMode.RECEIVE)

    assert matrix.category("BRAVO", "ALFA") == "good"
    assert matrix.category("CHARLIE", "ALFA") == "poor"
    assert matrix.category("ALFA", "BRAVO") == "fair"
    assert matrix.transmitters == ("ALFA", "BRAVO", "CHARLIE")


def test_report_matrix_not_symmetric():
    matrix = build_matrix()

    assert matrix.category("ALFA", "CHARLIE") == "poor"
    assert matrix.category("CHARLIE", "ALFA") is None


def test_report_matrix_missing_and_empty_entries():
    matrix = ReportMatrix.from_reports(
        [ReceptionReport(receiver="BRAVO", transmitter="ALFA", category="  ")],
        MapMode.TRANSMIT,
    )

    assert matrix.category("ALFA", "BRAVO") is None
    assert matrix.category("NOBODY", "BRAVO") is None


def test_later_report_replaces_earlier():
    matrix = ReportMatrix.from_reports(
        [
            ReceptionReport(receiver="BRAVO", transmitter="ALFA", category="poor"),
            ReceptionReport(receiver="bravo", transmitter="alfa", category="good"),
        ],
        MapMode.TRANSMIT,
    )

    assert matrix.category("ALFA", "BRAVO") == "good"


def test_map_mode_naming():
    assert MapMode.from_flag(False) is MapMode.TRANSMIT
    assert MapMode.from_flag(True) is MapMode.RECEIVE
    assert MapMode.TRANSMIT.file_suffix == "-xmit-map"
    assert MapMode.RECEIVE.file_suffix == "-rcvr-map"
    assert MapMode.TRANSMIT.title("ALFA") == "Transmission Map (who can hear me) for ALFA"
    assert MapMode.RECEIVE.title("ALFA") == "Receive Map (who can I hear) for ALFA"


# ===========================================================================
# Transmitter selection
# ===========================================================================
@pytest.mark.parametrize("selector", ["all", "ALL", " All "])
def test_select_all_transmitters(selector):
    assert select_transmitters(build_matrix(), selector) == ["ALFA", "BRAVO"]


def test_select_subset_keeps_order_and_normalizes():
    assert select_transmitters(build_matrix(), "bravo, alfa,BRAVO") == ["BRAVO", "ALFA"]


def test_select_unknown_callsign_skipped_with_notice(caplog):
    with caplog.at_level(logging.INFO, logger="domain.reception.services"):
        selected = select_transmitters(build_matrix(), "CHARLIE,ZULU")

    assert selected == []
    assert "Skipping CHARLIE: no reports" in caplog.text
    assert "Skipping ZULU: no reports" in caplog.text


# ===========================================================================
# Operator placement and lookup
# ===========================================================================
def test_place_operators_sets_pixels(projector):
    directory = place_operators(
        [make_operator("alfa", NW_CORNER.latitude, NW_CORNER.longitude)], projector
    )

    assert directory["ALFA"].pixel == PixelPoint(x=0, y=0)
    assert len(directory) == 1
    assert list(directory) == ["ALFA"]


def test_place_operators_later_duplicate_wins(projector):
    directory = place_operators(
        [make_operator("ALFA", power=5), make_operator("ALFA", power=50)], projector
    )

    assert directory["ALFA"].transmit_power_w == 50


def test_lookup_exact_match_preferred():
    directory = OperatorDirectory(
        {"K6ABC": make_operator("K6ABC"), "K6ABC-1": make_operator("K6ABC-1", power=5)}
    )

    assert directory.lookup("k6abc-1").transmit_power_w == 5


def test_lookup_hyphen_falls_back_to_base_callsign():
    directory = OperatorDirectory({"K6ABC": make_operator("K6ABC")})

    assert directory.lookup("K6ABC-MOBILE").callsign == "K6ABC"
    assert directory.lookup("K6XYZ-1") is None
    assert directory.lookup("NOBODY") is None
