"""Single source of truth for the sample asset set.

This module defines the list of files produced by ``scripts/gen_fixtures.py``.
It is used by both:
- scripts/gen_fixtures.py (generation verification)
- tests/test_sample_assets.py (existence verification)

Location: shared/ (not tests/) to avoid scripts->tests dependency.

When adding/removing sample files, update ONLY this list.
"""

from __future__ import annotations

# Icon categories in the sample set; "Trans" marks the transmitter itself.
SAMPLE_CATEGORIES: tuple[str, ...] = ("Trans", "fair", "good", "poor")

# Corners of the sample base map (Mountain View, CA area)
SAMPLE_NW_CORNER: tuple[float, float] = (37.4166, -122.11558)
SAMPLE_SE_CORNER: tuple[float, float] = (37.35829, -122.04211)

# Sorted alphabetically for deterministic comparison.
EXPECTED_FIXTURES: list[str] = sorted(
    [
        "base-map.png",
        "operators.csv",
        "reports.csv",
        *(f"icons/{category}.png" for category in SAMPLE_CATEGORIES),
    ]
)

# Count derived from list for verification
EXPECTED_FIXTURE_COUNT: int = len(EXPECTED_FIXTURES)
