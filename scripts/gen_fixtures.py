#!/usr/bin/env python3
"""Generate a synthetic sample asset set for trying out reception-maps.

Creates a plain gridded base map, one icon per reception category and small
operator/report CSV files. These are synthetic assets - not real map data.
A TrueType font is NOT generated; point ``FontFile`` at any .ttf on the system.

Usage:
    python scripts/gen_fixtures.py [OUTPUT_DIR]

Requirements:
    pip install pillow

Output:
    OUTPUT_DIR (default: ./sample)/base-map.png, icons/*.png, operators.csv,
    reports.csv

Dependencies:
    This script imports from shared/fixtures_expected.py (not tests/) to avoid
    circular dependencies between scripts and tests packages.
"""

from __future__ import annotations

import csv
import sys
from pathlib import Path

from PIL import Image, ImageDraw

from shared.fixtures_expected import (
    EXPECTED_FIXTURE_COUNT,
    EXPECTED_FIXTURES,
    SAMPLE_CATEGORIES,
    SAMPLE_NW_CORNER,
    SAMPLE_SE_CORNER,
)

DEFAULT_OUTPUT_DIR = Path("sample")

BASE_MAP_SIZE = (1200, 900)
ICON_SIZE = 64

# Fill colour per category: reception quality from green to red
ICON_COLORS: dict[str, tuple[int, int, int, int]] = {
    "Trans": (30, 90, 200, 255),
    "good": (40, 170, 60, 255),
    "fair": (230, 180, 30, 255),
    "poor": (210, 50, 40, 255),
}

# call sign, lat, lon, power (W), antenna type, gain (dBi), height (ft)
SAMPLE_OPERATORS: list[list[str]] = [
    ["K6ALF", "37.3875", "-122.0838", "50", "J-pole", "3", "25"],
    ["KJ6BRV", "37.4010", "-122.1010", "5", "", "-100", "-100"],
    ["W6CHR", "37.3700", "-122.0600", "-100", "Yagi", "9", "30"],
    ["KD6DEL", "37.4100", "-122.0500", "25", "Ground plane", "2.5", "-100"],
]

# receiving call sign, heard call sign, category
SAMPLE_REPORTS: list[list[str]] = [
    ["KJ6BRV", "K6ALF", "good"],
    ["W6CHR", "K6ALF", "fair"],
    ["KD6DEL", "K6ALF", "poor"],
    ["K6ALF", "KJ6BRV", "good"],
    ["W6CHR", "KJ6BRV", "poor"],
    ["K6ALF", "W6CHR", "fair"],
]


def ensure_dir(path: Path) -> None:
    """Ensure the output directory (and icons/) exists."""
    (path / "icons").mkdir(parents=True, exist_ok=True)
    print(f"Output directory: {path}")


# =============================================================================
# Base map
# =============================================================================
def gen_base_map(output_dir: Path) -> Path:
    """Generate an opaque light base map with a 100 px grid."""
    path = output_dir / "base-map.png"
    width, height = BASE_MAP_SIZE

    image = Image.new("RGBA", BASE_MAP_SIZE, (236, 232, 220, 255))
    draw = ImageDraw.Draw(image)
    for x in range(0, width, 100):
        draw.line([(x, 0), (x, height)], fill=(200, 196, 186, 255), width=1)
    for y in range(0, height, 100):
        draw.line([(0, y), (width, y)], fill=(200, 196, 186, 255), width=1)

    image.save(path, format="PNG")
    print(f"  Created: {path.name} ({width}x{height})")
    return path


# =============================================================================
# Icons
# =============================================================================
def gen_icon(output_dir: Path, category: str) -> Path:
    """Generate a round, partly transparent icon for one category."""
    path = output_dir / "icons" / f"{category}.png"

    image = Image.new("RGBA", (ICON_SIZE, ICON_SIZE), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)
    inset = 4
    draw.ellipse(
        (inset, inset, ICON_SIZE - inset - 1, ICON_SIZE - inset - 1),
        fill=ICON_COLORS.get(category, (128, 128, 128, 255)),
        outline=(20, 20, 20, 255),
        width=3,
    )

    image.save(path, format="PNG")
    print(f"  Created: icons/{path.name} ({ICON_SIZE}x{ICON_SIZE})")
    return path


# =============================================================================
# CSV data
# =============================================================================
def write_csv(path: Path, rows: list[list[str]]) -> Path:
    with path.open("w", newline="", encoding="utf-8") as f:
        csv.writer(f).writerows(rows)
    print(f"  Created: {path.name} ({len(rows)} records)")
    return path


def generate_all(output_dir: Path) -> list[Path]:
    """Generate the full sample set into ``output_dir``."""
    ensure_dir(output_dir)
    created = [gen_base_map(output_dir)]
    created.extend(gen_icon(output_dir, category) for category in SAMPLE_CATEGORIES)
    created.append(write_csv(output_dir / "operators.csv", SAMPLE_OPERATORS))
    created.append(write_csv(output_dir / "reports.csv", SAMPLE_REPORTS))
    return created


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    output_dir = Path(argv[0]) if argv else DEFAULT_OUTPUT_DIR

    generate_all(output_dir)

    found = sorted(
        p.relative_to(output_dir).as_posix()
        for p in output_dir.rglob("*")
        if p.is_file() and p.suffix.lower() in (".png", ".csv")
    )
    missing = set(EXPECTED_FIXTURES) - set(found)
    if missing:
        print(f"ERROR: Missing (expected but not generated): {sorted(missing)}")
        print("\nUpdate shared/fixtures_expected.py to match generated files.")
        return 1

    print()
    print(f"Done! Generated {EXPECTED_FIXTURE_COUNT} sample files in {output_dir}")
    print(f"Map corners: NW {SAMPLE_NW_CORNER}, SE {SAMPLE_SE_CORNER}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
