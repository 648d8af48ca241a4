"""Command-line entry point: ``reception-maps``.

Loads the configuration file, applies command-line overrides, loads data and
assets, and writes one map per selected transmitter. Any fatal error is logged
and turned into exit status 1.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from application.config import DEFAULT_CONFIG_FILE, ReceptionConfig, load_config
from application.map_generator import MapGenerator
from domain.geo.services import CoordinateProjector
from domain.reception.services import place_operators, select_transmitters
from domain.reception.value_objects import ReportMatrix
from domain.rendering.canvas import MapCanvas
from infrastructure.reception import CsvReceptionAdapter
from infrastructure.rendering import PillowAssetAdapter, PngMapWriter
from shared.errors import ReceptionMapsError

log = logging.getLogger("reception.cli")


def run(config: ReceptionConfig, progress: bool = False) -> list[Path]:
    """Load everything a run needs and generate its maps.

    Returns:
        Paths of the written maps (empty if no call signs had reports).
    """
    assets = PillowAssetAdapter()
    records = CsvReceptionAdapter()

    icons = assets.load_icons(config.icon_directory, config.icon_size)
    base_map = assets.load_base_map(config.map_file, config.bounds)
    font = assets.load_font(config.font_file, config.font_settings)
    projector = CoordinateProjector(config.bounds, base_map.width, base_map.height)

    operators = place_operators(records.load_operators(config.operator_file), projector)
    reports = ReportMatrix.from_reports(records.load_reports(config.report_file), config.mode)
    transmitters = select_transmitters(reports, config.call_signs)
    if not transmitters:
        log.info("No transmitters with reports selected; nothing to do")
        return []

    generator = MapGenerator(
        config=config,
        canvas=MapCanvas(base_map, font, config.font_settings),
        icons=icons,
        operators=operators,
        reports=reports,
        writer=PngMapWriter(),
    )
    return generator.generate(transmitters, progress=progress)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reception-maps",
        description="Generate maps from ham operator reception reports",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_FILE,
        help="TOML configuration file (default: %(default)s)",
    )
    parser.add_argument("--operators", type=Path, help="File containing operator information")
    parser.add_argument("--reports", type=Path, help="File containing reception reports to be mapped")
    parser.add_argument("--calls", help="Call signs for whom to generate maps, or 'all' for all")
    parser.add_argument("--freq", help="Frequency the radio reception was tested at")
    parser.add_argument(
        "--receive",
        action="store_true",
        default=None,
        help="Generate receive maps, instead of transmit maps",
    )
    parser.add_argument("--output", type=Path, help="Directory to write maps into")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: %(default)s)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s │ %(message)s")

    try:
        config = load_config(args.config).with_overrides(
            operator_file=args.operators,
            report_file=args.reports,
            call_signs=args.calls,
            frequency=args.freq,
            receive_maps=args.receive,
            output_directory=args.output,
        )
        written = run(config, progress=not args.no_progress)
    except (ReceptionMapsError, OSError) as e:
        log.error("%s", e)
        return 1

    log.info("Wrote %d map(s) to %s", len(written), config.output_directory)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
