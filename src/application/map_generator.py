"""Map generation driver.

Draws one reception map per transmitter. For each transmitter the canvas
goes through the same fixed sequence:

1) Reset: restore the base map, clear the text layer, start a new legend
2) Plot receivers: icon + label for every receiver with a reported category
3) Plot transmitter: drawn last so no receiver icon can cover it
4) Plot legend: title, frequency, known station attributes
5) Merge: text layer over icons
6) Write: one PNG per transmitter

Gaps in the reports (no report for a pair, no icon for a category, a receiver
missing from the operator list) are skipped. Asset and output errors
propagate and end the run.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from tqdm import tqdm

from application.config import ReceptionConfig
from domain.reception.services import OperatorDirectory
from domain.reception.value_objects import MapMode, ReportMatrix
from domain.rendering.canvas import MapCanvas
from domain.rendering.errors import MissingIconError
from domain.rendering.legend import LegendWriter, legend_lines
from domain.rendering.repositories import MapWriter
from domain.rendering.value_objects import IconCatalog

logger = logging.getLogger(__name__)


def output_filename(callsign: str, mode: MapMode) -> str:
    """File name for a transmitter's map, e.g. ``K6ABC-xmit-map.png``."""
    safe = callsign.replace("/", "_").replace("\\", "_")
    return f"{safe}{mode.file_suffix}.png"


class MapGenerator:
    """Draws and writes reception maps for a run.

    Parameters
    ----------
    config: ReceptionConfig
        Run settings (mode, frequency, icon names, output directory).
    canvas: MapCanvas
        Reused for every map; reset before each one.
    icons: IconCatalog
        Category -> sprite; must contain the transmitter icon.
    operators: OperatorDirectory
        Operators already placed on the map.
    reports: ReportMatrix
        Reports keyed for the run's mode.
    writer: MapWriter
        Persists finished maps.
    """

    def __init__(
        self,
        config: ReceptionConfig,
        canvas: MapCanvas,
        icons: IconCatalog,
        operators: OperatorDirectory,
        reports: ReportMatrix,
        writer: MapWriter,
    ) -> None:
        if config.transmitter_icon not in icons:
            raise MissingIconError(config.transmitter_icon, icons.categories)
        if config.no_report_icon and config.no_report_icon not in icons:
            logger.warning(
                "No-report icon %r not found; receivers without reports will be skipped",
                config.no_report_icon,
            )

        self.config = config
        self.canvas = canvas
        self.icons = icons
        self.operators = operators
        self.reports = reports
        self.writer = writer

    @property
    def mode(self) -> MapMode:
        return self.config.mode

    def generate(self, transmitters: Iterable[str], progress: bool = False) -> list[Path]:
        """Draw and write a map for every transmitter, in order.

        Returns:
            Paths of the written maps.

        Raises:
            TextRenderError, MapWriteError: Fatal; the run stops at the first one.
        """
        transmitters = list(transmitters)
        logger.info("Beginning map generation for %d transmitter(s)", len(transmitters))

        written: list[Path] = []
        for transmitter in tqdm(
            transmitters, desc="Generating maps", unit="map", disable=not progress
        ):
            written.append(self.generate_one(transmitter))

        logger.info("Map generation completed: %d map(s) written", len(written))
        return written

    def generate_one(self, transmitter: str) -> Path:
        """Draw and write the map for one transmitter."""
        self.canvas.reset()
        legend = LegendWriter(self.canvas)

        plotted = self._plot_receivers(transmitter)
        self._plot_transmitter(transmitter)
        self._plot_legend(transmitter, legend)

        image = self.canvas.finalize()
        path = self.writer.write(
            image, self.config.output_directory / output_filename(transmitter, self.mode)
        )
        logger.debug("%s: %d receiver(s) plotted", transmitter, plotted)
        return path

    def _plot_receivers(self, transmitter: str) -> int:
        plotted = 0
        for receiver in self.reports.receivers:
            if receiver == transmitter:
                continue

            category = self.reports.category(transmitter, receiver)
            if category is None:
                category = self.config.no_report_icon
                if category is None:
                    continue

            icon = self.icons.get(category)
            if icon is None:
                logger.info(
                    "%s -> %s: no icon for category %r, skipping",
                    transmitter,
                    receiver,
                    category,
                )
                continue

            operator = self.operators.lookup(receiver)
            if operator is None:
                logger.info("%s -> %s: receiver not in operator list", transmitter, receiver)
                continue

            if self.canvas.plot_operator(icon, operator, label=receiver):
                plotted += 1
        return plotted

    def _plot_transmitter(self, transmitter: str) -> None:
        icon = self.icons.get(self.config.transmitter_icon)
        self.canvas.plot_operator(icon, self.operators.lookup(transmitter), label=transmitter)

    def _plot_legend(self, transmitter: str, legend: LegendWriter) -> None:
        legend.write(
            *legend_lines(
                transmitter,
                self.operators.lookup(transmitter),
                self.mode,
                self.config.frequency,
            )
        )
