"""Run configuration.

A run is described by one immutable ``ReceptionConfig`` value that is passed
explicitly to every component that needs it. It is loaded from a TOML file
whose keys use the CamelCase names of ``reception.cfg``; the
snake_case field names are accepted as well. Some settings can be overridden
from the command line (see ``cli.py``).
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from domain.geo.value_objects import GeoCoordinate, ProjectedBounds
from domain.reception.value_objects import MapMode
from domain.rendering.value_objects import FontSettings
from shared.errors import ReceptionMapsError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path("reception.cfg")

PATH_FIELDS = (
    "operator_file",
    "report_file",
    "output_directory",
    "icon_directory",
    "map_file",
    "font_file",
)


class ConfigError(ReceptionMapsError):
    """Configuration file is unreadable or contains invalid settings."""


class ReceptionConfig(BaseModel):
    """All settings for one map-generation run (Value Object)."""

    # Input data and output
    operator_file: Path = Field(default=Path("operators.csv"), alias="OperatorFile")
    report_file: Path = Field(default=Path("reports.csv"), alias="ReportFile")
    output_directory: Path = Field(default=Path("output"), alias="OutputDirectory")
    call_signs: str = Field(default="all", alias="CallSigns")
    frequency: str = Field(default="", alias="Frequency")
    receive_maps: bool = Field(default=False, alias="RcvMapFlag")

    # Icons
    icon_directory: Path = Field(default=Path("assets/icons"), alias="IconDirectory")
    icon_size: int = Field(default=34, gt=0, alias="IconSize")
    transmitter_icon: str = Field(default="Trans", min_length=1, alias="TransIcon")
    no_report_icon: str | None = Field(default=None, alias="NoReportIcon")

    # Base map
    map_file: Path = Field(default=Path("assets/base-map.png"), alias="MapFile")
    map_nw_corner: tuple[float, float] = Field(alias="MapNWCorner")
    map_se_corner: tuple[float, float] = Field(alias="MapSECorner")

    # Text
    font_dpi: float = Field(default=168.0, gt=0, alias="FontDPI")
    font_file: Path = Field(default=Path("assets/Roboto-Regular.ttf"), alias="FontFile")
    font_hinting: Literal["none", "full"] = Field(default="none", alias="FontHinting")
    font_size: float = Field(default=8.0, gt=0, alias="FontSize")
    font_line_spacing: float = Field(default=1.5, gt=0, alias="FontLineSpacing")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    @model_validator(mode="after")
    def validate_corners(self) -> "ReceptionConfig":
        _ = self.bounds  # ProjectedBounds checks the corner ordering
        return self

    @property
    def bounds(self) -> ProjectedBounds:
        return ProjectedBounds(
            northwest=GeoCoordinate.from_pair(self.map_nw_corner),
            southeast=GeoCoordinate.from_pair(self.map_se_corner),
        )

    @property
    def font_settings(self) -> FontSettings:
        return FontSettings(
            dpi=self.font_dpi,
            size_pt=self.font_size,
            hinting=self.font_hinting,
            line_spacing=self.font_line_spacing,
        )

    @property
    def mode(self) -> MapMode:
        return MapMode.from_flag(self.receive_maps)

    def resolve_paths(self, base_dir: Path) -> "ReceptionConfig":
        """Return a copy with relative file settings anchored at ``base_dir``."""
        updates = {
            name: base_dir / getattr(self, name)
            for name in PATH_FIELDS
            if not getattr(self, name).is_absolute()
        }
        return self.model_copy(update=updates)

    def with_overrides(self, **overrides: Any) -> "ReceptionConfig":
        """Return a re-validated copy with non-None overrides applied.

        Raises:
            ConfigError: If an override is invalid.
        """
        updates = {name: value for name, value in overrides.items() if value is not None}
        if not updates:
            return self
        try:
            return ReceptionConfig.model_validate({**self.model_dump(), **updates})
        except ValidationError as e:
            raise ConfigError(f"Invalid override: {e}") from e


def load_config(file_path: Path | str = DEFAULT_CONFIG_FILE) -> ReceptionConfig:
    """Load a run configuration from a TOML file.

    Relative paths inside the file are resolved against the file's directory.

    Raises:
        FileNotFoundError: If the configuration file does not exist.
        ConfigError: If the file is not valid TOML or a setting is invalid.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(str(path))

    try:
        with path.open("rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Can't parse {path.name}: {e}") from e

    try:
        config = ReceptionConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {path.name}: {e}") from e

    logger.debug("Loaded configuration from %s", path.name)
    return config.resolve_paths(path.parent)
