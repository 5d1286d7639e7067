"""
Configuration loading for helixpath.

Reads the cutting parameters and target shape from YAML files, validates
them with pydantic and converts them into the planner's input records.
Keys are camelCase in the files and snake_case in Python.
"""

from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from helixpath.core.exceptions import (
    ConfigurationError,
    MissingShapeError,
    UnknownShapeError,
)
from helixpath.planning.models import CuttingParameters, Shape

PathLike = Union[str, Path]


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )


class CuttingConfig(_CamelModel):
    """Cutting parameters file model (mm, mm/min)."""

    cut_feed_rate: float = Field(gt=0)
    fast_feed_rate: float = Field(gt=0)
    fast_feed_rate_z: float = Field(gt=0, alias="fastFeedRateZ")
    max_cut_depth: float = Field(gt=0)
    instrument_diameter: float = Field(gt=0)
    initial_z_offset: float = Field(default=0.0, ge=0, alias="initialZOffset")
    enable_xy_offset_compensation: bool = Field(
        default=False, alias="enableXYOffsetCompensation"
    )
    initial_y_offset: float = Field(default=0.0, alias="initialYOffset")
    initial_x_offset: float = Field(default=0.0, alias="initialXOffset")
    last_pass_cutting_depth: float = Field(default=0.0, ge=0)

    def to_parameters(self) -> CuttingParameters:
        return CuttingParameters(**self.model_dump())


class HelixConfig(_CamelModel):
    """Helical channel dimensions (mm)."""

    length: float = Field(gt=0)
    stock_diameter: float = Field(gt=0)
    number_of_turns: float = Field(gt=0)
    target_cut_depth: float = Field(gt=0)
    target_cut_width: float = Field(gt=0)

    def to_shape(self) -> Shape:
        return Shape(**self.model_dump())


class ShapeKind(Enum):
    """Shapes a shape config may select."""

    NONE = "none"
    HELIX = "helix"


class ShapeConfig(_CamelModel):
    """Shape file model: a shape selector plus its dimensions."""

    shape: str = ShapeKind.NONE.value
    helix: Optional[HelixConfig] = None

    def to_shape(self) -> Shape:
        """
        Resolve the selected shape into planner input.

        Raises:
            UnknownShapeError: If no supported shape is selected
            MissingShapeError: If the helix block is missing
        """
        if self.shape.lower() != ShapeKind.HELIX.value:
            raise UnknownShapeError(
                f"Unknown shape type: {self.shape}",
                details={"supported": [ShapeKind.HELIX.value]},
            )
        if self.helix is None:
            raise MissingShapeError("Shape 'helix' selected but no helix dimensions given")
        return self.helix.to_shape()


def _read_yaml(path: PathLike) -> dict[str, Any]:
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read config file: {path}", details={"error": str(e)}
        )
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse config file: {path}", details={"error": str(e)}
        )
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file must contain a mapping: {path}",
            details={"type": type(data).__name__},
        )
    return data


def load_cutting_config(path: PathLike) -> CuttingConfig:
    """
    Load and validate a cutting parameters file.

    Raises:
        ConfigurationError: If the file cannot be read or fails validation
    """
    data = _read_yaml(path)
    try:
        return CuttingConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid cutting config: {path}", details={"error": str(e)}
        )


def load_shape_config(path: PathLike) -> ShapeConfig:
    """
    Load and validate a shape file.

    Raises:
        ConfigurationError: If the file cannot be read or fails validation
    """
    data = _read_yaml(path)
    try:
        return ShapeConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid shape config: {path}", details={"error": str(e)}
        )


def load_cutting_parameters(path: PathLike) -> CuttingParameters:
    """Load a cutting parameters file straight into planner input."""
    return load_cutting_config(path).to_parameters()


def load_shape(path: PathLike) -> Shape:
    """Load a shape file straight into planner input."""
    return load_shape_config(path).to_shape()


EXAMPLE_CUTTING_CONFIG = CuttingConfig(
    cut_feed_rate=12.0,
    fast_feed_rate=300.0,
    fast_feed_rate_z=100.0,
    max_cut_depth=1.0,
    instrument_diameter=4.0,
    initial_z_offset=0.0,
    enable_xy_offset_compensation=False,
    initial_y_offset=0.0,
    initial_x_offset=0.0,
    last_pass_cutting_depth=0.2,
)

EXAMPLE_SHAPE_CONFIG = ShapeConfig(
    shape=ShapeKind.HELIX.value,
    helix=HelixConfig(
        length=50.0,
        number_of_turns=3.0,
        stock_diameter=35.0,
        target_cut_depth=3.0,
        target_cut_width=6.0,
    ),
)


def _dump_yaml(model: BaseModel, path: PathLike) -> None:
    data = model.model_dump(mode="json", by_alias=True)
    with open(path, "w") as f:
        yaml.safe_dump(data, f, sort_keys=False)


def write_example_configs(cutting_path: PathLike, shape_path: PathLike) -> None:
    """
    Write a matching pair of example config files.

    Raises:
        ConfigurationError: If either file cannot be written
    """
    for model, path in (
        (EXAMPLE_CUTTING_CONFIG, cutting_path),
        (EXAMPLE_SHAPE_CONFIG, shape_path),
    ):
        try:
            _dump_yaml(model, path)
        except OSError as e:
            raise ConfigurationError(
                f"Failed to write example config: {path}", details={"error": str(e)}
            )
