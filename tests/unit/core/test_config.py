"""
Unit tests for configuration loading.
"""

import pytest
import yaml

from helixpath.core.config import (
    CuttingConfig,
    HelixConfig,
    ShapeConfig,
    load_cutting_config,
    load_cutting_parameters,
    load_shape,
    load_shape_config,
    write_example_configs,
)
from helixpath.core.exceptions import (
    ConfigurationError,
    MissingShapeError,
    UnknownShapeError,
)
from helixpath.planning import CuttingParameters, Shape, plan_toolpath


class TestCuttingConfig:
    """Tests for CuttingConfig model."""

    def test_camel_case_keys(self):
        """Test file keys map onto snake_case fields."""
        config = CuttingConfig.model_validate(
            {
                "cutFeedRate": 12,
                "fastFeedRate": 300,
                "fastFeedRateZ": 100,
                "maxCutDepth": 1,
                "instrumentDiameter": 4,
                "enableXYOffsetCompensation": True,
                "initialXOffset": 1.5,
                "lastPassCuttingDepth": 0.2,
            }
        )
        assert config.fast_feed_rate_z == 100.0
        assert config.enable_xy_offset_compensation is True
        assert config.initial_x_offset == 1.5
        assert config.initial_y_offset == 0.0
        assert config.initial_z_offset == 0.0

    def test_to_parameters(self):
        """Test conversion into planner input."""
        config = CuttingConfig(
            cut_feed_rate=12.0,
            fast_feed_rate=300.0,
            fast_feed_rate_z=100.0,
            max_cut_depth=1.0,
            instrument_diameter=4.0,
        )
        parameters = config.to_parameters()
        assert isinstance(parameters, CuttingParameters)
        assert parameters.cut_feed_rate == 12.0
        assert parameters.last_pass_cutting_depth == 0.0

    def test_rejects_non_positive_feed(self):
        """Test feed rates must be positive."""
        with pytest.raises(ValueError):
            CuttingConfig(
                cut_feed_rate=0.0,
                fast_feed_rate=300.0,
                fast_feed_rate_z=100.0,
                max_cut_depth=1.0,
                instrument_diameter=4.0,
            )

    def test_rejects_infinite_values(self):
        """Test non-finite numbers are rejected."""
        with pytest.raises(ValueError):
            CuttingConfig(
                cut_feed_rate=12.0,
                fast_feed_rate=float("inf"),
                fast_feed_rate_z=100.0,
                max_cut_depth=1.0,
                instrument_diameter=4.0,
            )


class TestShapeConfig:
    """Tests for ShapeConfig model."""

    def test_helix_to_shape(self):
        """Test a helix selection resolves to a Shape."""
        config = ShapeConfig.model_validate(
            {
                "shape": "helix",
                "helix": {
                    "length": 50,
                    "stockDiameter": 35,
                    "numberOfTurns": 2.5,
                    "targetCutDepth": 3,
                    "targetCutWidth": 6,
                },
            }
        )
        shape = config.to_shape()
        assert isinstance(shape, Shape)
        assert shape.number_of_turns == 2.5
        assert shape.stock_diameter == 35.0

    def test_shape_name_is_case_insensitive(self):
        """Test 'Helix' is accepted as written by older files."""
        config = ShapeConfig(
            shape="Helix",
            helix=HelixConfig(
                length=50,
                stock_diameter=35,
                number_of_turns=3,
                target_cut_depth=3,
                target_cut_width=6,
            ),
        )
        assert config.to_shape().length == 50.0

    def test_default_is_no_shape(self):
        """Test an empty shape config selects nothing."""
        with pytest.raises(UnknownShapeError):
            ShapeConfig().to_shape()

    def test_unknown_shape(self):
        """Test an unsupported shape name."""
        with pytest.raises(UnknownShapeError) as exc_info:
            ShapeConfig(shape="spiral").to_shape()
        assert exc_info.value.details["supported"] == ["helix"]

    def test_missing_helix_block(self):
        """Test selecting a helix without dimensions."""
        with pytest.raises(MissingShapeError):
            ShapeConfig(shape="helix").to_shape()


class TestLoaders:
    """Tests for YAML file loading."""

    def test_load_sample_files(self, sample_config_files):
        """Test loading a matching config pair."""
        cutting_path, shape_path = sample_config_files

        parameters = load_cutting_parameters(cutting_path)
        shape = load_shape(shape_path)

        assert parameters.initial_z_offset == 0.5
        assert parameters.last_pass_cutting_depth == 0.2
        assert shape.target_cut_width == 6.0

    def test_load_config_models(self, sample_config_files):
        """Test the model-level loaders."""
        cutting_path, shape_path = sample_config_files
        assert load_cutting_config(cutting_path).max_cut_depth == 1.0
        assert load_shape_config(shape_path).shape == "helix"

    def test_missing_file(self, temp_dir):
        """Test a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            load_cutting_config(temp_dir / "nope.yaml")

    def test_invalid_yaml(self, temp_dir):
        """Test unparsable YAML raises ConfigurationError."""
        path = temp_dir / "bad.yaml"
        path.write_text("cutFeedRate: [1, 2\n")
        with pytest.raises(ConfigurationError):
            load_cutting_config(path)

    def test_non_mapping_yaml(self, temp_dir):
        """Test a YAML list is rejected."""
        path = temp_dir / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_shape_config(path)
        assert exc_info.value.details["type"] == "list"

    def test_missing_required_field(self, temp_dir):
        """Test validation errors are wrapped in ConfigurationError."""
        path = temp_dir / "cutting.yaml"
        path.write_text("cutFeedRate: 12\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_cutting_config(path)
        assert "error" in exc_info.value.details

    def test_negative_dimension(self, temp_dir):
        """Test negative shape dimensions are rejected."""
        path = temp_dir / "shape.yaml"
        path.write_text(
            "shape: helix\nhelix:\n  length: -50\n  stockDiameter: 35\n"
            "  numberOfTurns: 3\n  targetCutDepth: 3\n  targetCutWidth: 6\n"
        )
        with pytest.raises(ConfigurationError):
            load_shape_config(path)

    def test_empty_shape_file(self, temp_dir):
        """Test an empty file loads but selects no shape."""
        path = temp_dir / "empty.yaml"
        path.write_text("")
        with pytest.raises(UnknownShapeError):
            load_shape(path)


class TestExampleConfigs:
    """Tests for write_example_configs."""

    def test_write_and_reload(self, temp_dir):
        """Test the example pair loads back and plans the reference channel."""
        cutting_path = temp_dir / "cutting.yaml"
        shape_path = temp_dir / "shape.yaml"
        write_example_configs(cutting_path, shape_path)

        toolpath = plan_toolpath(load_shape(shape_path), load_cutting_parameters(cutting_path))
        assert toolpath.plan.z_rough_passes == 3
        assert toolpath.plan.y_rough_passes == 2

    def test_written_keys_are_camel_case(self, temp_dir):
        """Test files use the camelCase keys the loader expects."""
        cutting_path = temp_dir / "cutting.yaml"
        shape_path = temp_dir / "shape.yaml"
        write_example_configs(cutting_path, shape_path)

        cutting = yaml.safe_load(cutting_path.read_text())
        shape = yaml.safe_load(shape_path.read_text())
        assert cutting["cutFeedRate"] == 12.0
        assert cutting["fastFeedRateZ"] == 100.0
        assert cutting["enableXYOffsetCompensation"] is False
        assert shape["shape"] == "helix"
        assert shape["helix"]["numberOfTurns"] == 3.0

    def test_unwritable_path(self, temp_dir):
        """Test write failures raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            write_example_configs(temp_dir / "missing" / "c.yaml", temp_dir / "s.yaml")
