"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from helixpath.planning import CuttingParameters, Shape


@pytest.fixture
def temp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def reference_shape():
    """50 mm channel, 3 turns, 3 mm deep and 6 mm wide on 35 mm stock."""
    return Shape(
        length=50.0,
        stock_diameter=35.0,
        number_of_turns=3.0,
        target_cut_depth=3.0,
        target_cut_width=6.0,
    )


@pytest.fixture
def reference_parameters():
    """4 mm tool, 1 mm max depth per pass, 0.2 mm finishing allowance."""
    return CuttingParameters(
        cut_feed_rate=12.0,
        fast_feed_rate=300.0,
        fast_feed_rate_z=100.0,
        max_cut_depth=1.0,
        instrument_diameter=4.0,
        initial_z_offset=0.0,
        last_pass_cutting_depth=0.2,
    )


CUTTING_YAML = """
cutFeedRate: 12.0
fastFeedRate: 300.0
fastFeedRateZ: 100.0
maxCutDepth: 1.0
instrumentDiameter: 4.0
initialZOffset: 0.5
enableXYOffsetCompensation: false
initialYOffset: 0.0
initialXOffset: 0.0
lastPassCuttingDepth: 0.2
"""

SHAPE_YAML = """
shape: helix
helix:
  length: 50
  stockDiameter: 35
  numberOfTurns: 3
  targetCutDepth: 3
  targetCutWidth: 6
"""


@pytest.fixture
def sample_config_files(temp_dir):
    """Write a matching cutting/shape config pair and return their paths."""
    cutting_path = temp_dir / "cutting.yaml"
    shape_path = temp_dir / "shape.yaml"
    cutting_path.write_text(CUTTING_YAML)
    shape_path.write_text(SHAPE_YAML)
    return cutting_path, shape_path
