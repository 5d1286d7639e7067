"""
Demonstration of helixpath helical channel planning.

This script shows how to:
1. Load cutting and shape configs
2. Plan rough and finishing passes
3. Inspect the toolpath
4. Export G-code
"""

from pathlib import Path

from helixpath.core.config import load_cutting_parameters, load_shape
from helixpath.planning import WaypointKind, plan_toolpath
from helixpath.postprocessor import GCodePostProcessor, PostProcessorConfig


def main():
    """Run helical channel demonstration."""
    print("=" * 60)
    print("helixpath Helical Channel Demo")
    print("=" * 60)

    example_dir = Path(__file__).parent
    output_gcode = example_dir / "helix_channel.nc"

    # 1. Load configs
    print("\n1. Loading configs")
    parameters = load_cutting_parameters(example_dir / "cutting.yaml")
    shape = load_shape(example_dir / "shape.yaml")
    print(f"   [OK] Channel: {shape.length} mm long, {shape.number_of_turns} turns")
    print(f"   [OK] Target: {shape.target_cut_depth} mm deep, {shape.target_cut_width} mm wide")
    print(f"   [OK] Tool: {parameters.instrument_diameter} mm")

    # 2. Plan passes
    print("\n2. Planning passes")
    toolpath = plan_toolpath(shape, parameters)
    plan = toolpath.plan
    print(f"   [OK] Z rough passes: {plan.z_rough_passes} x {plan.z_rough_step:.4f} mm")
    print(f"   [OK] Y rough passes: {plan.y_rough_passes} x {plan.y_rough_step:.4f} mm")
    print(f"   [OK] Rotary target: {plan.a_target:.1f} deg")

    # 3. Toolpath statistics
    print("\n3. Toolpath statistics")
    print(f"   [OK] Waypoints: {len(toolpath)}")
    print(f"   [OK] Traversals: {len(toolpath.traversals())}")
    print(f"   [OK] Finishing moves: {len(toolpath.get_waypoints_by_kind(WaypointKind.FINISH_STEP))}")
    print(f"   [OK] Final depth: {toolpath.final_depth():.4f} mm")

    # 4. Export G-code
    print(f"\n4. Writing G-code: {output_gcode.name}")
    post = GCodePostProcessor(PostProcessorConfig(include_comments=True))
    output_gcode.write_text(post.generate(toolpath))
    print(f"   [OK] {len(post.generate_lines(toolpath))} lines")

    print("\n" + "=" * 60)
    print("Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
