"""
Command-line interface for helixpath.

Provides commands for writing example configs, inspecting the pass plan
and generating G-code for a helical channel.
"""

import json
from enum import IntEnum
from pathlib import Path
from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.table import Table

from helixpath import __version__
from helixpath.core.config import load_cutting_parameters, load_shape, write_example_configs
from helixpath.core.exceptions import (
    ConfigurationError,
    MissingShapeError,
    PlanningError,
    UnknownShapeError,
)
from helixpath.core.logging import bind_run_context, configure_logging, get_logger
from helixpath.planning import CuttingParameters, Shape, plan_toolpath
from helixpath.postprocessor import GCodePostProcessor, PostProcessorConfig

# stdout carries the generated program
console = Console(stderr=True)
logger = get_logger(__name__)


class ExitCode(IntEnum):
    """Process exit codes."""

    OK = 0
    UNKNOWN_ERROR = 1  # uncaught exceptions exit with this too
    UNABLE_TO_WRITE_EXAMPLES = 2
    UNABLE_TO_DESERIALIZE_SHAPE = 3
    UNKNOWN_SHAPE = 4
    UNABLE_TO_READ_CONFIG = 5
    PLANNER_FAILED = 6
    UNABLE_TO_WRITE_OUTPUT = 7


def _fail(message: str, error: Exception, code: ExitCode) -> NoReturn:
    console.print(f"[red]✗[/red] {message}: {error}")
    raise SystemExit(int(code))


def _load_inputs(cutting_config: Path, shape_config: Path) -> tuple[Shape, CuttingParameters]:
    try:
        parameters = load_cutting_parameters(cutting_config)
        shape = load_shape(shape_config)
    except UnknownShapeError as e:
        _fail("Unknown shape type", e, ExitCode.UNKNOWN_SHAPE)
    except MissingShapeError as e:
        _fail("Unable to read shape dimensions", e, ExitCode.UNABLE_TO_DESERIALIZE_SHAPE)
    except ConfigurationError as e:
        _fail("Failed to read config file(s)", e, ExitCode.UNABLE_TO_READ_CONFIG)
    return shape, parameters


cutting_option = click.option(
    "--cutting-config",
    "-c",
    required=True,
    type=click.Path(path_type=Path),
    help="Machine configuration file: feed rates, tool info etc",
)
shape_option = click.option(
    "--shape-config",
    "-s",
    required=True,
    type=click.Path(path_type=Path),
    help="Target shape configuration file: target and stock dimensions",
)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Minimum log level",
)
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
def main(log_level: str, json_logs: bool) -> None:
    """helixpath - Helical channel G-code generator for rotary-axis mills."""
    configure_logging(level=log_level, json_output=json_logs)


@main.command("examples")
@cutting_option
@shape_option
def examples(cutting_config: Path, shape_config: Path) -> None:
    """Write example cutting and shape config files."""
    try:
        write_example_configs(cutting_config, shape_config)
    except ConfigurationError as e:
        _fail("Failed to write example files", e, ExitCode.UNABLE_TO_WRITE_EXAMPLES)
    console.print(f"[green]✓[/green] Examples written to {cutting_config} and {shape_config}")


@main.command("info")
@cutting_option
@shape_option
def info(cutting_config: Path, shape_config: Path) -> None:
    """Show the pass plan for a shape without generating G-code."""
    shape, parameters = _load_inputs(cutting_config, shape_config)
    try:
        toolpath = plan_toolpath(shape, parameters)
    except PlanningError as e:
        _fail("Planner failed", e, ExitCode.PLANNER_FAILED)

    plan = toolpath.plan
    table = Table(title="Helical Pass Plan")
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    table.add_row("Z rough passes", str(plan.z_rough_passes))
    table.add_row("Z rough step", f"{plan.z_rough_step:.4f} mm")
    table.add_row("Y rough passes", str(plan.y_rough_passes))
    table.add_row("Y rough step", f"{plan.y_rough_step:.4f} mm")
    table.add_row("Finishing depth", f"{plan.finishing_depth:.4f} mm")
    table.add_row(
        "Finishing walls",
        f"±{plan.finishing_y_offset:.4f} mm" if plan.needs_finishing_walls else "(single pass)",
    )
    table.add_row("A target", f"{plan.a_target:.2f}°")
    table.add_row("Traversals", str(len(toolpath.traversals())))
    table.add_row("Waypoints", str(len(toolpath)))

    console.print(table)


@main.command("generate")
@cutting_option
@shape_option
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file path (stdout if omitted)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["gcode", "json"]),
    default="gcode",
    help="Output format",
)
@click.option("--comments", is_flag=True, help="Annotate rough/finish phases in the G-code")
def generate(
    cutting_config: Path,
    shape_config: Path,
    output: Optional[Path],
    output_format: str,
    comments: bool,
) -> None:
    """Generate a toolpath program for a helical channel."""
    bind_run_context(cutting_config=str(cutting_config), shape_config=str(shape_config))
    shape, parameters = _load_inputs(cutting_config, shape_config)

    try:
        toolpath = plan_toolpath(shape, parameters)
    except PlanningError as e:
        _fail("Planner failed", e, ExitCode.PLANNER_FAILED)

    if output_format == "json":
        text = json.dumps(toolpath.to_dict(), indent=2) + "\n"
    else:
        post = GCodePostProcessor(PostProcessorConfig(include_comments=comments))
        text = post.generate(toolpath)

    if output is None:
        click.echo(text, nl=False)
        return

    try:
        output.write_text(text)
    except OSError as e:
        _fail("Unable to write output file", e, ExitCode.UNABLE_TO_WRITE_OUTPUT)
    logger.info("program_written", path=str(output), waypoints=len(toolpath))
    console.print(f"[green]✓[/green] Wrote {len(toolpath)} moves to {output}")


if __name__ == "__main__":
    main()
