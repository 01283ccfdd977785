"""Typer CLI for cabinet component calculations."""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from cabinetcalc.application import CalculateCommand, CalculationOutput
from cabinetcalc.application.config import ConfigError, load_config
from cabinetcalc.cli.commands import validate_command
from cabinetcalc.domain import (
    DoorDimensions,
    DoorOptions,
    DrawerOptions,
    FitType,
    HingeType,
    OpeningDimensions,
    calculate_blum_clip_top_hinge_plate,
    calculate_blum_tandembox_drill_points,
    calculate_door_dimensions,
    calculate_double_doors,
    calculate_handle_placement,
    calculate_hinge_placements,
    calculate_shaker_door_components,
    calculate_shaker_door_parts,
    get_door_material_cuts,
    get_drawer_front_material_cuts,
)
from cabinetcalc.infrastructure import (
    CutListFormatter,
    DimensionReportFormatter,
    HardwareReportFormatter,
    JsonExporter,
)


class OutputFormat(str, Enum):
    """Output formats for the calculate command."""

    TEXT = "text"
    JSON = "json"


app = typer.Typer(
    name="cabinetcalc",
    help="Calculate door, drawer front and hardware drilling dimensions for cabinets.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _echo_text(output: CalculationOutput) -> None:
    typer.echo(DimensionReportFormatter().format(output))
    typer.echo()
    typer.echo(CutListFormatter().format(output.cut_list))
    if output.has_hardware:
        typer.echo()
        typer.echo(HardwareReportFormatter().format(output))
    if output.warnings:
        typer.echo()
        typer.echo("Warnings:")
        for warning in output.warnings:
            typer.echo(f"  - {warning}")


@app.command()
def calculate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON calculation file"),
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = OutputFormat.TEXT,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write JSON output to this file"),
    ] = None,
) -> None:
    """Run every section of a calculation file.

    Examples:
        cabinetcalc calculate base-cabinet.json
        cabinetcalc calculate base-cabinet.json --format json
        cabinetcalc calculate base-cabinet.json --output result.json
    """
    try:
        config = load_config(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    output = CalculateCommand().execute(config)
    exporter = JsonExporter()

    if output_file is not None:
        exporter.export(output, output_file)
        typer.echo(f"JSON exported to: {output_file}")
        return

    if output_format == OutputFormat.JSON:
        typer.echo(exporter.export_string(output))
    else:
        _echo_text(output)


@app.command()
def door(
    width: Annotated[float, typer.Option("--width", "-w", help="Opening width")],
    height: Annotated[float, typer.Option("--height", "-h", help="Opening height")],
    overlay: Annotated[
        float, typer.Option("--overlay", help="Overlay per side (overlay doors)")
    ] = 0.0,
    gap: Annotated[float, typer.Option("--gap", help="Reveal per side (inset doors)")] = 0.0,
    fit: Annotated[FitType, typer.Option("--type", help="Fit style")] = FitType.OVERLAY,
    quantity: Annotated[int, typer.Option("--quantity", "-q", min=1)] = 1,
) -> None:
    """Calculate a single door for an opening."""
    result = calculate_door_dimensions(
        OpeningDimensions(width, height), DoorOptions(overlay, gap, fit)
    )
    typer.echo(f"Door: {result.width:.2f} x {result.height:.2f}")
    typer.echo()
    typer.echo(CutListFormatter().format(get_door_material_cuts(result, quantity=quantity)))


@app.command(name="double-doors")
def double_doors(
    width: Annotated[float, typer.Option("--width", "-w", help="Opening width")],
    height: Annotated[float, typer.Option("--height", "-h", help="Opening height")],
    overlay: Annotated[float, typer.Option("--overlay", help="Overlay per side")] = 0.0,
    gap_between: Annotated[
        float, typer.Option("--gap-between", help="Gap between the two doors")
    ] = 0.0,
) -> None:
    """Split an opening into a pair of overlay doors."""
    left, right = calculate_double_doors(
        OpeningDimensions(width, height),
        DoorOptions(overlay=overlay, gap=0.0, type=FitType.OVERLAY),
        gap_between,
    )
    typer.echo(f"Left door: {left.width:.2f} x {left.height:.2f}")
    typer.echo(f"Right door: {right.width:.2f} x {right.height:.2f}")


@app.command(name="drawer-front")
def drawer_front(
    width: Annotated[float, typer.Option("--width", "-w", help="Opening width")],
    front_height: Annotated[
        float, typer.Option("--front-height", help="Drawer front height")
    ],
    box_height: Annotated[float, typer.Option("--box-height", help="Drawer box height")] = 0.0,
    overlay: Annotated[float, typer.Option("--overlay", help="Overlay per side")] = 0.0,
    gap: Annotated[float, typer.Option("--gap", help="Reveal per side")] = 0.0,
    fit: Annotated[FitType, typer.Option("--type", help="Fit style")] = FitType.OVERLAY,
    quantity: Annotated[int, typer.Option("--quantity", "-q", min=1)] = 1,
) -> None:
    """Calculate a drawer front cut list entry.

    The opening height does not affect the front, so only its width is asked for.
    """
    cuts = get_drawer_front_material_cuts(
        OpeningDimensions(width, 0.0),
        DrawerOptions(box_height, front_height, overlay, gap, fit),
        quantity=quantity,
    )
    typer.echo(CutListFormatter().format(cuts))


@app.command()
def shaker(
    width: Annotated[float, typer.Option("--width", "-w", help="Door width")],
    height: Annotated[float, typer.Option("--height", "-h", help="Door height")],
    rail_width: Annotated[float, typer.Option("--rail-width", help="Rail width")],
    stile_width: Annotated[float, typer.Option("--stile-width", help="Stile width")],
    panel_gap: Annotated[
        float, typer.Option("--panel-gap", help="Panel expansion allowance")
    ] = 2.0,
) -> None:
    """Break a shaker door into stiles, rails and panel."""
    door_size = DoorDimensions(width, height)
    typer.echo(
        CutListFormatter().format(
            calculate_shaker_door_parts(door_size, rail_width, stile_width, panel_gap)
        )
    )
    components = calculate_shaker_door_components(door_size, stile_width, rail_width)
    typer.echo()
    typer.echo(
        f"Nominal panel: {components.panel_width:.2f} x {components.panel_height:.2f}"
    )


@app.command()
def handle(
    width: Annotated[float, typer.Option("--width", "-w", help="Door width")],
    height: Annotated[float, typer.Option("--height", "-h", help="Door height")],
    offset_x: Annotated[float, typer.Option("--offset-x", help="Distance in from the right edge")],
    offset_y: Annotated[float, typer.Option("--offset-y", help="Distance in from the bottom edge")],
) -> None:
    """Place a handle on a door."""
    location = calculate_handle_placement(DoorDimensions(width, height), offset_x, offset_y)
    typer.echo(f"Handle: ({location.x:.2f}, {location.y:.2f})")


@app.command()
def hinges(
    height: Annotated[float, typer.Option("--height", "-h", help="Door height")],
    count: Annotated[int, typer.Option("--count", "-n", help="Number of hinges")] = 2,
    edge_offset: Annotated[
        float, typer.Option("--edge-offset", help="Distance from door ends to outer hinges")
    ] = 0.0,
) -> None:
    """Space hinges evenly along a door edge."""
    for location in calculate_hinge_placements(
        DoorDimensions(0.0, height), count, edge_offset
    ):
        typer.echo(f"Hinge: ({location.x:.2f}, {location.y:.2f})")


@app.command(name="blum-hinges")
def blum_hinges(
    height: Annotated[float, typer.Option("--height", "-h", help="Door height in mm")],
    hinge_type: Annotated[
        HingeType, typer.Option("--hinge-type", help="Hinge arm style")
    ] = HingeType.STRAIGHT,
    top_gap: Annotated[
        float | None, typer.Option("--top-gap", help="Top edge to top hinge (mm)")
    ] = None,
    bottom_gap: Annotated[
        float | None, typer.Option("--bottom-gap", help="Bottom edge to bottom hinge (mm)")
    ] = None,
) -> None:
    """Lay out Blum Clip Top hinge plates for a door."""
    layout = calculate_blum_clip_top_hinge_plate(height, hinge_type, top_gap, bottom_gap)
    typer.echo(f"Hinges: {layout.hinge_count}")
    typer.echo("Positions: " + ", ".join(f"{p:.2f}" for p in layout.positions))


@app.command()
def tandembox(
    box_width: Annotated[float, typer.Option("--box-width", help="Drawer box width (mm)")],
    box_depth: Annotated[float, typer.Option("--box-depth", help="Drawer box depth (mm)")],
    slide_length: Annotated[
        float, typer.Option("--slide-length", help="Runner length (mm)")
    ] = 500.0,
    model: Annotated[str, typer.Option("--model", "-m", help="Drawer side model: M, B or D")] = "M",
) -> None:
    """Calculate Blum Tandembox drill points for a drawer box."""
    output = CalculationOutput(
        tandembox=calculate_blum_tandembox_drill_points(
            box_width, box_depth, slide_length, model
        )
    )
    typer.echo(HardwareReportFormatter().format(output))


if __name__ == "__main__":
    app()
