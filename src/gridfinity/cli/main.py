"""Typer CLI for drawer baseplate planning."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from gridfinity.application import (
    CalculateGridsCommand,
    UnknownPrinterError,
    get_printer,
    list_printers,
)
from gridfinity.application.config import (
    ConfigError,
    PlannerConfiguration,
    config_to_input,
    load_config,
    merge_config_with_cli,
    save_config,
)
from gridfinity.cli.commands import validate_command
from gridfinity.domain import HalfSizeMode, LengthUnit
from gridfinity.domain.services.units import unit_converter
from gridfinity.infrastructure import (
    JsonExporter,
    LayoutDiagramRenderer,
    ResultFormatter,
    format_build_volume,
    parse_dimension,
)

OUTPUT_FORMATS = ("text", "json", "ascii", "svg")

app = typer.Typer(
    name="gridfinity",
    help="Plan Gridfinity baseplates, spacers and half-size pieces for a drawer.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """Plan Gridfinity baseplates for a drawer."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _drawer_lengths(
    width: str | None,
    height: str | None,
    bare_unit: LengthUnit,
    base: PlannerConfiguration | None,
) -> tuple[float, float, LengthUnit]:
    """Resolve drawer width and depth from options and the base plan.

    Bare numbers are read in ``bare_unit``. The drawer is kept in
    millimetres whenever any of its lengths was given in millimetres;
    only inches are converted, and inch to millimetre is exact.
    """
    parsed = {
        name: parse_dimension(text, default_unit=bare_unit)
        for name, text in (("width", width), ("height", height))
        if text is not None
    }
    units = {p.unit for p in parsed.values()} | {bare_unit}
    if base is not None:
        units.add(base.drawer.unit)
    target = LengthUnit.MM if LengthUnit.MM in units else LengthUnit.INCH

    def resolve(name: str) -> float:
        if name in parsed:
            return unit_converter.convert(parsed[name].value, parsed[name].unit, target)
        assert base is not None
        return unit_converter.convert(getattr(base.drawer, name), base.drawer.unit, target)

    return resolve("width"), resolve("height"), target


def _exclusion_overrides(**edges: float | None) -> dict[str, float] | None:
    overrides = {edge: value for edge, value in edges.items() if value is not None}
    return overrides or None


@app.command()
def calculate(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON plan file"),
    ] = None,
    width: Annotated[
        str | None,
        typer.Option("--width", "-w", help='Drawer width, e.g. 22.5, 22.5in or 571mm'),
    ] = None,
    height: Annotated[
        str | None,
        typer.Option("--height", "-h", help="Drawer depth, e.g. 16.5, 16.5in or 419mm"),
    ] = None,
    unit: Annotated[
        str | None,
        typer.Option("--unit", "-u", help="Unit for bare numbers: inch (default) or mm"),
    ] = None,
    printer: Annotated[
        str | None,
        typer.Option("--printer", "-p", help="Printer preset name (see 'gridfinity printers')"),
    ] = None,
    printer_x: Annotated[
        float | None,
        typer.Option("--printer-x", help="Custom bed width in mm"),
    ] = None,
    printer_y: Annotated[
        float | None,
        typer.Option("--printer-y", help="Custom bed depth in mm"),
    ] = None,
    printer_z: Annotated[
        float | None,
        typer.Option("--printer-z", help="Custom build height in mm"),
    ] = None,
    exclude_front: Annotated[
        float | None, typer.Option("--exclude-front", help="Unusable bed margin at the front, mm")
    ] = None,
    exclude_back: Annotated[
        float | None, typer.Option("--exclude-back", help="Unusable bed margin at the back, mm")
    ] = None,
    exclude_left: Annotated[
        float | None, typer.Option("--exclude-left", help="Unusable bed margin on the left, mm")
    ] = None,
    exclude_right: Annotated[
        float | None, typer.Option("--exclude-right", help="Unusable bed margin on the right, mm")
    ] = None,
    mode: Annotated[
        HalfSizeMode | None,
        typer.Option("--mode", "-m", help="Half-size mode"),
    ] = None,
    half_size: Annotated[
        bool,
        typer.Option("--half-size", help="Use 21mm half-size cells everywhere"),
    ] = False,
    prefer_half_size: Annotated[
        bool,
        typer.Option("--prefer-half-size", help="Fill leftover gaps with half-size cells"),
    ] = False,
    uniform: Annotated[
        bool | None,
        typer.Option("--uniform/--no-uniform", help="Prefer few distinct baseplate sizes"),
    ] = None,
    drawers: Annotated[
        int | None,
        typer.Option("--drawers", "-n", help="Number of identical drawers"),
    ] = None,
    display_mm: Annotated[
        bool | None,
        typer.Option(
            "--display-mm/--display-inches",
            help="Show drawer and spacer sizes in the text report in mm or inches",
        ),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json, ascii, svg"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to a file instead of stdout"),
    ] = None,
    save: Annotated[
        Path | None,
        typer.Option("--save", help="Save the resulting plan as a JSON file"),
    ] = None,
) -> None:
    """Calculate baseplates, spacers and half-size pieces for a drawer."""
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    if mode is None and (half_size or prefer_half_size):
        mode = HalfSizeMode.from_flags(half_size, prefer_half_size)

    try:
        base = load_config(config_file) if config_file is not None else None
        if base is None and (width is None or height is None):
            typer.echo("Error: --width and --height are required without --config", err=True)
            raise typer.Exit(code=1)

        if unit is not None:
            bare_unit = LengthUnit.parse(unit)
        elif base is not None:
            bare_unit = base.drawer.unit
        else:
            bare_unit = LengthUnit.INCH
        drawer_width, drawer_height, drawer_unit = _drawer_lengths(
            width, height, bare_unit, base
        )

        config = merge_config_with_cli(
            base,
            width=drawer_width,
            height=drawer_height,
            unit=drawer_unit,
            preset=printer,
            printer_x=printer_x,
            printer_y=printer_y,
            printer_z=printer_z,
            exclusion_zone=_exclusion_overrides(
                front=exclude_front, back=exclude_back, left=exclude_left, right=exclude_right
            ),
            half_size_mode=mode,
            prefer_uniform_baseplates=uniform,
            num_drawers=drawers,
            use_mm=display_mm,
        )
        calculation_input = config_to_input(config)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    output = CalculateGridsCommand().execute(calculation_input)
    if not output.is_valid:
        for error in output.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if save is not None:
        try:
            save_config(config, save)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Saved plan to {save}", err=True)

    if output_format == "json":
        content = JsonExporter().export(output)
    elif output_format == "ascii":
        content = LayoutDiagramRenderer().render_ascii(output.result)
    elif output_format == "svg":
        content = LayoutDiagramRenderer().render_svg(output.result)
    else:
        content = ResultFormatter(use_mm=config.display.use_mm).format(output)

    if output_file is not None:
        output_file.write_text(content + "\n", encoding="utf-8")
        typer.echo(f"Wrote {output_format} output to {output_file}")
    else:
        typer.echo(content)


@app.command()
def printers(
    use_mm: Annotated[
        bool,
        typer.Option("--mm/--inches", help="Show build volumes in millimetres or inches"),
    ] = True,
) -> None:
    """List built-in printer presets."""
    names = list_printers()
    width = max(len(name) for name in names)
    for name in names:
        typer.echo(f"{name:<{width}}  {format_build_volume(get_printer(name), use_mm)}")


@app.command()
def printer(
    name: Annotated[str, typer.Argument(help="Printer preset name")],
) -> None:
    """Show one printer preset."""
    try:
        size = get_printer(name)
    except UnknownPrinterError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo(f"Available printers: {', '.join(list_printers())}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{name}: {format_build_volume(size)}")


if __name__ == "__main__":
    app()
