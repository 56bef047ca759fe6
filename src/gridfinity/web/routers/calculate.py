"""Drawer calculation endpoints."""

from fastapi import APIRouter

from gridfinity.application.config import config_to_input, load_config_from_dict
from gridfinity.application.dtos import (
    CalculationInput,
    CalculationOutput,
    ExclusionZoneInput,
)
from gridfinity.application.printers import resolve_printer
from gridfinity.domain import (
    HalfSizeMode,
    LayoutItem,
    LengthUnit,
    PieceType,
    ResultAggregator,
)
from gridfinity.web.dependencies import CalculateCommandDep
from gridfinity.web.exceptions import CalculationError
from gridfinity.web.schemas.requests import CalculateFromConfigRequest, CalculateRequest
from gridfinity.web.schemas.responses import (
    CalculationResultSchema,
    LayoutItemSchema,
    TotalsSchema,
)

router = APIRouter(prefix="/calculate", tags=["calculate"])


def _item_label(item: LayoutItem, aggregator: ResultAggregator, grid_size: int) -> str:
    if item.type is PieceType.SPACER:
        return aggregator.spacer_label(item, grid_size)
    return item.size_label


def _output_to_schema(
    output: CalculationOutput, aggregator: ResultAggregator, grid_size: int
) -> CalculationResultSchema:
    """Convert CalculationOutput to response schema.

    Layout labels come from the same aggregator that built the tallies, so
    every spacer label is also a key of ``spacers``.
    """
    result = output.result
    layout = [
        LayoutItemSchema(
            x=item.x,
            y=item.y,
            width=item.width,
            height=item.height,
            type=item.type.value,
            label=_item_label(item, aggregator, grid_size),
            pixel_x=item.pixel_x,
            pixel_y=item.pixel_y,
            pixel_width=item.pixel_width,
            pixel_height=item.pixel_height,
        )
        for item in result.layout
    ]
    return CalculationResultSchema(
        is_valid=output.is_valid,
        errors=output.errors,
        num_drawers=output.num_drawers,
        baseplates=result.baseplates,
        spacers=result.spacers,
        half_size_bins=result.half_size_bins,
        layout=layout,
        totals=TotalsSchema(
            baseplates=output.total_baseplates(),
            spacers=output.total_spacers(),
            half_size_bins=output.total_half_size_bins(),
            pieces=output.total_pieces,
        ),
    )


def _request_to_input(request: CalculateRequest) -> CalculationInput:
    drawer = request.drawer
    printer = request.printer

    if printer.x is not None and printer.y is not None:
        bed_x, bed_y, bed_z = printer.x, printer.y, printer.z
    else:
        # Raises UnknownPrinterError for an unknown preset name
        bed = resolve_printer(printer.preset)
        bed_x, bed_y, bed_z = bed.x, bed.y, bed.z

    zone = None
    if printer.exclusion_zone is not None:
        zone = ExclusionZoneInput(**printer.exclusion_zone.model_dump())

    return CalculationInput(
        drawer_width=drawer.width,
        drawer_height=drawer.height,
        drawer_unit=LengthUnit(drawer.unit.value),
        printer_x=bed_x,
        printer_y=bed_y,
        printer_z=bed_z,
        exclusion_zone=zone,
        half_size_mode=HalfSizeMode(request.half_size_mode.value),
        prefer_uniform_baseplates=request.prefer_uniform_baseplates,
        num_drawers=request.num_drawers,
    )


@router.post("", response_model=CalculationResultSchema)
async def calculate_layout(
    request: CalculateRequest,
    command: CalculateCommandDep,
) -> CalculationResultSchema:
    """Calculate baseplates, spacers and half-size pieces for a drawer.

    Args:
        request: Drawer, printer and option values.
        command: Injected CalculateGridsCommand.

    Returns:
        Per-drawer layout and tallies plus batch totals.

    Raises:
        UnknownPrinterError: If the printer preset does not exist (404).
        CalculationError: If the input is rejected (422).
    """
    calculation_input = _request_to_input(request)
    output = command.execute(calculation_input)
    if not output.is_valid:
        raise CalculationError(output.errors)
    return _output_to_schema(
        output, command.calculator.aggregator, calculation_input.half_size_mode.grid_size
    )


@router.post("/from-config", response_model=CalculationResultSchema)
async def calculate_from_config(
    request: CalculateFromConfigRequest,
    command: CalculateCommandDep,
) -> CalculationResultSchema:
    """Calculate a layout from a full plan configuration.

    The configuration uses the same schema as plan files on disk.

    Raises:
        ConfigError: If the configuration fails validation (422).
        CalculationError: If the resulting input is rejected (422).
    """
    config = load_config_from_dict(request.config)
    calculation_input = config_to_input(config)
    output = command.execute(calculation_input)
    if not output.is_valid:
        raise CalculationError(output.errors)
    return _output_to_schema(
        output, command.calculator.aggregator, calculation_input.half_size_mode.grid_size
    )
