"""Printer preset endpoints."""

from fastapi import APIRouter

from gridfinity.application.printers import DEFAULT_PRINTER, get_printer, list_printers
from gridfinity.domain import PrinterSize
from gridfinity.infrastructure import format_build_volume
from gridfinity.web.schemas.responses import PrinterListSchema, PrinterPresetSchema

router = APIRouter(prefix="/printers", tags=["printers"])


def _preset_schema(name: str, printer: PrinterSize) -> PrinterPresetSchema:
    return PrinterPresetSchema(
        name=name,
        x=printer.x,
        y=printer.y,
        z=printer.z,
        build_volume=format_build_volume(printer),
    )


@router.get("", response_model=PrinterListSchema)
async def list_presets() -> PrinterListSchema:
    """List all built-in printer presets."""
    printers = [_preset_schema(name, get_printer(name)) for name in list_printers()]
    return PrinterListSchema(printers=printers, default=DEFAULT_PRINTER)


@router.get("/{name}", response_model=PrinterPresetSchema)
async def get_preset(name: str) -> PrinterPresetSchema:
    """Get one printer preset.

    Raises:
        UnknownPrinterError: If the preset does not exist (handled by exception handler).
    """
    return _preset_schema(name, get_printer(name))
