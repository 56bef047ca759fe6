"""Application layer - use cases and orchestration."""

from .commands import CalculateGridsCommand
from .dtos import CalculationInput, CalculationOutput, ExclusionZoneInput
from .printers import (
    PRINTER_PRESETS,
    UnknownPrinterError,
    get_printer,
    list_printers,
    resolve_printer,
)

__all__ = [
    "PRINTER_PRESETS",
    "CalculateGridsCommand",
    "CalculationInput",
    "CalculationOutput",
    "ExclusionZoneInput",
    "UnknownPrinterError",
    "get_printer",
    "list_printers",
    "resolve_printer",
]
