"""Adapter to convert PlannerConfiguration into the CalculationInput DTO."""

from gridfinity.application.config.schema import PlannerConfiguration, PrinterConfig
from gridfinity.application.dtos import CalculationInput, ExclusionZoneInput
from gridfinity.application.printers import resolve_printer
from gridfinity.domain.value_objects import PrinterSize


def _printer_size(printer: PrinterConfig) -> PrinterSize:
    if printer.x is not None and printer.y is not None:
        return PrinterSize(x=printer.x, y=printer.y, z=printer.z)
    return resolve_printer(printer.preset)


def config_to_input(config: PlannerConfiguration) -> CalculationInput:
    """Convert a PlannerConfiguration to a CalculationInput.

    Drawer dimensions keep the unit they were written in; the calculator
    converts them to millimetres itself. Preset printers are resolved to
    their build volume.

    Example:
        >>> config = load_config(Path("kitchen-drawer.json"))
        >>> output = CalculateGridsCommand().execute(config_to_input(config))
    """
    bed = _printer_size(config.printer)
    zone = config.printer.exclusion_zone
    zone_input = None
    if zone is not None:
        zone_input = ExclusionZoneInput(
            front=zone.front, back=zone.back, left=zone.left, right=zone.right
        )

    return CalculationInput(
        drawer_width=config.drawer.width,
        drawer_height=config.drawer.height,
        drawer_unit=config.drawer.unit,
        printer_x=bed.x,
        printer_y=bed.y,
        printer_z=bed.z,
        exclusion_zone=zone_input,
        half_size_mode=config.options.resolved_mode,
        prefer_uniform_baseplates=config.options.prefer_uniform_baseplates,
        num_drawers=config.num_drawers,
    )
