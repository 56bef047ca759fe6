"""Built-in printer presets.

Build volumes are in millimetres. Lookups are by exact preset name.
"""

from __future__ import annotations

from gridfinity.domain import ExclusionZone, PrinterSize


class UnknownPrinterError(KeyError):
    """Raised when a requested printer preset does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown printer: {name}")

    def __str__(self) -> str:
        return self.args[0]


# Preset name -> (x, y, z)
PRINTER_PRESETS: dict[str, tuple[int, int, int]] = {
    "Bambu Lab A1 Mini": (180, 180, 180),
    "Bambu Lab A1": (220, 220, 250),
    "Bambu Lab X1C": (256, 256, 256),
    "Prusa i3 MK3S+": (250, 210, 210),
    "Creality Ender 3": (220, 220, 250),
    "Creality Ender 5 Plus": (350, 350, 400),
    "Anycubic Mega S": (210, 210, 205),
    "Anycubic Vyper": (245, 245, 260),
    "Flashforge Adventurer 3": (150, 150, 150),
    "Ultimaker S5": (330, 240, 300),
    "Voron 2.4 (300mm)": (300, 300, 300),
    "Voron 2.4 (350mm)": (350, 350, 350),
}

DEFAULT_PRINTER = "Bambu Lab A1"
FALLBACK_PRINTER = PrinterSize(x=256, y=256, z=256)


def list_printers() -> list[str]:
    """Preset names in table order."""
    return list(PRINTER_PRESETS)


def get_printer(name: str, exclusion_zone: ExclusionZone | None = None) -> PrinterSize:
    """Look up a preset.

    Args:
        name: Preset name, e.g. ``"Prusa i3 MK3S+"``.
        exclusion_zone: Optional margins to attach to the preset bed.

    Returns:
        The preset's build volume.

    Raises:
        UnknownPrinterError: If no preset has that name.
    """
    if name not in PRINTER_PRESETS:
        raise UnknownPrinterError(name)
    x, y, z = PRINTER_PRESETS[name]
    return PrinterSize(x=x, y=y, z=z, exclusion_zone=exclusion_zone)


def resolve_printer(
    name: str | None,
    exclusion_zone: ExclusionZone | None = None,
) -> PrinterSize:
    """Preset by name, or the 256mm fallback bed when no name is given."""
    if name is None:
        if exclusion_zone is None:
            return FALLBACK_PRINTER
        return PrinterSize(
            x=FALLBACK_PRINTER.x,
            y=FALLBACK_PRINTER.y,
            z=FALLBACK_PRINTER.z,
            exclusion_zone=exclusion_zone,
        )
    return get_printer(name, exclusion_zone)
