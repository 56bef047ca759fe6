"""Configuration merging utilities for CLI override support.

This module merges CLI arguments with configuration file values, following
the precedence: CLI args > config values > defaults.

Only non-None CLI arguments override configuration values.
"""

from typing import Any

from gridfinity.application.config.loader import load_config_from_dict
from gridfinity.application.config.schema import PlannerConfiguration
from gridfinity.domain.value_objects import HalfSizeMode, LengthUnit

DEFAULT_SCHEMA_VERSION = "1.0"


def merge_config_with_cli(
    config: PlannerConfiguration | None,
    *,
    width: float | None = None,
    height: float | None = None,
    unit: LengthUnit | None = None,
    preset: str | None = None,
    printer_x: float | None = None,
    printer_y: float | None = None,
    printer_z: float | None = None,
    exclusion_zone: dict[str, float] | None = None,
    half_size_mode: HalfSizeMode | None = None,
    prefer_uniform_baseplates: bool | None = None,
    num_drawers: int | None = None,
    use_mm: bool | None = None,
) -> PlannerConfiguration:
    """Merge CLI arguments with configuration values.

    With no base configuration the CLI arguments alone describe the plan;
    a drawer width and height are then required.

    Args:
        config: Base configuration, or None to build one from the arguments
        width: Override for drawer.width
        height: Override for drawer.height
        unit: Override for drawer.unit
        preset: Printer preset name; replaces any custom bed
        printer_x: Custom bed width; replaces any preset
        printer_y: Custom bed depth; replaces any preset
        printer_z: Custom build height
        exclusion_zone: Per-edge overrides for printer.exclusion_zone
        half_size_mode: Override for options.half_size_mode
        prefer_uniform_baseplates: Override for options.prefer_uniform_baseplates
        num_drawers: Override for num_drawers
        use_mm: Override for display.use_mm

    Returns:
        A new, validated PlannerConfiguration

    Raises:
        ConfigError: If the merged values fail validation.

    Example:
        >>> config = load_config(Path("kitchen-drawer.json"))
        >>> merged = merge_config_with_cli(config, num_drawers=3)
        >>> merged.num_drawers
        3
    """
    data: dict[str, Any] = (
        config.model_dump(mode="json", exclude_none=True)
        if config is not None
        else {"schema_version": DEFAULT_SCHEMA_VERSION}
    )

    data["drawer"] = _build_drawer_data(data.get("drawer", {}), width, height, unit)
    data["printer"] = _build_printer_data(
        data.get("printer", {}), preset, printer_x, printer_y, printer_z, exclusion_zone
    )
    data["options"] = _build_options_data(
        data.get("options", {}), half_size_mode, prefer_uniform_baseplates
    )
    if num_drawers is not None:
        data["num_drawers"] = num_drawers
    if use_mm is not None:
        data.setdefault("display", {})["use_mm"] = use_mm

    return load_config_from_dict(data)


def _build_drawer_data(
    drawer: dict[str, Any],
    width: float | None,
    height: float | None,
    unit: LengthUnit | None,
) -> dict[str, Any]:
    drawer = dict(drawer)
    if width is not None:
        drawer["width"] = width
    if height is not None:
        drawer["height"] = height
    if unit is not None:
        drawer["unit"] = unit.value
    return drawer


def _build_printer_data(
    printer: dict[str, Any],
    preset: str | None,
    printer_x: float | None,
    printer_y: float | None,
    printer_z: float | None,
    exclusion_zone: dict[str, float] | None,
) -> dict[str, Any]:
    printer = dict(printer)
    if preset is not None:
        for key in ("x", "y", "z"):
            printer.pop(key, None)
        printer["preset"] = preset
    if printer_x is not None or printer_y is not None or printer_z is not None:
        printer.pop("preset", None)
        if printer_x is not None:
            printer["x"] = printer_x
        if printer_y is not None:
            printer["y"] = printer_y
        if printer_z is not None:
            printer["z"] = printer_z
    if exclusion_zone:
        zone = dict(printer.get("exclusion_zone", {}))
        zone.update(exclusion_zone)
        printer["exclusion_zone"] = zone
    return printer


def _build_options_data(
    options: dict[str, Any],
    half_size_mode: HalfSizeMode | None,
    prefer_uniform_baseplates: bool | None,
) -> dict[str, Any]:
    options = dict(options)
    if half_size_mode is not None:
        options.pop("use_half_size", None)
        options.pop("prefer_half_size", None)
        options["half_size_mode"] = half_size_mode.value
    if prefer_uniform_baseplates is not None:
        options["prefer_uniform_baseplates"] = prefer_uniform_baseplates
    return options
