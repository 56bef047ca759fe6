"""Infrastructure layer - formatters, exporters and diagram rendering."""

from .formatters import (
    DimensionValidation,
    JsonExporter,
    ParsedDimension,
    ResultFormatter,
    format_build_volume,
    format_dimension,
    parse_dimension,
    validate_dimension,
)
from .layout_renderer import LayoutDiagramRenderer, get_color

__all__ = [
    "DimensionValidation",
    "JsonExporter",
    "LayoutDiagramRenderer",
    "ParsedDimension",
    "ResultFormatter",
    "format_build_volume",
    "format_dimension",
    "get_color",
    "parse_dimension",
    "validate_dimension",
]
