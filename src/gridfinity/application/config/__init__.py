"""Configuration schema and loading for drawer plans.

Public API:
    - PlannerConfiguration: Root configuration model
    - DrawerConfig, PrinterConfig, ExclusionZoneConfig, OptionsConfig, DisplayConfig
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - save_config: Write configuration to a JSON file
    - ConfigError: Exception for configuration errors
    - config_to_input: Convert a configuration to a CalculationInput
    - merge_config_with_cli: Apply command line overrides to a configuration

Example:
    >>> from pathlib import Path
    >>> from gridfinity.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("kitchen-drawer.json"))
    ...     print(f"Drawer: {config.drawer.width}x{config.drawer.height}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from gridfinity.application.config.adapter import config_to_input
from gridfinity.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    save_config,
)
from gridfinity.application.config.merger import merge_config_with_cli
from gridfinity.application.config.schema import (
    SUPPORTED_VERSIONS,
    DisplayConfig,
    DrawerConfig,
    ExclusionZoneConfig,
    OptionsConfig,
    PlannerConfiguration,
    PrinterConfig,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "DisplayConfig",
    "DrawerConfig",
    "ExclusionZoneConfig",
    "OptionsConfig",
    "PlannerConfiguration",
    "PrinterConfig",
    "config_to_input",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "save_config",
]
