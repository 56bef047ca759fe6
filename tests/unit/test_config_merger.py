"""Unit tests for configuration merger and adapter.

These tests verify:
- CLI args override config values when provided
- CLI args are ignored when None
- A plan can be built from CLI args alone
- Adapter keeps the drawer unit and resolves printers
"""

import pytest

from gridfinity.application import CalculateGridsCommand
from gridfinity.application.config import (
    ConfigError,
    DrawerConfig,
    ExclusionZoneConfig,
    OptionsConfig,
    PlannerConfiguration,
    PrinterConfig,
    config_to_input,
    merge_config_with_cli,
)
from gridfinity.domain import HalfSizeMode, LengthUnit


@pytest.fixture
def base_config() -> PlannerConfiguration:
    return PlannerConfiguration(
        schema_version="1.0",
        drawer=DrawerConfig(width=22.5, height=16.5),
        printer=PrinterConfig(
            preset="Bambu Lab X1C", exclusion_zone=ExclusionZoneConfig(left=5)
        ),
        options=OptionsConfig(prefer_half_size=True),
        num_drawers=2,
    )


class TestMergeConfigWithCli:
    """Tests for merge_config_with_cli."""

    def test_no_overrides_returns_equivalent_config(
        self, base_config: PlannerConfiguration
    ) -> None:
        merged = merge_config_with_cli(base_config)

        assert merged.model_dump() == base_config.model_dump()

    def test_override_drawer(self, base_config: PlannerConfiguration) -> None:
        merged = merge_config_with_cli(base_config, width=500, unit=LengthUnit.MM)

        assert merged.drawer.width == 500
        assert merged.drawer.height == 16.5
        assert merged.drawer.unit is LengthUnit.MM

    def test_custom_bed_replaces_preset(self, base_config: PlannerConfiguration) -> None:
        merged = merge_config_with_cli(base_config, printer_x=300, printer_y=200)

        assert merged.printer.preset is None
        assert (merged.printer.x, merged.printer.y) == (300, 200)
        zone = merged.printer.exclusion_zone
        assert zone is not None
        assert (zone.front, zone.left) == (0, 5)

    def test_preset_replaces_custom_bed(self) -> None:
        config = PlannerConfiguration(
            schema_version="1.0",
            drawer=DrawerConfig(width=10, height=10),
            printer=PrinterConfig(x=300, y=300, z=300),
        )

        merged = merge_config_with_cli(config, preset="Bambu Lab A1 Mini")

        assert merged.printer.preset == "Bambu Lab A1 Mini"
        assert merged.printer.x is None
        assert merged.printer.z is None

    def test_exclusion_zone_overrides_per_edge(
        self, base_config: PlannerConfiguration
    ) -> None:
        merged = merge_config_with_cli(base_config, exclusion_zone={"front": 8})

        zone = merged.printer.exclusion_zone
        assert zone is not None
        assert (zone.front, zone.back, zone.left, zone.right) == (8, 0, 5, 0)

    def test_mode_replaces_legacy_flags(self, base_config: PlannerConfiguration) -> None:
        merged = merge_config_with_cli(base_config, half_size_mode=HalfSizeMode.HALF_SIZE_ONLY)

        assert merged.options.half_size_mode is HalfSizeMode.HALF_SIZE_ONLY
        assert not merged.options.prefer_half_size
        assert merged.options.resolved_mode is HalfSizeMode.HALF_SIZE_ONLY

    def test_scalar_overrides(self, base_config: PlannerConfiguration) -> None:
        merged = merge_config_with_cli(
            base_config, num_drawers=5, prefer_uniform_baseplates=True, use_mm=True
        )

        assert merged.num_drawers == 5
        assert merged.options.prefer_uniform_baseplates
        assert merged.display.use_mm

    def test_original_not_modified(self, base_config: PlannerConfiguration) -> None:
        merge_config_with_cli(base_config, width=1, num_drawers=9)

        assert base_config.drawer.width == 22.5
        assert base_config.num_drawers == 2

    def test_without_base_config(self) -> None:
        merged = merge_config_with_cli(None, width=22.5, height=16.5)

        assert merged.schema_version == "1.0"
        assert merged.drawer.unit is LengthUnit.INCH
        assert merged.printer == PrinterConfig()

    def test_without_base_config_needs_drawer(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            merge_config_with_cli(None, width=22.5)

        assert exc_info.value.details[0]["path"] == "drawer.height"

    def test_invalid_override_rejected(self, base_config: PlannerConfiguration) -> None:
        with pytest.raises(ConfigError):
            merge_config_with_cli(base_config, width=-3)


class TestConfigToInput:
    """Tests for config_to_input."""

    def test_preset_and_zone(self, base_config: PlannerConfiguration) -> None:
        calculation_input = config_to_input(base_config)

        assert calculation_input.drawer_width == 22.5
        assert (calculation_input.printer_x, calculation_input.printer_y) == (256, 256)
        assert calculation_input.exclusion_zone is not None
        assert calculation_input.exclusion_zone.left == 5
        assert calculation_input.half_size_mode is HalfSizeMode.PREFER_HALF_SIZE_FOR_GAPS
        assert calculation_input.num_drawers == 2

    def test_mm_drawer_stays_in_mm(self) -> None:
        config = PlannerConfiguration(
            schema_version="1.0",
            drawer=DrawerConfig(width=571.5, height=419.1, unit="mm"),
        )

        calculation_input = config_to_input(config)

        assert calculation_input.drawer_width == 571.5
        assert calculation_input.drawer_height == 419.1
        assert calculation_input.drawer_unit is LengthUnit.MM

    def test_whole_cell_mm_drawer_needs_no_spacers(self) -> None:
        config = PlannerConfiguration(
            schema_version="1.0",
            drawer=DrawerConfig(width=420, height=420, unit="mm"),
        )

        output = CalculateGridsCommand().execute(config_to_input(config))

        assert output.is_valid
        assert output.result.spacers == {}

    def test_custom_bed(self) -> None:
        config = PlannerConfiguration(
            schema_version="1.0",
            drawer=DrawerConfig(width=10, height=10),
            printer=PrinterConfig(x=300, y=200),
        )

        calculation_input = config_to_input(config)

        assert (calculation_input.printer_x, calculation_input.printer_y) == (300, 200)
        assert calculation_input.printer_z is None

    def test_fallback_bed(self) -> None:
        config = PlannerConfiguration(
            schema_version="1.0", drawer=DrawerConfig(width=10, height=10)
        )

        calculation_input = config_to_input(config)

        assert (calculation_input.printer_x, calculation_input.printer_y) == (256, 256)
        assert calculation_input.exclusion_zone is None
