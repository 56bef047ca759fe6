"""Unit tests for the plan configuration schema."""

import pytest
from pydantic import ValidationError

from gridfinity.application.config import (
    DrawerConfig,
    OptionsConfig,
    PlannerConfiguration,
    PrinterConfig,
)
from gridfinity.domain import HalfSizeMode, LengthUnit


class TestDrawerConfig:
    """Tests for DrawerConfig."""

    def test_defaults_to_inches(self) -> None:
        assert DrawerConfig(width=22.5, height=16.5).unit is LengthUnit.INCH

    @pytest.mark.parametrize("unit", ["mm", "MM", "millimeters"])
    def test_unit_aliases(self, unit: str) -> None:
        assert DrawerConfig(width=500, height=400, unit=unit).unit is LengthUnit.MM

    def test_unknown_unit(self) -> None:
        with pytest.raises(ValidationError, match="Unsupported unit"):
            DrawerConfig(width=10, height=10, unit="cm")

    @pytest.mark.parametrize(("width", "height"), [(0, 10), (10, -1)])
    def test_dimensions_must_be_positive(self, width: float, height: float) -> None:
        with pytest.raises(ValidationError):
            DrawerConfig(width=width, height=height)

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            DrawerConfig(width=10, height=10, depth=3)


class TestPrinterConfig:
    """Tests for PrinterConfig."""

    def test_empty_is_fallback(self) -> None:
        printer = PrinterConfig()
        assert printer.preset is None
        assert printer.x is None

    def test_known_preset(self) -> None:
        assert PrinterConfig(preset="Bambu Lab A1").preset == "Bambu Lab A1"

    def test_unknown_preset(self) -> None:
        with pytest.raises(ValidationError, match="Unknown printer preset"):
            PrinterConfig(preset="Imaginary Printer 3000")

    def test_preset_and_custom_conflict(self) -> None:
        with pytest.raises(ValidationError, match="not both"):
            PrinterConfig(preset="Bambu Lab A1", x=200, y=200)

    def test_custom_needs_both_axes(self) -> None:
        with pytest.raises(ValidationError, match="both x and y"):
            PrinterConfig(x=200)

    def test_zone_must_leave_usable_bed(self) -> None:
        with pytest.raises(ValidationError, match="no usable bed width"):
            PrinterConfig(x=200, y=200, exclusion_zone={"left": 150, "right": 50})

    def test_negative_zone(self) -> None:
        with pytest.raises(ValidationError):
            PrinterConfig(exclusion_zone={"front": -1})


class TestOptionsConfig:
    """Tests for OptionsConfig."""

    def test_default_mode(self) -> None:
        assert OptionsConfig().resolved_mode is HalfSizeMode.FULL_SIZE

    def test_explicit_mode(self) -> None:
        options = OptionsConfig(half_size_mode="half_size_only")
        assert options.resolved_mode is HalfSizeMode.HALF_SIZE_ONLY

    def test_legacy_flags(self) -> None:
        assert (
            OptionsConfig(prefer_half_size=True).resolved_mode
            is HalfSizeMode.PREFER_HALF_SIZE_FOR_GAPS
        )
        assert (
            OptionsConfig(use_half_size=True, prefer_half_size=True).resolved_mode
            is HalfSizeMode.HALF_SIZE_ONLY
        )

    def test_mode_and_flags_conflict(self) -> None:
        with pytest.raises(ValidationError, match="not both"):
            OptionsConfig(half_size_mode="full_size", use_half_size=True)


class TestPlannerConfiguration:
    """Tests for the root configuration model."""

    def test_minimal(self) -> None:
        config = PlannerConfiguration(
            schema_version="1.0", drawer=DrawerConfig(width=22.5, height=16.5)
        )

        assert config.num_drawers == 1
        assert config.printer == PrinterConfig()
        assert not config.display.use_mm

    def test_newer_minor_version_accepted(self) -> None:
        config = PlannerConfiguration.model_validate(
            {"schema_version": "1.3", "drawer": {"width": 10, "height": 10}}
        )
        assert config.schema_version == "1.3"

    def test_unsupported_major_version(self) -> None:
        with pytest.raises(ValidationError, match="Unsupported schema version"):
            PlannerConfiguration.model_validate(
                {"schema_version": "2.0", "drawer": {"width": 10, "height": 10}}
            )

    def test_malformed_version(self) -> None:
        with pytest.raises(ValidationError):
            PlannerConfiguration.model_validate(
                {"schema_version": "one", "drawer": {"width": 10, "height": 10}}
            )

    def test_at_least_one_drawer(self) -> None:
        with pytest.raises(ValidationError):
            PlannerConfiguration.model_validate(
                {"schema_version": "1.0", "drawer": {"width": 10, "height": 10}, "num_drawers": 0}
            )
