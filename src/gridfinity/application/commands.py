"""Application commands (use cases) for drawer planning."""

from __future__ import annotations

import logging

from gridfinity.domain import GridCalculator

from .dtos import CalculationInput, CalculationOutput

logger = logging.getLogger(__name__)


class CalculateGridsCommand:
    """Command to plan the baseplates, spacers and half-size pieces for a drawer."""

    def __init__(self, calculator: GridCalculator | None = None) -> None:
        self.calculator = calculator or GridCalculator()

    def execute(self, calculation_input: CalculationInput) -> CalculationOutput:
        """Execute the calculation.

        Invalid input is reported through ``CalculationOutput.errors``
        rather than raised.

        Args:
            calculation_input: Drawer, printer and option values.

        Returns:
            CalculationOutput with one drawer's layout and batch totals.
        """
        errors = calculation_input.validate()
        if errors:
            logger.info("Rejected calculation input: %s", "; ".join(errors))
            return CalculationOutput(num_drawers=calculation_input.num_drawers, errors=errors)

        result = self.calculator.calculate(
            calculation_input.to_drawer_size(),
            calculation_input.to_printer_size(),
            calculation_input.half_size_mode,
            calculation_input.prefer_uniform_baseplates,
        )

        logger.info(
            "Planned %sx%s %s drawer: %d baseplates, %d half-size, %d spacers (mode=%s)",
            calculation_input.drawer_width,
            calculation_input.drawer_height,
            calculation_input.drawer_unit.value,
            sum(result.baseplates.values()),
            sum(result.half_size_bins.values()),
            sum(result.spacers.values()),
            calculation_input.half_size_mode.value,
        )
        return CalculationOutput(result=result, num_drawers=calculation_input.num_drawers)
