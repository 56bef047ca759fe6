"""Pytest configuration and shared fixtures for planner tests."""

from __future__ import annotations

import pytest

from gridfinity.domain import (
    DrawerSize,
    GridCalculator,
    PreciseMath,
    PrinterSize,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def math() -> PreciseMath:
    """A fresh arithmetic layer with default precision."""
    return PreciseMath()


@pytest.fixture
def calculator(math: PreciseMath) -> GridCalculator:
    """A GridCalculator wired to its own arithmetic layer."""
    return GridCalculator(math)


@pytest.fixture
def printer_256() -> PrinterSize:
    """A 256mm cube build volume (Bambu Lab X1C class)."""
    return PrinterSize(x=256, y=256, z=256)


@pytest.fixture
def kitchen_drawer() -> DrawerSize:
    """A 22.5" x 16.5" drawer, the worked example used throughout the tests."""
    return DrawerSize(width=22.5, height=16.5)
