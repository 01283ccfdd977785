"""Pytest configuration and shared fixtures for calculator tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from cabinetcalc.domain.value_objects import (
    DoorDimensions,
    DoorOptions,
    FitType,
    OpeningDimensions,
)


FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding JSON calculation fixtures."""
    return FIXTURES_PATH


@pytest.fixture
def standard_opening() -> OpeningDimensions:
    """A 400 x 700 opening, typical of a base cabinet door."""
    return OpeningDimensions(width=400, height=700)


@pytest.fixture
def overlay_options() -> DoorOptions:
    """18mm overlay doors with a 2mm reveal that only inset doors use."""
    return DoorOptions(overlay=18, gap=2, type=FitType.OVERLAY)


@pytest.fixture
def inset_options() -> DoorOptions:
    """Inset doors with a 2mm reveal."""
    return DoorOptions(overlay=18, gap=2, type=FitType.INSET)


@pytest.fixture
def standard_door() -> DoorDimensions:
    """A 400 x 700 door."""
    return DoorDimensions(width=400, height=700)
