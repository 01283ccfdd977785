"""Adapter to convert CalculationConfiguration sections to domain objects.

This module provides conversion functions that turn the Pydantic
configuration models into the frozen value objects the calculators accept.
"""

from cabinetcalc.application.config.schema import (
    CalculationConfiguration,
    DoorConfig,
    DoubleDoorConfig,
    DrawerFrontConfig,
)
from cabinetcalc.domain.services import calculate_door_dimensions
from cabinetcalc.domain.value_objects import (
    DoorDimensions,
    DoorOptions,
    DrawerOptions,
    FitType,
    OpeningDimensions,
)


def config_to_opening(config: CalculationConfiguration) -> OpeningDimensions:
    """Convert the opening section to OpeningDimensions."""
    return OpeningDimensions(width=config.opening.width, height=config.opening.height)


def config_to_door_options(config: DoorConfig) -> DoorOptions:
    """Convert a door section to DoorOptions."""
    return DoorOptions(overlay=config.overlay, gap=config.gap, type=config.type)


def config_to_double_door_options(config: DoubleDoorConfig) -> DoorOptions:
    """Convert a double door section to overlay DoorOptions.

    Double doors are overlay-only, so the reveal is always zero.
    """
    return DoorOptions(overlay=config.overlay, gap=0.0, type=FitType.OVERLAY)


def config_to_drawer_options(config: DrawerFrontConfig) -> DrawerOptions:
    """Convert a drawer front section to DrawerOptions."""
    return DrawerOptions(
        box_height=config.box_height,
        front_height=config.front_height,
        overlay=config.overlay,
        gap=config.gap,
        type=config.type,
    )


def config_to_door(config: CalculationConfiguration) -> DoorDimensions:
    """Resolve the door that hardware and shaker sections are applied to.

    Uses the ``door`` section when present. Otherwise the door is taken to
    be exactly the size of the opening.
    """
    opening = config_to_opening(config)
    if config.door is None:
        return DoorDimensions(width=opening.width, height=opening.height)
    return calculate_door_dimensions(opening, config_to_door_options(config.door))
