"""Value objects for the cabinet calculation domain.

This module provides immutable data types used throughout the calculators.
All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Openings, doors, drawer fronts and cut lists
from ._core_geometry import (
    DoorDimensions,
    DoorOptions,
    DrawerOptions,
    FitType,
    HardwareLocation,
    MaterialCut,
    OpeningDimensions,
)

# Hinges, drawer systems and shaker frames
from ._hardware import (
    HingePlateLayout,
    HingeType,
    ShakerDoorComponents,
    TandemboxDrillPoints,
    TandemboxModel,
)

__all__ = [
    "DoorDimensions",
    "DoorOptions",
    "DrawerOptions",
    "FitType",
    "HardwareLocation",
    "HingePlateLayout",
    "HingeType",
    "MaterialCut",
    "OpeningDimensions",
    "ShakerDoorComponents",
    "TandemboxDrillPoints",
    "TandemboxModel",
]
