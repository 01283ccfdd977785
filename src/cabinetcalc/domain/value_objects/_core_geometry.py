"""Core geometry value objects for doors, drawer fronts and cut lists."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FitType(str, Enum):
    """How a door or drawer front sits relative to its opening."""

    INSET = "inset"
    OVERLAY = "overlay"


@dataclass(frozen=True)
class OpeningDimensions:
    """Rough cabinet opening a door or drawer front must fit.

    Width and height share one linear unit (commonly millimeters).
    """

    width: float
    height: float


@dataclass(frozen=True)
class DoorOptions:
    """Fit options for a door.

    Attributes:
        overlay: Amount the door face extends past the opening on each side
            (overlay doors).
        gap: Reveal left inside the opening on each side (inset doors).
        type: Fit style. Only the matching field is used by a calculation.
    """

    overlay: float
    gap: float
    type: FitType = FitType.OVERLAY


@dataclass(frozen=True)
class DoorDimensions:
    """Outer size of a single door panel."""

    width: float
    height: float

    @property
    def area(self) -> float:
        """Face area (width x height)."""
        return self.width * self.height


@dataclass(frozen=True)
class DrawerOptions:
    """Fit options for a drawer front.

    The front height is independent of the internal box height and of
    the opening height.

    Attributes:
        box_height: Height of the drawer box behind the front.
        front_height: Height of the visible drawer front before fit adjustment.
        overlay: Overlay per side (overlay fronts).
        gap: Reveal per side (inset fronts).
        type: Fit style.
    """

    box_height: float
    front_height: float
    overlay: float
    gap: float
    type: FitType = FitType.OVERLAY


@dataclass(frozen=True)
class MaterialCut:
    """One line item in a cut list: ``quantity`` identical pieces."""

    part_name: str
    width: float
    height: float
    quantity: int = 1

    @property
    def area(self) -> float:
        """Total area for all pieces of this line item."""
        return self.width * self.height * self.quantity


@dataclass(frozen=True)
class HardwareLocation:
    """A drilling or placement point in a part's local coordinates.

    Unlike global cabinet positions, negative coordinates are allowed and
    simply propagate from the inputs.
    """

    x: float
    y: float
    pattern: str | None = None
