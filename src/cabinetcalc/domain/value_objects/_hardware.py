"""Hardware value objects: hinge layouts, drawer system drilling, shaker parts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ._core_geometry import HardwareLocation


class HingeType(str, Enum):
    """Blum Clip Top hinge arm styles."""

    STRAIGHT = "straight"
    CRANKED = "cranked"


class TandemboxModel(str, Enum):
    """Blum Tandembox drawer side heights."""

    M = "M"
    B = "B"
    D = "D"


@dataclass(frozen=True)
class HingePlateLayout:
    """Blum Clip Top hinge plate positions along a door edge.

    Attributes:
        top_hinge: Position of the top hinge, measured from the top edge.
        bottom_hinge: Position of the bottom hinge.
        middle_hinges: Positions of intermediate hinges, or None for
            two-hinge doors.
    """

    top_hinge: float
    bottom_hinge: float
    middle_hinges: tuple[float, ...] | None = None

    @property
    def hinge_count(self) -> int:
        """Total number of hinges on the door."""
        return 2 + len(self.middle_hinges or ())

    @property
    def positions(self) -> tuple[float, ...]:
        """All hinge positions, top first."""
        return (self.top_hinge, *(self.middle_hinges or ()), self.bottom_hinge)


@dataclass(frozen=True)
class TandemboxDrillPoints:
    """Drilling points for a Blum Tandembox drawer, grouped by purpose."""

    front_bracket: tuple[HardwareLocation, ...] = ()
    side_drill: tuple[HardwareLocation, ...] = ()
    bottom_drill: tuple[HardwareLocation, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True when no group has any points (unknown model)."""
        return not (self.front_bracket or self.side_drill or self.bottom_drill)


@dataclass(frozen=True)
class ShakerDoorComponents:
    """Nominal joinery lengths for a shaker door frame and panel.

    Panel dimensions exclude any expansion gap.
    """

    top_rail: float
    bottom_rail: float
    stiles: float
    panel_width: float
    panel_height: float
