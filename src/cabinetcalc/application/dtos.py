"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from cabinetcalc.domain import (
    DoorDimensions,
    HardwareLocation,
    HingePlateLayout,
    MaterialCut,
    ShakerDoorComponents,
    TandemboxDrillPoints,
)


@dataclass
class CalculationOutput:
    """Output DTO for a calculation run.

    Sections that were not configured are None (or empty for lists).

    Attributes:
        door: Door the hardware and shaker results refer to.
        double_doors: Left and right doors of a double door pair.
        drawer_front_cuts: Cut list entries for the drawer front.
        handle: Handle location on the door.
        hinges: Evenly spaced hinge locations on the door.
        blum_hinge_plate: Blum Clip Top hinge layout for the door.
        tandembox: Blum Tandembox drill points.
        shaker_components: Nominal shaker rail, stile and panel lengths.
        cut_list: Consolidated cut list across all configured parts.
        warnings: Non-blocking advisories about the results.
    """

    door: DoorDimensions | None = None
    double_doors: tuple[DoorDimensions, DoorDimensions] | None = None
    drawer_front_cuts: list[MaterialCut] = field(default_factory=list)
    handle: HardwareLocation | None = None
    hinges: list[HardwareLocation] = field(default_factory=list)
    blum_hinge_plate: HingePlateLayout | None = None
    tandembox: TandemboxDrillPoints | None = None
    shaker_components: ShakerDoorComponents | None = None
    cut_list: list[MaterialCut] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def has_hardware(self) -> bool:
        """Check if any hardware placement was calculated."""
        return bool(
            self.handle
            or self.hinges
            or self.blum_hinge_plate
            or self.tandembox
        )
