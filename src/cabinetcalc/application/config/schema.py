"""Configuration schema for cabinet component calculations.

This module contains the Pydantic models describing a JSON calculation
file. Every section except ``opening`` is optional; each present section
selects one calculator. Dimensions are deliberately left unconstrained so
that the calculators' permissive arithmetic stays reachable from
configuration files; only types, required fields and counts are checked.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from cabinetcalc.domain.value_objects import FitType, HingeType

# Supported schema versions for configuration files
# Version 1.0: Initial schema with door, drawer front, hardware and shaker sections
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class OpeningConfig(BaseModel):
    """Cabinet opening dimensions.

    Attributes:
        width: Opening width.
        height: Opening height.
    """

    model_config = ConfigDict(extra="forbid")

    width: float
    height: float


class DoorConfig(BaseModel):
    """Configuration for a single door covering the opening.

    Attributes:
        overlay: Overlay per side for overlay doors.
        gap: Reveal per side for inset doors.
        type: Fit style ("inset" or "overlay").
        part_name: Label used in the cut list.
        quantity: Number of identical doors to cut.
    """

    model_config = ConfigDict(extra="forbid")

    overlay: float = 0.0
    gap: float = 0.0
    type: FitType = FitType.OVERLAY
    part_name: str = "Door"
    quantity: int = Field(default=1, ge=1)


class DoubleDoorConfig(BaseModel):
    """Configuration for a pair of overlay doors splitting the opening.

    Attributes:
        overlay: Overlay per side.
        gap_between: Gap between the two doors.
        part_name: Label used in the cut list.
    """

    model_config = ConfigDict(extra="forbid")

    overlay: float = 0.0
    gap_between: float = 0.0
    part_name: str = "Double Door"


class DrawerFrontConfig(BaseModel):
    """Configuration for a drawer front in the opening.

    Attributes:
        box_height: Height of the drawer box.
        front_height: Height of the drawer front before fit adjustment.
        overlay: Overlay per side for overlay fronts.
        gap: Reveal per side for inset fronts.
        type: Fit style ("inset" or "overlay").
        part_name: Label used in the cut list.
        quantity: Number of identical fronts to cut.
    """

    model_config = ConfigDict(extra="forbid")

    box_height: float = 0.0
    front_height: float
    overlay: float = 0.0
    gap: float = 0.0
    type: FitType = FitType.OVERLAY
    part_name: str = "Drawer Front"
    quantity: int = Field(default=1, ge=1)


class HandleConfig(BaseModel):
    """Handle offsets measured in from the door's right and bottom edges."""

    model_config = ConfigDict(extra="forbid")

    offset_x: float
    offset_y: float


class HingeConfig(BaseModel):
    """Evenly spaced hinge configuration.

    Attributes:
        count: Number of hinges (fewer than two places one centered hinge).
        edge_offset: Distance from the door ends to the outer hinges.
    """

    model_config = ConfigDict(extra="forbid")

    count: int = 2
    edge_offset: float = 0.0


class BlumHingePlateConfig(BaseModel):
    """Blum Clip Top hinge plate configuration.

    Attributes:
        hinge_type: Hinge arm style.
        top_gap: Distance from the top edge to the top hinge (default 100mm).
        bottom_gap: Distance from the bottom edge to the bottom hinge (default 100mm).
    """

    model_config = ConfigDict(extra="forbid")

    hinge_type: HingeType = HingeType.STRAIGHT
    top_gap: float | None = None
    bottom_gap: float | None = None


class TandemboxConfig(BaseModel):
    """Blum Tandembox drawer system configuration.

    ``model`` is kept as a free string; unrecognized models produce no
    drill points and a warning rather than a schema error.
    """

    model_config = ConfigDict(extra="forbid")

    box_width: float
    box_depth: float
    slide_length: float = 500.0
    model: str = "M"


class ShakerConfig(BaseModel):
    """Shaker door frame configuration.

    Attributes:
        rail_width: Width of the horizontal rails.
        stile_width: Width of the vertical stiles.
        panel_gap: Expansion allowance added to the center panel.
    """

    model_config = ConfigDict(extra="forbid")

    rail_width: float
    stile_width: float
    panel_gap: float = 2.0


class CalculationConfiguration(BaseModel):
    """Root configuration model for a calculation file.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        opening: Cabinet opening dimensions
        door: Single door sizing (optional)
        double_doors: Double door sizing (optional)
        drawer_front: Drawer front sizing (optional)
        handle: Handle placement on the door (optional)
        hinges: Evenly spaced hinges on the door (optional)
        blum_hinge_plate: Blum Clip Top hinge layout for the door (optional)
        tandembox: Blum Tandembox drill points (optional)
        shaker: Shaker frame-and-panel breakdown of the door (optional)

    Example:
        >>> config = CalculationConfiguration(
        ...     schema_version="1.0",
        ...     opening=OpeningConfig(width=400, height=700),
        ...     door=DoorConfig(overlay=18),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    opening: OpeningConfig
    door: DoorConfig | None = None
    double_doors: DoubleDoorConfig | None = None
    drawer_front: DrawerFrontConfig | None = None
    handle: HandleConfig | None = None
    hinges: HingeConfig | None = None
    blum_hinge_plate: BlumHingePlateConfig | None = None
    tandembox: TandemboxConfig | None = None
    shaker: ShakerConfig | None = None

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
