"""Hardware placement calculations.

This module derives handle, hinge and drawer system drilling points from
door and drawer box geometry. Points are local to the part they are
drilled into. Brand-specific rules (Blum Clip Top, Blum Tandembox) use
the fixed constants in hardware_constants.
"""

from __future__ import annotations

import logging

from ..value_objects import (
    DoorDimensions,
    HardwareLocation,
    HingePlateLayout,
    HingeType,
    TandemboxDrillPoints,
    TandemboxModel,
)
from .hardware_constants import (
    BLUM_CLIP_TOP_DEFAULT_BOTTOM_GAP,
    BLUM_CLIP_TOP_DEFAULT_TOP_GAP,
    BLUM_CLIP_TOP_MIN_HEIGHT_FOR_3,
    BLUM_CLIP_TOP_MIN_HEIGHT_FOR_4,
    HANDLE_PATTERN,
    HINGE_PATTERN,
    TANDEMBOX_DRILL_OFFSETS,
)

__all__ = [
    "calculate_blum_clip_top_hinge_plate",
    "calculate_blum_tandembox_drill_points",
    "calculate_handle_placement",
    "calculate_hinge_placements",
]

logger = logging.getLogger(__name__)


def calculate_handle_placement(
    door: DoorDimensions, offset_x: float, offset_y: float
) -> HardwareLocation:
    """Place a handle measured inward from the door's far corner.

    Args:
        door: Door dimensions.
        offset_x: Distance in from the right edge.
        offset_y: Distance in from the bottom edge.

    Returns:
        HardwareLocation tagged "handle".
    """
    return HardwareLocation(
        x=door.width - offset_x,
        y=door.height - offset_y,
        pattern=HANDLE_PATTERN,
    )


def calculate_hinge_placements(
    door: DoorDimensions, count: int, edge_offset: float
) -> list[HardwareLocation]:
    """Space hinges evenly along the hinge-side edge of a door.

    The first and last hinges sit ``edge_offset`` in from the door ends;
    the rest are evenly distributed between them. Fewer than two hinges
    collapses to a single hinge at mid-height.

    Args:
        door: Door dimensions.
        count: Number of hinges.
        edge_offset: Distance from the door ends to the outer hinges.

    Returns:
        List of HardwareLocation at x=0, tagged "hinge".
    """
    if count < 2:
        return [HardwareLocation(x=0, y=door.height / 2, pattern=HINGE_PATTERN)]

    usable_height = door.height - 2 * edge_offset
    return [
        HardwareLocation(
            x=0,
            y=edge_offset + usable_height * i / (count - 1),
            pattern=HINGE_PATTERN,
        )
        for i in range(count)
    ]


def calculate_blum_clip_top_hinge_plate(
    door_height: float,
    hinge_type: HingeType | str = HingeType.STRAIGHT,
    top_gap: float | None = None,
    bottom_gap: float | None = None,
) -> HingePlateLayout:
    """Calculate Blum Clip Top hinge positions for a door.

    Hinge count follows door height:
    - Under 900mm: 2 hinges
    - 900mm to under 1600mm: 3 hinges, the middle one at half the door height
    - 1600mm and over: 4 hinges, the middle two at thirds of the span
      between the top and bottom hinges

    Args:
        door_height: Door height in mm.
        hinge_type: Hinge arm style. Accepted for signature compatibility;
            it does not change the layout.
        top_gap: Distance from the top edge to the top hinge (default 100mm).
        bottom_gap: Distance from the bottom edge to the bottom hinge
            (default 100mm).

    Returns:
        HingePlateLayout with top, bottom and optional middle positions.
    """
    t_gap = BLUM_CLIP_TOP_DEFAULT_TOP_GAP if top_gap is None else top_gap
    b_gap = BLUM_CLIP_TOP_DEFAULT_BOTTOM_GAP if bottom_gap is None else bottom_gap

    top_hinge = t_gap
    bottom_hinge = door_height - b_gap
    middle_hinges: tuple[float, ...] | None = None

    if door_height >= BLUM_CLIP_TOP_MIN_HEIGHT_FOR_4:
        span = bottom_hinge - top_hinge
        middle_hinges = (top_hinge + span / 3, top_hinge + 2 * span / 3)
    elif door_height >= BLUM_CLIP_TOP_MIN_HEIGHT_FOR_3:
        # Midpoint of the door, not of the hinge span
        middle_hinges = (door_height / 2,)

    return HingePlateLayout(
        top_hinge=top_hinge,
        bottom_hinge=bottom_hinge,
        middle_hinges=middle_hinges,
    )


def calculate_blum_tandembox_drill_points(
    drawer_box_width: float,
    drawer_box_depth: float,
    slide_length: float,
    model: TandemboxModel | str,
) -> TandemboxDrillPoints:
    """Calculate Blum Tandembox drilling points for a drawer box.

    Each group holds a left/right pair mirrored across the box width.
    Bottom drill points are measured back from the box depth.

    Args:
        drawer_box_width: Drawer box width in mm.
        drawer_box_depth: Drawer box depth in mm.
        slide_length: Runner length in mm. Accepted for signature
            compatibility; it does not change the drilling pattern.
        model: Drawer side model ("M", "B" or "D").

    Returns:
        TandemboxDrillPoints. All groups are empty for an unknown model.
    """
    key = model.value if isinstance(model, TandemboxModel) else model
    offsets = TANDEMBOX_DRILL_OFFSETS.get(key)
    if offsets is None:
        logger.warning(f"Unknown Tandembox model {model!r}, no drill points generated")
        return TandemboxDrillPoints()

    inset, front_offset = offsets
    right = drawer_box_width - inset
    back = drawer_box_depth - inset
    return TandemboxDrillPoints(
        front_bracket=(
            HardwareLocation(x=inset, y=front_offset),
            HardwareLocation(x=right, y=front_offset),
        ),
        side_drill=(
            HardwareLocation(x=inset, y=inset),
            HardwareLocation(x=right, y=inset),
        ),
        bottom_drill=(
            HardwareLocation(x=inset, y=back),
            HardwareLocation(x=right, y=back),
        ),
    )
