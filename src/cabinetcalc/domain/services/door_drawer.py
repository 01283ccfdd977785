"""Door and drawer front dimension calculations.

Converts an opening plus a fit style into outer door/drawer front sizes
and wraps those sizes into cut list entries. Arithmetic is unchecked:
zero and negative inputs are accepted and whatever the formula yields
(including negative dimensions) is returned to the caller.
"""

from __future__ import annotations

from ..value_objects import (
    DoorDimensions,
    DoorOptions,
    DrawerOptions,
    FitType,
    MaterialCut,
    OpeningDimensions,
)

__all__ = [
    "calculate_door_dimensions",
    "calculate_double_doors",
    "calculate_single_door",
    "get_door_material_cuts",
    "get_drawer_front_material_cuts",
]


def _fit(length: float, overlay: float, gap: float, fit_type: FitType) -> float:
    """Adjust one axis of an opening for the fit style."""
    if fit_type == FitType.INSET:
        return length - gap * 2
    return length + overlay * 2


def calculate_door_dimensions(
    opening: OpeningDimensions, options: DoorOptions
) -> DoorDimensions:
    """Calculate the outer size of a door for an opening.

    Inset doors shrink by the reveal on every side; overlay doors grow by
    the overlay on every side.

    Args:
        opening: Cabinet opening.
        options: Door fit options.

    Returns:
        DoorDimensions for a single door covering the opening.
    """
    return DoorDimensions(
        width=_fit(opening.width, options.overlay, options.gap, options.type),
        height=_fit(opening.height, options.overlay, options.gap, options.type),
    )


def get_door_material_cuts(
    door: DoorDimensions, part_name: str = "Door", quantity: int = 1
) -> list[MaterialCut]:
    """Wrap door dimensions into a single cut list entry."""
    return [
        MaterialCut(
            part_name=part_name,
            width=door.width,
            height=door.height,
            quantity=quantity,
        )
    ]


def get_drawer_front_material_cuts(
    opening: OpeningDimensions,
    options: DrawerOptions,
    part_name: str = "Drawer Front",
    quantity: int = 1,
) -> list[MaterialCut]:
    """Calculate the cut list entry for a drawer front.

    Width follows the opening; height follows ``options.front_height``
    rather than the opening height, since drawer fronts rarely span the
    full opening.

    Args:
        opening: Cabinet opening.
        options: Drawer front fit options.
        part_name: Label for the cut list entry.
        quantity: Number of identical fronts.

    Returns:
        List with exactly one MaterialCut.
    """
    return [
        MaterialCut(
            part_name=part_name,
            width=_fit(opening.width, options.overlay, options.gap, options.type),
            height=_fit(
                options.front_height, options.overlay, options.gap, options.type
            ),
            quantity=quantity,
        )
    ]


def calculate_single_door(
    opening: OpeningDimensions, options: DoorOptions
) -> DoorDimensions:
    """Calculate a single overlay door, ignoring ``options.type``.

    The overlay is applied to all four sides.
    """
    return DoorDimensions(
        width=opening.width + options.overlay * 2,
        height=opening.height + options.overlay * 2,
    )


def calculate_double_doors(
    opening: OpeningDimensions, options: DoorOptions, gap_between: float
) -> tuple[DoorDimensions, DoorDimensions]:
    """Split one opening into a pair of overlay doors.

    Each door covers half of the overlaid opening width less half the
    center gap. Both doors share the full overlaid height.

    Args:
        opening: Cabinet opening.
        options: Door fit options (only ``overlay`` is used).
        gap_between: Gap between the two doors at the center.

    Returns:
        Tuple of (left_door, right_door); the two are numerically identical.
    """
    single_width = (opening.width + options.overlay * 2 - gap_between) / 2
    height = opening.height + options.overlay * 2
    door = DoorDimensions(width=single_width, height=height)
    return door, door
