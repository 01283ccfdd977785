"""Shaker door frame-and-panel calculations."""

from __future__ import annotations

from ..value_objects import DoorDimensions, MaterialCut, ShakerDoorComponents

__all__ = ["calculate_shaker_door_components", "calculate_shaker_door_parts"]


def calculate_shaker_door_parts(
    door: DoorDimensions,
    rail_width: float,
    stile_width: float,
    panel_gap: float = 2,
) -> list[MaterialCut]:
    """Calculate the cut list for a shaker door.

    Stiles run the full door height and rails fit between them. The
    center panel is enlarged by ``panel_gap`` in both directions so it can
    float in the frame grooves.

    Args:
        door: Outer door dimensions.
        rail_width: Width of the horizontal rails.
        stile_width: Width of the vertical stiles.
        panel_gap: Expansion allowance added to the panel.

    Returns:
        Three entries in order: Stile (x2), Rail (x2), Panel (x1).
    """
    rail_length = door.width - 2 * stile_width
    return [
        MaterialCut(
            part_name="Stile", width=stile_width, height=door.height, quantity=2
        ),
        MaterialCut(part_name="Rail", width=rail_length, height=rail_width, quantity=2),
        MaterialCut(
            part_name="Panel",
            width=door.width - 2 * stile_width + panel_gap,
            height=door.height - 2 * rail_width + panel_gap,
            quantity=1,
        ),
    ]


def calculate_shaker_door_components(
    door: DoorDimensions, stile_width: float, rail_width: float
) -> ShakerDoorComponents:
    """Calculate nominal rail, stile and panel lengths for a shaker door.

    Unlike calculate_shaker_door_parts(), the panel carries no expansion
    allowance.
    """
    rail_length = door.width - 2 * stile_width
    return ShakerDoorComponents(
        top_rail=rail_length,
        bottom_rail=rail_length,
        stiles=door.height,
        panel_width=door.width - 2 * stile_width,
        panel_height=door.height - 2 * rail_width,
    )
