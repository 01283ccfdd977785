"""Domain services for cabinet component calculations.

This package provides:
- Door and drawer front sizing
- Handle, hinge and drawer system hardware placement
- Shaker door frame-and-panel breakdown
- Cut list consolidation
"""

from .cut_list import consolidate_cuts, sort_by_area
from .door_drawer import (
    calculate_door_dimensions,
    calculate_double_doors,
    calculate_single_door,
    get_door_material_cuts,
    get_drawer_front_material_cuts,
)
from .hardware_placement import (
    calculate_blum_clip_top_hinge_plate,
    calculate_blum_tandembox_drill_points,
    calculate_handle_placement,
    calculate_hinge_placements,
)
from .shaker_door import (
    calculate_shaker_door_components,
    calculate_shaker_door_parts,
)

__all__ = [
    "calculate_blum_clip_top_hinge_plate",
    "calculate_blum_tandembox_drill_points",
    "calculate_door_dimensions",
    "calculate_double_doors",
    "calculate_handle_placement",
    "calculate_hinge_placements",
    "calculate_shaker_door_components",
    "calculate_shaker_door_parts",
    "calculate_single_door",
    "consolidate_cuts",
    "get_door_material_cuts",
    "get_drawer_front_material_cuts",
    "sort_by_area",
]
