"""Domain layer - core calculation logic."""

from .entities import Cabinet, Project
from .services import (
    calculate_blum_clip_top_hinge_plate,
    calculate_blum_tandembox_drill_points,
    calculate_door_dimensions,
    calculate_double_doors,
    calculate_handle_placement,
    calculate_hinge_placements,
    calculate_shaker_door_components,
    calculate_shaker_door_parts,
    calculate_single_door,
    consolidate_cuts,
    get_door_material_cuts,
    get_drawer_front_material_cuts,
    sort_by_area,
)
from .value_objects import (
    DoorDimensions,
    DoorOptions,
    DrawerOptions,
    FitType,
    HardwareLocation,
    HingePlateLayout,
    HingeType,
    MaterialCut,
    OpeningDimensions,
    ShakerDoorComponents,
    TandemboxDrillPoints,
    TandemboxModel,
)

__all__ = [
    "Cabinet",
    "DoorDimensions",
    "DoorOptions",
    "DrawerOptions",
    "FitType",
    "HardwareLocation",
    "HingePlateLayout",
    "HingeType",
    "MaterialCut",
    "OpeningDimensions",
    "Project",
    "ShakerDoorComponents",
    "TandemboxDrillPoints",
    "TandemboxModel",
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
