"""Application commands (use cases) for cabinet component calculations."""

from __future__ import annotations

import logging
from dataclasses import replace

from cabinetcalc.application.config import (
    CalculationConfiguration,
    config_to_door,
    config_to_double_door_options,
    config_to_drawer_options,
    config_to_opening,
    validate_config,
)
from cabinetcalc.domain import (
    MaterialCut,
    calculate_blum_clip_top_hinge_plate,
    calculate_blum_tandembox_drill_points,
    calculate_double_doors,
    calculate_handle_placement,
    calculate_hinge_placements,
    calculate_shaker_door_components,
    calculate_shaker_door_parts,
    consolidate_cuts,
    get_door_material_cuts,
    get_drawer_front_material_cuts,
)

from .dtos import CalculationOutput

logger = logging.getLogger(__name__)


class CalculateCommand:
    """Command to run every configured section through its calculator.

    The door (from the ``door`` section, or the bare opening) feeds the
    handle, hinge, Blum hinge plate and shaker calculations. A shaker
    section replaces the solid door slab in the cut list with its
    stiles, rails and panel, once per door in the ``door`` quantity.
    """

    def execute(self, config: CalculationConfiguration) -> CalculationOutput:
        """Execute the calculation command.

        Args:
            config: A validated calculation configuration.

        Returns:
            CalculationOutput with every configured result, a consolidated
            cut list and any validation findings. Hardware placement errors
            are reported as warnings here; results are still calculated.
        """
        output = CalculationOutput()
        cuts: list[MaterialCut] = []
        opening = config_to_opening(config)
        door = config_to_door(config)

        if config.door is not None:
            output.door = door
            if config.shaker is None:
                cuts.extend(
                    get_door_material_cuts(
                        door, config.door.part_name, config.door.quantity
                    )
                )

        if config.double_doors is not None:
            pair = calculate_double_doors(
                opening,
                config_to_double_door_options(config.double_doors),
                config.double_doors.gap_between,
            )
            output.double_doors = pair
            cuts.extend(
                get_door_material_cuts(pair[0], config.double_doors.part_name, 2)
            )

        if config.drawer_front is not None:
            output.drawer_front_cuts = get_drawer_front_material_cuts(
                opening,
                config_to_drawer_options(config.drawer_front),
                config.drawer_front.part_name,
                config.drawer_front.quantity,
            )
            cuts.extend(output.drawer_front_cuts)

        if config.handle is not None:
            output.handle = calculate_handle_placement(
                door, config.handle.offset_x, config.handle.offset_y
            )

        if config.hinges is not None:
            output.hinges = calculate_hinge_placements(
                door, config.hinges.count, config.hinges.edge_offset
            )

        if config.blum_hinge_plate is not None:
            output.blum_hinge_plate = calculate_blum_clip_top_hinge_plate(
                door.height,
                config.blum_hinge_plate.hinge_type,
                config.blum_hinge_plate.top_gap,
                config.blum_hinge_plate.bottom_gap,
            )

        if config.tandembox is not None:
            output.tandembox = calculate_blum_tandembox_drill_points(
                config.tandembox.box_width,
                config.tandembox.box_depth,
                config.tandembox.slide_length,
                config.tandembox.model,
            )

        if config.shaker is not None:
            output.shaker_components = calculate_shaker_door_components(
                door, config.shaker.stile_width, config.shaker.rail_width
            )
            doors = config.door.quantity if config.door is not None else 1
            cuts.extend(
                replace(part, quantity=part.quantity * doors)
                for part in calculate_shaker_door_parts(
                    door,
                    config.shaker.rail_width,
                    config.shaker.stile_width,
                    config.shaker.panel_gap,
                )
            )

        output.cut_list = consolidate_cuts(cuts)
        checks = validate_config(config)
        output.warnings = [error.message for error in checks.errors] + [
            warning.message for warning in checks.warnings
        ]
        logger.debug(
            f"Calculated {len(output.cut_list)} cut list entries "
            f"with {len(output.warnings)} warnings"
        )
        return output
