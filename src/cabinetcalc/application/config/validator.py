"""Validation structures, hardware placement checks and dimension advisories.

Calculations never reject inputs. This module reports hardware that would be
drilled outside its door or drawer box as errors, and sizes that are
physically meaningless (non-positive doors, frames wider than the door,
unknown drawer systems) as non-blocking warnings.
"""

from dataclasses import dataclass, field
from typing import Any

from cabinetcalc.application.config.adapter import (
    config_to_door,
    config_to_double_door_options,
    config_to_drawer_options,
    config_to_opening,
)
from cabinetcalc.application.config.schema import CalculationConfiguration
from cabinetcalc.domain.services import (
    calculate_blum_clip_top_hinge_plate,
    calculate_double_doors,
    calculate_handle_placement,
    get_drawer_front_material_cuts,
)
from cabinetcalc.domain.services.hardware_constants import TANDEMBOX_DRILL_OFFSETS


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "door.overlay")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        """Check if the configuration has any warnings."""
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def _check_positive(
    result: ValidationResult, path: str, label: str, width: float, height: float
) -> None:
    if width <= 0 or height <= 0:
        result.add_warning(
            path=path,
            message=f"{label} size {width:g} x {height:g} is not positive",
            suggestion="Check the opening size against the overlay or gap",
        )


def check_dimension_advisories(config: CalculationConfiguration) -> ValidationResult:
    """Check calculated sizes for physically meaningless results.

    Advisories checked:
    - Door, double door and drawer front sizes that are zero or negative
    - Shaker stiles or rails that leave no room for the center panel
    - Tandembox models with no drilling pattern

    Args:
        config: A validated CalculationConfiguration instance

    Returns:
        ValidationResult containing any warnings found
    """
    result = ValidationResult()
    opening = config_to_opening(config)
    door = config_to_door(config)

    if config.door is not None:
        _check_positive(result, "door", "Door", door.width, door.height)

    if config.double_doors is not None:
        left, _ = calculate_double_doors(
            opening,
            config_to_double_door_options(config.double_doors),
            config.double_doors.gap_between,
        )
        _check_positive(result, "double_doors", "Double door", left.width, left.height)

    if config.drawer_front is not None:
        (front,) = get_drawer_front_material_cuts(
            opening, config_to_drawer_options(config.drawer_front)
        )
        _check_positive(
            result, "drawer_front", "Drawer front", front.width, front.height
        )

    if config.shaker is not None:
        if door.width - 2 * config.shaker.stile_width <= 0:
            result.add_warning(
                path="shaker.stile_width",
                message=(
                    f"Stiles of {config.shaker.stile_width:g} leave no panel width "
                    f"on a {door.width:g} wide door"
                ),
            )
        if door.height - 2 * config.shaker.rail_width <= 0:
            result.add_warning(
                path="shaker.rail_width",
                message=(
                    f"Rails of {config.shaker.rail_width:g} leave no panel height "
                    f"on a {door.height:g} high door"
                ),
            )

    if (
        config.tandembox is not None
        and config.tandembox.model not in TANDEMBOX_DRILL_OFFSETS
    ):
        result.add_warning(
            path="tandembox.model",
            message=f"Unknown Tandembox model '{config.tandembox.model}'",
            suggestion=f"Use one of: {', '.join(sorted(TANDEMBOX_DRILL_OFFSETS))}",
        )

    return result


def check_hardware_placement(config: CalculationConfiguration) -> ValidationResult:
    """Check that every drilled point lands on the part it is drilled into.

    Errors checked:
    - Handle offsets that put the handle off the door
    - Hinge edge offsets that put the outer hinges off the door, or past
      each other
    - Blum gaps that put the top hinge at or below the bottom hinge
    - Tandembox edge insets wider than the drawer box

    Args:
        config: A validated CalculationConfiguration instance

    Returns:
        ValidationResult containing any errors found
    """
    result = ValidationResult()
    door = config_to_door(config)

    if config.handle is not None:
        handle = calculate_handle_placement(
            door, config.handle.offset_x, config.handle.offset_y
        )
        if not 0 <= handle.x <= door.width:
            result.add_error(
                "handle.offset_x",
                f"Handle falls outside a {door.width:g} wide door",
                config.handle.offset_x,
            )
        if not 0 <= handle.y <= door.height:
            result.add_error(
                "handle.offset_y",
                f"Handle falls outside a {door.height:g} high door",
                config.handle.offset_y,
            )

    if config.hinges is not None and config.hinges.count >= 2:
        edge_offset = config.hinges.edge_offset
        if edge_offset < 0 or 2 * edge_offset > door.height:
            result.add_error(
                "hinges.edge_offset",
                f"Outer hinges fall outside a {door.height:g} high door",
                edge_offset,
            )

    if config.blum_hinge_plate is not None:
        layout = calculate_blum_clip_top_hinge_plate(
            door.height,
            config.blum_hinge_plate.hinge_type,
            config.blum_hinge_plate.top_gap,
            config.blum_hinge_plate.bottom_gap,
        )
        if layout.top_hinge >= layout.bottom_hinge:
            result.add_error(
                "blum_hinge_plate",
                f"Top hinge at {layout.top_hinge:g} is not above bottom hinge "
                f"at {layout.bottom_hinge:g}",
            )

    tandembox = config.tandembox
    if tandembox is not None and tandembox.model in TANDEMBOX_DRILL_OFFSETS:
        inset, _ = TANDEMBOX_DRILL_OFFSETS[tandembox.model]
        if 2 * inset >= tandembox.box_width:
            result.add_error(
                "tandembox.box_width",
                f"Model {tandembox.model} needs a box wider than {2 * inset:g}",
                tandembox.box_width,
            )
        if 2 * inset >= tandembox.box_depth:
            result.add_error(
                "tandembox.box_depth",
                f"Model {tandembox.model} needs a box deeper than {2 * inset:g}",
                tandembox.box_depth,
            )

    return result


def validate_config(config: CalculationConfiguration) -> ValidationResult:
    """Perform full validation of a loaded configuration.

    Schema errors are raised by the loader. This adds hardware placement
    errors and dimension advisories.
    """
    return (
        ValidationResult()
        .merge(check_hardware_placement(config))
        .merge(check_dimension_advisories(config))
    )
