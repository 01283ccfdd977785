"""Tests for door and drawer front dimension calculations."""

from __future__ import annotations

import pytest

from cabinetcalc.domain.services.door_drawer import (
    calculate_door_dimensions,
    calculate_double_doors,
    calculate_single_door,
    get_door_material_cuts,
    get_drawer_front_material_cuts,
)
from cabinetcalc.domain.value_objects import (
    DoorDimensions,
    DoorOptions,
    DrawerOptions,
    FitType,
    MaterialCut,
    OpeningDimensions,
)


# =============================================================================
# calculate_door_dimensions
# =============================================================================


class TestCalculateDoorDimensions:
    """Tests for inset and overlay door sizing."""

    def test_overlay_grows_by_twice_overlay(
        self, standard_opening: OpeningDimensions, overlay_options: DoorOptions
    ) -> None:
        result = calculate_door_dimensions(standard_opening, overlay_options)
        assert result == DoorDimensions(width=436, height=736)

    def test_inset_shrinks_by_twice_gap(
        self, standard_opening: OpeningDimensions, inset_options: DoorOptions
    ) -> None:
        result = calculate_door_dimensions(standard_opening, inset_options)
        assert result == DoorDimensions(width=396, height=696)

    def test_inset_ignores_overlay(self, standard_opening: OpeningDimensions) -> None:
        options = DoorOptions(overlay=500, gap=3, type=FitType.INSET)
        assert calculate_door_dimensions(standard_opening, options) == DoorDimensions(
            394, 694
        )

    def test_plain_string_type_is_accepted(
        self, standard_opening: OpeningDimensions
    ) -> None:
        """A raw "inset" string behaves like FitType.INSET."""
        options = DoorOptions(overlay=18, gap=2, type="inset")  # type: ignore[arg-type]
        assert calculate_door_dimensions(standard_opening, options) == DoorDimensions(
            396, 696
        )

    def test_oversized_gap_yields_negative_dimensions(self) -> None:
        """Gaps wider than half the opening are not rejected."""
        opening = OpeningDimensions(width=10, height=10)
        options = DoorOptions(overlay=0, gap=8, type=FitType.INSET)
        assert calculate_door_dimensions(opening, options) == DoorDimensions(-6, -6)


# =============================================================================
# get_door_material_cuts
# =============================================================================


class TestGetDoorMaterialCuts:
    """Tests for wrapping a door into a cut list."""

    def test_defaults(self) -> None:
        cuts = get_door_material_cuts(DoorDimensions(436, 736))
        assert cuts == [MaterialCut(part_name="Door", width=436, height=736, quantity=1)]

    def test_custom_label_and_quantity(self) -> None:
        cuts = get_door_material_cuts(
            DoorDimensions(300, 500), part_name="Wall Door", quantity=4
        )
        assert len(cuts) == 1
        assert cuts[0].part_name == "Wall Door"
        assert cuts[0].quantity == 4


# =============================================================================
# get_drawer_front_material_cuts
# =============================================================================


class TestGetDrawerFrontMaterialCuts:
    """Tests for drawer front cut list entries."""

    def test_overlay_uses_front_height(
        self, standard_opening: OpeningDimensions
    ) -> None:
        options = DrawerOptions(
            box_height=120, front_height=180, overlay=18, gap=2, type=FitType.OVERLAY
        )
        cuts = get_drawer_front_material_cuts(standard_opening, options)
        assert cuts == [
            MaterialCut(part_name="Drawer Front", width=436, height=216, quantity=1)
        ]

    def test_inset_uses_front_height(self, standard_opening: OpeningDimensions) -> None:
        options = DrawerOptions(
            box_height=120, front_height=180, overlay=18, gap=2, type=FitType.INSET
        )
        (cut,) = get_drawer_front_material_cuts(standard_opening, options)
        assert (cut.width, cut.height) == (396, 176)

    def test_opening_height_is_ignored(self) -> None:
        options = DrawerOptions(
            box_height=0, front_height=150, overlay=0, gap=0, type=FitType.OVERLAY
        )
        short = get_drawer_front_material_cuts(OpeningDimensions(400, 100), options)
        tall = get_drawer_front_material_cuts(OpeningDimensions(400, 900), options)
        assert short == tall

    def test_box_height_is_ignored(self, standard_opening: OpeningDimensions) -> None:
        low = DrawerOptions(box_height=80, front_height=150, overlay=18, gap=2)
        high = DrawerOptions(box_height=250, front_height=150, overlay=18, gap=2)
        assert get_drawer_front_material_cuts(
            standard_opening, low
        ) == get_drawer_front_material_cuts(standard_opening, high)

    def test_custom_label_and_quantity(
        self, standard_opening: OpeningDimensions
    ) -> None:
        options = DrawerOptions(box_height=120, front_height=180, overlay=18, gap=2)
        (cut,) = get_drawer_front_material_cuts(
            standard_opening, options, part_name="Top Drawer", quantity=3
        )
        assert cut.part_name == "Top Drawer"
        assert cut.quantity == 3


# =============================================================================
# calculate_single_door
# =============================================================================


class TestCalculateSingleDoor:
    """Tests for the overlay-only single door."""

    def test_with_overlay(
        self, standard_opening: OpeningDimensions, overlay_options: DoorOptions
    ) -> None:
        result = calculate_single_door(standard_opening, overlay_options)
        assert result == DoorDimensions(width=436, height=736)

    def test_zero_overlay_is_identity(
        self, standard_opening: OpeningDimensions
    ) -> None:
        options = DoorOptions(overlay=0, gap=2, type=FitType.OVERLAY)
        assert calculate_single_door(standard_opening, options) == DoorDimensions(
            400, 700
        )

    def test_zero_opening_still_applies_overlay(self) -> None:
        options = DoorOptions(overlay=18, gap=2, type=FitType.OVERLAY)
        result = calculate_single_door(OpeningDimensions(0, 0), options)
        assert result == DoorDimensions(width=36, height=36)

    def test_negative_overlay_shrinks_door(
        self, standard_opening: OpeningDimensions
    ) -> None:
        options = DoorOptions(overlay=-5, gap=2, type=FitType.OVERLAY)
        assert calculate_single_door(standard_opening, options) == DoorDimensions(
            390, 690
        )

    def test_inset_type_still_uses_overlay(
        self, standard_opening: OpeningDimensions, inset_options: DoorOptions
    ) -> None:
        result = calculate_single_door(standard_opening, inset_options)
        assert result == DoorDimensions(width=436, height=736)


# =============================================================================
# calculate_double_doors
# =============================================================================


class TestCalculateDoubleDoors:
    """Tests for splitting an opening into two doors."""

    @pytest.fixture
    def wide_opening(self) -> OpeningDimensions:
        return OpeningDimensions(width=500, height=700)

    def test_with_overlay_and_gap(
        self, wide_opening: OpeningDimensions, overlay_options: DoorOptions
    ) -> None:
        left, right = calculate_double_doors(wide_opening, overlay_options, 3)
        assert left == DoorDimensions(width=266.5, height=736)
        assert right == DoorDimensions(width=266.5, height=736)

    def test_zero_overlay_and_gap(self, wide_opening: OpeningDimensions) -> None:
        options = DoorOptions(overlay=0, gap=2, type=FitType.OVERLAY)
        left, right = calculate_double_doors(wide_opening, options, 0)
        assert left == DoorDimensions(250, 700)
        assert right == DoorDimensions(250, 700)

    def test_small_fractional_gap(
        self, wide_opening: OpeningDimensions, overlay_options: DoorOptions
    ) -> None:
        left, right = calculate_double_doors(wide_opening, overlay_options, 0.1)
        assert left.width == pytest.approx(267.95)
        assert left.height == 736
        assert right == left

    def test_all_zero_input(self) -> None:
        options = DoorOptions(overlay=0, gap=2, type=FitType.OVERLAY)
        left, right = calculate_double_doors(OpeningDimensions(0, 0), options, 0)
        assert left == DoorDimensions(0, 0)
        assert right == DoorDimensions(0, 0)

    @pytest.mark.parametrize(
        ("width", "overlay", "gap_between"),
        [(500, 18, 3), (600, 0, 2), (1200, 12.5, 4), (350, 19, 0)],
    )
    def test_pair_covers_overlaid_opening(
        self, width: float, overlay: float, gap_between: float
    ) -> None:
        """Two doors plus the center gap span the opening plus both overlays."""
        options = DoorOptions(overlay=overlay, gap=0, type=FitType.OVERLAY)
        left, right = calculate_double_doors(
            OpeningDimensions(width, 700), options, gap_between
        )
        assert left == right
        assert left.width * 2 + gap_between == pytest.approx(width + 2 * overlay)

    def test_inset_type_still_uses_overlay(
        self, wide_opening: OpeningDimensions, inset_options: DoorOptions
    ) -> None:
        left, _ = calculate_double_doors(wide_opening, inset_options, 3)
        assert left == DoorDimensions(266.5, 736)
