"""Unit tests for dimension advisories and ValidationResult."""

from typing import Any

from cabinetcalc.application.config import (
    ValidationResult,
    check_dimension_advisories,
    check_hardware_placement,
    load_config_from_dict,
    validate_config,
)


def _config(**sections: Any):
    data: dict[str, Any] = {
        "schema_version": "1.0",
        "opening": {"width": 400, "height": 700},
    }
    data.update(sections)
    return load_config_from_dict(data)


class TestValidationResult:
    """Tests for ValidationResult exit codes and chaining."""

    def test_empty_is_valid(self) -> None:
        result = ValidationResult()
        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_warning_exit_code(self) -> None:
        result = ValidationResult().add_warning("door", "too small")
        assert result.is_valid
        assert result.exit_code == 2

    def test_error_exit_code(self) -> None:
        result = ValidationResult().add_error("door", "bad").add_warning("x", "y")
        assert not result.is_valid
        assert result.exit_code == 1

    def test_merge(self) -> None:
        first = ValidationResult().add_warning("a", "one")
        second = ValidationResult().add_warning("b", "two")
        assert len(first.merge(second).warnings) == 2


class TestDimensionAdvisories:
    """Tests for check_dimension_advisories."""

    def test_sensible_config_has_no_warnings(self) -> None:
        config = _config(
            door={"overlay": 18},
            double_doors={"overlay": 18, "gap_between": 3},
            drawer_front={"front_height": 180, "overlay": 18},
            shaker={"rail_width": 60, "stile_width": 50},
            tandembox={"box_width": 500, "box_depth": 450, "model": "D"},
        )
        assert check_dimension_advisories(config).warnings == []

    def test_negative_inset_door(self) -> None:
        config = _config(
            opening={"width": 10, "height": 700}, door={"gap": 8, "type": "inset"}
        )
        warnings = check_dimension_advisories(config).warnings
        assert [w.path for w in warnings] == ["door"]
        assert "not positive" in warnings[0].message

    def test_double_doors_with_huge_gap(self) -> None:
        config = _config(double_doors={"overlay": 0, "gap_between": 500})
        warnings = check_dimension_advisories(config).warnings
        assert [w.path for w in warnings] == ["double_doors"]

    def test_zero_height_drawer_front(self) -> None:
        config = _config(drawer_front={"front_height": 4, "gap": 2, "type": "inset"})
        warnings = check_dimension_advisories(config).warnings
        assert [w.path for w in warnings] == ["drawer_front"]

    def test_shaker_stiles_too_wide(self) -> None:
        config = _config(shaker={"rail_width": 60, "stile_width": 200})
        warnings = check_dimension_advisories(config).warnings
        assert [w.path for w in warnings] == ["shaker.stile_width"]

    def test_shaker_rails_too_wide(self) -> None:
        config = _config(shaker={"rail_width": 400, "stile_width": 50})
        warnings = check_dimension_advisories(config).warnings
        assert [w.path for w in warnings] == ["shaker.rail_width"]

    def test_unknown_tandembox_model(self) -> None:
        config = _config(tandembox={"box_width": 500, "box_depth": 450, "model": "Q"})
        warnings = check_dimension_advisories(config).warnings
        assert [w.path for w in warnings] == ["tandembox.model"]
        assert warnings[0].suggestion == "Use one of: B, D, M"

    def test_validate_config_includes_advisories(self) -> None:
        config = _config(tandembox={"box_width": 500, "box_depth": 450, "model": "Q"})
        result = validate_config(config)
        assert result.exit_code == 2


class TestHardwarePlacement:
    """Tests for check_hardware_placement errors."""

    def test_hardware_on_the_door_has_no_errors(self) -> None:
        config = _config(
            door={"overlay": 18},
            handle={"offset_x": 40, "offset_y": 80},
            hinges={"count": 3, "edge_offset": 100},
            blum_hinge_plate={},
            tandembox={"box_width": 500, "box_depth": 450, "model": "M"},
        )
        assert check_hardware_placement(config).errors == []

    def test_handle_off_door(self) -> None:
        config = _config(door={"overlay": 18}, handle={"offset_x": 500, "offset_y": -5})
        errors = check_hardware_placement(config).errors
        assert [e.path for e in errors] == ["handle.offset_x", "handle.offset_y"]
        assert errors[0].value == 500
        assert "436 wide" in errors[0].message

    def test_handle_checked_against_opening_without_door(self) -> None:
        config = _config(handle={"offset_x": 401, "offset_y": 0})
        assert [e.path for e in check_hardware_placement(config).errors] == [
            "handle.offset_x"
        ]

    def test_hinge_edge_offset_past_middle(self) -> None:
        config = _config(hinges={"count": 2, "edge_offset": 351})
        errors = check_hardware_placement(config).errors
        assert [e.path for e in errors] == ["hinges.edge_offset"]

    def test_single_hinge_ignores_edge_offset(self) -> None:
        config = _config(hinges={"count": 1, "edge_offset": 1000})
        assert check_hardware_placement(config).errors == []

    def test_blum_gaps_cross(self) -> None:
        config = _config(blum_hinge_plate={"top_gap": 400, "bottom_gap": 300})
        errors = check_hardware_placement(config).errors
        assert [e.path for e in errors] == ["blum_hinge_plate"]
        assert "400" in errors[0].message

    def test_tandembox_box_too_small(self) -> None:
        config = _config(tandembox={"box_width": 84, "box_depth": 84, "model": "B"})
        errors = check_hardware_placement(config).errors
        assert [e.path for e in errors] == [
            "tandembox.box_width",
            "tandembox.box_depth",
        ]

    def test_unknown_tandembox_model_is_not_an_error(self) -> None:
        config = _config(tandembox={"box_width": 10, "box_depth": 10, "model": "Q"})
        assert check_hardware_placement(config).errors == []

    def test_validate_config_fails_on_placement_error(self) -> None:
        config = _config(
            hinges={"count": 2, "edge_offset": 400},
            tandembox={"box_width": 500, "box_depth": 450, "model": "Q"},
        )
        result = validate_config(config)
        assert not result.is_valid
        assert result.has_warnings
        assert result.exit_code == 1
