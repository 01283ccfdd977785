"""Output formatters and exporters for calculation results."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from enum import Enum
from pathlib import Path
from typing import Any

from cabinetcalc.application.dtos import CalculationOutput
from cabinetcalc.domain import HardwareLocation, MaterialCut, sort_by_area

logger = logging.getLogger(__name__)


class CutListFormatter:
    """Formats cut lists for display.

    Pieces are listed largest total area first, the order they are usually
    cut in, unless the formatter is built with ``largest_first=False``.
    """

    def __init__(self, largest_first: bool = True) -> None:
        self._largest_first = largest_first

    def format(self, cut_list: list[MaterialCut]) -> str:
        """Format cut list as a table with a total area row."""
        if not cut_list:
            return "No pieces in cut list."
        if self._largest_first:
            cut_list = sort_by_area(cut_list)

        lines = [
            "CUT LIST",
            "=" * 70,
            f"{'Piece':<20} {'Width':<10} {'Height':<10} {'Qty':<6} {'Area'}",
            "-" * 70,
        ]

        total_area = 0.0
        for cut in cut_list:
            lines.append(
                f"{cut.part_name:<20} {cut.width:<10.2f} {cut.height:<10.2f} "
                f"{cut.quantity:<6} {cut.area:.1f}"
            )
            total_area += cut.area

        lines.append("-" * 70)
        lines.append(f"{'TOTAL':<20} {'':<10} {'':<10} {'':<6} {total_area:.1f}")

        return "\n".join(lines)


class DimensionReportFormatter:
    """Formats door, double door and shaker component sizes."""

    def format(self, output: CalculationOutput) -> str:
        lines = ["DIMENSIONS", "=" * 60]

        if output.door is not None:
            lines.append(f"Door: {output.door.width:.2f} x {output.door.height:.2f}")

        if output.double_doors is not None:
            left, right = output.double_doors
            lines.append(f"Left door: {left.width:.2f} x {left.height:.2f}")
            lines.append(f"Right door: {right.width:.2f} x {right.height:.2f}")

        for cut in output.drawer_front_cuts:
            lines.append(f"{cut.part_name}: {cut.width:.2f} x {cut.height:.2f}")

        components = output.shaker_components
        if components is not None:
            lines.extend(
                [
                    "",
                    "SHAKER COMPONENTS",
                    f"  Top rail:    {components.top_rail:.2f}",
                    f"  Bottom rail: {components.bottom_rail:.2f}",
                    f"  Stiles:      {components.stiles:.2f}",
                    f"  Panel:       {components.panel_width:.2f} x {components.panel_height:.2f}",
                ]
            )

        if len(lines) == 2:
            lines.append("No dimensions calculated.")
        return "\n".join(lines)


class HardwareReportFormatter:
    """Formats hardware placements for display.

    Each point is shown in the local coordinates of the part it is
    drilled into.
    """

    def format(self, output: CalculationOutput, title: str = "HARDWARE") -> str:
        """Format handle, hinge and drawer system points as a report.

        Args:
            output: Calculation output to report on.
            title: Report title.

        Returns:
            Formatted report string.
        """
        lines = [title, "=" * 60]

        if not output.has_hardware:
            lines.append("No hardware placements calculated.")
            return "\n".join(lines)

        if output.handle is not None:
            lines.append(f"Handle: {self._point(output.handle)}")

        if output.hinges:
            lines.append("Hinges:")
            for hinge in output.hinges:
                lines.append(f"  {self._point(hinge)}")

        layout = output.blum_hinge_plate
        if layout is not None:
            lines.append(f"Blum Clip Top ({layout.hinge_count} hinges):")
            lines.append(f"  Top:    {layout.top_hinge:.2f}")
            for middle in layout.middle_hinges or ():
                lines.append(f"  Middle: {middle:.2f}")
            lines.append(f"  Bottom: {layout.bottom_hinge:.2f}")

        drill = output.tandembox
        if drill is not None:
            lines.append("Blum Tandembox:")
            if drill.is_empty:
                lines.append("  No drill points for this model.")
            for label, points in (
                ("Front bracket", drill.front_bracket),
                ("Side drill", drill.side_drill),
                ("Bottom drill", drill.bottom_drill),
            ):
                if points:
                    lines.append(
                        f"  {label}: " + ", ".join(self._point(p) for p in points)
                    )

        return "\n".join(lines)

    def _point(self, location: HardwareLocation) -> str:
        return f"({location.x:.2f}, {location.y:.2f})"


def _to_jsonable(value: Any) -> Any:
    """Convert dataclass dictionaries into JSON-compatible structures."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    return value


class JsonExporter:
    """Exports calculation output as JSON."""

    format_name = "json"
    file_extension = "json"

    def to_dict(self, output: CalculationOutput) -> dict[str, Any]:
        """Convert calculation output to a JSON-compatible dictionary."""
        return _to_jsonable(asdict(output))

    def export_string(self, output: CalculationOutput) -> str:
        """Export calculation output as a JSON string."""
        return json.dumps(self.to_dict(output), indent=2)

    def export(self, output: CalculationOutput, path: Path) -> None:
        """Write calculation output to ``path`` as JSON."""
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.debug(f"Exported calculation output to {path}")
