"""Cut list consolidation service."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from ..value_objects import MaterialCut

__all__ = ["consolidate_cuts", "sort_by_area"]


def consolidate_cuts(cuts: Iterable[MaterialCut]) -> list[MaterialCut]:
    """Merge cut list entries that describe identical pieces.

    Entries with the same part name, width and height are combined into
    one entry whose quantity is the sum of theirs. First-seen order is kept.

    Args:
        cuts: Cut list entries from one or more calculators.

    Returns:
        List of MaterialCut objects with consolidated quantities.
    """
    merged: dict[tuple[str, float, float], MaterialCut] = {}
    for cut in cuts:
        key = (cut.part_name, cut.width, cut.height)
        if key in merged:
            existing = merged[key]
            merged[key] = replace(existing, quantity=existing.quantity + cut.quantity)
        else:
            merged[key] = cut
    return list(merged.values())


def sort_by_area(cuts: Iterable[MaterialCut]) -> list[MaterialCut]:
    """Sort cut list by total area (largest first) for efficient cutting."""
    return sorted(cuts, key=lambda c: c.area, reverse=True)
