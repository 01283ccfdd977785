"""Hardware constants for hinge and drawer system drilling.

This module provides:
- Blum Clip Top hinge gap defaults and hinge count thresholds
- Blum Tandembox drilling offsets by drawer side model
- Pattern labels attached to generated hardware locations

All lengths are in millimeters, matching the manufacturer's drilling charts.
"""

from __future__ import annotations

# --- Blum Clip Top hinge plates ---

# Distance from the door edge to the first/last hinge
BLUM_CLIP_TOP_DEFAULT_TOP_GAP: float = 100.0
BLUM_CLIP_TOP_DEFAULT_BOTTOM_GAP: float = 100.0

# Door heights at which an extra hinge is required
BLUM_CLIP_TOP_MIN_HEIGHT_FOR_3: float = 900.0
BLUM_CLIP_TOP_MIN_HEIGHT_FOR_4: float = 1600.0


# --- Blum Tandembox drawer systems ---

# Key: drawer side model
# Value: (inset from the box side, front bracket offset from the box front)
TANDEMBOX_DRILL_OFFSETS: dict[str, tuple[float, float]] = {
    "M": (37.0, 9.0),  # standard height
    "B": (42.0, 12.0),  # deeper box
    "D": (50.0, 15.0),  # tallest box
}


# --- Pattern labels ---

HANDLE_PATTERN = "handle"
HINGE_PATTERN = "hinge"
