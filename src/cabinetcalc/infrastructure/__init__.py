"""Infrastructure layer - formatters and exporters."""

from .formatters import (
    CutListFormatter,
    DimensionReportFormatter,
    HardwareReportFormatter,
    JsonExporter,
)

__all__ = [
    "CutListFormatter",
    "DimensionReportFormatter",
    "HardwareReportFormatter",
    "JsonExporter",
]
