"""Application layer - use cases and DTOs."""

from .commands import CalculateCommand
from .dtos import CalculationOutput

__all__ = ["CalculateCommand", "CalculationOutput"]
