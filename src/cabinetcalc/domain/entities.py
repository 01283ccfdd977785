"""Domain entities shared with applications built on the calculators.

The calculators never read or write these records; they give callers a
common vocabulary for cabinets and the projects that group them.
"""

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone


@dataclass(frozen=True)
class Cabinet:
    """A cabinet carcass.

    Attributes:
        id: Caller-assigned identifier.
        width: Outside width.
        height: Outside height.
        depth: Outside depth.
        material: Free-form material name (e.g., "birch plywood").
    """

    id: str
    width: float
    height: float
    depth: float
    material: str


@dataclass(frozen=True)
class Project:
    """A named collection of cabinets."""

    id: str
    name: str
    cabinets: tuple[Cabinet, ...] = field(default_factory=tuple)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, name: str, cabinets: tuple[Cabinet, ...] = ()) -> "Project":
        """Create a project with a fresh identifier and creation timestamp."""
        return cls(id=str(uuid.uuid4()), name=name, cabinets=tuple(cabinets))

    def add_cabinet(self, cabinet: Cabinet) -> "Project":
        """Return a copy of this project with ``cabinet`` appended."""
        return replace(self, cabinets=(*self.cabinets, cabinet))
