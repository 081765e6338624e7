# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


class LocationType:
    """Location shape constants"""
    RECTANGLE = "rectangle"
    POLYGON = "polygon"

    ALL = (RECTANGLE, POLYGON)


@dataclass
class RectangleBounds:
    x: float
    y: float
    width: float
    height: float


@dataclass
class Vertex:
    x: float
    y: float


@dataclass
class Location:
    """
    Pure domain model for Location entity.

    A named area on a plan used to group counts. Rectangles carry `bounds`,
    polygons carry an ordered list of `vertices`.
    """
    id: str
    plan_id: str
    name: str
    type: str
    created_at: datetime
    updated_at: datetime
    bounds: Optional[RectangleBounds] = None
    vertices: List[Vertex] = field(default_factory=list)
    color: Optional[str] = None
    revision: int = 0

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.plan_id:
            raise ValueError("Plan ID is required")
        if not self.name or len(self.name.strip()) < 1:
            raise ValueError("Location name is required")
        if self.type not in LocationType.ALL:
            raise ValueError(f"Unsupported location type: {self.type}")

    def to_snapshot(self) -> Dict[str, Any]:
        """Full entity state as stored in revision records"""
        return {
            "id": self.id,
            "plan_id": self.plan_id,
            "name": self.name,
            "type": self.type,
            "bounds": (
                {
                    "x": self.bounds.x,
                    "y": self.bounds.y,
                    "width": self.bounds.width,
                    "height": self.bounds.height,
                }
                if self.bounds is not None
                else None
            ),
            "vertices": [{"x": vertex.x, "y": vertex.y} for vertex in self.vertices],
            "color": self.color,
            "revision": self.revision,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_snapshot(cls, snapshot: Dict[str, Any]) -> "Location":
        bounds = snapshot.get("bounds")
        return cls(
            id=snapshot["id"],
            plan_id=snapshot["plan_id"],
            name=snapshot["name"],
            type=snapshot["type"],
            bounds=RectangleBounds(**bounds) if bounds else None,
            vertices=[Vertex(x=v["x"], y=v["y"]) for v in snapshot.get("vertices") or []],
            color=snapshot.get("color"),
            revision=snapshot.get("revision", 0),
            created_at=snapshot["created_at"],
            updated_at=snapshot["updated_at"],
        )
