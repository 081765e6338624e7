# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class StampPosition:
    """
    Position in world coordinate space of the plan page (PDF points).
    `scale` is kept for older clients; zoom is handled by the frontend.
    """
    x: float
    y: float
    page: Optional[int] = None
    scale: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"x": self.x, "y": self.y}
        if self.page is not None:
            data["page"] = self.page
        if self.scale is not None:
            data["scale"] = self.scale
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StampPosition":
        return cls(
            x=data["x"],
            y=data["y"],
            page=data.get("page"),
            scale=data.get("scale"),
        )


@dataclass
class Stamp:
    """
    Pure domain model for Stamp entity.

    A placed device marker on a plan, optionally associated with a location.
    """
    id: str
    plan_id: str
    device_id: str
    location_id: Optional[str]
    position: StampPosition
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.plan_id:
            raise ValueError("Plan ID is required")
        if not self.device_id:
            raise ValueError("Device ID is required")

    @property
    def count_key(self) -> tuple:
        """(plan_id, device_id, location_id) aggregation key"""
        return (self.plan_id, self.device_id, self.location_id)

    def to_snapshot(self) -> Dict[str, Any]:
        """Full entity state as stored in revision records"""
        return {
            "id": self.id,
            "plan_id": self.plan_id,
            "device_id": self.device_id,
            "location_id": self.location_id,
            "position": self.position.to_dict(),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_snapshot(cls, snapshot: Dict[str, Any]) -> "Stamp":
        return cls(
            id=snapshot["id"],
            plan_id=snapshot["plan_id"],
            device_id=snapshot["device_id"],
            location_id=snapshot.get("location_id"),
            position=StampPosition.from_dict(snapshot["position"]),
            created_at=snapshot["created_at"],
            updated_at=snapshot["updated_at"],
        )
