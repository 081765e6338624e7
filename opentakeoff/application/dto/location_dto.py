from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from ...domain.models.location import Location, RectangleBounds, Vertex


class BoundsSchema(BaseModel):
    x: float
    y: float
    width: float
    height: float

    def to_domain(self) -> RectangleBounds:
        return RectangleBounds(x=self.x, y=self.y, width=self.width, height=self.height)


class VertexSchema(BaseModel):
    x: float
    y: float

    def to_domain(self) -> Vertex:
        return Vertex(x=self.x, y=self.y)


class LocationCreateRequest(BaseModel):
    """DTO for location creation request (rectangle needs bounds, polygon needs vertices)"""
    name: str = Field(..., min_length=1, max_length=255)
    type: Literal["rectangle", "polygon"]
    bounds: Optional[BoundsSchema] = None
    vertices: Optional[List[VertexSchema]] = None
    color: Optional[str] = None


class LocationUpdateRequest(BaseModel):
    """DTO for location update request"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    bounds: Optional[BoundsSchema] = None
    vertices: Optional[List[VertexSchema]] = None
    color: Optional[str] = None


class LocationResponse(BaseModel):
    """DTO for location response"""
    id: str
    plan_id: str
    name: str
    type: str
    bounds: Optional[BoundsSchema] = None
    vertices: List[VertexSchema] = Field(default_factory=list)
    color: Optional[str] = None
    revision: int = 0
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, location: Location) -> "LocationResponse":
        bounds = location.bounds
        return cls(
            id=location.id,
            plan_id=location.plan_id,
            name=location.name,
            type=location.type,
            bounds=(
                BoundsSchema(x=bounds.x, y=bounds.y, width=bounds.width, height=bounds.height)
                if bounds is not None
                else None
            ),
            vertices=[VertexSchema(x=v.x, y=v.y) for v in location.vertices],
            color=location.color,
            revision=location.revision,
            created_at=location.created_at,
            updated_at=location.updated_at,
        )
