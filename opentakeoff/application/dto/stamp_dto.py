from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ...domain.models.stamp import Stamp, StampPosition
from .common_dto import PaginationInfo


class PositionSchema(BaseModel):
    """Position in plan page coordinates (PDF points)"""
    x: float
    y: float
    page: Optional[int] = Field(None, ge=1)
    scale: Optional[float] = Field(None, gt=0)

    def to_domain(self) -> StampPosition:
        return StampPosition(x=self.x, y=self.y, page=self.page, scale=self.scale)


class StampCreateRequest(BaseModel):
    """DTO for stamp creation request; location is auto-detected when omitted"""
    device_id: str = Field(..., min_length=1)
    location_id: Optional[str] = None
    position: PositionSchema


class StampUpdateRequest(BaseModel):
    """
    DTO for stamp update request.

    `updated_at` is the value last read by the client; when given, the update
    is rejected if the stamp changed since. Sending `location_id: null`
    explicitly detaches the stamp, omitting it keeps the current location.
    """
    position: Optional[PositionSchema] = None
    location_id: Optional[str] = None
    updated_at: Optional[datetime] = None


class StampResponse(BaseModel):
    """DTO for stamp response"""
    id: str
    plan_id: str
    device_id: str
    location_id: Optional[str] = None
    position: PositionSchema
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, stamp: Stamp) -> "StampResponse":
        return cls(
            id=stamp.id,
            plan_id=stamp.plan_id,
            device_id=stamp.device_id,
            location_id=stamp.location_id,
            position=PositionSchema(
                x=stamp.position.x,
                y=stamp.position.y,
                page=stamp.position.page,
                scale=stamp.position.scale,
            ),
            created_at=stamp.created_at,
            updated_at=stamp.updated_at,
        )


class StampListResponse(BaseModel):
    items: List[StampResponse] = Field(default_factory=list)
    pagination: PaginationInfo
