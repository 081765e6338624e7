from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ...domain.models.device import Device


class DeviceCreateRequest(BaseModel):
    """DTO for device creation request"""
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    color: Optional[str] = None
    icon_key: Optional[str] = None


class DeviceUpdateRequest(BaseModel):
    """DTO for device update request"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    color: Optional[str] = None
    icon_key: Optional[str] = None


class DeviceResponse(BaseModel):
    """DTO for device response"""
    id: str
    project_id: str
    name: str
    description: Optional[str] = None
    color: Optional[str] = None
    icon_key: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, device: Device) -> "DeviceResponse":
        return cls(
            id=device.id,
            project_id=device.project_id,
            name=device.name,
            description=device.description,
            color=device.color,
            icon_key=device.icon_key,
            created_at=device.created_at,
            updated_at=device.updated_at,
        )
