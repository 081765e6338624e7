from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class CountItem(BaseModel):
    """Number of stamps of one device in one location (or unassigned)"""
    device_id: str
    device_name: str
    location_id: Optional[str] = None
    location_name: Optional[str] = None
    total: int


class DeviceTotal(BaseModel):
    device_id: str
    device_name: str
    total: int


class PlanCountsResponse(BaseModel):
    plan_id: str
    counts: List[CountItem] = Field(default_factory=list)
    totals: List[DeviceTotal] = Field(default_factory=list)
    updated_at: Optional[datetime] = None


class RecomputeCountsResponse(BaseModel):
    plan_id: str
    updated_stamps: int


class ExportRow(BaseModel):
    """One exported count line"""
    device: str
    total: int
    location: Optional[str] = None
    quantity: int


class ExportData(BaseModel):
    """Aggregated project counts ready for formatting"""
    project_id: str
    project_name: str
    rows: List[ExportRow] = Field(default_factory=list)
    generated_at: datetime
    include_locations: bool = True


class ExportResult(BaseModel):
    """Rendered export document"""
    content: str
    media_type: str
    content_disposition: str
