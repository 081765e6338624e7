from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ...domain.models.plan import Plan


class PlanCreateRequest(BaseModel):
    """
    DTO for registering a plan page.

    The drawing file is uploaded and parsed elsewhere; only its metadata is
    registered here.
    """
    name: str = Field(..., min_length=1, max_length=255)
    page_number: int = Field(1, ge=1)
    page_count: int = Field(1, ge=1)
    file_path: str = Field(..., min_length=1)
    file_size: int = Field(..., ge=0)
    file_hash: str = Field(..., min_length=1)
    width: Optional[int] = Field(None, gt=0)
    height: Optional[int] = Field(None, gt=0)


class PlanUpdateRequest(BaseModel):
    """DTO for plan update request"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    page_number: Optional[int] = Field(None, ge=1)


class PlanResponse(BaseModel):
    """DTO for plan response"""
    id: str
    project_id: str
    name: str
    page_number: int
    page_count: int
    file_path: str
    file_size: int
    file_hash: str
    width: Optional[int] = None
    height: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, plan: Plan) -> "PlanResponse":
        return cls(
            id=plan.id,
            project_id=plan.project_id,
            name=plan.name,
            page_number=plan.page_number,
            page_count=plan.page_count,
            file_path=plan.file_path,
            file_size=plan.file_size,
            file_hash=plan.file_hash,
            width=plan.width,
            height=plan.height,
            created_at=plan.created_at,
            updated_at=plan.updated_at,
        )
