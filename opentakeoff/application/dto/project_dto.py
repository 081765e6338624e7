from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ...domain.models.project import Project
from .common_dto import PaginationInfo


class ProjectCreateRequest(BaseModel):
    """DTO for project creation request"""
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None


class ProjectUpdateRequest(BaseModel):
    """DTO for project update request"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None


class ProjectResponse(BaseModel):
    """DTO for project response"""
    id: str
    name: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, project: Project) -> "ProjectResponse":
        return cls(
            id=project.id,
            name=project.name,
            description=project.description,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )


class ProjectListResponse(BaseModel):
    items: List[ProjectResponse] = Field(default_factory=list)
    pagination: PaginationInfo
