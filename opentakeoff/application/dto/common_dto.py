from typing import Optional
from pydantic import BaseModel


class PaginationInfo(BaseModel):
    """Cursor pagination metadata"""
    count: int
    next_cursor: Optional[str] = None
    has_more: bool = False


class DeleteResponse(BaseModel):
    """DTO for delete operations"""
    id: str
    deleted: bool = True
