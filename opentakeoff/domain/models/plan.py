# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Plan:
    """
    Pure domain model for Plan entity.

    A single page of an uploaded drawing on which stamps are placed.
    The file itself is stored elsewhere; only its metadata lives here.
    """
    id: str
    project_id: str
    name: str
    page_number: int
    page_count: int
    file_path: str
    file_size: int
    file_hash: str
    created_at: datetime
    updated_at: datetime
    width: Optional[int] = None
    height: Optional[int] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.project_id:
            raise ValueError("Project ID is required")
        if not self.name or len(self.name.strip()) < 1:
            raise ValueError("Plan name is required")
        if self.page_number < 1:
            raise ValueError("Page number must be at least 1")
        if self.page_count < self.page_number:
            raise ValueError("Page number cannot exceed page count")
