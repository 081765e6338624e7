# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Device:
    """
    Pure domain model for Device entity.

    A countable equipment type (symbol) defined per project.
    """
    id: str
    project_id: str
    name: str
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    color: Optional[str] = None
    icon_key: Optional[str] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.project_id:
            raise ValueError("Project ID is required")
        if not self.name or len(self.name.strip()) < 1:
            raise ValueError("Device name is required")
