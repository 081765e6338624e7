# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Project:
    """
    Pure domain model for Project entity.

    Top-level container for plans, devices and take-off data.
    """
    id: str
    name: str
    description: Optional[str]
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.name or len(self.name.strip()) < 1:
            raise ValueError("Project name is required")
