from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.project import Project


class ProjectRepository(ABC):
    """Repository interface - defines contract for project data access"""

    @abstractmethod
    async def find_by_id(self, project_id: str) -> Optional[Project]:
        """Find project by ID"""
        pass

    @abstractmethod
    async def list(self, limit: int, after_id: Optional[str] = None) -> List[Project]:
        """List projects ordered by ID, starting after `after_id`"""
        pass

    @abstractmethod
    async def save(self, project: Project) -> Project:
        """Save project (create or update)"""
        pass

    @abstractmethod
    async def delete(self, project_id: str) -> bool:
        """Delete project; returns False if it did not exist"""
        pass
