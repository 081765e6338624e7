from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.plan import Plan


class PlanRepository(ABC):
    """Repository interface - defines contract for plan data access"""

    @abstractmethod
    async def find_by_id(self, plan_id: str) -> Optional[Plan]:
        """Find plan by ID"""
        pass

    @abstractmethod
    async def find_by_project(self, project_id: str) -> List[Plan]:
        """Find all plans of a project ordered by page number"""
        pass

    @abstractmethod
    async def find_by_project_page(self, project_id: str, page_number: int) -> Optional[Plan]:
        """Find the plan occupying a page number within a project"""
        pass

    @abstractmethod
    async def save(self, plan: Plan) -> Plan:
        """Save plan (create or update)"""
        pass

    @abstractmethod
    async def delete(self, plan_id: str) -> bool:
        """Delete plan; returns False if it did not exist"""
        pass
