# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.project_repository import ProjectRepository
from ....utils.pagination import build_page, clamp_limit
from ...dto.common_dto import PaginationInfo
from ...dto.project_dto import ProjectListResponse, ProjectResponse


class ListProjectsUseCase:
    """Use case for listing projects, paginated by ID"""

    def __init__(self, project_repository: ProjectRepository) -> None:
        self.project_repository = project_repository

    async def execute(self, limit: Optional[int] = None, cursor: Optional[str] = None) -> ProjectListResponse:
        page_size = clamp_limit(limit)
        fetched = await self.project_repository.list(limit=page_size + 1, after_id=cursor)
        page = build_page(fetched, page_size, key=lambda project: project.id)
        return ProjectListResponse(
            items=[ProjectResponse.from_domain(project) for project in page.items],
            pagination=PaginationInfo(count=page.count, next_cursor=page.next_cursor, has_more=page.has_more),
        )
