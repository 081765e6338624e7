# Standard library imports
import logging
from typing import Dict, List

# Local application imports
from ....core.exceptions import InvalidInputError, NotFoundError
from ....domain.repositories.project_repository import ProjectRepository
from ....domain.repositories.plan_repository import PlanRepository
from ....utils.datetime_utils import utc_now
from ....utils.export_formatters import MIME_TYPES, get_content_disposition, get_mime_type, render_export
from ...dto.count_dto import ExportData, ExportResult, ExportRow
from .get_plan_counts import GetPlanCountsUseCase

logger = logging.getLogger(__name__)


class ExportProjectUseCase:
    """Use case for exporting the device counts of every plan in a project"""

    def __init__(
        self,
        project_repository: ProjectRepository,
        plan_repository: PlanRepository,
        plan_counts_use_case: GetPlanCountsUseCase,
    ) -> None:
        self.project_repository = project_repository
        self.plan_repository = plan_repository
        self.plan_counts_use_case = plan_counts_use_case

    async def collect(self, project_id: str, include_locations: bool = True) -> ExportData:
        """
        Aggregate export rows for a project.

        With `include_locations` each (device, location) count of each plan is a
        row; otherwise device totals are summed across plans into one row per
        device. Rows are ordered by device, then location (unassigned first).
        """
        project = await self.project_repository.find_by_id(project_id)
        if project is None:
            raise NotFoundError(f"Project {project_id} not found")

        rows: List[ExportRow] = []
        device_rows: Dict[str, ExportRow] = {}
        for plan in await self.plan_repository.find_by_project(project_id):
            counts = await self.plan_counts_use_case.counts_for_plan(plan)
            if include_locations:
                for item in counts.counts:
                    rows.append(
                        ExportRow(
                            device=item.device_name,
                            total=item.total,
                            location=item.location_name,
                            quantity=item.total,
                        )
                    )
                continue

            for total in counts.totals:
                existing = device_rows.get(total.device_name)
                if existing is not None:
                    existing.total += total.total
                    existing.quantity += total.total
                else:
                    device_rows[total.device_name] = ExportRow(
                        device=total.device_name,
                        total=total.total,
                        location=None,
                        quantity=total.total,
                    )

        if not include_locations:
            rows = list(device_rows.values())
        rows.sort(key=lambda row: (row.device, row.location is not None, row.location or ""))

        return ExportData(
            project_id=project.id,
            project_name=project.name,
            rows=rows,
            generated_at=utc_now(),
            include_locations=include_locations,
        )

    async def execute(self, project_id: str, export_format: str, include_locations: bool = True) -> ExportResult:
        if export_format not in MIME_TYPES:
            raise InvalidInputError(f"Unsupported export format: {export_format}")

        data = await self.collect(project_id, include_locations)
        logger.info(f"Exporting project {project_id} as {export_format} ({len(data.rows)} rows)")
        return ExportResult(
            content=render_export(data, export_format),
            media_type=get_mime_type(export_format),
            content_disposition=get_content_disposition(data.project_name, export_format, data.generated_at),
        )
