"""Renderers for project count exports (CSV and JSON)."""
import csv
import io
import json
import re

from ..application.dto.count_dto import ExportData
from .datetime_utils import to_iso, utc_now

NO_LOCATION_LABEL = "(No Location)"
CSV_HEADERS = ["Device", "Total", "Location", "Quantity"]

MIME_TYPES = {
    "csv": "text/csv",
    "json": "application/json",
}


def format_as_csv(data: ExportData) -> str:
    """CSV with a UTF-8 BOM so spreadsheet tools detect the encoding."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for row in data.rows:
        writer.writerow([row.device, row.total, row.location or NO_LOCATION_LABEL, row.quantity])
    return "\ufeff" + buffer.getvalue()


def format_as_json(data: ExportData) -> str:
    document = {
        "metadata": {
            "projectId": data.project_id,
            "projectName": data.project_name,
            "generatedAt": to_iso(data.generated_at),
            "includeLocations": data.include_locations,
            "rowCount": len(data.rows),
        },
        "data": [
            {
                "device": row.device,
                "total": row.total,
                "location": row.location,
                "quantity": row.quantity,
            }
            for row in data.rows
        ],
    }
    return json.dumps(document, indent=2) + "\n"


def get_mime_type(export_format: str) -> str:
    try:
        return MIME_TYPES[export_format]
    except KeyError:
        raise ValueError(f"Unsupported export format: {export_format}")


def get_content_disposition(project_name: str, export_format: str, generated_at=None) -> str:
    """`attachment; filename="<sanitized name>_export_<YYYY-MM-DD>.<ext>"`"""
    sanitized = re.sub(r"[^a-z0-9_-]", "_", project_name, flags=re.IGNORECASE).lower()[:50]
    timestamp = (generated_at or utc_now()).strftime("%Y-%m-%d")
    return f'attachment; filename="{sanitized}_export_{timestamp}.{export_format}"'


def render_export(data: ExportData, export_format: str) -> str:
    if export_format == "csv":
        return format_as_csv(data)
    if export_format == "json":
        return format_as_json(data)
    raise ValueError(f"Unsupported export format: {export_format}")
