"""JSON export and import of resumes.

The file format is a JSON array of ``{name, data, createdAt, updatedAt}`` objects with
camelCase keys, so files move freely between this tool and the browser builder.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable
from datetime import date
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from resume_builder.models.resume import Resume, ResumeData
from resume_builder.store.workspace import ResumeWorkspace

logger = logging.getLogger(__name__)

INVALID_FORMAT_ERROR = "Invalid file format. Expected an array of resumes."
READ_ERROR = "Failed to read file"

# Sections counted in an import preview
COUNTED_SECTIONS = (
    "experiences",
    "education",
    "skills",
    "projects",
    "languages",
    "volunteering",
    "certificates",
)


class ImportPreview(BaseModel):
    name: str
    data: ResumeData
    is_duplicate: bool = False
    item_count: int = 0


class ImportResult(BaseModel):
    success: bool
    previews: list[ImportPreview] = []
    error: str | None = None


def export_resumes(workspace: ResumeWorkspace, resume_ids: Iterable[str]) -> list[dict[str, Any]]:
    """Export entries for the selected resumes, oldest first."""
    wanted = set(resume_ids)
    resumes = [r for r in workspace.resumes_list if r.id in wanted]
    if not resumes:
        logger.warning("No resumes to export")
        return []
    return [
        {
            "name": resume.name,
            "data": resume.data.model_dump(mode="json", by_alias=True),
            "createdAt": resume.created_at.isoformat(),
            "updatedAt": resume.updated_at.isoformat(),
        }
        for resume in resumes
    ]


def export_filename(resumes: list[Resume], today: date | None = None) -> str:
    """``resume-<slug>-<date>.json`` for one resume, ``resumes-export-<date>.json`` otherwise."""
    stamp = (today or date.today()).isoformat()
    if len(resumes) == 1:
        slug = re.sub(r"\s+", "-", resumes[0].name.lower())
        return f"resume-{slug}-{stamp}.json"
    return f"resumes-export-{stamp}.json"


def write_export(path: str | Path, entries: list[dict[str, Any]]) -> Path:
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(entries, indent=2, ensure_ascii=False), encoding="utf-8")
    return output


def _item_count(data: ResumeData) -> int:
    return sum(len(getattr(data, key)) for key in COUNTED_SECTIONS)


def parse_import(text: str, existing_names: Iterable[str] = ()) -> ImportResult:
    """Parse an export file into previews; never raises."""
    try:
        entries = json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug("Import parse error: %s", e)
        return ImportResult(success=False, error=str(e))

    if not isinstance(entries, list):
        return ImportResult(success=False, error=INVALID_FORMAT_ERROR)

    taken = {name.lower() for name in existing_names}
    previews = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict) or not entry.get("name") or not isinstance(entry.get("data"), dict):
            logger.debug("Skipping import entry %d: missing name or data", i)
            continue
        data = ResumeData.model_validate(entry["data"])
        name = str(entry["name"])
        previews.append(
            ImportPreview(
                name=name,
                data=data,
                is_duplicate=name.lower() in taken,
                item_count=_item_count(data),
            )
        )
    return ImportResult(success=True, previews=previews)


def read_import_file(path: str | Path, existing_names: Iterable[str] = ()) -> ImportResult:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Could not read %s: %s", path, e)
        return ImportResult(success=False, error=READ_ERROR)
    return parse_import(text, existing_names)


def import_selected(
    workspace: ResumeWorkspace,
    previews: list[ImportPreview],
    selected_indexes: Iterable[int],
) -> int:
    """Create one resume per selected preview; returns how many were imported."""
    imported = 0
    for index in selected_indexes:
        if not 0 <= index < len(previews):
            continue
        preview = previews[index]
        resume_id = workspace.create_resume(preview.name)
        workspace.update_resume_data(resume_id, preview.data)
        imported += 1
    return imported
