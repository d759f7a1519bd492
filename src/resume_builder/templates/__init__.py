"""Resume templates and their registry."""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from resume_builder.models.resume import ResumeData
from resume_builder.models.settings import DEFAULT_FONT_SIZE
from resume_builder.templates.base import ResumeTemplate
from resume_builder.templates.compact import CompactTemplate
from resume_builder.templates.default import DefaultTemplate

TEMPLATE_CLASSES: dict[str, type[ResumeTemplate]] = {
    DefaultTemplate.id: DefaultTemplate,
    CompactTemplate.id: CompactTemplate,
}


@lru_cache(maxsize=None)
def get_template(template_id: str) -> ResumeTemplate:
    """Return the shared template instance for ``template_id``."""
    try:
        template_cls = TEMPLATE_CLASSES[template_id]
    except KeyError:
        raise ValueError(f"Template not found: {template_id}") from None
    return template_cls()


def list_templates() -> list[str]:
    return list(TEMPLATE_CLASSES)


def render_resume(
    data: ResumeData | Mapping[str, Any],
    template_id: str = "default",
    font: str = "Calibri",
    font_size: float = DEFAULT_FONT_SIZE,
) -> str:
    return get_template(template_id).parse(data, font, font_size)


__all__ = [
    "CompactTemplate",
    "DefaultTemplate",
    "ResumeTemplate",
    "get_template",
    "list_templates",
    "render_resume",
]
