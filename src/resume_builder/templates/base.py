"""Shared machinery for resume templates.

A template is thin configuration over the shared section renderers: it decides which sections
go where and in what order, then hands the result to the document skeleton. ``parse`` is a pure
function of its arguments; layout files and the skeleton are loaded when the template is built.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any

from resume_builder.models.layout import TemplateLayoutConfig
from resume_builder.models.resume import ResumeData
from resume_builder.models.settings import DEFAULT_FONT_SIZE
from resume_builder.sections.renderers import SECTION_RENDERERS
from resume_builder.templates.loader import load_layout
from resume_builder.templates.renderer import load_document_template, render_document

UNORDERED_RANK = 999


def sort_by_section_order(keys: Iterable[str], order: Mapping[str, int]) -> list[str]:
    """Sort section keys by rank; ties keep the order map's own order, unranked keys go last."""
    position = {key: i for i, key in enumerate(order)}
    return sorted(
        keys,
        key=lambda k: (order.get(k, UNORDERED_RANK), position.get(k, len(position))),
    )


def coerce_resume_data(data: ResumeData | Mapping[str, Any] | None) -> ResumeData:
    if isinstance(data, ResumeData):
        return data
    if not isinstance(data, Mapping):
        return ResumeData()
    return ResumeData.model_validate(dict(data))


class ResumeTemplate(ABC):
    id: str = ""
    name: str = ""
    description: str = ""

    def __init__(self, layout_config: TemplateLayoutConfig | None = None):
        self.layout_config = layout_config or load_layout(self.id)
        self._document = load_document_template()

    def parse(
        self,
        data: ResumeData | Mapping[str, Any],
        font: str,
        font_size: float = DEFAULT_FONT_SIZE,
    ) -> str:
        """Render one resume into a complete Typst document."""
        data = coerce_resume_data(data)
        body = self.render_body(data, font_size)
        return render_document(self._document, body, font, font_size, self.layout_config.page)

    @abstractmethod
    def render_body(self, data: ResumeData, font_size: float) -> str:
        """Typst markup for everything inside the page skeleton."""

    def render_sections(self, keys: Iterable[str], data: ResumeData, font_size: float) -> list[str]:
        rendered = []
        for key in keys:
            renderer = SECTION_RENDERERS.get(key)
            if renderer is None:
                continue
            content = renderer(data, font_size, self.layout_config)
            if content.strip():
                rendered.append(content)
        return rendered
