"""Two-column template: experience on the left, contact details in a sidebar."""

from __future__ import annotations

from resume_builder.markup.converters import SECTION_SPACING, block, convert_grid
from resume_builder.markup.escaping import escape_text
from resume_builder.models.resume import ResumeData
from resume_builder.sections.renderers import render_profile
from resume_builder.templates.base import ResumeTemplate, sort_by_section_order


class DefaultTemplate(ResumeTemplate):
    id = "default"
    name = "Default"
    description = "Optimal for one or two pages resumes"

    def render_columns(self, data: ResumeData, font_size: float) -> tuple[str, str]:
        """Return the (left, right) column bodies, before the page header is added."""
        columns = self.layout_config.columns
        left = list(columns.pinned_left)
        right = []
        for key in columns.movable_sections:
            (left if data.placement(key) == "left" else right).append(key)

        left = sort_by_section_order(left, data.section_order)
        right = list(columns.pinned_right) + sort_by_section_order(right, data.section_order)
        return (
            "".join(self.render_sections(left, data, font_size)),
            "".join(self.render_sections(right, data, font_size)),
        )

    def render_header(self, data: ResumeData, font_size: float) -> str:
        parts = []
        name = escape_text(data.full_name)
        if name:
            parts.append(f"= {name}")
        position = escape_text(data.position.strip())
        if position:
            parts.append(block(position, SECTION_SPACING))
        profile = render_profile(data, font_size, self.layout_config)
        if profile:
            parts.append(profile)
        return "\n\n".join(parts)

    def render_body(self, data: ResumeData, font_size: float) -> str:
        left, right = self.render_columns(data, font_size)
        header = self.render_header(data, font_size)
        left_column = "\n\n".join(p for p in (header, left) if p)
        return convert_grid([left_column, right], self.layout_config.columns.ratio)
