"""Single-column template for longer resumes."""

from __future__ import annotations

from resume_builder.markup.escaping import escape_text
from resume_builder.models.resume import ResumeData
from resume_builder.sections.generators import generate_contact_content
from resume_builder.sections.renderers import render_social_links
from resume_builder.templates.base import ResumeTemplate, sort_by_section_order

BODY_SECTIONS = (
    "summary",
    "experience",
    "internships",
    "education",
    "skills",
    "projects",
    "volunteering",
    "languages",
    "certificates",
)

ROW_SPACING = "0.8em"


class CompactTemplate(ResumeTemplate):
    id = "compact"
    name = "Compact"
    description = "Single column template for longer resumes"

    def _header_left_rows(self, data: ResumeData, font_size: float) -> list[str]:
        rows = [f'#text(size: {font_size + 12:g}pt, weight: "bold")[{escape_text(data.full_name)}]']
        position = escape_text(data.position.strip())
        if position:
            rows.append(f"#block(above: {ROW_SPACING})[#text(size: {font_size + 2:g}pt)[{position}]]")
        return rows

    def _header_right_rows(self, data: ResumeData, font_size: float) -> list[str]:
        fragments = [item.content for item in generate_contact_content(data)]
        links = render_social_links(data, font_size, self.layout_config)
        if links:
            fragments.append(links)

        rows = []
        for fragment in fragments:
            above = ROW_SPACING if rows else "0em"
            rows.append(f"#block(above: {above})[#text(size: {font_size - 1:g}pt)[{fragment}]]")
        return rows

    def render_header(self, data: ResumeData, font_size: float) -> str:
        lines = [
            "#grid(",
            "    columns: (6fr, 4fr),",
            "    column-gutter: 20pt,",
            "    align: (left, left),",
            "    [",
            *(f"        {row}" for row in self._header_left_rows(data, font_size)),
            "    ],",
            "    [",
            *(f"        {row}" for row in self._header_right_rows(data, font_size)),
            "    ]",
            ")",
            "#block(above: 1em, below: 1em)[#line(length: 100%, stroke: 1pt + black)]",
        ]
        return "\n".join(lines)

    def render_body(self, data: ResumeData, font_size: float) -> str:
        keys = sort_by_section_order(BODY_SECTIONS, data.section_order)
        sections = "\n\n".join(self.render_sections(keys, data, font_size))
        header = self.render_header(data, font_size)
        return f"{header}\n\n{sections}" if sections else header
