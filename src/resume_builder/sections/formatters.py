"""Turn generated section content into laid-out Typst according to a template's layout."""

from __future__ import annotations

from collections.abc import Callable

from resume_builder.markup.converters import (
    ITEMS_SPACING,
    SECTION_SPACING,
    block,
    convert_list,
    render_template_date,
    render_template_date_with_link,
    render_template_sub_header,
)
from resume_builder.models.layout import (
    SectionContent,
    SectionSpacing,
    SocialLinksLayout,
    TemplateLayoutConfig,
)

# Parts of a single record are always separated this way, whatever the section join.
RECORD_PART_SEPARATOR = "\n\n"


def format_section_items(items: list[str], spacing: SectionSpacing) -> str:
    if spacing.spacing == "block" and spacing.item_spacing:
        return "".join(block(item, spacing.item_spacing) for item in items)
    return spacing.join_separator.join(items)


def _join_records(records: list[str], config: TemplateLayoutConfig) -> str:
    if config.is_two_column:
        return RECORD_PART_SEPARATOR.join(records)
    return format_section_items(records, config.sections)


def format_social_links(contents: list[SectionContent], layout: SocialLinksLayout) -> str:
    links = [item.content for item in contents if item.content]
    if layout.orientation == "horizontal":
        return layout.separator.join(links)
    item_spacing = ITEMS_SPACING if layout.placement == "sidebar" else ""
    return format_section_items(links, SectionSpacing(spacing="block", item_spacing=item_spacing))


def format_experience_items(
    contents: list[SectionContent],
    config: TemplateLayoutConfig,
    font_size: float,
) -> str:
    """Title, date and link, then achievements, per record."""
    records = []
    for item in contents:
        parts = [render_template_sub_header(item.title, font_size)]
        if item.date or item.content:
            parts.append(render_template_date_with_link(item.date, item.content, font_size))
        if item.achievements:
            parts.append(convert_list(item.achievements))
        records.append(RECORD_PART_SEPARATOR.join(parts))
    return _join_records(records, config)


def format_education_items(
    contents: list[SectionContent],
    config: TemplateLayoutConfig,
    font_size: float,
) -> str:
    records = []
    for item in contents:
        parts = [render_template_sub_header(item.title, font_size)]
        if item.date:
            parts.append(render_template_date(item.date, font_size))
        if item.additional_info:
            parts.append(item.additional_info)
        records.append(RECORD_PART_SEPARATOR.join(parts))
    return _join_records(records, config)


def format_projects_items(contents: list[SectionContent], config: TemplateLayoutConfig) -> str:
    records = [
        RECORD_PART_SEPARATOR.join(p for p in (item.title, item.content) if p)
        for item in contents
    ]
    records = [r for r in records if r.strip()]
    if config.sections.spacing == "block" and config.projects.item_spacing:
        return "".join(block(record, config.projects.item_spacing) for record in records)
    return config.sections.join_separator.join(records)


def format_certificates_items(
    contents: list[SectionContent],
    config: TemplateLayoutConfig,
) -> str:
    records = []
    for item in contents:
        text = item.title
        if item.date:
            text += f" {item.date}" if text else item.date
        for extra in (item.content, item.additional_info):
            if extra:
                text += f"\n{extra}" if text else extra
        if text.strip():
            records.append(text)
    return format_section_items(records, config.sections)


def format_simple_items(contents: list[SectionContent], config: TemplateLayoutConfig) -> str:
    return format_section_items([item.content for item in contents if item.content], config.sections)


def wrap_in_section_block(
    header_text: str,
    content: str,
    font_size: float,
    render_header: Callable[[str, float], str],
) -> str:
    if not content.strip():
        return ""
    return f"#block(above: 0em, below: {SECTION_SPACING})[\n{render_header(header_text, font_size)}\n\n{content}\n]"
