"""Section renderers: generator, then formatter, then a titled block.

A renderer returns ``""`` when its section has nothing to show, so templates can call every
renderer and simply drop the blanks.
"""

from __future__ import annotations

from collections.abc import Callable

from resume_builder.markup.converters import ITEMS_SPACING, render_template_header
from resume_builder.markup.escaping import escape_text
from resume_builder.models.layout import SectionSpacing, TemplateLayoutConfig
from resume_builder.models.resume import ResumeData
from resume_builder.sections.formatters import (
    format_certificates_items,
    format_education_items,
    format_experience_items,
    format_projects_items,
    format_section_items,
    format_simple_items,
    format_social_links,
    wrap_in_section_block,
)
from resume_builder.sections.generators import (
    generate_certificates_content,
    generate_contact_content,
    generate_education_content,
    generate_experience_content,
    generate_internships_content,
    generate_languages_content,
    generate_projects_content,
    generate_skills_content,
    generate_social_links_content,
    generate_volunteering_content,
)

SectionRenderer = Callable[[ResumeData, float, TemplateLayoutConfig], str]

_STACKED = SectionSpacing(spacing="block", item_spacing=ITEMS_SPACING)


def _wrap(data: ResumeData, header_key: str, content: str, font_size: float) -> str:
    return wrap_in_section_block(
        data.section_header(header_key), content, font_size, render_template_header
    )


def render_experience(data: ResumeData, font_size: float, config: TemplateLayoutConfig) -> str:
    contents = generate_experience_content(data.experiences)
    if not contents:
        return ""
    return _wrap(data, "experience", format_experience_items(contents, config, font_size), font_size)


def render_internships(data: ResumeData, font_size: float, config: TemplateLayoutConfig) -> str:
    contents = generate_internships_content(data.internships)
    if not contents:
        return ""
    return _wrap(data, "internships", format_experience_items(contents, config, font_size), font_size)


def render_education(data: ResumeData, font_size: float, config: TemplateLayoutConfig) -> str:
    contents = generate_education_content(data.education)
    if not contents:
        return ""
    return _wrap(data, "education", format_education_items(contents, config, font_size), font_size)


def render_volunteering(data: ResumeData, font_size: float, config: TemplateLayoutConfig) -> str:
    contents = generate_volunteering_content(data.volunteering)
    if not contents:
        return ""
    # Volunteering reads like employment history
    return _wrap(
        data, "volunteering", format_experience_items(contents, config, font_size), font_size
    )


def render_projects(data: ResumeData, font_size: float, config: TemplateLayoutConfig) -> str:
    contents = generate_projects_content(data.projects)
    if not contents:
        return ""
    return _wrap(data, "projects", format_projects_items(contents, config), font_size)


def render_skills(data: ResumeData, font_size: float, config: TemplateLayoutConfig) -> str:
    contents = generate_skills_content(data.skills, data.technical_skills)
    if not contents:
        return ""
    items = [item.content for item in contents]
    return _wrap(data, "skills", format_section_items(items, _STACKED), font_size)


def render_languages(data: ResumeData, font_size: float, config: TemplateLayoutConfig) -> str:
    contents = generate_languages_content(data.languages)
    if not contents:
        return ""
    items = [item.content for item in contents]
    return _wrap(data, "languages", format_section_items(items, _STACKED), font_size)


def render_certificates(data: ResumeData, font_size: float, config: TemplateLayoutConfig) -> str:
    contents = generate_certificates_content(data.certificates)
    if not contents:
        return ""
    return _wrap(data, "certificates", format_certificates_items(contents, config), font_size)


def render_contact_info(data: ResumeData, font_size: float, config: TemplateLayoutConfig) -> str:
    contents = generate_contact_content(data)
    if not contents:
        return ""
    return _wrap(data, "info", format_simple_items(contents, config), font_size)


def render_social_links(data: ResumeData, font_size: float, config: TemplateLayoutConfig) -> str:
    contents = generate_social_links_content(data)
    if not contents:
        return ""
    formatted = format_social_links(contents, config.social_links)
    layout = config.social_links
    # Inline header links sit next to the contact details, without a section title.
    if layout.placement == "header" and layout.orientation == "horizontal":
        return formatted
    return _wrap(data, "socialLinks", formatted, font_size)


def render_profile(data: ResumeData, font_size: float, config: TemplateLayoutConfig) -> str:
    summary = data.summary.strip()
    if not summary:
        return ""
    return _wrap(data, "profile", escape_text(summary), font_size)


SECTION_RENDERERS: dict[str, SectionRenderer] = {
    "summary": render_profile,
    "experience": render_experience,
    "internships": render_internships,
    "education": render_education,
    "volunteering": render_volunteering,
    "projects": render_projects,
    "skills": render_skills,
    "languages": render_languages,
    "certificates": render_certificates,
    "contactInfo": render_contact_info,
    "socialLinks": render_social_links,
}
