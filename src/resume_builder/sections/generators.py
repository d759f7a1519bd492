"""Layout-independent content generation for each resume section.

Every generator takes records straight from ``ResumeData`` and returns ``SectionContent``
items whose text is already escaped. Blank records are dropped here, so formatters and
renderers only ever see something worth printing.
"""

from __future__ import annotations

from collections.abc import Iterable

from resume_builder.markup.converters import (
    convert_date_range,
    convert_email,
    convert_external_link_icon,
    convert_link,
)
from resume_builder.markup.escaping import escape_text
from resume_builder.models.layout import SectionContent
from resume_builder.models.resume import (
    Achievement,
    Certificate,
    Education,
    Experience,
    Language,
    Project,
    ResumeData,
    SkillItem,
    SocialLink,
    Volunteering,
)

SOCIAL_PLATFORM_LABELS: dict[str, str] = {
    "linkedin": "LinkedIn",
    "github": "GitHub",
    "twitter": "Twitter",
    "portfolio": "Portfolio",
    "dribbble": "Dribbble",
    "medium": "Medium",
    "devto": "Dev.to",
    "personal": "Personal",
}


def compose_title(
    primary: str | None,
    secondary: str | None = "",
    location: str | None = "",
    connector: str = " at ",
) -> str:
    """Join ``primary at secondary, location``, dropping blank clauses and their connectors."""
    primary = escape_text((primary or "").strip())
    secondary = escape_text((secondary or "").strip())
    location = escape_text((location or "").strip())

    if primary and secondary:
        title = f"{primary}{connector}{secondary}"
    else:
        title = primary or secondary
    if location:
        title = f"{title}, {location}" if title else location
    return title


def _achievement_texts(achievements: Iterable[Achievement]) -> list[str]:
    return [escape_text(a.text.strip()) for a in achievements if a.text and a.text.strip()]


def _present(records: Iterable | None) -> list:
    return [r for r in records or [] if r.has_content()]


def generate_experience_content(experiences: Iterable[Experience] | None) -> list[SectionContent]:
    return [
        SectionContent(
            title=compose_title(exp.position, exp.company, exp.location),
            date=convert_date_range(exp.start_date, exp.end_date, exp.is_present),
            content=convert_external_link_icon(exp.company_url),
            achievements=_achievement_texts(exp.achievements),
        )
        for exp in _present(experiences)
    ]


def generate_internships_content(internships: Iterable[Experience] | None) -> list[SectionContent]:
    return generate_experience_content(internships)


def generate_education_content(education: Iterable[Education] | None) -> list[SectionContent]:
    items = []
    for edu in _present(education):
        degree = edu.degree.strip()
        field = edu.field_of_study.strip()
        primary = f"{degree} in {field}" if degree and field else degree or field

        info = []
        if edu.graduation_score.strip():
            info.append(f"*Grade:* {escape_text(edu.graduation_score.strip())}")
        if edu.description.strip():
            info.append(escape_text(edu.description.strip()))

        items.append(
            SectionContent(
                title=compose_title(primary, edu.institution, edu.location),
                date=convert_date_range(edu.start_date, edu.end_date, edu.is_present),
                additional_info="\n\n".join(info) or None,
            )
        )
    return items


def generate_volunteering_content(
    volunteering: Iterable[Volunteering] | None,
) -> list[SectionContent]:
    return [
        SectionContent(
            title=compose_title(vol.position, vol.organization, vol.location),
            date=convert_date_range(vol.start_date, vol.end_date, vol.is_present),
            achievements=_achievement_texts(vol.achievements),
        )
        for vol in _present(volunteering)
    ]


def generate_projects_content(projects: Iterable[Project] | None) -> list[SectionContent]:
    items = []
    for project in _present(projects):
        title = ""
        if project.title.strip():
            heading = f"*{escape_text(project.title.strip())}*"
            if project.url.strip():
                heading += f" • {convert_external_link_icon(project.url)}"
            title = f"#block(below: 0.6em)[{heading}]"
        items.append(
            SectionContent(title=title, content=escape_text(project.description.strip()))
        )
    return items


def generate_skills_content(
    skills: Iterable[SkillItem] | None,
    technical_skills: str | None = "",
) -> list[SectionContent]:
    """Structured skills when any exist, otherwise the legacy freeform string."""
    skills = list(skills or [])
    if not skills:
        legacy = (technical_skills or "").strip()
        return [SectionContent(content=escape_text(legacy))] if legacy else []

    items = []
    for skill in _present(skills):
        title = escape_text(skill.title.strip())
        description = escape_text(skill.description.strip())
        if not title:
            content = description
        elif not description:
            content = f"*{title}*"
        else:
            content = f"*{title}:* {description}"
        items.append(SectionContent(content=content))
    return items


def generate_languages_content(languages: Iterable[Language] | None) -> list[SectionContent]:
    items = []
    for language in _present(languages):
        content = f"*{escape_text(language.name.strip())}*"
        if language.proficiency.strip():
            content += f" - {escape_text(language.proficiency.strip())}"
        items.append(SectionContent(content=content))
    return items


def generate_certificates_content(
    certificates: Iterable[Certificate] | None,
) -> list[SectionContent]:
    return [
        SectionContent(
            title=compose_title(cert.title, cert.issuer, connector=" from "),
            date=convert_date_range(cert.date),
            content=convert_external_link_icon(cert.url),
            additional_info=escape_text(cert.description.strip()) or None,
        )
        for cert in _present(certificates)
    ]


def generate_contact_content(data: ResumeData) -> list[SectionContent]:
    fragments = [
        convert_email(data.email),
        escape_text(data.phone.strip()),
        escape_text(data.location.strip()),
    ]
    return [SectionContent(content=fragment) for fragment in fragments if fragment]


def social_link_label(link: SocialLink) -> str:
    if link.platform == "other" and link.custom_label.strip():
        return link.custom_label.strip()
    return SOCIAL_PLATFORM_LABELS.get(link.platform, link.platform)


def generate_social_links_content(data: ResumeData) -> list[SectionContent]:
    return [
        SectionContent(content=convert_link(link.url, social_link_label(link)))
        for link in _present(data.social_links)
    ]
