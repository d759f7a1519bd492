"""Pydantic models for resume data and the resumes that wrap it.

Attributes are snake_case; the JSON wire format (exports, imports, storage) stays camelCase
through aliases. ``None`` in input always means "absent" and falls back to the field default,
as does any malformed value, so list fields are never ``None`` once a model exists. Lists and
maps keep their well-formed entries.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Annotated, Any, get_origin

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

DEFAULT_SECTION_ORDER: dict[str, int] = {
    "summary": 0,
    "education": 1,
    "experience": 2,
    "skills": 3,
    "volunteering": 4,
    "socialLinks": 5,
    "projects": 6,
    "languages": 7,
    "internships": 8,
    "certificates": 9,
}

DEFAULT_SECTION_HEADERS: dict[str, str] = {
    "personalInfo": "Personal Information",
    "profile": "Profile",
    "info": "Info",
    "socialLinks": "Links",
    "projects": "Projects",
    "languages": "Languages",
    "experience": "Employment History",
    "education": "Education",
    "skills": "Skills",
    "volunteering": "Volunteering",
    "internships": "Internships",
    "certificates": "Certificates",
}

DEFAULT_SECTION_PLACEMENT: dict[str, str] = {
    "skills": "right",
    "projects": "right",
    "volunteering": "right",
    "languages": "right",
    "certificates": "right",
}

# Section key -> ResumeData attribute holding that section's records
LIST_SECTIONS: dict[str, str] = {
    "experience": "experiences",
    "internships": "internships",
    "education": "education",
    "volunteering": "volunteering",
    "skills": "skills",
    "socialLinks": "social_links",
    "projects": "projects",
    "languages": "languages",
    "certificates": "certificates",
}


def _has_text(*values: str) -> bool:
    return any(v and v.strip() for v in values)


class ResumeModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def absent_as_default(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {k: v for k, v in value.items() if v is not None}
        return value

    @field_validator("*", mode="wrap")
    @classmethod
    def malformed_as_default(
        cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> Any:
        """Keep the valid parts of a malformed value and fall back to the default for the rest."""
        try:
            return handler(value)
        except ValidationError:
            field = cls.model_fields[info.field_name]
            if field.is_required():
                raise
            origin = get_origin(field.annotation)
            if origin is list and isinstance(value, list):
                return [item for v in value for item in _valid_or_empty(handler, [v])]
            if origin is dict and isinstance(value, dict):
                merged: dict[str, Any] = {}
                for k, v in value.items():
                    merged.update(_valid_or_empty(handler, {k: v}))
                return merged
            logger.debug("Ignoring malformed %s.%s: %r", cls.__name__, info.field_name, value)
            return field.get_default(call_default_factory=True)


def _valid_or_empty(handler: ValidatorFunctionWrapHandler, value: Any) -> Any:
    try:
        return handler(value)
    except ValidationError as e:
        logger.debug("Dropping malformed entry %r: %s", value, e.errors()[0]["msg"])
        return type(value)()


class Achievement(ResumeModel):
    text: str = ""


def _wrap_plain_achievements(value: Any) -> Any:
    if isinstance(value, list):
        return [{"text": item} if isinstance(item, str) else item for item in value]
    return value


Achievements = Annotated[list[Achievement], BeforeValidator(_wrap_plain_achievements)]


class Experience(ResumeModel):
    company: str = ""
    position: str = ""
    location: str = ""
    company_url: str = ""
    start_date: str = ""
    end_date: str = ""
    is_present: bool = False
    achievements: Achievements = Field(default_factory=list)

    def has_content(self) -> bool:
        return _has_text(
            self.company,
            self.position,
            self.location,
            self.company_url,
            self.start_date,
            self.end_date,
            *(a.text for a in self.achievements),
        )


class Internship(Experience):
    pass


class Education(ResumeModel):
    institution: str = ""
    degree: str = ""
    field_of_study: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    is_present: bool = False
    description: str = ""
    graduation_score: str = ""

    def has_content(self) -> bool:
        return _has_text(
            self.institution,
            self.degree,
            self.field_of_study,
            self.location,
            self.start_date,
            self.end_date,
            self.description,
            self.graduation_score,
        )


class Volunteering(ResumeModel):
    organization: str = ""
    position: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    is_present: bool = False
    achievements: Achievements = Field(default_factory=list)

    def has_content(self) -> bool:
        return _has_text(
            self.organization,
            self.position,
            self.location,
            self.start_date,
            self.end_date,
            *(a.text for a in self.achievements),
        )


class SkillItem(ResumeModel):
    title: str = ""
    description: str = ""

    def has_content(self) -> bool:
        return _has_text(self.title, self.description)


class SocialLink(ResumeModel):
    platform: str = ""
    url: str = ""
    custom_label: str = ""

    def has_content(self) -> bool:
        # A link without a target has nothing to point at.
        return _has_text(self.platform) and _has_text(self.url)


class Project(ResumeModel):
    title: str = ""
    url: str = ""
    description: str = ""

    def has_content(self) -> bool:
        return _has_text(self.title, self.description)


class Language(ResumeModel):
    name: str = ""
    proficiency: str = ""

    def has_content(self) -> bool:
        return _has_text(self.name)


class Certificate(ResumeModel):
    title: str = ""
    issuer: str = ""
    date: str = ""
    url: str = ""
    description: str = ""

    def has_content(self) -> bool:
        return _has_text(self.title, self.issuer)


class ResumeData(ResumeModel):
    version: str = "v1"
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    position: str = ""
    location: str = ""
    summary: str = ""

    experiences: list[Experience] = Field(default_factory=list)
    internships: list[Internship] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    volunteering: list[Volunteering] = Field(default_factory=list)
    skills: list[SkillItem] = Field(default_factory=list)
    social_links: list[SocialLink] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    languages: list[Language] = Field(default_factory=list)
    certificates: list[Certificate] = Field(default_factory=list)

    # Legacy freeform fields kept for older saved resumes
    technical_skills: str = ""
    soft_skills: str = ""

    section_order: dict[str, int] = Field(default_factory=lambda: dict(DEFAULT_SECTION_ORDER))
    section_headers: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_SECTION_HEADERS))
    section_placement: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_SECTION_PLACEMENT)
    )

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name.strip(), self.last_name.strip()) if p)

    def section_header(self, key: str) -> str:
        """Display title for a section, falling back to the builtin default."""
        custom = self.section_headers.get(key) or ""
        if custom.strip():
            return custom.strip()
        return DEFAULT_SECTION_HEADERS.get(key, key)

    def placement(self, key: str) -> str:
        return "left" if self.section_placement.get(key) == "left" else "right"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Resume(ResumeModel):
    id: str
    name: str
    data: ResumeData = Field(default_factory=ResumeData)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
