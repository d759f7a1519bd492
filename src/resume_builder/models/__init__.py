"""Data models for resumes, settings and template layouts."""

from resume_builder.models.layout import SectionContent, TemplateLayoutConfig
from resume_builder.models.resume import (
    Achievement,
    Certificate,
    Education,
    Experience,
    Internship,
    Language,
    Project,
    Resume,
    ResumeData,
    SkillItem,
    SocialLink,
    Volunteering,
)
from resume_builder.models.settings import AppSettings

__all__ = [
    "Achievement",
    "AppSettings",
    "Certificate",
    "Education",
    "Experience",
    "Internship",
    "Language",
    "Project",
    "Resume",
    "ResumeData",
    "SectionContent",
    "SkillItem",
    "SocialLink",
    "TemplateLayoutConfig",
    "Volunteering",
]
