"""Shared test fixtures."""

from __future__ import annotations

import itertools
from datetime import datetime, timedelta, timezone

import pytest

from resume_builder.models.resume import (
    Certificate,
    Education,
    Experience,
    Internship,
    Language,
    Project,
    ResumeData,
    SkillItem,
    SocialLink,
    Volunteering,
)
from resume_builder.store.resume_store import ResumeStore
from resume_builder.store.workspace import ResumeWorkspace
from resume_builder.templates.loader import load_layout


@pytest.fixture
def sample_data() -> ResumeData:
    return ResumeData(
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        phone="+44 20 7946 0000",
        position="Senior Engineer",
        location="London",
        summary="Engineer with a taste for #analytical engines.",
        experiences=[
            Experience(
                company="Analytical Engines Ltd",
                position="Lead Engineer",
                location="London",
                company_url="https://engines.example.com",
                start_date="2020-01",
                is_present=True,
                achievements=["Designed the first program", "Cut costs by 30%"],
            ),
            Experience(),
        ],
        internships=[Internship(company="Babbage & Co", position="Intern", start_date="2018")],
        education=[
            Education(
                institution="University of London",
                degree="BSc",
                field_of_study="Mathematics",
                start_date="2014",
                end_date="2018",
                graduation_score="First",
            )
        ],
        volunteering=[Volunteering(organization="Code Club", position="Mentor", start_date="2019")],
        skills=[
            SkillItem(title="Languages", description="Python, Go"),
            SkillItem(title="Typst"),
        ],
        social_links=[
            SocialLink(platform="github", url="https://github.com/ada"),
            SocialLink(platform="other", url="https://ada.blog", custom_label="Blog"),
            SocialLink(platform="linkedin"),
        ],
        projects=[Project(title="Engine", url="https://engine.dev", description="A difference engine")],
        languages=[Language(name="English", proficiency="Native")],
        certificates=[Certificate(title="AWS Architect", issuer="Amazon", date="2023")],
    )


@pytest.fixture
def default_layout():
    return load_layout("default")


@pytest.fixture
def compact_layout():
    return load_layout("compact")


@pytest.fixture
def clock():
    """Deterministic clock advancing one minute per call."""
    ticks = itertools.count()
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return lambda: start + timedelta(minutes=next(ticks))


@pytest.fixture
def workspace(clock) -> ResumeWorkspace:
    return ResumeWorkspace(clock=clock)


@pytest.fixture
def store(tmp_path) -> ResumeStore:
    return ResumeStore(db_path=tmp_path / "resumes.db")
