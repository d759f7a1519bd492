"""In-memory resume workspace: the user's resumes, the active one, and every edit operation.

Edits never touch existing objects. Each one validates a fresh ``ResumeData``, wraps it in a
fresh ``Resume`` and swaps it into a fresh mapping, so anything a reader already holds (for
example a preview being rendered) stays exactly as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel

from resume_builder.models.resume import (
    DEFAULT_SECTION_ORDER,
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

logger = logging.getLogger(__name__)

DEFAULT_RESUME_NAME = "My Resume"

RECORD_TYPES: dict[str, type[BaseModel]] = {
    "experiences": Experience,
    "internships": Internship,
    "education": Education,
    "volunteering": Volunteering,
    "skills": SkillItem,
    "social_links": SocialLink,
    "projects": Project,
    "languages": Language,
    "certificates": Certificate,
}

ACHIEVEMENT_SECTIONS = ("experiences", "internships", "volunteering")

_ALIASES = {
    (info.alias or name): name for name, info in ResumeData.model_fields.items()
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _field_name(key: str) -> str:
    return key if key in ResumeData.model_fields else _ALIASES.get(key, key)


def _moved(items: list, from_index: int, to_index: int) -> list:
    items = list(items)
    items.insert(to_index, items.pop(from_index))
    return items


def _new_record(section: str) -> BaseModel:
    record_type = RECORD_TYPES[section]
    if section == "experiences":
        return record_type(achievements=[Achievement()])
    return record_type()


class ResumeWorkspace:
    """All resumes of one user, keyed by id, with at most one active resume."""

    def __init__(
        self,
        resumes: Mapping[str, Resume] | None = None,
        active_resume_id: str | None = None,
        next_id: int = 1,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._resumes: dict[str, Resume] = dict(resumes or {})
        self.active_resume_id = active_resume_id if active_resume_id in self._resumes else None
        self.next_id = next_id
        self._clock = clock

    # -- queries -----------------------------------------------------------

    @property
    def resumes(self) -> dict[str, Resume]:
        return dict(self._resumes)

    def get(self, resume_id: str) -> Resume | None:
        return self._resumes.get(resume_id)

    @property
    def active_resume(self) -> Resume | None:
        if self.active_resume_id is None:
            return None
        return self._resumes.get(self.active_resume_id)

    @property
    def active_resume_data(self) -> ResumeData:
        resume = self.active_resume
        return resume.data if resume else ResumeData()

    @property
    def resumes_list(self) -> list[Resume]:
        return sorted(self._resumes.values(), key=lambda r: r.created_at)

    @property
    def resume_count(self) -> int:
        return len(self._resumes)

    @property
    def full_name(self) -> str:
        resume = self.active_resume
        return resume.data.full_name if resume else ""

    @property
    def has_personal_info(self) -> bool:
        resume = self.active_resume
        if resume is None:
            return False
        data = resume.data
        return bool(data.first_name or data.last_name or data.email or data.phone)

    @property
    def sections_with_data(self) -> list[str]:
        resume = self.active_resume
        if resume is None:
            return []
        data = resume.data
        checks = [
            ("summary", data.summary),
            ("experience", data.experiences),
            ("education", data.education),
            ("skills", data.skills),
            ("volunteering", data.volunteering),
            ("socialLinks", data.social_links),
            ("projects", data.projects),
            ("languages", data.languages),
            ("internships", data.internships),
            ("certificates", data.certificates),
        ]
        return [key for key, value in checks if value]

    @property
    def ordered_sections(self) -> list[tuple[str, int]]:
        resume = self.active_resume
        if resume is None:
            return []
        order = resume.data.section_order
        sections = [(key, order.get(key, default)) for key, default in DEFAULT_SECTION_ORDER.items()]
        return sorted(sections, key=lambda item: item[1])

    # -- resume lifecycle -----------------------------------------------------

    def initialize(self) -> None:
        """Backfill section ranks added since a resume was saved; ensure one resume exists."""
        for resume_id, resume in list(self._resumes.items()):
            missing = {k: v for k, v in DEFAULT_SECTION_ORDER.items() if k not in resume.data.section_order}
            if missing:
                order = {**resume.data.section_order, **missing}
                self._put(resume.model_copy(update={"data": resume.data.model_copy(update={"section_order": order})}))

        if not self._resumes:
            self.create_resume(DEFAULT_RESUME_NAME)

        if self.active_resume_id is None and self._resumes:
            self.active_resume_id = next(iter(self._resumes))

    def create_resume(self, name: str | None = None) -> str:
        resume_id = f"resume-{self.next_id}"
        now = self._clock()
        resume = Resume(
            id=resume_id,
            name=name or f"Resume {self.next_id}",
            data=ResumeData(),
            created_at=now,
            updated_at=now,
        )
        self._put(resume)
        self.next_id += 1
        if self.resume_count == 1:
            self.active_resume_id = resume_id
        logger.debug("Created resume %s (%s)", resume_id, resume.name)
        return resume_id

    def set_active_resume(self, resume_id: str) -> None:
        if resume_id in self._resumes:
            self.active_resume_id = resume_id

    def rename_resume(self, resume_id: str, name: str) -> None:
        resume = self._resumes.get(resume_id)
        if resume is None:
            return
        self._put(resume.model_copy(update={"name": name, "updated_at": self._clock()}))

    def delete_resume(self, resume_id: str) -> None:
        if resume_id not in self._resumes:
            return
        self._resumes = {k: v for k, v in self._resumes.items() if k != resume_id}
        if self.active_resume_id == resume_id:
            self.active_resume_id = next(iter(self._resumes), None)
        logger.debug("Deleted resume %s", resume_id)

    def duplicate_resume(self, resume_id: str) -> str:
        original = self._resumes.get(resume_id)
        if original is None:
            return ""
        new_id = f"resume-{self.next_id}"
        now = self._clock()
        self._put(
            Resume(
                id=new_id,
                name=f"{original.name} (Copy)",
                data=original.data.model_copy(deep=True),
                created_at=now,
                updated_at=now,
            )
        )
        self.next_id += 1
        return new_id

    # -- whole-data edits -----------------------------------------------------

    def update_resume_data(
        self,
        resume_id: str,
        data: ResumeData | Mapping[str, Any] | None = None,
        **fields: Any,
    ) -> None:
        """Merge ``data`` and ``fields`` (snake_case or camelCase keys) into a resume."""
        resume = self._resumes.get(resume_id)
        if resume is None:
            logger.debug("Ignoring update for unknown resume %s", resume_id)
            return
        if isinstance(data, ResumeData):
            data = data.model_dump()
        updates = {_field_name(k): v for k, v in {**(data or {}), **fields}.items()}
        new_data = ResumeData.model_validate({**resume.data.model_dump(), **updates})
        self._put(resume.model_copy(update={"data": new_data, "updated_at": self._clock()}))

    def update_active_resume_data(
        self, data: ResumeData | Mapping[str, Any] | None = None, **fields: Any
    ) -> None:
        if self.active_resume_id is not None:
            self.update_resume_data(self.active_resume_id, data, **fields)

    def reset_resume_data(self) -> None:
        if self.active_resume_id is not None:
            self.update_resume_data(self.active_resume_id, ResumeData())

    # -- list sections ----------------------------------------------------------

    def _list(self, section: str) -> list | None:
        resume = self.active_resume
        if resume is None:
            return None
        return list(getattr(resume.data, _field_name(section)))

    def _replace_list(self, section: str, items: list) -> None:
        self.update_active_resume_data(**{_field_name(section): items})

    def add_item(self, section: str, item: BaseModel | Mapping[str, Any] | None = None) -> None:
        items = self._list(section)
        if items is None:
            return
        name = _field_name(section)
        record = _new_record(name) if item is None else RECORD_TYPES[name].model_validate(item)
        self._replace_list(name, [*items, record])

    def update_item(self, section: str, index: int, **fields: Any) -> None:
        items = self._list(section)
        if items is None or not 0 <= index < len(items):
            return
        record = items[index]
        items[index] = type(record).model_validate({**record.model_dump(), **fields})
        self._replace_list(section, items)

    def remove_item(self, section: str, index: int) -> None:
        items = self._list(section)
        if items is None or not 0 <= index < len(items):
            return
        del items[index]
        self._replace_list(section, items)

    def move_item(self, section: str, from_index: int, to_index: int) -> None:
        items = self._list(section)
        if items is None or not 0 <= from_index < len(items):
            return
        self._replace_list(section, _moved(items, from_index, to_index))

    # -- achievements -----------------------------------------------------------

    def _edit_achievements(
        self,
        section: str,
        index: int,
        edit: Callable[[list[Achievement]], list[Achievement] | None],
    ) -> None:
        name = _field_name(section)
        if name not in ACHIEVEMENT_SECTIONS:
            raise ValueError(f"Section has no achievements: {section}")
        items = self._list(name)
        if items is None or not 0 <= index < len(items):
            return
        achievements = edit(list(items[index].achievements))
        if achievements is None:
            return
        items[index] = items[index].model_copy(update={"achievements": achievements})
        self._replace_list(name, items)

    def add_achievement(self, section: str, index: int, text: str = "") -> None:
        self._edit_achievements(section, index, lambda a: [*a, Achievement(text=text)])

    def update_achievement(self, section: str, index: int, achievement_index: int, text: str) -> None:
        def edit(achievements: list[Achievement]) -> list[Achievement] | None:
            if not 0 <= achievement_index < len(achievements):
                return None
            achievements[achievement_index] = Achievement(text=text)
            return achievements

        self._edit_achievements(section, index, edit)

    def remove_achievement(self, section: str, index: int, achievement_index: int) -> None:
        def edit(achievements: list[Achievement]) -> list[Achievement] | None:
            if not 0 <= achievement_index < len(achievements):
                return None
            del achievements[achievement_index]
            return achievements

        self._edit_achievements(section, index, edit)

    def move_achievement(self, section: str, index: int, from_index: int, to_index: int) -> None:
        def edit(achievements: list[Achievement]) -> list[Achievement] | None:
            if not 0 <= from_index < len(achievements):
                return None
            return _moved(achievements, from_index, to_index)

        self._edit_achievements(section, index, edit)

    # -- section layout ---------------------------------------------------------

    def update_section_order(self, order: Mapping[str, int]) -> None:
        self.update_active_resume_data(section_order=dict(order))

    def update_section_header(self, section: str, header_text: str) -> None:
        resume = self.active_resume
        if resume is not None:
            headers = {**resume.data.section_headers, section: header_text}
            self.update_active_resume_data(section_headers=headers)

    def update_section_placement(self, section: str, placement: str) -> None:
        if placement not in ("left", "right"):
            raise ValueError(f"placement must be 'left' or 'right', got {placement!r}")
        resume = self.active_resume
        if resume is not None:
            placements = {**resume.data.section_placement, section: placement}
            self.update_active_resume_data(section_placement=placements)

    def _swap_rank(self, section: str, step: int) -> None:
        resume = self.active_resume
        if resume is None or section not in resume.data.section_order:
            return
        order = resume.data.section_order
        current = order[section]
        target = next((k for k, v in order.items() if v == current + step), None)
        if target is None:
            return
        self.update_section_order({**order, section: current + step, target: current})

    def move_section_up(self, section: str) -> None:
        self._swap_rank(section, -1)

    def move_section_down(self, section: str) -> None:
        self._swap_rank(section, 1)

    def _put(self, resume: Resume) -> None:
        self._resumes = {**self._resumes, resume.id: resume}
