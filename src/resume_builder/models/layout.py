"""Static layout description for a template, and the intermediate section content."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class SectionSpacing(_Frozen):
    spacing: Literal["joined", "block"] = "joined"
    item_spacing: str = ""
    join_separator: str = ""


class ProjectsSpacing(_Frozen):
    item_spacing: str = ""


class SocialLinksLayout(_Frozen):
    orientation: Literal["horizontal", "vertical"] = "vertical"
    placement: Literal["header", "sidebar"] = "sidebar"
    separator: str = " • "


class ColumnLayout(_Frozen):
    left_ratio: str = "1fr"
    right_ratio: str = "1fr"
    pinned_left: list[str] = Field(default_factory=list)
    pinned_right: list[str] = Field(default_factory=list)
    movable_sections: list[str] = Field(default_factory=list)

    @property
    def ratio(self) -> str:
        return f"({self.left_ratio}, {self.right_ratio})"


class PageSetup(_Frozen):
    margin: str = "1cm"
    paragraph_leading: str | None = None


class TemplateLayoutConfig(_Frozen):
    layout: Literal["single", "two-column"] = "single"
    sections: SectionSpacing = Field(default_factory=SectionSpacing)
    projects: ProjectsSpacing = Field(default_factory=ProjectsSpacing)
    social_links: SocialLinksLayout = Field(default_factory=SocialLinksLayout)
    columns: ColumnLayout = Field(default_factory=ColumnLayout)
    page: PageSetup = Field(default_factory=PageSetup)

    @property
    def is_two_column(self) -> bool:
        return self.layout == "two-column"


class SectionContent(_Frozen):
    """One renderable record, already converted to markup but not yet laid out."""

    title: str = ""
    date: str = ""
    content: str = ""
    achievements: list[str] = Field(default_factory=list)
    additional_info: str | None = None
