"""User-facing application settings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_FONT_SIZE = 14

AVAILABLE_FONTS: dict[str, str] = {
    "Calibri": "Calibri",
    "Geist": "Geist",
    "Roboto": "Roboto",
}


class AppSettings(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    selected_font: str = "Calibri"
    selected_template: str = "default"
    font_size: int = Field(default=DEFAULT_FONT_SIZE, ge=6, le=72)
    is_raw_mode: bool = False
