"""Typst markup primitives."""

from resume_builder.markup.converters import (
    HEADER_SPACING,
    ITEMS_SPACING,
    SECTION_SPACING,
    convert_date_range,
    convert_email,
    convert_external_link_icon,
    convert_grid,
    convert_link,
    convert_list,
)
from resume_builder.markup.escaping import escape_string, escape_text

__all__ = [
    "HEADER_SPACING",
    "ITEMS_SPACING",
    "SECTION_SPACING",
    "convert_date_range",
    "convert_email",
    "convert_external_link_icon",
    "convert_grid",
    "convert_link",
    "convert_list",
    "escape_string",
    "escape_text",
]
