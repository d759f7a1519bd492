"""Typst fragments shared by every template: links, dates, lists, headers, grids."""

from __future__ import annotations

from resume_builder.markup.escaping import escape_string, escape_text

HEADER_SPACING = "0.8em"
ITEMS_SPACING = "0.6em"
SECTION_SPACING = "1.4em"

PRESENT_LABEL = "Present"
DATE_SEPARATOR = " – "
COLUMN_GUTTER = "2em"


def _pt(size: float) -> str:
    return f"{size:g}pt"


def convert_link(url: str | None, label: str | None = None) -> str:
    """Clickable link; the url itself is shown when no label is given."""
    if not url or not url.strip():
        return ""
    url = url.strip()
    text = label.strip() if label and label.strip() else url
    return f'#link("{escape_string(url)}")[{escape_text(text)}]'


def convert_email(address: str | None) -> str:
    if not address or not address.strip():
        return ""
    address = address.strip()
    return f'#link("mailto:{escape_string(address)}")[{escape_text(address)}]'


def convert_external_link_icon(url: str | None) -> str:
    if not url or not url.strip():
        return ""
    return f'#link("{escape_string(url.strip())}")[Website #sym.arrow.tr]'


def convert_date_range(
    start: str | None = "",
    end: str | None = "",
    is_present: bool | None = False,
) -> str:
    """Display a date range. Dates are shown as entered, never parsed.

    >>> convert_date_range("2020-01", "2022-01")
    '2020-01 – 2022-01'
    >>> convert_date_range("2020-01", "", True)
    '2020-01 – Present'
    """
    start = escape_text((start or "").strip())
    end = PRESENT_LABEL if is_present else escape_text((end or "").strip())
    if start and end:
        return f"{start}{DATE_SEPARATOR}{end}"
    return start or end


def convert_list(items: list[str]) -> str:
    return "\n".join(f"- {item}" for item in items if item)


def convert_grid(columns: list[str], ratio: str) -> str:
    cells = ",\n".join(f"  [{column}]" for column in columns)
    return f"#grid(\n  columns: {ratio},\n  column-gutter: {COLUMN_GUTTER},\n{cells}\n)"


def block(content: str, below: str, above: str = "0em") -> str:
    return f"#block(above: {above}, below: {below})[{content}]"


def render_template_header(text: str, font_size: float) -> str:
    heading = f'#text(size: {_pt(font_size + 4)}, weight: "bold")[{escape_text(text)}]'
    return block(heading, HEADER_SPACING)


def render_template_sub_header(title: str, font_size: float) -> str:
    return f'#text(size: {_pt(font_size + 1)}, weight: "bold")[{title}]'


def render_template_date(date: str, font_size: float) -> str:
    if not date:
        return ""
    return f"#text(size: {_pt(font_size - 2)}, fill: gray)[{date}]"


def render_template_date_with_link(date: str, link: str | None, font_size: float) -> str:
    parts = [render_template_date(date, font_size), link or ""]
    return " • ".join(p for p in parts if p)
