"""Escaping of free text for Typst markup and string literals."""

from __future__ import annotations

import re

# Characters that open markup anywhere in a line
_INLINE_SPECIAL = re.compile(r"([\\#*_`<>@$\[\]~'\"])")
# `//` and `/*` start comments
_COMMENT_OPENER = re.compile(r"/(?=[/*])")
# `--` and `---` become dashes
_DASH_RUN = re.compile(r"-(?=-)")
# `-?` is a soft hyphen
_SOFT_HYPHEN = re.compile(r"(?<=-)\?")
# `...` becomes an ellipsis
_DOT_RUN = re.compile(r"\.(?=\.)")
# Headings, bullet/enum/term lists when they start a line
_LINE_MARKER = re.compile(r"^([ \t]*)([=+\-/]+|\d+\.)(?=\s|$)", re.MULTILINE)


def escape_text(text: str | None) -> str:
    """Escape ``text`` so Typst renders it literally in content mode.

    Plain dates such as ``2020-01`` or ``05/2021`` come back unchanged; only sequences Typst
    would interpret are prefixed with a backslash.
    """
    if not text:
        return ""
    text = str(text)
    text = _INLINE_SPECIAL.sub(r"\\\1", text)
    text = _COMMENT_OPENER.sub(r"\\/", text)
    text = _DASH_RUN.sub(r"\\-", text)
    text = _SOFT_HYPHEN.sub(r"\\?", text)
    text = _DOT_RUN.sub(r"\\.", text)
    return _LINE_MARKER.sub(_escape_line_marker, text)


def _escape_line_marker(match: re.Match) -> str:
    indent, marker = match.group(1), match.group(2)
    if marker[-1] == ".":
        return f"{indent}{marker[:-1]}\\."
    return f"{indent}\\{marker}"


def escape_string(text: str | None) -> str:
    """Escape ``text`` for use inside a double-quoted Typst string literal."""
    if not text:
        return ""
    return (
        str(text)
        .replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\r", "\\r")
        .replace("\n", "\\n")
        .replace("\t", "\\t")
    )
