from pathlib import Path

from jinja2 import Environment, FileSystemLoader, Template

from resume_builder.markup.escaping import escape_string
from resume_builder.models.layout import PageSetup

TYPST_TEMPLATES_DIR = Path(__file__).parent


def load_document_template() -> Template:
    """Load the Typst page skeleton every resume document is poured into."""
    env = Environment(
        loader=FileSystemLoader(str(TYPST_TEMPLATES_DIR)),
        autoescape=False,
        trim_blocks=True,
        keep_trailing_newline=False,
        auto_reload=False,
    )
    return env.get_template("document.typ.j2")


def render_document(
    template: Template,
    body: str,
    font: str,
    font_size: float,
    page: PageSetup,
) -> str:
    """Wrap section markup with page setup, font selection and a trailing page break."""
    return template.render(
        margin=page.margin,
        font=escape_string(font),
        font_size=f"{font_size:g}pt",
        paragraph_leading=page.paragraph_leading,
        body=body,
    )


def save_typst(content: str, output_path: str | Path) -> Path:
    """Save Typst markup to file."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
