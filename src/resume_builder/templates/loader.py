from pathlib import Path

import yaml

from resume_builder.models.layout import TemplateLayoutConfig

LAYOUTS_DIR = Path(__file__).parent / "layouts"


def load_layout(name: str) -> TemplateLayoutConfig:
    """Load a template layout by name from the layouts directory."""
    path = LAYOUTS_DIR / f"{name}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Layout not found: {name}")
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return TemplateLayoutConfig(**(data or {}))


def list_layouts() -> list[str]:
    """List available layout names."""
    return [p.stem for p in LAYOUTS_DIR.glob("*.yaml")]
