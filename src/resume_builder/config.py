"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

SUPPORTED_JWT_ALGORITHMS = ("HS256", "HS384", "HS512")


@dataclass(frozen=True)
class RenderConfig:
    font: str = "Calibri"
    font_size: int = 14
    template: str = "default"

    def __post_init__(self) -> None:
        if not 6 <= self.font_size <= 72:
            raise ValueError(f"font_size must be between 6 and 72, got {self.font_size}")


@dataclass(frozen=True)
class StorageConfig:
    db_path: str = "~/.resume-builder/resumes.db"

    @property
    def resolved_db_path(self) -> Path:
        return Path(self.db_path).expanduser()


@dataclass(frozen=True)
class SettingsServiceConfig:
    jwt_secret: str = ""
    algorithm: str = "HS256"
    cookie_name: str = "auth-token"
    settings_db_path: str | None = None

    def __post_init__(self) -> None:
        if self.algorithm not in SUPPORTED_JWT_ALGORITHMS:
            raise ValueError(
                f"algorithm must be one of {', '.join(SUPPORTED_JWT_ALGORITHMS)}, got {self.algorithm}"
            )

    @property
    def resolved_settings_db_path(self) -> Path | None:
        if not self.settings_db_path:
            return None
        return Path(self.settings_db_path).expanduser()


@dataclass(frozen=True)
class AppConfig:
    render: RenderConfig = field(default_factory=RenderConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    settings_service: SettingsServiceConfig = field(default_factory=SettingsServiceConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        render=RenderConfig(**raw.get("render", {})),
        storage=StorageConfig(**raw.get("storage", {})),
        settings_service=SettingsServiceConfig(**raw.get("settings_service", {})),
    )
