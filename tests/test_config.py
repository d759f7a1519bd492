"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest

from resume_builder.config import load_config


class TestConfig:
    def test_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.yaml")
        assert config.render.font == "Calibri"
        assert config.render.font_size == 14
        assert config.render.template == "default"
        assert config.settings_service.algorithm == "HS256"
        assert config.settings_service.cookie_name == "auth-token"
        assert config.settings_service.resolved_settings_db_path is None

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "render:\n"
            "  font: Geist\n"
            "  font_size: 11\n"
            "  template: compact\n"
            "storage:\n"
            "  db_path: ~/resumes/cv.db\n"
            "settings_service:\n"
            "  jwt_secret: s3cret\n"
            "  settings_db_path: /tmp/settings.db\n"
        )
        config = load_config(path)
        assert config.render.font == "Geist"
        assert config.render.font_size == 11
        assert config.render.template == "compact"
        assert config.storage.resolved_db_path == Path.home() / "resumes" / "cv.db"
        assert config.settings_service.jwt_secret == "s3cret"
        assert config.settings_service.resolved_settings_db_path == Path("/tmp/settings.db")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path).render.font_size == 14


class TestConfigValidation:
    def test_invalid_font_size(self, tmp_path):
        """font_size outside 6-72 raises ValueError."""
        path = tmp_path / "bad.yaml"
        path.write_text("render:\n  font_size: 200\n")
        with pytest.raises(ValueError, match="font_size"):
            load_config(path)

    def test_invalid_algorithm(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("settings_service:\n  algorithm: none\n")
        with pytest.raises(ValueError, match="algorithm"):
            load_config(path)
