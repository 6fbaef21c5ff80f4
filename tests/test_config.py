"""Tests for adrscope/config.py - environment settings."""

import os

import pytest

from adrscope.config import Settings, load_environment


class TestSettings:
    """Test reading settings from environment mappings."""

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.input_dir == "docs/decisions"
        assert settings.pattern == "**/*.md"
        assert settings.output == "adrs.html"
        assert settings.wiki_dir == "wiki"
        assert settings.title == "Architecture Decision Records"
        assert settings.log_level == "WARNING"
        assert settings.workers == 1

    def test_overrides(self):
        settings = Settings.from_env({
            "ADRSCOPE_INPUT_DIR": "adr",
            "ADRSCOPE_PATTERN": "*.md",
            "ADRSCOPE_OUTPUT": "site/index.html",
            "ADRSCOPE_TITLE": "Decisions",
            "ADRSCOPE_LOG_LEVEL": "debug",
            "ADRSCOPE_WORKERS": "4",
        })
        assert settings.input_dir == "adr"
        assert settings.pattern == "*.md"
        assert settings.output == "site/index.html"
        assert settings.title == "Decisions"
        assert settings.log_level == "DEBUG"
        assert settings.workers == 4

    def test_blank_workers_uses_default(self):
        assert Settings.from_env({"ADRSCOPE_WORKERS": " "}).workers == 1

    @pytest.mark.parametrize("raw", ["many", "2.5", "0", "-3"])
    def test_invalid_workers(self, raw):
        with pytest.raises(ValueError, match="ADRSCOPE_WORKERS"):
            Settings.from_env({"ADRSCOPE_WORKERS": raw})

    def test_frozen(self):
        settings = Settings.from_env({})
        with pytest.raises(AttributeError):
            settings.workers = 2

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("ADRSCOPE_WIKI_DIR", "docs/wiki")
        assert Settings.from_env().wiki_dir == "docs/wiki"


class TestLoadEnvironment:

    def test_loads_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("ADRSCOPE_TITLE", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("ADRSCOPE_TITLE=From dotenv\n")

        assert load_environment(env_file) is True
        assert os.environ["ADRSCOPE_TITLE"] == "From dotenv"

    def test_existing_variables_win(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ADRSCOPE_TITLE", "From shell")
        env_file = tmp_path / ".env"
        env_file.write_text("ADRSCOPE_TITLE=From dotenv\n")

        load_environment(env_file)
        assert os.environ["ADRSCOPE_TITLE"] == "From shell"

    def test_missing_file(self, tmp_path):
        assert load_environment(tmp_path / "absent.env") is False
