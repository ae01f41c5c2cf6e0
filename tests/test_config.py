"""Tests for environment settings and the temporary copy helper."""

import pytest

from translation_tables.config import Settings
from translation_tables.infrastructure.file_copy import temporary_copy
from translation_tables.services.translation_loader import TranslationTableLoader


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "TRANSLATIONS_ENCODING",
        "TRANSLATIONS_TEMP_DIR",
        "TRANSLATIONS_SHEET",
        "TRANSLATIONS_LOG_DIR",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    def test_defaults(self, clean_env):
        settings = Settings.from_env()
        assert settings.encoding == "utf-8-sig"
        assert settings.temp_dir is None
        assert settings.sheet_name == 0
        assert settings.log_level == "INFO"

    def test_values_from_environment(self, clean_env, tmp_path):
        clean_env.setenv("TRANSLATIONS_ENCODING", "utf-16")
        clean_env.setenv("TRANSLATIONS_TEMP_DIR", str(tmp_path))
        clean_env.setenv("TRANSLATIONS_SHEET", "Labels")
        clean_env.setenv("LOG_LEVEL", "debug")

        settings = Settings.from_env()

        assert settings.encoding == "utf-16"
        assert settings.temp_dir == str(tmp_path)
        assert settings.sheet_name == "Labels"
        assert settings.log_level == "DEBUG"

    def test_numeric_sheet_is_an_index(self, clean_env):
        clean_env.setenv("TRANSLATIONS_SHEET", "2")
        assert Settings.from_env().sheet_name == 2

    def test_loader_from_settings(self):
        loader = TranslationTableLoader.from_settings(Settings(encoding="latin-1", sheet_name=1))
        assert loader.encoding == "latin-1"
        assert loader.sheet_name == 1


class TestTemporaryCopy:
    def test_copy_keeps_suffix_and_is_removed(self, write_text, tmp_path):
        source = write_text("Book1.xlsx", "payload")
        copies = tmp_path / "copies"
        copies.mkdir()

        with temporary_copy(source, str(copies)) as copy_path:
            assert copy_path != source
            assert copy_path.suffix == ".xlsx"
            assert copy_path.read_text() == "payload"

        assert not copy_path.exists()
        assert source.exists()
