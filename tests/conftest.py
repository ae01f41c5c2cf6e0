"""Shared pytest fixtures for all tests."""

import sys
from pathlib import Path

import pytest

# Ensure the package is importable without an editable install
SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from translation_tables.services.translation_loader import TranslationTableLoader


@pytest.fixture
def write_text(tmp_path):
    """Write a text file below tmp_path and return its path."""

    def _write(name: str, content: str, encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding=encoding)
        return path

    return _write


@pytest.fixture
def write_xlsx(tmp_path):
    """Write rows (header first) to a single-sheet workbook."""
    import pandas as pd

    def _write(name: str, rows) -> Path:
        path = tmp_path / name
        pd.DataFrame(rows).to_excel(path, header=False, index=False)
        return path

    return _write


@pytest.fixture
def loader(tmp_path):
    temp_dir = tmp_path / "copies"
    temp_dir.mkdir()
    return TranslationTableLoader(temp_dir=str(temp_dir))


@pytest.fixture
def sample_csv():
    """Two rows with the same key, from the merge policy examples."""
    return "Context,Reference,EN,FR\nA,Hello,Hi,Salut\nA,Hello,Hey,Bonjour\n"
