"""Spreadsheet access for translation tables."""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

import pandas as pd

SPREADSHEET_SUFFIXES = frozenset({".xlsx", ".xlsm", ".xls"})


def is_spreadsheet(path: Union[str, Path]) -> bool:
    return Path(path).suffix.lower() in SPREADSHEET_SUFFIXES


def read_spreadsheet(path: Union[str, Path], sheet_name: Union[int, str] = 0) -> List[List[str]]:
    """Read one worksheet as a list of string rows.

    The header row is returned as the first row, unchanged, so duplicate or
    blank column names keep their position.

    Args:
        path: Spreadsheet file
        sheet_name: Worksheet index or name (default: first sheet)

    Returns:
        Every row of the sheet, with empty cells as ``""``
    """
    df = pd.read_excel(
        path,
        sheet_name=sheet_name,
        header=None,
        dtype=str,
        keep_default_na=False,
    )
    return df.fillna("").values.tolist()
