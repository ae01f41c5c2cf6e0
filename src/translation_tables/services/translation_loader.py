"""Load translation tables into a caller-owned lookup.

A translation table has the fixed leading columns ``Context, [Instance,]
Reference`` followed by one column per language. Rows are merged into a
mapping from :func:`make_key` to :class:`TranslationRecord`; rows with the
same key end up in the same record.

File-based loads never raise. A file that cannot be read (usually because a
spreadsheet application holds it locked) is copied to a temporary file and
read once more; the outcome is reported through :class:`LoadResult`.
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, List, MutableMapping, Optional, Sequence, Union

import pandas as pd

from translation_tables.config import Settings
from translation_tables.domain.load_result import LoadResult, LoadStatus, MergeStats
from translation_tables.domain.translation import MergePolicy, TranslationRecord, make_key
from translation_tables.infrastructure.file_copy import temporary_copy
from translation_tables.parsing.delimited import detect_separator, from_csv, split_fields
from translation_tables.repository.spreadsheet_reader import is_spreadsheet, read_spreadsheet

_LOG = logging.getLogger(__name__)

TranslationMap = MutableMapping[str, TranslationRecord]
Table = Union[pd.DataFrame, Sequence[Sequence[Any]]]
PathLike = Union[str, Path]


def start_column(has_instance: bool) -> int:
    """Index of the first language column."""
    return 3 if has_instance else 2


def _read_lines(path: Path, encoding: str) -> List[str]:
    with open(path, mode="r", encoding=encoding) as file:
        return [line.rstrip("\n") for line in file]


def _cell_text(value: Any) -> str:
    if value is None or value is pd.NA:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value)


def _table_rows(table: Table) -> List[Sequence[Any]]:
    if isinstance(table, pd.DataFrame):
        return [list(table.columns), *table.itertuples(index=False, name=None)]
    return list(table)


class TranslationTableLoader:
    """Reads delimited text, spreadsheets and in-memory tables."""

    def __init__(
        self,
        encoding: str = "utf-8-sig",
        temp_dir: Optional[str] = None,
        delimited_policy: MergePolicy = MergePolicy.FIRST_WINS,
        table_policy: MergePolicy = MergePolicy.LAST_WINS,
        sheet_name: Union[int, str] = 0,
    ):
        """Initialize the loader.

        Args:
            encoding: Text encoding of delimited files
            temp_dir: Where temporary copies of locked files go (None: system default)
            delimited_policy: Merge policy for delimited text loads
            table_policy: Merge policy for spreadsheet and table loads
            sheet_name: Worksheet to read from spreadsheets
        """
        self.encoding = encoding
        self.temp_dir = temp_dir
        self.delimited_policy = delimited_policy
        self.table_policy = table_policy
        self.sheet_name = sheet_name

    @classmethod
    def from_settings(cls, settings: Settings) -> TranslationTableLoader:
        return cls(
            encoding=settings.encoding,
            temp_dir=settings.temp_dir,
            sheet_name=settings.sheet_name,
        )

    # ------------------------------------------------------------------
    # public operations
    # ------------------------------------------------------------------
    def load(self, mapping: TranslationMap, path: PathLike, has_instance: bool = False) -> LoadResult:
        """Load a file, picking the reader from its suffix."""
        if is_spreadsheet(path):
            return self.load_from_spreadsheet(mapping, path, has_instance)
        return self.load_from_delimited_text(mapping, path, has_instance)

    def load_from_delimited_text(
        self, mapping: TranslationMap, path: PathLike, has_instance: bool = False
    ) -> LoadResult:
        return self._load_with_recovery(mapping, path, has_instance, self._parse_delimited)

    def load_from_spreadsheet(
        self, mapping: TranslationMap, path: PathLike, has_instance: bool = False
    ) -> LoadResult:
        return self._load_with_recovery(mapping, path, has_instance, self._parse_spreadsheet)

    def load_from_table(self, mapping: TranslationMap, table: Table, has_instance: bool = False) -> LoadResult:
        """Merge an in-memory table whose first row is the header."""
        stats = self._merge_table(mapping, _table_rows(table), has_instance)
        return LoadResult.from_stats("<table>", LoadStatus.LOADED, stats)

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------
    def _load_with_recovery(
        self,
        mapping: TranslationMap,
        path: PathLike,
        has_instance: bool,
        parse: Callable[[TranslationMap, Path, bool], MergeStats],
    ) -> LoadResult:
        source = Path(path)
        if not source.exists():
            _LOG.debug("Translation file %s not found, nothing loaded", source)
            return LoadResult(source=str(source), status=LoadStatus.MISSING)

        try:
            stats = parse(mapping, source, has_instance)
            status = LoadStatus.LOADED
        except Exception as exc:
            if not source.exists():
                _LOG.debug("Translation file %s disappeared while loading", source)
                return LoadResult(source=str(source), status=LoadStatus.MISSING)
            _LOG.info("Could not read %s (%s), retrying from a temporary copy", source, exc)
            try:
                with temporary_copy(source, self.temp_dir) as copy_path:
                    stats = parse(mapping, copy_path, has_instance)
            except Exception as retry_exc:
                message = f"{type(retry_exc).__name__}: {retry_exc}"
                _LOG.warning("Failed to load translations from %s: %s", source, message)
                return LoadResult(source=str(source), status=LoadStatus.FAILED, message=message)
            status = LoadStatus.RECOVERED

        _LOG.debug(
            "Loaded %s: %d added, %d updated, %d rows skipped",
            source,
            stats.added,
            stats.updated,
            stats.skipped_rows,
        )
        return LoadResult.from_stats(str(source), status, stats)

    def _parse_delimited(self, mapping: TranslationMap, path: Path, has_instance: bool) -> MergeStats:
        lines = _read_lines(path, self.encoding)
        stats = MergeStats()
        if not lines:
            return stats

        separator = detect_separator(lines[0])
        start_col = start_column(has_instance)
        languages: Optional[List[str]] = None

        for line in lines:
            cells = split_fields(line, separator)
            if len(cells) <= start_col:
                stats.skipped_rows += 1
                continue
            if languages is None:
                languages = cells[start_col:]
                continue
            self._merge_row(mapping, languages, cells, has_instance, self.delimited_policy, stats)
        return stats

    def _parse_spreadsheet(self, mapping: TranslationMap, path: Path, has_instance: bool) -> MergeStats:
        return self._merge_table(mapping, read_spreadsheet(path, self.sheet_name), has_instance)

    def _merge_table(self, mapping: TranslationMap, rows: List[Sequence[Any]], has_instance: bool) -> MergeStats:
        stats = MergeStats()
        if len(rows) < 2:
            return stats

        start_col = start_column(has_instance)
        header, *data = rows
        languages = [from_csv(_cell_text(cell)) for cell in list(header)[start_col:]]

        for row in data:
            cells = [from_csv(_cell_text(cell)) for cell in row]
            if len(cells) < start_col:
                stats.skipped_rows += 1
                continue
            self._merge_row(mapping, languages, cells, has_instance, self.table_policy, stats)
        return stats

    @staticmethod
    def _merge_row(
        mapping: TranslationMap,
        languages: Sequence[str],
        cells: Sequence[str],
        has_instance: bool,
        policy: MergePolicy,
        stats: MergeStats,
    ) -> None:
        start_col = start_column(has_instance)
        context = cells[0]
        reference = cells[start_col - 1]
        instance = cells[1] if has_instance else None
        key = make_key(context, reference, instance)

        record = mapping.get(key)
        is_new = record is None
        if is_new:
            record = TranslationRecord(context=context, reference=reference, instance=instance)
            mapping[key] = record
            stats.added += 1

        changed = False
        # zip stops at the shorter of header and row
        for language, value in zip(languages, cells[start_col:]):
            changed = record.merge(language, value, policy) or changed
        if changed and not is_new:
            stats.updated += 1


@lru_cache(maxsize=1)
def get_default_loader() -> TranslationTableLoader:
    """Loader configured from the environment, built once."""
    return TranslationTableLoader.from_settings(Settings.from_env())


def load(mapping: TranslationMap, path: PathLike, has_instance: bool = False) -> LoadResult:
    return get_default_loader().load(mapping, path, has_instance)


def load_from_delimited_text(mapping: TranslationMap, path: PathLike, has_instance: bool = False) -> LoadResult:
    return get_default_loader().load_from_delimited_text(mapping, path, has_instance)


def load_from_spreadsheet(mapping: TranslationMap, path: PathLike, has_instance: bool = False) -> LoadResult:
    return get_default_loader().load_from_spreadsheet(mapping, path, has_instance)


def load_from_table(mapping: TranslationMap, table: Table, has_instance: bool = False) -> LoadResult:
    return get_default_loader().load_from_table(mapping, table, has_instance)
