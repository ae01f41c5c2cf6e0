"""Load localized-string tables (CSV or spreadsheet) into a translation lookup."""

from translation_tables.domain.load_result import LoadResult, LoadStatus
from translation_tables.domain.translation import (
    KEY_SEPARATOR,
    MergePolicy,
    TranslationRecord,
    make_key,
)
from translation_tables.services.lookup import translate, unused_records
from translation_tables.services.translation_loader import (
    TranslationTableLoader,
    load,
    load_from_delimited_text,
    load_from_spreadsheet,
    load_from_table,
)

__all__ = [
    "KEY_SEPARATOR",
    "LoadResult",
    "LoadStatus",
    "MergePolicy",
    "TranslationRecord",
    "TranslationTableLoader",
    "load",
    "load_from_delimited_text",
    "load_from_spreadsheet",
    "load_from_table",
    "make_key",
    "translate",
    "unused_records",
]
