from __future__ import annotations

import argparse
from collections import Counter
from typing import Dict

from translation_tables.config import Settings
from translation_tables.domain.translation import TranslationRecord
from translation_tables.logging_config import setup_logging
from translation_tables.services.translation_loader import TranslationTableLoader


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Load translation tables and print a summary.")
    p.add_argument("paths", nargs="+", help="CSV or spreadsheet files, loaded in order")
    p.add_argument("--has-instance", action="store_true", help="Tables carry an Instance column")
    args = p.parse_args(argv)

    settings = Settings.from_env()
    setup_logging(settings)
    loader = TranslationTableLoader.from_settings(settings)

    translations: Dict[str, TranslationRecord] = {}
    failed = False
    for path in args.paths:
        result = loader.load(translations, path, has_instance=args.has_instance)
        line = (
            f"{result.source}: {result.status} "
            f"(added={result.added}, updated={result.updated}, skipped={result.skipped_rows})"
        )
        if result.message:
            line += f" - {result.message}"
        print(line)
        failed = failed or not result.ok

    per_language = Counter(
        language
        for record in translations.values()
        for language, value in record.translations.items()
        if value
    )
    print(f"records: {len(translations)}")
    for language, count in sorted(per_language.items()):
        print(f"  {language}: {count}")
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
