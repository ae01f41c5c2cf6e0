from __future__ import annotations

from typing import List, Mapping, Optional

from translation_tables.domain.translation import TranslationRecord, make_key


def translate(
    mapping: Mapping[str, TranslationRecord],
    context: str,
    reference: str,
    language: str,
    instance: Optional[str] = None,
) -> str:
    """Return the translation of ``reference``, or ``reference`` itself.

    Pass ``instance`` only for mappings loaded with ``has_instance=True``.
    Each hit on a record counts towards its ``usage_count``, even when the
    language is missing and the reference text is returned.
    """
    record = mapping.get(make_key(context, reference, instance))
    if record is None:
        return reference
    record.usage_count += 1
    return record.translations.get(language) or reference


def unused_records(mapping: Mapping[str, TranslationRecord]) -> List[TranslationRecord]:
    """Records never looked up through :func:`translate`."""
    return [record for record in mapping.values() if record.usage_count == 0]
