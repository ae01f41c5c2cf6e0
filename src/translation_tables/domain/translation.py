from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

# Fields are read line by line, so a carriage return never occurs inside one.
KEY_SEPARATOR = "\r"


class MergePolicy(Enum):
    """How a repeated language value for the same record is handled."""

    FIRST_WINS = "first_wins"
    LAST_WINS = "last_wins"

    def __str__(self):
        return self.value


def make_key(context: str, reference: str, instance: Optional[str] = None) -> str:
    """Build the lookup key of a record.

    The instance is appended only for instance-aware tables, so
    ``make_key("A", "Hello")`` and ``make_key("A", "Hello", "")`` differ.
    """
    parts = [context, reference]
    if instance is not None:
        parts.append(instance)
    return KEY_SEPARATOR.join(parts)


@dataclass
class TranslationRecord:
    context: str
    reference: str
    instance: Optional[str] = None
    translations: Dict[str, str] = field(default_factory=dict)
    usage_count: int = 0

    @property
    def key(self) -> str:
        return make_key(self.context, self.reference, self.instance)

    def merge(self, language: str, value: str, policy: MergePolicy) -> bool:
        """Store ``value`` for ``language`` according to ``policy``.

        Returns:
            True if the record changed.
        """
        if not language or not language.strip():
            return False
        if language in self.translations:
            if policy is MergePolicy.FIRST_WINS or self.translations[language] == value:
                return False
        self.translations[language] = value
        return True
