"""Tiered province-name matching against the reference registry."""
from __future__ import annotations

import re

from .models import ReferenceRecord
from .registry import REGISTRY, ReferenceRegistry

_WHITESPACE = re.compile(r"\s+")


def normalize_name(value: str) -> str:
    text = _WHITESPACE.sub(" ", str(value).upper().strip())
    return text.replace(".", "")


class NameMatcher:
    """Resolves free-text province names to reference records.

    Tiers are tried in order and the first hit in table order wins: exact
    display name, exact alias, then substring containment in either direction
    against the display name.
    """

    def __init__(self, registry: ReferenceRegistry = REGISTRY) -> None:
        self._candidates = [
            (
                record,
                normalize_name(record.display_name),
                frozenset(normalize_name(alias) for alias in record.aliases),
            )
            for record in registry.all()
        ]

    def resolve(self, free_text: str) -> ReferenceRecord | None:
        normalized = normalize_name(free_text)
        if not normalized:
            return None

        for record, name, _ in self._candidates:
            if name == normalized:
                return record

        for record, _, aliases in self._candidates:
            if normalized in aliases:
                return record

        for record, name, _ in self._candidates:
            if name in normalized or normalized in name:
                return record

        return None


DEFAULT_MATCHER = NameMatcher()
