"""Domain models for the cost-of-living pipeline.

These dataclasses capture the canonical schema for provincial reference data and
the per-session expenditure records built from the BPS table.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FinancialStatus(str, Enum):
    SURPLUS = "surplus"
    DEFICIT = "deficit"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class ReferenceRecord:
    """Canonical province entry with its statutory minimum wage (UMP)."""

    id: str
    display_name: str
    aliases: frozenset[str] = field(default_factory=frozenset)
    wage_benchmark: float = 0.0
    year: int = 2024


@dataclass(frozen=True)
class RegionRecord:
    """Expenditure figures for one province, seeded from its reference record."""

    name: str
    wage_benchmark: float
    expenditure_per_capita: float = 0.0
    expenditure_food: float = 0.0
    expenditure_non_food: float = 0.0

    @classmethod
    def seed(cls, reference: ReferenceRecord) -> "RegionRecord":
        return cls(name=reference.display_name, wage_benchmark=reference.wage_benchmark)

    def has_data(self) -> bool:
        return self.expenditure_per_capita > 0


@dataclass(frozen=True)
class RegionOption:
    """Selectable province entry for dropdowns."""

    id: str
    name: str
    expenditure: float
    ump: float
