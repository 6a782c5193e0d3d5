"""Application-level DTOs for calculations and comparisons."""
from __future__ import annotations

from dataclasses import dataclass

from living_cost.domain.results import CalculationResult, ComparisonInsight


@dataclass(slots=True, frozen=True)
class CalculationRequest:
    income: float
    dependents: int
    region_id: str


@dataclass(slots=True, frozen=True)
class ComparisonRequest:
    income: float
    dependents: int
    origin_id: str
    target_id: str


@dataclass(slots=True, frozen=True)
class ComparisonResponse:
    origin: CalculationResult | None
    target: CalculationResult | None
    insight: ComparisonInsight | None
