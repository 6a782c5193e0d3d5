"""Domain-level results for cost-of-living calculations."""
from __future__ import annotations

from dataclasses import dataclass

from .models import FinancialStatus


@dataclass(frozen=True)
class CalculationResult:
    total_expense: float
    balance: float
    balance_percentage: float
    ump_comparison: float
    income_vs_expense_ratio: float
    status: FinancialStatus
    monthly_per_capita: float
    expenditure_food: float
    expenditure_non_food: float

    def is_surplus(self) -> bool:
        return self.status is FinancialStatus.SURPLUS


@dataclass(frozen=True)
class ComparisonInsight:
    """Differential between an origin and a target province result."""

    diff_surplus: float
    is_better: bool
    percentage_change: float
    diff_expenditure: float
