"""Domain services implementing the financial rules."""
from __future__ import annotations

from enum import Enum

from .models import FinancialStatus, RegionRecord
from .results import CalculationResult, ComparisonInsight


class AnalysisBand(str, Enum):
    VERY_HEALTHY = "very_healthy"
    HEALTHY = "healthy"
    ADEQUATE = "adequate"
    NEEDS_ATTENTION = "needs_attention"
    CRITICAL = "critical"


# Inclusive lower bounds, highest first.
_BAND_THRESHOLDS: tuple[tuple[float, AnalysisBand], ...] = (
    (150.0, AnalysisBand.VERY_HEALTHY),
    (120.0, AnalysisBand.HEALTHY),
    (100.0, AnalysisBand.ADEQUATE),
    (80.0, AnalysisBand.NEEDS_ATTENTION),
)

ANALYSIS_TEXT: dict[str, dict[AnalysisBand, str]] = {
    "id": {
        AnalysisBand.VERY_HEALTHY: "Kondisi keuangan sangat sehat. Gaji kamu jauh melebihi kebutuhan hidup standar di provinsi ini.",
        AnalysisBand.HEALTHY: "Kondisi keuangan sehat. Masih ada ruang untuk menabung dan berinvestasi.",
        AnalysisBand.ADEQUATE: "Kondisi keuangan cukup. Gaji pas dengan kebutuhan, perlu bijak dalam pengeluaran.",
        AnalysisBand.NEEDS_ATTENTION: "Kondisi keuangan perlu perhatian. Pengeluaran melebihi pendapatan, pertimbangkan untuk mengurangi biaya.",
        AnalysisBand.CRITICAL: "Kondisi keuangan kritis. Segera evaluasi pengeluaran atau cari sumber pendapatan tambahan.",
    },
    "en": {
        AnalysisBand.VERY_HEALTHY: "Very healthy finances. Your income is well above the standard cost of living in this province.",
        AnalysisBand.HEALTHY: "Healthy finances. There is still room to save and invest.",
        AnalysisBand.ADEQUATE: "Adequate finances. Income just covers needs, so spend carefully.",
        AnalysisBand.NEEDS_ATTENTION: "Finances need attention. Spending exceeds income, consider cutting costs.",
        AnalysisBand.CRITICAL: "Critical finances. Review spending or look for additional income soon.",
    },
}


def analysis_band(ratio: float) -> AnalysisBand:
    for lower_bound, band in _BAND_THRESHOLDS:
        if ratio >= lower_bound:
            return band
    return AnalysisBand.CRITICAL


def analysis_text(ratio: float, locale: str = "id") -> str:
    try:
        texts = ANALYSIS_TEXT[locale]
    except KeyError:
        raise ValueError(f"Unsupported locale: {locale!r}") from None
    return texts[analysis_band(ratio)]


def classify_balance(balance: float) -> FinancialStatus:
    if balance > 0:
        return FinancialStatus.SURPLUS
    if balance < 0:
        return FinancialStatus.DEFICIT
    return FinancialStatus.NEUTRAL


class FinancialCalculator:
    """Turns income, dependents and a province record into derived metrics."""

    def calculate(
        self,
        income: float,
        dependents: int,
        region: RegionRecord | None,
    ) -> CalculationResult | None:
        # No expenditure benchmark means nothing meaningful to compute.
        if region is None or region.expenditure_per_capita == 0:
            return None
        if income < 0:
            raise ValueError(f"Income must not be negative, got {income}")
        if dependents < 1:
            raise ValueError(f"Dependents must be at least 1, got {dependents}")

        total_expense = region.expenditure_per_capita * dependents
        balance = income - total_expense
        balance_percentage = (balance / total_expense) * 100 if total_expense > 0 else 0
        ump_comparison = (income / region.wage_benchmark) * 100 if region.wage_benchmark > 0 else 0
        income_vs_expense_ratio = (income / total_expense) * 100 if total_expense > 0 else 0

        return CalculationResult(
            total_expense=total_expense,
            balance=balance,
            balance_percentage=balance_percentage,
            ump_comparison=ump_comparison,
            income_vs_expense_ratio=income_vs_expense_ratio,
            status=classify_balance(balance),
            monthly_per_capita=region.expenditure_per_capita,
            expenditure_food=region.expenditure_food or 0,
            expenditure_non_food=region.expenditure_non_food or 0,
        )


class ComparisonEngine:
    """Builds the differential insight between an origin and a target result."""

    def compare(self, origin: CalculationResult, target: CalculationResult) -> ComparisonInsight:
        diff_surplus = target.balance - origin.balance
        # Negative means target costs less than origin.
        if origin.total_expense > 0:
            percentage_change = ((target.total_expense - origin.total_expense) / origin.total_expense) * 100
        else:
            percentage_change = 0
        return ComparisonInsight(
            diff_surplus=diff_surplus,
            is_better=diff_surplus > 0,
            percentage_change=percentage_change,
            diff_expenditure=target.monthly_per_capita - origin.monthly_per_capita,
        )
