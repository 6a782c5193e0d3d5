"""Formatting and report generators for calculation results."""
from __future__ import annotations

import csv
import io
from decimal import ROUND_HALF_UP, Decimal

from living_cost.domain.models import FinancialStatus
from living_cost.domain.results import CalculationResult, ComparisonInsight

STATUS_LABELS: dict[FinancialStatus, str] = {
    FinancialStatus.SURPLUS: "Surplus (Lebih)",
    FinancialStatus.DEFICIT: "Defisit (Kurang)",
    FinancialStatus.NEUTRAL: "Seimbang",
}


def _group_thousands(value: int) -> str:
    return f"{value:,}".replace(",", ".")


def format_currency(value: float) -> str:
    """Indonesian Rupiah without decimals, e.g. ``Rp1.500.000``."""
    rounded = int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    sign = "-" if rounded < 0 else ""
    return f"{sign}Rp{_group_thousands(abs(rounded))}"


def format_number(value: float) -> str:
    quantized = Decimal(str(value)).quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)
    sign = "-" if quantized < 0 else ""
    integer, _, fraction = f"{abs(quantized):f}".partition(".")
    fraction = fraction.rstrip("0")
    text = _group_thousands(int(integer))
    return f"{sign}{text},{fraction}" if fraction else f"{sign}{text}"


def parse_currency(value: str) -> int:
    digits = "".join(ch for ch in value if ch.isdigit())
    return int(digits) if digits else 0


def format_percentage(value: float, decimals: int = 0) -> str:
    return f"{value:.{decimals}f}%"


def clamp(value: float, minimum: float, maximum: float) -> float:
    return min(max(value, minimum), maximum)


def progress_width(ratio: float, maximum: float = 100) -> str:
    return f"{min(ratio, maximum)}%"


def status_label(status: FinancialStatus) -> str:
    return STATUS_LABELS[FinancialStatus(status)]


def result_row(label: str, result: CalculationResult) -> dict[str, str]:
    return {
        "region": label,
        "status": status_label(result.status),
        "monthly_per_capita": format_currency(result.monthly_per_capita),
        "total_expense": format_currency(result.total_expense),
        "balance": format_currency(result.balance),
        "balance_percentage": format_percentage(result.balance_percentage, 1),
        "ump_comparison": format_percentage(result.ump_comparison, 1),
        "income_vs_expense_ratio": format_percentage(result.income_vs_expense_ratio, 1),
        "expenditure_food": format_currency(result.expenditure_food),
        "expenditure_non_food": format_currency(result.expenditure_non_food),
    }


def comparison_rows(
    results: dict[str, CalculationResult],
) -> list[dict[str, str]]:
    return [result_row(label, result) for label, result in results.items()]


def insight_summary(insight: ComparisonInsight, target_name: str) -> str:
    if insight.is_better:
        verdict = f"Moving to {target_name} leaves {format_currency(insight.diff_surplus)} more per month."
    elif insight.diff_surplus < 0:
        verdict = f"Moving to {target_name} leaves {format_currency(-insight.diff_surplus)} less per month."
    else:
        verdict = f"Moving to {target_name} leaves the same amount per month."
    return f"{verdict} Living costs change by {format_percentage(insight.percentage_change, 1)}."


def render_csv(rows: list[dict[str, str]]) -> bytes:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(rows[0].keys()) if rows else [])
    if rows:
        writer.writeheader()
        writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


def render_html(rows: list[dict[str, str]]) -> str:
    if not rows:
        return "<p>No results available.</p>"
    header = "".join(f"<th>{col}</th>" for col in rows[0].keys())
    body_parts = []
    for row in rows:
        body_parts.append("<tr>" + "".join(f"<td>{value}</td>" for value in row.values()) + "</tr>")
    body_html = "".join(body_parts)
    return f"<table><thead><tr>{header}</tr></thead><tbody>{body_html}</tbody></table>"
