import pytest

from living_cost.domain.models import FinancialStatus
from living_cost.domain.results import CalculationResult, ComparisonInsight
from living_cost.presentation.report import (
    clamp,
    comparison_rows,
    format_currency,
    format_number,
    format_percentage,
    insight_summary,
    parse_currency,
    progress_width,
    render_csv,
    render_html,
    status_label,
)


def make_result() -> CalculationResult:
    return CalculationResult(
        total_expense=4000000,
        balance=1000000,
        balance_percentage=25,
        ump_comparison=250,
        income_vs_expense_ratio=125,
        status=FinancialStatus.SURPLUS,
        monthly_per_capita=2000000,
        expenditure_food=800000,
        expenditure_non_food=1200000,
    )


@pytest.mark.parametrize(
    "value,expected",
    [(1500000, "Rp1.500.000"), (0, "Rp0"), (-2500000, "-Rp2.500.000"), (999.5, "Rp1.000")],
)
def test_format_currency(value: float, expected: str):
    assert format_currency(value) == expected


def test_format_number():
    assert format_number(1500000) == "1.500.000"
    assert format_number(1234.5) == "1.234,5"


def test_parse_currency():
    assert parse_currency("Rp1.500.000") == 1500000
    assert parse_currency("") == 0


def test_percentages_and_widths():
    assert format_percentage(85.4) == "85%"
    assert format_percentage(12.345, 1) == "12.3%"
    assert progress_width(180) == "100%"
    assert progress_width(42.5) == "42.5%"
    assert clamp(5, 0, 3) == 3


def test_status_label():
    assert status_label(FinancialStatus.DEFICIT) == "Defisit (Kurang)"
    assert status_label("neutral") == "Seimbang"


def test_render_rows():
    rows = comparison_rows({"DKI Jakarta": make_result()})
    assert rows[0]["balance"] == "Rp1.000.000"
    assert rows[0]["status"] == "Surplus (Lebih)"

    csv_bytes = render_csv(rows)
    assert csv_bytes.decode("utf-8").splitlines()[0].startswith("region,status")
    assert "<td>DKI Jakarta</td>" in render_html(rows)


def test_render_empty():
    assert render_csv([]) == b""
    assert render_html([]) == "<p>No results available.</p>"


def test_insight_summary():
    worse = ComparisonInsight(diff_surplus=-500000, is_better=False, percentage_change=12.5, diff_expenditure=250000)
    assert insight_summary(worse, "Bali") == "Moving to Bali leaves Rp500.000 less per month. Living costs change by 12.5%."
    better = ComparisonInsight(diff_surplus=100, is_better=True, percentage_change=-1, diff_expenditure=0)
    assert "Rp100 more" in insight_summary(better, "Bali")
