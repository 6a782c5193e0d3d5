"""Command-line entrypoint for the cost-of-living calculator."""
from __future__ import annotations

import argparse
import logging
import math
import sys

from living_cost.application.use_cases import CalculatorContext, CalculatorSession, GeometryCache
from living_cost.config import SETTINGS
from living_cost.domain.errors import LivingCostError
from living_cost.infrastructure.repositories.file_repositories import FileExpenditureRepository, FileGeometryRepository
from living_cost.presentation.report import (
    format_currency,
    format_percentage,
    insight_summary,
    status_label,
)


def income_amount(value: str) -> float:
    try:
        amount = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if not math.isfinite(amount) or amount < 0:
        raise argparse.ArgumentTypeError(f"income must be a finite, non-negative amount, got {value!r}")
    return amount


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare household income against provincial living costs")
    parser.add_argument(
        "expenditure",
        type=str,
        nargs="?",
        default=str(SETTINGS.expenditure_path),
        help="Path to the BPS per-capita expenditure CSV or XLSX file",
    )
    parser.add_argument("--income", type=income_amount, default=0, help="Monthly household income in Rupiah")
    parser.add_argument("--dependents", type=int, default=1, help="Number of people the income supports")
    parser.add_argument("--region", type=str, help="Province id, e.g. dki-jakarta")
    parser.add_argument("--compare-to", type=str, help="Province id to compare against")
    parser.add_argument("--list-regions", action="store_true", help="List provinces with expenditure data")
    parser.add_argument(
        "--geometry",
        nargs="?",
        const=str(SETTINGS.geometry_path),
        help="Check which provinces a GeoJSON boundary file joins (defaults to the bundled path)",
    )
    parser.add_argument("--locale", choices=["id", "en"], default=SETTINGS.default_locale)
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        session = CalculatorSession(CalculatorContext(expenditure_source=FileExpenditureRepository(args.expenditure)))
        data = session.region_data()
    except LivingCostError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.list_regions:
        for option in session.region_options():
            print(f"{option.id:<22} {option.name:<28} {format_currency(option.expenditure):>14}  UMP {format_currency(option.ump)}")
        return 0

    if args.geometry:
        try:
            index = GeometryCache(FileGeometryRepository(args.geometry)).get()
        except LivingCostError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        missing = [region_id for region_id in data if region_id not in index.by_region_id]
        print(f"Geometry joins {len(data) - len(missing)} of {len(data)} provinces")
        for name in index.unmatched:
            print(f"Unjoined feature: {name}")
        for region_id in missing:
            print(f"No feature for: {region_id}")
        return 0

    if not args.region:
        print("Error: --region is required", file=sys.stderr)
        return 2
    for region_id in filter(None, (args.region, args.compare_to)):
        if region_id not in data:
            print(f"Error: unknown province id {region_id!r}", file=sys.stderr)
            return 2

    session.set_income(args.income)
    session.set_dependents(args.dependents)
    session.select_region(args.region)
    session.select_target(args.compare_to)

    result = session.calculation_result()
    if result is None:
        print(f"No expenditure data for {data[args.region].name}.")
        return 1

    print(f"Result for {data[args.region].name}")
    print("==================")
    print(f"Per-capita expenditure: {format_currency(result.monthly_per_capita)}")
    print(f"Total expense: {format_currency(result.total_expense)}")
    print(f"Balance: {format_currency(result.balance)} ({format_percentage(result.balance_percentage, 1)})")
    print(f"Income vs UMP: {format_percentage(result.ump_comparison, 1)}")
    print(f"Income vs expense: {format_percentage(result.income_vs_expense_ratio, 1)}")
    print(f"Status: {status_label(result.status)}")
    print(session.analysis_text(args.locale))

    if args.compare_to:
        target = session.target_result()
        if target is None:
            print(f"\nNo expenditure data for {data[args.compare_to].name}.")
            return 1
        insight = session.comparison_insight()
        print(f"\nComparison with {data[args.compare_to].name}")
        print(f"Target balance: {format_currency(target.balance)}")
        print(insight_summary(insight, data[args.compare_to].name))

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
