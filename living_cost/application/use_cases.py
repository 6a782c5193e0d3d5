"""Application services orchestrating the calculator workflow."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping
import logging
import math

from living_cost.config import SETTINGS
from living_cost.domain.models import RegionOption, RegionRecord
from living_cost.domain.repositories import ExpenditureSource, GeometrySource
from living_cost.domain.results import CalculationResult, ComparisonInsight
from living_cost.domain.services import ComparisonEngine, FinancialCalculator, analysis_text
from living_cost.infrastructure.parsing.geometry import GeometryIndex, GeometryNormalizer, normalize_features
from living_cost.application.dto import CalculationRequest, ComparisonRequest, ComparisonResponse

logger = logging.getLogger(__name__)


def region_options(data: Mapping[str, RegionRecord]) -> list[RegionOption]:
    """Provinces that have expenditure data, sorted by name."""
    options = [
        RegionOption(id=region_id, name=record.name, expenditure=record.expenditure_per_capita, ump=record.wage_benchmark)
        for region_id, record in data.items()
        if record.has_data()
    ]
    return sorted(options, key=lambda option: option.name.casefold())


@dataclass(slots=True)
class CalculatorContext:
    expenditure_source: ExpenditureSource
    calculator: FinancialCalculator = field(default_factory=FinancialCalculator)
    comparison_engine: ComparisonEngine = field(default_factory=ComparisonEngine)


@dataclass(slots=True)
class SessionState:
    """Lightweight per-session inputs and flags; no heavy payloads live here."""

    income: float = 0.0
    dependents: int = 1
    selected_region_id: str | None = None
    target_region_id: str | None = None
    show_comparison: bool = False
    is_loading: bool = False
    is_data_loaded: bool = False
    error: str | None = None


class CalculatorSession:
    """Owns one session's inputs and its load-once province data."""

    def __init__(self, context: CalculatorContext) -> None:
        self._context = context
        self.state = SessionState()
        self._region_data: dict[str, RegionRecord] = {}

    def region_data(self) -> Mapping[str, RegionRecord]:
        if self.state.is_data_loaded:
            return self._region_data
        if self.state.is_loading:
            raise RuntimeError("Expenditure data is already being loaded")

        self.state.is_loading = True
        self.state.error = None
        try:
            data = dict(self._context.expenditure_source.load_region_data())
        except Exception as exc:
            self.state.error = str(exc)
            logger.error("Loading expenditure data failed: %s", exc)
            raise
        finally:
            self.state.is_loading = False

        self._region_data = data
        self.state.is_data_loaded = True
        return self._region_data

    def invalidate(self) -> None:
        self.state.is_data_loaded = False

    def set_income(self, value: float) -> None:
        income = float(value)
        if not math.isfinite(income):
            raise ValueError(f"Income must be a finite amount, got {value!r}")
        self.state.income = max(0.0, income)

    def set_dependents(self, value: float) -> None:
        self.state.dependents = max(1, math.floor(value))

    def select_region(self, region_id: str | None) -> None:
        self.state.selected_region_id = region_id

    def select_target(self, region_id: str | None) -> None:
        self.state.target_region_id = region_id
        self.state.show_comparison = region_id is not None

    def reset(self) -> None:
        self.state.income = 0.0
        self.state.dependents = 1
        self.state.selected_region_id = None
        self.state.target_region_id = None
        self.state.show_comparison = False
        self.state.error = None

    def region(self, region_id: str | None) -> RegionRecord | None:
        if region_id is None:
            return None
        return self.region_data().get(region_id)

    def result_for(self, region_id: str | None) -> CalculationResult | None:
        return self._context.calculator.calculate(self.state.income, self.state.dependents, self.region(region_id))

    def calculation_result(self) -> CalculationResult | None:
        return self.result_for(self.state.selected_region_id)

    def target_result(self) -> CalculationResult | None:
        return self.result_for(self.state.target_region_id)

    def comparison_insight(self) -> ComparisonInsight | None:
        origin = self.calculation_result()
        target = self.target_result()
        if origin is None or target is None:
            return None
        return self._context.comparison_engine.compare(origin, target)

    def is_calculation_ready(self) -> bool:
        region = self.region(self.state.selected_region_id)
        return self.state.income > 0 and region is not None and region.has_data()

    def analysis_text(self, locale: str | None = None) -> str:
        result = self.calculation_result()
        if result is None:
            return ""
        return analysis_text(result.income_vs_expense_ratio, locale or SETTINGS.default_locale)

    def region_options(self) -> list[RegionOption]:
        return region_options(self.region_data())


class GeometryCache:
    """Loads and normalizes the geometry document once, then hands out the same index."""

    def __init__(self, source: GeometrySource, normalizer: GeometryNormalizer | None = None) -> None:
        self._source = source
        self._normalizer = normalizer
        self._index: GeometryIndex | None = None

    @property
    def is_loaded(self) -> bool:
        return self._index is not None

    def get(self) -> GeometryIndex:
        if self._index is None:
            self._index = normalize_features(self._source.load_document(), self._normalizer)
        return self._index

    def invalidate(self) -> None:
        self._index = None


class CalculateUseCase:
    def __init__(self, context: CalculatorContext, session: CalculatorSession | None = None) -> None:
        self._context = context
        self._session = session or CalculatorSession(context)

    def execute(self, request: CalculationRequest) -> CalculationResult | None:
        region = self._session.region(request.region_id)
        return self._context.calculator.calculate(request.income, request.dependents, region)


class CompareRegionsUseCase:
    def __init__(self, context: CalculatorContext, session: CalculatorSession | None = None) -> None:
        self._context = context
        self._session = session or CalculatorSession(context)

    def execute(self, request: ComparisonRequest) -> ComparisonResponse:
        calculator = self._context.calculator
        origin = calculator.calculate(request.income, request.dependents, self._session.region(request.origin_id))
        target = calculator.calculate(request.income, request.dependents, self._session.region(request.target_id))
        insight = None
        if origin is not None and target is not None:
            insight = self._context.comparison_engine.compare(origin, target)
        return ComparisonResponse(origin=origin, target=target, insight=insight)
