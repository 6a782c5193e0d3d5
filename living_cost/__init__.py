"""Household cost-of-living calculator against Indonesian provincial benchmarks."""
from living_cost.application.use_cases import (
    CalculateUseCase,
    CalculatorContext,
    CalculatorSession,
    CompareRegionsUseCase,
    GeometryCache,
)
from living_cost.domain.matching import NameMatcher
from living_cost.domain.registry import REGISTRY, ReferenceRegistry
from living_cost.domain.services import ComparisonEngine, FinancialCalculator
from living_cost.infrastructure.parsing.expenditure import ingest
from living_cost.infrastructure.repositories.file_repositories import (
    FileExpenditureRepository,
    FileGeometryRepository,
)

__all__ = [
    "CalculateUseCase",
    "CalculatorContext",
    "CalculatorSession",
    "CompareRegionsUseCase",
    "GeometryCache",
    "NameMatcher",
    "REGISTRY",
    "ReferenceRegistry",
    "ComparisonEngine",
    "FinancialCalculator",
    "ingest",
    "FileExpenditureRepository",
    "FileGeometryRepository",
]
