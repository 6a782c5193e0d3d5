"""Source interfaces anchoring the domain layer."""
from __future__ import annotations

from typing import Any, Mapping, Protocol

from .models import RegionRecord


class ExpenditureSource(Protocol):
    """Provides province expenditure records ingested from the BPS table."""

    def load_region_data(self) -> Mapping[str, RegionRecord]:
        ...


class GeometrySource(Protocol):
    """Provides the raw province geometry document."""

    def load_document(self) -> Mapping[str, Any]:
        ...
