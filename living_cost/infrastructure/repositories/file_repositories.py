"""File-backed sources for expenditure and geometry data."""
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Any, Mapping

from living_cost.config import SETTINGS
from living_cost.domain.models import RegionRecord
from living_cost.domain.repositories import ExpenditureSource, GeometrySource
from living_cost.infrastructure.parsing.expenditure import (
    expenditure_to_records,
    read_expenditure_raw,
    read_expenditure_workbook,
)
from living_cost.infrastructure.parsing.geometry import parse_geometry
from living_cost.infrastructure.parsing.utils import ensure_bytes, ensure_text

# .xlsx files are zip archives
_ZIP_MAGIC = b"PK\x03\x04"


def _as_bytes(source: BytesIO | Path | str | bytes) -> bytes:
    if isinstance(source, str):
        source = Path(source)
    return ensure_bytes(source)


class FileExpenditureRepository(ExpenditureSource):
    def __init__(self, source: BytesIO | Path | str | bytes) -> None:
        self._source = _as_bytes(source)

    def load_region_data(self) -> Mapping[str, RegionRecord]:
        if self._source.startswith(_ZIP_MAGIC):
            frame = read_expenditure_workbook(self._source)
        else:
            frame = read_expenditure_raw(ensure_text(self._source))
        return expenditure_to_records(frame)


class FileGeometryRepository(GeometrySource):
    def __init__(self, source: BytesIO | Path | str | bytes | None = None) -> None:
        self._source = _as_bytes(SETTINGS.geometry_path if source is None else source)

    def load_document(self) -> Mapping[str, Any]:
        return parse_geometry(ensure_text(self._source))
