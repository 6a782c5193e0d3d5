"""BPS per-capita expenditure table parser producing province records."""
from __future__ import annotations

from dataclasses import replace
from io import BytesIO, StringIO
from pathlib import Path
import logging
import zipfile

import pandas as pd

from living_cost.config import SETTINGS
from living_cost.domain.errors import MalformedSource
from living_cost.domain.matching import DEFAULT_MATCHER, NameMatcher
from living_cost.domain.models import RegionRecord
from living_cost.domain.registry import REGISTRY, ReferenceRegistry
from living_cost.infrastructure.parsing.utils import clean_text, ensure_bytes, parse_amount

logger = logging.getLogger(__name__)


def read_expenditure_raw(raw_text: str) -> pd.DataFrame:
    try:
        frame = pd.read_csv(StringIO(raw_text), skip_blank_lines=True, on_bad_lines="skip")
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise MalformedSource(f"Expenditure table cannot be parsed: {exc}") from exc
    return _check_columns(frame)


def read_expenditure_workbook(source: BytesIO | Path | bytes, sheet_name: str | int = 0) -> pd.DataFrame:
    raw_bytes = ensure_bytes(source)
    try:
        frame = pd.read_excel(BytesIO(raw_bytes), sheet_name=sheet_name, engine="openpyxl")
    except (ValueError, KeyError, OSError, zipfile.BadZipFile) as exc:
        raise MalformedSource(f"Expenditure workbook cannot be parsed: {exc}") from exc
    return _check_columns(frame.dropna(how="all"))


def _check_columns(frame: pd.DataFrame) -> pd.DataFrame:
    frame = frame.rename(columns=lambda column: str(column).strip())
    missing = [column for column in SETTINGS.required_columns if column not in frame.columns]
    if missing:
        raise MalformedSource(f"Expenditure table is missing columns: {', '.join(missing)}")
    return frame


def seed_region_data(registry: ReferenceRegistry = REGISTRY) -> dict[str, RegionRecord]:
    return {record.id: RegionRecord.seed(record) for record in registry.all()}


def expenditure_to_records(
    frame: pd.DataFrame,
    matcher: NameMatcher = DEFAULT_MATCHER,
    registry: ReferenceRegistry = REGISTRY,
) -> dict[str, RegionRecord]:
    data = seed_region_data(registry)
    matched = 0

    for idx, row in frame.iterrows():
        name = clean_text(row.get(SETTINGS.region_column))
        if not name or name == SETTINGS.national_row_name:
            continue

        total = parse_amount(row.get(SETTINGS.total_column))
        food = parse_amount(row.get(SETTINGS.food_column))
        non_food = parse_amount(row.get(SETTINGS.non_food_column))

        reference = matcher.resolve(name)
        if reference is None or reference.id not in data:
            logger.info("Dropping unmatched expenditure row %s: %r", idx, name)
            continue

        data[reference.id] = replace(
            data[reference.id],
            expenditure_per_capita=total,
            expenditure_food=food,
            expenditure_non_food=non_food,
        )
        matched += 1
        logger.debug("Row %s %r -> %s (total=%s)", idx, name, reference.id, total)

    missing = [region_id for region_id, record in data.items() if not record.has_data()]
    logger.info(
        "Ingested expenditure for %d rows; %d provinces without data",
        matched,
        len(missing),
    )
    return data


def ingest(
    raw_text: str,
    matcher: NameMatcher = DEFAULT_MATCHER,
    registry: ReferenceRegistry = REGISTRY,
) -> dict[str, RegionRecord]:
    return expenditure_to_records(read_expenditure_raw(raw_text), matcher=matcher, registry=registry)
