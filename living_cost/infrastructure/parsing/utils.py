"""Shared parsing utilities for source ingestion."""
from __future__ import annotations

from io import BytesIO, StringIO
from numbers import Number
from pathlib import Path
import math
import re

from living_cost.domain.errors import MalformedSource, SourceUnavailable

_NON_NUMERIC = re.compile(r"[^\d.]")


def ensure_bytes(source: BytesIO | Path | bytes) -> bytes:
    if isinstance(source, bytes):
        return source
    if isinstance(source, BytesIO):
        return source.getvalue()
    if isinstance(source, Path):
        try:
            return source.read_bytes()
        except OSError as exc:
            raise SourceUnavailable(f"Cannot read {source}: {exc}") from exc
    raise TypeError(f"Unsupported source type: {type(source)!r}")


def ensure_text(source: StringIO | BytesIO | Path | bytes | str) -> str:
    """Return the source as text; ``str`` values are taken as already-fetched content."""
    if isinstance(source, str):
        return source
    if isinstance(source, StringIO):
        return source.getvalue()
    raw = ensure_bytes(source)
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise MalformedSource(f"Source is not valid UTF-8 text: {exc}") from exc


def parse_amount(value: object) -> float:
    """Parse an expenditure cell.

    Numbers pass through. Strings keep only digits and periods; several
    periods are thousands separators (``"Rp 1.234.567"`` -> ``1234567``).
    Anything left unparsable counts as 0.
    """
    if value is None:
        return 0.0
    if isinstance(value, Number) and not isinstance(value, bool):
        number = float(value)
        return 0.0 if math.isnan(number) else number
    s = _NON_NUMERIC.sub("", str(value))
    if s.count(".") > 1:
        s = s.replace(".", "")
    if not s:
        return 0.0
    try:
        return float(s)
    except ValueError:
        return 0.0


def clean_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value).strip()
