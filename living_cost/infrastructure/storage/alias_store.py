"""Storage helpers for geometry slug to province id aliases."""
from __future__ import annotations

from pathlib import Path
import json
import logging
from typing import Any

from living_cost.domain.registry import REGISTRY, ReferenceRegistry

logger = logging.getLogger(__name__)


DEFAULT_PATH = Path(__file__).resolve().parents[3] / "geometry_alias_override.json"

# Slugs derived from geometry feature names that do not coincide with a
# registry id. Older boundary files still use pre-2000s province names.
GEOMETRY_ID_ALIASES: dict[str, str] = {
    "di-aceh": "aceh",
    "nanggroe-aceh-darussalam": "aceh",
    "daerah-istimewa-yogyakarta": "di-yogyakarta",
    "yogyakarta": "di-yogyakarta",
    "jakarta-raya": "dki-jakarta",
    "kepulauan-bangka-belitung": "bangka-belitung",
    "probanten": "banten",
    "nusatenggara-barat": "nusa-tenggara-barat",
    "nusatenggara-timur": "nusa-tenggara-timur",
    "irian-jaya-barat": "papua-barat",
    "irian-jaya-tengah": "papua-tengah",
    "irian-jaya-timur": "papua",
}


def _slug(value: Any) -> str:
    return "" if value is None else str(value).strip().lower()


def _split_aliases(raw: Any, registry: ReferenceRegistry = REGISTRY) -> tuple[dict[str, str], dict[str, str]]:
    """Split raw slug -> id pairs into those naming a known province and those that do not."""
    known: dict[str, str] = {}
    unknown: dict[str, str] = {}
    if not isinstance(raw, dict):
        return known, unknown
    for key, value in raw.items():
        slug, region_id = _slug(key), _slug(value)
        if not slug:
            continue
        if region_id in registry:
            known[slug] = region_id
        else:
            unknown[slug] = region_id
    return known, unknown


def load_geometry_aliases(path: Path | None = None) -> dict[str, str]:
    aliases, _ = _split_aliases(GEOMETRY_ID_ALIASES)
    override_path = path or DEFAULT_PATH
    if not override_path.exists():
        return aliases
    try:
        data = json.loads(override_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        logger.warning("Ignoring unreadable alias override %s", override_path)
        return aliases
    overrides, rejected = _split_aliases(data)
    for slug, region_id in rejected.items():
        logger.warning("Ignoring alias %r: unknown province id %r", slug, region_id)
    aliases.update(overrides)
    return aliases


def save_geometry_aliases(aliases: dict[str, str], path: Path | None = None) -> dict[str, str]:
    overrides, rejected = _split_aliases(aliases)
    if rejected:
        listing = ", ".join(f"{slug} -> {region_id!r}" for slug, region_id in sorted(rejected.items()))
        raise ValueError(f"Unknown province ids in aliases: {listing}")
    (path or DEFAULT_PATH).write_text(
        json.dumps(overrides, ensure_ascii=False, indent=2, sort_keys=True),
        encoding="utf-8",
    )
    merged, _ = _split_aliases(GEOMETRY_ID_ALIASES)
    merged.update(overrides)
    return merged
