"""Province geometry normalization.

Boundary files label provinces under inconsistent property keys and spellings.
Each feature gets a ``normalizedName`` and a slug ``normalizedId``, and is
joined to a registry id so the renderer can look features up by the same ids
the expenditure data uses.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Sequence
import json
import logging
import re

from living_cost.config import SETTINGS
from living_cost.domain.errors import MalformedSource
from living_cost.domain.matching import DEFAULT_MATCHER, NameMatcher
from living_cost.domain.registry import REGISTRY, ReferenceRegistry

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_NON_SLUG = re.compile(r"[^a-z0-9-]")


def province_name(properties: Mapping[str, Any], keys: Sequence[str] = SETTINGS.geometry_name_keys) -> str:
    for key in keys:
        value = properties.get(key)
        if value:
            return str(value).strip()
    return ""


def province_slug(name: str) -> str:
    return _NON_SLUG.sub("", _WHITESPACE.sub("-", name.lower()))


@dataclass
class GeometryIndex:
    """Normalized features keyed by the registry id they join to."""

    features: list[dict[str, Any]] = field(default_factory=list)
    by_region_id: dict[str, dict[str, Any]] = field(default_factory=dict)
    unmatched: list[str] = field(default_factory=list)

    def feature_for(self, region_id: str) -> dict[str, Any] | None:
        feature = self.by_region_id.get(region_id)
        if feature is not None:
            return feature
        for candidate in self.features:
            if candidate["properties"].get("normalizedId") == region_id:
                return candidate
        return None

    def names(self) -> list[str]:
        return [
            feature["properties"]["normalizedName"]
            for feature in self.features
            if feature["properties"].get("normalizedName")
        ]


class GeometryNormalizer:
    def __init__(
        self,
        aliases: Mapping[str, str] | None = None,
        matcher: NameMatcher = DEFAULT_MATCHER,
        registry: ReferenceRegistry = REGISTRY,
    ) -> None:
        self._aliases = dict(SETTINGS.geometry_aliases if aliases is None else aliases)
        self._matcher = matcher
        self._registry = registry

    def normalize_feature(self, feature: Mapping[str, Any]) -> dict[str, Any]:
        properties = dict(feature.get("properties") or {})
        name = province_name(properties)
        properties["normalizedName"] = name
        properties["normalizedId"] = province_slug(name)
        return {**feature, "properties": properties}

    def resolve_region_id(self, normalized_name: str, normalized_id: str) -> str | None:
        if normalized_id in self._registry:
            return normalized_id
        alias = self._aliases.get(normalized_id)
        if alias and alias in self._registry:
            return alias
        reference = self._matcher.resolve(normalized_name)
        return reference.id if reference is not None else None

    def normalize(self, features: Iterable[Mapping[str, Any]]) -> GeometryIndex:
        index = GeometryIndex()
        for raw in features:
            feature = self.normalize_feature(raw)
            properties = feature["properties"]
            region_id = self.resolve_region_id(properties["normalizedName"], properties["normalizedId"])
            feature["regionId"] = region_id
            index.features.append(feature)
            if region_id is None:
                index.unmatched.append(properties["normalizedName"])
                logger.warning("Geometry feature %r does not join any province", properties["normalizedName"])
            elif region_id in index.by_region_id:
                logger.warning("Geometry feature %r duplicates province %s", properties["normalizedName"], region_id)
            else:
                index.by_region_id[region_id] = feature

        missing = [region_id for region_id in self._registry.ids() if region_id not in index.by_region_id]
        if missing:
            logger.info("No geometry for %d provinces: %s", len(missing), ", ".join(missing))
        return index


def parse_geometry(raw_text: str) -> dict[str, Any]:
    try:
        document = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise MalformedSource(f"Geometry document is not valid JSON: {exc}") from exc
    if not isinstance(document, dict) or not isinstance(document.get("features"), list):
        raise MalformedSource("Geometry document has no feature list")
    return document


def normalize_features(
    document: Mapping[str, Any] | Sequence[Mapping[str, Any]],
    normalizer: GeometryNormalizer | None = None,
) -> GeometryIndex:
    features = document.get("features", []) if isinstance(document, Mapping) else document
    return (normalizer or GeometryNormalizer()).normalize(features)
