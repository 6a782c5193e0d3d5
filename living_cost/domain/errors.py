"""Exceptions raised while loading source data."""
from __future__ import annotations


class LivingCostError(Exception):
    """Base class for failures surfaced to callers."""


class SourceUnavailable(LivingCostError):
    """The raw expenditure table or geometry document could not be obtained."""


class MalformedSource(LivingCostError):
    """The source was obtained but cannot be parsed at all."""
