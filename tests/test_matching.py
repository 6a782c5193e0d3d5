import pytest

from living_cost.domain.matching import NameMatcher, normalize_name
from living_cost.domain.models import ReferenceRecord
from living_cost.domain.registry import ReferenceRegistry


@pytest.fixture
def matcher() -> NameMatcher:
    return NameMatcher()


def test_normalize_name():
    assert normalize_name("  d.i.   Yogyakarta ") == "DI YOGYAKARTA"
    assert normalize_name("Jawa\tBarat") == "JAWA BARAT"


def test_exact_display_name(matcher: NameMatcher):
    assert matcher.resolve("Jawa Barat").id == "jawa-barat"
    assert matcher.resolve("  jawa   barat ").id == "jawa-barat"


def test_alias_match(matcher: NameMatcher):
    assert matcher.resolve("DIY").id == "di-yogyakarta"
    assert matcher.resolve("D.I. Yogyakarta").id == "di-yogyakarta"
    assert matcher.resolve("Bangka Belitung").id == "bangka-belitung"
    assert matcher.resolve("Jakarta").id == "dki-jakarta"
    assert matcher.resolve("NAD").id == "aceh"


def test_substring_match(matcher: NameMatcher):
    assert matcher.resolve("Provinsi Jawa Tengah").id == "jawa-tengah"


def test_substring_first_match_in_table_order(matcher: NameMatcher):
    # "Papua Barat" precedes "Papua" in the table and is contained in the input.
    assert matcher.resolve("Provinsi Papua Barat Daya Baru").id == "papua-barat"


def test_exact_name_beats_substring(matcher: NameMatcher):
    assert matcher.resolve("Papua").id == "papua"
    assert matcher.resolve("Papua Barat Daya").id == "papua-barat-daya"


def test_alias_outranks_substring():
    registry = ReferenceRegistry(
        [
            ReferenceRecord(id="north", display_name="North", aliases=frozenset(), wage_benchmark=1),
            ReferenceRecord(id="far-north", display_name="Far North Coast", aliases=frozenset({"NORTH X"}), wage_benchmark=1),
        ]
    )
    matcher = NameMatcher(registry)
    # "NORTH X" contains "NORTH" (substring tier) but is an exact alias of far-north.
    assert matcher.resolve("North X").id == "far-north"


def test_unresolved_returns_none(matcher: NameMatcher):
    assert matcher.resolve("Atlantis") is None
    assert matcher.resolve("") is None
    assert matcher.resolve("   ") is None


@pytest.mark.parametrize("value", ["dki jakarta", " D.I.  Yogyakarta", "Prov. Jawa Timur", "Atlantis", "kalbar"])
def test_resolve_is_stable_under_normalization(matcher: NameMatcher, value: str):
    assert matcher.resolve(value) == matcher.resolve(normalize_name(value))
