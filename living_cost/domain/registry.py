"""Reference table of the 38 Indonesian provinces and their 2024 UMP."""
from __future__ import annotations

from typing import Iterator, Sequence

from .models import ReferenceRecord


def _record(id: str, name: str, aliases: Sequence[str], ump: float, year: int = 2024) -> ReferenceRecord:
    return ReferenceRecord(
        id=id,
        display_name=name,
        aliases=frozenset(aliases),
        wage_benchmark=ump,
        year=year,
    )


# Table order is significant: name matching returns the first hit in this order.
REFERENCE_TABLE: tuple[ReferenceRecord, ...] = (
    _record("aceh", "Aceh", ["ACEH", "NAD", "NANGGROE ACEH DARUSSALAM"], 3413666),
    _record("sumatera-utara", "Sumatera Utara", ["SUMATERA UTARA", "SUMUT"], 2809915),
    _record("sumatera-barat", "Sumatera Barat", ["SUMATERA BARAT", "SUMBAR"], 2742476),
    _record("riau", "Riau", ["RIAU"], 3191662),
    _record("jambi", "Jambi", ["JAMBI"], 2943000),
    _record("sumatera-selatan", "Sumatera Selatan", ["SUMATERA SELATAN", "SUMSEL"], 3456874),
    _record("bengkulu", "Bengkulu", ["BENGKULU"], 2507079),
    _record("lampung", "Lampung", ["LAMPUNG"], 2633284),
    _record(
        "bangka-belitung",
        "Kepulauan Bangka Belitung",
        ["KEPULAUAN BANGKA BELITUNG", "BABEL", "BANGKA BELITUNG"],
        3498479,
    ),
    _record("kepulauan-riau", "Kepulauan Riau", ["KEPULAUAN RIAU", "KEPRI"], 3402492),
    _record("dki-jakarta", "DKI Jakarta", ["DKI JAKARTA", "JAKARTA"], 5067381),
    _record("jawa-barat", "Jawa Barat", ["JAWA BARAT", "JABAR"], 2057495),
    _record("jawa-tengah", "Jawa Tengah", ["JAWA TENGAH", "JATENG"], 2035807),
    _record(
        "di-yogyakarta",
        "DI Yogyakarta",
        ["DI YOGYAKARTA", "DIY", "YOGYAKARTA", "D.I. YOGYAKARTA"],
        2125898,
    ),
    _record("jawa-timur", "Jawa Timur", ["JAWA TIMUR", "JATIM"], 2040244),
    _record("banten", "Banten", ["BANTEN"], 2727514),
    _record("bali", "Bali", ["BALI"], 2971250),
    _record("nusa-tenggara-barat", "Nusa Tenggara Barat", ["NUSA TENGGARA BARAT", "NTB"], 2444067),
    _record("nusa-tenggara-timur", "Nusa Tenggara Timur", ["NUSA TENGGARA TIMUR", "NTT"], 2123994),
    _record("kalimantan-barat", "Kalimantan Barat", ["KALIMANTAN BARAT", "KALBAR"], 2702616),
    _record("kalimantan-tengah", "Kalimantan Tengah", ["KALIMANTAN TENGAH", "KALTENG"], 3181013),
    _record("kalimantan-selatan", "Kalimantan Selatan", ["KALIMANTAN SELATAN", "KALSEL"], 3268612),
    _record("kalimantan-timur", "Kalimantan Timur", ["KALIMANTAN TIMUR", "KALTIM"], 3360449),
    _record("kalimantan-utara", "Kalimantan Utara", ["KALIMANTAN UTARA", "KALTARA"], 3466653),
    _record("sulawesi-utara", "Sulawesi Utara", ["SULAWESI UTARA", "SULUT"], 3485000),
    _record("sulawesi-tengah", "Sulawesi Tengah", ["SULAWESI TENGAH", "SULTENG"], 2599546),
    _record("sulawesi-selatan", "Sulawesi Selatan", ["SULAWESI SELATAN", "SULSEL"], 3385145),
    _record("sulawesi-tenggara", "Sulawesi Tenggara", ["SULAWESI TENGGARA", "SULTRA"], 2758984),
    _record("gorontalo", "Gorontalo", ["GORONTALO"], 2989350),
    _record("sulawesi-barat", "Sulawesi Barat", ["SULAWESI BARAT", "SULBAR"], 2879135),
    _record("maluku", "Maluku", ["MALUKU"], 2812827),
    _record("maluku-utara", "Maluku Utara", ["MALUKU UTARA", "MALUT"], 2976720),
    _record("papua-barat", "Papua Barat", ["PAPUA BARAT"], 3282000),
    _record("papua", "Papua", ["PAPUA"], 3864696),
    _record("papua-tengah", "Papua Tengah", ["PAPUA TENGAH"], 3516700),
    _record("papua-pegunungan", "Papua Pegunungan", ["PAPUA PEGUNUNGAN"], 3501874),
    _record("papua-selatan", "Papua Selatan", ["PAPUA SELATAN"], 3300000),
    _record("papua-barat-daya", "Papua Barat Daya", ["PAPUA BARAT DAYA"], 3282000),
)


class ReferenceRegistry:
    """Read-only lookup over the fixed province table."""

    def __init__(self, records: Sequence[ReferenceRecord] = REFERENCE_TABLE) -> None:
        self._records = tuple(records)
        self._by_id = {record.id: record for record in self._records}
        if len(self._by_id) != len(self._records):
            raise ValueError("Reference table contains duplicate province ids")

    def lookup_by_id(self, id: str) -> ReferenceRecord | None:
        return self._by_id.get(id)

    def all(self) -> tuple[ReferenceRecord, ...]:
        return self._records

    def ids(self) -> tuple[str, ...]:
        return tuple(record.id for record in self._records)

    def __contains__(self, id: object) -> bool:
        return id in self._by_id

    def __iter__(self) -> Iterator[ReferenceRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)


REGISTRY = ReferenceRegistry()
