"""Central configuration for the cost-of-living package."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from living_cost.infrastructure.storage.alias_store import load_geometry_aliases

BASE_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = BASE_DIR / "data"
GEOMETRY_ALIAS_PATH = BASE_DIR / "geometry_alias_override.json"

REGION_COLUMN = "Provinsi"
_EXPENDITURE_PREFIX = "Rata-rata Pengeluaran per Kapita Sebulan di Perkotaan dan Perdesaan"
TOTAL_COLUMN = f"{_EXPENDITURE_PREFIX} - Jumlah"
FOOD_COLUMN = f"{_EXPENDITURE_PREFIX} - Makanan"
NON_FOOD_COLUMN = f"{_EXPENDITURE_PREFIX} - Bukan Makanan"

# Nationwide aggregate row in the BPS table; never a province.
NATIONAL_ROW_NAME = "Indonesia"

# Property keys holding the province name in geometry features, by priority.
GEOMETRY_NAME_KEYS = ("Propinsi", "PROVINSI", "provinsi", "name")


@dataclass(slots=True, frozen=True)
class Settings:
    region_column: str
    total_column: str
    food_column: str
    non_food_column: str
    national_row_name: str
    geometry_name_keys: tuple[str, ...]
    expenditure_path: Path
    geometry_path: Path
    geometry_alias_path: Path
    geometry_aliases: dict[str, str]
    default_locale: str

    @property
    def required_columns(self) -> tuple[str, ...]:
        return (self.region_column, self.total_column, self.food_column, self.non_food_column)


SETTINGS = Settings(
    region_column=REGION_COLUMN,
    total_column=TOTAL_COLUMN,
    food_column=FOOD_COLUMN,
    non_food_column=NON_FOOD_COLUMN,
    national_row_name=NATIONAL_ROW_NAME,
    geometry_name_keys=GEOMETRY_NAME_KEYS,
    expenditure_path=DATA_DIR / "pengeluaran_perkapita_2024.csv",
    geometry_path=DATA_DIR / "indonesia-province.json",
    geometry_alias_path=GEOMETRY_ALIAS_PATH,
    geometry_aliases=load_geometry_aliases(GEOMETRY_ALIAS_PATH),
    default_locale="id",
)
