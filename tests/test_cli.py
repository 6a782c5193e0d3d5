import json
from pathlib import Path

import pytest

from living_cost.cli import main


@pytest.fixture
def csv_path(tmp_path: Path, sample_csv: str) -> Path:
    path = tmp_path / "pengeluaran.csv"
    path.write_text(sample_csv, encoding="utf-8")
    return path


def test_cli_calculation_with_comparison(csv_path: Path, capsys: pytest.CaptureFixture[str]):
    code = main([str(csv_path), "--income", "5000000", "--dependents", "2", "--region", "dki-jakarta", "--compare-to", "jawa-barat"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Result for DKI Jakarta" in out
    assert "Status: Seimbang" in out
    assert "Comparison with Jawa Barat" in out


def test_cli_lists_regions(csv_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main([str(csv_path), "--list-regions"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("di-yogyakarta")


def test_cli_region_without_data(csv_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main([str(csv_path), "--income", "1000", "--region", "bali"]) == 1
    assert "No expenditure data for Bali" in capsys.readouterr().out


def test_cli_unknown_region(csv_path: Path):
    assert main([str(csv_path), "--region", "atlantis"]) == 2


def test_cli_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main([str(tmp_path / "absent.csv"), "--region", "bali"]) == 1
    assert "Error" in capsys.readouterr().err


@pytest.mark.parametrize("income", ["inf", "nan", "-100", "lots"])
def test_cli_rejects_invalid_income(csv_path: Path, income: str, capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit) as excinfo:
        main([str(csv_path), "--income", income, "--region", "bali"])
    assert excinfo.value.code == 2
    assert "--income" in capsys.readouterr().err


def test_cli_geometry_check(csv_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    geometry = tmp_path / "indonesia-province.json"
    features = [{"type": "Feature", "properties": {"Propinsi": name}} for name in ("DKI JAKARTA", "ATLANTIS")]
    geometry.write_text(json.dumps({"type": "FeatureCollection", "features": features}), encoding="utf-8")

    assert main([str(csv_path), "--geometry", str(geometry)]) == 0

    out = capsys.readouterr().out
    assert "Geometry joins 1 of 38 provinces" in out
    assert "Unjoined feature: ATLANTIS" in out
    assert "No feature for: bali" in out


def test_cli_geometry_missing_file(csv_path: Path, tmp_path: Path):
    assert main([str(csv_path), "--geometry", str(tmp_path / "absent.json")]) == 1
