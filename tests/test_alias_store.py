from pathlib import Path
import json
import logging

import pytest

from living_cost.infrastructure.storage.alias_store import load_geometry_aliases, save_geometry_aliases


def test_save_and_load_aliases(tmp_path: Path):
    path = tmp_path / "geometry_alias_override.json"
    merged = save_geometry_aliases({" Irian-Jaya ": "PAPUA"}, path=path)
    assert merged["irian-jaya"] == "papua"
    assert merged["probanten"] == "banten"
    assert json.loads(path.read_text()) == {"irian-jaya": "papua"}

    loaded = load_geometry_aliases(path=path)
    assert loaded["irian-jaya"] == "papua"


def test_override_replaces_default(tmp_path: Path):
    path = tmp_path / "override.json"
    path.write_text(json.dumps({"probanten": "jawa-barat"}), encoding="utf-8")

    assert load_geometry_aliases(path=path)["probanten"] == "jawa-barat"


def test_invalid_override_falls_back_to_defaults(tmp_path: Path):
    path = tmp_path / "override.json"
    path.write_text("{not json", encoding="utf-8")

    loaded = load_geometry_aliases(path=path)
    assert loaded["di-aceh"] == "aceh"


def test_missing_override_uses_defaults(tmp_path: Path):
    loaded = load_geometry_aliases(path=tmp_path / "absent.json")
    assert loaded["irian-jaya-timur"] == "papua"


def test_save_rejects_unknown_province(tmp_path: Path):
    path = tmp_path / "override.json"

    with pytest.raises(ValueError, match="atlantis"):
        save_geometry_aliases({"atlantis-raya": "atlantis", "probanten": "banten"}, path=path)
    assert not path.exists()


def test_load_skips_unknown_province(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    path = tmp_path / "override.json"
    path.write_text(json.dumps({"atlantis-raya": "atlantis", "jakarta": "dki-jakarta"}), encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        loaded = load_geometry_aliases(path=path)

    assert "atlantis-raya" not in loaded
    assert loaded["jakarta"] == "dki-jakarta"
    assert "atlantis" in caplog.text
