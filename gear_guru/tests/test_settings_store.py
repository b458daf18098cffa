from __future__ import annotations

import json
from pathlib import Path

from gear_guru.app.services.settings_store import SettingsStore
from gear_guru.core.settings import AppSettings, default_settings, merge_settings


def test_settings_store_read_write(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    store = SettingsStore(path)
    loaded = store.load()
    assert path.exists()
    assert loaded["screen"]["theme"] == "classic_blue"
    assert loaded["screen"]["default_sport"] == "Downhill Ski"
    assert loaded["logging"]["keep_archives"] == 5

    loaded["screen"]["theme"] = "emerald"
    loaded["screen"]["default_skill_level"] = "Expert"
    loaded["logging"]["level"] = "DEBUG"
    store.save(loaded)

    reloaded = store.load_model()
    assert reloaded.screen.theme == "emerald"
    assert reloaded.screen.default_skill_level == "Expert"
    assert reloaded.logging.level == "DEBUG"


def test_corrupt_settings_file_is_replaced_with_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{broken", encoding="utf-8")

    loaded = SettingsStore(path).load()

    assert loaded == default_settings()
    assert json.loads(path.read_text(encoding="utf-8")) == default_settings()


def test_default_outside_option_set_falls_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"screen": {"default_sport": "Unicycle"}}), encoding="utf-8")

    loaded = SettingsStore(path).load()

    assert loaded["screen"]["default_sport"] == "Downhill Ski"


def test_merge_settings_fills_defaults_and_ignores_unknown_keys() -> None:
    merged = merge_settings(
        {
            "screen": {"sports": ["Downhill Ski", "Snowboarding"], "legacy": True},
            "audio": {"master": 0.5},
        }
    )

    assert merged["screen"]["sports"] == [
        {"value": "Downhill Ski", "label": "Downhill Ski"},
        {"value": "Snowboarding", "label": "Snowboarding"},
    ]
    assert merged["screen"]["default_skill_level"] == "Intermediate"
    assert "audio" not in merged
    assert "legacy" not in merged["screen"]
    assert AppSettings.model_validate(merged).screen.sports[1].value == "Snowboarding"


def test_default_option_labels() -> None:
    screen = AppSettings().screen
    assert [(option.value, option.label) for option in screen.sports][2] == ("Cross Country", "XC Ski")
    assert merge_settings(None) == default_settings()
