import json

import pytest

from PemdasCalc import config_manager


@pytest.fixture
def settings():
    """Default settings as a fresh dict (no file access)."""
    return dict(config_manager.DEFAULT_SETTINGS)


@pytest.fixture
def config_files(tmp_path, monkeypatch):
    """Point config_manager at throwaway config.json / ui_strings.json files."""
    config_json = tmp_path / "config.json"
    ui_strings = tmp_path / "ui_strings.json"
    config_json.write_text(json.dumps(config_manager.DEFAULT_SETTINGS), encoding="utf-8")
    ui_strings.write_text(json.dumps({"decimal_places": "Decimal places"}), encoding="utf-8")
    monkeypatch.setattr(config_manager, "config_json", config_json)
    monkeypatch.setattr(config_manager, "ui_strings", ui_strings)
    return config_json, ui_strings
