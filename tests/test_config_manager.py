import json

from PemdasCalc import config_manager


def test_load_all_settings(config_files):
    settings = config_manager.load_setting_value("all")
    assert settings == config_manager.DEFAULT_SETTINGS


def test_load_single_setting(config_files):
    assert config_manager.load_setting_value("decimal_places") == 10
    assert config_manager.load_setting_value("unknown_key") == 0


def test_missing_file_falls_back_to_defaults(config_files):
    config_json, _ = config_files
    config_json.unlink()
    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS


def test_malformed_json_falls_back_to_defaults(config_files):
    config_json, _ = config_files
    config_json.write_text("{not json", encoding="utf-8")
    assert config_manager.load_setting_value("fractions") is False


def test_non_object_json_falls_back_to_defaults(config_files):
    config_json, _ = config_files
    config_json.write_text("[1, 2, 3]", encoding="utf-8")
    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS


def test_partial_file_is_merged_with_defaults(config_files):
    config_json, _ = config_files
    config_json.write_text('{"darkmode": true}', encoding="utf-8")
    settings = config_manager.load_setting_value("all")
    assert settings["darkmode"] is True
    assert settings["decimal_places"] == 10


def test_save_setting_round_trip(config_files):
    config_json, _ = config_files
    settings = config_manager.load_setting_value("all")
    settings["decimal_places"] = 4

    assert config_manager.save_setting(settings) == settings
    assert json.loads(config_json.read_text(encoding="utf-8"))["decimal_places"] == 4
    assert config_manager.load_setting_value("decimal_places") == 4


def test_save_setting_failure_returns_empty_dict(tmp_path, monkeypatch):
    # A directory cannot be opened for writing
    monkeypatch.setattr(config_manager, "config_json", tmp_path)
    assert config_manager.save_setting({"darkmode": True}) == {}


def test_load_setting_description(config_files):
    assert config_manager.load_setting_description("all") == {"decimal_places": "Decimal places"}
    assert config_manager.load_setting_description("decimal_places") == "Decimal places"
    assert config_manager.load_setting_description("darkmode") == "darkmode"


def test_missing_descriptions_file(config_files):
    _, ui_strings = config_files
    ui_strings.unlink()
    assert config_manager.load_setting_description("all") == {}


def test_shipped_files_cover_every_setting():
    settings = json.loads(config_manager.config_json.read_text(encoding="utf-8"))
    descriptions = json.loads(config_manager.ui_strings.read_text(encoding="utf-8"))
    assert set(settings) == set(config_manager.DEFAULT_SETTINGS)
    assert set(descriptions) == set(config_manager.DEFAULT_SETTINGS)


def test_checkout_config_is_preferred(tmp_path):
    (tmp_path / "config.json").write_text("{}", encoding="utf-8")
    assert config_manager.default_config_path(tmp_path) == tmp_path / "config.json"


def test_installed_package_uses_user_config(tmp_path, monkeypatch):
    home = tmp_path / "home"
    monkeypatch.setenv("HOME", str(home))
    site_packages = tmp_path / "site-packages"
    site_packages.mkdir()

    path = config_manager.default_config_path(site_packages)
    assert path == home / ".pemdas_calc" / "config.json"

    monkeypatch.setattr(config_manager, "config_json", path)
    assert config_manager.save_setting({"darkmode": True}) == {"darkmode": True}
    assert path.exists()
    assert not (site_packages / "config.json").exists()


def test_descriptions_ship_inside_the_package():
    assert config_manager.ui_strings.parent.name == "PemdasCalc"
    assert config_manager.ui_strings.exists()
