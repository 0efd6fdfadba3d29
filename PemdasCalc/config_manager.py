# config_manager.py
from pathlib import Path
import json


def default_config_path(project_root=None):
    """Use config.json of a source checkout if present, else a per-user file.

    An installed package must never write into site-packages.
    """
    if project_root is None:
        project_root = Path(__file__).resolve().parent.parent

    checkout_config = project_root / "config.json"
    if checkout_config.exists():
        return checkout_config
    return Path.home() / ".pemdas_calc" / "config.json"


config_json = default_config_path()
ui_strings = Path(__file__).resolve().parent / "ui_strings.json"


# Used whenever config.json is missing, unreadable or lacks a key
DEFAULT_SETTINGS = {
    "decimal_places": 10,
    "fractions": False,
    "show_equation": True,
    "darkmode": False,
    "debug": False
}



def load_setting_value(key_value):
    try:
        with open(config_json, 'r', encoding= 'utf-8') as f:
            settings_dict = json.load(f)

    except (FileNotFoundError, json.JSONDecodeError):
        settings_dict = {}

    if not isinstance(settings_dict, dict):
        settings_dict = {}

    merged = dict(DEFAULT_SETTINGS)
    merged.update(settings_dict)

    if key_value == "all":
        return merged

    else:
        return merged.get(key_value, 0)


def load_setting_description(key_value):
    try:
        with open(ui_strings, 'r', encoding= 'utf-8') as f:
            settings_dict = json.load(f)

    except (FileNotFoundError, json.JSONDecodeError):
        return {}


    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, key_value)




def save_setting(settings_dict):
    try:
        config_json.parent.mkdir(parents=True, exist_ok=True)
        with open (config_json, 'w', encoding= 'utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except (OSError, TypeError, ValueError):
        return{}
