# config_manager.py
import json
import logging
from pathlib import Path

from . import error as E
from .CalcEngine import EngineSettings
from .logging_config import parse_level

logger = logging.getLogger(__name__)

config_json = Path(__file__).resolve().parent.parent / "config.json"


DEFAULT_SETTINGS = {
    "decimal_separator": ",",
    "division_scale": 10,
    "log_level": "WARNING",
    "log_file": "",
}

# Upper bound for division_scale; rounding works on 10 ** scale
MAX_DIVISION_SCALE = 100


def load_setting_value(key_value, path=None):
    """Return one setting, or the whole settings dict for key_value == "all".

    Missing, unreadable or malformed config files fall back to DEFAULT_SETTINGS
    so the calculator always starts.
    """
    path = Path(path) if path is not None else config_json
    settings_dict = dict(DEFAULT_SETTINGS)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            loaded = json.load(f)

    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.debug("Using default settings (%s): %s", path, e)

    else:
        if isinstance(loaded, dict):
            settings_dict.update(loaded)
        else:
            logger.warning("Ignoring %s: expected a JSON object, got %s", path, type(loaded).__name__)

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, DEFAULT_SETTINGS.get(key_value))


def save_setting(settings_dict, path=None):
    path = Path(path) if path is not None else config_json
    validate_settings(settings_dict)
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except OSError as e:
        raise E.ConfigError(str(e), code="5002")


def validate_settings(settings_dict):
    """Raise ConfigError for the first setting the engine cannot work with."""
    separator = settings_dict.get("decimal_separator", DEFAULT_SETTINGS["decimal_separator"])
    if not isinstance(separator, str) or len(separator) != 1 or separator.isdigit() or separator == "-":
        raise E.ConfigError(f"decimal_separator={separator!r}")

    scale = settings_dict.get("division_scale", DEFAULT_SETTINGS["division_scale"])
    if isinstance(scale, bool) or not isinstance(scale, int) or not 0 <= scale <= MAX_DIVISION_SCALE:
        raise E.ConfigError(f"division_scale={scale!r} (0..{MAX_DIVISION_SCALE})")

    level = settings_dict.get("log_level", DEFAULT_SETTINGS["log_level"])
    try:
        parse_level(level)
    except ValueError:
        raise E.ConfigError(f"log_level={level!r}")

    log_file = settings_dict.get("log_file", DEFAULT_SETTINGS["log_file"])
    if not isinstance(log_file, str):
        raise E.ConfigError(f"log_file={log_file!r}")
    if log_file and not Path(log_file).resolve().parent.is_dir():
        raise E.ConfigError(f"log_file={log_file!r} (no such directory)")


def coerce_setting(key_value, raw):
    """Convert a typed string (e.g. from the console) to the setting's type."""
    if key_value not in DEFAULT_SETTINGS:
        raise E.ConfigError(f"unknown setting {key_value!r}")
    if isinstance(DEFAULT_SETTINGS[key_value], int):
        try:
            return int(raw)
        except ValueError:
            raise E.ConfigError(f"{key_value}={raw!r}")
    return raw


def engine_settings(settings_dict=None):
    """Build validated EngineSettings from a settings dict (or config.json)."""
    if settings_dict is None:
        settings_dict = load_setting_value("all")
    validate_settings(settings_dict)
    return EngineSettings(
        decimal_separator=settings_dict["decimal_separator"],
        division_scale=settings_dict["division_scale"],
    )
