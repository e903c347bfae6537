# config.py
import os

from dotenv import load_dotenv

from utils.settings import load_settings_yaml

# Load environment variables from .env file.
load_dotenv()

_config = None

DEFAULTS = {
    # General Settings
    "DEBUG_MODE": False,
    "SETTINGS_DIR": ".",
    "LOG_FILE": "feeder.log",

    # Feeder Settings
    "FEEDER_CONFIG_PATH": "feeder_config.txt",
    "ARCHIVE_DIR": "../archive",
    "CLEAR_ARCHIVE_ON_START": False,

    # Motor Settings (negative pin runs the feeder without hardware)
    "MOTOR_PIN": 4,
    "MOTOR_RAMP_MS": 10,
}


def _coerce(value, default):
    """
    Converts a raw setting to the type of its default.

    Values that cannot be converted fall back to the default.
    """
    if value is None:
        return default
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() == "true"
    if isinstance(default, int):
        if isinstance(value, bool):
            return default
        try:
            return int(float(value))
        except (TypeError, ValueError, OverflowError):
            return default
    return str(value)


def _load_config():
    """
    Loads configuration from environment variables and returns a dictionary.

    Values from settings.yaml (in SETTINGS_DIR) override the environment.
    Every value goes through the same type coercion.
    """
    config = {key: _coerce(os.getenv(key), default) for key, default in DEFAULTS.items()}

    overrides = load_settings_yaml(config["SETTINGS_DIR"])
    for key, value in overrides.items():
        if key in DEFAULTS:
            config[key] = _coerce(value, DEFAULTS[key])

    config["MOTOR_RAMP_MS"] = max(1, config["MOTOR_RAMP_MS"])
    return config


def get_config():
    """Returns the process-wide configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = _load_config()
    return _config


if __name__ == "__main__":
    # For testing purposes, print the configuration
    from pprint import pprint

    pprint(get_config())
