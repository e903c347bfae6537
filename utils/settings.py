from pathlib import Path
from typing import Any

import yaml


def get_settings_path(settings_dir: str = ".") -> Path:
    """Returns the path to the settings.yaml file."""
    return Path(settings_dir) / "settings.yaml"


def load_settings_yaml(settings_dir: str = ".") -> dict[str, Any]:
    """Loads runtime settings from YAML; a missing file means no overrides."""
    settings_path = get_settings_path(settings_dir)
    if not settings_path.exists():
        return {}
    raw = settings_path.read_text(encoding="utf-8").strip()
    if not raw:
        return {}
    try:
        data = yaml.safe_load(raw)
        return data if isinstance(data, dict) else {}
    except yaml.YAMLError:
        return {}
