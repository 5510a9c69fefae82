import json
from pathlib import Path
from typing import Any, Dict, Optional

from SRI_Generate.core.errors import SettingsError


# ----------------------------
# Settings
# ----------------------------

DEFAULT_SETTINGS = {
    "http": {
        "timeout": 2.0,
    },
    "generate": {
        "algorithm": "all",
    },
    "output": {
        "indent": "\t",
    },
}


def load_settings(settings_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Defaults merged with an optional user JSON file, section by section.
    """
    merged = json.loads(json.dumps(DEFAULT_SETTINGS))

    if settings_path is None:
        return merged

    settings_path = Path(settings_path)
    if not settings_path.exists():
        return merged

    try:
        with open(settings_path, "r", encoding="utf-8") as f:
            user_settings = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise SettingsError(
            f"Unable to read settings from {settings_path}. {exc}"
        ) from exc

    if not isinstance(user_settings, dict):
        raise SettingsError(
            f"Settings file {settings_path} must hold a JSON object"
        )

    for k, v in user_settings.items():
        if isinstance(v, dict) and k in merged:
            merged[k].update(v)
        else:
            merged[k] = v

    return merged
