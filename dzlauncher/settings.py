"""Launcher configuration stored as a JSON file."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

_log = logging.getLogger(__name__)

_NAME_PLACEHOLDER = "mod_imported_from_old_preset"

_DEFAULT_CONFIG: dict[str, Any] = {
    "mods": [],
    "parameters": {
        "checkSignatures": False,
        "connect": None,
        "cpuCount": -1,
        "customParameters": None,
        "enableHT": False,
        "environmentVariables": None,
        "exThreads": -1,
        "filePatching": False,
        "host": False,
        "hugepages": False,
        "name": None,
        "noLogs": False,
        "noPause": False,
        "noSplash": False,
        "par": None,
        "password": None,
        "port": None,
        "skipIntro": False,
        "window": False,
        "world": None,
    },
    "settings": {
        "checkForUpdates": None,
        "theme": "System",
    },
}


def _dump(data: Any) -> str:
    return json.dumps(data, indent=4, sort_keys=True, ensure_ascii=False)


def convert_old_mod_format_to_new_format(mods: dict[str, Any]) -> list[dict[str, Any]]:
    """Turn the old ``{"workshop": [...], "custom": [...]}`` layout into a flat mod list."""
    converted = [
        {"path": mod["id"], "name": _NAME_PLACEHOLDER, "enabled": True}
        for mod in mods["workshop"]
    ]
    converted.extend(
        {"path": mod["path"], "name": _NAME_PLACEHOLDER, "enabled": mod["enabled"]}
        for mod in mods["custom"]
    )
    return converted


def is_old_mod_format(mods: Any) -> bool:
    """Tell whether a mod collection uses the old, non-list layout."""
    return not isinstance(mods, list)


def create_default_config(config_file: str | os.PathLike[str]) -> None:
    """Write the default configuration unless the file already exists."""
    path = Path(config_file)
    if path.exists():
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(_dump(_DEFAULT_CONFIG), encoding="utf-8")


class Settings:
    """Configuration loaded from, and saved to, one JSON file."""

    def __init__(self, config_file_path: str | os.PathLike[str]) -> None:
        self.config_file = Path(config_file_path)
        self.settings: dict[str, Any] = {}
        create_default_config(self.config_file)
        try:
            self.settings = json.loads(self.config_file.read_text(encoding="utf-8"))
            if is_old_mod_format(self.settings["mods"]):
                self.settings["mods"] = convert_old_mod_format_to_new_format(self.settings["mods"])
        except (OSError, ValueError, KeyError, TypeError) as exc:
            _log.warning("Error loading settings from %s:\n%s", self.config_file, exc)

    def get_launch_parameters(self) -> str:
        """Build the game's command-line arguments from the ``parameters`` section."""
        parameters = self.settings.get("parameters") if isinstance(self.settings, dict) else None
        if not isinstance(parameters, dict):
            return ""

        pieces = []
        for key in sorted(parameters):
            value = parameters[key]
            if key.startswith(("dlc", "proton")) or key == "environmentVariables":
                continue
            if key == "customParameters" and isinstance(value, str):
                pieces.append(f" {value}")
            elif isinstance(value, bool):
                if value:
                    pieces.append(f" -{key}")
            elif isinstance(value, str):
                pieces.append(f" -{key}={value}")
            elif isinstance(value, int) and value != -1:
                pieces.append(f" -{key}={value}")
        return "".join(pieces)

    def save_settings_to_disk(self) -> None:
        """Write the current settings back to the configuration file."""
        self.config_file.write_text(_dump(self.settings), encoding="utf-8")