"""Checks and messages used when starting the game and reporting its state."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

_UINT64_MAX = 2**64 - 1
_LEADING_NUMBER = re.compile(r"[ \t\n\v\f\r]*[+-]?(\d+)")
_MOD_NAME_LIMIT = 40


def is_workshop_mod(path_or_workshop_id: str) -> bool:
    """Tell whether the value reads as a non-zero workshop id rather than a path."""
    match = _LEADING_NUMBER.match(path_or_workshop_id)
    if match is None:
        return False
    value = int(match.group(1))
    return 0 < value <= _UINT64_MAX


def selection_counter_text(workshop_count: int, custom_count: int) -> str:
    """Describe how many mods are selected."""
    return (
        f"Selected {workshop_count + custom_count} mods "
        f"({workshop_count} from workshop, {custom_count} custom)"
    )


def validate_parameters(parameters: Mapping[str, Any]) -> None:
    """Reject a blank profile name or parameter file; raise ValueError."""
    profile = parameters.get("name")
    if isinstance(profile, str) and not profile.strip():
        raise ValueError("Parameters -> Profile cannot be empty")
    parameter_file = parameters.get("par")
    if isinstance(parameter_file, str) and not parameter_file.strip():
        raise ValueError("Parameters -> Parameter file cannot be empty")


def status_text(pid: int | None) -> str:
    """Describe whether the game runs; ``None`` or -1 means it does not."""
    if pid is None or pid == -1:
        return "Status: DayZ is not running"
    return f"Status: DayZ is running, PID: {pid}"


def download_status_text(mod_name: str, bytes_downloaded: int, bytes_total: int) -> str:
    """Describe the progress of a workshop download."""
    percentage = int(bytes_downloaded / bytes_total * 100) if bytes_total else 0
    return f"Steam Workshop - downloading {mod_name[:_MOD_NAME_LIMIT]} - {percentage}%"


def update_notification_message(content: str) -> str:
    """Build the question shown when a newer launcher version exists."""
    return (
        "There is a new version of dayz-linux-launcher available\n"
        "\n"
        "Do you want to open the latest release page?\n"
        "\n"
        "Changelog:\n"
        f"{content}"
    )