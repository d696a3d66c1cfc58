"""Helpers for game, workshop and mod paths."""

from __future__ import annotations

import logging
import os
from pathlib import Path

_log = logging.getLogger(__name__)

GAME_DIR_ALIAS = "~arma"
_WORKSHOP_RELATIVE = "/../../workshop/content/221100"


def ui_path_to_full_path(ui_path: str, game_path: str | os.PathLike[str]) -> str:
    """Expand the game directory alias in a path shown to the user."""
    return ui_path.replace(GAME_DIR_ALIAS, os.fspath(game_path))


def full_path_to_ui_path(full_path: str, game_path: str | os.PathLike[str]) -> str:
    """Shorten a path by replacing the game directory with its alias."""
    game = os.fspath(game_path)
    if not game:
        return full_path
    return full_path.replace(game, GAME_DIR_ALIAS)


def is_workshop_path_valid(path: str | os.PathLike[str]) -> bool:
    """Tell whether ``path`` is an existing directory."""
    try:
        return os.path.isdir(path)
    except (OSError, ValueError):
        return False


def guess_workshop_path(game_path: str | os.PathLike[str]) -> Path | None:
    """Find the workshop content directory that belongs to a game directory.

    Returns the resolved path, or None when it does not exist.
    """
    candidate = os.fspath(game_path) + _WORKSHOP_RELATIVE
    try:
        return Path(candidate).resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        _log.warning("%s", exc)
        return None


def ensure_extension(filename: str, extension: str) -> str:
    """Append ``extension`` to ``filename`` unless it already ends with it."""
    return filename if filename.endswith(extension) else filename + extension