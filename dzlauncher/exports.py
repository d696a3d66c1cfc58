"""Conversion of the mod table into settings entries and text exports, and checks on custom mod directories."""

from __future__ import annotations

import os
from collections.abc import Iterable, MutableSequence
from pathlib import Path
from typing import Any

from .mod_table import UiMod
from .paths import ensure_extension

WORKSHOP_TXT_EXTENSION = ".txt"
WORKSHOP_ITEM_LINK = "https://steamcommunity.com/sharedfiles/filedetails/?id={}"
ADDONS_DIR = "addons"


def mods_to_settings(mods: Iterable[UiMod]) -> list[dict[str, Any]]:
    """Turn table rows into the ``mods`` entries stored in the settings."""
    return [
        {"enabled": mod.enabled, "name": mod.name, "path": mod.path_or_workshop_id}
        for mod in mods
    ]


def workshop_mods_to_text(mods: Iterable[UiMod]) -> str:
    """List enabled workshop mods, one ``name - link`` line each."""
    return "".join(
        f"{mod.name} - {WORKSHOP_ITEM_LINK.format(mod.path_or_workshop_id)}\n"
        for mod in mods
        if mod.enabled and mod.is_workshop_mod
    )


def save_workshop_txt(filename: str | os.PathLike[str], mods: Iterable[UiMod]) -> Path:
    """Write the enabled workshop mods to a text file, adding ``.txt`` if missing.

    Returns the path that was written.
    """
    target = Path(ensure_extension(os.fspath(filename), WORKSHOP_TXT_EXTENSION))
    target.write_text(workshop_mods_to_text(mods), encoding="utf-8")
    return target


def check_custom_mod_dir(
    mod_dir: str | os.PathLike[str],
    game_path: str | os.PathLike[str],
    workshop_path: str | os.PathLike[str],
    existing_paths: Iterable[str],
) -> Path:
    """Check that a directory can be added as a custom mod.

    Returns the resolved directory; raises ValueError describing why it
    cannot be added.
    """
    if not os.path.exists(mod_dir):
        raise ValueError(f"{os.fspath(mod_dir)} does not exist.")

    resolved = Path(mod_dir).resolve()
    if resolved == Path(game_path).resolve():
        raise ValueError(f"{resolved} is Arma's main directory.")

    workshop = os.fspath(workshop_path)
    if workshop and workshop in str(resolved):
        raise ValueError(f"{resolved} is a workshop mod.")

    entries = {entry.name.lower() for entry in resolved.iterdir()} if resolved.is_dir() else set()
    if ADDONS_DIR not in entries:
        raise ValueError(f"{resolved / ADDONS_DIR} does not exist.")

    if str(resolved) in set(existing_paths):
        raise ValueError(f"{resolved} already exists.")

    return resolved


def remove_mod_from_settings(settings_mods: MutableSequence[dict[str, Any]], full_path: str) -> int:
    """Drop every settings entry whose path is ``full_path``; return how many were removed."""
    kept = [mod for mod in settings_mods if mod.get("path") != full_path]
    removed = len(settings_mods) - len(kept)
    settings_mods[:] = kept
    return removed