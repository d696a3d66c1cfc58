"""Ordered table of mods as shown to the user."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace

WORKSHOP_LABEL = "workshop"
CUSTOM_LABEL = "custom"


@dataclass(frozen=True)
class UiMod:
    """One row of the mod table."""

    enabled: bool = False
    name: str = ""
    path_or_workshop_id: str = ""
    is_workshop_mod: bool = False

    def type_label(self) -> str:
        """Return the text shown in the table's "Type" column."""
        return WORKSHOP_LABEL if self.is_workshop_mod else CUSTOM_LABEL


class ModTable:
    """Ordered list of mods with enable flags, reordering and selection counters."""

    COLUMN_LABELS = ("Enabled", "Name", "ID/Path", "Type")

    def __init__(self) -> None:
        self._rows: list[UiMod] = []
        self._counter_callback: Callable[[int, int], None] | None = None

    def __len__(self) -> int:
        return len(self._rows)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._rows):
            raise IndexError(f"row {index} out of range")

    def add_mod(self, mod: UiMod, index: int = -1) -> None:
        """Insert ``mod`` at ``index``; -1 appends it at the end."""
        if index == -1:
            index = len(self._rows)
        if not 0 <= index <= len(self._rows):
            raise IndexError(f"cannot insert at row {index}")
        self._rows.insert(index, mod)

    def contains_mod(self, path_or_workshop_id: str) -> bool:
        return any(row.path_or_workshop_id == path_or_workshop_id for row in self._rows)

    def disable_all_mods(self) -> None:
        """Uncheck every mod, reporting the counters after each change."""
        for index in range(len(self._rows)):
            self.set_mod_enabled(index, False)

    def get_mod_at(self, index: int) -> UiMod:
        self._check_index(index)
        return self._rows[index]

    def get_mods(self) -> list[UiMod]:
        return list(self._rows)

    def remove_row(self, index: int) -> None:
        self._check_index(index)
        del self._rows[index]

    def set_mod_enabled(self, index: int, enabled: bool) -> None:
        """Check or uncheck one mod; the counters are reported when the state changes."""
        self._check_index(index)
        current = self._rows[index]
        if current.enabled == enabled:
            return
        self._rows[index] = replace(current, enabled=enabled)
        self.update_mod_selection_counters()

    def move_rows(self, rows: Iterable[int], drop_row: int) -> list[int]:
        """Move the given rows, keeping their order, so they land at ``drop_row``.

        ``drop_row`` is counted before the move. Returns the new indices of the
        moved rows.
        """
        selected = sorted(set(rows))
        for row in selected:
            self._check_index(row)
        if not 0 <= drop_row <= len(self._rows):
            raise IndexError(f"cannot drop at row {drop_row}")

        moving = [self._rows[row] for row in selected]
        for row in reversed(selected):
            del self._rows[row]
            if row < drop_row:
                drop_row -= 1
        self._rows[drop_row:drop_row] = moving
        return list(range(drop_row, drop_row + len(moving)))

    def sort_by_enabled(self, descending: bool = False) -> None:
        """Order rows by their enabled flag, keeping the order within each group."""
        self._rows.sort(key=lambda mod: mod.enabled, reverse=descending)
        if descending:
            # reverse=True keeps stability in Python, nothing more to do
            return

    def set_mod_counter_callback(self, callback: Callable[[int, int], None]) -> None:
        """Register ``callback(workshop_count, custom_count)`` for selection changes."""
        self._counter_callback = callback

    def update_mod_selection_counters(self) -> tuple[int, int]:
        """Count enabled workshop and custom mods and report them to the callback."""
        enabled = [mod for mod in self._rows if mod.enabled]
        workshop = sum(1 for mod in enabled if mod.is_workshop_mod)
        custom = len(enabled) - workshop
        if self._counter_callback is not None:
            self._counter_callback(workshop, custom)
        return workshop, custom