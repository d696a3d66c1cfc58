import pytest

from dzlauncher.mod_table import ModTable, UiMod


def _mod(name, enabled=False, workshop=False):
    return UiMod(enabled, name, f"/mods/{name}", workshop)


def _names(table):
    return [mod.name for mod in table.get_mods()]


def test_type_label():
    assert UiMod(is_workshop_mod=True).type_label() == "workshop"
    assert UiMod().type_label() == "custom"


def test_add_mod_appends_and_inserts():
    table = ModTable()
    table.add_mod(_mod("a"))
    table.add_mod(_mod("b"))
    table.add_mod(_mod("c"), 0)
    assert _names(table) == ["c", "a", "b"]
    assert len(table) == 3


def test_add_mod_bad_index():
    table = ModTable()
    with pytest.raises(IndexError):
        table.add_mod(_mod("a"), 2)


def test_contains_and_get():
    table = ModTable()
    mod = _mod("a", True, True)
    table.add_mod(mod)
    assert table.contains_mod("/mods/a")
    assert not table.contains_mod("/mods/b")
    assert table.get_mod_at(0) == mod
    with pytest.raises(IndexError):
        table.get_mod_at(1)


def test_remove_row():
    table = ModTable()
    for name in "abc":
        table.add_mod(_mod(name))
    table.remove_row(1)
    assert _names(table) == ["a", "c"]
    with pytest.raises(IndexError):
        table.remove_row(5)


def test_counters_and_callback():
    table = ModTable()
    calls = []
    table.set_mod_counter_callback(lambda w, c: calls.append((w, c)))
    table.add_mod(_mod("a", True, True))
    table.add_mod(_mod("b", True, False))
    table.add_mod(_mod("c", False, False))
    assert calls == []
    table.set_mod_enabled(2, True)
    assert calls == [(1, 2)]
    assert table.update_mod_selection_counters() == (1, 2)


def test_set_same_state_does_not_report():
    table = ModTable()
    calls = []
    table.set_mod_counter_callback(lambda w, c: calls.append((w, c)))
    table.add_mod(_mod("a", True))
    table.set_mod_enabled(0, True)
    assert calls == []


def test_disable_all_mods():
    table = ModTable()
    calls = []
    table.set_mod_counter_callback(lambda w, c: calls.append((w, c)))
    table.add_mod(_mod("a", True, True))
    table.add_mod(_mod("b", True))
    table.disable_all_mods()
    assert not any(mod.enabled for mod in table.get_mods())
    assert calls[-1] == (0, 0)
    assert table.update_mod_selection_counters() == (0, 0)


def test_move_rows_down():
    table = ModTable()
    for name in "abcde":
        table.add_mod(_mod(name))
    new_rows = table.move_rows([0, 1], 4)
    assert _names(table) == ["c", "d", "a", "b", "e"]
    assert [table.get_mod_at(i).name for i in new_rows] == ["a", "b"]


def test_move_rows_up_and_to_end():
    table = ModTable()
    for name in "abcde":
        table.add_mod(_mod(name))
    table.move_rows([3], 0)
    assert _names(table) == ["d", "a", "b", "c", "e"]
    new_rows = table.move_rows([1, 1], len(table))
    assert _names(table) == ["d", "b", "c", "e", "a"]
    assert new_rows == [len(table) - 1]


def test_move_rows_keeps_all_mods():
    table = ModTable()
    for name in "abcdef":
        table.add_mod(_mod(name))
    table.move_rows([5, 0, 2], 3)
    assert sorted(_names(table)) == list("abcdef")


def test_move_rows_bad_index():
    table = ModTable()
    table.add_mod(_mod("a"))
    with pytest.raises(IndexError):
        table.move_rows([3], 0)


def test_sort_by_enabled_is_stable():
    table = ModTable()
    table.add_mod(_mod("a", True))
    table.add_mod(_mod("b", False))
    table.add_mod(_mod("c", True))
    table.add_mod(_mod("d", False))
    table.sort_by_enabled()
    assert _names(table) == ["b", "d", "a", "c"]
    table.sort_by_enabled(descending=True)
    assert _names(table) == ["a", "c", "b", "d"]