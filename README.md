# dzlauncher

Library code for a DayZ launcher on Linux. It keeps the launcher's
configuration file and its list of mods. It builds the parameters the game
is started with, and it makes the texts the launcher shows. It draws no
windows. A front end calls it to hold its state.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dzlauncher.settings`

- `create_default_config(config_file)` writes the default configuration when the file does not exist yet.
- `Settings(config_file_path)` creates the default file if needed and loads it. An old-style mod collection (`{"workshop": [...], "custom": [...]}`) is turned into a flat list as it loads. Load errors are logged, not raised.
- `Settings.settings` holds the loaded configuration as a dict.
- `Settings.get_launch_parameters()` builds the game's argument string from the `parameters` section:
  - A true boolean becomes `-key`.
  - A string becomes `-key=value`.
  - An integer other than -1 becomes `-key=value`.
  - `customParameters` is added as it is.
  - Keys starting with `dlc` or `proton`, and `environmentVariables`, are left out.
- `Settings.save_settings_to_disk()` writes the configuration back.
- `is_old_mod_format(mods)` and `convert_old_mod_format_to_new_format(mods)` detect and convert the old mod layout.

### `dzlauncher.mod_table`

- `UiMod` is one row, with these fields:
  - `enabled`
  - `name`
  - `path_or_workshop_id`
  - `is_workshop_mod`

  `type_label()` returns `"workshop"` or `"custom"`.
- `ModTable` is the ordered list of rows:
  - `add_mod(mod, index=-1)`, `remove_row(index)`, `get_mod_at(index)`, `get_mods()` and `contains_mod(path_or_workshop_id)` manage the rows, and `len()` gives the row count.
  - `set_mod_enabled(index, enabled)` and `disable_all_mods()` change the enabled flags.
  - `move_rows(rows, drop_row)` moves rows as a drag and drop would and returns their new indices.
  - `sort_by_enabled(descending=False)` orders rows by their enabled flag. The order inside each group is kept.
  - `set_mod_counter_callback(callback)` and `update_mod_selection_counters()` report how many workshop and custom mods are enabled.

### `dzlauncher.exports`

- `mods_to_settings(mods)` turns table rows into settings `mods` entries.
- `workshop_mods_to_text(mods)` lists the enabled workshop mods as `name - link` lines. `save_workshop_txt(filename, mods)` writes that list to a file and adds `.txt` when it is missing.
- `check_custom_mod_dir(mod_dir, game_path, workshop_path, existing_paths)` returns the resolved directory. It raises `ValueError` when the directory:
  - is missing,
  - is the game directory,
  - lies in the workshop,
  - has no `addons` folder, or
  - is already listed.
- `remove_mod_from_settings(settings_mods, full_path)` drops matching entries and returns how many it removed.

### `dzlauncher.launch`

- `is_workshop_mod(path_or_workshop_id)` tells whether a value reads as a non-zero workshop id.
- `validate_parameters(parameters)` raises `ValueError` for a blank profile name or a blank parameter file.
- `selection_counter_text`, `status_text`, `download_status_text` and `update_notification_message` build the texts shown to the user.

### `dzlauncher.paths`

- `ui_path_to_full_path(ui_path, game_path)` and `full_path_to_ui_path(full_path, game_path)` convert between full paths and the `~arma` short form.
- `guess_workshop_path(game_path)` finds the workshop content directory next to a game directory, or returns `None`.
- `is_workshop_path_valid(path)` checks that a path is an existing directory.
- `ensure_extension(filename, extension)` appends a file extension when it is missing.

## Example

```python
from dzlauncher.settings import Settings

settings = Settings("/tmp/dzlauncher/config.json")
settings.settings["parameters"]["noSplash"] = True
print(settings.get_launch_parameters())   # " -noSplash"
settings.save_settings_to_disk()
```

## What it does not do

- It does not read mod presets from HTML files.
- It does not load or save mod presets as separate JSON files.
- It has no Steam or Steam Workshop connection. It cannot subscribe to items, track downloads or look up item titles.
- It does not start the game.
- It has no command-line entry point and no user interface.