# projman

A small terminal tool for keeping project folders in order.

Each project lives in its own directory under a base directory. A project
directory holds a `project.yaml` file with the project's ID, name,
description, status, tags, creation time (RFC 3339) and path. It also holds
the standard subfolders `Docs`, `Planning`, `Logs` and `Exports`.

## Installation

```
pip install .
```

## Running

```
projman [--config PATH]
```

`--config` names the settings file. The default is `Config/projman.conf`,
relative to the current directory. If the file does not exist, `projman`
prints an error and exits with status 1.

On a POSIX terminal the menu reads keys directly. The arrow keys, `Enter`,
`Tab`, `Shift+Tab`, `Backspace`, `Esc` and `ctrl+<letter>` are recognised.
When standard input is not a terminal, or on Windows, each non-empty input
line is taken as one key name, such as `down`, `enter`, `esc`, `ctrl+f` or a
single character.

The main menu offers:

- **Projects**: browse the projects in `~/Projects`. `ctrl+f` searches by
  project ID, ignoring case. Selecting a project opens a submenu where you
  can view its status, archive it into `<project path>.zip`, or open its
  folder with `xdg-open`, `open` (macOS) or `explorer` (Windows).
- **Create New Project**: enter an ID, a name, a description and
  comma-separated tags, then press `Enter` on the last field. IDs are
  upper-cased, and any character other than `A-Z`, `0-9` and `-` is removed.
  ID and name are required. The new project gets the status `active`.
- **View Project Status**: look up a project by its ID.
- **Tools → Generate Tags**: enter the path of an input CSV and the path of an
  output YAML file. `Tab` switches between the two fields. The CSV has the
  columns `category,subcat,name`; its first row is a header and is skipped.
  The tool writes a YAML list of tag assignments (`id`, `category`, `subcat`,
  `name`). IDs follow the configured format, for example
  `{category}-{subcat}-{id}`. Numbering starts at the configured start value
  and restarts for each category/subcategory pair. `{id}` is zero-padded to
  two digits.
- **Settings**: turn sound effects on or off for the current session.

Use `↑`/`↓` (or `k`/`j`) to move, `Enter` to select and `Esc` to go back.
`q` or `ctrl+c` on the main menu quits.

## Configuration

Settings are read from a dotenv-style file. Variables set in the process
environment take precedence over the file.

```
PROJMAN_BASE_DIR=/home/me/Projects
PROJMAN_SOUND_ENABLED=false
PROJMAN_SOUND_NAV_UP=sounds/nav_up.wav
PROJMAN_SOUND_NAV_DOWN=sounds/nav_down.wav
PROJMAN_SOUND_SELECT=sounds/select.wav
PROJMAN_SOUND_CONFIRM=sounds/confirm.wav
PROJMAN_SOUND_ERROR=sounds/error.wav
PROJMAN_TAGGING_FORMAT={category}-{subcat}-{id}
PROJMAN_TAGGING_START=1
```

When sounds are enabled, they are played with `aplay` on Linux, `afplay` on
macOS, or PowerShell on Windows.

## What it does not do

- The menu entry **Archive Project** has no screen. Choosing it prints a
  notice and quits. To archive a project, use the **Projects** list instead.
- The screens always work on `~/Projects`. `PROJMAN_BASE_DIR` is read into
  the configuration, but the menu does not use it.
- Changes made in **Settings** are not written back to the settings file.
- Folder presets can be read with `projman.presets`, but no screen applies
  them to a project.

## Library use

The core functions can be used without the menu:

```python
from projman.project import Params, create_project, discover_projects, list_projects, show_status
from projman.tagging import build_assignments, generate_tags
from projman.archive import zip_project_folder
from projman.config import Config, load_config, save_config, config_path
from projman.presets import available_presets, load_preset
```

`create_project` raises `ProjectExistsError` if the project directory already
exists. `generate_tags` raises `TaggingError`, and `load_config` and
`save_config` raise `ConfigError`.