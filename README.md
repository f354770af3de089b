# shortcutsync

A library for keeping a Steam installation's non-Steam shortcuts in order. It gives you these parts:

- **Steam locations** (`shortcutsync.steam_paths`, `shortcutsync.installed_games`). These find the Steam folder and each user's data folder. They also list the installed Steam games from their `.acf` manifests.
- **Shortcuts** (`shortcutsync.shortcuts`). This marks imported shortcuts with the `boilr` tag. It replaces old tagged shortcuts, disconnects single shortcuts and points missing icons at downloaded artwork.
- **Collections** (`shortcutsync.collections`). This parses, merges and serializes the collection categories Steam keeps in its local storage. It also rewrites the `user-collections` line of `localconfig.vdf`.
- **Artwork** (`shortcutsync.image_type`, `shortcutsync.griddb_settings`, `shortcutsync.cached_search`, `shortcutsync.downloader`, `shortcutsync.image_keys`). These name grid, hero, logo, icon and big-picture images the way Steam expects. They track banned images and cache SteamGridDB search results in a JSON file. They also work out which images are missing and download them.
- **Backups** (`shortcutsync.backups`). This copies each user's `shortcuts.vdf` into a backup folder under a timestamped name, and restores from there.
- **Steam process** (`shortcutsync.restarter`). This stops Steam before files are rewritten and starts it again afterwards.

## Requirements

- Python 3.10 or later
- `psutil`

For the tests, install the `test` extra (`pytest`).

## Examples

### Finding users and installed games

```python
from shortcutsync.steam_settings import SteamSettings
from shortcutsync.steam_paths import get_shortcuts_paths
from shortcutsync.installed_games import get_installed_games

settings = SteamSettings()  # location=None: use the platform's default Steam folder
for user in get_shortcuts_paths(settings):
    print(user.user_id, user.shortcut_path)

for game in get_installed_games(settings):
    print(game.appid, game.name)
```

`SteamSettings.from_dict` reads saved settings. It needs every flag to be present and boolean: `create_collections`, `optimize_for_big_picture`, `stop_steam` and `start_steam`. If one is missing or not boolean, it raises `ValueError`.

### Artwork names

```python
from shortcutsync.image_type import ImageType, all_types

for image_type in all_types():
    print(image_type.display_name, image_type.file_name(312200, "png"))

print(ImageType.HERO.steam_url("763890", 1647763452))
```

### Collections

```python
from shortcutsync.collections import (
    Collection, new_steam_collection, merge_category, dump_category,
    parse_steam_collections, parse_vdf_collection,
    replace_boilr_vdf_collections, write_vdf_collection_to_string,
)

category = parse_steam_collections(stored_value)       # a value read from Steam's storage
fresh = [new_steam_collection("Itch", [312200])]
updated = dump_category(merge_category(category, fresh))  # text to store back

vdf = parse_vdf_collection(collections_json) or {}
vdf = replace_boilr_vdf_collections(vdf, [Collection("Itch", [312200])])
new_text = write_vdf_collection_to_string(localconfig_text, vdf)
```

### Shortcuts

```python
from shortcutsync.shortcuts import Shortcut, prepare_platform_shortcuts, merge_shortcuts

imported = prepare_platform_shortcuts(
    [("Itch", [Shortcut(app_id=123, app_name="Game", exe="/games/game")])],
    blacklisted_games=[],
)
result = merge_shortcuts(existing_shortcuts, imported)
```

### Backups

```python
from pathlib import Path
from shortcutsync.backups import backup_shortcuts, load_backups, restore_backup

backup_folder = Path("backups")
backup_shortcuts(settings, backup_folder)
backups = load_backups(backup_folder)   # newest name first
if backups:
    restore_backup(settings, backups[0])
```

### Artwork search cache and downloads

`CachedSearch(client, cache_file)` accepts any object with a `search(query)` method. That method must return a sequence whose items have an `id`, either as an attribute or as a dictionary key. Call `search(app_id, name)` to get the cached or freshly found grid id.

The `shortcutsync.downloader` module selects downloads:

- `image_types_to_download` gives the image types to look for.
- `shortcuts_needing_images` picks the shortcuts that lack images.
- `images_needed` pairs shortcuts with their grid ids.

It also fetches them:

- `download_to_download` fetches a `ToDownload` over HTTP with `urllib`.
- `remove_failed_downloads` deletes files that are smaller than two bytes.

## What the package does not do

- It does not open Steam's local storage database. The collection functions work on the stored text values, so reading and writing the database is up to the caller.
- It does not read or write the binary `shortcuts.vdf` format. `Shortcut` is a plain data class, and the caller must parse and save the file.
- It has no SteamGridDB API client. Searching and image listing come from a client object the caller supplies.
- It has no command-line program and no graphical interface.

## Notes

Steam keeps its files locked and may overwrite them while it runs, so stop it before you rewrite collections or shortcuts:

- `shortcutsync.restarter.ensure_steam_stopped()` kills the Steam processes and waits for them to end.
- `shortcutsync.restarter.ensure_steam_started(settings)` launches Steam again if it is not running.