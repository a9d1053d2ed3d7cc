# modpacktools

A library of building blocks for managing Minecraft modpacks whose files
come from CurseForge and Modrinth. It covers the parts that are pure logic:
version ordering, fingerprints, URL parsing, choosing files and folders, and
building export documents.

Python 3.10 or newer is required. The package has no third-party
dependencies.

## Modules

- `modpacktools.versions`: FlexVer comparison (`flexver_compare`,
  `flexver_less`, `sort_versions`), `highest_index`, and editing a pack's
  list of acceptable Minecraft versions (`parse_acceptable_versions`,
  `is_sorted`, `add_acceptable_version`, `remove_acceptable_version`,
  `format_version_list`).
- `modpacktools.murmur2`: `murmurhash2`, `normalize`, `fingerprint` and the
  `Murmur2CF` hash object, which give the whitespace-stripping MurmurHash2
  fingerprint CurseForge uses to identify files.
- `modpacktools.cfversions`: `get_curseforge_version(s)` to map Minecraft
  versions and snapshots to CurseForge version labels, `parse_slug_or_url`
  returning a `ParsedProject`, `get_path_for_file` for metadata file paths,
  and `map_dep_override` for Quilt dependency substitutions.
- `modpacktools.curseforge`: `CurseForgeUpdateData` and
  `CurseForgeExportData` (to and from their stored maps),
  `DownloadMetadata` / `ManualDownload` for files that must be downloaded by
  hand, `filter_mods_by_side`, and `create_modlist` for `modlist.html`.
- `modpacktools.mrloaders`: `ModrinthFile` and `ModrinthVersion` records,
  `get_project_type_folder`, `compare_loader_lists`, `find_latest_version`
  and `search_loaders`.
- `modpacktools.modrinth`: `parse_slug_or_url` returning a
  `ParsedModrinthInput`, `ModrinthUpdateData`, `Side`, `get_side`,
  `get_best_hash`, `primary_file`, `find_version_by_number`,
  `map_dep_override` and `update_string`.
- `modpacktools.modrinthpack`: `ModrinthPack` and `PackFileEntry` for
  `modrinth.index.json`, plus `can_be_included_directly`, `env_for`,
  `build_dependencies` and `sort_files`.

## Examples

Fingerprint a file the way CurseForge does:

```python
from pathlib import Path
from modpacktools.murmur2 import Murmur2CF, fingerprint

data = Path("mods/example.jar").read_bytes()
print(fingerprint(data))

hasher = Murmur2CF()
hasher.update(data)
print(hasher.hexdigest())
```

Map a Minecraft version to its CurseForge label and read a project URL:

```python
from modpacktools.cfversions import get_curseforge_version, parse_slug_or_url

get_curseforge_version("1.18-pre1")   # "1.18-Snapshot"
parsed = parse_slug_or_url("https://www.curseforge.com/minecraft/mc-mods/jei/files/123456")
parsed.slug, parsed.file_id           # ("jei", 123456)
```

Keep an acceptable-versions list in FlexVer order:

```python
from modpacktools.versions import add_acceptable_version, format_version_list

versions = add_acceptable_version(["1.16.3", "1.16.5"], "1.16.4")
print(format_version_list(versions, "1.16.5"))
```

Build a Modrinth index:

```python
from modpacktools.modrinthpack import ModrinthPack, PackFileEntry, build_dependencies, env_for

entry = PackFileEntry(
    path="mods/example.jar",
    hashes={"sha1": "...", "sha512": "..."},
    env=env_for("client", optional=False),   # Env(client="required", server="unsupported")
    downloads=["https://cdn.modrinth.com/data/AAAA/versions/BBBB/example.jar"],
    file_size=1024,
)
pack = ModrinthPack(
    version_id="1.0.0",
    name="Example Pack",
    files=[entry],
    dependencies=build_dependencies({"minecraft": "1.20.1", "fabric": "0.14.21"}),
)
print(pack.to_json())
```

## Errors

Problems are raised as exceptions: `VersionListError` for invalid edits to
an acceptable-versions list, `ModrinthError` for unusable Modrinth data
(unknown project types, missing files or versions, bad URL escapes), and
`ValueError` for invalid sides, out-of-range file IDs, malformed update
data and a pack without a Minecraft version.

## What it does not do

This is a library only. It has no command-line tool, makes no requests to
CurseForge or Modrinth, does not download files, and does not read or write
a pack's own definition and index files. It does not import CurseForge pack
archives or instance folders, and it does not write a CurseForge
`manifest.json`; callers supply the data and write the results themselves.

## Running the tests

Install the `test` extra and run pytest from the project root.