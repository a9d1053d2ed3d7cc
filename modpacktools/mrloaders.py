"""Modrinth loader preferences, metadata folders and latest-version selection."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from modpacktools.versions import flexver_compare, highest_index


class ModrinthError(ValueError):
    """Raised when Modrinth project data cannot be used as asked."""


@dataclass
class ModrinthFile:
    """A file attached to a Modrinth version."""

    filename: str
    url: str = ""
    hashes: dict[str, str] = field(default_factory=dict)
    primary: bool = False


@dataclass
class ModrinthVersion:
    """A version of a Modrinth project."""

    id: str
    version_number: str
    date_published: datetime
    game_versions: list[str] = field(default_factory=list)
    loaders: list[str] = field(default_factory=list)
    files: list[ModrinthFile] = field(default_factory=list)
    project_id: str = ""


# "Loaders" that are supported regardless of the configured mod loaders.
DEFAULT_MR_LOADERS = (
    "canvas",
    "iris",
    "optifine",
    "vanilla",  # core shaders
    "minecraft",  # resource packs
)

WITH_DATAPACK_PATH_MR_LOADERS = DEFAULT_MR_LOADERS + (
    "datapack",  # needs a datapack loader mod
)

LOADER_FOLDERS = {
    "quilt": "mods",
    "fabric": "mods",
    "forge": "mods",
    "neoforge": "mods",
    "liteloader": "mods",
    "modloader": "mods",
    "rift": "mods",
    "bukkit": "plugins",
    "spigot": "plugins",
    "paper": "plugins",
    "purpur": "plugins",
    "sponge": "plugins",
    "bungeecord": "plugins",
    "waterfall": "plugins",
    "velocity": "plugins",
    "canvas": "resourcepacks",
    "iris": "shaderpacks",
    "optifine": "shaderpacks",
    "vanilla": "resourcepacks",
}

# More preferred loaders come first.
LOADER_PREFERENCE_LIST = (
    "quilt",
    "fabric",
    "neoforge",
    "forge",
    "liteloader",
    "modloader",
    "rift",
    "sponge",
    "purpur",
    "paper",
    "spigot",
    "bukkit",
    "velocity",
    "waterfall",
    "bungeecord",
    "canvas",
    "iris",
    "optifine",
    "vanilla",
    "datapack",
    "minecraft",
)

# Support for the key loader in both lists makes the group's loaders neutral.
LOADER_COMPAT_GROUPS = {
    "fabric": ("quilt",),
    "forge": ("neoforge",),
    "bukkit": ("purpur", "paper", "spigot"),
    "bungeecord": ("waterfall",),
}


def _preference(loader: str) -> int:
    try:
        return LOADER_PREFERENCE_LIST.index(loader)
    except ValueError:
        return -1


def _best_preferred(loaders: Iterable[str]) -> Optional[str]:
    ranked = [(idx, l) for l in loaders if (idx := _preference(l)) != -1]
    return min(ranked)[1] if ranked else None


def get_project_type_folder(
    project_type: str,
    file_loaders: Sequence[str],
    pack_loaders: Sequence[str],
    datapack_folder: str = "",
) -> str:
    """Return the folder a project's metadata file belongs in."""
    if project_type == "modpack":
        raise ModrinthError(
            "this command should not be used to add Modrinth modpacks, "
            "and importing of Modrinth modpacks is not yet supported"
        )
    if project_type == "resourcepack":
        return "resourcepacks"
    if project_type == "shader":
        best = _best_preferred(file_loaders)
        if best is not None:
            return LOADER_FOLDERS[best]
        return "shaderpacks"
    if project_type == "mod":
        best = _best_preferred(l for l in file_loaders if l in pack_loaders)
        if best is not None:
            return LOADER_FOLDERS[best]
        if "datapack" in file_loaders:
            if datapack_folder:
                return datapack_folder
            raise ModrinthError("set the datapack-folder option to use datapacks")
        return "mods"
    raise ModrinthError(f"unknown project type {project_type}")


def compare_loader_lists(a: Sequence[str], b: Sequence[str]) -> int:
    """Return positive if ``b`` has more preferable loaders, negative if ``a`` has, else 0."""
    compat: set[str] = set()
    for key, group in LOADER_COMPAT_GROUPS.items():
        if key in a and key in b:
            compat.update(group)

    no_index = float("inf")
    min_a = min(
        (idx for v in a if v not in compat and (idx := _preference(v)) != -1),
        default=no_index,
    )
    min_b = no_index
    for v in b:
        if v in compat:
            continue
        idx = _preference(v)
        if idx < min_a:
            return 1
        if idx != -1 and idx < min_b:
            min_b = idx
    if min_a < min_b:
        return -1
    return 0


def find_latest_version(
    versions: Sequence[ModrinthVersion],
    game_versions: Sequence[str],
    use_flexver: bool,
) -> ModrinthVersion:
    """Pick the best version by version number, game version, loaders and date."""
    if not versions:
        raise ModrinthError("no versions to choose from")
    latest = versions[0]
    best_game = highest_index(game_versions, latest.game_versions)
    for v in versions[1:]:
        game_idx = highest_index(game_versions, v.game_versions)
        compare = 0
        if use_flexver:
            compare = flexver_compare(v.version_number, latest.version_number)
        if compare == 0:
            compare = game_idx - best_game
        if compare == 0:
            compare = compare_loader_lists(latest.loaders, v.loaders)
        if compare == 0 and v.date_published > latest.date_published:
            compare = 1
        if compare > 0:
            latest = v
            best_game = game_idx
    return latest


def search_loaders(pack_loaders: Iterable[str], datapack_folder: str = "") -> list[str]:
    """Return the loaders to ask Modrinth for, given the pack's loaders."""
    extra = WITH_DATAPACK_PATH_MR_LOADERS if datapack_folder else DEFAULT_MR_LOADERS
    return [*pack_loaders, *extra]