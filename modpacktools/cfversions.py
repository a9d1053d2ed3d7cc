"""CurseForge game-version names, project URL parsing and metadata paths."""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from modpacktools.versions import flexver_less

META_EXTENSION = ".pw.toml"

_SNAPSHOT_RE = re.compile(r"(?:Snapshot )?(\d+)w0?(0|[1-9]\d*)([a-z])", re.ASCII)

_SNAPSHOT_NAMES = ("-pre", " Pre-Release ", " Pre-release ", "-rc")

# Checked in order; the first matching (year, week) rule wins.
_SNAPSHOT_RULES: tuple[tuple[Callable[[int, int], bool], str], ...] = (
    (lambda y, w: y >= 22 and w >= 11, "1.19-Snapshot"),
    (lambda y, w: (y == 21 and w >= 37) or y >= 22, "1.18-Snapshot"),
    (lambda y, w: (y == 20 and w >= 45) or (y == 21 and w <= 20), "1.17-Snapshot"),
    (lambda y, w: y == 20 and w >= 6, "1.16-Snapshot"),
    (lambda y, w: y == 19 and w >= 34, "1.15-Snapshot"),
    (lambda y, w: (y == 18 and w >= 43) or (y == 19 and w <= 14), "1.14-Snapshot"),
    (lambda y, w: y == 18 and 30 <= w <= 33, "1.13.1-Snapshot"),
    (lambda y, w: (y == 17 and w >= 43) or (y == 18 and w <= 22), "1.13-Snapshot"),
    (lambda y, w: y == 17 and w == 31, "1.12.1-Snapshot"),
    (lambda y, w: y == 17 and 6 <= w <= 18, "1.12-Snapshot"),
    (lambda y, w: y == 16 and w == 50, "1.11.1-Snapshot"),
    (lambda y, w: y == 16 and 32 <= w <= 44, "1.11-Snapshot"),
    (lambda y, w: y == 16 and 20 <= w <= 21, "1.10-Snapshot"),
    (lambda y, w: y == 16 and 14 <= w <= 15, "1.9.3-Snapshot"),
    (lambda y, w: (y == 15 and w >= 31) or (y == 16 and w <= 7), "1.9-Snapshot"),
    (lambda y, w: y == 14 and 2 <= w <= 34, "1.8-Snapshot"),
    (lambda y, w: y == 13 and 47 <= w <= 49, "1.7.4-Snapshot"),
    (lambda y, w: y == 13 and 36 <= w <= 43, "1.7.2-Snapshot"),
    (lambda y, w: y == 13 and 16 <= w <= 26, "1.6-Snapshot"),
    (lambda y, w: y == 13 and 11 <= w <= 12, "1.5.1-Snapshot"),
    (lambda y, w: y == 13 and 1 <= w <= 10, "1.5-Snapshot"),
    (lambda y, w: y == 12 and 49 <= w <= 50, "1.4.6-Snapshot"),
    (lambda y, w: y == 12 and 32 <= w <= 42, "1.4.2-Snapshot"),
    (lambda y, w: y == 12 and 15 <= w <= 30, "1.3.1-Snapshot"),
    (lambda y, w: y == 12 and 3 <= w <= 8, "1.2.1-Snapshot"),
    (lambda y, w: (y == 11 and w >= 47) or (y == 12 and w <= 1), "1.1-Snapshot"),
)

_URL_PATTERNS = (
    re.compile(
        r"^https?://(?P<game>minecraft)\.curseforge\.com/projects/(?P<slug>[^/]+)"
        r"(?:/(?:files|download)/(?P<fileID>\d+))?",
        re.ASCII,
    ),
    re.compile(
        r"^https?://(?:www\.|beta\.|legacy\.)?curseforge\.com/(?P<game>[^/]+)/"
        r"(?P<category>[^/]+)/(?P<slug>[^/]+)(?:/(?:files|download)/(?P<fileID>\d+))?",
        re.ASCII,
    ),
    re.compile(r"^(?P<slug>[a-z][\da-z\-_]{0,127})$", re.ASCII),
)

_UINT32_MAX = 0xFFFFFFFF

_DEFAULT_FOLDERS: dict[int, dict[int, str]] = {
    432: {  # Minecraft
        5: "plugins",  # Bukkit plugins
        12: "resourcepacks",
        6: "mods",
        17: "saves",
    },
}


@dataclass(frozen=True)
class ParsedProject:
    """What could be read from a CurseForge URL or slug; empty fields are unknown."""

    game: str = ""
    category: str = ""
    slug: str = ""
    file_id: int = 0


def get_curseforge_version(mc_version: str) -> str:
    """Return the game-version name CurseForge files a Minecraft version under."""
    for name in _SNAPSHOT_NAMES:
        index = mc_version.find(name)
        if index > -1:
            return mc_version[:index] + "-Snapshot"

    match = _SNAPSHOT_RE.search(mc_version)
    if match is None:
        return mc_version
    year = int(match.group(1))
    week = int(match.group(2))
    for rule, name in _SNAPSHOT_RULES:
        if rule(year, week):
            return name
    return mc_version


def get_curseforge_versions(mc_versions: Iterable[str]) -> list[str]:
    """Map every Minecraft version to its CurseForge name."""
    return [get_curseforge_version(v) for v in mc_versions]


def parse_slug_or_url(url: str) -> ParsedProject:
    """Read game, category, slug and file ID from a CurseForge URL or bare slug.

    Input that is neither gives an empty result. A file ID that does not fit
    in 32 bits raises ValueError.
    """
    for pattern in _URL_PATTERNS:
        match = pattern.search(url)
        if match is None:
            continue
        groups = {k: (v or "") for k, v in match.groupdict().items()}
        file_id = 0
        raw_id = groups.get("fileID", "")
        if raw_id:
            file_id = int(raw_id)
            if file_id > _UINT32_MAX:
                raise ValueError(f"file ID {raw_id} is out of range")
        return ParsedProject(
            game=groups.get("game", ""),
            category=groups.get("category", ""),
            slug=groups.get("slug", ""),
            file_id=file_id,
        )
    return ParsedProject()


def get_path_for_file(
    game_id: int,
    class_id: int,
    category_id: int,
    slug: str,
    meta_folder: str = "",
    meta_folder_base: str = "",
) -> str:
    """Return where the metadata file for a project should be stored."""
    file_name = slug + META_EXTENSION
    if not meta_folder:
        folders = _DEFAULT_FOLDERS.get(game_id, {})
        folder = folders.get(class_id) or folders.get(category_id)
        if folder is not None:
            return os.path.normpath(os.path.join(meta_folder_base, folder, file_name))
        meta_folder = "."
    return os.path.normpath(os.path.join(meta_folder_base, meta_folder, file_name))


def map_dep_override(dep_id: int, is_quilt: bool, mc_version: str) -> int:
    """Swap Fabric-only dependency projects for their Quilt counterparts."""
    if is_quilt and dep_id == 306612:
        # Fabric API -> QFAPI/QSL
        return 634179
    if is_quilt and dep_id == 308769:
        # Fabric Language Kotlin -> QKL, for release versions from 1.19.2
        if flexver_less("1.19.1", mc_version) and flexver_less(mc_version, "2.0.0"):
            return 720410
    return dep_id