"""Modrinth project input parsing, update metadata, side and file selection."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional
from urllib.parse import unquote

from modpacktools.curseforge import CLIENT_SIDE, SERVER_SIDE, UNIVERSAL_SIDE
from modpacktools.mrloaders import ModrinthError, ModrinthFile, ModrinthVersion
from modpacktools.versions import flexver_less

_UPDATE_KEY = "modrinth"

_SLUG_CHARS = r'[a-zA-Z0-9!@$()`.+,_"-]'

_URL_PATTERNS = (
    re.compile(
        r"^https?://modrinth\.com/(?P<urlCategory>[^/]+)/(?P<slug>" + _SLUG_CHARS + r"{3,64})"
        r"(?:/version/(?P<version>" + _SLUG_CHARS + r"{1,32}))?"
    ),
    # Version and project IDs are base62.
    re.compile(
        r"^https?://cdn\.modrinth\.com/data/(?P<slug>[a-zA-Z0-9]+)/versions/"
        r"(?P<versionID>[a-zA-Z0-9]+)/(?P<filename>[^/]+)\Z"
    ),
    re.compile(r"^(?P<slug>" + _SLUG_CHARS + r"{3,64})\Z"),
)

_SLUG_PATTERN_INDEX = 2

URL_CATEGORIES = ("mod", "plugin", "datapack", "shader", "resourcepack", "modpack")

_BAD_ESCAPE = re.compile(r"%(?![0-9a-fA-F]{2})")

_PREFERRED_HASHES = ("sha1", "sha512", "sha256", "murmur2")


class Side(str, Enum):
    """Which side of the game a file is installed on."""

    UNIVERSAL = UNIVERSAL_SIDE
    SERVER = SERVER_SIDE
    CLIENT = CLIENT_SIDE


@dataclass(frozen=True)
class ParsedModrinthInput:
    """What could be read from a Modrinth URL, slug or project ID."""

    slug: str = ""
    version: str = ""
    version_id: str = ""
    filename: str = ""
    # True if the input was a bare slug rather than a URL.
    parsed_slug: bool = False


def _read_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"'{key}' expected a string, got {value!r}")
    return value


@dataclass(frozen=True)
class ModrinthUpdateData:
    """The project and version a mod was installed from."""

    project_id: str = ""
    installed_version: str = ""

    def to_map(self) -> dict[str, str]:
        return {"mod-id": self.project_id, "version": self.installed_version}

    @staticmethod
    def from_map(data: Mapping[str, Any]) -> "ModrinthUpdateData":
        """Read update data; missing keys are empty, unknown keys are ignored."""
        return ModrinthUpdateData(
            project_id=_read_str(data, "mod-id"),
            installed_version=_read_str(data, "version"),
        )


def _path_unescape(text: str) -> str:
    bad = _BAD_ESCAPE.search(text)
    if bad is not None:
        raise ModrinthError(f"invalid URL escape {text[bad.start():bad.start() + 3]!r}")
    return unquote(text)


def parse_slug_or_url(text: str) -> ParsedModrinthInput:
    """Read slug, version, version ID and file name from a Modrinth URL or slug.

    Input that matches nothing gives an empty result.
    """
    for index, pattern in enumerate(_URL_PATTERNS):
        match = pattern.search(text)
        if match is None:
            continue
        groups = {k: (v or "") for k, v in match.groupdict().items()}
        if "urlCategory" in groups and groups["urlCategory"] not in URL_CATEGORIES:
            raise ModrinthError("unknown project type: " + groups["urlCategory"])
        filename = ""
        if "filename" in groups:
            filename = _path_unescape(groups["filename"])
        return ParsedModrinthInput(
            slug=groups.get("slug", ""),
            version=groups.get("version", ""),
            version_id=groups.get("versionID", ""),
            filename=filename,
            parsed_slug=index == _SLUG_PATTERN_INDEX,
        )
    return ParsedModrinthInput()


def find_version_by_number(versions: Sequence[ModrinthVersion], number: str) -> ModrinthVersion:
    """Return the oldest-listed version with this version number, searching from the end."""
    for version in reversed(versions):
        if version.version_number == number:
            return version
    raise ModrinthError(f"unable to find version {number}")


def should_download_on_side(side: str) -> bool:
    """Return True if a project's side support means it gets installed there."""
    return side in ("required", "optional")


def get_side(server_side: str, client_side: str) -> Optional[Side]:
    """Return the side to install on, or None if neither side is supported."""
    server = should_download_on_side(server_side)
    client = should_download_on_side(client_side)
    if server and client:
        return Side.UNIVERSAL
    if server:
        return Side.SERVER
    if client:
        return Side.CLIENT
    return None


def get_best_hash(hashes: Mapping[str, str]) -> Optional[tuple[str, str]]:
    """Return the most preferred (algorithm, hash) pair, or None if there is none."""
    for algorithm in _PREFERRED_HASHES:
        if algorithm in hashes:
            return algorithm, hashes[algorithm]
    for algorithm, value in hashes.items():
        return algorithm, value
    return None


def primary_file(files: Iterable[ModrinthFile]) -> ModrinthFile:
    """Return the last file marked primary, else the first file."""
    files = list(files)
    if not files:
        raise ModrinthError("version doesn't have any files attached")
    chosen = files[0]
    for f in files:
        if f.primary:
            chosen = f
    return chosen


def map_dep_override(dep_id: str, is_quilt: bool, mc_version: str) -> str:
    """Swap Fabric-only dependency projects for their Quilt counterparts."""
    if is_quilt and dep_id in ("P7dR8mSH", "fabric-api"):
        # Fabric API -> QFAPI/QSL
        return "qvIfYCYJ"
    if is_quilt and dep_id in ("Ha28R6CL", "fabric-language-kotlin"):
        # Fabric Language Kotlin -> QKL, for release versions from 1.19.2
        if flexver_less("1.19.1", mc_version) and flexver_less(mc_version, "2.0.0"):
            return "lwVhp9o5"
    return dep_id


def update_string(current_file_name: str, version: ModrinthVersion) -> str:
    """Describe an update from the current file to the version's primary file."""
    if not version.files:
        raise ModrinthError("new version doesn't have any files")
    return current_file_name + " -> " + primary_file(version.files).filename