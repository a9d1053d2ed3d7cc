"""The Modrinth pack index (modrinth.index.json) and export helpers."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, NamedTuple, Optional
from urllib.parse import urlsplit

from modpacktools.curseforge import CLIENT_SIDE, EMPTY_SIDE, SERVER_SIDE, UNIVERSAL_SIDE

MODE_URL = "url"

WHITELISTED_HOSTS = (
    "cdn.modrinth.com",
    "github.com",
    "raw.githubusercontent.com",
    "gitlab.com",
)

_UINT32_MASK = 0xFFFFFFFF

_JSON_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class Env(NamedTuple):
    """Whether a file is required, optional or unsupported on each side."""

    client: str
    server: str


@dataclass
class PackFileEntry:
    """A downloadable file listed in the pack index."""

    path: str
    hashes: dict[str, str] = field(default_factory=dict)
    env: Optional[Env] = None
    downloads: list[str] = field(default_factory=list)
    file_size: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "hashes": dict(sorted(self.hashes.items())),
            "env": None if self.env is None else {"client": self.env.client, "server": self.env.server},
            "downloads": list(self.downloads),
            "fileSize": self.file_size & _UINT32_MASK,
        }


@dataclass
class ModrinthPack:
    """The contents of modrinth.index.json."""

    version_id: str
    name: str
    summary: str = ""
    files: list[PackFileEntry] = field(default_factory=list)
    dependencies: dict[str, str] = field(default_factory=dict)
    format_version: int = 1
    game: str = "minecraft"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "formatVersion": self.format_version,
            "game": self.game,
            "versionId": self.version_id,
            "name": self.name,
        }
        if self.summary:
            data["summary"] = self.summary
        data["files"] = [f.to_dict() for f in self.files]
        data["dependencies"] = dict(sorted(self.dependencies.items()))
        return data

    def to_json(self) -> str:
        """Serialise with four-space indentation and a trailing newline."""
        text = json.dumps(self.to_dict(), indent=4, ensure_ascii=False)
        for char, escape in _JSON_HTML_ESCAPES.items():
            text = text.replace(char, escape)
        return text + "\n"


def can_be_included_directly(download_mode: str, url: str, restrict_domains: bool) -> bool:
    """Return True if the file may be listed by URL rather than stored in the pack."""
    if download_mode not in (MODE_URL, ""):
        return False
    if not restrict_domains:
        return True
    try:
        host = urlsplit(url).netloc.rpartition("@")[2]
    except ValueError:
        return False
    return host in WHITELISTED_HOSTS


def env_for(side: str, optional: bool) -> Env:
    """Return the client and server environment for a file's side and optionality."""
    installed = "optional" if optional else "required"
    if side in (UNIVERSAL_SIDE, EMPTY_SIDE):
        return Env(installed, installed)
    if side == CLIENT_SIDE:
        return Env(installed, "unsupported")
    if side == SERVER_SIDE:
        return Env("unsupported", installed)
    return Env("", "")


def build_dependencies(versions: Mapping[str, str]) -> dict[str, str]:
    """Return the index's dependencies: Minecraft and at most one loader."""
    if not versions.get("minecraft"):
        raise ValueError("no Minecraft version is set in the pack")
    deps = {"minecraft": versions["minecraft"]}
    for component, key in (
        ("quilt", "quilt-loader"),
        ("fabric", "fabric-loader"),
        ("forge", "forge"),
        ("neoforge", "neoforge"),
    ):
        if component in versions:
            deps[key] = versions[component]
            break
    return deps


def sort_files(files: Iterable[PackFileEntry]) -> list[PackFileEntry]:
    """Return the files ordered by path, for reproducible output."""
    return sorted(files, key=lambda f: f.path)