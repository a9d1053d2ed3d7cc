"""CurseForge update metadata, download metadata and export helpers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Optional, Protocol

UNIVERSAL_SIDE = "both"
SERVER_SIDE = "server"
CLIENT_SIDE = "client"
EMPTY_SIDE = ""

VALID_EXPORT_SIDES = (UNIVERSAL_SIDE, SERVER_SIDE, CLIENT_SIDE)

PROJECT_URL_PREFIX = "https://www.curseforge.com/projects/"

_UPDATE_KEY = "curseforge"


class ModEntry(Protocol):
    """The parts of a mod's metadata these helpers read."""

    name: str
    side: str
    update: Mapping[str, Mapping[str, Any]]


def _read_uint(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key, 0)
    if isinstance(value, bool):
        raise ValueError(f"'{key}' expected an unsigned integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"'{key}' expected an unsigned integer, got {value!r}")
        value = int(value)
    if not isinstance(value, int):
        raise ValueError(f"'{key}' expected an unsigned integer, got {value!r}")
    if value < 0:
        raise ValueError(f"cannot parse '{key}', {value} overflows uint")
    return value


@dataclass(frozen=True)
class CurseForgeUpdateData:
    """The project and file a mod was installed from."""

    project_id: int = 0
    file_id: int = 0

    def to_map(self) -> dict[str, int]:
        return {"project-id": self.project_id, "file-id": self.file_id}

    @staticmethod
    def from_map(data: Mapping[str, Any]) -> "CurseForgeUpdateData":
        """Read update data; missing keys are zero, unknown keys are ignored."""
        return CurseForgeUpdateData(
            project_id=_read_uint(data, "project-id"),
            file_id=_read_uint(data, "file-id"),
        )


@dataclass(frozen=True)
class CurseForgeExportData:
    """Export settings stored in the pack: the pack's own project ID."""

    project_id: int = 0

    def to_map(self) -> dict[str, int]:
        return {"project-id": self.project_id}

    @staticmethod
    def from_map(data: Mapping[str, Any]) -> "CurseForgeExportData":
        return CurseForgeExportData(project_id=_read_uint(data, "project-id"))


@dataclass(frozen=True)
class ManualDownload:
    """A file the user has to fetch by hand from the project website."""

    name: str
    file_name: str
    url: str


@dataclass(frozen=True)
class DownloadMetadata:
    """How a CurseForge file can be obtained.

    Files whose authors opted out of third-party distribution have no direct
    URL and must be downloaded manually from ``website_url``.
    """

    url: str = ""
    no_distribution: bool = False
    name: str = ""
    file_name: str = ""
    website_url: str = ""

    def manual_download(self) -> Optional[ManualDownload]:
        """Return the manual download details, or None if a direct URL exists."""
        if not self.no_distribution:
            return None
        return ManualDownload(name=self.name, file_name=self.file_name, url=self.website_url)


def _parsed_update_data(mod: ModEntry) -> Optional[CurseForgeUpdateData]:
    raw = mod.update.get(_UPDATE_KEY) if mod.update else None
    if raw is None:
        return None
    try:
        return CurseForgeUpdateData.from_map(raw)
    except ValueError:
        return None


def filter_mods_by_side(mods: Iterable[ModEntry], side: str) -> list[ModEntry]:
    """Keep the mods that belong in an export for ``side``."""
    if side not in VALID_EXPORT_SIDES:
        raise ValueError(
            f"Invalid side {side!r}, must be one of client, server, or both (default)"
        )
    return [
        mod
        for mod in mods
        if mod.side in (side, EMPTY_SIDE, UNIVERSAL_SIDE) or side == UNIVERSAL_SIDE
    ]


def create_modlist(mods: Iterable[ModEntry]) -> str:
    """Render the HTML mod list included in a CurseForge export."""
    lines = ["<ul>\r\n"]
    for mod in mods:
        project = _parsed_update_data(mod)
        if project is None:
            lines.append(f"<li>{mod.name}</li>\r\n")
        else:
            lines.append(
                f'<li><a href="{PROJECT_URL_PREFIX}{project.project_id}">'
                f"{mod.name}</a></li>\r\n"
            )
    lines.append("</ul>\r\n")
    return "".join(lines)