from dataclasses import dataclass, field
from typing import Any

import pytest

from modpacktools.curseforge import (
    CurseForgeExportData,
    CurseForgeUpdateData,
    DownloadMetadata,
    ManualDownload,
    create_modlist,
    filter_mods_by_side,
)


@dataclass
class FakeMod:
    name: str
    side: str = "both"
    update: dict[str, dict[str, Any]] = field(default_factory=dict)


def test_update_data_round_trip():
    data = CurseForgeUpdateData(project_id=238222, file_id=3456789)
    assert CurseForgeUpdateData.from_map(data.to_map()) == data


def test_update_data_map_keys():
    data = CurseForgeUpdateData(project_id=1, file_id=2)
    assert data.to_map() == {"project-id": 1, "file-id": 2}


def test_update_data_missing_keys_default_to_zero():
    assert CurseForgeUpdateData.from_map({}) == CurseForgeUpdateData(0, 0)


def test_update_data_ignores_unknown_keys():
    parsed = CurseForgeUpdateData.from_map({"project-id": 5, "extra": "x"})
    assert parsed.project_id == 5
    assert parsed.file_id == 0


@pytest.mark.parametrize("bad", ["12", -1, True, 1.5])
def test_update_data_rejects_bad_values(bad):
    with pytest.raises(ValueError):
        CurseForgeUpdateData.from_map({"project-id": bad})


def test_export_data_round_trip():
    data = CurseForgeExportData(project_id=4242)
    assert data.to_map() == {"project-id": 4242}
    assert CurseForgeExportData.from_map(data.to_map()) == data


def test_export_data_rejects_negative():
    with pytest.raises(ValueError):
        CurseForgeExportData.from_map({"project-id": -3})


def test_direct_download_has_no_manual_step():
    meta = DownloadMetadata(url="https://files.example.com/a.jar")
    assert meta.manual_download() is None


def test_opted_out_download_is_manual():
    meta = DownloadMetadata(
        no_distribution=True,
        name="Some Mod",
        file_name="some-mod.jar",
        website_url="https://www.example.com/some-mod/files/99",
    )
    assert meta.manual_download() == ManualDownload(
        name="Some Mod",
        file_name="some-mod.jar",
        url="https://www.example.com/some-mod/files/99",
    )


def test_filter_by_client_side():
    mods = [
        FakeMod("a", "client"),
        FakeMod("b", "server"),
        FakeMod("c", "both"),
        FakeMod("d", ""),
    ]
    kept = filter_mods_by_side(mods, "client")
    assert [m.name for m in kept] == ["a", "c", "d"]


def test_filter_by_server_side():
    mods = [FakeMod("a", "client"), FakeMod("b", "server"), FakeMod("c", "both")]
    assert [m.name for m in filter_mods_by_side(mods, "server")] == ["b", "c"]


def test_filter_universal_keeps_everything():
    mods = [FakeMod("a", "client"), FakeMod("b", "server"), FakeMod("c", "weird")]
    assert filter_mods_by_side(mods, "both") == mods


def test_filter_invalid_side():
    with pytest.raises(ValueError):
        filter_mods_by_side([FakeMod("a")], "nowhere")


def test_modlist_with_and_without_metadata():
    mods = [
        FakeMod("Linked", update={"curseforge": {"project-id": 77, "file-id": 8}}),
        FakeMod("Plain"),
    ]
    html = create_modlist(mods)
    assert html == (
        "<ul>\r\n"
        '<li><a href="https://www.curseforge.com/projects/77">Linked</a></li>\r\n'
        "<li>Plain</li>\r\n"
        "</ul>\r\n"
    )


def test_modlist_empty():
    assert create_modlist([]) == "<ul>\r\n</ul>\r\n"


def test_modlist_unparseable_metadata_falls_back_to_name():
    mods = [FakeMod("Broken", update={"curseforge": {"project-id": "nope"}})]
    assert create_modlist(mods) == "<ul>\r\n<li>Broken</li>\r\n</ul>\r\n"