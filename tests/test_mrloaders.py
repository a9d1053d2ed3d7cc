from datetime import datetime, timedelta

import pytest

from modpacktools.mrloaders import (
    DEFAULT_MR_LOADERS,
    LOADER_FOLDERS,
    ModrinthError,
    ModrinthVersion,
    compare_loader_lists,
    find_latest_version,
    get_project_type_folder,
    search_loaders,
)

BASE = datetime(2023, 1, 1)


def _version(vid, number="1.0", days=0, game=("1.19.2",), loaders=("fabric",)):
    return ModrinthVersion(
        id=vid,
        version_number=number,
        date_published=BASE + timedelta(days=days),
        game_versions=list(game),
        loaders=list(loaders),
    )


def test_modpack_type_rejected():
    with pytest.raises(ModrinthError):
        get_project_type_folder("modpack", [], [])


def test_unknown_type_rejected():
    with pytest.raises(ModrinthError, match="unknown project type thing"):
        get_project_type_folder("thing", [], [])


def test_resourcepack_folder():
    assert get_project_type_folder("resourcepack", ["minecraft"], []) == "resourcepacks"


def test_shader_folder_prefers_canvas():
    assert get_project_type_folder("shader", ["iris", "canvas"], []) == LOADER_FOLDERS["canvas"]
    assert get_project_type_folder("shader", ["iris"], []) == "shaderpacks"
    assert get_project_type_folder("shader", [], []) == "shaderpacks"


def test_mod_folder_uses_pack_loaders():
    assert get_project_type_folder("mod", ["fabric", "quilt"], ["quilt"]) == "mods"
    assert get_project_type_folder("mod", ["paper", "bukkit"], ["bukkit"]) == "plugins"


def test_mod_defaults_to_mods():
    assert get_project_type_folder("mod", ["forge"], ["fabric"]) == "mods"


def test_datapack_folder():
    assert get_project_type_folder("mod", ["datapack"], ["fabric"], "config/datapacks") == "config/datapacks"
    with pytest.raises(ModrinthError, match="datapack-folder"):
        get_project_type_folder("mod", ["datapack"], ["fabric"])


def test_compare_prefers_quilt():
    assert compare_loader_lists(["quilt"], ["fabric"]) < 0
    assert compare_loader_lists(["fabric"], ["quilt"]) > 0


def test_compare_compat_group_neutral():
    assert compare_loader_lists(["quilt", "fabric"], ["fabric"]) == 0
    assert compare_loader_lists(["fabric"], ["fabric"]) == 0


def test_find_latest_empty_raises():
    with pytest.raises(ModrinthError):
        find_latest_version([], ["1.19.2"], True)


def test_find_latest_by_flexver():
    old = _version("a", "1.10.0", days=5)
    new = _version("b", "1.9.0", days=1)
    assert find_latest_version([old, new], ["1.19.2"], True) is old


def test_find_latest_by_date_without_flexver():
    first = _version("a", "2.0", days=1)
    second = _version("b", "1.0", days=3)
    assert find_latest_version([first, second], ["1.19.2"], False) is second


def test_find_latest_prefers_later_game_version():
    older_game = _version("a", days=9, game=("1.19.1",))
    newer_game = _version("b", days=0, game=("1.19.2",))
    result = find_latest_version([older_game, newer_game], ["1.19.1", "1.19.2"], False)
    assert result is newer_game


def test_find_latest_prefers_loader():
    fabric = _version("a", days=5, loaders=("fabric",))
    quilt = _version("b", days=0, loaders=("quilt",))
    assert find_latest_version([fabric, quilt], ["1.19.2"], False) is quilt


def test_search_loaders():
    assert search_loaders(["fabric"]) == ["fabric", *DEFAULT_MR_LOADERS]
    with_dp = search_loaders(["fabric"], "datapacks")
    assert with_dp[-1] == "datapack"
    assert with_dp[0] == "fabric"