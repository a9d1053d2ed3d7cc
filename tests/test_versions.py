import pytest

from modpacktools.versions import (
    VersionListError,
    add_acceptable_version,
    flexver_compare,
    flexver_less,
    format_version_list,
    highest_index,
    is_sorted,
    parse_acceptable_versions,
    remove_acceptable_version,
    sort_versions,
)


@pytest.mark.parametrize(
    "lower, higher",
    [
        ("1.0.0", "1.0.1"),
        ("1.9", "1.10"),
        ("1.0.0-beta", "1.0.0"),
        ("1.0.0-rc.1", "1.0.0"),
        ("1.19.1", "1.19.2"),
        ("1.19.1", "2.0.0"),
        ("1.16", "1.16.1"),
    ],
)
def test_ordering(lower, higher):
    assert flexver_less(lower, higher) is True
    assert flexver_less(higher, lower) is False
    assert flexver_compare(lower, higher) == -1
    assert flexver_compare(higher, lower) == 1


@pytest.mark.parametrize(
    "a, b",
    [("1.0.0", "1.0.0+build"), ("1.01", "1.1"), ("1.2.3", "1.2.3")],
)
def test_equal_versions(a, b):
    assert flexver_compare(a, b) == 0
    assert not flexver_less(a, b)
    assert not flexver_less(b, a)


def test_sort_versions():
    assert sort_versions(["1.16.5", "1.16.3", "1.16.4"]) == ["1.16.3", "1.16.4", "1.16.5"]
    assert sort_versions(["1.10", "1.9", "1.9.4"]) == ["1.9", "1.9.4", "1.10"]


def test_sorted_result_is_sorted():
    versions = ["1.20", "1.8.9", "1.12.2", "1.7.10", "1.20-pre1"]
    result = sort_versions(versions)
    assert is_sorted(result)
    assert sorted(result) == sorted(versions)


def test_is_sorted():
    assert is_sorted(["1.16.3", "1.16.4"])
    assert not is_sorted(["1.16.5", "1.16.4"])
    assert is_sorted(["1.18"])
    assert is_sorted([])


def test_highest_index():
    preferred = ["1.16.3", "1.16.4", "1.16.5"]
    assert highest_index(preferred, ["1.16.3", "1.16.4"]) == 1
    assert highest_index(preferred, ["1.16.5", "1.16.3"]) == 2
    assert highest_index(preferred, ["1.12"]) == -1
    assert highest_index([], ["1.12"]) == -1


def test_parse_acceptable_versions_dedupes():
    assert parse_acceptable_versions("1.16.3,1.16.4,1.16.5") == ["1.16.3", "1.16.4", "1.16.5"]
    assert parse_acceptable_versions("1.16.3,1.16.4,1.16.3") == ["1.16.4", "1.16.3"]


def test_add_acceptable_version_sorts():
    assert add_acceptable_version(["1.16.5", "1.16.3"], "1.16.4") == [
        "1.16.3",
        "1.16.4",
        "1.16.5",
    ]


def test_add_duplicate_raises():
    with pytest.raises(VersionListError):
        add_acceptable_version(["1.16.3"], "1.16.3")


def test_remove_acceptable_version():
    assert remove_acceptable_version(["1.16.5", "1.16.3", "1.16.4"], "1.16.4") == [
        "1.16.3",
        "1.16.5",
    ]


def test_remove_missing_raises():
    with pytest.raises(VersionListError):
        remove_acceptable_version(["1.16.3"], "1.16.4")


def test_add_then_remove_round_trip():
    start = ["1.16.3", "1.16.5"]
    assert remove_acceptable_version(add_acceptable_version(start, "1.16.4"), "1.16.4") == start


def test_format_version_list():
    assert format_version_list(["1.16.3", "1.16.4"], "1.16.5") == "1.16.3, 1.16.4, 1.16.5"
    assert format_version_list([], "1.16.5") == ", 1.16.5"