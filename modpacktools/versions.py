"""Minecraft version ordering (FlexVer) and acceptable-version list handling."""

from __future__ import annotations

import functools
from collections.abc import Iterable, Sequence
from enum import Enum
from itertools import zip_longest
from typing import NamedTuple, Optional

_DIGITS = frozenset("0123456789")


class VersionListError(ValueError):
    """Raised when an acceptable-version list cannot be changed as asked."""


class _Kind(Enum):
    NUMERIC = "numeric"
    LEXICAL = "lexical"
    PRERELEASE = "prerelease"


class _Component(NamedTuple):
    kind: _Kind
    text: str


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _make_component(is_number: bool, text: str) -> _Component:
    if is_number:
        return _Component(_Kind.NUMERIC, text)
    if len(text) > 1 and text.startswith("-"):
        return _Component(_Kind.PRERELEASE, text)
    return _Component(_Kind.LEXICAL, text)


def _decompose(version: str) -> list[_Component]:
    """Split a version into numeric, lexical and pre-release runs.

    Anything from the first ``+`` on is build metadata and ignored.
    """
    if not version:
        return []
    components: list[_Component] = []
    accum: list[str] = []
    last_was_number = version[0] in _DIGITS
    for ch in version:
        if ch == "+":
            break
        is_number = ch in _DIGITS
        starts_prerelease = ch == "-" and bool(accum) and accum[0] != "-"
        if is_number != last_was_number or starts_prerelease:
            components.append(_make_component(last_was_number, "".join(accum)))
            accum = []
            last_was_number = is_number
        accum.append(ch)
    components.append(_make_component(last_was_number, "".join(accum)))
    return components


def _compare_text(a: str, b: str) -> int:
    return (a > b) - (a < b)


def _compare_components(a: Optional[_Component], b: Optional[_Component]) -> int:
    if a is None and b is None:
        return 0
    if a is None:
        return -_compare_components(b, None)
    if b is None:
        # A missing component sorts after a pre-release tag but before anything else.
        return -1 if a.kind is _Kind.PRERELEASE else 1
    if a.kind is _Kind.NUMERIC and b.kind is _Kind.NUMERIC:
        da = a.text.lstrip("0")
        db = b.text.lstrip("0")
        if len(da) != len(db):
            return _sign(len(da) - len(db))
        return _compare_text(da, db)
    return _compare_text(a.text, b.text)


def flexver_compare(a: str, b: str) -> int:
    """Compare two version strings; return -1, 0 or 1."""
    for ca, cb in zip_longest(_decompose(a), _decompose(b)):
        result = _compare_components(ca, cb)
        if result:
            return result
    return 0


def flexver_less(a: str, b: str) -> bool:
    """Return True if version ``a`` orders before version ``b``."""
    return flexver_compare(a, b) < 0


def sort_versions(versions: Iterable[str]) -> list[str]:
    """Return the versions sorted from lowest to highest."""
    return sorted(versions, key=functools.cmp_to_key(flexver_compare))


def highest_index(preferred: Sequence[str], candidates: Iterable[str]) -> int:
    """Return the highest index in ``preferred`` of any candidate, or -1."""
    wanted = set(candidates)
    return max((i for i, v in enumerate(preferred) if v in wanted), default=-1)


def parse_acceptable_versions(text: str) -> list[str]:
    """Split a comma separated list, keeping the last occurrence of duplicates."""
    items = text.split(",")
    return [v for i, v in enumerate(items) if v not in items[i + 1:]]


def is_sorted(versions: Sequence[str]) -> bool:
    """Return True if no version is followed by a lower one."""
    return not any(flexver_less(nxt, cur) for cur, nxt in zip(versions, versions[1:]))


def add_acceptable_version(current: Iterable[str], version: str) -> list[str]:
    """Return a sorted list with ``version`` added."""
    versions = list(current)
    if version in versions:
        raise VersionListError(
            f"Version {version} is already in your acceptable versions list!"
        )
    versions.append(version)
    return sort_versions(versions)


def remove_acceptable_version(current: Iterable[str], version: str) -> list[str]:
    """Return a sorted list with ``version`` removed."""
    versions = list(current)
    if version not in versions:
        raise VersionListError(
            f"Version {version} is not in your acceptable versions list!"
        )
    versions.remove(version)
    return sort_versions(versions)


def format_version_list(versions: Iterable[str], mc_version: str) -> str:
    """Render the acceptable versions followed by the pack's Minecraft version."""
    return ", ".join(versions) + ", " + mc_version