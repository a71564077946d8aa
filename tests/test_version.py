"""Tests for the SemanticVersion class and version helpers."""

from __future__ import annotations

from eris import Err
from pytest import mark, param
from typist import literal_to_list

from relver import (
    SemanticVersion,
    ZERO_VERSION,
    bump,
    compare,
    major_minor_equal,
)
from relver._bump import BumpPart


params = mark.parametrize


def _v(raw: str) -> SemanticVersion:
    return SemanticVersion.from_string(raw).unwrap()


@params(
    "raw,expected",
    [
        param("1.1.0", "1.1.0", id="full"),
        param("1.0", "1.0.0", id="no-patch"),
        param("1", "1.0.0", id="no-minor"),
        param("1.0-SNAPSHOT", "1.0.0-SNAPSHOT", id="pre-release"),
        param("v1.2.3", "1.2.3", id="v-prefix"),
        param("V1.2.3", "1.2.3", id="uppercase-v-prefix"),
        param("v1.2.3-01", "1.2.3-01", id="leading-zero-label"),
        param("1.0-a..b", "1.0.0-a..b", id="empty-identifier-label"),
        param("1.0-SNAP_1", "1.0.0-SNAP_1", id="raw-label"),
        param("1.2.3.4", "1.2.3", id="extra-component"),
        param(" 4.5.6\n", "4.5.6", id="whitespace"),
        param("1.2.3+build.7", "1.2.3", id="build-metadata"),
    ],
)
def test_from_string(raw: str, expected: str) -> None:
    """Test that lenient version strings are normalized."""
    assert str(_v(raw)) == expected


@params(
    "raw", ["release-candidate", "", "v", "latest", "vNext"],
)
def test_from_string_error(raw: str) -> None:
    """Test that strings without a numeric component are rejected."""
    assert isinstance(SemanticVersion.from_string(raw), Err)


def test_from_string_parts() -> None:
    """Test that each version part is parsed into its own field."""
    version = _v("1.2.3-SNAPSHOT")

    assert (version.major, version.minor, version.patch) == (1, 2, 3)
    assert version.prerelease == "SNAPSHOT"


@params(
    "a,b,expected",
    [
        ("1.0.0", "1.0.0", 0),
        ("1.0.1", "1.0.0", 1),
        ("1.0.0", "1.1.0", -1),
        ("2.0.0", "1.99.99", 1),
        ("99.0.9", "99.0.10", -1),
        ("1.2.3-SNAPSHOT", "1.2.3", 0),
    ],
)
def test_compare(a: str, b: str, expected: int) -> None:
    """Test that versions are ordered by their numeric parts only."""
    assert compare(_v(a), _v(b)) == expected
    assert compare(_v(b), _v(a)) == -expected


def test_bump_patch() -> None:
    """Test that bumping the patch leaves the major and minor alone."""
    assert _v("1.2.3-SNAPSHOT").bump_patch() == SemanticVersion(1, 2, 4)


def test_bump_minor() -> None:
    """Test that bumping the minor resets the patch."""
    assert _v("1.2.3-SNAPSHOT").bump_minor() == SemanticVersion(1, 3, 0)


@params("part", literal_to_list(BumpPart))
@params("raw", ["0.0.0", "1.2.3", "7.0.19-rc1"])
def test_bump_keeps_major(part: BumpPart, raw: str) -> None:
    """Test that bump() never changes the major version."""
    version = _v(raw)
    new_version = bump(version, part)

    assert new_version.major == version.major
    assert compare(new_version, version) == 1
    assert new_version.prerelease == ""


@params(
    "a,b,expected",
    [
        ("1.2.0", "1.2.3", True),
        ("1.2.0", "1.3.0", False),
        ("1.2.0", "2.2.0", False),
        ("1.0", "1.0.0-SNAPSHOT", True),
    ],
)
def test_major_minor_equal(a: str, b: str, expected: bool) -> None:
    """Test that major_minor_equal() is symmetric and reflexive."""
    assert major_minor_equal(_v(a), _v(b)) is expected
    assert major_minor_equal(_v(b), _v(a)) is expected
    assert major_minor_equal(_v(a), _v(a))


def test_is_zero() -> None:
    """Test that the pre-release label is ignored by is_zero()."""
    assert ZERO_VERSION.is_zero()
    assert _v("0.0.0-SNAPSHOT").is_zero()
    assert not _v("0.0.1").is_zero()
