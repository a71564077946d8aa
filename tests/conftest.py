"""This file contains shared fixtures and pytest hooks.

https://docs.pytest.org/en/6.2.x/fixture.html#conftest-py-sharing-fixtures-across-multiple-files
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence

from clack.types import ClackConfigFile
from eris import ErisError, Err, Ok, Result
from pytest import fixture


if TYPE_CHECKING:  # fixes pytest warning
    from clack.pytest_plugin import MakeConfigFile


pytest_plugins = ["clack.pytest_plugin"]

DATA_DIR = Path(__file__).parent / "data"

DEFAULT_CONFIG = {
    "base_version": "2.0",
    "git_fetch": False,
}

TAGS = [
    "v1.0.0",
    "v1.0.1",
    "v1.0.2",
    "v99.0.0",
    "v99.0.1",
    "v99.0.10",
    "v99.0.11",
    "v99.0.12",
    "v99.0.13",
    "v99.0.14",
    "v99.0.15",
    "v99.0.16",
    "v99.0.17",
    "v99.0.2",
    "v99.0.3",
    "v99.0.4",
    "v99.0.5",
    "v99.0.6",
    "v99.0.7",
    "v99.0.8",
    "v99.0.9",
]


class FakeTagSource:
    """TagSource which returns a canned list of tags (or an error)."""

    def __init__(
        self, tags: Sequence[str], *, error: Optional[str] = None
    ) -> None:
        self.tags = list(tags)
        self.error = error
        self.calls = 0

    def list_tags(self) -> Result[List[str], ErisError]:
        self.calls += 1
        if self.error is not None:
            return Err(self.error)
        return Ok(list(self.tags))


MakeTagSource = Callable[..., FakeTagSource]


@fixture(name="data_dir")
def data_dir_fixture() -> Path:
    """Returns the directory which contains our example projects."""
    return DATA_DIR


@fixture(name="empty_dir")
def empty_dir_fixture(tmp_path: Path) -> Path:
    """Returns a project directory which contains no manifest files."""
    result = tmp_path / "project"
    result.mkdir()
    return result


@fixture(name="make_tag_source")
def make_tag_source_fixture() -> MakeTagSource:
    """Returns a factory for FakeTagSource objects."""
    return FakeTagSource


@fixture(name="default_config_file")
def default_config_file_fixture(
    make_config_file: MakeConfigFile,
) -> ClackConfigFile:
    """Returns the path to a config file with default contents."""
    return make_config_file("relver_test_config", **DEFAULT_CONFIG)


@fixture(name="tags")
def tags_fixture() -> List[str]:
    """Returns the tags of a project with a 1.0.X and a 99.0.X release."""
    return list(TAGS)
