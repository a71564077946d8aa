"""Utility functions."""

from __future__ import annotations

from functools import lru_cache
from importlib import metadata
from pathlib import Path
from typing import Protocol, runtime_checkable

from eris import ErisError, Err, Ok, Result
from logrus import Logger
from typist import PathLike

from ._constants import PROJECT_NAME


logger = Logger(__name__)


@runtime_checkable
class FileSource(Protocol):
    """Read-only access to the files of a single project directory."""

    def read_file(self, relative_path: str) -> Result[bytes, ErisError]:
        """Returns the raw contents of `relative_path` (or an Err if the file
        does not exist or cannot be read)."""


class DirectoryFileSource:
    """FileSource that reads files from a local directory."""

    def __init__(self, directory: PathLike) -> None:
        self.directory = Path(directory)

    def read_file(self, relative_path: str) -> Result[bytes, ErisError]:
        path = self.directory / relative_path
        if not path.is_file():
            return Err(f"The {path} file does not exist.")

        try:
            data = path.read_bytes()
        except OSError as e:
            return Err(f"Unable to read the {path} file: {e}")

        logger.debug("Found the %s file.", path)
        return Ok(data)


@lru_cache
def get_tool_version() -> str:
    """Returns the installed version of this tool."""
    try:
        return metadata.version(PROJECT_NAME)
    except metadata.PackageNotFoundError:
        return "latest"
