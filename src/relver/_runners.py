"""Contains the clack runner functions."""

from __future__ import annotations

from pathlib import Path

from eris import Err
from logrus import Logger

from ._config import Config
from ._constants import PROJECT_NAME
from ._helpers import get_tool_version
from ._resolver import Resolver
from ._tags import GitHubTagSource, LocalGitTagSource, TagSource


logger = Logger(__name__)


def run_relver(cfg: Config) -> int:
    """Clack runner which prints the project's next release version."""
    if cfg.debug:
        logger.info(
            "Running %s.",
            PROJECT_NAME,
            version=get_tool_version(),
            config={
                k: str(v) if isinstance(v, Path) else v
                for (k, v) in cfg.dict().items()
            },
        )

    if cfg.show_version:
        print(PROJECT_NAME, get_tool_version())
        return 0

    tag_source: TagSource
    if cfg.gh_owner and cfg.gh_repository:
        tag_source = GitHubTagSource(
            cfg.gh_owner,
            cfg.gh_repository,
            api_url=cfg.gh_api_url,
            debug=cfg.debug,
        )
    else:
        tag_source = LocalGitTagSource(
            cfg.directory, fetch=cfg.git_fetch, debug=cfg.debug
        )

    resolver = Resolver(cfg.to_resolution_config())
    version_r = resolver.get_new_version(tag_source)
    if isinstance(version_r, Err):
        e = version_r.err()
        logger.error(
            "Failed to get the new version.",
            directory=cfg.directory,
            error=e.to_json(),
        )
        return 1

    print(version_r.ok(), end="")
    return 0
