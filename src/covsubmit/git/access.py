"""Repository access layer - owns pygit2.Repository and exposes computed facts."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import pygit2

from covsubmit.core.logging import get_logger
from covsubmit.git.errors import DetachedHeadError, NotARepositoryError, UnbornHeadError

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class HeadInfo:
    """Branch and commit of the checked-out HEAD."""

    branch: str
    commit: str  # full hex sha


class RepoAccess:
    """Owns pygit2.Repository and provides normalized access to repo state."""

    def __init__(self, repo_path: Path | str) -> None:
        self._path = Path(repo_path)
        try:
            self._repo = pygit2.Repository(str(self._path))
        except pygit2.GitError as e:
            raise NotARepositoryError(str(self._path)) from e

    @property
    def path(self) -> Path:
        return Path(self._repo.workdir) if self._repo.workdir else self._path

    @property
    def is_unborn(self) -> bool:
        return self._repo.head_is_unborn

    @property
    def is_detached(self) -> bool:
        return self._repo.head_is_detached

    def head(self) -> HeadInfo:
        """Return short branch name and commit sha of HEAD.

        Raises:
            UnbornHeadError: HEAD has no commits.
            DetachedHeadError: HEAD is not on a branch.
        """
        if self.is_unborn:
            raise UnbornHeadError(str(self.path))
        if self.is_detached:
            raise DetachedHeadError("read branch name")
        ref = self._repo.head
        commit = ref.peel(pygit2.Commit)
        return HeadInfo(branch=ref.shorthand, commit=str(commit.id))

    def close(self) -> None:
        """Release handles to the git object database."""
        self._repo.free()


@contextmanager
def open_repository(repo_path: Path | str) -> Iterator[RepoAccess]:
    """Open a repository for the duration of the block, always releasing it."""
    access = RepoAccess(repo_path)
    try:
        yield access
    finally:
        access.close()


def read_head(repo_path: Path | str) -> HeadInfo:
    """Read HEAD branch/commit; the repository is closed before returning."""
    with open_repository(repo_path) as access:
        info = access.head()
    log.debug("git_head_read", path=str(repo_path), branch=info.branch, commit=info.commit)
    return info
