"""Local git metadata for the manual submission path."""

from covsubmit.git.access import HeadInfo, RepoAccess, open_repository, read_head
from covsubmit.git.errors import (
    DetachedHeadError,
    GitError,
    NotARepositoryError,
    UnbornHeadError,
)

__all__ = [
    "HeadInfo",
    "RepoAccess",
    "open_repository",
    "read_head",
    # Errors
    "GitError",
    "NotARepositoryError",
    "UnbornHeadError",
    "DetachedHeadError",
]
