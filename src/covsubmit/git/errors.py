"""Git module error types."""


class GitError(Exception):
    """Base error for git operations."""

    pass


class NotARepositoryError(GitError):
    """Path is not a git repository."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Not a git repository: {path}")
        self.path = path


class UnbornHeadError(GitError):
    """HEAD points at a branch with no commits yet."""

    def __init__(self, path: str) -> None:
        super().__init__(f"HEAD has no commits (unborn branch): {path}")
        self.path = path


class DetachedHeadError(GitError):
    """Operation requires a branch but HEAD is detached."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Cannot {operation}: HEAD is detached")
        self.operation = operation
