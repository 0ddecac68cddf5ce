"""Git module error types."""


class GitError(Exception):
    """Base error for git operations."""

    pass


class NotARepositoryError(GitError):
    """Path is not a git repository."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Not a git repository: {path}")
        self.path = path


class RefNotFoundError(GitError):
    """Reference (branch, tag, commit) not found."""

    def __init__(self, ref: str) -> None:
        super().__init__(f"Reference not found: {ref}")
        self.ref = ref


class ExportError(GitError):
    """Writing a tree snapshot to disk failed."""

    def __init__(self, ref: str, destination: str, reason: str) -> None:
        super().__init__(f"Cannot export {ref} to {destination}: {reason}")
        self.ref = ref
        self.destination = destination
