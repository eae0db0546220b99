"""Errors surfaced to callers that touch the filesystem."""


class SourceReadError(OSError):
    """A source file exists but could not be decoded as UTF-8 text."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: cannot read as UTF-8 text ({reason})")
        self.path = path
        self.reason = reason


class PathNotFoundError(FileNotFoundError):
    """A path given to the linter does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Path does not exist: {path}")
        self.path = path
