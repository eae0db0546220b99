"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

from fnmatch import fnmatch
from pathlib import Path
from typing import Iterator

from async_closure_linter.domain.errors import SourceReadError
from async_closure_linter.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def exists(self, path: str) -> bool:
        """Return True if path exists (file or directory)."""
        return Path(path).exists()

    def is_directory(self, path: str) -> bool:
        """Check if path is a directory."""
        return Path(path).is_dir()

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content from a file. OSError propagates untouched."""
        data = Path(path).read_bytes()
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as exc:
            raise SourceReadError(path, str(exc)) from exc

    def iter_source_files(
        self, path: str, suffix: str, exclude: tuple[str, ...] = ()
    ) -> Iterator[str]:
        """
        Yield files below path whose name ends with suffix, sorted so runs are
        reproducible. Paths matching an exclude glob (relative path or any
        single component) are skipped.
        """
        root = Path(path)
        if not root.is_dir():
            raise NotADirectoryError(path)
        for candidate in sorted(root.rglob(f"*{suffix}")):
            if not candidate.is_file():
                continue
            relative = candidate.relative_to(root)
            if self._is_excluded(relative, exclude):
                continue
            yield str(candidate)

    @staticmethod
    def _is_excluded(relative: Path, exclude: tuple[str, ...]) -> bool:
        for pattern in exclude:
            if fnmatch(relative.as_posix(), pattern):
                return True
            if any(fnmatch(part, pattern) for part in relative.parts):
                return True
        return False
