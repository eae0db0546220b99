from typing import TYPE_CHECKING, Iterator, Protocol

if TYPE_CHECKING:
    from async_closure_linter.domain.syntax import SourceFile


class SwiftParserProtocol(Protocol):
    """Protocol for turning Swift source into the linter's syntax model."""

    def parse(self, source: bytes) -> "SourceFile":
        """Parse UTF-8 source. Must not raise on malformed input."""
        ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def exists(self, path: str) -> bool:
        """Return True if path exists (file or directory)."""
        ...

    def is_directory(self, path: str) -> bool:
        """Check if path is a directory."""
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        ...

    def iter_source_files(
        self, path: str, suffix: str, exclude: tuple[str, ...] = ()
    ) -> Iterator[str]:
        """Yield files under path whose name ends with suffix, recursively."""
        ...


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def handshake(self) -> None: ...
    def set_verbose(self, enabled: bool) -> None: ...
