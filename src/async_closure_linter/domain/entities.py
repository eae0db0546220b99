"""Domain entities: violations and source positions."""

from dataclasses import dataclass, field
from typing import Any

from async_closure_linter.domain.constants import DEFAULT_SOURCE_LABEL, VIOLATION_MESSAGE


@dataclass(frozen=True)
class SourcePosition:
    """1-based line and column of a byte offset in a source buffer."""

    line: int
    column: int

    @classmethod
    def from_offset(cls, source: bytes, offset: int) -> "SourcePosition":
        """
        Translate a UTF-8 byte offset into a line/column pair.

        Line is the number of newline bytes before the offset plus one.
        Column is the distance from the last newline before the offset, so the
        first byte of a line is column 1.
        """
        line = source.count(b"\n", 0, offset) + 1
        last_newline = source.rfind(b"\n", 0, offset)
        return cls(line=line, column=offset - last_newline)


@dataclass(frozen=True)
class Violation:
    """An async closure property in a View that is missing @MainActor."""

    line: int
    column: int
    variable_name: str
    file_path: str = DEFAULT_SOURCE_LABEL
    message: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "message", VIOLATION_MESSAGE.format(name=self.variable_name))

    def __str__(self) -> str:
        return f"{self.file_path}:{self.line}:{self.column}: warning: {self.message}"

    @classmethod
    def at_offset(
        cls, source: bytes, offset: int, variable_name: str, file_path: str
    ) -> "Violation":
        """Build a violation positioned at a byte offset of the parsed source."""
        position = SourcePosition.from_offset(source, offset)
        return cls(
            line=position.line,
            column=position.column,
            variable_name=variable_name,
            file_path=file_path,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "file": self.file_path,
            "line": self.line,
            "column": self.column,
            "variable": self.variable_name,
            "severity": "warning",
            "message": self.message,
        }
