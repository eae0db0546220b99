"""Domain models for lint rules."""

from typing import Protocol

from async_closure_linter.domain.entities import Violation
from async_closure_linter.domain.syntax import SourceFile

__all__ = ["BaseRule", "Violation"]


class BaseRule(Protocol):
    """A check over one parsed source unit."""

    code: str
    description: str

    def check(self, tree: SourceFile, source: bytes, file_path: str) -> list[Violation]:
        """Return violations in document order."""
        ...
