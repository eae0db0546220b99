"""Lint SwiftUI Views for async closure properties missing @MainActor."""

from typing import Optional

from async_closure_linter.domain.constants import DEFAULT_SOURCE_LABEL
from async_closure_linter.domain.entities import Violation
from async_closure_linter.use_cases.lint_sources import AsyncClosureLinter

__all__ = ["AsyncClosureLinter", "Violation", "create_linter", "lint"]

_default_linter: Optional[AsyncClosureLinter] = None


def create_linter() -> AsyncClosureLinter:
    """Build a linter backed by tree-sitter and the local filesystem."""
    from async_closure_linter.infrastructure.gateways.filesystem_gateway import (
        FileSystemGateway,
    )
    from async_closure_linter.infrastructure.gateways.tree_sitter_gateway import (
        TreeSitterSwiftGateway,
    )

    return AsyncClosureLinter(parser=TreeSitterSwiftGateway(), filesystem=FileSystemGateway())


def lint(source: str, file_path: str = DEFAULT_SOURCE_LABEL) -> list[Violation]:
    """Lint a Swift source string with the default linter."""
    global _default_linter
    if _default_linter is None:
        _default_linter = create_linter()
    return _default_linter.lint(source, file_path=file_path)
