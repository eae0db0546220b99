"""Use Case: lint Swift sources - strings, files, directories and CLI paths."""

import logging
from typing import TYPE_CHECKING, Optional

from async_closure_linter.domain.constants import DEFAULT_SOURCE_LABEL, SOURCE_SUFFIX
from async_closure_linter.domain.entities import Violation
from async_closure_linter.domain.errors import PathNotFoundError
from async_closure_linter.domain.prefilter import SourcePrefilter
from async_closure_linter.domain.rules import BaseRule
from async_closure_linter.domain.rules.async_closure import AsyncClosureRule

if TYPE_CHECKING:
    from async_closure_linter.domain.protocols import (
        FileSystemProtocol,
        SwiftParserProtocol,
        TelemetryPort,
    )


class AsyncClosureLinter:
    """
    Lints Swift source for async closure properties without @MainActor in
    SwiftUI Views.

    Each call builds its own traversal state, so one instance may be shared
    between threads linting different files.
    """

    def __init__(
        self,
        parser: "SwiftParserProtocol",
        filesystem: "FileSystemProtocol",
        rule: Optional[BaseRule] = None,
        prefilter: Optional[SourcePrefilter] = None,
        exclude: tuple[str, ...] = (),
    ) -> None:
        self._parser = parser
        self._filesystem = filesystem
        self._rule = rule or AsyncClosureRule()
        self._prefilter = prefilter or SourcePrefilter()
        self._exclude = exclude

    def lint(self, source: str, file_path: str = DEFAULT_SOURCE_LABEL) -> list[Violation]:
        """Lint a Swift source string. Never raises."""
        if not self._prefilter.might_contain_violation(source):
            logging.debug("%s: skipped by pre-filter", file_path)
            return []
        encoded = source.encode("utf-8")
        tree = self._parser.parse(encoded)
        if tree.has_errors:
            logging.debug(
                "%s: Swift parse tree contains error nodes; results are best-effort.", file_path)
        return self._rule.check(tree, encoded, file_path)

    def lint_file(self, path: str) -> list[Violation]:
        """Lint a Swift file. Raises OSError when it cannot be read as UTF-8."""
        source = self._filesystem.read_text(path, encoding="utf-8")
        return self.lint(source, file_path=path)

    def lint_directory(self, path: str) -> list[Violation]:
        """Lint every Swift file below path, concatenating results in enumeration order."""
        violations: list[Violation] = []
        for file_path in self._filesystem.iter_source_files(
            path, SOURCE_SUFFIX, exclude=self._exclude
        ):
            violations.extend(self.lint_file(file_path))
        return violations


class LintPathsUseCase:
    """Lint a list of files and directories the way the command line asks for."""

    def __init__(
        self,
        linter: AsyncClosureLinter,
        filesystem: "FileSystemProtocol",
        telemetry: "TelemetryPort",
    ) -> None:
        self.linter = linter
        self.filesystem = filesystem
        self.telemetry = telemetry

    def execute(self, paths: list[str]) -> list[Violation]:
        """
        Lint each path in order.

        Raises PathNotFoundError for a missing path and lets any other OSError
        through; a partial result is never returned.
        """
        violations: list[Violation] = []
        for path in paths:
            violations.extend(self.lint_path(path))
        self.telemetry.step(
            f"Found {len(violations)} violation(s) in {len(paths)} path(s).")
        return violations

    def lint_path(self, path: str) -> list[Violation]:
        if not self.filesystem.exists(path):
            raise PathNotFoundError(path)
        if self.filesystem.is_directory(path):
            self.telemetry.step(f"Linting directory: {path}")
            return self.linter.lint_directory(path)
        self.telemetry.step(f"Linting file: {path}")
        return self.linter.lint_file(path)
