"""CLI entry point for async-closure-lint - Thin Controller using Typer."""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import typer

from async_closure_linter.domain.config import ConfigurationLoader
from async_closure_linter.domain.protocols import FileSystemProtocol, TelemetryPort
from async_closure_linter.interface.reporters import ViolationReporter
from async_closure_linter.use_cases.lint_sources import AsyncClosureLinter, LintPathsUseCase


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    filesystem: FileSystemProtocol
    linter: AsyncClosureLinter
    reporter_factory: Callable[[str], ViolationReporter]


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="async-closure-lint",
            help="Lint Swift files to ensure async closure properties in SwiftUI Views have @MainActor",
            add_completion=False,
        )

        @app.command()
        def lint(
            paths: list[Path] = typer.Argument(..., help="Swift files or directories to lint"),  # noqa: B008
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Show verbose output"),
            output_format: Optional[str] = typer.Option(
                None,
                "--format",
                "-f",
                help="Output format: text, json or table (default: output_format from pyproject.toml, else text)",
            ),
        ) -> None:
            """Exit 0 when clean, 1 on violations, a missing path or an unreadable file."""
            deps.telemetry.set_verbose(verbose)
            deps.telemetry.handshake()
            try:
                reporter = deps.reporter_factory(output_format or deps.config_loader.output_format)
            except ValueError as exc:
                raise typer.BadParameter(str(exc), param_hint="--format") from exc

            use_case = LintPathsUseCase(
                linter=deps.linter,
                filesystem=deps.filesystem,
                telemetry=deps.telemetry,
            )
            try:
                violations = use_case.execute([str(path) for path in paths])
            except OSError as exc:
                deps.telemetry.error(str(exc))
                sys.exit(1)

            reporter.report(violations)
            if violations:
                sys.exit(1)
            sys.exit(0)

        return app
