"""Terminal reporter implementations - text lines, JSON, and a rich table."""

import json
from collections import defaultdict
from typing import Callable, ClassVar, Optional, TextIO

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from async_closure_linter.domain.entities import Violation
from async_closure_linter.interface.reporters import ViolationReporter


class TextViolationReporter(ViolationReporter):
    """One `path:line:column: warning: message` line per violation on stdout."""

    def __init__(self, echo: Callable[[str], None] = typer.echo) -> None:
        self._echo = echo

    def report(self, violations: list[Violation]) -> None:
        for violation in violations:
            self._echo(str(violation))


class JsonViolationReporter(ViolationReporter):
    """A single JSON document for CI tooling."""

    def __init__(self, echo: Callable[[str], None] = typer.echo) -> None:
        self._echo = echo

    def report(self, violations: list[Violation]) -> None:
        document = {
            "violations": [v.to_dict() for v in violations],
            "count": len(violations),
        }
        self._echo(json.dumps(document, indent=2))


class TableViolationReporter(ViolationReporter):
    """Violations grouped by file in a rich table, followed by a total."""

    def __init__(self, console: Optional[Console] = None, file: Optional[TextIO] = None) -> None:
        self.console = console or Console(file=file)

    def report(self, violations: list[Violation]) -> None:
        if not violations:
            self.console.print("[green]No async closure violations detected.[/]")
            return

        by_file: dict[str, list[Violation]] = defaultdict(list)
        for violation in violations:
            by_file[violation.file_path].append(violation)

        table = Table(title="Async Closure Audit", header_style="bold #F9A602")
        table.add_column("File", style="#00EEFF")
        table.add_column("Line:Col", style="bold #007BFF", justify="right")
        table.add_column("Property", style="#C41E3A")
        for file_path, file_violations in by_file.items():
            for violation in file_violations:
                table.add_row(
                    Text(file_path),
                    f"{violation.line}:{violation.column}",
                    Text(violation.variable_name),
                )
        self.console.print(table)
        self.console.print(
            f"[bold]{len(violations)}[/] violation(s) in [bold]{len(by_file)}[/] file(s).")


class ReporterFactory:
    """Builds the reporter for an output format name."""

    _REPORTERS: ClassVar[dict[str, Callable[[], ViolationReporter]]] = {
        "text": TextViolationReporter,
        "json": JsonViolationReporter,
        "table": TableViolationReporter,
    }

    @classmethod
    def formats(cls) -> tuple[str, ...]:
        return tuple(cls._REPORTERS)

    @classmethod
    def create(cls, output_format: str) -> ViolationReporter:
        factory = cls._REPORTERS.get(output_format)
        if factory is None:
            raise ValueError(
                f"Unknown output format '{output_format}'. "
                f"Choose one of: {', '.join(cls._REPORTERS)}.")
        return factory()
