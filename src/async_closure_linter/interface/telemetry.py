"""Telemetry port implementation on a rich console (stderr)."""

from typing import Optional

from rich.console import Console
from rich.markup import escape

from async_closure_linter.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """
    Status output for the CLI. Steps and the handshake are only shown when
    verbose; errors always are. Everything goes to stderr so stdout
    carries nothing but lint results.
    """

    def __init__(
        self,
        project_name: str,
        color: str,
        welcome: str,
        verbose: bool = False,
        console: Optional[Console] = None,
    ) -> None:
        self.project_name = project_name
        self.color = color
        self.welcome = welcome
        self.verbose = verbose
        self.console = console or Console(stderr=True)

    def handshake(self) -> None:
        if self.verbose:
            tag = escape(f"[{self.project_name}]")
            self.console.print(f"[bold {self.color}]{tag}[/] {escape(self.welcome)}")

    def step(self, message: str) -> None:
        if self.verbose:
            self.console.print(f"[{self.color}]>[/] {escape(message)}", highlight=False)

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]error:[/] {escape(message)}", highlight=False)

    def set_verbose(self, enabled: bool) -> None:
        self.verbose = enabled
