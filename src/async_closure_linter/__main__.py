"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from async_closure_linter.infrastructure.di.container import LinterContainer
from async_closure_linter.infrastructure.reporters import ReporterFactory
from async_closure_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = LinterContainer()

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        filesystem=container.get_filesystem_gateway(),
        linter=container.get_linter(),
        reporter_factory=ReporterFactory.create,
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
