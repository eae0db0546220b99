from typing import TYPE_CHECKING, Any, Optional, cast

from async_closure_linter.domain.config import ConfigurationLoader
from async_closure_linter.infrastructure.config_file_loader import ConfigFileLoader
from async_closure_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from async_closure_linter.infrastructure.gateways.tree_sitter_gateway import (
    TreeSitterSwiftGateway,
)
from async_closure_linter.interface.telemetry import ProjectTelemetry
from async_closure_linter.use_cases.lint_sources import AsyncClosureLinter

if TYPE_CHECKING:
    from async_closure_linter.domain.protocols import (
        FileSystemProtocol,
        SwiftParserProtocol,
        TelemetryPort,
    )


class LinterContainer:
    """Dependency Injection Container for the async closure linter."""

    _instance: Optional["LinterContainer"] = None

    def __init__(self, config: Optional[dict[str, object]] = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config)

    def _register_defaults(self, config: Optional[dict[str, object]]) -> None:
        """Register default implementations for protocols."""
        if config is None:
            config = ConfigFileLoader.load_config_from_fs()
        config_loader = ConfigurationLoader(config)
        self.register_singleton("ConfigurationLoader", config_loader)

        self.register_singleton(
            "TelemetryPort",
            ProjectTelemetry(
                "ASYNC-CLOSURE-LINT", "cyan", "Scanning SwiftUI Views for async closures"),
        )
        filesystem = FileSystemGateway()
        self.register_singleton("FileSystemGateway", filesystem)
        parser = TreeSitterSwiftGateway()
        self.register_singleton("SwiftParser", parser)
        self.register_singleton(
            "AsyncClosureLinter",
            AsyncClosureLinter(
                parser=parser,
                filesystem=filesystem,
                exclude=config_loader.exclude,
            ),
        )

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the configuration loader (created at composition root)."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        """Return the filesystem gateway."""
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_swift_parser(self) -> "SwiftParserProtocol":
        """Return the tree-sitter Swift parser gateway."""
        return cast("SwiftParserProtocol", self.get("SwiftParser"))

    def get_linter(self) -> AsyncClosureLinter:
        """Return the configured linter."""
        return cast(AsyncClosureLinter, self.get("AsyncClosureLinter"))

    @classmethod
    def get_instance(cls) -> "LinterContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = LinterContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None
