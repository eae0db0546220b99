"""Configuration for the linter, read from [tool.async-closure-lint]."""

import logging
from typing import ClassVar, Optional

from async_closure_linter.domain.constants import DEFAULT_OUTPUT_FORMAT, OUTPUT_FORMATS


class ConfigurationLoader:
    """
    Typed view over the [tool.async-closure-lint] table of pyproject.toml.

    The raw dict is loaded by infrastructure and injected here. Invalid
    entries are logged and replaced by defaults; configuration never aborts
    a lint run.
    """

    KNOWN_KEYS: ClassVar[tuple[str, ...]] = ("exclude", "output_format")

    def __init__(self, config: Optional[dict[str, object]] = None) -> None:
        self._config: dict[str, object] = dict(config or {})
        self.validate_config(self._config)

    @property
    def config(self) -> dict[str, object]:
        return self._config

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about keys and values this version does not understand."""
        for key in config:
            if key not in self.KNOWN_KEYS:
                logging.warning("Configuration Warning: unknown key '%s' ignored.", key)

        exclude = config.get("exclude", [])
        if not isinstance(exclude, list) or not all(isinstance(p, str) for p in exclude):
            logging.warning(
                "Configuration Warning: 'exclude' must be a list of glob strings.")

        output_format = config.get("output_format", DEFAULT_OUTPUT_FORMAT)
        if output_format not in OUTPUT_FORMATS:
            logging.warning(
                "Configuration Warning: 'output_format' must be one of %s, got %r.",
                ", ".join(OUTPUT_FORMATS),
                output_format,
            )

    @property
    def exclude(self) -> tuple[str, ...]:
        """Glob patterns skipped while walking directories."""
        raw = self._config.get("exclude", [])
        if not isinstance(raw, list):
            return ()
        return tuple(p for p in raw if isinstance(p, str))

    @property
    def output_format(self) -> str:
        raw = self._config.get("output_format", DEFAULT_OUTPUT_FORMAT)
        if raw in OUTPUT_FORMATS:
            return str(raw)
        return DEFAULT_OUTPUT_FORMAT
