"""Load [tool.async-closure-lint] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

from async_closure_linter.domain.constants import CONFIG_SECTION


class ConfigFileLoader:
    """Loads config from the nearest pyproject.toml."""

    @staticmethod
    def load_config_from_fs(start: Optional[Path] = None) -> dict[str, object]:
        """Walk up from start (default: CWD) to the first pyproject.toml and return our table."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.is_file():
                continue
            try:
                with config_file.open("rb") as f:
                    data = toml_lib.load(f)
            except (OSError, toml_lib.TOMLDecodeError) as exc:
                logging.warning("Configuration Warning: cannot read %s (%s).", config_file, exc)
                return {}
            tool_section = data.get("tool", {}) or {}
            section = tool_section.get(CONFIG_SECTION, {}) or {}
            if not isinstance(section, dict):
                logging.warning(
                    "Configuration Warning: [tool.%s] in %s is not a table.",
                    CONFIG_SECTION, config_file)
                return {}
            return section
        return {}
