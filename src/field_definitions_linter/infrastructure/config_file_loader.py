"""Load [tool.field-definitions] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path

from field_definitions_linter.domain.constants import TOOL_SECTION_NAME

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib


class ConfigFileLoader:
    """Loads config from pyproject.toml."""

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Load [tool.field-definitions] from the nearest pyproject.toml.

        Returns an empty dict when nothing is found or the file cannot be read.
        """
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.exists():
                continue
            try:
                with config_file.open("rb") as f:
                    data = toml_lib.load(f)
            except (OSError, toml_lib.TOMLDecodeError) as exc:
                logging.warning("Could not read %s: %s", config_file, exc)
                return {}
            tool_section = data.get("tool", {}) or {}
            return tool_section.get(TOOL_SECTION_NAME, {}) or {}
        return {}
