"""Configuration for the field definitions linter. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from field_definitions_linter.domain.constants import DEFAULT_MAX_FIX_PASSES
from field_definitions_linter.domain.entities import Style


class ConfigurationLoader:
    """
    Immutable configuration for linter settings.

    Created by Infrastructure from config_dict. Domain does not read the
    filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict) at composition root.
    """

    DEFAULT_STYLE: Style = Style.GROUP_DEFINITIONS

    def __init__(self, config_dict: dict[str, object]) -> None:
        """Set config once at construction. No mutable class or instance state after init."""
        self._config = config_dict
        self._style = self.DEFAULT_STYLE
        if config_dict:
            self.validate_config(config_dict)

    def validate_config(self, config: dict[str, object]) -> None:
        """Validate configuration values."""
        raw_style = config.get("style")
        if raw_style is None:
            return
        try:
            self._style = Style(str(raw_style))
        except ValueError:
            logging.warning(
                "Configuration Warning: unknown field definitions style %r, using %r. "
                "Expected one of: %s.",
                raw_style,
                self.DEFAULT_STYLE.value,
                ", ".join(Style.choices()),
            )

    @property
    def style(self) -> Style:
        """Enforced style for this project."""
        return self._style

    @property
    def check_multiple_definitions(self) -> bool:
        """Whether the standalone same-name rule (W9711) is scheduled."""
        return bool(self._config.get("check_multiple_definitions", True))

    @property
    def max_fix_passes(self) -> int:
        raw = self._config.get("max_fix_passes", DEFAULT_MAX_FIX_PASSES)
        if isinstance(raw, int) and not isinstance(raw, bool) and raw > 0:
            return raw
        return DEFAULT_MAX_FIX_PASSES

    @property
    def exclude_paths(self) -> list[str]:
        """Path fragments skipped by the command line tool."""
        raw = self._config.get("exclude_paths", [])
        if isinstance(raw, list):
            return [str(x) for x in raw if isinstance(x, str)]
        return []

    def with_style(self, style: Style | None) -> ConfigurationLoader:
        """Copy with a per-run style override (CLI --style)."""
        if style is None:
            return self
        config = dict(self._config)
        config["style"] = style.value
        return ConfigurationLoader(config)
