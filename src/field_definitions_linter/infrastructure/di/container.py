"""Dependency Injection Container for the field definitions linter."""

from pathlib import Path
from typing import Any, Optional

from field_definitions_linter.domain.config import ConfigurationLoader
from field_definitions_linter.domain.constants import RULE_REGISTRY
from field_definitions_linter.infrastructure.config_file_loader import ConfigFileLoader
from field_definitions_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from field_definitions_linter.infrastructure.gateways.filesystem_gateway import (
    FileSystemGateway,
)
from field_definitions_linter.infrastructure.gateways.libcst_fixer_gateway import (
    LibCSTFixerGateway,
)
from field_definitions_linter.infrastructure.reporters import TerminalViolationReporter
from field_definitions_linter.interface.telemetry import ProjectTelemetry


class FieldDefinitionsContainer:
    """Wires gateways, configuration and telemetry once per process."""

    _instance: Optional["FieldDefinitionsContainer"] = None

    def __init__(self, project_root: Path | None = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._project_root = project_root
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        config_dict = ConfigFileLoader.load_config_from_fs(self._project_root)
        config_loader = ConfigurationLoader(config_dict)
        telemetry = ProjectTelemetry("FIELD-DEFS", "cyan", "Field definitions linter ready")
        self.register_singleton("ConfigurationLoader", config_loader)
        self.register_singleton("TelemetryPort", telemetry)
        self.register_singleton("AstroidGateway", AstroidGateway())
        self.register_singleton("FixerGateway", LibCSTFixerGateway())
        self.register_singleton(
            "FileSystemGateway", FileSystemGateway(exclude_paths=config_loader.exclude_paths)
        )
        self.register_singleton("ViolationReporter", TerminalViolationReporter(RULE_REGISTRY))

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        return self.get("ConfigurationLoader")

    def get_telemetry(self) -> ProjectTelemetry:
        return self.get("TelemetryPort")

    def get_astroid_gateway(self) -> AstroidGateway:
        return self.get("AstroidGateway")

    def get_fixer_gateway(self) -> LibCSTFixerGateway:
        return self.get("FixerGateway")

    def get_filesystem_gateway(self) -> FileSystemGateway:
        return self.get("FileSystemGateway")

    def get_reporter(self) -> TerminalViolationReporter:
        return self.get("ViolationReporter")

    def get_registry(self) -> dict:
        return RULE_REGISTRY

    @classmethod
    def get_instance(cls) -> "FieldDefinitionsContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = FieldDefinitionsContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None
