"""Use Case: Check field definitions across files."""

from dataclasses import dataclass, field

import astroid

from field_definitions_linter.domain.config import ConfigurationLoader
from field_definitions_linter.domain.protocols import (
    AstroidProtocol,
    FileSystemProtocol,
    TelemetryPort,
)
from field_definitions_linter.domain.rules import Checkable, Violation
from field_definitions_linter.domain.rules.field_definitions import RuleSet
from field_definitions_linter.domain.source import SourceBuffer


@dataclass(frozen=True)
class FileReport:
    """Violations found in one file; parse_failed marks files that were skipped."""

    path: str
    violations: list[Violation] = field(default_factory=list)
    parse_failed: bool = False


class CheckFieldsUseCase:
    """Run the scheduled rules over every class of every Python file under a path."""

    def __init__(
        self,
        astroid_gateway: AstroidProtocol,
        filesystem: FileSystemProtocol,
        config_loader: ConfigurationLoader,
        telemetry: TelemetryPort | None = None,
    ) -> None:
        self.astroid_gateway = astroid_gateway
        self.filesystem = filesystem
        self.config_loader = config_loader
        self.telemetry = telemetry

    @property
    def rules(self) -> list[Checkable]:
        return RuleSet.for_style(
            self.config_loader.style,
            check_multiple_definitions=self.config_loader.check_multiple_definitions,
        )

    def analyze_module(self, module: astroid.nodes.Module, source: str | None) -> list[Violation]:
        """Check each class of a parsed module, outer classes first."""
        buffer = SourceBuffer(source) if source is not None else None
        rules = self.rules
        violations: list[Violation] = []
        for class_node in module.nodes_of_class(astroid.nodes.ClassDef):
            for rule in rules:
                violations.extend(rule.check(class_node, buffer))
        return violations

    def analyze_source(self, source: str, file_path: str = "") -> list[Violation] | None:
        """Check source text. Returns None when it does not parse."""
        module = self.astroid_gateway.parse_source(source, file_path)
        if module is None:
            return None
        return self.analyze_module(module, source)

    def check_file(self, file_path: str) -> FileReport:
        source = self.filesystem.read_text(file_path)
        violations = self.analyze_source(source, file_path)
        if violations is None:
            if self.telemetry:
                self.telemetry.warning(f"Skipped (syntax error): {file_path}")
            return FileReport(path=file_path, parse_failed=True)
        return FileReport(path=file_path, violations=violations)

    def execute(self, target_path: str) -> list[FileReport]:
        """Check every Python file under target_path."""
        if self.telemetry:
            self.telemetry.step(
                f"Checking field definitions in {target_path} "
                f"(style: {self.config_loader.style.value})"
            )
        return [self.check_file(path) for path in self.filesystem.glob_python_files(target_path)]
