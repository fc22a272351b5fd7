"""
Pylint plugin entry point - composition root for the checker plugin.
Lives in infrastructure as it creates the container and wires dependencies.
"""

from pylint.lint import PyLinter

from field_definitions_linter.infrastructure.di.container import FieldDefinitionsContainer
from field_definitions_linter.use_cases.checks.field_definitions import (
    FieldDefinitionsChecker,
    MultipleFieldDefinitionsChecker,
)


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = FieldDefinitionsContainer.get_instance()
    config_loader = container.get_config_loader()
    registry = container.get_registry()

    linter.register_checker(FieldDefinitionsChecker(
        linter, config_loader=config_loader, registry=registry))
    linter.register_checker(MultipleFieldDefinitionsChecker(
        linter, config_loader=config_loader, registry=registry))
