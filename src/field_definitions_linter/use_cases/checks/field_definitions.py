"""Field definition checks (W9701, W9702, W9703, W9704, W9711)."""

from collections.abc import Mapping
from typing import TYPE_CHECKING

import astroid
from pylint.checkers import BaseChecker

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from field_definitions_linter.domain.config import ConfigurationLoader
from field_definitions_linter.domain.entities import Style
from field_definitions_linter.domain.registry_types import RuleRegistryEntry
from field_definitions_linter.domain.rule_msgs import RuleMsgBuilder
from field_definitions_linter.domain.rules.field_definitions import FieldDefinitionsRule
from field_definitions_linter.domain.rules.multiple_field_definitions import (
    MultipleFieldDefinitionsRule,
)


class FieldDefinitionsChecker(BaseChecker):
    """Field placement under the configured style. Thin: delegates to FieldDefinitionsRule."""

    name: str = "field-definitions"
    CODES = ["W9701", "W9702", "W9703", "W9704"]

    def __init__(
        self,
        linter: "PyLinter",
        config_loader: ConfigurationLoader,
        registry: Mapping[str, RuleRegistryEntry],
    ) -> None:
        self.msgs = RuleMsgBuilder.build_msgs_for_codes(
            registry, self.CODES)  # type: ignore[assignment]
        super().__init__(linter)
        self.config_loader = config_loader
        self._rule = FieldDefinitionsRule(config_loader.style)

    @property
    def style(self) -> Style:
        return self._rule.style

    def visit_classdef(self, node: astroid.nodes.ClassDef) -> None:
        for v in self._rule.check(node):
            self.add_message(v.code, node=v.node)


class MultipleFieldDefinitionsChecker(BaseChecker):
    """Same-name definitions must be adjacent. Only active with the group_definitions style."""

    name: str = "multiple-field-definitions"
    CODES = ["W9711"]

    def __init__(
        self,
        linter: "PyLinter",
        config_loader: ConfigurationLoader,
        registry: Mapping[str, RuleRegistryEntry],
    ) -> None:
        self.msgs = RuleMsgBuilder.build_msgs_for_codes(
            registry, self.CODES)  # type: ignore[assignment]
        super().__init__(linter)
        self.config_loader = config_loader
        self._rule = MultipleFieldDefinitionsRule()

    @property
    def active(self) -> bool:
        return (
            self.config_loader.check_multiple_definitions
            and self.config_loader.style is Style.GROUP_DEFINITIONS
        )

    def visit_classdef(self, node: astroid.nodes.ClassDef) -> None:
        if not self.active:
            return
        for v in self._rule.check(node):
            self.add_message(v.code, node=v.node)
