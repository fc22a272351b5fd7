"""Style selector: one enforced style per run, each with its own analyzer."""

from collections.abc import Iterator

import astroid

from field_definitions_linter.domain.entities import Style
from field_definitions_linter.domain.rules import Checkable, Violation
from field_definitions_linter.domain.rules.group_definitions import GroupDefinitionsRule
from field_definitions_linter.domain.rules.multiple_field_definitions import (
    MultipleFieldDefinitionsRule,
)
from field_definitions_linter.domain.rules.resolver_placement import ResolverAfterDefinitionRule
from field_definitions_linter.domain.source import SourceBuffer


class FieldDefinitionsRule(Checkable):
    """Checks consistency of field definitions under the configured style."""

    STYLE_RULES: dict[Style, type[Checkable]] = {
        Style.GROUP_DEFINITIONS: GroupDefinitionsRule,
        Style.DEFINE_RESOLVER_AFTER_DEFINITION: ResolverAfterDefinitionRule,
    }

    codes: tuple[str, ...] = ("W9701", "W9702", "W9703", "W9704")
    description: str = "Field definitions follow the enforced style."

    def __init__(self, style: Style = Style.GROUP_DEFINITIONS) -> None:
        self.style = style
        self._analyzer = self.STYLE_RULES[style]()

    def check(
        self, node: astroid.nodes.ClassDef, buffer: SourceBuffer | None = None
    ) -> Iterator[Violation]:
        return self._analyzer.check(node, buffer)


class RuleSet:
    """The rules scheduled for one run. No top-level functions."""

    @staticmethod
    def for_style(style: Style, check_multiple_definitions: bool = True) -> list[Checkable]:
        """
        Style rule first, then the standalone same-name rule.

        The resolver style already reports scattered same-name definitions
        (W9704), so W9711 only joins the group_definitions style.
        """
        rules: list[Checkable] = [FieldDefinitionsRule(style)]
        if check_multiple_definitions and style is Style.GROUP_DEFINITIONS:
            rules.append(MultipleFieldDefinitionsRule())
        return rules
