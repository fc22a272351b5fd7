"""Multiple field definitions rule (W9711): same-name fields are defined together."""

from collections.abc import Iterator

import astroid

from field_definitions_linter.domain.constants import MULTIPLE_FIELD_DEFINITIONS_MSG
from field_definitions_linter.domain.rules import Checkable, Violation
from field_definitions_linter.domain.rules.context import ContainerContext
from field_definitions_linter.domain.source import SourceBuffer


class MultipleFieldDefinitionsRule(Checkable):
    """Rule for W9711: one offense per scattered name, reported on its last definition."""

    codes: tuple[str, ...] = ("W9711",)
    description: str = "Fields with multiple definitions should be grouped together."

    code: str = "W9711"

    def check(
        self, node: astroid.nodes.ClassDef, buffer: SourceBuffer | None = None
    ) -> Iterator[Violation]:
        context = ContainerContext.build(node, buffer)
        for group in context.grouper.group_by_name():
            if len(group) == 1 or not context.adjacency.has_ungrouped_definitions(group):
                continue
            yield Violation.from_node(
                code=self.code,
                message=MULTIPLE_FIELD_DEFINITIONS_MSG,
                node=group.last.node,
                edits=context.planner.group_definitions(
                    group, context.adjacency, blank_line=False
                ),
            )
