"""Group definitions rule (W9701): all field definitions form one contiguous run."""

from collections.abc import Iterator

import astroid

from field_definitions_linter.domain.constants import GROUP_DEFS_MSG
from field_definitions_linter.domain.rules import Checkable, Violation
from field_definitions_linter.domain.rules.context import ContainerContext
from field_definitions_linter.domain.source import SourceBuffer


class GroupDefinitionsRule(Checkable):
    """
    group_definitions style.

    Every field must sit at first_field + its position among fields. Each
    field that does not is reported on its own and moved up behind the last
    field of the leading run, in source order.
    """

    codes: tuple[str, ...] = ("W9701",)
    description: str = "All field definitions should be grouped together."

    code: str = "W9701"

    def check(
        self, node: astroid.nodes.ClassDef, buffer: SourceBuffer | None = None
    ) -> Iterator[Violation]:
        context = ContainerContext.build(node, buffer)
        if context.grouper.leading_run() is None:
            return
        run, misplaced = context.adjacency.split_leading_run(context.grouper.fields)
        for declaration in misplaced:
            yield Violation.from_node(
                code=self.code,
                message=GROUP_DEFS_MSG,
                node=declaration.node,
                edits=context.planner.relocate_field(run[-1], declaration, blank_line=False),
            )
