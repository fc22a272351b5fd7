"""Resolver placement analyzer (W9702, W9703, W9704)."""

from collections.abc import Iterator

import astroid

from field_definitions_linter.domain.constants import (
    MULTIPLE_FIELD_DEFINITIONS_MSG,
    RESOLVER_AFTER_FIELD_MSG,
    RESOLVER_AFTER_LAST_FIELD_MSG,
)
from field_definitions_linter.domain.declarations import FieldDeclaration, ResolverMethod
from field_definitions_linter.domain.rules import Checkable, Violation
from field_definitions_linter.domain.rules.context import ContainerContext
from field_definitions_linter.domain.source import SourceBuffer


class ResolverAfterDefinitionRule(Checkable):
    """
    define_resolver_after_definition style.

    Only the last definition of a field name is looked at. It reports when
    the same-name definitions are scattered (W9704) and, independently, when
    the resolver method does not sit directly below the last field bound to
    it (W9702 for a single field, W9703 for a shared resolver).
    """

    codes: tuple[str, ...] = ("W9702", "W9703", "W9704")
    description: str = "If a resolver method exists it is defined right after the field definition."

    RESOLVER_AFTER_FIELD_CODE: str = "W9702"
    RESOLVER_AFTER_LAST_FIELD_CODE: str = "W9703"
    MULTIPLE_DEFINITIONS_CODE: str = "W9704"

    def check(
        self, node: astroid.nodes.ClassDef, buffer: SourceBuffer | None = None
    ) -> Iterator[Violation]:
        context = ContainerContext.build(node, buffer)
        for declaration in context.grouper.fields:
            yield from self.check_field(context, declaration)

    def check_field(
        self, context: ContainerContext, field: FieldDeclaration
    ) -> Iterator[Violation]:
        definitions = context.grouper.multiple_definitions(field)
        if field != definitions.last:
            return

        if len(definitions) > 1 and context.adjacency.has_ungrouped_definitions(definitions):
            edits = context.planner.group_definitions(definitions, context.adjacency)
            yield Violation.from_node(
                code=self.MULTIPLE_DEFINITIONS_CODE,
                message=MULTIPLE_FIELD_DEFINITIONS_MSG,
                node=field.node,
                edits=edits,
            )

        resolver = context.member.find_method_definition(field.resolver_method_name)
        if resolver is None:
            return

        sharing = context.grouper.fields_with_same_resolver(resolver.method_name)
        if field.name != sharing.last.name:
            return

        if self.resolver_defined_after_definition(context, field, resolver):
            return

        single = len(sharing) == 1
        yield Violation.from_node(
            code=self.RESOLVER_AFTER_FIELD_CODE if single else self.RESOLVER_AFTER_LAST_FIELD_CODE,
            message=RESOLVER_AFTER_FIELD_MSG if single else RESOLVER_AFTER_LAST_FIELD_MSG,
            node=field.node,
            edits=context.planner.relocate_resolver(field, resolver),
        )

    def resolver_defined_after_definition(
        self, context: ContainerContext, field: FieldDeclaration, resolver: ResolverMethod
    ) -> bool:
        offset = context.index.of(resolver.node) - context.index.effective(field)
        if offset == 1:
            return True
        # The sig(...) line above the resolver takes the slot right after the field.
        return offset == 2 and resolver.attached_annotation is not None
