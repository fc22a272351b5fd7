"""Turns violations into insert/remove edits against the original source."""

import astroid

from field_definitions_linter.domain.declarations import (
    FieldDeclaration,
    ResolverMethod,
    SchemaMember,
)
from field_definitions_linter.domain.entities import EditOperation, SourceRange
from field_definitions_linter.domain.rules.adjacency import AdjacencyChecker
from field_definitions_linter.domain.rules.grouping import FieldGroup
from field_definitions_linter.domain.source import SourceBuffer


class EditPlanner:
    """
    Relocation primitives for one container.

    Every method returns None instead of a partial plan when a range it needs
    cannot be computed; callers then report without a correction.
    """

    def __init__(self, member: SchemaMember, buffer: SourceBuffer | None) -> None:
        self.member = member
        self.buffer = buffer

    def _declaration_range(self, statement: astroid.nodes.NodeNG) -> SourceRange | None:
        return self.buffer.range_including_literal(
            statement, self.member.trailing_literal_for(statement)
        )

    def _moved_source(self, node: astroid.nodes.NodeNG, node_range: SourceRange) -> str:
        return self.buffer.indent(node) + self.buffer.slice(node_range)

    def _ends_its_lines(self, *ranges: SourceRange | None) -> bool:
        """Whether nothing but whitespace or a comment follows each range on its line."""
        return all(
            r is not None and self.buffer.rest_of_line_is_blank(r.end) for r in ranges
        )

    def relocate_field(
        self,
        first: FieldDeclaration,
        second: FieldDeclaration,
        blank_line: bool = True,
    ) -> list[EditOperation] | None:
        """Copy second (block, docstring and sig included) after first, then remove it."""
        if self.buffer is None:
            return None
        anchor = self._declaration_range(first.statement)
        moved = self._declaration_range(second.statement)
        if not self._ends_its_lines(anchor, moved):
            return None

        newline = self.buffer.newline
        moved_text = self._moved_source(second.statement, moved)
        signature = self.member.signature_for(second.statement)
        signature_range = None
        if signature is not None:
            signature_range = self.buffer.node_range(signature)
            if not self._ends_its_lines(signature_range):
                return None
            moved_text = self._moved_source(signature, signature_range) + newline + moved_text

        separator = newline * 2 if blank_line else newline
        edits = [
            EditOperation.insert_after(anchor, separator + moved_text),
            EditOperation.remove(self.buffer.range_with_surrounding_space(moved)),
        ]
        if signature_range is not None:
            edits.append(
                EditOperation.remove(self.buffer.range_with_surrounding_space(signature_range))
            )
        return edits

    def relocate_resolver(
        self, field_definition: FieldDeclaration, resolver: ResolverMethod | None
    ) -> list[EditOperation] | None:
        """Move the resolver (and its sig line) to directly below the field definition."""
        if self.buffer is None or resolver is None:
            return None
        anchor = self._declaration_range(field_definition.statement)
        method_range = self.buffer.node_range(resolver.node)
        if not self._ends_its_lines(anchor, method_range):
            return None

        newline = self.buffer.newline
        signature_text = ""
        signature_range = None
        if resolver.attached_annotation is not None:
            signature_range = self.buffer.node_range(resolver.attached_annotation)
            if not self._ends_its_lines(signature_range):
                return None
            signature_text = newline + self._moved_source(
                resolver.attached_annotation, signature_range
            )

        text = (
            newline
            + signature_text
            + newline
            + self._moved_source(resolver.node, method_range)
            + newline
        )
        edits = [
            EditOperation.insert_after(anchor, text),
            EditOperation.remove(self.buffer.range_with_surrounding_space(method_range)),
        ]
        if signature_range is not None:
            edits.append(
                EditOperation.remove(self.buffer.range_with_surrounding_space(signature_range))
            )
        return edits

    def group_definitions(
        self,
        group: FieldGroup,
        adjacency: AdjacencyChecker,
        blank_line: bool = True,
    ) -> list[EditOperation] | None:
        """Move every member behind the group's leading run up to follow that run."""
        run, rest = adjacency.split_leading_run(group.members)
        if not rest:
            return []
        edits: list[EditOperation] = []
        for declaration in rest:
            relocation = self.relocate_field(run[-1], declaration, blank_line=blank_line)
            if relocation is None:
                return None
            edits.extend(relocation)
        return edits
