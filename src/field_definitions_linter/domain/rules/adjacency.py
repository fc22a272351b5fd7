"""Adjacency checker over the effective sibling index space of a class body."""

import astroid

from field_definitions_linter.domain.declarations import (
    DeclarationMatcher,
    FieldDeclaration,
    SchemaMember,
)
from field_definitions_linter.domain.rules.grouping import FieldGroup


class SiblingIndex:
    """
    Derived slot numbering for the direct children of one class body.

    A with-block counts as the slot of the field it wraps, and an attribute
    docstring shares the slot of the declaration above it. A sig(...) line
    keeps a slot of its own; a field it annotates shares that slot, a method
    does not. The tree itself is never touched.
    """

    def __init__(self, member: SchemaMember) -> None:
        self._slots: dict[astroid.nodes.NodeNG, int] = {}
        slot = -1
        folded: astroid.nodes.NodeNG | None = None
        for statement in member.body:
            if statement is not folded and not self._annotated_field(member, statement):
                slot += 1
            self._slots[statement] = slot
            folded = member.trailing_literal_for(statement)

    @staticmethod
    def _annotated_field(member: SchemaMember, statement: astroid.nodes.NodeNG) -> bool:
        return (
            DeclarationMatcher.is_field_declaration(statement)
            and member.signature_for(statement) is not None
        )

    def of(self, node: astroid.nodes.NodeNG) -> int:
        """Slot of a class-body statement."""
        return self._slots[node]

    def effective(self, declaration: FieldDeclaration) -> int:
        """Slot of a field, collapsing a wrapping with-block onto its own slot."""
        block = declaration.attached_block
        return self.of(block if block is not None else declaration.statement)


class AdjacencyChecker:
    """Detects gaps between declarations that must sit next to each other."""

    def __init__(self, index: SiblingIndex) -> None:
        self.index = index

    def has_ungrouped_definitions(self, group: FieldGroup) -> bool:
        """True when any two consecutive members are more than one slot apart."""
        indices = [self.index.effective(member) for member in group.members]
        return any(second - first > 1 for first, second in zip(indices, indices[1:]))

    def split_leading_run(
        self, declarations: list[FieldDeclaration] | tuple[FieldDeclaration, ...]
    ) -> tuple[list[FieldDeclaration], list[FieldDeclaration]]:
        """
        Split declarations into the contiguous run starting at the first one
        and everything after the first gap.

        Slots strictly increase, so once a declaration falls behind the run
        every later one does too.
        """
        if not declarations:
            return [], []
        first = self.index.effective(declarations[0])
        for position, declaration in enumerate(declarations):
            if self.index.effective(declaration) != first + position:
                return list(declarations[:position]), list(declarations[position:])
        return list(declarations), []
