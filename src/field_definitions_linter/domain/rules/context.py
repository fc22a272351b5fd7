"""Per-container analysis state, built fresh for every class that is checked."""

from dataclasses import dataclass

import astroid

from field_definitions_linter.domain.declarations import SchemaMember
from field_definitions_linter.domain.rules.adjacency import AdjacencyChecker, SiblingIndex
from field_definitions_linter.domain.rules.edit_planner import EditPlanner
from field_definitions_linter.domain.rules.grouping import FieldGrouper
from field_definitions_linter.domain.source import SourceBuffer


@dataclass(frozen=True)
class ContainerContext:
    member: SchemaMember
    grouper: FieldGrouper
    index: SiblingIndex
    adjacency: AdjacencyChecker
    planner: EditPlanner

    @classmethod
    def build(
        cls, node: astroid.nodes.ClassDef, buffer: SourceBuffer | None
    ) -> "ContainerContext":
        member = SchemaMember(node)
        index = SiblingIndex(member)
        return cls(
            member=member,
            grouper=FieldGrouper(member),
            index=index,
            adjacency=AdjacencyChecker(index),
            planner=EditPlanner(member, buffer),
        )
