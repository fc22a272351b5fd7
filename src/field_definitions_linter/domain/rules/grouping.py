"""Grouping analyzer: which field declarations belong together."""

from dataclasses import dataclass

from field_definitions_linter.domain.declarations import FieldDeclaration, SchemaMember
from field_definitions_linter.domain.entities import FieldDefinitionsInvariantError


@dataclass(frozen=True)
class FieldGroup:
    """Declarations treated as one must-be-adjacent unit, in source order."""

    key: str
    members: tuple[FieldDeclaration, ...]

    def __post_init__(self) -> None:
        if not self.members:
            raise FieldDefinitionsInvariantError(f"empty field group for {self.key!r}")

    def __len__(self) -> int:
        return len(self.members)

    @property
    def last(self) -> FieldDeclaration:
        return self.members[-1]


class FieldGrouper:
    """Partitions the field declarations of one container. Never cached across containers."""

    def __init__(self, member: SchemaMember) -> None:
        self._fields = member.fields()

    @property
    def fields(self) -> list[FieldDeclaration]:
        return list(self._fields)

    def group_by_name(self) -> list[FieldGroup]:
        """One group per distinct field name, ordered by first appearance."""
        buckets: dict[str, list[FieldDeclaration]] = {}
        for declaration in self._fields:
            buckets.setdefault(declaration.name, []).append(declaration)
        return [FieldGroup(name, tuple(members)) for name, members in buckets.items()]

    def multiple_definitions(self, declaration: FieldDeclaration) -> FieldGroup:
        """All declarations sharing declaration's name, declaration included."""
        members = tuple(f for f in self._fields if f.name == declaration.name)
        return FieldGroup(declaration.name, members)

    def leading_run(self) -> FieldDeclaration | None:
        """First field declaration of the container; every other field should follow it."""
        return self._fields[0] if self._fields else None

    def fields_with_same_resolver(self, resolver_name: str) -> FieldGroup:
        """
        Fields bound to the resolver method called resolver_name.

        A field whose own name is the resolver name wins outright: scanning
        stops there and only that field is returned, whatever was collected
        from explicit resolver_method= options before it.
        """
        matches: list[FieldDeclaration] = []
        for declaration in self._fields:
            if declaration.name == resolver_name:
                return FieldGroup(resolver_name, (declaration,))
            if declaration.kwargs.resolver_method_name != resolver_name:
                continue
            matches.append(declaration)
        return FieldGroup(resolver_name, tuple(matches))
