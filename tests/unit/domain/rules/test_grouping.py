"""Unit tests for FieldGrouper and FieldGroup."""

import pytest

from field_definitions_linter.domain.declarations import SchemaMember
from field_definitions_linter.domain.entities import FieldDefinitionsInvariantError
from field_definitions_linter.domain.rules.grouping import FieldGroup, FieldGrouper
from tests.linter_test_utils import first_class, parse_with_buffer


def _grouper(code: str) -> FieldGrouper:
    module, _ = parse_with_buffer(code)
    return FieldGrouper(SchemaMember(first_class(module)))


@pytest.mark.unit
class TestFieldGroup:
    def test_empty_group_is_an_internal_error(self) -> None:
        with pytest.raises(FieldDefinitionsInvariantError):
            FieldGroup("name", ())


@pytest.mark.unit
class TestFieldGrouper:
    def test_group_by_name_keeps_first_appearance_order(self) -> None:
        grouper = _grouper(
            """\
            class A:
                field("b", str)
                field("a", str)
                with field("b", int):
                    argument("size", int)
            """
        )
        groups = grouper.group_by_name()
        assert [g.key for g in groups] == ["b", "a"]
        assert len(groups[0]) == 2
        assert groups[0].last.attached_block is not None

    def test_multiple_definitions_includes_declaration(self) -> None:
        grouper = _grouper(
            """\
            class A:
                field("a", str)
                field("b", str)
                field("a", int)
            """
        )
        first = grouper.fields[0]
        group = grouper.multiple_definitions(first)
        assert len(group) == 2
        assert group.last == grouper.fields[2]

    def test_leading_run_is_first_field(self) -> None:
        grouper = _grouper(
            """\
            class A:
                x = 1
                field("a", str)
            """
        )
        assert grouper.leading_run().name == "a"
        assert _grouper("class A:\n    x = 1\n").leading_run() is None

    def test_fields_with_same_resolver_collects_explicit_options(self) -> None:
        grouper = _grouper(
            """\
            class A:
                field("display_name", str, resolver_method="full_name")
                field("age", int)
                field("nickname", str, resolver_method="full_name")
            """
        )
        group = grouper.fields_with_same_resolver("full_name")
        assert [f.name for f in group.members] == ["display_name", "nickname"]

    def test_field_named_like_resolver_wins_outright(self) -> None:
        grouper = _grouper(
            """\
            class A:
                field("display_name", str, resolver_method="name")
                field("name", str)
                field("alias", str, resolver_method="name")
            """
        )
        group = grouper.fields_with_same_resolver("name")
        assert [f.name for f in group.members] == ["name"]

    def test_no_bound_field_is_an_internal_error(self) -> None:
        grouper = _grouper("class A:\n    field('a', str)\n")
        with pytest.raises(FieldDefinitionsInvariantError):
            grouper.fields_with_same_resolver("unbound")
