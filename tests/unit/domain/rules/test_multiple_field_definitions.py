"""Unit tests for MultipleFieldDefinitionsRule (W9711)."""

import textwrap

import pytest

from field_definitions_linter.domain.rules.multiple_field_definitions import (
    MultipleFieldDefinitionsRule,
)
from tests.linter_test_utils import apply_violations, check_rule


@pytest.mark.unit
class TestMultipleFieldDefinitionsRule:
    def setup_method(self) -> None:
        self.rule = MultipleFieldDefinitionsRule()

    def test_adjacent_definitions_pass(self) -> None:
        code = """\
            class Person:
                field("image_url", str)

                with field("image_url", str):
                    argument("width", int)
                field("first_name", str)
            """
        assert check_rule(self.rule, code) == []

    def test_block_definition_moves_next_to_bare_one(self) -> None:
        code = """\
            class Person:
                field("image_url", str)

                field("first_name", str)

                with field("image_url", str):
                    argument("width", int)
                    argument("height", int)
            """
        violations = check_rule(self.rule, code)
        assert [(v.code, v.lineno) for v in violations] == [("W9711", 6)]

        fixed = apply_violations(code, violations)
        assert fixed == textwrap.dedent(
            """\
            class Person:
                field("image_url", str)
                with field("image_url", str):
                    argument("width", int)
                    argument("height", int)

                field("first_name", str)
            """
        )
        assert check_rule(self.rule, fixed) == []

    def test_multiline_literals_survive_relocation(self) -> None:
        code = '''\
            class Person:
                field("image_url", str)
                field(
                    "bio",
                    str,
                    description="""
                    Long form biography.
                    Spans lines.
                    """,
                )
                field("image_url", str, description="""
                Large variant.
                """)
            '''
        violations = check_rule(self.rule, code)
        assert [v.lineno for v in violations] == [11]

        fixed = apply_violations(code, violations)
        assert "Long form biography.\n        Spans lines.\n        " in fixed
        assert 'description="""\n    Large variant.\n    """)' in fixed
        assert fixed.index("Large variant.") < fixed.index('"bio"')
        assert check_rule(self.rule, fixed) == []

    def test_attribute_docstrings_travel_with_their_field(self) -> None:
        code = '''\
            class Person:
                field("image_url", str)
                field("first_name", str)
                """The given name."""
                field("image_url", str)
                """Large image."""
            '''
        violations = check_rule(self.rule, code)
        assert len(violations) == 1

        fixed = apply_violations(code, violations)
        assert fixed == textwrap.dedent(
            '''\
            class Person:
                field("image_url", str)
                field("image_url", str)
                """Large image."""
                field("first_name", str)
                """The given name."""
            '''
        )
        assert check_rule(self.rule, fixed) == []

    def test_one_offense_per_scattered_name(self) -> None:
        code = """\
            class Person:
                field("a", str)
                field("b", str)
                field("a", int)
                field("c", str)
                field("b", int)
                field("a", float)
            """
        violations = check_rule(self.rule, code)
        assert [v.lineno for v in violations] == [7, 6]

        fixed = apply_violations(code, violations)
        assert fixed == textwrap.dedent(
            """\
            class Person:
                field("a", str)
                field("a", int)
                field("a", float)
                field("b", str)
                field("b", int)
                field("c", str)
            """
        )
