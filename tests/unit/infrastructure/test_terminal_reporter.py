"""Unit tests for TerminalViolationReporter."""

import json

import astroid

from field_definitions_linter.domain.constants import RULE_REGISTRY
from field_definitions_linter.domain.rules import Violation
from field_definitions_linter.infrastructure.reporters import TerminalViolationReporter
from field_definitions_linter.use_cases.apply_fixes import FixResult
from field_definitions_linter.use_cases.check_fields import FileReport


def _violation(code: str, line: int) -> Violation:
    module = astroid.parse("\n" * (line - 1) + "field('a', str)\n")
    return Violation.from_node(code=code, message="Message.", node=module.body[0].value)


class TestTerminalViolationReporter:
    def test_rows_sorted_with_symbols(self) -> None:
        reporter = TerminalViolationReporter(RULE_REGISTRY)
        reports = [
            FileReport("b.py", [_violation("W9701", 3)]),
            FileReport("a.py", [_violation("W9711", 5), _violation("W9702", 2)]),
        ]
        rows = reporter.rows(reports)
        assert [(r["path"], r["line"], r["code"]) for r in rows] == [
            ("a.py", 2, "W9702"),
            ("a.py", 5, "W9711"),
            ("b.py", 3, "W9701"),
        ]
        assert rows[0]["symbol"] == "resolver-after-field-definition"
        assert rows[0]["fixable"] is False

    def test_text_output_lists_skipped_files(self, capsys) -> None:
        reporter = TerminalViolationReporter(RULE_REGISTRY)
        reporter.report_check(
            [FileReport("a.py", [_violation("W9701", 1)]), FileReport("broken.py", parse_failed=True)]
        )
        out = capsys.readouterr().out
        assert "a.py:1:0: W9701 Message. (field-definitions-ungrouped)" in out
        assert "broken.py: skipped, could not parse" in out
        assert "Found 1 violation(s) in 2 file(s), 0 fixable." in out

    def test_json_output(self, capsys) -> None:
        TerminalViolationReporter(RULE_REGISTRY).report_check(
            [FileReport("a.py", [_violation("W9703", 4)])], output_format="json"
        )
        (row,) = json.loads(capsys.readouterr().out)
        assert row["symbol"] == "resolver-after-last-field-definition"
        assert row["line"] == 4

    def test_report_fixes(self, capsys) -> None:
        result = FixResult(path="a.py", original="x\n", fixed="y\n", passes=1, remaining=1)
        TerminalViolationReporter(RULE_REGISTRY).report_fixes([result])
        out = capsys.readouterr().out
        assert "a.py: 1 violation(s) left after fixing" in out
        assert "Fixed 1 file(s)." in out
