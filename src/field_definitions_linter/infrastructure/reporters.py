"""Terminal reporter implementation - text lines or JSON on stdout."""

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, TypedDict

import typer

from field_definitions_linter.domain.registry_types import RuleRegistryEntry
from field_definitions_linter.domain.rule_msgs import RuleMsgBuilder

if TYPE_CHECKING:
    from field_definitions_linter.domain.rules import Violation
    from field_definitions_linter.use_cases.apply_fixes import FixResult
    from field_definitions_linter.use_cases.check_fields import FileReport


class ViolationRow(TypedDict):
    """One reported violation, as emitted in JSON output."""

    path: str
    line: int
    column: int
    code: str
    symbol: str
    message: str
    fixable: bool


class TerminalViolationReporter:
    """Prints violations as `path:line:col: CODE message (symbol)` lines or a JSON array."""

    def __init__(self, registry: Mapping[str, RuleRegistryEntry]) -> None:
        self._registry = registry

    def _row(self, path: str, violation: "Violation") -> ViolationRow:
        return {
            "path": path,
            "line": violation.lineno,
            "column": violation.col_offset,
            "code": violation.code,
            "symbol": RuleMsgBuilder.symbol_for(self._registry, violation.code),
            "message": violation.message,
            "fixable": violation.fixable,
        }

    def rows(self, reports: list["FileReport"]) -> list[ViolationRow]:
        rows = [self._row(r.path, v) for r in reports for v in r.violations]
        rows.sort(key=lambda row: (row["path"], row["line"], row["column"], row["code"]))
        return rows

    def report_check(self, reports: list["FileReport"], output_format: str = "text") -> None:
        rows = self.rows(reports)
        if output_format == "json":
            typer.echo(json.dumps(rows, indent=2))
            return
        for row in rows:
            marker = " [*]" if row["fixable"] else ""
            typer.echo(
                f"{row['path']}:{row['line']}:{row['column']}: "
                f"{row['code']} {row['message']} ({row['symbol']}){marker}"
            )
        skipped = [r.path for r in reports if r.parse_failed]
        for path in skipped:
            typer.echo(f"{path}: skipped, could not parse")
        fixable = sum(1 for row in rows if row["fixable"])
        typer.echo(f"Found {len(rows)} violation(s) in {len(reports)} file(s), {fixable} fixable.")

    def report_fixes(self, results: list["FixResult"], dry_run: bool = False) -> None:
        for result in results:
            if dry_run:
                typer.echo(result.diff(), nl=False)
            elif result.remaining:
                typer.echo(f"{result.path}: {result.remaining} violation(s) left after fixing")
        verb = "Would fix" if dry_run else "Fixed"
        typer.echo(f"{verb} {len(results)} file(s).")
