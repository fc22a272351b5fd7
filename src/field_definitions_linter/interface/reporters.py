"""Protocol for violation reporting - no infrastructure imports."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from field_definitions_linter.use_cases.apply_fixes import FixResult
    from field_definitions_linter.use_cases.check_fields import FileReport


class ViolationReporter(Protocol):
    """Protocol for presenting check and fix results to the user."""

    def report_check(self, reports: list["FileReport"], output_format: str = "text") -> None:
        """Report violations per file. output_format: 'text' (default) or 'json'."""
        ...

    def report_fixes(self, results: list["FixResult"], dry_run: bool = False) -> None:
        """Report corrected files; a dry run prints unified diffs instead."""
        ...
