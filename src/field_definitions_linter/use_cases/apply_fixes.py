"""Use Case: Apply field definition corrections to source files."""

import difflib
import logging
from dataclasses import dataclass

from field_definitions_linter.domain.protocols import (
    FileSystemProtocol,
    FixerGatewayProtocol,
    TelemetryPort,
)
from field_definitions_linter.use_cases.check_fields import CheckFieldsUseCase


@dataclass(frozen=True)
class FixResult:
    """Outcome of correcting one file."""

    path: str
    original: str
    fixed: str
    passes: int
    remaining: int
    """Violations still reported after the last pass (report-only ones included)."""

    @property
    def modified(self) -> bool:
        return self.fixed != self.original

    def diff(self) -> str:
        label = self.path.lstrip("/\\")
        return "".join(
            difflib.unified_diff(
                self.original.splitlines(keepends=True),
                self.fixed.splitlines(keepends=True),
                fromfile=f"a/{label}",
                tofile=f"b/{label}",
            )
        )


class ApplyFixesUseCase:
    """
    Correct files by re-checking after every pass.

    Each pass applies all compatible edit batches against the text produced
    by the previous pass; batches that collided are recomputed on the next
    one. The file is written once, after the last pass.
    """

    def __init__(
        self,
        check_fields_use_case: CheckFieldsUseCase,
        fixer_gateway: FixerGatewayProtocol,
        filesystem: FileSystemProtocol,
        telemetry: TelemetryPort | None = None,
        max_passes: int = 10,
        dry_run: bool = False,
    ) -> None:
        self.check_fields_use_case = check_fields_use_case
        self.fixer_gateway = fixer_gateway
        self.filesystem = filesystem
        self.telemetry = telemetry
        self.max_passes = max_passes
        self.dry_run = dry_run

    def fix_source(self, source: str, file_path: str = "") -> tuple[str, int, int]:
        """Returns (fixed_source, passes_used, remaining_violations)."""
        current = source
        passes = 0
        while True:
            violations = self.check_fields_use_case.analyze_source(current, file_path)
            if violations is None:
                return current, passes, 0
            batches = [v.edits for v in violations if v.edits]
            if not batches or passes >= self.max_passes:
                return current, passes, len(violations)
            rewritten = self.fixer_gateway.apply_edits(current, batches)
            passes += 1
            if rewritten == current:
                logging.debug("No applicable edits left for %s after %d passes", file_path, passes)
                return current, passes, len(violations)
            current = rewritten

    def fix_file(self, file_path: str) -> FixResult:
        original = self.filesystem.read_text(file_path)
        fixed, passes, remaining = self.fix_source(original, file_path)
        result = FixResult(
            path=file_path, original=original, fixed=fixed, passes=passes, remaining=remaining
        )
        if result.modified and not self.dry_run:
            self.filesystem.write_text(file_path, fixed)
        return result

    def execute(self, target_path: str) -> list[FixResult]:
        """Correct every Python file under target_path. Returns results for modified files."""
        if self.telemetry:
            self.telemetry.step(f"Starting field definition fixes on {target_path}")
        results = []
        for file_path in self.filesystem.glob_python_files(target_path):
            result = self.fix_file(file_path)
            if not result.modified:
                continue
            results.append(result)
            if self.telemetry:
                verb = "Would repair" if self.dry_run else "Repaired"
                self.telemetry.step(f"{verb}: {file_path} ({result.passes} pass(es))")
        if self.telemetry:
            self.telemetry.step(f"Fix complete. Files repaired: {len(results)}")
        return results
