"""CLI entry points for field-defs - Thin Controller using Typer."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from field_definitions_linter.domain.config import ConfigurationLoader
from field_definitions_linter.domain.entities import Style
from field_definitions_linter.domain.protocols import (
    AstroidProtocol,
    FileSystemProtocol,
    FixerGatewayProtocol,
    TelemetryPort,
)
from field_definitions_linter.interface.reporters import ViolationReporter
from field_definitions_linter.use_cases.apply_fixes import ApplyFixesUseCase
from field_definitions_linter.use_cases.check_fields import CheckFieldsUseCase

_STYLE_HELP = f"Enforced style, overrides pyproject.toml ({', '.join(Style.choices())})"


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    reporter: ViolationReporter
    astroid_gateway: AstroidProtocol
    filesystem: FileSystemProtocol
    fixer_gateway: FixerGatewayProtocol


class CLIAppFactory:
    """Creates the Typer app. No top-level functions."""

    @staticmethod
    def resolve_target_path(path: Optional[Path]) -> str:
        """Resolve target path: explicit path, else src/ if exists, else '.' (public API)."""
        if path and str(path) != ".":
            return str(path)
        src_dir = Path.cwd() / "src"
        if src_dir.exists() and src_dir.is_dir():
            return "src"
        return "."

    @staticmethod
    def resolve_style(value: Optional[str]) -> Optional[Style]:
        if value is None:
            return None
        try:
            return Style(value)
        except ValueError:
            raise typer.BadParameter(
                f"unknown style {value!r}, expected one of: {', '.join(Style.choices())}",
                param_hint="--style",
            ) from None

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies. No Service Locator."""
        app = typer.Typer(
            name="field-defs",
            help="Keep field definitions and their resolver methods together.",
            add_completion=False,
        )

        def build_check_use_case(style: Optional[str]) -> CheckFieldsUseCase:
            return CheckFieldsUseCase(
                astroid_gateway=deps.astroid_gateway,
                filesystem=deps.filesystem,
                config_loader=deps.config_loader.with_style(CLIAppFactory.resolve_style(style)),
                telemetry=deps.telemetry,
            )

        @app.command()
        def check(
            path: Optional[Path] = typer.Argument(None, help="File or directory to check (default: src/ or .)"),  # noqa: B008
            style: Optional[str] = typer.Option(None, "--style", help=_STYLE_HELP),
            output_format: str = typer.Option("text", "--format", help="Output format: text or json"),
        ) -> None:
            """Report field definitions that are out of place."""
            deps.telemetry.handshake()
            if output_format not in ("text", "json"):
                raise typer.BadParameter("expected 'text' or 'json'", param_hint="--format")
            use_case = build_check_use_case(style)
            reports = use_case.execute(CLIAppFactory.resolve_target_path(path))
            deps.reporter.report_check(reports, output_format=output_format)
            if any(report.violations for report in reports):
                raise typer.Exit(code=1)

        @app.command()
        def fix(
            path: Optional[Path] = typer.Argument(None, help="File or directory to fix (default: src/ or .)"),  # noqa: B008
            style: Optional[str] = typer.Option(None, "--style", help=_STYLE_HELP),
            dry_run: bool = typer.Option(False, "--dry-run", help="Print a unified diff instead of writing files"),
        ) -> None:
            """Move field definitions and resolver methods into place."""
            deps.telemetry.handshake()
            check_use_case = build_check_use_case(style)
            use_case = ApplyFixesUseCase(
                check_fields_use_case=check_use_case,
                fixer_gateway=deps.fixer_gateway,
                filesystem=deps.filesystem,
                telemetry=deps.telemetry,
                max_passes=check_use_case.config_loader.max_fix_passes,
                dry_run=dry_run,
            )
            results = use_case.execute(CLIAppFactory.resolve_target_path(path))
            deps.reporter.report_fixes(results, dry_run=dry_run)

        return app
