"""Terminal telemetry: prefixed, colored status lines for the command line tool."""

import logging

import typer


class ProjectTelemetry:
    """TelemetryPort implementation printing through typer.secho."""

    def __init__(self, project_name: str, color: str, welcome: str) -> None:
        self.project_name = project_name
        self.color = color
        self.welcome = welcome

    def _prefix(self) -> str:
        return f"[{self.project_name}]"

    def handshake(self) -> None:
        typer.secho(f"{self._prefix()} {self.welcome}", fg=self.color, bold=True, err=True)

    def step(self, message: str) -> None:
        logging.debug(message)
        typer.secho(f"{self._prefix()} {message}", fg=self.color, err=True)

    def warning(self, message: str) -> None:
        logging.warning(message)
        typer.secho(f"{self._prefix()} WARNING: {message}", fg=typer.colors.YELLOW, err=True)

    def error(self, message: str) -> None:
        logging.error(message)
        typer.secho(f"{self._prefix()} ERROR: {message}", fg=typer.colors.RED, err=True)
