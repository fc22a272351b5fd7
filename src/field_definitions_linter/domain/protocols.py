from collections.abc import Sequence
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    import astroid

    from field_definitions_linter.domain.entities import EditOperation


class AstroidProtocol(Protocol):
    def parse_source(self, source: str, file_path: str = "") -> Optional["astroid.nodes.Module"]:
        """Parse source text. Returns None when it is not valid Python."""
        ...

    def parse_file(self, file_path: str) -> Optional["astroid.nodes.Module"]:
        """Parse a file and return the astroid Module node."""
        ...


class FixerGatewayProtocol(Protocol):
    """Protocol for applying code fixes. Implementers accept only EditOperation batches at boundary."""

    def apply_edits(self, source: str, batches: Sequence[Sequence["EditOperation"]]) -> str:
        """Apply every compatible batch to source in one pass. Returns source unchanged on failure."""
        ...


class FileSystemProtocol(Protocol):
    def glob_python_files(self, path: str) -> list[str]: ...
    def read_text(self, path: str, encoding: str = "utf-8") -> str: ...
    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None: ...


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def handshake(self) -> None: ...
