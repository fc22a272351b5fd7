"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

from pathlib import Path

from field_definitions_linter.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def __init__(self, exclude_paths: list[str] | None = None) -> None:
        self._exclude_paths = exclude_paths or []

    def _is_excluded(self, path: Path) -> bool:
        text = path.as_posix()
        return any(fragment in text for fragment in self._exclude_paths)

    def glob_python_files(self, path: str) -> list[str]:
        """Get all Python files in path (recursive if directory), sorted."""
        path_obj = Path(path).resolve()
        if path_obj.is_dir():
            return sorted(
                str(p) for p in path_obj.glob("**/*.py") if not self._is_excluded(p)
            )
        return [str(path_obj)] if path_obj.suffix == ".py" else []

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content of a file."""
        return Path(path).read_text(encoding=encoding)

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        Path(path).write_text(content, encoding=encoding)
