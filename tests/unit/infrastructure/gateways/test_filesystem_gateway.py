"""Unit tests for FileSystemGateway."""

from pathlib import Path

from field_definitions_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway


class TestFileSystemGateway:
    def test_glob_python_files_sorted_and_filtered(self, tmp_path: Path) -> None:
        (tmp_path / "b.py").write_text("")
        (tmp_path / "notes.txt").write_text("")
        (tmp_path / "pkg").mkdir()
        (tmp_path / "pkg" / "a.py").write_text("")
        (tmp_path / "skipme").mkdir()
        (tmp_path / "skipme" / "c.py").write_text("")

        files = FileSystemGateway(exclude_paths=["skipme"]).glob_python_files(str(tmp_path))

        root = tmp_path.resolve()
        assert files == [str(root / "b.py"), str(root / "pkg" / "a.py")]

    def test_glob_single_file(self, tmp_path: Path) -> None:
        path = tmp_path / "one.py"
        path.write_text("")
        gateway = FileSystemGateway()
        assert gateway.glob_python_files(str(path)) == [str(path.resolve())]
        assert gateway.glob_python_files(str(tmp_path / "notes.txt")) == []

    def test_read_and_write_text(self, tmp_path: Path) -> None:
        path = tmp_path / "one.py"
        gateway = FileSystemGateway()
        gateway.write_text(str(path), "x = 'é'\n")
        assert gateway.read_text(str(path)) == "x = 'é'\n"
