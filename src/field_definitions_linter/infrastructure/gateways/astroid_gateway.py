"""Astroid Gateway - parsing and source access for the declaration tree."""

import logging
from pathlib import Path
from typing import Optional

import astroid

from field_definitions_linter.domain.protocols import AstroidProtocol


class AstroidGateway(AstroidProtocol):
    """Infrastructure implementation of AstroidProtocol."""

    def parse_source(self, source: str, file_path: str = "") -> Optional[astroid.nodes.Module]:
        """Parse source text. Returns None when it is not valid Python."""
        try:
            return astroid.parse(source, path=file_path or None)
        except astroid.AstroidSyntaxError as exc:
            logging.debug("Skipping %s: %s", file_path or "<string>", exc)
            return None

    def parse_file(self, file_path: str) -> Optional[astroid.nodes.Module]:
        """Parse a file and return the astroid Module node."""
        path = Path(file_path)
        if not path.exists():
            return None
        return self.parse_source(path.read_text(encoding="utf-8"), file_path)

