"""Domain models for rules and violations."""

from collections.abc import Iterator
from dataclasses import dataclass

__all__ = [
    "Checkable",
    "Violation",
]

from typing import TYPE_CHECKING, Protocol

import astroid

from field_definitions_linter.domain.entities import EditOperation

if TYPE_CHECKING:
    from field_definitions_linter.domain.source import SourceBuffer


@dataclass(frozen=True)
class Violation:
    """A rule violation with code, message, location and its correction, if any."""

    code: str
    message: str
    location: str
    node: astroid.nodes.NodeNG
    edits: tuple[EditOperation, ...] = ()
    """Insert/remove pairs against the original source. Empty means report-only."""

    @property
    def fixable(self) -> bool:
        return bool(self.edits)

    @property
    def lineno(self) -> int:
        return getattr(self.node, "lineno", 0) or 0

    @property
    def col_offset(self) -> int:
        return getattr(self.node, "col_offset", 0) or 0

    @staticmethod
    def _location_from_node(node: astroid.nodes.NodeNG) -> str:
        """Compute path:lineno:col_offset from an astroid node. Used by from_node."""
        root = node.root()
        path = getattr(root, "file", "") or ""
        lineno = getattr(node, "lineno", 0)
        col_offset = getattr(node, "col_offset", 0)
        return f"{path}:{lineno}:{col_offset}"

    @classmethod
    def from_node(
        cls,
        *,
        code: str,
        message: str,
        node: astroid.nodes.NodeNG,
        edits: list[EditOperation] | None = None,
    ) -> "Violation":
        """Build a Violation with location derived from node. Prefer over manual location=."""
        return cls(
            code=code,
            message=message,
            location=cls._location_from_node(node),
            node=node,
            edits=tuple(edits or ()),
        )


class Checkable(Protocol):
    """Per-container check: given a class node, lazily yield violations."""

    codes: tuple[str, ...]
    description: str

    def check(
        self, node: astroid.nodes.ClassDef, buffer: "SourceBuffer | None" = None
    ) -> Iterator[Violation]:
        """Analyze one container. Without a buffer, violations carry no edits."""
        ...
