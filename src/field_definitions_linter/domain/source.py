"""Range and text helpers over the original, immutable module source."""

import re

import astroid

from field_definitions_linter.domain.entities import SourceRange

_NEWLINE = re.compile("\n")


class SourceBuffer:
    """
    Read-only view of one module's source text.

    astroid reports columns as UTF-8 byte offsets; every range handed out
    here is in characters so it can slice the text directly.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._line_starts = [0] + [m.end() for m in _NEWLINE.finditer(text)]

    @property
    def text(self) -> str:
        return self._text

    @property
    def newline(self) -> str:
        """Line terminator used by the text, judged from its first line."""
        first = self._text.find("\n")
        return "\r\n" if first > 0 and self._text[first - 1] == "\r" else "\n"

    def offset(self, lineno: int, col_offset: int) -> int:
        """Convert a 1-based line and a UTF-8 byte column into a character offset."""
        start = self._line_starts[lineno - 1]
        end = self._line_starts[lineno] if lineno < len(self._line_starts) else len(self._text)
        line = self._text[start:end]
        if line.isascii():
            return start + col_offset
        prefix = line.encode("utf-8")[:col_offset]
        return start + len(prefix.decode("utf-8", errors="ignore"))

    def slice(self, source_range: SourceRange) -> str:
        return self._text[source_range.start:source_range.end]

    def node_range(self, node: astroid.nodes.NodeNG) -> SourceRange | None:
        """Full source range of a statement, decorators included. None without positions."""
        lineno = node.lineno
        end_lineno = getattr(node, "end_lineno", None)
        end_col_offset = getattr(node, "end_col_offset", None)
        if lineno is None or end_lineno is None or end_col_offset is None:
            return None
        decorators = getattr(node, "decorators", None)
        if decorators is not None and decorators.nodes:
            lineno = min(lineno, min(d.lineno for d in decorators.nodes))
        return SourceRange(
            self.offset(lineno, node.col_offset),
            self.offset(end_lineno, end_col_offset),
        )

    def range_including_literal(
        self, node: astroid.nodes.NodeNG, literal: astroid.nodes.NodeNG | None
    ) -> SourceRange | None:
        """Range of node, stretched over the attribute docstring that trails it."""
        node_range = self.node_range(node)
        if node_range is None or literal is None:
            return node_range
        literal_range = self.node_range(literal)
        if literal_range is None:
            return None
        return SourceRange(node_range.start, max(node_range.end, literal_range.end))

    def range_with_surrounding_space(self, source_range: SourceRange) -> SourceRange:
        """Extend a range to the left over spaces and tabs, then over newlines."""
        start = source_range.start
        while start > 0 and self._text[start - 1] in " \t":
            start -= 1
        while start > 0 and self._text[start - 1] in "\r\n":
            start -= 1
        return SourceRange(start, source_range.end)

    def rest_of_line_is_blank(self, position: int) -> bool:
        """True when only whitespace or a comment follows position on its line."""
        line_end = self._text.find("\n", position)
        if line_end == -1:
            line_end = len(self._text)
        rest = self._text[position:line_end].strip()
        return not rest or rest.startswith("#")

    def indent(self, node: astroid.nodes.NodeNG) -> str:
        """Leading whitespace of the line a statement starts on."""
        node_range = self.node_range(node)
        if node_range is None:
            return ""
        line_start = self._text.rfind("\n", 0, node_range.start) + 1
        prefix = self._text[line_start:node_range.start]
        return prefix if not prefix.strip() else " " * len(prefix)
