from dataclasses import dataclass
from enum import Enum


class Style(Enum):
    """Enforced layout of field definitions and their resolver methods."""
    GROUP_DEFINITIONS = "group_definitions"
    DEFINE_RESOLVER_AFTER_DEFINITION = "define_resolver_after_definition"

    @classmethod
    def choices(cls) -> list[str]:
        return [style.value for style in cls]


class FieldDefinitionsInvariantError(RuntimeError):
    """Internal defect: an analyzer reached a state its own inputs rule out."""


@dataclass(frozen=True, order=True)
class SourceRange:
    """Half-open character range [start, end) into the original source text."""
    start: int
    end: int

    def overlaps(self, other: "SourceRange") -> bool:
        return self.start < other.end and other.start < self.end


class EditType(Enum):
    """Types of text edits the corrector can apply."""
    INSERT_AFTER = "insert_after"
    REMOVE = "remove"


@dataclass(frozen=True)
class EditOperation:
    """
    Pure data structure describing one text edit against the original buffer.

    Rules emit these instead of mutating source. The fixer gateway applies a
    whole batch in a single pass, so every range refers to unmodified text.
    """
    edit_type: EditType
    range: SourceRange
    text: str = ""

    @classmethod
    def insert_after(cls, anchor: SourceRange, text: str) -> "EditOperation":
        """Create an edit inserting text right after the anchor range."""
        return cls(edit_type=EditType.INSERT_AFTER, range=anchor, text=text)

    @classmethod
    def remove(cls, target: SourceRange) -> "EditOperation":
        """Create an edit deleting the target range."""
        return cls(edit_type=EditType.REMOVE, range=target)

    @property
    def is_removal(self) -> bool:
        return self.edit_type is EditType.REMOVE

    @property
    def position(self) -> int:
        """Offset in the original text where this edit takes effect."""
        return self.range.start if self.is_removal else self.range.end
