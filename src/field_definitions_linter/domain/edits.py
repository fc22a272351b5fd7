"""Batch selection and single-pass application of text edits."""

import logging
from collections.abc import Iterable, Sequence

from field_definitions_linter.domain.entities import EditOperation, SourceRange


class EditBatchSelector:
    """
    Picks the per-violation edit lists that can be applied together.

    A list is skipped when one of its removals overlaps an accepted removal
    or anchor, or one of its anchors overlaps an accepted removal. Skipped
    lists are expected to show up again on the next pass.
    """

    def __init__(self) -> None:
        self._removals: list[SourceRange] = []
        self._anchors: list[SourceRange] = []
        self.accepted: list[EditOperation] = []
        self.batches: list[Sequence[EditOperation]] = []
        self.skipped: int = 0

    @staticmethod
    def _is_consistent(batch: Sequence[EditOperation]) -> bool:
        removals = [op.range for op in batch if op.is_removal]
        anchors = [op.range for op in batch if not op.is_removal]
        for i, first in enumerate(removals):
            if any(first.overlaps(second) for second in removals[i + 1:]):
                return False
            if any(first.overlaps(anchor) for anchor in anchors):
                return False
        return True

    def _conflicts(self, batch: Sequence[EditOperation]) -> bool:
        for op in batch:
            if op.is_removal:
                if any(op.range.overlaps(r) for r in self._removals):
                    return True
                if any(op.range.overlaps(a) for a in self._anchors):
                    return True
            elif any(op.range.overlaps(r) for r in self._removals):
                return True
        return False

    def offer(self, batch: Sequence[EditOperation]) -> bool:
        """Accept batch if it fits with everything accepted so far."""
        if not batch:
            return False
        if not self._is_consistent(batch) or self._conflicts(batch):
            self.skipped += 1
            logging.debug("Skipping edit batch of %d operations: overlaps accepted edits", len(batch))
            return False
        for op in batch:
            (self._removals if op.is_removal else self._anchors).append(op.range)
        self.accepted.extend(batch)
        self.batches.append(batch)
        return True

    @classmethod
    def select(cls, batches: Iterable[Sequence[EditOperation]]) -> "EditBatchSelector":
        selector = cls()
        for batch in batches:
            selector.offer(batch)
        return selector


class EditApplier:
    """Applies non-overlapping edits to an immutable text in one pass."""

    @staticmethod
    def apply(text: str, operations: Sequence[EditOperation]) -> str:
        """
        Splice edits from the end of the text towards its start.

        At one position removals go first, and insertions are applied in
        reverse so the result reads in emission order.
        """
        ordered = sorted(
            enumerate(operations),
            key=lambda item: (item[1].position, item[1].is_removal, item[0]),
            reverse=True,
        )
        result = text
        for _, op in ordered:
            if op.is_removal:
                result = result[:op.range.start] + result[op.range.end:]
            else:
                result = result[:op.position] + op.text + result[op.position:]
        return result
