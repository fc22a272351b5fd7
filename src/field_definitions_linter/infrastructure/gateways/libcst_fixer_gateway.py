"""LibCST backed Fixer Gateway."""

import logging
from collections.abc import Sequence

import libcst as cst

from field_definitions_linter.domain.edits import EditApplier, EditBatchSelector
from field_definitions_linter.domain.entities import EditOperation
from field_definitions_linter.domain.protocols import FixerGatewayProtocol


class LibCSTFixerGateway(FixerGatewayProtocol):
    """Gateway for applying text edits, accepting only results LibCST can still parse."""

    @staticmethod
    def _parses(source: str) -> bool:
        try:
            cst.parse_module(source)
        except cst.ParserSyntaxError as exc:
            logging.warning("Discarding edit batch whose rewrite no longer parses: %s", exc)
            return False
        return True

    def apply_edits(self, source: str, batches: Sequence[Sequence[EditOperation]]) -> str:
        """
        Apply every compatible batch to source in one pass.

        When the combined rewrite does not parse, batches are retried one at
        a time and only those that keep the module parseable are applied.
        Returns source unchanged when nothing applies.
        """
        selector = EditBatchSelector.select(batches)
        if not selector.accepted:
            return source
        rewritten = EditApplier.apply(source, selector.accepted)
        if self._parses(rewritten):
            return rewritten

        kept: list[EditOperation] = []
        result = source
        for batch in selector.batches:
            candidate = EditApplier.apply(source, [*kept, *batch])
            if self._parses(candidate):
                kept.extend(batch)
                result = candidate
        return result
