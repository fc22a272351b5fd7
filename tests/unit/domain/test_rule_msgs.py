"""Unit tests for RuleMsgBuilder over the field definitions registry."""

import pytest

from field_definitions_linter.domain.constants import GROUP_DEFS_MSG, RULE_REGISTRY
from field_definitions_linter.domain.rule_msgs import RuleMsgBuilder


@pytest.mark.unit
class TestRuleMsgBuilder:
    def test_build_msgs_for_codes(self) -> None:
        msgs = RuleMsgBuilder.build_msgs_for_codes(RULE_REGISTRY, ["W9701", "W9711"])
        assert msgs["W9701"] == (
            GROUP_DEFS_MSG,
            "field-definitions-ungrouped",
            "All field definitions must form one contiguous run.",
        )
        assert msgs["W9711"][1] == "multiple-field-definitions"

    def test_unknown_codes_are_left_out(self) -> None:
        assert RuleMsgBuilder.build_msgs_for_codes(RULE_REGISTRY, ["W0000"]) == {}

    def test_get_entry_by_symbol(self) -> None:
        entry = RuleMsgBuilder.get_entry(RULE_REGISTRY, "resolver-after-field-definition")
        assert entry is not None
        assert entry["fixable"] is True

    def test_symbol_for(self) -> None:
        assert RuleMsgBuilder.symbol_for(RULE_REGISTRY, "W9703") == (
            "resolver-after-last-field-definition"
        )
        assert RuleMsgBuilder.symbol_for(RULE_REGISTRY, "W0000") == "W0000"

    def test_symbols_are_unique(self) -> None:
        symbols = [entry["symbol"] for entry in RULE_REGISTRY.values()]
        assert len(symbols) == len(set(symbols))
