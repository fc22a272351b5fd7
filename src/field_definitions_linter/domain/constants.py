"""
Field Definitions: node shapes, option names and the rule registry.
"""

from field_definitions_linter.domain.registry_types import RuleRegistryEntry

# Declaration shapes recognized inside a class body.
FIELD_CALL_NAME: str = "field"
SIGNATURE_CALL_NAME: str = "sig"

# Field options that replace the default resolver method.
RESOLVER_OVERRIDE_OPTIONS: frozenset[str] = frozenset({"resolver", "method", "hash_key"})
RESOLVER_METHOD_OPTION: str = "resolver_method"

TOOL_SECTION_NAME: str = "field-definitions"
RULE_PREFIX: str = "field-definitions."

DEFAULT_MAX_FIX_PASSES: int = 10

GROUP_DEFS_MSG: str = "Group all field definitions together."
RESOLVER_AFTER_FIELD_MSG: str = "Define resolver method after field definition."
RESOLVER_AFTER_LAST_FIELD_MSG: str = (
    "Define resolver method after last field definition sharing resolver method."
)
MULTIPLE_FIELD_DEFINITIONS_MSG: str = "Group multiple field definitions together."

RULE_REGISTRY: dict[str, RuleRegistryEntry] = {
    f"{RULE_PREFIX}W9701": {
        "symbol": "field-definitions-ungrouped",
        "message_template": GROUP_DEFS_MSG,
        "display_name": "All field definitions must form one contiguous run.",
        "fixable": True,
    },
    f"{RULE_PREFIX}W9702": {
        "symbol": "resolver-after-field-definition",
        "message_template": RESOLVER_AFTER_FIELD_MSG,
        "display_name": "A resolver method must directly follow its field definition.",
        "fixable": True,
    },
    f"{RULE_PREFIX}W9703": {
        "symbol": "resolver-after-last-field-definition",
        "message_template": RESOLVER_AFTER_LAST_FIELD_MSG,
        "display_name": (
            "A shared resolver method must directly follow the last field using it."
        ),
        "fixable": True,
    },
    f"{RULE_PREFIX}W9704": {
        "symbol": "field-definitions-multiple-ungrouped",
        "message_template": MULTIPLE_FIELD_DEFINITIONS_MSG,
        "display_name": "Definitions of the same field must be adjacent.",
        "fixable": True,
    },
    f"{RULE_PREFIX}W9711": {
        "symbol": "multiple-field-definitions",
        "message_template": MULTIPLE_FIELD_DEFINITIONS_MSG,
        "display_name": "Definitions of the same field must be adjacent.",
        "fixable": True,
    },
}
