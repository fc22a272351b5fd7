import textwrap

import astroid  # type: ignore[import-untyped]

from field_definitions_linter.domain.config import ConfigurationLoader
from field_definitions_linter.domain.edits import EditApplier, EditBatchSelector
from field_definitions_linter.domain.entities import Style
from field_definitions_linter.domain.source import SourceBuffer


class MockLinter:
    def __init__(self) -> None:
        self.messages = []
        self.config = type("config", (), {})()
        self.current_name = "test_module"

    def add_message(self, msg_id, *_args, **_kwargs):
        self.messages.append(msg_id)

    def _register_options_provider(self, provider):
        pass


def run_checker(checker_cls, code, filename="test.py", **checker_kwargs) -> list:
    linter = MockLinter()
    checker = checker_cls(linter, **checker_kwargs)
    tree = astroid.parse(code)
    tree.file = filename

    def _walk(node):
        node_name = node.__class__.__name__.lower()

        if hasattr(checker, f"visit_{node_name}"):
            getattr(checker, f"visit_{node_name}")(node)

        for child in node.get_children():
            _walk(child)

        if hasattr(checker, f"leave_{node_name}"):
            getattr(checker, f"leave_{node_name}")(node)

    _walk(tree)
    return linter.messages


def parse_with_buffer(code):
    """Parse dedented code; the buffer holds exactly the text astroid saw."""
    source = textwrap.dedent(code)
    return astroid.parse(source), SourceBuffer(source)


def first_class(module):
    return next(module.nodes_of_class(astroid.nodes.ClassDef))


def check_rule(rule, code, with_buffer=True) -> list:
    module, buffer = parse_with_buffer(code)
    return [
        violation
        for class_node in module.nodes_of_class(astroid.nodes.ClassDef)
        for violation in rule.check(class_node, buffer if with_buffer else None)
    ]


def apply_violations(code, violations) -> str:
    """Apply every compatible edit list of violations to the dedented code."""
    selector = EditBatchSelector.select(v.edits for v in violations)
    return EditApplier.apply(textwrap.dedent(code), selector.accepted)


def config_for(style=Style.GROUP_DEFINITIONS, **overrides) -> ConfigurationLoader:
    """ConfigurationLoader for one style, as if read from [tool.field-definitions]."""
    config = {"style": style.value}
    config.update(overrides)
    return ConfigurationLoader(config)
