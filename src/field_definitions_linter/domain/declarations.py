"""Typed views over the class-body nodes that declare schema fields."""

from dataclasses import dataclass
from functools import cached_property

import astroid

from field_definitions_linter.domain.constants import (
    FIELD_CALL_NAME,
    RESOLVER_METHOD_OPTION,
    RESOLVER_OVERRIDE_OPTIONS,
    SIGNATURE_CALL_NAME,
)


class DeclarationMatcher:
    """Fixed set of node-shape predicates. Anything else is ignored, never an error."""

    @staticmethod
    def is_call_to(node: astroid.nodes.NodeNG | None, name: str) -> bool:
        return (
            isinstance(node, astroid.nodes.Call)
            and isinstance(node.func, astroid.nodes.Name)
            and node.func.name == name
        )

    @staticmethod
    def is_field_call(node: astroid.nodes.NodeNG | None) -> bool:
        """field("name", ...) with a string literal name."""
        if not DeclarationMatcher.is_call_to(node, FIELD_CALL_NAME):
            return False
        args = node.args or []
        return (
            bool(args)
            and isinstance(args[0], astroid.nodes.Const)
            and isinstance(args[0].value, str)
        )

    @staticmethod
    def is_field_definition(node: astroid.nodes.NodeNG) -> bool:
        """Bare expression statement: field("name", ...)."""
        return isinstance(node, astroid.nodes.Expr) and DeclarationMatcher.is_field_call(node.value)

    @staticmethod
    def is_field_definition_with_block(node: astroid.nodes.NodeNG) -> bool:
        """with field("name", ...): followed by an argument block."""
        return (
            isinstance(node, astroid.nodes.With)
            and len(node.items) == 1
            and DeclarationMatcher.is_field_call(node.items[0][0])
        )

    @staticmethod
    def is_field_declaration(node: astroid.nodes.NodeNG) -> bool:
        return DeclarationMatcher.is_field_definition(
            node
        ) or DeclarationMatcher.is_field_definition_with_block(node)

    @staticmethod
    def is_method_definition(node: astroid.nodes.NodeNG) -> bool:
        # AsyncFunctionDef subclasses FunctionDef.
        return isinstance(node, astroid.nodes.FunctionDef)

    @staticmethod
    def is_signature(node: astroid.nodes.NodeNG | None) -> bool:
        """sig(...) expression statement annotating the next method."""
        return isinstance(node, astroid.nodes.Expr) and DeclarationMatcher.is_call_to(
            node.value, SIGNATURE_CALL_NAME
        )

    @staticmethod
    def is_string_literal(node: astroid.nodes.NodeNG | None) -> bool:
        return (
            isinstance(node, astroid.nodes.Expr)
            and isinstance(node.value, astroid.nodes.Const)
            and isinstance(node.value.value, str)
        )

    @staticmethod
    def field_call(node: astroid.nodes.NodeNG) -> astroid.nodes.Call | None:
        """The call to compare for a declaration statement: the block's first child if wrapped."""
        if DeclarationMatcher.is_field_definition(node):
            return node.value
        if DeclarationMatcher.is_field_definition_with_block(node):
            return node.items[0][0]
        return None


class FieldKwargs:
    """Keyword options passed to a field call."""

    def __init__(self, call: astroid.nodes.Call) -> None:
        self._options: dict[str, astroid.nodes.NodeNG] = {
            keyword.arg: keyword.value
            for keyword in (call.keywords or [])
            if keyword.arg is not None
        }

    @property
    def overrides_resolver(self) -> bool:
        """True when resolver=, method= or hash_key= replaces the resolver method."""
        return any(option in self._options for option in RESOLVER_OVERRIDE_OPTIONS)

    @property
    def resolver_method_name(self) -> str | None:
        value = self._options.get(RESOLVER_METHOD_OPTION)
        if isinstance(value, astroid.nodes.Const) and isinstance(value.value, str):
            return value.value
        return None


@dataclass(frozen=True)
class FieldDeclaration:
    """One field(...) call and the class-body statement that carries it."""

    node: astroid.nodes.Call

    @property
    def name(self) -> str:
        return str(self.node.args[0].value)

    @cached_property
    def kwargs(self) -> FieldKwargs:
        return FieldKwargs(self.node)

    @property
    def statement(self) -> astroid.nodes.NodeNG:
        """The Expr or With statement sitting directly in the class body."""
        return self.node.parent

    @property
    def attached_block(self) -> astroid.nodes.With | None:
        statement = self.statement
        return statement if isinstance(statement, astroid.nodes.With) else None

    @property
    def resolver_method_name(self) -> str | None:
        """Expected resolver method name; None when an option overrides the resolver."""
        if self.kwargs.overrides_resolver:
            return None
        return self.kwargs.resolver_method_name or self.name


@dataclass(frozen=True)
class ResolverMethod:
    """A method in the container whose name matches a field's resolver name."""

    node: astroid.nodes.FunctionDef
    attached_annotation: astroid.nodes.Expr | None = None

    @property
    def method_name(self) -> str:
        return str(self.node.name)


class SchemaMember:
    """Class-like container: the ordered direct children of one class body."""

    def __init__(self, node: astroid.nodes.ClassDef) -> None:
        self.node = node

    @property
    def body(self) -> list[astroid.nodes.NodeNG]:
        return list(self.node.body)

    def fields(self) -> list[FieldDeclaration]:
        """Every field declaration in source order, bare or with a block."""
        declarations = []
        for statement in self.node.body:
            call = DeclarationMatcher.field_call(statement)
            if call is not None:
                declarations.append(FieldDeclaration(call))
        return declarations

    def find_method_definition(self, method_name: str | None) -> ResolverMethod | None:
        if method_name is None:
            return None
        for statement in self.node.body:
            if DeclarationMatcher.is_method_definition(statement) and statement.name == method_name:
                return ResolverMethod(statement, self.signature_for(statement))
        return None

    def previous_statement(self, node: astroid.nodes.NodeNG) -> astroid.nodes.NodeNG | None:
        body = self.node.body
        for index, statement in enumerate(body):
            if statement is node:
                return body[index - 1] if index > 0 else None
        return None

    def next_statement(self, node: astroid.nodes.NodeNG) -> astroid.nodes.NodeNG | None:
        body = self.node.body
        for index, statement in enumerate(body):
            if statement is node:
                return body[index + 1] if index + 1 < len(body) else None
        return None

    def signature_for(self, node: astroid.nodes.NodeNG) -> astroid.nodes.Expr | None:
        """The sig(...) statement right above node, with no blank line in between."""
        previous = self.previous_statement(node)
        if not DeclarationMatcher.is_signature(previous):
            return None
        first_line = node.lineno
        decorators = getattr(node, "decorators", None)
        if decorators is not None and decorators.nodes:
            first_line = min(first_line, min(d.lineno for d in decorators.nodes))
        if previous.end_lineno is None or previous.end_lineno + 1 != first_line:
            return None
        return previous

    def trailing_literal_for(self, node: astroid.nodes.NodeNG) -> astroid.nodes.Expr | None:
        """Attribute docstring directly below a field declaration."""
        if not DeclarationMatcher.is_field_declaration(node):
            return None
        following = self.next_statement(node)
        if not DeclarationMatcher.is_string_literal(following):
            return None
        if node.end_lineno is None or following.lineno != node.end_lineno + 1:
            return None
        return following
