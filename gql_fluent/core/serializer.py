"""Serializer for GraphQL documents.

Walks the node model and renders it to text in one of two modes:

- compact: a document on as few lines as possible, selections separated
  by single spaces
- pretty: one selection per line, indented by ``level * indent``

Both modes produce the same tokens in the same order; only whitespace
differs.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping

from pydantic import BaseModel

from .nodes import (
    Directive,
    FragmentDefinition,
    FragmentSpread,
    InlineFragment,
    Leaf,
    Node,
    ObjectNode,
    Value,
    Variable,
    VariableDefinition,
    scalar_text,
)

_VARIABLE_REF = re.compile(r"\$[_A-Za-z0-9]+")
_NUMERIC_LITERAL = re.compile(r"-?[0-9]+(\.[0-9]+)?([eE][+-]?[0-9]+)?")


@dataclass
class BuildOptions:
    """Rendering options for a document."""
    pretty: bool = False
    indent: str = "  "


def stringify_value(value: Value) -> str:
    """Render an argument value as GraphQL text.

    Strings are quoted unless they are a variable reference (``$name``) or
    look like a number. Quoting does not escape anything, so callers must
    pre-escape embedded double quotes.

    Examples:
        stringify_value("FR")                  # '"FR"'
        stringify_value("$imageFormat")        # '$imageFormat'
        stringify_value(250)                   # '250'
        stringify_value({"currency": "EUR"})   # '{ currency: "EUR" }'
    """
    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True, exclude_none=True)

    if isinstance(value, Variable):
        return str(value)
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(stringify_value(item) for item in value) + "]"
    if isinstance(value, Mapping):
        if not value:
            return "{}"
        inner = ", ".join(f"{key}: {stringify_value(item)}" for key, item in value.items())
        return f"{{ {inner} }}"
    if isinstance(value, str):
        if _VARIABLE_REF.fullmatch(value) or _NUMERIC_LITERAL.fullmatch(value):
            return value
        return f'"{value}"'
    return scalar_text(value)


def format_args(args: Mapping[str, Value] | None) -> str:
    """Build an argument list: (first: 10, after: $cursor)"""
    if not args:
        return ""
    return "(" + ", ".join(f"{key}: {stringify_value(value)}" for key, value in args.items()) + ")"


def format_directive(directive: Directive) -> str:
    """Render one directive, e.g. @include(if: $withImage)."""
    return f"@{directive.name}{format_args(directive.args)}"


def format_directives(directives: Iterable[Directive]) -> str:
    """Space-join directives in declaration order; empty string if none."""
    return " ".join(format_directive(directive) for directive in directives)


def format_variables(variables: Mapping[str, VariableDefinition]) -> str:
    """Build the variable declaration part: ($first: Int!, $format: String! = JPG)"""
    if not variables:
        return ""
    decls = []
    for name, definition in variables.items():
        decl = f"${name}: {definition.type}"
        if definition.default_value is not None:
            decl += f" = {definition.default_value}"
        decls.append(decl)
    return "(" + ", ".join(decls) + ")"


def _with_directives(head: str, directives: Iterable[Directive]) -> str:
    rendered = format_directives(directives)
    return f"{head} {rendered}" if rendered else head


def _field_head(name: str, alias: str | None, args, directives) -> str:
    base = f"{alias}: {name}" if alias else name
    return _with_directives(f"{base}{format_args(args)}", directives)


class Serializer:
    """Renders nodes, fragments and whole documents to text."""

    def __init__(self, options: BuildOptions | None = None):
        self.options = options or BuildOptions()

    def render_nodes(self, nodes: Iterable[Node], level: int = 0) -> str:
        """Render a selection set body, one entry per node in order."""
        separator = "\n" if self.options.pretty else " "
        return separator.join(self.render_node(node, level) for node in nodes)

    def render_node(self, node: Node, level: int = 0) -> str:
        """Render a single node at the given depth."""
        if isinstance(node, Leaf):
            return self._pad(level) + _field_head(node.name, node.alias, node.args, node.directives)
        if isinstance(node, ObjectNode):
            head = _field_head(node.name, node.alias, node.args, node.directives)
            return self._block(head, node.children, level)
        if isinstance(node, FragmentSpread):
            return self._pad(level) + _with_directives(f"...{node.name}", node.directives)
        if isinstance(node, InlineFragment):
            head = _with_directives(f"... on {node.type_condition}", node.directives)
            return self._block(head, node.children, level)
        raise TypeError(f"Unknown node type: {type(node).__name__}")

    def render_fragment(self, fragment: FragmentDefinition) -> str:
        """Render a top-level fragment definition."""
        head = _with_directives(
            f"fragment {fragment.name} on {fragment.type_condition}", fragment.directives
        )
        return self._block(head, fragment.children, 0)

    def render_document(
        self,
        operation_type: str,
        name: str | None,
        variables: Mapping[str, VariableDefinition],
        directives: Iterable[Directive],
        selections: Iterable[Node],
        fragments: Iterable[FragmentDefinition] = (),
    ) -> str:
        """Assemble the operation header, its selection set and any fragments."""
        header = operation_type
        if name:
            header += f" {name}"
        header += format_variables(variables)
        header = _with_directives(header, directives)

        document = self._block(header, selections, 0)
        for fragment in fragments:
            document += "\n" + self.render_fragment(fragment)
        return document

    def _pad(self, level: int) -> str:
        return self.options.indent * level if self.options.pretty else ""

    def _block(self, head: str, children: Iterable[Node], level: int) -> str:
        """Render ``head { children }`` with children one level deeper."""
        body = self.render_nodes(children, level + 1)
        if self.options.pretty:
            pad = self._pad(level)
            return f"{pad}{head} {{\n{body}\n{pad}}}"
        return f"{head} {{ {body} }}"
