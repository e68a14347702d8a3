"""Node model for GraphQL documents.

This module defines the immutable dataclasses that a builder accumulates
and the serializer walks: selections (leaf fields, nested objects,
fragment spreads, inline fragments), directives, variable definitions and
fragment definitions.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Union

from pydantic import BaseModel


class _Unset:
    """Marker for an argument that should be left out of the document."""

    _instance: "_Unset | None" = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()


@dataclass(frozen=True)
class Variable:
    """Reference to a document-level variable, rendered as ``$name``."""
    name: str

    def __str__(self) -> str:
        return f"${self.name}"


# Argument values form a closed recursive sum. Pydantic models are rendered
# through their dumped mapping.
Value = Union[
    str, int, float, bool, None, Variable, BaseModel,
    list["Value"], tuple["Value", ...], Mapping[str, "Value"],
]


@dataclass(frozen=True)
class Directive:
    """A directive such as ``@include(if: $flag)``."""
    name: str
    args: Mapping[str, Value] | None = None


@dataclass(frozen=True)
class Leaf:
    """A scalar or terminal field selection."""
    name: str
    alias: str | None = None
    args: Mapping[str, Value] | None = None
    directives: tuple[Directive, ...] = ()


@dataclass(frozen=True)
class ObjectNode:
    """A field with its own selection set."""
    name: str
    alias: str | None = None
    args: Mapping[str, Value] | None = None
    directives: tuple[Directive, ...] = ()
    children: tuple["Node", ...] = ()


@dataclass(frozen=True)
class FragmentSpread:
    """A ``...Name`` reference to a named fragment."""
    name: str
    directives: tuple[Directive, ...] = ()


@dataclass(frozen=True)
class InlineFragment:
    """An ``... on Type { ... }`` selection."""
    type_condition: str
    directives: tuple[Directive, ...] = ()
    children: tuple["Node", ...] = ()


Node = Union[Leaf, ObjectNode, FragmentSpread, InlineFragment]


@dataclass(frozen=True)
class VariableDefinition:
    """Type (and optional default) of an operation variable."""
    type: str
    default_value: str | None = None


@dataclass(frozen=True)
class FragmentDefinition:
    """A named fragment declared at the operation level."""
    name: str
    type_condition: str
    children: tuple[Node, ...] = ()
    directives: tuple[Directive, ...] = ()


def normalize_directives(value: Any) -> tuple[Directive, ...]:
    """Turn a directive input into a tuple of Directive objects.

    Accepts a mapping ``{name: args}`` where each key becomes one directive,
    or a sequence of ready Directive objects. A non-mapping value is wrapped
    as ``{"value": <text>}``, so ``{"cached": 60}`` becomes
    ``@cached(value: 60)``.
    """
    if not value:
        return ()
    if isinstance(value, Directive):
        return (value,)
    if isinstance(value, (list, tuple)):
        for item in value:
            if not isinstance(item, Directive):
                raise TypeError(f"Unsupported directive: {item!r}")
        return tuple(value)
    if isinstance(value, Mapping):
        directives = []
        for name, args in value.items():
            if isinstance(args, Mapping):
                directives.append(Directive(name=name, args=dict(args)))
            else:
                directives.append(Directive(name=name, args={"value": scalar_text(args)}))
        return tuple(directives)
    return ()


def scalar_text(value: Any) -> str:
    """Plain text of a scalar, spelled the way GraphQL spells literals."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
