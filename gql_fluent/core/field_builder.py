"""Fluent collector for the selections of one selection set.

Each call appends one node to the builder, in call order. Nested shapes
(objects, inline fragments, connections) run a callback against a fresh
child builder and store the child's frozen nodes in the parent node.

Example:
    builder = FieldBuilder()
    builder.fields("id", {"description": "summary"}).object(
        "image", lambda image: image.fields("alt", "url")
    )
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from .errors import (
    AliasMappingError,
    EmptyFragmentNameError,
    EmptyTypeConditionError,
    MissingCallbackError,
)
from .nodes import (
    UNSET,
    FragmentSpread,
    InlineFragment,
    Leaf,
    Node,
    ObjectNode,
    normalize_directives,
)

NameOrAlias = str | Mapping[str, str]
Callback = Callable[["FieldBuilder"], Any]

_FIELD_SPEC_KEYS = {"field", "args", "directive"}


@dataclass(frozen=True)
class FieldSpec:
    """A leaf field with arguments and/or directives.

    Equivalent to the mapping form ``{"field": ..., "args": ..., "directive": ...}``
    accepted by ``FieldBuilder.fields``, without the ambiguity of a field
    literally named ``field``.
    """
    field: NameOrAlias
    args: Mapping[str, Any] | None = None
    directive: Any = None


def resolve_name(name_or_mapping: NameOrAlias) -> tuple[str, str | None]:
    """Split ``"name"`` or ``{"name": "alias"}`` into (name, alias)."""
    if isinstance(name_or_mapping, Mapping):
        if len(name_or_mapping) != 1:
            raise AliasMappingError(name_or_mapping)
        ((name, alias),) = name_or_mapping.items()
        return name, alias
    return name_or_mapping, None


def resolve_callback(
    name: str,
    args_or_callback: Mapping[str, Any] | Callback | None,
    callback: Callback | None,
) -> tuple[Mapping[str, Any] | None, Callback]:
    """Sort out the ``(args, callback)`` / ``(callback)`` call shapes."""
    if callable(args_or_callback):
        return None, args_or_callback
    if callback is None:
        raise MissingCallbackError(name)
    return args_or_callback, callback


class FieldBuilder:
    """Accumulates nodes for one selection set."""

    def __init__(self):
        self._nodes: list[Node] = []

    def fields(self, *specs: str | Mapping[str, Any] | FieldSpec) -> "FieldBuilder":
        """Add leaf fields.

        Each spec is one of:
            "name"                                  -> name
            {"name": "alias"}                       -> alias: name (one leaf per entry)
            {"field": "name", "args": {...}, "directive": {...}}
            FieldSpec("name", args={...}, directive={...})
        """
        for spec in specs:
            if isinstance(spec, str):
                self._nodes.append(Leaf(name=spec))
            elif isinstance(spec, FieldSpec):
                self._add_field_spec(spec.field, spec.args, spec.directive)
            elif isinstance(spec, Mapping) and "field" in spec and set(spec) <= _FIELD_SPEC_KEYS:
                self._add_field_spec(spec["field"], spec.get("args"), spec.get("directive"))
            elif isinstance(spec, Mapping):
                for name, alias in spec.items():
                    self._nodes.append(Leaf(name=name, alias=alias))
            else:
                raise TypeError(f"Unsupported field spec: {spec!r}")
        return self

    def _add_field_spec(self, field_def: NameOrAlias, args, directive):
        name, alias = resolve_name(field_def)
        self._nodes.append(Leaf(
            name=name,
            alias=alias,
            args=dict(args) if args else None,
            directives=normalize_directives(directive),
        ))

    def object(
        self,
        name_or_mapping: NameOrAlias,
        args_or_callback: Mapping[str, Any] | Callback | None,
        callback: Callback | None = None,
        *,
        directives: Any = None,
    ) -> "FieldBuilder":
        """Add a nested object field.

        Call shapes:
            .object("feedback", lambda f: f.fields("rating"))
            .object({"feedback": "aliasFeedback"}, lambda f: ...)
            .object("field", {"key": "season"}, lambda f: ...)
            .object({"field": "season"}, {"key": "season"}, lambda f: ...)
        """
        self._nodes.append(self._object_node(name_or_mapping, args_or_callback, callback, directives))
        return self

    def _object_node(self, name_or_mapping, args_or_callback, callback, directives) -> ObjectNode:
        name, alias = resolve_name(name_or_mapping)
        args, callback = resolve_callback(name, args_or_callback, callback)
        child = FieldBuilder()
        callback(child)
        return ObjectNode(
            name=name,
            alias=alias,
            args=dict(args) if args else None,
            directives=normalize_directives(directives),
            children=child.get_nodes(),
        )

    def connection(
        self,
        name_or_mapping: NameOrAlias,
        args: Mapping[str, Any] | None,
        callback: Callable[[Any], Any],
    ) -> "FieldBuilder":
        """Add a paginated connection field.

        Arguments whose value is ``UNSET`` or ``None`` are dropped, so a full
        argument record can be passed with some entries left out. A
        ``pageInfo`` block is added after the callback's selections unless the
        callback selected ``pageInfo`` itself.

        Example:
            .connection("products", {"first": "$count", "after": UNSET},
                        lambda c: c.nodes(lambda n: n.fields("id")))
        """
        from .connection import ConnectionBuilder

        name, alias = resolve_name(name_or_mapping)
        cleaned = {
            key: value for key, value in (args or {}).items()
            if value is not UNSET and value is not None
        }

        builder = ConnectionBuilder()
        callback(builder)
        if not builder.has_page_info():
            builder.with_page_info()

        self._nodes.append(ObjectNode(
            name=name,
            alias=alias,
            args=cleaned or None,
            children=builder.get_nodes(),
        ))
        return self

    def use_fragment(self, fragment_name: str, *, directives: Any = None) -> "FieldBuilder":
        """Insert a ``...FragmentName`` spread."""
        if not fragment_name or not fragment_name.strip():
            raise EmptyFragmentNameError()
        self._nodes.append(FragmentSpread(
            name=fragment_name,
            directives=normalize_directives(directives),
        ))
        return self

    def inline_fragment(
        self,
        type_condition: str,
        callback: Callback,
        *,
        directives: Any = None,
    ) -> "FieldBuilder":
        """Add an ``... on Type { ... }`` selection."""
        if not type_condition or not type_condition.strip():
            raise EmptyTypeConditionError()
        child = FieldBuilder()
        callback(child)
        self._nodes.append(InlineFragment(
            type_condition=type_condition,
            directives=normalize_directives(directives),
            children=child.get_nodes(),
        ))
        return self

    def get_nodes(self) -> tuple[Node, ...]:
        """Return a snapshot of the nodes added so far."""
        return tuple(self._nodes)
