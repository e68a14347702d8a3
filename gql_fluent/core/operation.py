"""Operation builder: the top-level query, mutation or subscription.

Adds operation-level concerns (name, variables, directives, named
sub-operations and fragment definitions) around a root FieldBuilder and
renders the whole document with ``build()``.

Example:
    document = (
        query("GetThing")
        .variables({"id": "ID!"})
        .operation("thing", {"id": "$id"}, lambda thing: thing.fields("id", "handle"))
        .build(pretty=True)
    )
"""

from typing import Any, Mapping

from .field_builder import Callback, FieldBuilder, NameOrAlias
from .nodes import (
    Directive,
    FragmentDefinition,
    Node,
    VariableDefinition,
    normalize_directives,
)
from .serializer import BuildOptions, Serializer, stringify_value

OPERATION_TYPES = ("query", "mutation", "subscription")


class OperationBuilder(FieldBuilder):
    """Builds a complete GraphQL document."""

    def __init__(self, operation_type: str = "query", operation_name: str | None = None):
        if operation_type not in OPERATION_TYPES:
            raise ValueError(
                f"Unknown operation type: {operation_type!r} (expected one of {', '.join(OPERATION_TYPES)})"
            )
        super().__init__()
        self.operation_type = operation_type
        self.operation_name = operation_name
        self._variables: dict[str, VariableDefinition] = {}
        self._operation_directives: list[Directive] = []
        self._sub_operations: list[Node] = []
        self._fragments: dict[str, FragmentDefinition] = {}

    def name(self, operation_name: str) -> "OperationBuilder":
        """Set the operation name, replacing any previous one."""
        self.operation_name = operation_name
        return self

    def variables(self, variables: Mapping[str, Any]) -> "OperationBuilder":
        """Declare the operation's variables, replacing any previous set.

        Values are a type string (``"Int!"``), a mapping with ``type`` and an
        optional ``default_value`` (``defaultValue`` is accepted too), or a
        VariableDefinition.
        """
        self._variables = {
            key: self._to_variable_definition(key, value) for key, value in variables.items()
        }
        return self

    @staticmethod
    def _to_variable_definition(key: str, value: Any) -> VariableDefinition:
        if isinstance(value, VariableDefinition):
            return value
        if isinstance(value, str):
            return VariableDefinition(type=value)
        if isinstance(value, Mapping) and "type" in value:
            default = value.get("default_value", value.get("defaultValue"))
            if default is not None and not isinstance(default, str):
                default = stringify_value(default)
            return VariableDefinition(type=value["type"], default_value=default)
        raise TypeError(f"Invalid definition for variable ${key}: {value!r}")

    def operation_directive(
        self, name: str, args: Mapping[str, Any] | None = None
    ) -> "OperationBuilder":
        """Append a directive to the operation header."""
        self._operation_directives.append(Directive(name=name, args=dict(args) if args else None))
        return self

    def operation(
        self,
        name_or_mapping: NameOrAlias,
        args_or_callback: Mapping[str, Any] | Callback | None,
        callback: Callback | None = None,
        *,
        directives: Any = None,
    ) -> "OperationBuilder":
        """Add a named sub-operation, rendered after the root selections.

        Several sub-operations batch multiple mutations (or queries) into
        one document.
        """
        self._sub_operations.append(
            self._object_node(name_or_mapping, args_or_callback, callback, directives)
        )
        return self

    def fragment(
        self,
        name: str,
        type_condition: str,
        callback: Callback,
        *,
        directives: Any = None,
    ) -> "OperationBuilder":
        """Declare a fragment definition; redeclaring a name replaces it."""
        builder = FieldBuilder()
        callback(builder)
        self._fragments[name] = FragmentDefinition(
            name=name,
            type_condition=type_condition,
            children=builder.get_nodes(),
            directives=normalize_directives(directives),
        )
        return self

    def get_variables(self) -> dict[str, VariableDefinition]:
        return dict(self._variables)

    def get_operation_directives(self) -> tuple[Directive, ...]:
        return tuple(self._operation_directives)

    def get_sub_operations(self) -> tuple[Node, ...]:
        return tuple(self._sub_operations)

    def get_fragments(self) -> dict[str, FragmentDefinition]:
        return dict(self._fragments)

    def build(self, pretty: bool = False, indent: str = "  ", **options: Any) -> str:
        """Build the GraphQL document string.

        Args:
            pretty: One selection per line, indented (default: compact)
            indent: Indentation unit for pretty mode
            **options: Accepted and ignored, for forward compatibility

        Returns:
            Complete GraphQL document
        """
        serializer = Serializer(BuildOptions(pretty=pretty, indent=indent))
        return serializer.render_document(
            self.operation_type,
            self.operation_name,
            self._variables,
            self._operation_directives,
            self.get_nodes() + self.get_sub_operations(),
            self._fragments.values(),
        )

    def __str__(self) -> str:
        return self.build()


def query(operation_name: str | None = None) -> OperationBuilder:
    """Start a query document."""
    return OperationBuilder("query", operation_name)


def mutation(operation_name: str | None = None) -> OperationBuilder:
    """Start a mutation document."""
    return OperationBuilder("mutation", operation_name)


def subscription(operation_name: str | None = None) -> OperationBuilder:
    """Start a subscription document."""
    return OperationBuilder("subscription", operation_name)
