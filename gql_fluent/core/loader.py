"""Load a document description (plain JSON-compatible data) into a builder.

The description mirrors the fluent API:

    {
        "kind": "query",
        "name": "GetCollection",
        "variables": {"count": "Int!", "format": {"type": "String!", "defaultValue": "JPG"}},
        "directives": [{"name": "country", "args": {"code": "FR"}}],
        "selections": [
            "id",
            {"description": "summary"},
            {"field": "price", "directive": {"inCurrency": {"currency": "EUR"}}},
            {"object": "image", "selections": ["alt", "url"]},
            {"connection": "products", "args": {"first": "$count"},
             "selections": [{"nodes": [{"fragment": "ProductFields"}]}]},
            {"on": "Product", "selections": ["title"]}
        ],
        "operations": [{"operation": "thing", "args": {"id": "$id"}, "selections": ["id"]}],
        "fragments": [{"name": "ProductFields", "on": "Product", "selections": ["title"]}]
    }

Inside a connection, ``{"nodes": [...]}`` selects the nodes and
``{"pageInfo": [...]}`` (or ``{"pageInfo": true}``) selects pagination
fields explicitly.

The keys ``object``, ``connection``, ``on``, ``fragment``, ``nodes``,
``pageInfo`` and ``field`` are reserved: an entry containing one of them is
read as that structure, and ``object``, ``connection`` and ``on`` entries must
carry a ``selections`` list. To alias a field with one of these names, use the
field form, e.g. ``{"field": {"on": "onAlias"}}``.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .connection import ConnectionBuilder
from .errors import DocumentSpecError
from .field_builder import FieldBuilder
from .operation import OperationBuilder


class VariableSpec(BaseModel):
    """Explicit variable declaration with an optional default."""
    model_config = ConfigDict(populate_by_name=True)

    type: str
    default_value: Any = Field(default=None, alias="defaultValue")


class DirectiveSpec(BaseModel):
    """Operation-level directive."""
    name: str
    args: dict[str, Any] | None = None


class FragmentSpec(BaseModel):
    """Named fragment definition."""
    name: str
    on: str
    selections: list[Any] = Field(default_factory=list)
    directives: dict[str, Any] | None = None


class OperationSpec(BaseModel):
    """Named sub-operation."""
    operation: str | dict[str, str]
    args: dict[str, Any] | None = None
    selections: list[Any] = Field(default_factory=list)
    directives: dict[str, Any] | None = None


class DocumentSpec(BaseModel):
    """A whole document description."""
    kind: Literal["query", "mutation", "subscription"] = "query"
    name: str | None = None
    variables: dict[str, str | VariableSpec] = Field(default_factory=dict)
    directives: list[DirectiveSpec] = Field(default_factory=list)
    selections: list[Any] = Field(default_factory=list)
    operations: list[OperationSpec] = Field(default_factory=list)
    fragments: list[FragmentSpec] = Field(default_factory=list)


def load_document(data: dict[str, Any]) -> OperationBuilder:
    """Validate a document description and replay it onto an OperationBuilder.

    Raises:
        pydantic.ValidationError: If the description's structure is invalid
        DocumentSpecError: If a selection entry cannot be interpreted
    """
    spec = DocumentSpec.model_validate(data)

    builder = OperationBuilder(spec.kind, spec.name)
    if spec.variables:
        builder.variables({
            key: value if isinstance(value, str)
            else {"type": value.type, "default_value": value.default_value}
            for key, value in spec.variables.items()
        })
    for directive in spec.directives:
        builder.operation_directive(directive.name, directive.args)

    apply_selections(builder, spec.selections)

    for op in spec.operations:
        builder.operation(
            op.operation,
            op.args,
            _selections_callback(op.selections),
            directives=op.directives,
        )
    for fragment in spec.fragments:
        builder.fragment(
            fragment.name,
            fragment.on,
            _selections_callback(fragment.selections),
            directives=fragment.directives,
        )
    return builder


def _selections_callback(entries: list[Any]):
    return lambda child: apply_selections(child, entries)


def apply_selections(builder: FieldBuilder, entries: list[Any]) -> FieldBuilder:
    """Replay a list of selection entries onto a builder, in order."""
    for entry in entries:
        if isinstance(entry, str):
            builder.fields(entry)
        elif not isinstance(entry, dict):
            raise DocumentSpecError(f"Selection entries must be strings or objects, got {entry!r}", entry)
        elif "object" in entry:
            builder.object(
                entry["object"],
                entry.get("args"),
                _selections_callback(_nested_selections(entry)),
                directives=entry.get("directives"),
            )
        elif "connection" in entry:
            builder.connection(
                entry["connection"],
                entry.get("args"),
                _selections_callback(_nested_selections(entry)),
            )
        elif "nodes" in entry or "pageInfo" in entry:
            _apply_connection_entry(builder, entry)
        elif "fragment" in entry:
            builder.use_fragment(entry["fragment"], directives=entry.get("directives"))
        elif "on" in entry:
            builder.inline_fragment(
                entry["on"],
                _selections_callback(_nested_selections(entry)),
                directives=entry.get("directives"),
            )
        elif "field" in entry:
            builder.fields(entry)
        elif all(isinstance(alias, str) for alias in entry.values()):
            builder.fields(entry)
        else:
            raise DocumentSpecError(f"Unrecognized selection entry: {entry!r}", entry)
    return builder


def _nested_selections(entry: dict[str, Any]) -> list[Any]:
    selections = entry.get("selections")
    if not isinstance(selections, list):
        raise DocumentSpecError(f"Entry needs a 'selections' list: {entry!r}", entry)
    return selections


def _apply_connection_entry(builder: FieldBuilder, entry: dict[str, Any]):
    if not isinstance(builder, ConnectionBuilder):
        raise DocumentSpecError("'nodes' and 'pageInfo' are only valid inside a connection", entry)
    if "nodes" in entry:
        if not isinstance(entry["nodes"], list):
            raise DocumentSpecError(f"'nodes' must be a list of selections: {entry!r}", entry)
        builder.nodes(_selections_callback(entry["nodes"]))
    else:
        page_info = entry["pageInfo"]
        if page_info is True:
            builder.with_page_info()
        elif not isinstance(page_info, list):
            raise DocumentSpecError(f"'pageInfo' must be true or a list of selections: {entry!r}", entry)
        else:
            builder.with_page_info(_selections_callback(page_info))
