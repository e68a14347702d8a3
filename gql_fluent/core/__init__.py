"""Core modules for building GraphQL documents."""

from .connection import PAGE_INFO_FIELDS, ConnectionBuilder
from .errors import (
    AliasMappingError,
    DocumentSpecError,
    EmptyFragmentNameError,
    EmptyTypeConditionError,
    MissingCallbackError,
    QueryBuilderError,
)
from .field_builder import FieldBuilder, FieldSpec
from .loader import DocumentSpec, load_document
from .nodes import (
    UNSET,
    Directive,
    FragmentDefinition,
    FragmentSpread,
    InlineFragment,
    Leaf,
    Node,
    ObjectNode,
    Variable,
    VariableDefinition,
)
from .operation import OPERATION_TYPES, OperationBuilder, mutation, query, subscription
from .serializer import BuildOptions, Serializer, stringify_value

__all__ = [
    # Node model
    "Node",
    "Leaf",
    "ObjectNode",
    "FragmentSpread",
    "InlineFragment",
    "Directive",
    "FragmentDefinition",
    "Variable",
    "VariableDefinition",
    "UNSET",
    # Builders
    "FieldBuilder",
    "FieldSpec",
    "ConnectionBuilder",
    "PAGE_INFO_FIELDS",
    "OperationBuilder",
    "OPERATION_TYPES",
    "query",
    "mutation",
    "subscription",
    # Serializer
    "BuildOptions",
    "Serializer",
    "stringify_value",
    # Loader
    "DocumentSpec",
    "load_document",
    # Errors
    "QueryBuilderError",
    "AliasMappingError",
    "MissingCallbackError",
    "EmptyFragmentNameError",
    "EmptyTypeConditionError",
    "DocumentSpecError",
]
