"""Exceptions raised while building a GraphQL document.

All of them are construction-time faults: they are raised at the builder
call that received bad input and leave the partially built document
unusable.
"""


class QueryBuilderError(ValueError):
    """Base class for builder errors."""


class AliasMappingError(QueryBuilderError):
    """An alias mapping did not contain exactly one ``{name: alias}`` entry."""

    def __init__(self, mapping):
        self.mapping = mapping
        super().__init__(
            f"Only one key is allowed in the alias mapping, got {len(mapping)}: {list(mapping)!r}"
        )


class MissingCallbackError(QueryBuilderError):
    """Arguments were supplied for a selection but no callback was given."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Callback must be provided when arguments are supplied ({field_name})")


class EmptyFragmentNameError(QueryBuilderError):
    """A fragment spread was requested with a blank name."""

    def __init__(self):
        super().__init__("Fragment name cannot be empty")


class EmptyTypeConditionError(QueryBuilderError):
    """An inline fragment was requested with a blank type condition."""

    def __init__(self):
        super().__init__("Type condition cannot be empty for inline fragment")


class DocumentSpecError(QueryBuilderError):
    """A document description contained an entry the loader cannot interpret."""

    def __init__(self, message: str, entry=None):
        self.entry = entry
        super().__init__(message)
