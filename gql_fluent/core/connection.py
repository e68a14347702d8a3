"""Builder for the connection (paginated list) shape."""

from typing import Callable

from .field_builder import FieldBuilder
from .nodes import ObjectNode

PAGE_INFO_FIELDS = ("hasNextPage", "hasPreviousPage", "startCursor", "endCursor")


class ConnectionBuilder(FieldBuilder):
    """FieldBuilder with ``nodes`` and ``pageInfo`` shortcuts.

    Handed to the callback of ``FieldBuilder.connection``.
    """

    def nodes(self, callback: Callable[[FieldBuilder], object]) -> "ConnectionBuilder":
        """Select the connection's ``nodes``."""
        self.object("nodes", callback)
        return self

    def with_page_info(
        self, callback: Callable[[FieldBuilder], object] | None = None
    ) -> "ConnectionBuilder":
        """Select ``pageInfo``; with no callback, the four standard fields."""
        if callback is None:
            self.object("pageInfo", lambda page_info: page_info.fields(*PAGE_INFO_FIELDS))
        else:
            self.object("pageInfo", callback)
        return self

    def has_page_info(self) -> bool:
        """Check whether ``pageInfo`` has been selected."""
        return any(
            isinstance(node, ObjectNode) and node.name == "pageInfo"
            for node in self._nodes
        )
