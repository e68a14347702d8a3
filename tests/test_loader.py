"""Tests for loading document descriptions."""

import pytest
from pydantic import ValidationError

from gql_fluent.core.errors import AliasMappingError, DocumentSpecError
from gql_fluent.core.loader import load_document


@pytest.fixture
def description():
    """A description covering every selection entry kind."""
    return {
        "kind": "query",
        "name": "GetCollection",
        "variables": {
            "count": "Int!",
            "format": {"type": "String!", "defaultValue": "JPG"},
        },
        "directives": [{"name": "country", "args": {"code": "FR"}}],
        "selections": [
            "id",
            {"description": "summary"},
            {"field": "price", "directive": {"inCurrency": {"currency": "EUR"}}},
            {"object": "image", "selections": ["alt", {"field": "url", "args": {"format": "$format"}}]},
            {
                "connection": "products",
                "args": {"first": "$count", "after": None},
                "selections": [{"nodes": [{"fragment": "ProductFields"}]}],
            },
            {"on": "Shop", "selections": ["domain"]},
        ],
        "fragments": [{"name": "ProductFields", "on": "Product", "selections": ["title"]}],
    }


class TestLoadDocument:
    """Tests for load_document."""

    def test_full_description(self, description):
        document = load_document(description).build()
        assert document == (
            'query GetCollection($count: Int!, $format: String! = JPG) @country(code: "FR") { '
            "id summary: description "
            'price @inCurrency(currency: "EUR") '
            "image { alt url(format: $format) } "
            "products(first: $count) { nodes { ...ProductFields } "
            "pageInfo { hasNextPage hasPreviousPage startCursor endCursor } } "
            "... on Shop { domain } }\n"
            "fragment ProductFields on Product { title }"
        )

    def test_defaults(self):
        assert load_document({"selections": ["shop"]}).build() == "query { shop }"

    def test_sub_operations(self):
        builder = load_document({
            "kind": "mutation",
            "variables": {"id": "ID!"},
            "operations": [
                {"operation": {"productDelete": "deleted"}, "args": {"id": "$id"}, "selections": ["deletedId"]},
            ],
        })
        assert builder.build() == "mutation($id: ID!) { deleted: productDelete(id: $id) { deletedId } }"

    def test_explicit_page_info(self):
        builder = load_document({
            "selections": [{
                "connection": "orders",
                "selections": [{"pageInfo": ["hasNextPage"]}, {"nodes": ["id"]}],
            }],
        })
        assert builder.build() == "query { orders { pageInfo { hasNextPage } nodes { id } } }"

    def test_page_info_true_uses_default_fields(self):
        builder = load_document({
            "selections": [{"connection": "orders", "selections": [{"pageInfo": True}]}],
        })
        assert builder.build().count("pageInfo") == 1

    def test_object_with_args_and_directives(self):
        builder = load_document({
            "selections": [{
                "object": {"field": "season"},
                "args": {"key": "season"},
                "directives": {"include": {"if": "$withSeason"}},
                "selections": ["value"],
            }],
        })
        assert builder.build() == (
            'query { season: field(key: "season") @include(if: $withSeason) { value } }'
        )

    def test_invalid_kind(self):
        with pytest.raises(ValidationError):
            load_document({"kind": "fetch"})

    def test_nodes_outside_connection(self):
        with pytest.raises(DocumentSpecError):
            load_document({"selections": [{"nodes": ["id"]}]})

    def test_unrecognized_entry(self):
        with pytest.raises(DocumentSpecError):
            load_document({"selections": [{"weird": {"nested": 1}}]})

    def test_non_object_entry(self):
        with pytest.raises(DocumentSpecError):
            load_document({"selections": [42]})

    def test_builder_errors_propagate(self):
        with pytest.raises(AliasMappingError):
            load_document({"selections": [{"object": {}, "selections": ["id"]}]})

    def test_non_string_variable_default(self):
        builder = load_document({
            "variables": {"n": {"type": "Int", "defaultValue": 10}, "all": {"type": "Boolean", "default_value": False}},
            "selections": [{"object": "items", "args": {"first": "$n"}, "selections": ["id"]}],
        })
        assert builder.build() == "query($n: Int = 10, $all: Boolean = false) { items(first: $n) { id } }"

    def test_reserved_key_alias_via_field_form(self):
        builder = load_document({"selections": [{"field": {"on": "onAlias"}}]})
        assert builder.build() == "query { onAlias: on }"

    @pytest.mark.parametrize("entry", [
        {"on": "onAlias"},
        {"object": "objectAlias"},
        {"connection": "connectionAlias"},
        {"on": "Product", "selections": "title"},
    ])
    def test_structural_entries_need_selections(self, entry):
        with pytest.raises(DocumentSpecError):
            load_document({"selections": [entry]})

    @pytest.mark.parametrize("page_info", [False, "hasNextPage", {"hasNextPage": True}])
    def test_invalid_page_info(self, page_info):
        with pytest.raises(DocumentSpecError):
            load_document({
                "selections": [{"connection": "orders", "selections": [{"pageInfo": page_info}]}],
            })

    def test_invalid_nodes(self):
        with pytest.raises(DocumentSpecError):
            load_document({
                "selections": [{"connection": "orders", "selections": [{"nodes": "id"}]}],
            })
