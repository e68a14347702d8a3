#!/usr/bin/env python3
"""Demonstration of the fluent document builder.

This script shows how to:
1. Build a query with variables, aliases, directives and a connection
2. Batch several mutations into one document
3. Render compact and pretty output

Note: This demo doesn't send anything anywhere - it only prints documents.
"""

from gql_fluent.core import UNSET, mutation, query


def build_collection_query(after: str | None = None) -> str:
    def product_node(node):
        node.fields("id", "title")
        node.object("featuredImage", lambda image: image.fields("url"))

    return (
        query("GetCollection")
        .variables({"handle": "String!", "count": {"type": "Int", "default_value": 20}})
        .object("collection", {"handle": "$handle"}, lambda collection: collection
            .fields("title", {"field": "description", "directive": {"include": {"if": True}}})
            .connection(
                "products",
                {"first": "$count", "after": after or UNSET},
                lambda products: products.nodes(product_node),
            ))
        .build(pretty=True)
    )


def build_batch_mutation() -> str:
    return (
        mutation("UpdateData")
        .variables({"product": "CreateProductInput!", "variant": "CreateVariantInput"})
        .operation("productCreate", {"product": "$product"}, lambda payload: payload
            .object("product", lambda product: product.fields("id"))
            .object("userErrors", lambda errors: errors.fields("field", "message")))
        .operation({"variantCreate": "newVariant"}, {"variant": "$variant"}, lambda payload: payload
            .object("variant", lambda variant: variant.fields("id")))
        .build()
    )


def main():
    print("=== Fluent GraphQL Builder Demo ===\n")

    print("1. Collection query (pretty):")
    print(build_collection_query())

    print("\n2. Same query, resuming after a cursor:")
    print(build_collection_query(after="Y3Vyc29yOjIw"))

    print("\n3. Batched mutation (compact):")
    print(build_batch_mutation())


if __name__ == "__main__":
    main()
