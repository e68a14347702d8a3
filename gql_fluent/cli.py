"""Command-line interface for gql-fluent."""

import json
from pathlib import Path

import click
from graphql import GraphQLSyntaxError, parse
from pydantic import ValidationError

from .core.errors import QueryBuilderError
from .core.loader import load_document


@click.group()
@click.version_option(package_name="gql-fluent")
def main():
    """Fluent GraphQL document builder.

    Render GraphQL documents from JSON document descriptions.
    """
    pass


@main.command()
@click.option(
    "--input",
    "-i",
    "input_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a JSON document description.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Write the document to this file instead of stdout.",
)
@click.option(
    "--pretty",
    "-p",
    is_flag=True,
    help="Render one selection per line with indentation.",
)
@click.option(
    "--indent",
    default=2,
    show_default=True,
    type=click.IntRange(min=0),
    help="Spaces per indentation level in pretty mode.",
)
@click.option(
    "--check",
    is_flag=True,
    help="Parse the rendered document to make sure it is valid GraphQL syntax.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def render(input_path: str, output: str | None, pretty: bool, indent: int, check: bool, verbose: bool):
    """Render a GraphQL document from a JSON description.

    Examples:

        gql-fluent render --input ./get_collection.json --pretty

        gql-fluent render -i ./create.json -o ./create.graphql --check
    """
    path = Path(input_path)
    try:
        with open(path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON in {path.name}: {e}")

    try:
        builder = load_document(data)
    except ValidationError as e:
        raise click.ClickException(f"Invalid document description in {path.name}:\n{e}")
    except QueryBuilderError as e:
        raise click.ClickException(f"Cannot build document from {path.name}: {e}")

    document = builder.build(pretty=pretty, indent=" " * indent)

    if verbose:
        click.echo(f"Operation: {builder.operation_type} {builder.operation_name or '(anonymous)'}", err=True)
        click.echo(f"  Variables: {len(builder.get_variables())}", err=True)
        click.echo(f"  Selections: {len(builder.get_nodes())}", err=True)
        click.echo(f"  Sub-operations: {len(builder.get_sub_operations())}", err=True)
        click.echo(f"  Fragments: {len(builder.get_fragments())}", err=True)

    if check:
        try:
            parse(document)
        except GraphQLSyntaxError as e:
            raise click.ClickException(f"Rendered document is not valid GraphQL: {e.message}")
        if verbose:
            click.echo("  Syntax check: ok", err=True)

    if output:
        output_path = Path(output).resolve()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            f.write(document + "\n")
        click.echo(f"Done! Wrote {output_path}")
    else:
        click.echo(document)


if __name__ == "__main__":
    main()
