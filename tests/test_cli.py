"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from gql_fluent.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def description_file(tmp_path):
    """Write a small document description and return its path."""
    path = tmp_path / "get_thing.json"
    path.write_text(json.dumps({
        "name": "GetThing",
        "variables": {"id": "ID!"},
        "operations": [{"operation": "thing", "args": {"id": "$id"}, "selections": ["id", "handle"]}],
    }))
    return path


class TestRender:
    """Tests for the render command."""

    def test_compact(self, runner, description_file):
        result = runner.invoke(main, ["render", "-i", str(description_file)])
        assert result.exit_code == 0
        assert result.output == "query GetThing($id: ID!) { thing(id: $id) { id handle } }\n"

    def test_pretty(self, runner, description_file):
        result = runner.invoke(main, ["render", "-i", str(description_file), "--pretty"])
        assert result.exit_code == 0
        assert result.output == (
            "query GetThing($id: ID!) {\n"
            "  thing(id: $id) {\n"
            "    id\n"
            "    handle\n"
            "  }\n"
            "}\n"
        )

    def test_indent(self, runner, description_file):
        result = runner.invoke(main, ["render", "-i", str(description_file), "-p", "--indent", "4"])
        assert result.exit_code == 0
        assert "\n    thing(id: $id) {\n        id\n" in result.output

    def test_check_passes(self, runner, description_file):
        result = runner.invoke(main, ["render", "-i", str(description_file), "--check"])
        assert result.exit_code == 0

    def test_check_fails_on_invalid_syntax(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        # An empty selection set is not valid GraphQL.
        path.write_text(json.dumps({"selections": []}))
        result = runner.invoke(main, ["render", "-i", str(path), "--check"])
        assert result.exit_code != 0
        assert "not valid GraphQL" in result.output

    def test_output_file(self, runner, description_file, tmp_path):
        output = tmp_path / "out" / "thing.graphql"
        result = runner.invoke(main, ["render", "-i", str(description_file), "-o", str(output)])
        assert result.exit_code == 0
        assert output.read_text() == "query GetThing($id: ID!) { thing(id: $id) { id handle } }\n"

    def test_invalid_json(self, runner, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        result = runner.invoke(main, ["render", "-i", str(path)])
        assert result.exit_code != 0
        assert "Invalid JSON" in result.output

    def test_invalid_description(self, runner, tmp_path):
        path = tmp_path / "bad_kind.json"
        path.write_text(json.dumps({"kind": "fetch"}))
        result = runner.invoke(main, ["render", "-i", str(path)])
        assert result.exit_code != 0
        assert "Invalid document description" in result.output

    def test_builder_error(self, runner, tmp_path):
        path = tmp_path / "blank_fragment.json"
        path.write_text(json.dumps({"selections": [{"fragment": " "}]}))
        result = runner.invoke(main, ["render", "-i", str(path)])
        assert result.exit_code != 0
        assert "Fragment name cannot be empty" in result.output

    def test_verbose(self, runner, description_file):
        result = runner.invoke(main, ["render", "-i", str(description_file), "-v", "--check"])
        assert result.exit_code == 0
        assert "Operation: query GetThing" in result.output
        assert "Syntax check: ok" in result.output
