"""
Tests for the holocron CLI
"""

from click.testing import CliRunner

from holocron import __version__
from holocron.cli import cli


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_schema_prints_sdl():
    result = CliRunner().invoke(cli, ["schema"])

    assert result.exit_code == 0
    assert "type Query" in result.output
    assert "randomDroid: Droid" in result.output


def test_query_prints_json_result():
    result = CliRunner().invoke(cli, ["query", "{ info { name } droid { name } }"])

    assert result.exit_code == 0
    assert '"name": "maana.io.template"' in result.output
    assert '"name": "R2-D2"' in result.output


def test_query_from_file_with_variables(tmp_path):
    path = tmp_path / "query.graphql"
    path.write_text("query getHuman($id: ID!) { human(id: $id) { name } }", encoding="utf-8")

    result = CliRunner().invoke(
        cli,
        [
            "query",
            "--file",
            str(path),
            "--variables",
            '{"id": "94fbd693-2027-4804-bf40-ed427fe76fda"}',
        ],
    )

    assert result.exit_code == 0
    assert '"name": "Luke Skywalker"' in result.output


def test_query_with_field_error_exits_nonzero():
    result = CliRunner().invoke(cli, ["query", '{ droid(id: "bad") { name } }'])

    assert result.exit_code == 1
    assert "BAD_USER_INPUT" in result.output


def test_query_requires_input():
    result = CliRunner().invoke(cli, ["query"])

    assert result.exit_code == 2
