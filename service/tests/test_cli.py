"""Tests for the Typer CLI."""

import json

from typer.testing import CliRunner
from conn_uri.cli import app

runner = CliRunner()


def test_parse_json():
    """parse prints the resolved components as JSON."""
    result = runner.invoke(
        app, ["parse", "localhost:9200", "--default-uri", "http://localhost:9200/", "--json"]
    )
    assert result.exit_code == 0
    components = json.loads(result.stdout)
    assert components["uri"] == "http://localhost:9200/"
    assert components["scheme"] == "http"
    assert components["port"] == 9200


def test_parse_table():
    """Without --json a table of components is printed."""
    result = runner.invoke(app, ["parse", "es-node", "-d", "http://localhost:9200/"])
    assert result.exit_code == 0
    assert "es-node" in result.stdout


def test_parse_unsupported_scheme():
    """Errors are reported with exit code 1."""
    result = runner.invoke(app, ["parse", "ftp://host/x", "-d", "http://localhost:9200/"])
    assert result.exit_code == 1
    assert "Error:" in result.stdout
    assert "[ftp://host/x]" in result.stdout


def test_parse_invalid_default_uri():
    """A malformed --default-uri is rejected."""
    result = runner.invoke(app, ["parse", "host", "--default-uri", "not a uri"])
    assert result.exit_code == 1
    assert "Invalid default URI" in result.stdout


def test_strip_query():
    """strip-query removes the query and applies the default fragment."""
    result = runner.invoke(
        app,
        [
            "strip-query",
            "http://host:9200/_sql?format=json",
            "--default-uri",
            "http://localhost:9200/#frag",
            "--json",
        ],
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout)["uri"] == "http://host:9200/_sql#frag"


def test_append_segment():
    """append-segment joins the segment with a single slash."""
    result = runner.invoke(app, ["append-segment", "http://host:9200/a/", "/b", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["uri"] == "http://host:9200/a/b"


def test_append_segment_invalid_uri():
    """An unparseable base URI is reported."""
    result = runner.invoke(app, ["append-segment", "http://h/a b", "x"])
    assert result.exit_code == 1
    assert "Illegal character" in result.stdout
