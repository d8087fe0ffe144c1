"""Tests for the command-line interface."""

import pytest
from click.testing import CliRunner
from conftest import go_source, write_file

from svc_depgraph import __version__
from svc_depgraph.cli import cli
from svc_depgraph.config import NAMESPACE_PREFIX


@pytest.fixture
def checkout(tmp_path, monkeypatch):
    """
    Lay out sibling checkouts the way the default configuration expects.

    The working directory is <tmp>/go-svc/dependency-graph, so the default
    repositories resolve to <tmp>/<repo> and the package root to <tmp>/go-svc/pkg.
    """
    write_file(tmp_path / "research-pillars" / "pkg" / "a.go", go_source("log", "jwt"))
    write_file(tmp_path / "data-receiver" / "cmd" / "main.go", go_source("db/v2"))
    write_file(tmp_path / "go-svc" / "pkg" / "jwt" / "jwt.go", go_source("log", "jwt/test"))

    workdir = tmp_path / "go-svc" / "dependency-graph"
    workdir.mkdir(parents=True)
    monkeypatch.chdir(workdir)
    return workdir


class TestCli:
    """Tests for the cli entry point."""

    def test_default_run(self, checkout):
        """Should scan the default configuration and write the diagram."""
        runner = CliRunner()

        result = runner.invoke(cli, [])

        assert result.exit_code == 0, result.output
        written = (checkout / "dependencies.plantuml").read_text()
        assert written.startswith("@startuml Dependencies\n")
        assert "class ResearchPillars\nclass DataDispatcher\nclass DataReceiver\n" in written
        assert "ResearchPillars --> jwt\n" in written
        assert "DataReceiver --> db/v2\n" in written
        assert "jwt -[dotted]-|> log\n" in written
        assert "jwt -[dotted]-|> jwt/test" not in written
        assert written in result.output

    def test_output_option(self, checkout):
        """Should write to the given path."""
        runner = CliRunner()

        result = runner.invoke(cli, ["--quiet", "--output", "graphs/deps.puml"])

        assert result.exit_code == 0, result.output
        assert (checkout / "graphs" / "deps.puml").exists()
        assert not (checkout / "dependencies.plantuml").exists()
        assert "@startuml" not in result.output

    def test_failure_exits_nonzero(self, checkout):
        """Should abort with a diagnostic and write nothing."""
        bad = checkout.parent / "pkg" / "jwt" / "bad.go"
        bad.write_bytes(b'"' + NAMESPACE_PREFIX.encode() + b'/x"\xff')
        runner = CliRunner()

        result = runner.invoke(cli, [])

        assert result.exit_code == 1
        assert "SourceReadError" in result.output
        assert not (checkout / "dependencies.plantuml").exists()

    def test_version(self, checkout):
        """Should print the version without scanning."""
        runner = CliRunner()

        result = runner.invoke(cli, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.output
        assert not (checkout / "dependencies.plantuml").exists()
