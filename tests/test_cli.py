"""Tests for the eunit command-line entry point."""

import pytest

from fakes import FakeEngine

from eunit_pipeline import cli
from eunit_pipeline.core.runner import TestEngineError, Verdict, task


@pytest.fixture
def cli_project(tmp_path, monkeypatch, write_modules):
    """Run the CLI from a project root whose app is named 'cliapp'."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("EUNIT_APPS", "cliapp")
    write_modules(tmp_path / "_build" / "test" / "cliapp" / "lib", {"cli_test": ""})
    return tmp_path


def use_engine(monkeypatch, engine):
    monkeypatch.setattr(task, "PytestEngine", lambda: engine)


class TestMain:
    """Exit codes of cli.main."""

    def test_pass_exits_zero(self, cli_project, monkeypatch):
        engine = FakeEngine()
        use_engine(monkeypatch, engine)

        assert cli.main(["--verbose"]) == 0
        assert engine.calls[0][0] == ["cli_test"]
        assert engine.calls[0][1] == ["-v"]

    def test_tests_failed_exits_one(self, cli_project, monkeypatch):
        use_engine(monkeypatch, FakeEngine(Verdict.FAIL))

        assert cli.main([]) == 1

    def test_invalid_argument_exits_two(self, cli_project, monkeypatch):
        engine = FakeEngine()
        use_engine(monkeypatch, engine)

        assert cli.main(["--frobnicate"]) == 2
        assert engine.calls == []

    def test_engine_error_exits_three(self, cli_project, monkeypatch):
        class CrashingEngine(FakeEngine):
            def run(self, modules, options, compile_path):
                raise TestEngineError("pytest did not complete the run (INTERNAL_ERROR)")

        use_engine(monkeypatch, CrashingEngine())

        assert cli.main([]) == 3
