"""Tests for flag parsing and pytest argument mapping."""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from eunit_pipeline.core.runner import (
    InvalidArgument,
    RunOptions,
    build_engine_options,
    parse_options,
)


# =============================================================================
# parse_options
# =============================================================================

class TestParseOptions:
    """Tests for parse_options."""

    def test_no_args_defaults(self):
        """No flags gives all-off options and no module request."""
        assert parse_options([]) == RunOptions()

    def test_boolean_flags(self):
        options = parse_options(["--verbose", "--surefire", "--cover"])

        assert options.verbose is True
        assert options.surefire is True
        assert options.cover is True
        assert options.modules == ()

    def test_negated_flag(self):
        """A later --no-<flag> turns the flag back off."""
        options = parse_options(["--cover", "--no-cover"])
        assert options.cover is False

    def test_repeatable_module(self):
        """--module keeps every value, in order."""
        options = parse_options(["--module", "b_test", "--module", "a_test"])
        assert options.modules == ("b_test", "a_test")

    def test_module_equals_form(self):
        assert parse_options(["--module=calc"]).modules == ("calc",)

    def test_options_are_frozen(self):
        """RunOptions cannot be changed after parsing."""
        options = parse_options(["--verbose"])
        with pytest.raises(FrozenInstanceError):
            options.verbose = False

    @pytest.mark.parametrize("args", [
        ["--unknown"],
        ["--verbose", "-x"],
        ["--verb"],
    ])
    def test_unknown_flag_rejected(self, args):
        """Unrecognized flags raise InvalidArgument."""
        with pytest.raises(InvalidArgument):
            parse_options(args)

    def test_module_without_value_rejected(self):
        with pytest.raises(InvalidArgument):
            parse_options(["--module"])

    def test_boolean_flag_takes_no_value(self):
        with pytest.raises(InvalidArgument):
            parse_options(["--verbose=yes"])

    def test_positional_arguments_ignored(self):
        """Stray positional arguments do not fail the run."""
        options = parse_options(["stray", "--verbose"])
        assert options.verbose is True


# =============================================================================
# build_engine_options
# =============================================================================

class TestBuildEngineOptions:
    """Tests for build_engine_options."""

    def test_no_flags_no_options(self, tmp_path):
        assert build_engine_options(RunOptions(), tmp_path) == []

    def test_verbose_adds_one_marker(self, tmp_path):
        opts = build_engine_options(RunOptions(verbose=True), tmp_path)
        assert opts == ["-v"]

    def test_surefire_adds_report_under_dir(self, tmp_path):
        """The JUnit report lands in the given directory."""
        opts = build_engine_options(RunOptions(surefire=True), tmp_path)

        assert len(opts) == 1
        assert opts[0].startswith("--junitxml=")
        report = Path(opts[0].split("=", 1)[1])
        assert report.parent == tmp_path
        assert report.name == "TEST-eunit.xml"

    def test_cover_and_modules_contribute_nothing(self, tmp_path):
        options = RunOptions(cover=True, modules=("a",))
        assert build_engine_options(options, tmp_path) == []

    def test_all_flags(self, tmp_path):
        options = RunOptions(verbose=True, surefire=True, cover=True)
        opts = build_engine_options(options, tmp_path)

        assert opts[0] == "-v"
        assert len(opts) == 2
