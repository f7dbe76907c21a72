"""
Tests for the command-line entry point.
"""

import io
import json

import pytest

from identifier_validator import __version__
from identifier_validator.main import build_parser, main
from identifier_validator.shell import GOODBYE


class TestOneShotMode:
    """Identifiers on the command line are validated without the shell."""

    def test_all_valid_exits_zero(self, capsys):
        assert main(["-c", "class", "Foo", "bar"]) == 0

        out = capsys.readouterr().out
        assert "'Foo' is a valid class name." in out
        assert "Warning: Class names should start with an uppercase letter" in out
        assert "'bar' is a valid class name." in out

    def test_any_invalid_exits_one(self, capsys):
        assert main(["--category", "variable", "count", "int"]) == 1

        out = capsys.readouterr().out
        assert "'count' is a valid variable name." in out
        assert "Error: Variable name cannot be a Java keyword" in out

    def test_default_category_is_generic(self, capsys):
        assert main(["Whatever_Style"]) == 0
        assert "'Whatever_Style' is a valid generic identifier." in capsys.readouterr().out

    def test_default_category_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("IDENTIFIER_VALIDATOR_DEFAULT_CATEGORY", "class")
        main(["foo"])
        assert "'foo' is a valid class name." in capsys.readouterr().out

    def test_json_output(self, capsys):
        assert main(["--json", "-c", "package", "com.Example", "com..util"]) == 1

        data = json.loads(capsys.readouterr().out)
        assert [item["identifier"] for item in data] == ["com.Example", "com..util"]
        assert data[0]["valid"] is True
        assert data[0]["advisories"][0]["segment"] == "Example"
        assert data[1]["valid"] is False
        assert data[1]["failure"]["code"] == "EMPTY_IDENTIFIER"
        assert data[1]["failure"]["segment_index"] == 1

    def test_logs_go_to_stderr(self, capsys):
        main(["--log-level", "info", "-c", "method", "doWork"])

        captured = capsys.readouterr()
        assert "batch_complete" in captured.err
        assert "batch_complete" not in captured.out

    def test_default_log_level_is_quiet(self, capsys):
        main(["doWork"])
        assert capsys.readouterr().err == ""


class TestArguments:
    """Test cases for argument parsing."""

    def test_unknown_category_is_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["-c", "enum", "Foo"])
        assert exc_info.value.code == 2

    def test_invalid_default_category_is_usage_error(self, monkeypatch, capsys):
        monkeypatch.setenv("IDENTIFIER_VALIDATOR_DEFAULT_CATEGORY", "enum")

        with pytest.raises(SystemExit) as exc_info:
            main(["Foo"])

        assert exc_info.value.code == 2
        err = capsys.readouterr().err
        assert "Unknown category 'enum'" in err
        assert "IDENTIFIER_VALIDATOR_DEFAULT_CATEGORY" in err

    def test_explicit_category_overrides_bad_default(self, monkeypatch, capsys):
        monkeypatch.setenv("IDENTIFIER_VALIDATOR_DEFAULT_CATEGORY", "enum")
        assert main(["-c", "class", "Foo"]) == 0
        assert "'Foo' is a valid class name." in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.identifiers == []
        assert args.category == "generic"
        assert args.json is False
        assert args.log_level == "warning"


class TestInteractiveMode:
    """Without identifiers the shell runs on stdin."""

    def test_runs_shell(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("2\ndoWork\n6\n"))

        assert main([]) == 0

        out = capsys.readouterr().out
        assert "'doWork' is a valid method name." in out
        assert GOODBYE in out
