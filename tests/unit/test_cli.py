"""
Unit tests for the tmplfuncs command-line interface.
"""

import json
import logging

import pytest

from tmplfuncs import __version__
from tmplfuncs.cli import format_result, main, parse_argument


class TestParseArgument:
    """Tests for argument decoding."""

    def test_json_literals(self):
        """Test JSON values are decoded."""
        assert parse_argument("3") == 3
        assert parse_argument("null") is None
        assert parse_argument("[1, null, 2]") == [1, None, 2]

    def test_plain_text(self):
        """Test anything else stays text."""
        assert parse_argument("hello world") == "hello world"
        assert parse_argument("-") == "-"


class TestFormatResult:
    """Tests for result printing."""

    def test_sequence_as_json(self):
        """Test sequences print as JSON."""
        assert json.loads(format_result(["a", "b"])) == ["a", "b"]

    def test_bool(self):
        """Test booleans print lowercase."""
        assert format_result(True) == "true"

    def test_text(self):
        """Test text prints unchanged."""
        assert format_result("abc") == "abc"


class TestMain:
    """Tests for the CLI entry point."""

    def test_version(self, capsys):
        """Test --version prints the version."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_no_command(self, capsys):
        """Test help is printed without a command."""
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()

    def test_list(self, capsys):
        """Test listing function names."""
        assert main(["list"]) == 0
        names = capsys.readouterr().out.split()
        assert "substr" in names
        assert "randAlphaNum" in names

    def test_list_filter(self, capsys):
        """Test filtering the list."""
        assert main(["list", "--filter", "TRIM"]) == 0
        names = capsys.readouterr().out.split()
        assert names
        assert all("trim" in n.lower() for n in names)

    def test_call(self, capsys):
        """Test calling a function."""
        assert main(["call", "substr", "0", "3", "foobar"]) == 0
        assert capsys.readouterr().out == "foo\n"

    def test_call_negative_argument(self, capsys):
        """Test negative numbers are passed as arguments."""
        assert main(["call", "trunc", "-3", "baaaaaar"]) == 0
        assert capsys.readouterr().out == "aar\n"

    def test_call_json_list(self, capsys):
        """Test JSON list arguments."""
        assert main(["call", "join", "-", "[1, null, 2]"]) == 0
        assert capsys.readouterr().out == "1-2\n"

    def test_call_raw(self, capsys):
        """Test --raw keeps arguments as text."""
        assert main(["call", "--raw", "quote", "null"]) == 0
        assert capsys.readouterr().out == '"null"\n'

    def test_call_sequence_result(self, capsys):
        """Test sequence results print as JSON."""
        assert main(["call", "split", "$", "foo$bar"]) == 0
        assert json.loads(capsys.readouterr().out) == ["foo", "bar"]

    def test_unknown_function(self, capsys):
        """Test unknown names fail with a suggestion."""
        assert main(["call", "substrr", "x"]) == 1
        err = capsys.readouterr().err
        assert "unknown function 'substrr'" in err
        assert "substr" in err

    def test_decode_error(self, capsys):
        """Test decode errors fail with exit code 1."""
        assert main(["call", "b64dec", "%%%"]) == 1
        assert "illegal base64 data" in capsys.readouterr().err

    def test_bad_arity(self, capsys):
        """Test a wrong number of arguments is reported."""
        assert main(["call", "substr", "0"]) == 1
        assert "substr" in capsys.readouterr().err

    def test_render(self, capsys):
        """Test rendering a template string."""
        assert main(["render", '{{ "First Try" | initials }}']) == 0
        assert capsys.readouterr().out == "FT\n"

    def test_render_with_variables(self, capsys):
        """Test -D variables are available."""
        assert main(["render", "{{ join('-', items) }}", "-D", "items=[1, null, 2]"]) == 0
        assert capsys.readouterr().out == "1-2\n"

    def test_render_piped_join(self, capsys):
        """Test piped join uses the function set, not Jinja's filter."""
        assert main(["render", '{{ items | join("-") }}', "-D", "items=[1, null, 2]"]) == 0
        assert capsys.readouterr().out == "1-2\n"

    def test_render_piped_indent(self, capsys):
        """Test piped indent pads the first line too."""
        assert main(["render", "{{ text | indent(4) }}", "-D", 'text="a\\nb"']) == 0
        assert capsys.readouterr().out == "    a\n    b\n"

    def test_render_bad_define(self, capsys):
        """Test malformed -D values are rejected."""
        assert main(["render", "x", "-D", "novalue"]) == 1
        assert "KEY=VALUE" in capsys.readouterr().err

    def test_render_decode_error(self, capsys):
        """Test function errors surface from templates."""
        assert main(["render", '{{ "%%%" | b64dec }}']) == 1
        assert "illegal base64 data" in capsys.readouterr().err

    def test_render_syntax_error(self, capsys):
        """Test template syntax errors are reported."""
        assert main(["render", "{{ unclosed"]) == 1
        assert "Template error" in capsys.readouterr().err

    def test_log_level(self):
        """Test --log-level configures the package logger."""
        main(["--log-level", "debug", "list"])
        assert logging.getLogger("tmplfuncs").level == logging.DEBUG
        main(["--log-level", "warning", "list"])
        assert logging.getLogger("tmplfuncs").level == logging.WARNING

    def test_log_level_from_environment(self, monkeypatch):
        """Test TMPLFUNCS_LOG_LEVEL is used when no flag is given."""
        monkeypatch.setenv("TMPLFUNCS_LOG_LEVEL", "error")
        main(["list"])
        assert logging.getLogger("tmplfuncs").level == logging.ERROR
        monkeypatch.delenv("TMPLFUNCS_LOG_LEVEL")
        main(["list"])
        assert logging.getLogger("tmplfuncs").level == logging.WARNING
