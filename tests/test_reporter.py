"""
Tests for the argument and environment report.
"""

import io

from envprobe.reporter import BANNER, print_banner, print_arguments, print_environment


def test_banner_is_followed_by_blank_line():
    out = io.StringIO()
    print_banner(out)
    assert out.getvalue() == f"{BANNER}\n\n"


def test_arguments_are_indexed_in_order():
    out = io.StringIO()
    print_arguments(["--flag", "value with spaces", ""], out)

    lines = out.getvalue().splitlines()
    assert lines == [
        "Command Line Arguments:",
        "arg[0]: --flag",
        "arg[1]: value with spaces",
        "arg[2]: ",
    ]


def test_no_arguments_prints_only_heading():
    out = io.StringIO()
    print_arguments([], out)
    assert out.getvalue() == "Command Line Arguments:\n"


def test_environment_lines_match_entries_exactly():
    environ = {"PATH": "/usr/bin:/bin", "EMPTY": "", "WITH_EQUALS": "a=b=c"}
    out = io.StringIO()
    print_environment(environ, out)

    lines = out.getvalue().splitlines()
    assert lines[0] == ""
    assert lines[1] == "Environment Variables:"
    assert lines[2:] == ["PATH=/usr/bin:/bin", "EMPTY=", "WITH_EQUALS=a=b=c"]


def test_environment_is_not_sorted():
    environ = {"ZULU": "1", "ALPHA": "2"}
    out = io.StringIO()
    print_environment(environ, out)
    assert out.getvalue().splitlines()[2:] == ["ZULU=1", "ALPHA=2"]


def test_empty_environment_prints_only_heading():
    out = io.StringIO()
    print_environment({}, out)
    assert out.getvalue() == "\nEnvironment Variables:\n"


def test_defaults_to_stdout(capsys):
    print_arguments(["x"])
    assert capsys.readouterr().out == "Command Line Arguments:\narg[0]: x\n"
