"""Tests for the command line wrapper and configuration."""

import io

import pytest

from config.config import validate_config
from main import build_parser, main


def _run(argv, stdin_text=""):
    args = build_parser().parse_args(argv)
    out = io.StringIO()
    code = main(args, stdin=io.StringIO(stdin_text), stdout=out)
    return code, out.getvalue().splitlines()


def test_positional_expressions():
    code, lines = _run(["(12.5 + 3) * 2", "2 + 3 * 4"])
    assert code == 0
    assert lines == ["(12.5 + 3) * 2 = 31.0", "2 + 3 * 4 = 14.0"]


def test_reads_stdin_when_no_arguments():
    code, lines = _run([], "1 + 1\n\n8 / 2\n")
    assert code == 0
    assert lines == ["1 + 1 = 2.0", "8 / 2 = 4.0"]


def test_error_sets_exit_status():
    code, lines = _run(["10 / 0", "1 + 2"])
    assert code == 1
    assert lines[0] == "10 / 0 -> error: Division by zero"
    assert lines[1] == "1 + 2 = 3.0"


def test_show_rpn():
    code, lines = _run(["--show_rpn", "1 + 2 * 3"])
    assert code == 0
    assert lines[0].endswith("[RPN: 1 2 3 * +]")


def test_validate_config():
    assert validate_config()


def test_negative_cache_size_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--cache_size", "-5", "1 + 1"])
