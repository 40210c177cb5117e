"""Unit tests for the GitHub Actions runner binding of the action core."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from rot13action.core import (
    GitHubActionsCore,
    escape_command_data,
    escape_command_property,
    format_output_record,
    format_workflow_command,
    input_env_key,
)
from rot13action.telemetry.logger import ActionLogger


def _core(env: dict[str, str], trim_whitespace: bool = True) -> tuple[GitHubActionsCore, io.StringIO]:
    """Build a runner core whose log lines go to an in-memory sink."""

    sink = io.StringIO()
    core = GitHubActionsCore(
        env=env,
        logger=ActionLogger(sink=sink),
        trim_whitespace=trim_whitespace,
    )
    return core, sink


def test_input_env_key_uppercases_and_replaces_spaces() -> None:
    """Input names should map to runner `INPUT_*` variable names."""

    assert input_env_key("string") == "INPUT_STRING"
    assert input_env_key("my input") == "INPUT_MY_INPUT"


def test_get_input_reads_env_and_returns_none_when_absent() -> None:
    """Present inputs are returned, absent inputs are reported as `None`."""

    core, _ = _core({"INPUT_STRING": "abc"})

    assert core.get_input("string") == "abc"
    assert core.get_input("other") is None


def test_get_input_trims_whitespace_only_when_enabled() -> None:
    """Whitespace trimming should follow the configured host behavior."""

    trimmed, _ = _core({"INPUT_STRING": "  abc \n"})
    untrimmed, _ = _core({"INPUT_STRING": "  abc \n"}, trim_whitespace=False)

    assert trimmed.get_input("string") == "abc"
    assert untrimmed.get_input("string") == "  abc \n"


def test_set_output_appends_heredoc_record_to_github_output(tmp_path: Path) -> None:
    """Outputs should be appended to the `GITHUB_OUTPUT` file as delimited records."""

    output_file = tmp_path / "github_output"
    output_file.write_text("previous=1\n", encoding="utf-8")
    core, sink = _core({"GITHUB_OUTPUT": str(output_file)})

    core.set_output("result", "Uryyb,\nJbeyq!")

    lines = output_file.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "previous=1"
    header = lines[1]
    assert header.startswith("result<<ghadelimiter_")
    delimiter = header.split("<<", 1)[1]
    assert lines[2:] == ["Uryyb,", "Jbeyq!", delimiter]
    assert sink.getvalue() == ""


def test_set_output_falls_back_to_workflow_command_without_output_file() -> None:
    """Without `GITHUB_OUTPUT`, outputs are sent as escaped `set-output` commands."""

    core, sink = _core({})

    core.set_output("result", "50%\nnext")

    assert sink.getvalue() == "::set-output name=result::50%25%0Anext\n"


def test_set_failed_emits_error_command_and_sets_exit_code() -> None:
    """Failure reports should not raise but should mark a non-zero exit code."""

    core, sink = _core({})

    assert core.failed is False
    core.set_failed("Input required and not supplied: `string`.")

    assert core.failed is True
    assert core.exit_code == 1
    assert sink.getvalue() == "::error::Input required and not supplied: `string`.\n"


def test_info_emits_plain_line() -> None:
    """Info messages are written verbatim, including braces."""

    core, sink = _core({})

    core.info("Transforming {string}")

    assert sink.getvalue() == "Transforming {string}\n"


def test_format_output_record_rejects_delimiter_collisions() -> None:
    """Records must refuse names and values that contain the delimiter."""

    assert format_output_record("result", "x", "EOF") == "result<<EOF\nx\nEOF\n"
    with pytest.raises(ValueError, match="Output value must not contain"):
        format_output_record("result", "a\nEOF\nb", "EOF")
    with pytest.raises(ValueError, match="Output name must not contain"):
        format_output_record("EOF", "x", "EOF")


def test_workflow_command_escaping() -> None:
    """Command data and property values should use runner escaping rules."""

    assert escape_command_data("a%b\rc\nd") == "a%25b%0Dc%0Ad"
    assert escape_command_property("a:b,c") == "a%3Ab%2Cc"
    assert format_workflow_command("error", "boom") == "::error::boom"
    assert (
        format_workflow_command("set-output", "v", {"name": "a:b"})
        == "::set-output name=a%3Ab::v"
    )
