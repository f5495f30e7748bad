"""Integration tests for the `tokenize` and `check` CLI commands."""

from __future__ import annotations

from typer.testing import CliRunner

from storeopts.cli import app


def test_tokenize_command_prints_raw_pairs_in_input_order() -> None:
    """Tokenize should print each raw pair, keeping nested blocks unparsed."""

    runner = CliRunner()

    result = runner.invoke(
        app, ["tokenize", "write_buffer_size=4m; block_based_table_factory={block_size=8k}"]
    )

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "write_buffer_size = 4m",
        "block_based_table_factory = block_size=8k",
    ]


def test_tokenize_command_reports_grammar_error() -> None:
    """Tokenize should fail with code 1 on malformed input."""

    runner = CliRunner()

    result = runner.invoke(app, ["tokenize", "foo"])

    assert result.exit_code == 1
    assert "tokenize failed [malformed_grammar]" in result.output
    assert "Hint:" in result.output


def test_check_command_prints_changed_column_family_fields() -> None:
    """Check should list only the fields an option string changes."""

    runner = CliRunner()

    result = runner.invoke(
        app, ["check", "num_levels=4;compression=kZlibCompression;write_buffer_size=4m"]
    )

    assert result.exit_code == 0
    assert "num_levels: 4" in result.output
    assert "compression: kZlibCompression" in result.output
    assert "write_buffer_size" not in result.output


def test_check_command_applies_base_before_options() -> None:
    """The `--base` string should become the comparison baseline."""

    runner = CliRunner()

    result = runner.invoke(
        app,
        ["check", "block_size=16k", "--domain", "table", "--base", "block_size=8k;checksum=kxxHash"],
    )

    assert result.exit_code == 0
    assert result.output.splitlines() == ["block_size: 16384"]


def test_check_command_reports_unrecognized_key_for_domain() -> None:
    """Check should report keys the selected domain does not accept."""

    runner = CliRunner()

    result = runner.invoke(app, ["check", "compression=kNoCompression", "--domain", "mutable"])

    assert result.exit_code == 1
    assert "check failed [unrecognized_key]: unsupported dynamic option: compression" in result.output


def test_check_command_reports_value_errors_in_db_domain() -> None:
    """Check should surface value-parse failures with the key name."""

    runner = CliRunner()

    result = runner.invoke(app, ["check", "create_if_missing=maybe", "--domain", "db"])

    assert result.exit_code == 1
    assert "check failed [value_parse]: error parsing create_if_missing" in result.output


def test_debug_log_level_emits_library_events() -> None:
    """A DEBUG log level should surface per-key library events."""

    runner = CliRunner()

    result = runner.invoke(app, ["--log-level", "DEBUG", "check", "block_size=1k", "--domain", "table"])

    assert result.exit_code == 0
    assert "[options] level=DEBUG domain=table event=applied key=block_size" in result.output


def test_unknown_log_level_is_a_usage_error() -> None:
    """An unknown log level should be rejected by option parsing, not by the logger."""

    runner = CliRunner()

    result = runner.invoke(app, ["--log-level", "LOUD", "tokenize", "a=1"])

    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)
    assert "LOUD" in result.output


def test_log_level_is_case_insensitive() -> None:
    """Lower-case level names should select the same loguru level."""

    runner = CliRunner()

    result = runner.invoke(app, ["--log-level", "debug", "check", "block_size=1k", "--domain", "table"])

    assert result.exit_code == 0
    assert "[options] level=DEBUG domain=table event=applied key=block_size" in result.output
