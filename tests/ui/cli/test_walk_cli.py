"""Tests for CLI functionality."""

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from p9walk.ui.cli import CommandProcessor


def test_walk_prints_paths(tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _ = tree
    CommandProcessor.process_command(["-f", "root"])

    assert capsys.readouterr().out.splitlines() == [
        "root/a.txt",
        "root/bin/tool",
        "root/sub/deep/leaf.txt",
        "root/sub/file.txt",
    ]


def test_default_root_is_current_directory(
    tree: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tree)
    CommandProcessor.process_command(["-d", "-n", "1"])

    assert capsys.readouterr().out.splitlines() == [".", "bin", "sub"]


def test_dirs_and_files_together_print_nothing(tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _ = tree
    CommandProcessor.process_command(["-d", "-f", "root"])

    assert capsys.readouterr().out == ""


def test_command_template(tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _ = tree
    CommandProcessor.process_command(["-x", "-f", "root", "!echo", "exe:", "%", "\\%"])

    assert capsys.readouterr().out == "exe: root/bin/tool %\n"


def test_missing_root_exits_nonzero_after_other_roots(
    tree: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _ = tree
    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["-n", "0", "missing", "root"])

    assert excinfo.value.code == 1
    assert capsys.readouterr().out == "root\n"


def test_failing_commands_keep_exit_status_zero(tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _ = tree
    CommandProcessor.process_command(["-f", "root/bin", "!", "echo", "%;", "exit", "4"])

    assert capsys.readouterr().out == "root/bin/tool\n"


def test_malformed_range_exits_before_walking(tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _ = tree
    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["-n", "1,2,3", "root"])

    assert excinfo.value.code == 2
    assert capsys.readouterr().out == ""


def test_keyboard_interrupt_exits_130(mocker: MockerFixture) -> None:
    mock_logger = mocker.patch("p9walk.ui.cli.cli.logger")
    _ = mocker.patch("p9walk.ui.cli.cli.ArgumentParser.process_args", side_effect=KeyboardInterrupt)

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command([])

    assert excinfo.value.code == 130
    mock_logger.warning.assert_called_once_with("Walk cancelled by user")


def test_unexpected_error_exits_1(mocker: MockerFixture) -> None:
    mock_logger = mocker.patch("p9walk.ui.cli.cli.logger")
    _ = mocker.patch("p9walk.ui.cli.cli.WalkCommand", side_effect=RuntimeError("boom"))

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["."])

    assert excinfo.value.code == 1
    mock_logger.error.assert_called_once_with("An unexpected error occurred: %s", "boom")


def test_write_config(config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(["--write-config", "-e", "ns"])

    assert capsys.readouterr().out.strip() == str(config_file.resolve())
    assert 'format = "ns"' in config_file.read_text(encoding="utf-8")
