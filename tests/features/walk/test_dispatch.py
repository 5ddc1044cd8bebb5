"""Tests for the format printer and the shell command dispatcher."""

from __future__ import annotations

import io
import subprocess
from collections.abc import Callable

from pytest_mock import MockerFixture

from p9walk.features.walk import (
    AccountLookup,
    CommandDispatcher,
    CommandTemplate,
    Entry,
    FormatPrinter,
    FormatProgram,
)


def test_format_printer_writes_one_line_per_entry(
    entry_factory: Callable[..., Entry], accounts: AccountLookup
) -> None:
    stdout = io.StringIO()
    printer = FormatPrinter(FormatProgram.compile("ns"), accounts, stdout)

    printer(entry_factory("a/one.txt", size=1))
    printer(entry_factory("a/two.txt", size=22))

    assert stdout.getvalue() == "one.txt 1\ntwo.txt 22\n"


def test_dispatcher_runs_expanded_command_through_shell(
    entry_factory: Callable[..., Entry], mocker: MockerFixture
) -> None:
    run = mocker.patch(
        "p9walk.features.walk.usecases.dispatch.subprocess.run",
        return_value=subprocess.CompletedProcess(args=[], returncode=0, stdout=b"ok\n"),
    )
    stdout = io.BytesIO()
    dispatcher = CommandDispatcher(CommandTemplate.compile("echo %"), "/bin/sh", stdout)

    dispatcher(entry_factory("a/b"))

    run.assert_called_once_with(["/bin/sh", "-c", "echo a/b"], stdout=subprocess.PIPE, check=False)
    assert stdout.getvalue() == b"ok\n"
    assert dispatcher.failures == 0


def test_dispatcher_with_real_shell(entry_factory: Callable[..., Entry]) -> None:
    stdout = io.BytesIO()
    dispatcher = CommandDispatcher(CommandTemplate.compile("echo % \\%"), "/bin/sh", stdout)

    dispatcher(entry_factory("a/b"))

    assert stdout.getvalue() == b"a/b %\n"


def test_nonzero_exit_is_reported_and_counted(
    entry_factory: Callable[..., Entry], mocker: MockerFixture
) -> None:
    mock_logger = mocker.patch("p9walk.features.walk.usecases.dispatch.logger")
    stdout = io.BytesIO()
    dispatcher = CommandDispatcher(CommandTemplate.compile("echo partial; exit 3"), "/bin/sh", stdout)

    dispatcher(entry_factory("x"))
    dispatcher(entry_factory("y"))

    assert stdout.getvalue() == b"partial\npartial\n"
    assert dispatcher.failures == 2
    extra = mock_logger.error.call_args.kwargs["extra"]
    assert extra["walk_event"] == "walk.command.failed"
    assert extra["returncode"] == 3
    assert extra["path"] == "y"


def test_launch_failure_is_reported(
    entry_factory: Callable[..., Entry], mocker: MockerFixture
) -> None:
    mock_logger = mocker.patch("p9walk.features.walk.usecases.dispatch.logger")
    stdout = io.BytesIO()
    dispatcher = CommandDispatcher(CommandTemplate.compile("true"), "/nonexistent/shell", stdout)

    dispatcher(entry_factory("x"))

    assert dispatcher.failures == 1
    assert stdout.getvalue() == b""
    mock_logger.error.assert_called_once()
