"""Tests for gitkit.output.errors module."""

from __future__ import annotations

from gitkit.core.errors import ErrorCode
from gitkit.git.errors import (
    CommandFailed,
    InvalidCommitHash,
    MissingWorkingDirectory,
    NotFound,
    ParseFailed,
)
from gitkit.output.console import MockConsole, Style
from gitkit.output.errors import git_error_exit_code, print_git_error


class TestMessages:
    def test_command_failed_uses_last_stderr_line(self) -> None:
        error = CommandFailed(
            "list remote branches on origin",
            stderr="fatal: 'origin' does not appear to be a git repository\n"
            "fatal: Could not read from remote repository.\n",
        )
        assert error.message == (
            "could not list remote branches on origin: "
            "fatal: Could not read from remote repository."
        )

    def test_command_failed_without_stderr(self) -> None:
        assert CommandFailed("list remotes", returncode=3).message == (
            "could not list remotes (exit 3)"
        )

    def test_other_variants(self) -> None:
        assert NotFound("remote", "upstream").message == "could not find remote upstream"
        assert InvalidCommitHash("zz").message == "invalid hash upon commit creation: 'zz'"
        assert MissingWorkingDirectory().message == "repository path not set"
        assert ParseFailed("parse branch list", "x").message == "could not parse branch list: x"


class TestPrintGitError:
    def test_command_is_shown(self) -> None:
        console = MockConsole()
        error = CommandFailed("list remotes", command=("git", "remote", "show"), stderr="boom")

        print_git_error(error, console)

        assert console.messages == [
            "error: could not list remotes: boom",
            "command: git remote show",
        ]
        assert console.outputs[1].style == Style.DIM

    def test_detached_head_hint(self) -> None:
        console = MockConsole()

        print_git_error(NotFound("current branch", "HEAD"), console)

        assert console.has_error()
        assert console.find("detached")

    def test_missing_path_hint(self) -> None:
        console = MockConsole()

        print_git_error(MissingWorkingDirectory(), console)

        assert console.find("--repo")

    def test_plain_not_found(self) -> None:
        console = MockConsole()

        print_git_error(NotFound("local branch", "gone"), console)

        assert console.messages == ["error: could not find local branch gone"]


class TestExitCodes:
    def test_mapping(self) -> None:
        assert git_error_exit_code(InvalidCommitHash("x")) == ErrorCode.USER_ERROR
        assert git_error_exit_code(CommandFailed("x")) == ErrorCode.GIT_ERROR
        assert git_error_exit_code(ParseFailed("x", "y")) == ErrorCode.GIT_ERROR
        assert git_error_exit_code(NotFound("remote", "x")) == ErrorCode.NOT_FOUND
        assert git_error_exit_code(MissingWorkingDirectory()) == ErrorCode.CONFIG_ERROR
